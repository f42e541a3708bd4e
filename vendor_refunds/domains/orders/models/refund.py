"""
Refund models for the vendor refunds engine
"""

from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional
from pydantic import BaseModel, Field, field_validator

from vendor_refunds.shared.constants.shopify import (
    REFUND_TRANSACTION_GATEWAY,
    REFUND_TRANSACTION_KIND,
)

from .scope import EffectiveScope

if TYPE_CHECKING:
    from .lifecycle import RefundLifecycle

# Client-proposed {line_item_id: quantity}. Quantities are untrusted and may be
# strings, blanks or garbage straight from a form field.
RefundDraft = Mapping[str, Any]


class ValidatedRefundEntry(BaseModel):
    """A draft entry checked against the authoritative line item"""

    line_item_id: str = Field(..., description="Line item ID")
    quantity: int = Field(..., gt=0, description="Quantity to refund")
    unit_price: Decimal = Field(..., description="Authoritative unit price")
    title: str = Field("", description="Product title")
    vendor: Optional[str] = Field(None, description="Product vendor")

    class Config:
        frozen = True


class ValidatedRefundRequest(BaseModel):
    """Refund entries proven to be in scope and within refundable quantities.

    Built by RefundValidator; never empty.
    """

    order_id: str = Field(..., description="Order ID")
    currency: str = Field(..., description="Order currency code")
    scope: EffectiveScope = Field(..., description="Scope the draft was checked in")
    entries: List[ValidatedRefundEntry] = Field(..., description="Validated entries")

    class Config:
        frozen = True

    @field_validator("entries")
    @classmethod
    def validate_entries(cls, v):
        if not v:
            raise ValueError("a validated refund request needs at least one entry")
        return v

    @property
    def total_quantity(self) -> int:
        return sum(entry.quantity for entry in self.entries)


class RefundCommitLine(BaseModel):
    """Per-line refund instruction"""

    line_item_id: str = Field(..., description="Line item ID")
    quantity: int = Field(..., gt=0, description="Quantity to refund")

    class Config:
        frozen = True


class RefundTransaction(BaseModel):
    """Balancing money movement for a refund settled offline"""

    amount: Decimal = Field(..., description="Amount to refund")
    currency: str = Field(..., description="Currency code")
    kind: str = Field(REFUND_TRANSACTION_KIND, description="Transaction kind")
    gateway: str = Field(REFUND_TRANSACTION_GATEWAY, description="Settlement gateway")

    class Config:
        frozen = True


class RefundCommit(BaseModel):
    """Everything the order system needs to record a partial refund"""

    order_id: str = Field(..., description="Order ID")
    currency: str = Field(..., description="Order currency code")
    line_items: List[RefundCommitLine] = Field(..., description="Refund lines")
    total_amount: Decimal = Field(..., description="Rounded refund total")
    transaction: RefundTransaction = Field(..., description="Balancing transaction")
    note: Optional[str] = Field(None, description="Free-text refund note")

    class Config:
        frozen = True


class RefundStatus(str, Enum):
    """Refund attempt lifecycle states"""

    DRAFT = "draft"
    VALIDATING = "validating"
    VALIDATED = "validated"
    RECONCILED = "reconciled"
    SUBMITTED = "submitted"
    SUCCEEDED = "succeeded"
    REJECTED = "rejected"
    INVALID = "invalid"


class RefundOutcome(BaseModel):
    """Final result of one refund attempt"""

    status: RefundStatus = Field(..., description="Terminal status of the attempt")
    order_id: str = Field(..., description="Order ID")
    reference: Optional[str] = Field(None, description="Upstream refund reference")
    reasons: List[str] = Field(default_factory=list, description="Failure reasons")
    error_code: Optional[str] = Field(None, description="Failure error code")
    commit: Optional[RefundCommit] = Field(None, description="Submitted commit")
    history: List[RefundStatus] = Field(
        default_factory=list, description="States the attempt passed through"
    )

    @classmethod
    def from_lifecycle(cls, lifecycle: "RefundLifecycle", **fields: Any) -> "RefundOutcome":
        """Outcome of a finished attempt; status and history come from the lifecycle"""
        if not lifecycle.is_terminal:
            raise ValueError(
                f"Refund for order {lifecycle.order_id} has not finished: "
                f"{lifecycle.status.value}"
            )
        if lifecycle.status == RefundStatus.REJECTED:
            fields.setdefault("error_code", "UPSTREAM_REJECTED")
        return cls(
            status=lifecycle.status,
            history=list(lifecycle.history),
            **fields,
        )

    @property
    def ok(self) -> bool:
        return self.status == RefundStatus.SUCCEEDED

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
