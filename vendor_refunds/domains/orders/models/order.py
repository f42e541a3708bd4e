"""
Order models for the vendor refunds engine

These mirror what the order-management system returns. They are read-only
snapshots: the engine never mutates an order it has been handed.
"""

from decimal import Decimal
from typing import List, Optional, Dict
from datetime import datetime
from pydantic import BaseModel, Field, field_validator, model_validator


class LineItem(BaseModel):
    """One purchased product line within an order"""

    id: str = Field(..., description="Line item ID, unique within the order")
    title: str = Field("", description="Product title")
    sku: Optional[str] = Field(None, description="SKU")
    variant_title: Optional[str] = Field(None, description="Variant title")
    image_url: Optional[str] = Field(None, description="Variant image URL")

    purchased_quantity: int = Field(..., ge=0, description="Quantity purchased")
    refundable_quantity: int = Field(
        ..., ge=0, description="Quantity not yet refunded"
    )

    unit_price: Decimal = Field(..., ge=0, description="Unit price")
    original_total: Optional[Decimal] = Field(
        None, ge=0, description="Authoritative line total from the order system"
    )

    vendor: Optional[str] = Field(None, description="Product vendor")

    class Config:
        frozen = True

    @field_validator("id")
    @classmethod
    def validate_id(cls, v):
        if not v or not v.strip():
            raise ValueError("line item id must not be empty")
        return v.strip()

    @model_validator(mode="after")
    def validate_refundable_quantity(self):
        if self.refundable_quantity > self.purchased_quantity:
            raise ValueError(
                f"refundable quantity {self.refundable_quantity} exceeds "
                f"purchased quantity {self.purchased_quantity} on line item {self.id}"
            )
        return self

    @property
    def line_total(self) -> Decimal:
        """Line total for display aggregates.

        Prefers the order system's own total so sums match what it reports.
        """
        if self.original_total is not None:
            return self.original_total
        return self.unit_price * self.purchased_quantity

    def belongs_to(self, vendor: Optional[str]) -> bool:
        """Exact vendor match; an unknown vendor never matches"""
        return self.vendor is not None and vendor is not None and self.vendor == vendor


class Order(BaseModel):
    """Order as fetched from the order-management system"""

    id: str = Field(..., description="Order ID")
    name: Optional[str] = Field(None, description="Order name/number")
    financial_status: Optional[str] = Field(None, description="Financial status")
    fulfillment_status: Optional[str] = Field(None, description="Fulfillment status")
    currency: str = Field("USD", description="Order currency code")
    created_at: Optional[datetime] = Field(None, description="Order creation date")

    line_items: List[LineItem] = Field(
        default_factory=list, description="Order line items, in source order"
    )

    class Config:
        frozen = True

    @model_validator(mode="after")
    def validate_unique_line_items(self):
        seen = set()
        for item in self.line_items:
            if item.id in seen:
                raise ValueError(f"duplicate line item id {item.id} in order {self.id}")
            seen.add(item.id)
        return self

    @property
    def item_count(self) -> int:
        return len(self.line_items)

    @property
    def subtotal(self) -> Decimal:
        return sum((item.line_total for item in self.line_items), Decimal("0"))

    def line_items_by_id(self) -> Dict[str, LineItem]:
        return {item.id: item for item in self.line_items}

    def get_line_item(self, line_item_id: str) -> Optional[LineItem]:
        for item in self.line_items:
            if item.id == line_item_id:
                return item
        return None
