"""
Refund-related exceptions
"""

from typing import Any, Dict, List, Optional

from .base import VendorRefundsException


class InvalidQuantityError(VendorRefundsException):
    """Raised when a requested refund quantity exceeds what is refundable"""

    def __init__(
        self,
        message: str,
        violations: Optional[List[Dict[str, Any]]] = None,
        reasons: Optional[List[str]] = None,
        **kwargs
    ):
        super().__init__(
            message=message,
            error_code="INVALID_QUANTITY",
            details={"violations": violations or []},
            reasons=reasons,
            **kwargs
        )
        self.violations = violations or []


class EmptyRefundError(VendorRefundsException):
    """Raised when a refund draft has nothing left to refund"""

    def __init__(self, message: str = "No line items selected for refund", **kwargs):
        super().__init__(message=message, error_code="EMPTY_REFUND", **kwargs)


class UpstreamRejectedError(VendorRefundsException):
    """Raised when the order system refuses a refund mutation.

    The upstream messages are carried verbatim in ``reasons``.
    """

    def __init__(
        self,
        message: str,
        reasons: Optional[List[str]] = None,
        order_id: Optional[str] = None,
        **kwargs
    ):
        super().__init__(
            message=message,
            error_code="UPSTREAM_REJECTED",
            details={"order_id": order_id},
            reasons=reasons,
            **kwargs
        )
        self.order_id = order_id


class MalformedDataError(VendorRefundsException):
    """Raised when authoritative order data fails a sanity invariant"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        **kwargs
    ):
        super().__init__(
            message=message,
            error_code="MALFORMED_DATA",
            details={"field": field, "value": None if value is None else str(value)},
            **kwargs
        )
        self.field = field
