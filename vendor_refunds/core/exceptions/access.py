"""
Access-related exceptions

NotFoundError and AuthorizationError must stay distinct all the way to the
caller: "doesn't exist" and "you can't see it" are different answers.
"""

from typing import Any, Dict, List, Optional

from .base import VendorRefundsException


class NotFoundError(VendorRefundsException):
    """Raised when an order or line item does not exist"""

    def __init__(
        self,
        message: str,
        resource: str = "order",
        resource_id: Optional[str] = None,
        reasons: Optional[List[str]] = None,
        **kwargs
    ):
        super().__init__(
            message=message,
            error_code="NOT_FOUND",
            details={"resource": resource, "resource_id": resource_id},
            reasons=reasons,
            **kwargs
        )
        self.resource = resource
        self.resource_id = resource_id


class AuthorizationError(VendorRefundsException):
    """Raised when a request reaches outside the caller's vendor scope"""

    def __init__(
        self,
        message: str,
        vendor: Optional[str] = None,
        offending_vendors: Optional[List[Optional[str]]] = None,
        details: Optional[Dict[str, Any]] = None,
        reasons: Optional[List[str]] = None,
        **kwargs
    ):
        auth_details: Dict[str, Any] = {
            "vendor": vendor,
            "offending_vendors": offending_vendors or [],
        }
        if details:
            auth_details.update(details)
        super().__init__(
            message=message,
            error_code="FORBIDDEN",
            details=auth_details,
            reasons=reasons,
            **kwargs
        )
        self.vendor = vendor
        self.offending_vendors = offending_vendors or []
