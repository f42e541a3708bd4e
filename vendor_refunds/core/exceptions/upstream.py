"""
Order system transport exceptions
"""

from typing import Any, Dict, List, Optional

from .base import VendorRefundsException


class ShopifyAPIError(VendorRefundsException):
    """Raised when the Shopify Admin API cannot be reached or answers with an error"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
        **kwargs
    ):
        super().__init__(
            message=message,
            error_code="SHOPIFY_API_ERROR",
            details={"status_code": status_code, "errors": errors or []},
            **kwargs
        )
        self.status_code = status_code
        self.errors = errors or []
