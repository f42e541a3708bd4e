"""
Custom exceptions for the vendor refunds engine
"""

from .base import VendorRefundsException
from .config import ConfigurationError
from .access import NotFoundError, AuthorizationError
from .refund import (
    InvalidQuantityError,
    EmptyRefundError,
    UpstreamRejectedError,
    MalformedDataError,
)
from .upstream import ShopifyAPIError

__all__ = [
    "VendorRefundsException",
    "ConfigurationError",
    "NotFoundError",
    "AuthorizationError",
    "InvalidQuantityError",
    "EmptyRefundError",
    "UpstreamRejectedError",
    "MalformedDataError",
    "ShopifyAPIError",
]
