"""
Order domain services
"""

from .vendor_directory import VendorDirectory, StaticVendorAssignmentStore, normalize_email
from .access_scope import AccessScopeResolver
from .order_scope_filter import OrderScopeFilter
from .refund_validator import RefundValidator, parse_quantity
from .refund_reconciler import RefundReconciler
from .order_access_service import OrderAccessService

__all__ = [
    "VendorDirectory",
    "StaticVendorAssignmentStore",
    "normalize_email",
    "AccessScopeResolver",
    "OrderScopeFilter",
    "RefundValidator",
    "parse_quantity",
    "RefundReconciler",
    "OrderAccessService",
]
