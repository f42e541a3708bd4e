"""
Orders domain: vendor scoping and refund validation
"""

from .models import EffectiveScope, Order, LineItem, Principal, ScopedOrder
from .services import (
    VendorDirectory,
    AccessScopeResolver,
    OrderScopeFilter,
    RefundValidator,
    RefundReconciler,
    OrderAccessService,
)

__all__ = [
    "EffectiveScope",
    "Order",
    "LineItem",
    "Principal",
    "ScopedOrder",
    "VendorDirectory",
    "AccessScopeResolver",
    "OrderScopeFilter",
    "RefundValidator",
    "RefundReconciler",
    "OrderAccessService",
]
