"""
Order domain models
"""

from .order import LineItem, Order
from .scope import Principal, ScopeSource, EffectiveScope
from .scoped_order import ScopedOrder, OrderSummary
from .refund import (
    RefundDraft,
    ValidatedRefundEntry,
    ValidatedRefundRequest,
    RefundCommitLine,
    RefundTransaction,
    RefundCommit,
    RefundStatus,
    RefundOutcome,
)
from .lifecycle import RefundLifecycle, IllegalTransitionError, TERMINAL_STATES

__all__ = [
    "LineItem",
    "Order",
    "Principal",
    "ScopeSource",
    "EffectiveScope",
    "ScopedOrder",
    "OrderSummary",
    "RefundDraft",
    "ValidatedRefundEntry",
    "ValidatedRefundRequest",
    "RefundCommitLine",
    "RefundTransaction",
    "RefundCommit",
    "RefundStatus",
    "RefundOutcome",
    "RefundLifecycle",
    "IllegalTransitionError",
    "TERMINAL_STATES",
]
