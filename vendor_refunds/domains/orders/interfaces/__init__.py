"""
Order domain interfaces
"""

from .vendor_assignment_store import IVendorAssignmentStore
from .order_source import IOrderSource
from .refund_sink import IRefundCommitSink

__all__ = ["IVendorAssignmentStore", "IOrderSource", "IRefundCommitSink"]
