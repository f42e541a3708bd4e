"""
RefundCommit -> refundCreate mutation variables
"""

from typing import Any, Dict

from vendor_refunds.domains.orders.models import RefundCommit
from vendor_refunds.shared.constants.shopify import (
    LINE_ITEM_GID_TYPE,
    REFUND_RESTOCK_TYPE,
)
from vendor_refunds.shared.helpers import order_gid, to_gid


def build_refund_create_variables(commit: RefundCommit) -> Dict[str, Any]:
    """Variables for the refundCreate mutation.

    Amounts are sent as decimal strings so no float rounding sneaks in.
    """
    order_id = order_gid(commit.order_id)
    refund_input: Dict[str, Any] = {
        "orderId": order_id,
        "notify": False,
        "refundLineItems": [
            {
                "lineItemId": to_gid(LINE_ITEM_GID_TYPE, line.line_item_id),
                "quantity": line.quantity,
                "restockType": REFUND_RESTOCK_TYPE,
            }
            for line in commit.line_items
        ],
        "transactions": [
            {
                "orderId": order_id,
                "amount": str(commit.transaction.amount),
                "gateway": commit.transaction.gateway,
                "kind": commit.transaction.kind,
            }
        ],
    }
    if commit.note:
        refund_input["note"] = commit.note
    return {"input": refund_input}
