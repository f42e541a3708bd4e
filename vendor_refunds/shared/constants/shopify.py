"""
Shopify Admin API constants
"""

DEFAULT_SHOPIFY_API_VERSION = "2025-01"
DEFAULT_LINE_ITEMS_LIMIT = 50
DEFAULT_ORDERS_PAGE_SIZE = 10
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0

GID_PREFIX = "gid://shopify/"
ORDER_GID_TYPE = "Order"
LINE_ITEM_GID_TYPE = "LineItem"

# Balancing transaction for a refund settled outside the payment gateway
REFUND_TRANSACTION_KIND = "REFUND"
REFUND_TRANSACTION_GATEWAY = "manual"
REFUND_RESTOCK_TYPE = "NO_RESTOCK"

__all__ = [
    "DEFAULT_SHOPIFY_API_VERSION",
    "DEFAULT_LINE_ITEMS_LIMIT",
    "DEFAULT_ORDERS_PAGE_SIZE",
    "DEFAULT_REQUEST_TIMEOUT_SECONDS",
    "GID_PREFIX",
    "ORDER_GID_TYPE",
    "LINE_ITEM_GID_TYPE",
    "REFUND_TRANSACTION_KIND",
    "REFUND_TRANSACTION_GATEWAY",
    "REFUND_RESTOCK_TYPE",
]
