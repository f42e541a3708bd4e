"""
Shopify global id helpers
"""

from typing import Optional

from vendor_refunds.shared.constants.shopify import GID_PREFIX, ORDER_GID_TYPE


def extract_numeric_gid(gid: Optional[str]) -> Optional[str]:
    """'gid://shopify/Order/123' -> '123'; plain ids pass through"""
    if not gid or not isinstance(gid, str):
        return None
    if gid.startswith(GID_PREFIX):
        return gid.rsplit("/", 1)[-1] or None
    return gid


def to_gid(resource_type: str, resource_id: str) -> str:
    """Build a global id, leaving ids that already are one untouched"""
    resource_id = str(resource_id).strip()
    if resource_id.startswith(GID_PREFIX):
        return resource_id
    return f"{GID_PREFIX}{resource_type}/{resource_id}"


def order_gid(order_id: str) -> str:
    """Global id for an order given its numeric id or gid"""
    return to_gid(ORDER_GID_TYPE, order_id)
