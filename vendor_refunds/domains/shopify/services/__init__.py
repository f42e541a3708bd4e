"""
Shopify domain services
"""

from .order_gateway import ShopifyOrderGateway

__all__ = ["ShopifyOrderGateway"]
