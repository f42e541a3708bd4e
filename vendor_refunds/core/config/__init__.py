"""
Configuration module for the vendor refunds engine
"""

from .settings import settings, Settings
from .settings import VendorSettings, ShopifySettings, LoggingSettings

__all__ = [
    "settings",
    "Settings",
    "VendorSettings",
    "ShopifySettings",
    "LoggingSettings",
]
