"""
Application constants for the vendor refunds engine
"""

from . import app, currency, shopify
from .app import *
from .currency import *
from .shopify import *

__all__ = app.__all__ + currency.__all__ + shopify.__all__
