"""
Vendor-scoped order access and refund reconciliation engine
"""

__version__ = "1.0.0"
