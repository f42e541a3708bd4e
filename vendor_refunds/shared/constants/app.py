"""
Application-wide constants
"""

PROJECT_NAME = "Vendor Refunds"
VERSION = "1.0.0"
DEFAULT_PORT = 8000

ENVIRONMENT_DEVELOPMENT = "development"
ENVIRONMENT_PRODUCTION = "production"

# Header carrying the authenticated staff email from the identity layer
PRINCIPAL_EMAIL_HEADER = "X-Staff-Email"

# Sanity bounds for authoritative order data
DEFAULT_MAX_REFUND_QUANTITY = 100000
DEFAULT_MAX_UNIT_PRICE = "1000000000"

__all__ = [
    "PROJECT_NAME",
    "VERSION",
    "DEFAULT_PORT",
    "ENVIRONMENT_DEVELOPMENT",
    "ENVIRONMENT_PRODUCTION",
    "PRINCIPAL_EMAIL_HEADER",
    "DEFAULT_MAX_REFUND_QUANTITY",
    "DEFAULT_MAX_UNIT_PRICE",
]
