"""
Helpers module for the vendor refunds engine
"""

from .money_utils import (
    currency_exponent,
    to_decimal,
    quantize_money,
    format_money,
)
from .gid_utils import extract_numeric_gid, to_gid, order_gid


__all__ = [
    "currency_exponent",
    "to_decimal",
    "quantize_money",
    "format_money",
    "extract_numeric_gid",
    "to_gid",
    "order_gid",
]
