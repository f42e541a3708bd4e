"""
Money utility functions for the vendor refunds engine
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

from vendor_refunds.shared.constants.currency import (
    CURRENCY_EXPONENTS,
    DEFAULT_CURRENCY_EXPONENT,
)


def currency_exponent(currency: Optional[str], default: Optional[int] = None) -> int:
    """Number of minor-unit digits for an ISO 4217 currency code"""
    fallback = DEFAULT_CURRENCY_EXPONENT if default is None else default
    if not currency:
        return fallback
    return CURRENCY_EXPONENTS.get(currency.strip().upper(), fallback)


def to_decimal(value: Any) -> Decimal:
    """
    Convert an amount coming from upstream data to Decimal.

    Floats go through their string form so 0.1 stays 0.1. Booleans,
    non-numeric strings, NaN and infinities raise ValueError.
    """
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Not a monetary amount: {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(value.strip() if isinstance(value, str) else value)
        except InvalidOperation as e:
            raise ValueError(f"Not a monetary amount: {value!r}") from e
    elif isinstance(value, float):
        result = Decimal(repr(value))
    else:
        raise ValueError(f"Not a monetary amount: {value!r}")

    if not result.is_finite():
        raise ValueError(f"Not a finite amount: {value!r}")
    return result


def quantize_money(
    amount: Decimal, currency: Optional[str], default_exponent: Optional[int] = None
) -> Decimal:
    """Round an amount once to the currency's minor-unit precision"""
    exponent = currency_exponent(currency, default_exponent)
    return amount.quantize(Decimal(1).scaleb(-exponent), rounding=ROUND_HALF_UP)


def format_money(
    amount: Decimal, currency: Optional[str], default_exponent: Optional[int] = None
) -> str:
    """Render an amount the way order rows display it, e.g. '45.00 USD'"""
    rounded = quantize_money(amount, currency, default_exponent)
    if not currency:
        return f"{rounded}"
    return f"{rounded} {currency.upper()}"
