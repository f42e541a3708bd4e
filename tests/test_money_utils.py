"""
Tests for money helpers
"""

from decimal import Decimal

import pytest

from vendor_refunds.shared.helpers import (
    currency_exponent,
    extract_numeric_gid,
    format_money,
    order_gid,
    quantize_money,
    to_decimal,
    to_gid,
)


class TestCurrencyExponent:
    @pytest.mark.parametrize(
        "currency,expected",
        [("USD", 2), ("usd", 2), ("JPY", 0), ("KWD", 3), ("XYZ", 2), (None, 2)],
    )
    def test_exponents(self, currency, expected):
        assert currency_exponent(currency) == expected

    def test_custom_default(self):
        assert currency_exponent("XYZ", default=4) == 4


class TestToDecimal:
    def test_float_goes_through_repr(self):
        assert to_decimal(0.1) == Decimal("0.1")

    def test_string(self):
        assert to_decimal(" 12.50 ") == Decimal("12.50")

    @pytest.mark.parametrize("value", [None, True, "abc", "NaN", "Infinity", float("inf"), []])
    def test_rejects(self, value):
        with pytest.raises(ValueError):
            to_decimal(value)


class TestQuantizeMoney:
    def test_half_up(self):
        assert quantize_money(Decimal("2.675"), "USD") == Decimal("2.68")
        assert quantize_money(Decimal("0.5"), "JPY") == Decimal("1")

    def test_format(self):
        assert format_money(Decimal("45"), "usd") == "45.00 USD"
        assert format_money(Decimal("1234.5"), "JPY") == "1235 JPY"


class TestGidHelpers:
    def test_extract(self):
        assert extract_numeric_gid("gid://shopify/Order/123") == "123"
        assert extract_numeric_gid("123") == "123"
        assert extract_numeric_gid(None) is None

    def test_to_gid(self):
        assert to_gid("LineItem", "7") == "gid://shopify/LineItem/7"
        assert to_gid("LineItem", "gid://shopify/LineItem/7") == "gid://shopify/LineItem/7"
        assert order_gid("1001") == "gid://shopify/Order/1001"
