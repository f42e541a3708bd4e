"""
ISO 4217 minor-unit exponents

Only currencies whose exponent differs from 2 are listed.
"""

DEFAULT_CURRENCY_EXPONENT = 2

CURRENCY_EXPONENTS = {
    # no minor unit
    "BIF": 0,
    "CLP": 0,
    "DJF": 0,
    "GNF": 0,
    "ISK": 0,
    "JPY": 0,
    "KMF": 0,
    "KRW": 0,
    "PYG": 0,
    "RWF": 0,
    "UGX": 0,
    "VND": 0,
    "VUV": 0,
    "XAF": 0,
    "XOF": 0,
    "XPF": 0,
    # thousandths
    "BHD": 3,
    "IQD": 3,
    "JOD": 3,
    "KWD": 3,
    "LYD": 3,
    "OMR": 3,
    "TND": 3,
}

__all__ = ["DEFAULT_CURRENCY_EXPONENT", "CURRENCY_EXPONENTS"]
