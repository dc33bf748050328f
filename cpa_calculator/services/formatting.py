"""
Display and wire formatting helpers.

- format_amount: currency-prefixed amounts with two decimals ("₹2,500.00")
- format_number: slider readouts with grouping and up to three decimals
- to_decimal_text: plain decimal text for the NUMERIC columns of the API
"""

import math
from decimal import Decimal
from typing import Optional, Union

from cpa_calculator.models.enums import resolve_currency

Number = Union[int, float]


def _non_finite(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "∞" if value > 0 else "-∞"


def format_amount(value: Number, currency_symbol: Optional[str] = None) -> str:
    """
    Format a monetary value for display.

    The currency only changes the prefix, never the magnitude. Unknown
    symbols fall back to the default currency.

    Example:
        >>> format_amount(2500, "$")
        '$2,500.00'
        >>> format_amount(-10, "$")
        '$-10.00'
    """
    prefix = resolve_currency(currency_symbol).value
    if isinstance(value, float) and not math.isfinite(value):
        return f"{prefix}{_non_finite(value)}"
    return f"{prefix}{value:,.2f}"


def format_number(value: Number) -> str:
    """Group thousands and keep at most three fraction digits ("5,000", "12.5")."""
    if isinstance(value, float) and not math.isfinite(value):
        return _non_finite(value)
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def to_decimal_text(value: Number) -> str:
    """
    Render a number as decimal text without exponent or trailing ".0".

    Non-finite floats come out as "nan"/"inf" and are rejected by the API's
    decimal validation.

    Example:
        >>> to_decimal_text(5000.0)
        '5000'
        >>> to_decimal_text(12.5)
        '12.5'
    """
    if isinstance(value, float):
        if not math.isfinite(value):
            return str(value)
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    return str(value)
