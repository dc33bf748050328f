"""
Enumeration definitions for the Target CPA Calculator.

All enums inherit from both `str` and `Enum` so they serialize directly in
Pydantic models and JSON snapshots.
"""

from enum import Enum
from typing import Optional


class Currency(str, Enum):
    """
    Display currencies offered by the currency selector.

    The value is the symbol shown as the amount prefix; the member name is the
    ISO-style code shown next to it. Declaration order is the selector order,
    and the first member is the fallback for unknown symbols.

    Selecting a currency never converts or rescales stored amounts.
    """
    INR = "₹"
    USD = "$"
    EUR = "€"
    GBP = "£"
    AED = "AED"

    @property
    def code(self) -> str:
        return self.name


DEFAULT_CURRENCY: Currency = Currency.INR


def resolve_currency(symbol: Optional[str]) -> Currency:
    """Map a symbol to its Currency, falling back to the first entry."""
    for currency in Currency:
        if currency.value == symbol:
            return currency
    return DEFAULT_CURRENCY


class CalculatorField(str, Enum):
    """Numeric calculator inputs, named as they appear on the wire."""
    LIFETIME_PROFIT = "lifetimeProfit"
    ACQUISITION_BUDGET_PCT = "acquisitionBudgetPct"
    CONVERSION_RATE_PCT = "conversionRatePct"


class NotificationVariant(str, Enum):
    """Visual treatment of a user notification."""
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"
