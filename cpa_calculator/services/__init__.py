"""
Calculator Services Module

Business logic for the Target CPA Calculator. Each service is stateless and
testable in isolation.

Services:
- derivation: target CPA / max cost per lead / profit retained arithmetic
- formatting: currency display and decimal text rendering
- storage: create/list persistence for calculation records
"""

from cpa_calculator.services.derivation import (
    DerivedMetrics,
    derive_metrics,
)

from cpa_calculator.services.formatting import (
    format_amount,
    format_number,
    to_decimal_text,
)

from cpa_calculator.services.storage import (
    CalculationStorage,
    DatabaseStorage,
    StorageError,
)

__all__ = [
    'DerivedMetrics',
    'derive_metrics',
    'format_amount',
    'format_number',
    'to_decimal_text',
    'CalculationStorage',
    'DatabaseStorage',
    'StorageError',
]
