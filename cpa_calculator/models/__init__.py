"""
Package initialization file for calculator models.

Re-exports the enums, Pydantic schemas and API contract so other modules can
import them from cpa_calculator.models directly.

Usage:
    from cpa_calculator.models import (
        Currency,
        CalculationCreate,
        CalculationResponse,
        api,
    )
"""

from cpa_calculator.models.enums import (
    Currency,
    CalculatorField,
    NotificationVariant,
    DEFAULT_CURRENCY,
    resolve_currency,
)

from cpa_calculator.models.schemas import (
    CalculationCreate,
    CalculationResponse,
    ValidationErrorResponse,
    ErrorResponse,
    CalculatorState,
    DEFAULT_STATE,
)

from cpa_calculator.models.routes import (
    RouteSpec,
    api,
    build_url,
    error_schemas,
    CALCULATIONS_PATH,
)

__all__ = [
    # Enums
    'Currency',
    'CalculatorField',
    'NotificationVariant',
    'DEFAULT_CURRENCY',
    'resolve_currency',
    # Schemas
    'CalculationCreate',
    'CalculationResponse',
    'ValidationErrorResponse',
    'ErrorResponse',
    'CalculatorState',
    'DEFAULT_STATE',
    # API contract
    'RouteSpec',
    'api',
    'build_url',
    'error_schemas',
    'CALCULATIONS_PATH',
]
