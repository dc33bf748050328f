"""
Pydantic request/response models for the Target CPA Calculator.

This module is the shared shape definition used by both the FastAPI backend
and the Python client, so the two sides cannot drift apart:

- CalculationCreate: POST /api/calculations request body (insert schema)
- CalculationResponse: a stored calculations row
- ValidationErrorResponse / ErrorResponse: error bodies
- CalculatorState: the client's persisted local snapshot

Field names are camelCase because they are the wire and snapshot names.
Numeric record fields are Decimal so arbitrary-precision NUMERIC values pass
through unchanged; Pydantic serializes them to JSON as decimal text.

All models use Pydantic v2 syntax.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from cpa_calculator.models.enums import DEFAULT_CURRENCY


# =============================================================================
# Calculation Record Models
# =============================================================================


class CalculationCreate(BaseModel):
    """
    Request body for creating a calculation record.

    Each field must be present and coercible to a finite decimal. Clients
    send decimal-formatted text ("5000", "12.5"); JSON numbers are accepted
    as well. id and createdAt are assigned by the database and are ignored
    if supplied.
    """
    model_config = ConfigDict(
        str_strip_whitespace=True,
        extra='ignore',
        json_schema_extra={
            "example": {
                "lifetimeProfit": "5000",
                "acquisitionBudgetPct": "50",
                "conversionRatePct": "10",
            }
        }
    )

    lifetimeProfit: Decimal = Field(
        ...,
        description="Expected net profit from one customer over the relationship",
        allow_inf_nan=False,
    )
    acquisitionBudgetPct: Decimal = Field(
        ...,
        description="Share of lifetime profit allocated to acquisition, in percent",
        allow_inf_nan=False,
    )
    conversionRatePct: Decimal = Field(
        ...,
        description="Share of leads that become paying customers, in percent",
        allow_inf_nan=False,
    )


class CalculationResponse(BaseModel):
    """
    A persisted calculations row.

    Source table: calculations(id, lifetime_profit, acquisition_budget_pct,
    conversion_rate_pct, created_at)
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "lifetimeProfit": "5000",
                "acquisitionBudgetPct": "50",
                "conversionRatePct": "10",
                "createdAt": "2026-01-26T10:30:00",
            }
        }
    )

    id: int = Field(..., description="Auto-assigned identifier")
    lifetimeProfit: Decimal
    acquisitionBudgetPct: Decimal
    conversionRatePct: Decimal
    createdAt: Optional[datetime] = Field(
        default=None,
        description="Server-assigned creation timestamp"
    )

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "CalculationResponse":
        """Build a response from a calculations row (snake_case columns)."""
        return cls(
            id=record["id"],
            lifetimeProfit=record["lifetime_profit"],
            acquisitionBudgetPct=record["acquisition_budget_pct"],
            conversionRatePct=record["conversion_rate_pct"],
            createdAt=record["created_at"],
        )


# =============================================================================
# Error Models
# =============================================================================


class ValidationErrorResponse(BaseModel):
    """400 body: what failed and, when known, which field."""
    message: str
    field: Optional[str] = None


class ErrorResponse(BaseModel):
    message: str


# =============================================================================
# Client Snapshot Model
# =============================================================================


class CalculatorState(BaseModel):
    """
    Current calculator inputs, as held by the client and mirrored to local
    storage.

    Values are not range-checked: percentages outside [0, 100] and negative
    amounts are legal and simply produce inverted results. Non-finite values
    are written to JSON as "Infinity" / "NaN" strings so snapshots reload.
    """
    model_config = ConfigDict(frozen=True, ser_json_inf_nan='strings')

    lifetimeProfit: float = 5000.0
    acquisitionBudgetPct: float = 50.0
    conversionRatePct: float = 10.0
    currency: str = DEFAULT_CURRENCY.value


DEFAULT_STATE: CalculatorState = CalculatorState()
