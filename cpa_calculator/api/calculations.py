"""
FastAPI router module for saved calculations.

Key Endpoints:
- GET /api/calculations - List every saved calculation (oldest first)
- POST /api/calculations - Save one calculation snapshot

Paths, methods and response schemas come from the shared API contract in
cpa_calculator.models.routes, the same definitions the client uses.

API Contract:
- GET 200: [CalculationResponse, ...]
- POST 201: CalculationResponse
- POST 400: {message, field?} (rendered by cpa_calculator.api.errors)

Records are never updated or deleted, and double submission simply creates
two rows: every call gets a fresh id.
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException, status

from cpa_calculator.core.dependencies import StorageDep
from cpa_calculator.models.routes import api
from cpa_calculator.models.schemas import (
    CalculationCreate,
    CalculationResponse,
    ValidationErrorResponse,
)


# =============================================================================
# Module Configuration
# =============================================================================

logger = logging.getLogger(__name__)

router = APIRouter()

_list_route = api.calculations.list
_create_route = api.calculations.create


# =============================================================================
# GET /api/calculations - List Calculations
# =============================================================================


@router.api_route(
    _list_route.path,
    methods=[_list_route.method],
    response_model=List[CalculationResponse],
    status_code=status.HTTP_200_OK,
)
async def list_calculations(storage: StorageDep) -> List[CalculationResponse]:
    """
    List all saved calculations.

    Returns:
        Every stored row, ordered by creation time ascending.

    Raises:
        HTTPException 500: If the storage backend fails.
    """
    try:
        calculations = await storage.get_calculations()
    except Exception as e:
        logger.error(f"Error listing calculations: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch calculations"
        )

    logger.debug(f"Listed {len(calculations)} calculations")
    return calculations


# =============================================================================
# POST /api/calculations - Create Calculation
# =============================================================================


@router.api_route(
    _create_route.path,
    methods=[_create_route.method],
    response_model=CalculationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse}},
)
async def create_calculation(
    calculation: CalculationCreate,
    storage: StorageDep,
) -> CalculationResponse:
    """
    Save one calculation.

    Body validation runs before this handler; a missing or non-decimal field
    never reaches storage and is answered with 400.

    Example Request:
        POST /api/calculations
        {
            "lifetimeProfit": "5000",
            "acquisitionBudgetPct": "50",
            "conversionRatePct": "10"
        }

    Example Response (201):
        {
            "id": 1,
            "lifetimeProfit": "5000",
            "acquisitionBudgetPct": "50",
            "conversionRatePct": "10",
            "createdAt": "2026-01-26T10:30:00"
        }
    """
    try:
        created = await storage.create_calculation(calculation)
    except Exception as e:
        logger.error(f"Error creating calculation: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save calculation"
        )

    logger.info(
        f"Saved calculation id={created.id}: lifetimeProfit={created.lifetimeProfit}, "
        f"acquisitionBudgetPct={created.acquisitionBudgetPct}, "
        f"conversionRatePct={created.conversionRatePct}"
    )
    return created
