"""
API contract for the calculations resource.

Declares method, path, request schema and per-status response schemas for
every endpoint. The FastAPI router registers its handlers from these
definitions and the httpx client builds its requests and validates its
responses from them, so both sides share a single source of truth. No
business logic lives here.

Usage:
    from cpa_calculator.models.routes import api

    route = api.calculations.create
    route.method                      # "POST"
    route.path                        # "/api/calculations"
    route.parse_response(201, body)   # -> CalculationResponse
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from pydantic import BaseModel, TypeAdapter

from cpa_calculator.models.schemas import (
    CalculationCreate,
    CalculationResponse,
    ErrorResponse,
    ValidationErrorResponse,
)


# =============================================================================
# Shared Error Shapes
# =============================================================================

error_schemas: Dict[str, Type[BaseModel]] = {
    "validation": ValidationErrorResponse,
    "notFound": ErrorResponse,
    "internal": ErrorResponse,
}


# =============================================================================
# Route Definition
# =============================================================================


@dataclass(frozen=True)
class RouteSpec:
    """
    One endpoint of the API contract.

    Attributes:
        method: HTTP method.
        path: URL path, possibly with :name placeholders.
        responses: Status code -> response body type.
        input: Request body schema, if the endpoint takes one.
    """
    method: str
    path: str
    responses: Mapping[int, Any]
    input: Optional[Type[BaseModel]] = None
    _adapters: Dict[int, TypeAdapter] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def parse_response(self, status_code: int, payload: Any) -> Any:
        """
        Validate a decoded response body against the declared schema.

        Raises:
            KeyError: If the status code is not part of the contract.
            pydantic.ValidationError: If the body does not match.
        """
        if status_code not in self._adapters:
            self._adapters[status_code] = TypeAdapter(self.responses[status_code])
        return self._adapters[status_code].validate_python(payload)


@dataclass(frozen=True)
class CalculationsRoutes:
    list: RouteSpec
    create: RouteSpec


@dataclass(frozen=True)
class ApiContract:
    calculations: CalculationsRoutes


CALCULATIONS_PATH: str = "/api/calculations"

api = ApiContract(
    calculations=CalculationsRoutes(
        list=RouteSpec(
            method="GET",
            path=CALCULATIONS_PATH,
            responses={200: List[CalculationResponse]},
        ),
        create=RouteSpec(
            method="POST",
            path=CALCULATIONS_PATH,
            input=CalculationCreate,
            responses={
                201: CalculationResponse,
                400: error_schemas["validation"],
            },
        ),
    ),
)


def build_url(path: str, params: Optional[Mapping[str, Union[str, int]]] = None) -> str:
    """
    Substitute :name placeholders in a route path.

    Parameters without a matching placeholder are ignored.

    Example:
        >>> build_url("/api/calculations/:id", {"id": 7})
        '/api/calculations/7'
    """
    url = path
    if params:
        for key, value in params.items():
            placeholder = f":{key}"
            if placeholder in url:
                url = url.replace(placeholder, str(value))
    return url
