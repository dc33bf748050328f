"""
Async HTTP client for the calculations API.

Requests are built from, and responses validated against, the shared API
contract in cpa_calculator.models.routes. Non-2xx answers raise ApiError;
transport failures (connection refused, timeouts) propagate as
httpx.HTTPError.

Usage:
    async with CalculationsClient("http://localhost:8000") as client:
        saved = await client.create_calculation(
            {"lifetimeProfit": "5000", "acquisitionBudgetPct": "50", "conversionRatePct": "10"}
        )
        history = await client.list_calculations()
"""

import logging
from typing import Any, List, Mapping, Optional, Union

import httpx
from pydantic import ValidationError

from cpa_calculator.models.routes import RouteSpec, api, build_url
from cpa_calculator.models.schemas import CalculationCreate, CalculationResponse


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT: float = 10.0


class ApiError(Exception):
    """
    The API answered with an error status.

    Attributes:
        status_code: HTTP status of the response.
        message: Server-provided message, or the response text.
        field: Offending field for validation errors, when reported.
    """

    def __init__(self, status_code: int, message: str, field: Optional[str] = None) -> None:
        self.status_code = status_code
        self.message = message
        self.field = field
        super().__init__(f"{status_code}: {message}")


class CalculationsClient:
    """
    Client for /api/calculations.

    Args:
        base_url: API root, e.g. "http://localhost:8000".
        timeout: Request timeout in seconds.
        transport: Optional httpx transport (tests pass httpx.MockTransport).
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self.client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_settings(cls) -> "CalculationsClient":
        from cpa_calculator.core.config import get_settings

        settings = get_settings()
        return cls(settings.api_base_url, timeout=settings.request_timeout)

    async def __aenter__(self) -> "CalculationsClient":
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def _ensure_client(self) -> httpx.AsyncClient:
        if self.client is None:
            self.client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self.client

    async def close(self) -> None:
        if self.client is not None:
            await self.client.aclose()
            self.client = None

    async def _send(
        self,
        route: RouteSpec,
        json: Optional[Any] = None,
        params: Optional[Mapping[str, Union[str, int]]] = None,
    ) -> Any:
        client = self._ensure_client()
        url = build_url(route.path, params)
        response = await client.request(route.method, url, json=json)

        if response.is_success:
            return route.parse_response(response.status_code, response.json())

        raise self._error_from(route, response)

    @staticmethod
    def _error_from(route: RouteSpec, response: httpx.Response) -> ApiError:
        try:
            body = response.json()
        except ValueError:
            body = None

        message = response.text or response.reason_phrase
        field = None
        if isinstance(body, dict) and "message" in body:
            message = str(body["message"])
            if response.status_code in route.responses:
                try:
                    parsed = route.parse_response(response.status_code, body)
                except ValidationError:
                    logger.warning(
                        f"{route.method} {route.path} returned a malformed {response.status_code} body"
                    )
                else:
                    message = parsed.message
                    field = getattr(parsed, "field", None)

        logger.error(f"{route.method} {route.path} failed: {response.status_code} {message}")
        return ApiError(response.status_code, message, field)

    async def list_calculations(self) -> List[CalculationResponse]:
        return await self._send(api.calculations.list)

    async def create_calculation(
        self,
        calculation: Union[CalculationCreate, Mapping[str, Any]],
    ) -> CalculationResponse:
        """
        Save one calculation.

        A plain mapping is sent as-is so the server performs the validation.

        Raises:
            ApiError: 400 with the failing field, or any other error status.
            httpx.HTTPError: On transport failure.
        """
        if isinstance(calculation, CalculationCreate):
            body = calculation.model_dump(mode="json")
        else:
            body = dict(calculation)
        return await self._send(api.calculations.create, json=body)
