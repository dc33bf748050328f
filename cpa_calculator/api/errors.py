"""
Exception handlers that keep error bodies in the contract's shape.

FastAPI's defaults answer validation failures with 422 and a `detail` list.
The calculations contract instead promises 400 with `{message, field?}`,
and `{message}` for every other error status, including the 404 and 405
answers produced by routing itself.
"""

import logging
from typing import Any, Dict, Optional, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cpa_calculator.models.schemas import ErrorResponse, ValidationErrorResponse


logger = logging.getLogger(__name__)

# First element of a pydantic error location when it names the request part
_LOCATION_SOURCES = {"body", "query", "path", "header", "cookie"}


def _field_from_location(loc: Sequence[Any]) -> Optional[str]:
    parts = list(loc)
    if parts and parts[0] in _LOCATION_SOURCES:
        parts = parts[1:]
    if not parts:
        return None
    return ".".join(str(part) for part in parts)


def validation_error_body(errors: Sequence[Dict[str, Any]]) -> ValidationErrorResponse:
    """Describe the first validation error as {message, field}."""
    if not errors:
        return ValidationErrorResponse(message="Invalid request")

    first = errors[0]
    field = None
    if first.get("type") != "json_invalid":
        field = _field_from_location(first.get("loc", ()))
    return ValidationErrorResponse(message=first.get("msg", "Invalid request"), field=field)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    body = validation_error_body(exc.errors())
    logger.warning(
        f"{request.method} {request.url.path} rejected: {body.message} (field={body.field})"
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(exclude_none=True),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
