"""
API package initialization.

Routers:
- calculations: list and create saved calculations (/api/calculations)

Exception handlers that render errors in the contract's shape live in
cpa_calculator.api.errors.
"""

from cpa_calculator.api.calculations import router as calculations_router
from cpa_calculator.api.errors import register_exception_handlers

__all__ = [
    "calculations_router",
    "register_exception_handlers",
]
