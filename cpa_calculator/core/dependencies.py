"""
FastAPI dependency injection module for the Target CPA Calculator.

Provides reusable dependencies so route handlers never construct their own
infrastructure:

- get_settings_dependency / SettingsDep: the cached Settings singleton
- get_storage / StorageDep: the CalculationStorage used by the routes

Tests replace either one through FastAPI's override mechanism:

    app.dependency_overrides[get_storage] = lambda: fake_storage
"""

from typing import Annotated

from fastapi import Depends

from cpa_calculator.core.config import Settings, get_settings
from cpa_calculator.services.storage import CalculationStorage, DatabaseStorage


# =============================================================================
# Settings Dependency
# =============================================================================

def get_settings_dependency() -> Settings:
    """Thin wrapper around get_settings() so it can be overridden in tests."""
    return get_settings()


# =============================================================================
# Storage Dependency
# =============================================================================

def get_storage() -> CalculationStorage:
    """
    Return the storage backend for calculation records.

    DatabaseStorage is stateless apart from the shared pool, so a new instance
    per request is cheap.
    """
    return DatabaseStorage()


# =============================================================================
# Type Aliases for Dependency Injection
# =============================================================================

SettingsDep = Annotated[Settings, Depends(get_settings_dependency)]

StorageDep = Annotated[CalculationStorage, Depends(get_storage)]
