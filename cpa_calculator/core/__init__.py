"""
Core infrastructure package for the Target CPA Calculator backend.

Provides:
- Configuration management via pydantic-settings (config)
- Async PostgreSQL connectivity via asyncpg (database)
- FastAPI dependency injection utilities (dependencies)

Configuration and pool lifecycle are re-exported here:

    from cpa_calculator.core import get_settings, init_db, close_db

The dependencies module builds on the service layer, which itself uses the
database module, so it is imported directly rather than re-exported:

    from cpa_calculator.core.dependencies import StorageDep
"""

from cpa_calculator.core.config import Settings, get_settings

from cpa_calculator.core.database import init_db, close_db, get_db_pool

__all__ = [
    'Settings',
    'get_settings',
    'init_db',
    'close_db',
    'get_db_pool',
]
