"""
Async PostgreSQL connection pool module for the calculations store.

This module provides an async PostgreSQL connection pool using asyncpg and is
the single point through which the backend reaches the database.

Key Components:
- Global connection pool singleton (_pool)
- init_db(): Create the pool and the calculations table at startup
- get_db_pool(): Get the pool instance (initializes if needed)
- close_db(): Gracefully close the pool at shutdown

Connection Pool Configuration (from Settings):
- db_pool_min_size: minimum idle connections kept in pool
- db_pool_max_size: maximum connections in pool
- db_command_timeout: query timeout in seconds

Usage:
    # At application startup (in FastAPI lifespan)
    await init_db()

    # At application shutdown
    await close_db()
"""

import logging
from typing import Optional

import asyncpg
from asyncpg import Pool

from cpa_calculator.core.config import get_settings
from cpa_calculator.sql.calculation_queries import CREATE_CALCULATIONS_TABLE


logger = logging.getLogger(__name__)


# =============================================================================
# Global Pool Singleton
# =============================================================================

# None until init_db() is called; shared across all async tasks
_pool: Optional[Pool] = None


# =============================================================================
# Pool Lifecycle Functions
# =============================================================================

async def init_db() -> Pool:
    """
    Initialize the database connection pool and ensure the schema exists.

    Idempotent: if the pool already exists it is returned unchanged.

    Returns:
        Pool: The asyncpg connection pool instance.

    Raises:
        asyncpg.PostgresError: If connection to the database fails.
        OSError: If the database host is unreachable.
    """
    global _pool

    if _pool is None:
        settings = get_settings()

        _pool = await asyncpg.create_pool(
            dsn=settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
            command_timeout=settings.db_command_timeout,
        )

        async with _pool.acquire() as conn:
            await conn.execute(CREATE_CALCULATIONS_TABLE)
        logger.info("calculations table ready")

    return _pool


async def get_db_pool() -> Pool:
    """
    Get the database connection pool, initializing if needed.

    Prefer calling init_db() explicitly at startup; lazy initialization adds
    latency to the first request.

    Returns:
        Pool: The asyncpg connection pool instance.
    """
    global _pool

    if _pool is None:
        await init_db()

    assert _pool is not None, "Pool should be initialized after init_db()"

    return _pool


async def close_db() -> None:
    """
    Close the database connection pool gracefully.

    Waits for active queries to finish, then resets the singleton so a later
    get_db_pool() creates a fresh pool. Safe to call more than once.
    """
    global _pool

    if _pool is not None:
        await _pool.close()
        _pool = None
