"""
Storage service for calculation records.

Two operations against the calculations table, and nothing else: records
are never updated or deleted, and listing has no paging or filtering.

- create_calculation: insert one row, return it with its assigned id and
  creation timestamp
- get_calculations: return every row, oldest first (ties broken by id)

DatabaseStorage talks to PostgreSQL through the shared asyncpg pool; route
handlers receive it through the get_storage dependency so tests can swap in
another CalculationStorage implementation.
"""

import logging
from typing import List, Optional, Protocol

from asyncpg import Pool

from cpa_calculator.core.database import get_db_pool
from cpa_calculator.models.schemas import CalculationCreate, CalculationResponse
from cpa_calculator.sql.calculation_queries import INSERT_CALCULATION, SELECT_CALCULATIONS


logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """Raised when the database does not return the row it should have."""


class CalculationStorage(Protocol):
    async def create_calculation(self, calculation: CalculationCreate) -> CalculationResponse:
        ...

    async def get_calculations(self) -> List[CalculationResponse]:
        ...


class DatabaseStorage:
    """
    CalculationStorage backed by PostgreSQL.

    Args:
        pool: Optional asyncpg pool. When omitted the module-level pool from
            cpa_calculator.core.database is used, created lazily on first use.
    """

    def __init__(self, pool: Optional[Pool] = None) -> None:
        self._pool = pool

    async def _get_pool(self) -> Pool:
        if self._pool is None:
            return await get_db_pool()
        return self._pool

    async def create_calculation(self, calculation: CalculationCreate) -> CalculationResponse:
        """
        Insert one calculation and return the stored row.

        Raises:
            StorageError: If the INSERT returned no row.
            asyncpg.PostgresError: On database failure.
        """
        pool = await self._get_pool()
        async with pool.acquire() as conn:
            record = await conn.fetchrow(
                INSERT_CALCULATION,
                calculation.lifetimeProfit,
                calculation.acquisitionBudgetPct,
                calculation.conversionRatePct,
            )

        if record is None:
            raise StorageError("INSERT into calculations returned no row")

        created = CalculationResponse.from_record(record)
        logger.info(f"Created calculation id={created.id}")
        return created

    async def get_calculations(self) -> List[CalculationResponse]:
        pool = await self._get_pool()
        async with pool.acquire() as conn:
            records = await conn.fetch(SELECT_CALCULATIONS)

        logger.debug(f"Listed {len(records)} calculations")
        return [CalculationResponse.from_record(record) for record in records]
