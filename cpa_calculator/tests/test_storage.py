"""
Tests for DatabaseStorage against a mocked asyncpg pool.

Verifies the SQL issued, the parameters bound, and the mapping from
snake_case rows to CalculationResponse.
"""

from datetime import datetime
from decimal import Decimal
from typing import Dict
from unittest.mock import AsyncMock, patch

import pytest

from cpa_calculator.core import database
from cpa_calculator.models.schemas import CalculationCreate
from cpa_calculator.services.storage import DatabaseStorage, StorageError
from cpa_calculator.sql.calculation_queries import (
    CREATE_CALCULATIONS_TABLE,
    INSERT_CALCULATION,
    SELECT_CALCULATIONS,
)


pytestmark = pytest.mark.asyncio


class TestCreateCalculation:

    async def test_inserts_and_returns_row(self, mock_db_pool: AsyncMock, calculation_row: Dict) -> None:
        conn = mock_db_pool.acquire.return_value.__aenter__.return_value
        conn.fetchrow.return_value = calculation_row
        storage = DatabaseStorage(pool=mock_db_pool)

        created = await storage.create_calculation(
            CalculationCreate(lifetimeProfit="5000", acquisitionBudgetPct="50", conversionRatePct="10")
        )

        conn.fetchrow.assert_awaited_once_with(
            INSERT_CALCULATION, Decimal("5000"), Decimal("50"), Decimal("10")
        )
        assert created.id == 1
        assert created.lifetimeProfit == Decimal("5000")
        assert created.createdAt == datetime(2026, 1, 26, 10, 30, 0)

    async def test_keeps_full_precision(self, mock_db_pool: AsyncMock, calculation_row: Dict) -> None:
        conn = mock_db_pool.acquire.return_value.__aenter__.return_value
        conn.fetchrow.return_value = {**calculation_row, 'lifetime_profit': Decimal('1234.567891')}
        storage = DatabaseStorage(pool=mock_db_pool)

        created = await storage.create_calculation(
            CalculationCreate(lifetimeProfit="1234.567891", acquisitionBudgetPct="50", conversionRatePct="10")
        )

        assert conn.fetchrow.await_args.args[1] == Decimal("1234.567891")
        assert created.lifetimeProfit == Decimal("1234.567891")

    async def test_missing_returned_row_raises(self, mock_db_pool: AsyncMock) -> None:
        storage = DatabaseStorage(pool=mock_db_pool)

        with pytest.raises(StorageError):
            await storage.create_calculation(
                CalculationCreate(lifetimeProfit="1", acquisitionBudgetPct="1", conversionRatePct="1")
            )

    async def test_uses_shared_pool_by_default(self, mock_db_pool: AsyncMock, calculation_row: Dict) -> None:
        conn = mock_db_pool.acquire.return_value.__aenter__.return_value
        conn.fetchrow.return_value = calculation_row

        with patch('cpa_calculator.services.storage.get_db_pool', new=AsyncMock(return_value=mock_db_pool)):
            created = await DatabaseStorage().create_calculation(
                CalculationCreate(lifetimeProfit="5000", acquisitionBudgetPct="50", conversionRatePct="10")
            )

        assert created.id == 1


class TestGetCalculations:

    async def test_returns_all_rows_in_query_order(self, mock_db_pool: AsyncMock, calculation_row: Dict) -> None:
        conn = mock_db_pool.acquire.return_value.__aenter__.return_value
        conn.fetch.return_value = [
            calculation_row,
            {**calculation_row, 'id': 2, 'acquisition_budget_pct': Decimal('25')},
        ]
        storage = DatabaseStorage(pool=mock_db_pool)

        rows = await storage.get_calculations()

        conn.fetch.assert_awaited_once_with(SELECT_CALCULATIONS)
        assert [row.id for row in rows] == [1, 2]
        assert rows[1].acquisitionBudgetPct == Decimal("25")

    async def test_empty_table(self, mock_db_pool: AsyncMock) -> None:
        assert await DatabaseStorage(pool=mock_db_pool).get_calculations() == []

    async def test_list_query_orders_by_creation_time(self) -> None:
        assert "ORDER BY created_at ASC, id ASC" in SELECT_CALCULATIONS


class TestPoolLifecycle:

    async def test_init_creates_table_and_close_resets_pool(self, mock_db_pool: AsyncMock) -> None:
        conn = mock_db_pool.acquire.return_value.__aenter__.return_value

        with patch('cpa_calculator.core.database.asyncpg.create_pool', new=AsyncMock(return_value=mock_db_pool)) as create_pool:
            pool = await database.init_db()
            again = await database.get_db_pool()
            await database.close_db()

        assert pool is again is mock_db_pool
        create_pool.assert_awaited_once()
        conn.execute.assert_awaited_once_with(CREATE_CALCULATIONS_TABLE)
        mock_db_pool.close.assert_awaited_once()
        assert database._pool is None
