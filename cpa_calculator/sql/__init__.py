"""
SQL Query Module for the Target CPA Calculator.

Provides the parameterized statements for the calculations table. Follows the
Repository Pattern: services import statements from here rather than
embedding SQL inline.

Example usage:
    from cpa_calculator.sql import INSERT_CALCULATION

    row = await conn.fetchrow(INSERT_CALCULATION, profit, budget_pct, rate_pct)
"""

from cpa_calculator.sql.calculation_queries import (
    CREATE_CALCULATIONS_TABLE,
    INSERT_CALCULATION,
    SELECT_CALCULATIONS,
)

__all__ = [
    'CREATE_CALCULATIONS_TABLE',
    'INSERT_CALCULATION',
    'SELECT_CALCULATIONS',
]
