"""
Calculation Queries Module for the Target CPA Calculator.

Parameterized PostgreSQL statements for the single `calculations` table.
Numeric columns use unconstrained NUMERIC so submitted decimals are stored
exactly, without currency-bound precision or scale.
"""


# =============================================================================
# SCHEMA
# =============================================================================

CREATE_CALCULATIONS_TABLE: str = """
    CREATE TABLE IF NOT EXISTS calculations (
        id SERIAL PRIMARY KEY,
        lifetime_profit NUMERIC NOT NULL,
        acquisition_budget_pct NUMERIC NOT NULL,
        conversion_rate_pct NUMERIC NOT NULL,
        created_at TIMESTAMP DEFAULT NOW()
    )
"""


# =============================================================================
# WRITE
# =============================================================================

# id and created_at come from column defaults
INSERT_CALCULATION: str = """
    INSERT INTO calculations (
        lifetime_profit, acquisition_budget_pct, conversion_rate_pct
    ) VALUES ($1, $2, $3)
    RETURNING id, lifetime_profit, acquisition_budget_pct, conversion_rate_pct, created_at
"""


# =============================================================================
# READ
# =============================================================================

SELECT_CALCULATIONS: str = """
    SELECT
        id,
        lifetime_profit,
        acquisition_budget_pct,
        conversion_rate_pct,
        created_at
    FROM calculations
    ORDER BY created_at ASC, id ASC
"""
