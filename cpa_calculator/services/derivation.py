"""
Derived metrics for the Target CPA Calculator.

    targetCPA      = lifetimeProfit * (acquisitionBudgetPct / 100)
    maxCostPerLead = targetCPA * (conversionRatePct / 100)
    profitRetained = lifetimeProfit - targetCPA

Pure arithmetic with no rounding; rounding belongs to display formatting.
Any real input is accepted, including zero, negative and non-finite values,
which simply propagate through the formulas.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DerivedMetrics:
    """Outputs of the calculator for one set of inputs."""
    target_cpa: float
    max_cost_per_lead: float
    profit_retained: float


def derive_metrics(
    lifetime_profit: float,
    acquisition_budget_pct: float,
    conversion_rate_pct: float,
) -> DerivedMetrics:
    """
    Compute target CPA, max cost per lead and profit retained.

    Args:
        lifetime_profit: Expected net profit from one customer.
        acquisition_budget_pct: Percent of lifetime profit spent on acquisition.
        conversion_rate_pct: Percent of leads that convert.

    Returns:
        DerivedMetrics with unrounded values.

    Example:
        >>> derive_metrics(5000, 50, 10)
        DerivedMetrics(target_cpa=2500.0, max_cost_per_lead=250.0, profit_retained=2500.0)
    """
    target_cpa = lifetime_profit * (acquisition_budget_pct / 100)
    max_cost_per_lead = target_cpa * (conversion_rate_pct / 100)
    profit_retained = lifetime_profit - target_cpa

    return DerivedMetrics(
        target_cpa=target_cpa,
        max_cost_per_lead=max_cost_per_lead,
        profit_retained=profit_retained,
    )
