"""
Presentation model for the calculator screen.

build_view() turns the current CalculatorState into display-ready strings:
one card per input slider and a results panel. Slider bounds are display
metadata; the state store never clamps values to them, so the fill
percentage can fall outside 0..100 for out-of-range inputs.
"""

from dataclasses import dataclass
from typing import List, Tuple

from cpa_calculator.models.enums import CalculatorField, resolve_currency
from cpa_calculator.models.schemas import CalculatorState
from cpa_calculator.services.derivation import derive_metrics
from cpa_calculator.services.formatting import format_amount, format_number


FORMULA_TEXT: str = "Formula: Target CPA = Lifetime Profit × Acquisition Budget %"


@dataclass(frozen=True)
class SliderSpec:
    field: CalculatorField
    title: str
    helper_text: str
    min: float
    max: float
    step: float
    currency_prefix: bool = False
    suffix: str = ""


SLIDERS: Tuple[SliderSpec, ...] = (
    SliderSpec(
        field=CalculatorField.LIFETIME_PROFIT,
        title="Lifetime Profit",
        helper_text=(
            "Average net profit you expect from a single customer over their "
            "entire relationship lifespan."
        ),
        min=500,
        max=100000,
        step=100,
        currency_prefix=True,
    ),
    SliderSpec(
        field=CalculatorField.ACQUISITION_BUDGET_PCT,
        title="Acquisition Budget",
        helper_text=(
            "Percentage of your lifetime profit you are willing to spend to "
            "acquire a new customer."
        ),
        min=5,
        max=100,
        step=1,
        suffix="%",
    ),
    SliderSpec(
        field=CalculatorField.CONVERSION_RATE_PCT,
        title="Conversion Rate",
        helper_text=(
            "Percentage of leads or clicks that convert into actual paying "
            "customers on your site."
        ),
        min=1,
        max=100,
        step=1,
        suffix="%",
    ),
)


@dataclass(frozen=True)
class SliderView:
    title: str
    helper_text: str
    display_value: str
    min_label: str
    max_label: str
    fill_percentage: float


@dataclass(frozen=True)
class ResultsView:
    target_cpa: str
    max_cost_per_lead: str
    profit_retained: str


@dataclass(frozen=True)
class CalculatorView:
    currency_symbol: str
    currency_code: str
    sliders: List[SliderView]
    results: ResultsView
    formula: str = FORMULA_TEXT


def slider_fill_percentage(slider: SliderSpec, value: float) -> float:
    return (value - slider.min) / (slider.max - slider.min) * 100


def _slider_view(slider: SliderSpec, value: float, prefix: str) -> SliderView:
    prefix = prefix if slider.currency_prefix else ""
    return SliderView(
        title=slider.title,
        helper_text=slider.helper_text,
        display_value=f"{prefix}{format_number(value)}{slider.suffix}",
        min_label=f"{prefix}{format_number(slider.min)}{slider.suffix}",
        max_label=f"{prefix}{format_number(slider.max)}{slider.suffix}",
        fill_percentage=slider_fill_percentage(slider, value),
    )


def build_view(state: CalculatorState) -> CalculatorView:
    """Render the full calculator screen for one state."""
    currency = resolve_currency(state.currency)
    values = state.model_dump()
    metrics = derive_metrics(
        state.lifetimeProfit,
        state.acquisitionBudgetPct,
        state.conversionRatePct,
    )

    return CalculatorView(
        currency_symbol=currency.value,
        currency_code=currency.code,
        sliders=[
            _slider_view(slider, values[slider.field.value], currency.value)
            for slider in SLIDERS
        ],
        results=ResultsView(
            target_cpa=format_amount(metrics.target_cpa, currency.value),
            max_cost_per_lead=format_amount(metrics.max_cost_per_lead, currency.value),
            profit_retained=format_amount(metrics.profit_retained, currency.value),
        ),
    )
