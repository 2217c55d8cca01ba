"""Compound growth projection engine.

Compares a growth (yield) scenario against a baseline savings scenario
across fixed short-term and long-term timeframes. The engine is pure and
synchronous; growthcalc.api wraps it in a small JSON API.
"""

from growthcalc.calculator import compute_compound_growth, compute_projection
from growthcalc.comparison import compare_scenarios, compute_full_result
from growthcalc.constants import (
    BASELINE_SCENARIO,
    GROWTH_SCENARIO,
    LONG_TERM_TIMEFRAMES,
    SHORT_TERM_TIMEFRAMES,
    TIMEFRAME_DAYS,
    baseline_scenario_for_locale,
    get_locale_config,
    timeframe_days,
)
from growthcalc.inputs import InputBounds, clamp_input
from growthcalc.models import (
    CalculatorResult,
    InvestmentInput,
    ProjectionResult,
    ProjectionTimeframe,
    RateScenario,
    ScenarioComparison,
)

__all__ = [
    "BASELINE_SCENARIO",
    "CalculatorResult",
    "GROWTH_SCENARIO",
    "InputBounds",
    "InvestmentInput",
    "LONG_TERM_TIMEFRAMES",
    "ProjectionResult",
    "ProjectionTimeframe",
    "RateScenario",
    "SHORT_TERM_TIMEFRAMES",
    "ScenarioComparison",
    "TIMEFRAME_DAYS",
    "baseline_scenario_for_locale",
    "clamp_input",
    "compare_scenarios",
    "compute_compound_growth",
    "compute_full_result",
    "compute_projection",
    "get_locale_config",
    "timeframe_days",
]
