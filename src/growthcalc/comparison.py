"""Scenario comparison and full-result aggregation.

compare_scenarios() runs the calculator once per scenario for a single
timeframe. compute_full_result() runs it for every short-term and
long-term timeframe and returns one immutable CalculatorResult. Any
failure propagates: a result is either complete or not returned at all.
"""

from types import MappingProxyType
from typing import Any

from growthcalc.calculator import compute_projection, percentage_of, subtract_cents
from growthcalc.constants import (
    BASELINE_SCENARIO,
    GROWTH_SCENARIO,
    LONG_TERM_TIMEFRAMES,
    SHORT_TERM_TIMEFRAMES,
)
from growthcalc.logging import get_logger
from growthcalc.models import (
    CalculatorResult,
    InvestmentInput,
    ProjectionTimeframe,
    RateScenario,
    ScenarioComparison,
)

logger = get_logger(__name__)


def compare_scenarios(
    investment: InvestmentInput,
    growth_apy: Any,
    baseline_apy: Any,
    timeframe: ProjectionTimeframe | str,
) -> ScenarioComparison:
    """Compare the growth and baseline APYs over one timeframe.

    difference_percentage is relative to the baseline balance and is 0
    when the baseline balance is 0.

    Args:
        investment: Amounts to project.
        growth_apy: Growth scenario APY in percent.
        baseline_apy: Baseline scenario APY in percent.
        timeframe: Timeframe tag.

    Returns:
        ScenarioComparison with both projections and their difference.
    """
    growth = compute_projection(investment, growth_apy, timeframe)
    baseline = compute_projection(investment, baseline_apy, timeframe)

    difference = subtract_cents(growth.final_balance, baseline.final_balance)

    return ScenarioComparison(
        timeframe=growth.timeframe,
        growth=growth,
        baseline=baseline,
        difference=difference,
        difference_percentage=percentage_of(difference, baseline.final_balance),
        opportunity_cost=difference,
    )


def _compare_all(
    investment: InvestmentInput,
    growth_scenario: RateScenario,
    baseline_scenario: RateScenario,
    timeframes: tuple[ProjectionTimeframe, ...],
) -> MappingProxyType:
    return MappingProxyType({
        tf: compare_scenarios(investment, growth_scenario.apy, baseline_scenario.apy, tf)
        for tf in timeframes
    })


def compute_full_result(
    investment: InvestmentInput,
    selected_timeframe: ProjectionTimeframe | str = ProjectionTimeframe.ONE_YEAR,
    growth_scenario: RateScenario = GROWTH_SCENARIO,
    baseline_scenario: RateScenario = BASELINE_SCENARIO,
) -> CalculatorResult:
    """Build the comparison bundle for every short-term and long-term timeframe.

    Short-term keys are always 1week, 1month, 1year, 5years and long-term
    keys 5years, 10years, 20years, in that order. The two mappings are
    computed independently, so 5years is present in both.

    Args:
        investment: Amounts to project (already clamped by the caller).
        selected_timeframe: Timeframe the caller is displaying; echoed back.
        growth_scenario: Scenario compared as the growth option.
        baseline_scenario: Scenario compared as the bank/baseline option.

    Returns:
        CalculatorResult holding both projection mappings and input echoes.

    Raises:
        ValueError: If selected_timeframe is not a known tag.
    """
    selected_timeframe = ProjectionTimeframe(selected_timeframe)

    projections = _compare_all(
        investment, growth_scenario, baseline_scenario, SHORT_TERM_TIMEFRAMES
    )
    long_term_projections = _compare_all(
        investment, growth_scenario, baseline_scenario, LONG_TERM_TIMEFRAMES
    )

    logger.debug(
        "full_result_computed",
        currency=investment.currency,
        growth_apy=str(growth_scenario.apy),
        baseline_apy=str(baseline_scenario.apy),
        selected_timeframe=selected_timeframe.value,
        timeframes=len(projections) + len(long_term_projections),
    )

    return CalculatorResult(
        input=investment,
        growth_scenario=growth_scenario,
        baseline_scenario=baseline_scenario,
        selected_timeframe=selected_timeframe,
        projections=projections,
        long_term_projections=long_term_projections,
    )
