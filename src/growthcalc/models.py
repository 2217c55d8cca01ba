"""Value types for the growth projection engine.

CRITICAL: All monetary values and rates use Decimal. Never use float for
balances, contributions, or APYs. Inputs arriving as int/float/str are
converted with to_decimal() at the boundary.

Every type here is frozen: results are built once per calculation and
never mutated afterwards.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any


def to_decimal(value: Any) -> Decimal:
    """Convert a numeric input to Decimal via its string form.

    Going through str() keeps 0.1 as Decimal("0.1") instead of the binary
    float expansion.
    """
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class ProjectionTimeframe(str, Enum):
    """Named projection horizon.

    The enum is closed: ProjectionTimeframe("2years") raises ValueError.
    Day counts live in constants.TIMEFRAME_DAYS.
    """

    ONE_WEEK = "1week"
    ONE_MONTH = "1month"
    ONE_YEAR = "1year"
    FIVE_YEARS = "5years"
    TEN_YEARS = "10years"
    TWENTY_YEARS = "20years"


@dataclass(frozen=True)
class InvestmentInput:
    """Amounts supplied by the caller for one calculation."""

    initial_amount: Decimal
    monthly_contribution: Decimal
    currency: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "initial_amount", to_decimal(self.initial_amount))
        object.__setattr__(self, "monthly_contribution", to_decimal(self.monthly_contribution))

    def to_dict(self) -> dict:
        return {
            "initial_amount": str(self.initial_amount),
            "monthly_contribution": str(self.monthly_contribution),
            "currency": self.currency,
        }


@dataclass(frozen=True)
class RateScenario:
    """A named annual rate to project with.

    apy is a percent (Decimal("8.0") means 8% per year). is_bank only
    drives labeling downstream; the math treats both scenarios alike.
    """

    id: str
    name: str
    apy: Decimal
    description: str | None = None
    is_bank: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "apy", to_decimal(self.apy))

    def with_apy(self, apy: Any) -> RateScenario:
        """Return a copy of this scenario using a different APY."""
        return RateScenario(
            id=self.id,
            name=self.name,
            apy=to_decimal(apy),
            description=self.description,
            is_bank=self.is_bank,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "apy": str(self.apy),
            "description": self.description,
            "is_bank": self.is_bank,
        }


@dataclass(frozen=True)
class ProjectionResult:
    """Outcome of one (input, apy, timeframe) projection, rounded to cents."""

    timeframe: ProjectionTimeframe
    days: int
    final_balance: Decimal
    total_contributed: Decimal
    interest_earned: Decimal
    growth_percentage: Decimal

    def to_dict(self) -> dict:
        return {
            "timeframe": self.timeframe.value,
            "days": self.days,
            "final_balance": str(self.final_balance),
            "total_contributed": str(self.total_contributed),
            "interest_earned": str(self.interest_earned),
            "growth_percentage": str(self.growth_percentage),
        }


@dataclass(frozen=True)
class ScenarioComparison:
    """Growth vs baseline projections for the same timeframe.

    opportunity_cost is what staying with the baseline gives up; it is
    currently the same number as difference.
    """

    timeframe: ProjectionTimeframe
    growth: ProjectionResult
    baseline: ProjectionResult
    difference: Decimal
    difference_percentage: Decimal
    opportunity_cost: Decimal

    def to_dict(self) -> dict:
        return {
            "timeframe": self.timeframe.value,
            "growth": self.growth.to_dict(),
            "baseline": self.baseline.to_dict(),
            "difference": str(self.difference),
            "difference_percentage": str(self.difference_percentage),
            "opportunity_cost": str(self.opportunity_cost),
        }


@dataclass(frozen=True)
class CalculatorResult:
    """Full result bundle: every short-term and long-term comparison plus echoes.

    projections and long_term_projections are independent read-only
    mappings; FIVE_YEARS appears in both.
    """

    input: InvestmentInput
    growth_scenario: RateScenario
    baseline_scenario: RateScenario
    selected_timeframe: ProjectionTimeframe
    projections: Mapping[ProjectionTimeframe, ScenarioComparison]
    long_term_projections: Mapping[ProjectionTimeframe, ScenarioComparison]

    @property
    def selected(self) -> ScenarioComparison:
        """Comparison for the selected timeframe, preferring the long-term set."""
        if self.selected_timeframe in self.long_term_projections:
            return self.long_term_projections[self.selected_timeframe]
        return self.projections[self.selected_timeframe]

    def to_dict(self) -> dict:
        """Serialize to dict for JSON output (Decimals as strings)."""
        return {
            "input": self.input.to_dict(),
            "growth_scenario": self.growth_scenario.to_dict(),
            "baseline_scenario": self.baseline_scenario.to_dict(),
            "selected_timeframe": self.selected_timeframe.value,
            "projections": {
                tf.value: comparison.to_dict() for tf, comparison in self.projections.items()
            },
            "long_term_projections": {
                tf.value: comparison.to_dict()
                for tf, comparison in self.long_term_projections.items()
            },
        }
