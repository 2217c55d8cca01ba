"""Caller-side input clamping.

The projection engine accepts whatever amounts it is given. Callers that
take user input (the HTTP API, slider-driven frontends) clamp into the
configured bounds first, mirroring the calculator's input handlers:
  1. clamp each amount into [min, max]
  2. snap the monthly contribution down to its step grid (anchored at min)
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from growthcalc.constants import CALCULATOR_CONFIG
from growthcalc.models import InvestmentInput, to_decimal

if TYPE_CHECKING:
    from growthcalc.config import CalculatorSettings


@dataclass(frozen=True)
class InputBounds:
    """Allowed ranges for user-supplied amounts."""

    min_initial_amount: Decimal = CALCULATOR_CONFIG.min_initial_amount
    max_initial_amount: Decimal = CALCULATOR_CONFIG.max_initial_amount
    min_monthly_contribution: Decimal = CALCULATOR_CONFIG.min_monthly_contribution
    max_monthly_contribution: Decimal = CALCULATOR_CONFIG.max_monthly_contribution
    monthly_contribution_step: Decimal = CALCULATOR_CONFIG.monthly_contribution_step

    @classmethod
    def from_settings(cls, settings: CalculatorSettings) -> InputBounds:
        """Build bounds from CalculatorSettings (env-overridable)."""
        return cls(
            min_initial_amount=settings.min_initial_amount,
            max_initial_amount=settings.max_initial_amount,
            min_monthly_contribution=settings.min_monthly_contribution,
            max_monthly_contribution=settings.max_monthly_contribution,
            monthly_contribution_step=settings.monthly_contribution_step,
        )


def clamp_amount(value: Any, minimum: Decimal, maximum: Decimal) -> Decimal:
    """Clamp value into [minimum, maximum]."""
    return min(max(to_decimal(value), minimum), maximum)


def snap_to_step(value: Decimal, step: Decimal, anchor: Decimal = Decimal("0")) -> Decimal:
    """Round value down onto the grid anchor + k * step.

    A non-positive step leaves the value unchanged.
    """
    if step <= 0:
        return value
    return anchor + ((value - anchor) // step) * step


def clamp_input(
    initial_amount: Any,
    monthly_contribution: Any,
    currency: str,
    bounds: InputBounds | None = None,
) -> InvestmentInput:
    """Clamp raw amounts into bounds and wrap them in an InvestmentInput.

    Args:
        initial_amount: Raw initial amount from the user.
        monthly_contribution: Raw monthly contribution from the user.
        currency: Currency code to attach to the input.
        bounds: Allowed ranges. Defaults to CALCULATOR_CONFIG's bounds.

    Returns:
        InvestmentInput whose amounts lie within bounds.
    """
    if bounds is None:
        bounds = InputBounds()

    initial = clamp_amount(initial_amount, bounds.min_initial_amount, bounds.max_initial_amount)
    monthly = clamp_amount(
        monthly_contribution,
        bounds.min_monthly_contribution,
        bounds.max_monthly_contribution,
    )
    monthly = snap_to_step(
        monthly,
        bounds.monthly_contribution_step,
        anchor=bounds.min_monthly_contribution,
    )

    return InvestmentInput(
        initial_amount=initial,
        monthly_contribution=monthly,
        currency=currency,
    )
