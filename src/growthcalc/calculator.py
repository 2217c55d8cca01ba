"""Compound growth projection for a single rate and timeframe.

All calculations use Decimal arithmetic exclusively -- no float conversions.

Growth model:
  - Interest compounds daily at annual_rate / 100 / 365.
  - The principal compounds over the full day count.
  - One contribution is made per whole 30-day month. Contribution i
    (0-based) compounds for days - i * 30 days. The contributions are
    summed one by one rather than through a closed-form annuity, so the
    outputs match the published calculator to the cent.
  - Currency values are rounded to cents (ROUND_HALF_UP) as they are
    produced; interest is derived from the already-rounded balance.

Arithmetic runs in a private decimal context sized to the amounts involved,
never in the caller's global context. Results do not depend on
getcontext().prec and arbitrarily large balances still round to the cent.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Context, Decimal, localcontext
from typing import Any

from growthcalc.constants import timeframe_days
from growthcalc.models import InvestmentInput, ProjectionResult, ProjectionTimeframe, to_decimal

CENT = Decimal("0.01")
DAYS_PER_YEAR = 365
DAYS_PER_MONTH = 30

MIN_PRECISION = 28
GUARD_DIGITS = 20  # significant digits kept beyond the integer part

_ZERO = Decimal("0")
_ONE = Decimal("1")
_HUNDRED = Decimal("100")


def integer_digits(value: Decimal) -> int:
    """Number of digits left of the decimal point (0 for zero and pure fractions)."""
    if not value.is_finite() or not value:
        return 0
    return max(value.adjusted() + 1, 0)


def working_context(digits: int) -> Context:
    """Return a decimal context holding `digits` integer digits plus guard digits."""
    return Context(prec=max(MIN_PRECISION, digits + GUARD_DIGITS), rounding=ROUND_HALF_EVEN)


def round_cents(value: Decimal) -> Decimal:
    """Quantize to 2 decimal places, halves rounded up."""
    return value.quantize(
        CENT,
        rounding=ROUND_HALF_UP,
        context=working_context(integer_digits(value)),
    )


def subtract_cents(minuend: Decimal, subtrahend: Decimal) -> Decimal:
    """Exact minuend - subtrahend rounded to cents."""
    digits = max(integer_digits(minuend), integer_digits(subtrahend)) + 1
    with localcontext(working_context(digits)):
        return round_cents(minuend - subtrahend)


def percentage_of(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Return numerator / denominator * 100 rounded to 2 places, or 0 if denominator <= 0."""
    if denominator <= _ZERO:
        return round_cents(_ZERO)
    digits = integer_digits(numerator) + max(-denominator.adjusted(), 0) + 3
    with localcontext(working_context(digits)):
        return round_cents(numerator / denominator * _HUNDRED)


@dataclass(frozen=True)
class CompoundGrowth:
    """Raw growth figures for one principal/contribution/rate/day-count."""

    final_balance: Decimal
    interest_earned: Decimal
    total_contributed: Decimal


def daily_rate(annual_rate: Decimal) -> Decimal:
    """Convert an annual percentage rate to a daily decimal rate."""
    return annual_rate / _HUNDRED / DAYS_PER_YEAR


def contribution_growth(
    monthly_contribution: Decimal,
    rate_per_day: Decimal,
    days: int,
) -> Decimal:
    """Sum the compounded value of each whole month's contribution.

    Args:
        monthly_contribution: Amount added at the start of each 30-day month.
        rate_per_day: Daily decimal rate.
        days: Projection length in days.

    Returns:
        Unrounded future value of all contributions (0 when no whole month
        fits in the horizon or the contribution is 0).
    """
    months = days // DAYS_PER_MONTH
    if monthly_contribution <= _ZERO or months < 1:
        return _ZERO

    growth_factor = _ONE + rate_per_day
    total = _ZERO
    for i in range(months):
        days_remaining = days - i * DAYS_PER_MONTH
        if days_remaining > 0:
            total += monthly_contribution * growth_factor**days_remaining
    return total


def compute_compound_growth(
    principal: Any,
    monthly_contribution: Any,
    annual_rate: Any,
    days: int,
) -> CompoundGrowth:
    """Project a principal plus monthly contributions over a number of days.

    Steps:
    1. daily = annual_rate / 100 / 365
    2. principal_growth = principal * (1 + daily) ** days
    3. contribution growth summed per whole month (see contribution_growth)
    4. total_contributed = principal + floor(days / 30) * monthly_contribution
    5. final_balance = round(principal_growth + contribution growth)
    6. interest_earned = round(final_balance - total_contributed)

    Negative inputs are not rejected here; callers clamp first.

    Args:
        principal: Initial amount.
        monthly_contribution: Recurring monthly deposit.
        annual_rate: APY as a percent (8.0 means 8%).
        days: Projection length in days.

    Returns:
        CompoundGrowth with cent-rounded figures.
    """
    principal = to_decimal(principal)
    monthly_contribution = to_decimal(monthly_contribution)
    annual_rate = to_decimal(annual_rate)
    months = days // DAYS_PER_MONTH

    # A base-precision pass only measures how many digits compounding adds
    with localcontext(working_context(0)):
        growth_digits = integer_digits((_ONE + daily_rate(annual_rate)) ** days)

    amount_digits = max(
        integer_digits(principal),
        integer_digits(monthly_contribution) + len(str(months)),
    )
    with localcontext(working_context(amount_digits + growth_digits + 1)):
        rate_per_day = daily_rate(annual_rate)
        principal_growth = principal * (_ONE + rate_per_day) ** days
        contributions = contribution_growth(monthly_contribution, rate_per_day, days)
        total_contributed = principal + months * monthly_contribution
        final_balance = round_cents(principal_growth + contributions)

    return CompoundGrowth(
        final_balance=final_balance,
        interest_earned=subtract_cents(final_balance, total_contributed),
        total_contributed=round_cents(total_contributed),
    )


def compute_projection(
    investment: InvestmentInput,
    apy: Any,
    timeframe: ProjectionTimeframe | str,
) -> ProjectionResult:
    """Project an investment at one APY over one named timeframe.

    growth_percentage is interest relative to everything paid in, using the
    rounded figures; it is 0 when nothing was paid in.

    Raises:
        ValueError: If timeframe is not a known tag.
    """
    timeframe = ProjectionTimeframe(timeframe)
    days = timeframe_days(timeframe)

    growth = compute_compound_growth(
        investment.initial_amount,
        investment.monthly_contribution,
        apy,
        days,
    )

    return ProjectionResult(
        timeframe=timeframe,
        days=days,
        final_balance=growth.final_balance,
        total_contributed=growth.total_contributed,
        interest_earned=growth.interest_earned,
        growth_percentage=percentage_of(
            growth.final_balance - growth.total_contributed,
            growth.total_contributed,
        ),
    )
