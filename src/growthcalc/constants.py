"""Static lookup tables for the growth calculator.

Pure data plus two lookups (timeframe_days, get_locale_config). Nothing in
this module computes projections.

Day counts use 365-day years and 30-day months throughout. They are not
calendar accurate and must stay that way: every projection output depends
on them.
"""

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType

from growthcalc.models import ProjectionTimeframe, RateScenario


@dataclass(frozen=True)
class CalculatorConfig:
    """Default inputs, input bounds and scenario rates."""

    default_currency: str
    default_initial_amount: Decimal
    default_monthly_contribution: Decimal
    min_initial_amount: Decimal
    max_initial_amount: Decimal
    min_monthly_contribution: Decimal
    max_monthly_contribution: Decimal
    monthly_contribution_step: Decimal
    growth_apy: Decimal
    baseline_apy: Decimal


@dataclass(frozen=True)
class LocaleConfig:
    """Currency and baseline savings rate for a site locale."""

    currency: str
    baseline_apy: Decimal


@dataclass(frozen=True)
class CurrencyConfig:
    """Display symbol and formatting locale for a currency code."""

    symbol: str
    locale: str


CALCULATOR_CONFIG = CalculatorConfig(
    default_currency="EUR",
    default_initial_amount=Decimal("0"),
    default_monthly_contribution=Decimal("20"),
    min_initial_amount=Decimal("0"),
    max_initial_amount=Decimal("1000000"),
    min_monthly_contribution=Decimal("5"),
    max_monthly_contribution=Decimal("500000"),
    monthly_contribution_step=Decimal("5"),
    growth_apy=Decimal("8.0"),  # stablecoin lending average
    baseline_apy=Decimal("0.5"),  # ECB average savings rate
)

GROWTH_SCENARIO = RateScenario(
    id="defi",
    name="DeFi Yield",
    apy=CALCULATOR_CONFIG.growth_apy,
    description="Average stablecoin lending rate",
    is_bank=False,
)

BASELINE_SCENARIO = RateScenario(
    id="bank",
    name="Traditional Bank",
    apy=CALCULATOR_CONFIG.baseline_apy,
    description="Average savings account rate",
    is_bank=True,
)

TIMEFRAME_DAYS: MappingProxyType[ProjectionTimeframe, int] = MappingProxyType({
    ProjectionTimeframe.ONE_WEEK: 7,
    ProjectionTimeframe.ONE_MONTH: 30,
    ProjectionTimeframe.ONE_YEAR: 365,
    ProjectionTimeframe.FIVE_YEARS: 1825,
    ProjectionTimeframe.TEN_YEARS: 3650,
    ProjectionTimeframe.TWENTY_YEARS: 7300,
})

# FIVE_YEARS anchors both groupings and must stay in both.
SHORT_TERM_TIMEFRAMES: tuple[ProjectionTimeframe, ...] = (
    ProjectionTimeframe.ONE_WEEK,
    ProjectionTimeframe.ONE_MONTH,
    ProjectionTimeframe.ONE_YEAR,
    ProjectionTimeframe.FIVE_YEARS,
)
LONG_TERM_TIMEFRAMES: tuple[ProjectionTimeframe, ...] = (
    ProjectionTimeframe.FIVE_YEARS,
    ProjectionTimeframe.TEN_YEARS,
    ProjectionTimeframe.TWENTY_YEARS,
)

DEFAULT_LOCALE = "en"

LOCALE_CONFIG: MappingProxyType[str, LocaleConfig] = MappingProxyType({
    "en": LocaleConfig(currency="USD", baseline_apy=Decimal("0.45")),  # US high-yield savings
    "de": LocaleConfig(currency="EUR", baseline_apy=Decimal("2.59")),  # ECB deposit rate
    "es": LocaleConfig(currency="EUR", baseline_apy=Decimal("2.59")),
    "pt-BR": LocaleConfig(currency="BRL", baseline_apy=Decimal("6.71")),  # poupanca
})

CURRENCY_CONFIG: MappingProxyType[str, CurrencyConfig] = MappingProxyType({
    "USD": CurrencyConfig(symbol="$", locale="en-US"),
    "EUR": CurrencyConfig(symbol="€", locale="de-DE"),
    "BRL": CurrencyConfig(symbol="R$", locale="pt-BR"),
    "GBP": CurrencyConfig(symbol="£", locale="en-GB"),
})


def timeframe_days(timeframe: ProjectionTimeframe | str) -> int:
    """Return the fixed day count for a timeframe tag.

    Raises:
        ValueError: If the tag is not a ProjectionTimeframe value. Unknown
            tags are a caller bug and are never mapped to a default.
    """
    return TIMEFRAME_DAYS[ProjectionTimeframe(timeframe)]


def get_locale_config(locale: str) -> LocaleConfig:
    """Return currency and baseline APY for a locale, falling back to DEFAULT_LOCALE."""
    return LOCALE_CONFIG.get(locale, LOCALE_CONFIG[DEFAULT_LOCALE])


def baseline_scenario_for_locale(locale: str) -> RateScenario:
    """Build the baseline (bank) scenario using the locale's savings rate."""
    return BASELINE_SCENARIO.with_apy(get_locale_config(locale).baseline_apy)
