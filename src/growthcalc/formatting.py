"""Display formatting helpers.

Formatting is presentation only: results keep their Decimal values and
these helpers return strings for templates, API consumers and logs.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from growthcalc.calculator import integer_digits, working_context
from growthcalc.constants import CURRENCY_CONFIG
from growthcalc.models import to_decimal

NBSP = "\u00a0"
DEFAULT_FORMAT_LOCALE = "en-US"

# locale -> (grouping separator, symbol placement)
_LOCALE_STYLES: dict[str, tuple[str, str]] = {
    "en-US": (",", "prefix"),
    "en-GB": (",", "prefix"),
    "de-DE": (".", "suffix"),
    "es-ES": (".", "suffix"),
    "pt-BR": (".", "prefix_spaced"),
}


def get_currency_locale(currency: str) -> str:
    """Return the formatting locale for a currency code (en-US when unknown)."""
    config = CURRENCY_CONFIG.get(currency)
    return config.locale if config else DEFAULT_FORMAT_LOCALE


def format_currency(value: Any, currency: str, locale: str | None = None) -> str:
    """Format an amount in whole currency units.

    Examples: format_currency(1234.5, "USD") -> "$1,235",
    format_currency(1234, "EUR") -> "1.234 €" (non-breaking space).
    Codes missing from CURRENCY_CONFIG are printed as the code itself.

    Args:
        value: Amount to format.
        currency: ISO currency code.
        locale: Formatting locale. Defaults to the currency's own locale.
    """
    if locale is None:
        locale = get_currency_locale(currency)
    separator, placement = _LOCALE_STYLES.get(locale, _LOCALE_STYLES[DEFAULT_FORMAT_LOCALE])

    amount = to_decimal(value)
    amount = amount.quantize(
        Decimal("1"),
        rounding=ROUND_HALF_UP,
        context=working_context(integer_digits(amount)),
    )
    sign = "-" if amount < 0 else ""
    digits = f"{amount.copy_abs():,}".replace(",", separator)

    config = CURRENCY_CONFIG.get(currency)
    symbol = config.symbol if config else currency

    if placement == "suffix":
        return f"{sign}{digits}{NBSP}{symbol}"
    if placement == "prefix_spaced" or symbol.isalpha():
        return f"{sign}{symbol}{NBSP}{digits}"
    return f"{sign}{symbol}{digits}"


def format_percentage(value: Any, decimals: int = 1) -> str:
    """Format a percent value, e.g. format_percentage(12.345) -> "12.3%"."""
    amount = to_decimal(value)
    context = working_context(integer_digits(amount) + decimals)
    quantum = Decimal(1).scaleb(-decimals, context=context)
    return f"{amount.quantize(quantum, rounding=ROUND_HALF_UP, context=context):f}%"
