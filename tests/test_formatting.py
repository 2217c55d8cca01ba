"""Tests for display formatting helpers."""

from decimal import Decimal

import pytest

from growthcalc.formatting import NBSP, format_currency, format_percentage, get_currency_locale


class TestGetCurrencyLocale:
    @pytest.mark.parametrize(
        "currency,locale",
        [("USD", "en-US"), ("EUR", "de-DE"), ("BRL", "pt-BR"), ("GBP", "en-GB"), ("JPY", "en-US")],
    )
    def test_mapping(self, currency: str, locale: str) -> None:
        assert get_currency_locale(currency) == locale


class TestFormatCurrency:
    def test_usd_whole_units(self) -> None:
        assert format_currency(Decimal("1234.5"), "USD") == "$1,235"

    def test_eur_suffix(self) -> None:
        assert format_currency(Decimal("1234"), "EUR") == f"1.234{NBSP}€"

    def test_brl_prefix_spaced(self) -> None:
        assert format_currency(1234567, "BRL") == f"R${NBSP}1.234.567"

    def test_gbp(self) -> None:
        assert format_currency(999.49, "GBP") == "£999"

    def test_explicit_locale(self) -> None:
        assert format_currency(1234, "EUR", "en-US") == "€1,234"

    def test_unknown_currency_uses_code(self) -> None:
        assert format_currency(100, "CHF") == f"CHF{NBSP}100"

    def test_negative(self) -> None:
        assert format_currency(-50, "USD") == "-$50"

    def test_beyond_default_precision(self) -> None:
        assert format_currency(Decimal("1e30"), "USD") == "$1" + ",000" * 10

    def test_does_not_change_value(self) -> None:
        value = Decimal("1083.28")
        format_currency(value, "EUR")
        assert value == Decimal("1083.28")


class TestFormatPercentage:
    def test_default_one_decimal(self) -> None:
        assert format_percentage(Decimal("12.345")) == "12.3%"

    def test_half_rounds_up(self) -> None:
        assert format_percentage(Decimal("8.25"), 1) == "8.3%"

    def test_two_decimals(self) -> None:
        assert format_percentage(8.25, 2) == "8.25%"

    def test_zero_decimals(self) -> None:
        assert format_percentage(5, 0) == "5%"

    def test_large_value(self) -> None:
        assert format_percentage(Decimal("123456789012345678901234567.891")) == "123456789012345678901234567.9%"
