"""Tests for caller-side input clamping."""

from decimal import Decimal

from growthcalc.config import CalculatorSettings
from growthcalc.inputs import InputBounds, clamp_amount, clamp_input, snap_to_step


class TestClampAmount:
    def test_within_range(self) -> None:
        assert clamp_amount(50, Decimal("0"), Decimal("100")) == Decimal("50")

    def test_below_min(self) -> None:
        assert clamp_amount(-10, Decimal("0"), Decimal("100")) == Decimal("0")

    def test_above_max(self) -> None:
        assert clamp_amount(250.5, Decimal("0"), Decimal("100")) == Decimal("100")


class TestSnapToStep:
    def test_rounds_down(self) -> None:
        assert snap_to_step(Decimal("23"), Decimal("5")) == Decimal("20")

    def test_on_grid(self) -> None:
        assert snap_to_step(Decimal("25"), Decimal("5")) == Decimal("25")

    def test_anchor(self) -> None:
        assert snap_to_step(Decimal("9"), Decimal("5"), anchor=Decimal("2")) == Decimal("7")

    def test_zero_step(self) -> None:
        assert snap_to_step(Decimal("23.7"), Decimal("0")) == Decimal("23.7")


class TestClampInput:
    """Tests for clamp_input with the default calculator bounds."""

    def test_negative_amounts(self) -> None:
        investment = clamp_input(-10, -3, "EUR")
        assert investment.initial_amount == Decimal("0")
        assert investment.monthly_contribution == Decimal("5")
        assert investment.currency == "EUR"

    def test_above_max(self) -> None:
        investment = clamp_input(2_000_000, 1_000_000, "USD")
        assert investment.initial_amount == Decimal("1000000")
        assert investment.monthly_contribution == Decimal("500000")

    def test_monthly_snapped_to_step(self) -> None:
        investment = clamp_input(100, 23, "EUR")
        assert investment.initial_amount == Decimal("100")
        assert investment.monthly_contribution == Decimal("20")

    def test_initial_amount_not_snapped(self) -> None:
        investment = clamp_input("1234.56", 25, "BRL")
        assert investment.initial_amount == Decimal("1234.56")
        assert investment.monthly_contribution == Decimal("25")

    def test_custom_bounds(self) -> None:
        bounds = InputBounds(
            min_initial_amount=Decimal("50"),
            max_initial_amount=Decimal("10000"),
            min_monthly_contribution=Decimal("0"),
            max_monthly_contribution=Decimal("100"),
            monthly_contribution_step=Decimal("10"),
        )
        investment = clamp_input(10, 47, "EUR", bounds)
        assert investment.initial_amount == Decimal("50")
        assert investment.monthly_contribution == Decimal("40")

    def test_bounds_from_settings(self) -> None:
        settings = CalculatorSettings(max_initial_amount=Decimal("500"), monthly_contribution_step=Decimal("1"))
        bounds = InputBounds.from_settings(settings)
        assert bounds.max_initial_amount == Decimal("500")
        assert bounds.monthly_contribution_step == Decimal("1")
        assert clamp_input(900, 7, "EUR", bounds).initial_amount == Decimal("500")
