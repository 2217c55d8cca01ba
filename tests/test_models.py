"""Tests for value types: Decimal conversion, immutability, serialization."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from growthcalc.models import InvestmentInput, ProjectionTimeframe, RateScenario, to_decimal


class TestToDecimal:
    def test_float_goes_through_str(self) -> None:
        assert to_decimal(0.1) == Decimal("0.1")

    def test_decimal_passthrough(self) -> None:
        value = Decimal("2.59")
        assert to_decimal(value) is value

    def test_int_and_str(self) -> None:
        assert to_decimal(20) == Decimal("20")
        assert to_decimal("8.0") == Decimal("8.0")


class TestProjectionTimeframe:
    def test_values(self) -> None:
        assert [tf.value for tf in ProjectionTimeframe] == [
            "1week",
            "1month",
            "1year",
            "5years",
            "10years",
            "20years",
        ]

    def test_closed(self) -> None:
        with pytest.raises(ValueError):
            ProjectionTimeframe("1decade")


class TestInvestmentInput:
    def test_converts_amounts(self) -> None:
        investment = InvestmentInput(initial_amount=1000.5, monthly_contribution=20, currency="EUR")
        assert investment.initial_amount == Decimal("1000.5")
        assert isinstance(investment.monthly_contribution, Decimal)

    def test_structural_equality(self) -> None:
        a = InvestmentInput(initial_amount=100, monthly_contribution=5, currency="USD")
        b = InvestmentInput(initial_amount=Decimal("100"), monthly_contribution=Decimal("5"), currency="USD")
        assert a == b

    def test_frozen(self) -> None:
        investment = InvestmentInput(initial_amount=100, monthly_contribution=5, currency="USD")
        with pytest.raises(FrozenInstanceError):
            investment.initial_amount = Decimal("1")  # type: ignore[misc]


class TestRateScenario:
    def test_with_apy_returns_copy(self) -> None:
        scenario = RateScenario(id="bank", name="Bank", apy=Decimal("0.5"), is_bank=True)
        updated = scenario.with_apy(6.71)
        assert updated.apy == Decimal("6.71")
        assert updated.is_bank is True
        assert scenario.apy == Decimal("0.5")

    def test_to_dict(self) -> None:
        scenario = RateScenario(id="defi", name="DeFi Yield", apy=8)
        assert scenario.to_dict() == {
            "id": "defi",
            "name": "DeFi Yield",
            "apy": "8",
            "description": None,
            "is_bank": False,
        }
