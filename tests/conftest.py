"""Shared test fixtures for the growth calculator."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from growthcalc.api import create_app
from growthcalc.config import ApiSettings, AppSettings, CalculatorSettings
from growthcalc.models import InvestmentInput


@pytest.fixture
def app_settings() -> AppSettings:
    """Return AppSettings with library defaults and debug logging."""
    return AppSettings(
        log_level="DEBUG",
        calculator=CalculatorSettings(),
        api=ApiSettings(host="127.0.0.1", port=8081),
    )


@pytest.fixture
def client(app_settings: AppSettings) -> TestClient:
    """TestClient bound to a freshly built API app."""
    return TestClient(create_app(app_settings))


@pytest.fixture
def monthly_saver() -> InvestmentInput:
    """Default calculator input: nothing up front, 20 EUR per month."""
    return InvestmentInput(
        initial_amount=Decimal("0"),
        monthly_contribution=Decimal("20"),
        currency="EUR",
    )


@pytest.fixture
def lump_sum() -> InvestmentInput:
    """1000 EUR up front, no monthly contributions."""
    return InvestmentInput(
        initial_amount=Decimal("1000"),
        monthly_contribution=Decimal("0"),
        currency="EUR",
    )
