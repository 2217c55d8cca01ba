"""Configuration system using pydantic-settings with environment variable loading."""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict

from growthcalc.constants import CALCULATOR_CONFIG, DEFAULT_LOCALE


class CalculatorSettings(BaseSettings):
    """Calculator defaults and input bounds served by the API.

    Defaults mirror CALCULATOR_CONFIG so the library constants and a
    deployment without overrides always agree.
    """

    model_config = SettingsConfigDict(env_prefix="CALCULATOR_")

    default_locale: str = DEFAULT_LOCALE
    default_currency: str = CALCULATOR_CONFIG.default_currency
    default_initial_amount: Decimal = CALCULATOR_CONFIG.default_initial_amount
    default_monthly_contribution: Decimal = CALCULATOR_CONFIG.default_monthly_contribution

    # Input bounds (applied by the caller before the engine runs)
    min_initial_amount: Decimal = CALCULATOR_CONFIG.min_initial_amount
    max_initial_amount: Decimal = CALCULATOR_CONFIG.max_initial_amount
    min_monthly_contribution: Decimal = CALCULATOR_CONFIG.min_monthly_contribution
    max_monthly_contribution: Decimal = CALCULATOR_CONFIG.max_monthly_contribution
    monthly_contribution_step: Decimal = CALCULATOR_CONFIG.monthly_contribution_step

    # Scenario rates, percent per year
    growth_apy: Decimal = CALCULATOR_CONFIG.growth_apy
    baseline_apy: Decimal = CALCULATOR_CONFIG.baseline_apy


class ApiSettings(BaseSettings):
    """HTTP server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 8080


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    log_format: str = "console"  # "console" or "json"
    calculator: CalculatorSettings = CalculatorSettings()
    api: ApiSettings = ApiSettings()
