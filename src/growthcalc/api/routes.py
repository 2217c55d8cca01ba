"""JSON API endpoints for the growth calculator.

All monetary values are returned as strings (Decimal str()) so clients
never see binary float rounding.
"""

from __future__ import annotations

from decimal import Decimal

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from growthcalc.comparison import compute_full_result
from growthcalc.config import CalculatorSettings
from growthcalc.constants import (
    BASELINE_SCENARIO,
    GROWTH_SCENARIO,
    LONG_TERM_TIMEFRAMES,
    SHORT_TERM_TIMEFRAMES,
    TIMEFRAME_DAYS,
    get_locale_config,
)
from growthcalc.formatting import format_currency
from growthcalc.inputs import InputBounds, clamp_input
from growthcalc.models import InvestmentInput, ProjectionTimeframe

log = structlog.get_logger(__name__)

router = APIRouter()


class ProjectionRequest(BaseModel):
    """Body of POST /api/projections.

    locale, when given, supplies the currency and baseline APY unless they
    are set explicitly. clamp=False skips the input bounds.
    """

    initial_amount: Decimal = Field(ge=0)
    monthly_contribution: Decimal = Field(ge=0)
    currency: str | None = None
    locale: str | None = None
    selected_timeframe: ProjectionTimeframe = ProjectionTimeframe.ONE_YEAR
    growth_apy: Decimal | None = Field(default=None, ge=0)
    baseline_apy: Decimal | None = Field(default=None, ge=0)
    clamp: bool = True


def _calculator_settings(request: Request) -> CalculatorSettings:
    return request.app.state.settings.calculator


@router.get("/health")
async def get_health() -> JSONResponse:
    """Liveness probe."""
    return JSONResponse(content={"status": "ok"})


@router.get("/config")
async def get_config(request: Request) -> JSONResponse:
    """Calculator defaults and input bounds for form pre-fill."""
    settings = _calculator_settings(request)
    return JSONResponse(content={
        "default_locale": settings.default_locale,
        "default_currency": settings.default_currency,
        "default_initial_amount": str(settings.default_initial_amount),
        "default_monthly_contribution": str(settings.default_monthly_contribution),
        "min_initial_amount": str(settings.min_initial_amount),
        "max_initial_amount": str(settings.max_initial_amount),
        "min_monthly_contribution": str(settings.min_monthly_contribution),
        "max_monthly_contribution": str(settings.max_monthly_contribution),
        "monthly_contribution_step": str(settings.monthly_contribution_step),
        "growth_apy": str(settings.growth_apy),
        "baseline_apy": str(settings.baseline_apy),
    })


@router.get("/timeframes")
async def get_timeframes() -> JSONResponse:
    """Short-term and long-term timeframe tags with their day counts."""

    def _describe(timeframes: tuple[ProjectionTimeframe, ...]) -> list[dict]:
        return [{"timeframe": tf.value, "days": TIMEFRAME_DAYS[tf]} for tf in timeframes]

    return JSONResponse(content={
        "short_term": _describe(SHORT_TERM_TIMEFRAMES),
        "long_term": _describe(LONG_TERM_TIMEFRAMES),
    })


@router.get("/locales/{locale}")
async def get_locale(locale: str) -> JSONResponse:
    """Currency and baseline APY for a locale (default locale when unknown)."""
    config = get_locale_config(locale)
    return JSONResponse(content={
        "locale": locale,
        "currency": config.currency,
        "baseline_apy": str(config.baseline_apy),
    })


@router.post("/projections")
async def post_projection(request: Request, body: ProjectionRequest) -> JSONResponse:
    """Full growth vs baseline comparison across every timeframe."""
    settings = _calculator_settings(request)

    if body.locale is not None:
        locale_config = get_locale_config(body.locale)
        currency = locale_config.currency
        baseline_apy = locale_config.baseline_apy
    else:
        currency = settings.default_currency
        baseline_apy = settings.baseline_apy

    if body.currency is not None:
        currency = body.currency
    if body.baseline_apy is not None:
        baseline_apy = body.baseline_apy
    growth_apy = body.growth_apy if body.growth_apy is not None else settings.growth_apy

    if body.clamp:
        investment = clamp_input(
            body.initial_amount,
            body.monthly_contribution,
            currency,
            InputBounds.from_settings(settings),
        )
    else:
        investment = InvestmentInput(
            initial_amount=body.initial_amount,
            monthly_contribution=body.monthly_contribution,
            currency=currency,
        )

    result = compute_full_result(
        investment,
        selected_timeframe=body.selected_timeframe,
        growth_scenario=GROWTH_SCENARIO.with_apy(growth_apy),
        baseline_scenario=BASELINE_SCENARIO.with_apy(baseline_apy),
    )

    selected = result.selected
    log.info(
        "projection_calculated",
        locale=body.locale,
        currency=currency,
        selected_timeframe=result.selected_timeframe.value,
        growth_balance=str(selected.growth.final_balance),
        baseline_balance=str(selected.baseline.final_balance),
        clamped=body.clamp,
    )

    content = result.to_dict()
    content["display"] = {
        "growth_balance": format_currency(selected.growth.final_balance, currency),
        "baseline_balance": format_currency(selected.baseline.final_balance, currency),
        "opportunity_cost": format_currency(selected.opportunity_cost, currency),
    }
    return JSONResponse(content=content)
