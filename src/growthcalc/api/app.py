"""FastAPI application factory for the projection JSON API."""

from __future__ import annotations

from fastapi import FastAPI

from growthcalc.api import routes
from growthcalc.config import AppSettings


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings. Loaded from the environment when None.

    Returns:
        Configured FastAPI application with the calculator routes under /api.
    """
    if settings is None:
        settings = AppSettings()

    app = FastAPI(title="Future You Growth Calculator")

    # Route handlers read calculator defaults and bounds from app state
    app.state.settings = settings

    app.include_router(routes.router, prefix="/api")

    return app
