"""Entry point for the growth calculator API.

Loads AppSettings, configures logging and serves the FastAPI app with
uvicorn. The calculator itself is a plain library; this module only
exposes it over HTTP.
"""

import uvicorn

from growthcalc.api import create_app
from growthcalc.config import AppSettings
from growthcalc.logging import get_logger, setup_logging


def main() -> None:
    """Run the API server until interrupted."""
    settings = AppSettings()
    setup_logging(settings.log_level, settings.log_format)
    logger = get_logger(__name__)

    app = create_app(settings)

    logger.info(
        "api_starting",
        host=settings.api.host,
        port=settings.api.port,
        growth_apy=str(settings.calculator.growth_apy),
        baseline_apy=str(settings.calculator.baseline_apy),
    )

    # log_config=None keeps uvicorn on the structlog-configured root handler
    uvicorn.run(app, host=settings.api.host, port=settings.api.port, log_config=None)


if __name__ == "__main__":
    main()
