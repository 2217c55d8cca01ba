"""structlog setup for the growth calculator.

The engine logs through structlog loggers from get_logger(). The API server
(growthcalc.main) calls setup_logging() once at startup; uvicorn runs with
log_config=None, so its stdlib access and error records reach the same root
handler and come out in the same console or JSON format as the
projection_calculated events.
"""

import logging

import structlog


def _pre_chain() -> list[structlog.types.Processor]:
    # applied to structlog events and to foreign stdlib records alike
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format.lower() == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(log_level: str = "INFO", log_format: str = "console") -> None:
    """Install one root handler that renders every record through structlog.

    Args:
        log_level: Root level name from AppSettings.log_level. Unknown names
            fall back to INFO.
        log_format: "json" for log shippers; any other value uses the
            colored console renderer. Comes from AppSettings.log_format.
    """
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_format),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Logger for a growthcalc module, e.g. get_logger(__name__)."""
    return structlog.get_logger(name)
