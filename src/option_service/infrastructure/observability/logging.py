"""
Structured logging configuration.

Use `logger` or `get_logger()` from this module, not print() or logging.getLogger().
"""
from typing import Optional
import logging

import structlog

from option_service.config.settings import Settings, get_settings
from option_service.api.middleware.request_id import add_request_id_to_log


def console_renderer_with_colors():
    """Console renderer with colors for local development."""
    return structlog.dev.ConsoleRenderer(
        colors=True,
        pad_event=25,
        exception_formatter=structlog.dev.plain_traceback,
    )


def json_renderer():
    """JSON renderer for deployed environments."""
    return structlog.processors.JSONRenderer()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure structured logging.

    This sets up:
    - Context variable merging
    - Request ID and correlation ID on every entry
    - ISO timestamps and log level
    - JSON output, or colored console output when LOG_FORMAT=console
    - Level filtering from LOG_LEVEL

    Stdlib loggers (SQLAlchemy, uvicorn, the database manager) are routed to
    the same level so their output is not lost.
    """
    settings = settings or get_settings()

    if settings.log_format == "json":
        renderer = json_renderer()
    else:
        renderer = console_renderer_with_colors()

    processors = [
        structlog.contextvars.merge_contextvars,
        add_request_id_to_log,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(level=settings.log_level, format="%(message)s")


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """
    Get a logger instance with structured logging support.

    Usage:
        >>> from option_service.infrastructure.observability.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("option.created", entity="tender_status_option", id="TENDER_STATUS_OPT_1")
    """
    return structlog.get_logger(name)


# Convenience export
logger = get_logger()
