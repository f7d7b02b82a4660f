"""
Observability infrastructure for the option service.

This package provides:
- Structured logging (structlog)
- Error tracking with Sentry
"""

from option_service.infrastructure.observability.logging import (
    configure_logging,
    get_logger,
    logger,
)
from option_service.infrastructure.observability.error_tracking import (
    init_sentry,
    capture_exception,
    flush,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "logger",
    "init_sentry",
    "capture_exception",
    "flush",
]
