"""
Sentry error tracking integration.

Only server errors (5xx) are reported; expected client errors such as a
missing option or a duplicate name are filtered out before sending.

Usage:
    from option_service.infrastructure.observability.error_tracking import (
        init_sentry,
        capture_exception,
    )

    init_sentry(
        dsn=settings.sentry_dsn,
        environment=settings.sentry_environment,
        release=settings.app_version,
    )

    try:
        risky_operation()
    except SQLAlchemyError as e:
        capture_exception(e, extra={"entity": "tender_status_option"})
"""

import logging
from typing import Any, Literal, Optional

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration


# Sensitive header names to filter
SENSITIVE_HEADERS = {
    "authorization",
    "cookie",
    "x-api-key",
}


def _should_ignore_error(event: dict, hint: dict) -> Optional[dict]:
    """
    Drop events for expected client errors (400-level) and validation errors.

    Returns:
        Event if it should be sent, None if it should be ignored
    """
    if "exc_info" in hint:
        exc_type, exc_value, tb = hint["exc_info"]

        status_code = getattr(exc_value, "status_code", None)
        if isinstance(status_code, int) and 400 <= status_code < 500:
            return None

        if exc_type.__name__ in ("ValidationError", "RequestValidationError"):
            return None

    return event


def _filter_sensitive_data(event: dict, hint: dict) -> dict:
    """Replace sensitive request headers with a placeholder."""
    if "request" in event and "headers" in event["request"]:
        headers = event["request"]["headers"]
        event["request"]["headers"] = {
            key: "[Filtered]" if key.lower() in SENSITIVE_HEADERS else value
            for key, value in headers.items()
        }
    return event


def _before_send(event: dict, hint: dict) -> Optional[dict]:
    event = _should_ignore_error(event, hint)
    if event is None:
        return None
    return _filter_sensitive_data(event, hint)


def init_sentry(
    dsn: Optional[str] = None,
    environment: Optional[str] = None,
    release: Optional[str] = None,
    sample_rate: float = 1.0,
    traces_sample_rate: float = 0.0,
) -> bool:
    """
    Initialize Sentry SDK.

    Args:
        dsn: Sentry DSN (Data Source Name). If None, Sentry is disabled.
        environment: Environment name (e.g., "prod", "staging", "dev")
        release: Release version/identifier
        sample_rate: Error sampling rate (0.0 to 1.0)
        traces_sample_rate: Performance tracing sample rate (0.0 to 1.0)

    Returns:
        True if Sentry was initialized, False when no DSN is configured
    """
    if not dsn:
        logging.info("Sentry DSN not provided. Error tracking disabled.")
        return False

    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        release=release,
        integrations=[
            FastApiIntegration(
                transaction_style="endpoint",
                failed_request_status_codes={*range(500, 600)},
            ),
            LoggingIntegration(
                level=logging.INFO,
                event_level=logging.ERROR,
            ),
            SqlalchemyIntegration(),
        ],
        sample_rate=sample_rate,
        traces_sample_rate=traces_sample_rate,
        before_send=_before_send,
        attach_stacktrace=True,
        send_default_pii=False,
        max_breadcrumbs=50,
    )

    logging.info(
        f"Sentry initialized. Environment: {environment}, "
        f"Release: {release}, Sample rate: {sample_rate}"
    )
    return True


def capture_exception(
    error: Exception,
    extra: Optional[dict[str, Any]] = None,
    level: Literal["fatal", "error", "warning", "info", "debug"] = "error",
) -> Optional[str]:
    """
    Capture an exception and send it to Sentry.

    Returns:
        Event ID if the error was sent to Sentry, None otherwise
    """
    if not sentry_sdk.is_initialized():
        return None

    with sentry_sdk.new_scope() as scope:
        scope.level = level
        for key, value in (extra or {}).items():
            scope.set_extra(key, value)
        return sentry_sdk.capture_exception(error)


def flush(timeout: float = 2.0) -> None:
    """Send pending events before shutdown."""
    if sentry_sdk.is_initialized():
        sentry_sdk.flush(timeout=timeout)
