"""
Error handling for the option API.

This module provides:
- Exception handlers for all AppError subclasses
- Structured error responses with error codes and request IDs
- Field-level details for request validation errors
- Mapping of database failures to 503
- Sentry reporting and traceback logging for 5xx errors
- Production-safe messages for unexpected errors

Usage:
    from fastapi import FastAPI
    from option_service.api.middleware.errors import register_error_handlers

    app = FastAPI()
    register_error_handlers(app)
"""

import logging
import uuid
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from option_service.api.schemas.errors import ErrorCode, ErrorDetail, FieldError
from option_service.config.settings import Settings, get_settings
from option_service.domain.exceptions import AppError, DatabaseError
from option_service.infrastructure.observability.error_tracking import capture_exception


logger = logging.getLogger(__name__)

# Friendlier messages for the most common pydantic error types
VALIDATION_MESSAGES = {
    "missing": "This field is required",
    "string_type": "Must be a valid string",
    "string_too_short": "Must not be empty",
    "string_too_long": "Must be at most 255 characters",
    "int_type": "Must be a valid integer",
    "int_parsing": "Must be a valid integer",
    "list_type": "Must be a list",
}


def _get_request_id(request: Request) -> str:
    """Request ID set by RequestIDMiddleware, falling back to a new one."""
    if hasattr(request.state, "request_id"):
        return request.state.request_id

    request_id = request.headers.get("x-request-id")
    if request_id:
        return request_id

    return str(uuid.uuid4())


def _create_error_response(
    error_code: ErrorCode,
    message: str,
    request_id: str,
    status_code: int,
    details: Optional[list[FieldError]] = None,
    context: Optional[dict[str, Any]] = None,
    suggested_action: Optional[str] = None,
    is_production: bool = False,
) -> JSONResponse:
    """
    Create standardized error response.

    Body shape: ``{"error": {code, message, details?, context?}, "request_id", "suggested_action"?}``
    """
    if is_production and status_code >= 500:
        message = "An internal error occurred. Please try again later."
        context = None

    error_detail = ErrorDetail(
        code=error_code,
        message=message,
        details=details,
        context=context,
    )

    response_content: dict[str, Any] = {
        "error": error_detail.model_dump(mode="json", exclude_none=True),
        "request_id": request_id,
    }

    if suggested_action:
        response_content["suggested_action"] = suggested_action

    return JSONResponse(
        status_code=status_code,
        content=response_content,
    )


def _log_error(
    request: Request,
    error: Exception,
    status_code: int,
    request_id: str,
) -> None:
    """Log server errors with traceback, client errors at info level."""
    log_context = {
        "request_id": request_id,
        "path": request.url.path,
        "method": request.method,
        "status_code": status_code,
        "error_type": type(error).__name__,
    }

    if request.query_params:
        log_context["query_params"] = dict(request.query_params)

    if status_code >= 500:
        logger.error(
            f"Server error: {error}",
            extra=log_context,
            exc_info=error,
        )
    else:
        logger.info(
            f"Client error: {error}",
            extra=log_context,
        )


def _send_to_sentry(request: Request, error: Exception, request_id: str) -> None:
    capture_exception(
        error,
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_type": type(error).__name__,
            "request_id": request_id,
        },
    )


def register_error_handlers(app: FastAPI, settings: Optional[Settings] = None) -> None:
    """
    Register all error handlers for the FastAPI application.

    Args:
        app: FastAPI application instance
        settings: Settings used to decide how much detail to expose
    """
    settings = settings or get_settings()

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        """Translate service exceptions (NotFound, AlreadyExists, ...) to their status code."""
        request_id = _get_request_id(request)

        _log_error(request, exc, exc.status_code, request_id)
        if exc.status_code >= 500:
            _send_to_sentry(request, exc, request_id)

        return _create_error_response(
            error_code=exc.error_code,
            message=exc.message,
            request_id=request_id,
            status_code=exc.status_code,
            context=exc.details if exc.details else None,
            suggested_action=exc.suggested_action,
            is_production=settings.is_production,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Convert request validation errors to field-level 400 responses."""
        request_id = _get_request_id(request)

        field_errors = []
        for error in exc.errors():
            error_type = error.get("type", "")
            input_value = error.get("input")
            field_errors.append(
                FieldError(
                    field=".".join(str(loc) for loc in error.get("loc", [])),
                    message=VALIDATION_MESSAGES.get(error_type, error.get("msg", "Validation error")),
                    code=error_type.upper().replace(".", "_"),
                    value=input_value if isinstance(input_value, (str, int, float, bool)) else None,
                )
            )

        logger.info(
            f"Validation error: {len(field_errors)} field(s) failed validation",
            extra={
                "request_id": request_id,
                "path": request.url.path,
                "method": request.method,
                "field_count": len(field_errors),
            },
        )

        return _create_error_response(
            error_code=ErrorCode.VALIDATION_ERROR,
            message="Request validation failed",
            request_id=request_id,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=field_errors,
            suggested_action="Please check your input and ensure all required fields are provided correctly",
            is_production=settings.is_production,
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """Persistence failures are fatal for the request; nothing is retried."""
        request_id = _get_request_id(request)
        error = DatabaseError(details={"exception_type": type(exc).__name__})

        _log_error(request, exc, error.status_code, request_id)
        _send_to_sentry(request, exc, request_id)

        return _create_error_response(
            error_code=error.error_code,
            message=error.message,
            request_id=request_id,
            status_code=error.status_code,
            context=error.details,
            suggested_action=error.suggested_action,
            is_production=settings.is_production,
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Safe fallback for unexpected errors."""
        request_id = _get_request_id(request)

        _log_error(request, exc, status.HTTP_500_INTERNAL_SERVER_ERROR, request_id)
        _send_to_sentry(request, exc, request_id)

        error_message = "An unexpected error occurred"
        context = None
        if not settings.is_production:
            error_message = f"An unexpected error occurred: {exc}"
            context = {
                "exception_type": type(exc).__name__,
                "exception_message": str(exc),
            }

        return _create_error_response(
            error_code=ErrorCode.INTERNAL_ERROR,
            message=error_message,
            request_id=request_id,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            context=context,
            suggested_action="Please try again later. If the problem persists, contact support",
            is_production=settings.is_production,
        )
