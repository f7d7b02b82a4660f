"""
Exception hierarchy for the option service.

Every exception maps to an HTTP status code and an ErrorCode so the global
error handlers can translate it without any per-route handling.

All exceptions inherit from AppError which provides:
- error_code: Machine-readable error code (from ErrorCode enum)
- status_code: HTTP status code for API responses
- message: Human-readable error message
- details: Optional dictionary with additional context
- suggested_action: Optional user-friendly suggestion for resolution

Usage:
    from option_service.domain.exceptions import NotFound, AlreadyExists

    raise NotFound(
        "Tender status option not found with id: TENDER_STATUS_OPT_1",
        details={"entity": "tender_status_option", "id": "TENDER_STATUS_OPT_1"},
    )
"""

from typing import Any, Optional
from option_service.api.schemas.errors import ErrorCode


class AppError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        error_code: Machine-readable error code (from ErrorCode enum)
        status_code: HTTP status code (default: 500)
        message: Human-readable error message
        details: Optional dictionary with additional error context
        suggested_action: Optional user-friendly suggestion for resolution
    """

    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR
    status_code: int = 500
    default_message: str = "An unexpected error occurred"
    default_suggested_action: Optional[str] = None

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        suggested_action: Optional[str] = None,
    ):
        self.message = message or self.default_message
        self.details = details or {}
        self.suggested_action = suggested_action or self.default_suggested_action
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"error_code={self.error_code.value}, "
            f"status_code={self.status_code}, "
            f"message={self.message!r}, "
            f"details={self.details!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for serialization.

        Returns:
            Dictionary with error information
        """
        result = {
            "error_code": self.error_code.value,
            "message": self.message,
        }

        if self.details:
            result["details"] = self.details

        if self.suggested_action:
            result["suggested_action"] = self.suggested_action

        return result


# ========================================
# Input Errors (400)
# ========================================


class InvalidInput(AppError):
    """A required argument is empty or malformed."""

    status_code = 400
    error_code = ErrorCode.INVALID_INPUT
    default_message = "Invalid input"
    default_suggested_action = "Please provide at least one item and try again"


class NullInput(InvalidInput):
    """A required argument is missing."""

    error_code = ErrorCode.NULL_INPUT
    default_message = "Required input is missing"
    default_suggested_action = "Please provide the required value and try again"


# ========================================
# Resource Errors (404, 409)
# ========================================


class ResourceError(AppError):
    """Base class for option resource errors."""

    pass


class NotFound(ResourceError):
    """Option is absent, or soft-deleted where an active option was required."""

    status_code = 404
    error_code = ErrorCode.NOT_FOUND
    default_message = "Resource not found"
    default_suggested_action = "Please verify the id and try again"


class AlreadyExists(ResourceError):
    """An active option with the same name already exists."""

    status_code = 409
    error_code = ErrorCode.ALREADY_EXISTS
    default_message = "Resource already exists"
    default_suggested_action = "Please use a different name"


class AlreadyDeleted(ResourceError):
    """Option was already soft-deleted."""

    status_code = 409
    error_code = ErrorCode.ALREADY_DELETED
    default_message = "Resource is already deleted"
    default_suggested_action = "Use the hard delete endpoint to remove it permanently"


# ========================================
# Infrastructure Errors (503)
# ========================================


class DatabaseError(AppError):
    """Database operation failed."""

    status_code = 503
    error_code = ErrorCode.DATABASE_UNAVAILABLE
    default_message = "Database is temporarily unavailable"
    default_suggested_action = "Please try again later"
