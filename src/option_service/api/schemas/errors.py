"""Error response schemas and error codes."""

from enum import Enum
from typing import Any
from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """
    Standard error codes for API responses.

    Use these codes consistently across the API for better error handling.
    """

    # ===== Validation Errors (400) =====
    VALIDATION_ERROR = "VALIDATION_ERROR"
    """Input validation failed (400)"""

    INVALID_INPUT = "INVALID_INPUT"
    """Required argument is empty or malformed (400)"""

    NULL_INPUT = "NULL_INPUT"
    """Required argument is missing (400)"""

    # ===== Not Found Errors (404) =====
    NOT_FOUND = "NOT_FOUND"
    """Option not found or soft-deleted (404)"""

    # ===== Conflict Errors (409) =====
    ALREADY_EXISTS = "ALREADY_EXISTS"
    """An active option with the same name exists (409)"""

    ALREADY_DELETED = "ALREADY_DELETED"
    """Option is already soft-deleted (409)"""

    # ===== Server Errors (500) =====
    INTERNAL_ERROR = "INTERNAL_ERROR"
    """Internal server error (500)"""

    # ===== Service Unavailable (503) =====
    DATABASE_UNAVAILABLE = "DATABASE_UNAVAILABLE"
    """Database unavailable (503)"""


class FieldError(BaseModel):
    """
    Detailed error information for a specific field.

    Used in validation errors to provide field-level error details.
    """

    model_config = {"str_strip_whitespace": True}

    field: str = Field(
        ...,
        description="Field name or path (e.g., 'name', 'body.0.description')",
        examples=["name", "body.0.description"]
    )
    message: str = Field(
        ...,
        description="Human-readable error message for this field",
        examples=["This field is required", "String should have at most 255 characters"]
    )
    code: str | None = Field(
        default=None,
        description="Optional machine-readable error code for this field",
        examples=["MISSING", "STRING_TOO_LONG"]
    )
    value: Any | None = Field(
        default=None,
        description="The invalid value that was provided",
    )


class ErrorDetail(BaseModel):
    """
    Detailed error information.

    Provides structured error details including:
    - Error code for programmatic handling
    - Human-readable message
    - Optional field-level validation errors
    - Optional additional context
    """

    model_config = {"str_strip_whitespace": True}

    code: ErrorCode = Field(
        ...,
        description="Machine-readable error code",
        examples=[ErrorCode.NOT_FOUND, ErrorCode.ALREADY_EXISTS]
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Tender status option not found with id: TENDER_STATUS_OPT_1"]
    )
    details: list[FieldError] | None = Field(
        default=None,
        description="Field-level error details (primarily for validation errors)",
    )
    context: dict[str, Any] | None = Field(
        default=None,
        description="Additional error context (e.g., entity, ids)",
        examples=[{"entity": "tender_status_option", "id": "TENDER_STATUS_OPT_1"}]
    )

    @classmethod
    def from_validation_error(
        cls,
        validation_errors: list[dict[str, Any]]
    ) -> "ErrorDetail":
        """
        Create ErrorDetail from Pydantic validation errors.

        Args:
            validation_errors: List of Pydantic validation error dicts

        Returns:
            ErrorDetail with field-level validation errors
        """
        field_errors = []

        for err in validation_errors:
            field_path = ".".join(str(loc) for loc in err.get("loc", []))

            field_errors.append(
                FieldError(
                    field=field_path,
                    message=err.get("msg", "Validation error"),
                    code=err.get("type", "VALIDATION_ERROR").upper(),
                    value=err.get("input")
                )
            )

        return cls(
            code=ErrorCode.VALIDATION_ERROR,
            message="Request validation failed",
            details=field_errors
        )
