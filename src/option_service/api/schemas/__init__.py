"""API request/response schemas."""

from option_service.api.schemas.errors import (
    ErrorCode,
    ErrorDetail,
    FieldError,
)

__all__ = [
    "ErrorCode",
    "ErrorDetail",
    "FieldError",
]
