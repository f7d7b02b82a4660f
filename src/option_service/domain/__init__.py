"""Domain models, entity catalog, and exceptions."""

from option_service.domain.exceptions import (
    AppError,
    InvalidInput,
    NullInput,
    ResourceError,
    NotFound,
    AlreadyExists,
    AlreadyDeleted,
    DatabaseError,
)
from option_service.domain.models import (
    Active,
    Deleted,
    LifecycleState,
    lifecycle_of,
    utcnow,
)

__all__ = [
    # Exceptions
    "AppError",
    "InvalidInput",
    "NullInput",
    "ResourceError",
    "NotFound",
    "AlreadyExists",
    "AlreadyDeleted",
    "DatabaseError",
    # Lifecycle
    "Active",
    "Deleted",
    "LifecycleState",
    "lifecycle_of",
    "utcnow",
]
