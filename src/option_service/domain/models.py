"""
Lifecycle state of an option record.

An option is either active or soft-deleted. The database stores this as a
nullable ``deleted_at`` column; code that needs to branch on the state should
go through ``lifecycle_of`` instead of comparing the column against ``None``.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol, Union


def utcnow() -> datetime:
    """Aware UTC timestamp used for every stored timestamp."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Active:
    """Record is visible to the default read paths."""


@dataclass(frozen=True)
class Deleted:
    """Record was soft-deleted at ``at``."""

    at: datetime


LifecycleState = Union[Active, Deleted]


class HasDeletedAt(Protocol):
    deleted_at: datetime | None


def lifecycle_of(record: HasDeletedAt) -> LifecycleState:
    """Derive the lifecycle state from the ``deleted_at`` column."""
    if record.deleted_at is None:
        return Active()
    return Deleted(at=record.deleted_at)
