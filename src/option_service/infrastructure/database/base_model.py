# src/option_service/infrastructure/database/base_model.py
from datetime import datetime, timezone
from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator
from sqlmodel import SQLModel, Field

from option_service.domain.models import LifecycleState, lifecycle_of, utcnow


class AwareDateTime(TypeDecorator):
    """
    ``DateTime(timezone=True)`` that always hands back UTC-aware values.

    SQLite keeps no offset, so naive values read back are tagged as UTC.
    Naive values on write are rejected; store ``utcnow()`` or another aware
    datetime.
    """
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            raise ValueError("Datetime values must have timezone information")
        return value.astimezone(timezone.utc)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class OptionRecord(SQLModel):
    """
    Columns shared by every option table.

    ``name`` is indexed but not unique: uniqueness only applies among active
    rows and is enforced by the service. Timestamps are aware UTC and set in
    Python so a flushed row never has expired attributes.

    Example:
        class TenderStatusOption(StringIdOption, table=True):
            __tablename__ = "tender_status_option"
    """
    name: str = Field(max_length=255, index=True)
    description: str | None = Field(default=None, max_length=255)
    created_at: datetime = Field(default_factory=utcnow, sa_type=AwareDateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=AwareDateTime)
    deleted_at: datetime | None = Field(default=None, sa_type=AwareDateTime)

    @property
    def state(self) -> LifecycleState:
        return lifecycle_of(self)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class StringIdOption(OptionRecord):
    """Option whose id is generated by the service before insert."""
    id: str | None = Field(default=None, primary_key=True, max_length=100)


class NumericIdOption(OptionRecord):
    """Option whose id is assigned by the database."""
    id: int | None = Field(default=None, primary_key=True)
