"""
Field-by-field conversion between transport schemas and table models.

Kept explicit so a renamed field breaks loudly instead of being silently
skipped: every name in ``entity.value_fields`` must exist on both sides.
"""
from typing import Any, Sequence

from option_service.api.schemas.options import OptionCreate, OptionRead
from option_service.domain.entities import OptionEntity
from option_service.infrastructure.database.base_model import OptionRecord


def _values(entity: OptionEntity, source: Any) -> dict[str, Any]:
    return {field: getattr(source, field) for field in entity.value_fields}


def to_record(entity: OptionEntity, payload: OptionCreate) -> OptionRecord:
    """New, id-less record from a create payload."""
    return entity.model(**_values(entity, payload))


def to_update_record(entity: OptionEntity, payload: OptionCreate) -> OptionRecord:
    """Record carrying the id and new values from an update payload."""
    return entity.model(id=payload.id, **_values(entity, payload))


def to_read(entity: OptionEntity, read_schema: type[OptionRead], record: OptionRecord) -> OptionRead:
    return read_schema(
        id=record.id,
        **_values(entity, record),
        created_at=record.created_at,
        updated_at=record.updated_at,
        deleted_at=record.deleted_at,
    )


def to_read_many(
    entity: OptionEntity,
    read_schema: type[OptionRead],
    records: Sequence[OptionRecord],
) -> list[OptionRead]:
    return [to_read(entity, read_schema, record) for record in records]
