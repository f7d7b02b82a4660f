"""
Request and response schemas for option entities.

All option entities share one shape, so the per-entity models are built from
the catalog entry instead of being written out forty times. JSON uses
camelCase (``createdAt``); snake_case input is accepted as well.
"""

from datetime import datetime
from functools import lru_cache
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field, create_model
from pydantic.alias_generators import to_camel

from option_service.domain.entities import OptionEntity
from option_service.domain.models import utcnow

NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 255


class OptionSchema(BaseModel):
    """Base for every option request/response model."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        from_attributes=True,
    )


class OptionCreate(OptionSchema):
    name: str = Field(
        ...,
        min_length=1,
        max_length=NAME_MAX_LENGTH,
        description="Option name, unique among active options",
        examples=["Open"],
    )
    description: str | None = Field(
        default=None,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="Free text description",
        examples=["Tender is open for bids"],
    )


class OptionRead(OptionSchema):
    name: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = Field(
        default=None,
        description="Set when the option is soft-deleted",
    )


class ResponseMessage(BaseModel):
    """
    Envelope returned by create, update and delete endpoints.

    Example Response:
        ```json
        {
            "message": "Tender status option created successfully",
            "status": "200 OK",
            "timestamp": "2024-12-13T10:30:00"
        }
        ```
    """

    message: str = Field(..., examples=["Tender status option created successfully"])
    status: str = Field(default="200 OK", examples=["200 OK"])
    timestamp: datetime = Field(default_factory=utcnow)


class OptionSchemas(NamedTuple):
    create: type[OptionCreate]
    update: type[OptionCreate]
    read: type[OptionRead]


def id_type_for(entity: OptionEntity) -> type:
    return int if entity.id_kind == "numeric" else str


@lru_cache(maxsize=None)
def build_option_schemas(entity: OptionEntity) -> OptionSchemas:
    """
    Build the create/update/read models for ``entity``.

    ``update`` is ``create`` plus a required ``id``; ``read`` carries the id,
    timestamps and ``deletedAt``. Entities with ``description_required``
    reject a missing description, and ``extra_fields`` become extra
    properties (``dial_code`` is sent as ``dialCode``).
    """
    base_name = entity.model.__name__
    id_type = id_type_for(entity)
    id_field = Field(..., min_length=1, max_length=100) if id_type is str else Field(..., ge=1)

    create_fields = {}
    if entity.description_required:
        create_fields["description"] = (
            str,
            Field(..., min_length=1, max_length=DESCRIPTION_MAX_LENGTH),
        )

    read_fields = {}
    for extra in entity.extra_fields:
        if extra.required:
            create_fields[extra.name] = (str, Field(..., min_length=1, max_length=extra.max_length))
        else:
            create_fields[extra.name] = (str | None, Field(default=None, max_length=extra.max_length))
        read_fields[extra.name] = (str | None, None)

    create = create_model(f"{base_name}Create", __base__=OptionCreate, **create_fields)
    update = create_model(f"{base_name}Update", __base__=create, id=(id_type, id_field))
    read = create_model(f"{base_name}Read", __base__=OptionRead, id=(id_type, ...), **read_fields)

    return OptionSchemas(create=create, update=update, read=read)
