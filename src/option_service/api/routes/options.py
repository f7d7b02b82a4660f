"""
CRUD and soft-delete routes shared by every option entity.

``build_option_router`` produces the same fifteen routes for any catalogued
entity. Create, update and delete routes answer with a ResponseMessage
envelope; read routes return the option or list directly.
"""
from typing import Annotated, Sequence

from fastapi import APIRouter, Depends, Query
from fastapi.exceptions import RequestValidationError
from pydantic import TypeAdapter, ValidationError

from option_service.api.dependencies import option_service_provider
from option_service.api.mappers import to_read, to_read_many, to_record, to_update_record
from option_service.api.schemas.options import ResponseMessage, build_option_schemas, id_type_for
from option_service.domain.entities import OptionEntity
from option_service.services import OptionService


def split_id_values(values: Sequence[str]) -> list[str]:
    """
    Flatten repeated and comma-separated query values.

    ``?idList=A,B&idList=C`` gives ``["A", "B", "C"]``; blank pieces are dropped.
    """
    return [piece.strip() for value in values for piece in value.split(",") if piece.strip()]


def id_list_query(id_type: type, alias: str):
    """Dependency reading an id list from ``?<alias>=`` in either form, typed as ``id_type``."""
    adapter = TypeAdapter(list[id_type])

    async def read_id_list(
        values: Annotated[list[str] | None, Query(alias=alias)] = None,
    ) -> list | None:
        if values is None:
            return None
        try:
            return adapter.validate_python(split_id_values(values))
        except ValidationError as exc:
            raise RequestValidationError(
                [{**error, "loc": ("query", alias, *error["loc"])} for error in exc.errors()]
            ) from exc

    return read_id_list


def build_option_router(entity: OptionEntity) -> APIRouter:
    """
    Build the router for one option entity, mounted at ``/<slug>``.

    ``/hard/delete/{id}`` is registered last so that ``/hard/delete/many``
    and ``/hard/delete/all`` are matched first.
    """
    Create, Update, Read = build_option_schemas(entity)
    IdType = id_type_for(entity)
    Service = Annotated[OptionService, Depends(option_service_provider(entity))]
    ReadIdList = Annotated[list | None, Depends(id_list_query(IdType, "id_list"))]
    IdList = Annotated[list | None, Depends(id_list_query(IdType, "idList"))]

    label = entity.label
    plural = entity.plural
    noun = label.lower()
    nouns = plural.lower()

    router = APIRouter(prefix=f"/{entity.slug}", tags=[entity.tag])

    # ===== Create =====

    @router.post("/create/one", response_model=ResponseMessage, summary=f"Create a single {noun}")
    async def create_one(payload: Create, service: Service):
        await service.save(to_record(entity, payload))
        return ResponseMessage(message=f"{label} created successfully")

    @router.post("/create/many", response_model=ResponseMessage, summary=f"Create multiple {nouns}")
    async def create_many(payloads: list[Create], service: Service):
        await service.save_many([to_record(entity, payload) for payload in payloads])
        return ResponseMessage(message=f"{plural} created successfully")

    # ===== Read =====

    @router.get("/read/one", response_model=Read, summary=f"Get a single {noun} by ID")
    async def read_one(id: Annotated[IdType, Query()], service: Service):
        return to_read(entity, Read, await service.read_one(id))

    @router.get("/read/all", response_model=list[Read], summary=f"Get all available {nouns}")
    async def read_all(service: Service):
        return to_read_many(entity, Read, await service.read_all())

    @router.get(
        "/read/hard/all",
        response_model=list[Read],
        summary=f"Get all {nouns}, including soft-deleted",
    )
    async def hard_read_all(service: Service):
        return to_read_many(entity, Read, await service.hard_read_all())

    @router.post("/read/many", response_model=list[Read], summary=f"Get multiple {nouns} by ID")
    async def read_many(
        service: Service,
        id_list: ReadIdList,
    ):
        return to_read_many(entity, Read, await service.read_many(id_list))

    # ===== Update =====

    @router.put("/update/one", response_model=ResponseMessage, summary=f"Update a single {noun} by ID")
    async def update_one(payload: Update, service: Service):
        await service.update_one(to_update_record(entity, payload))
        return ResponseMessage(message=f"{label} updated successfully")

    @router.put("/update/many", response_model=ResponseMessage, summary=f"Update multiple {nouns}")
    async def update_many(payloads: list[Update], service: Service):
        await service.update_many([to_update_record(entity, payload) for payload in payloads])
        return ResponseMessage(message=f"{plural} updated successfully")

    @router.put(
        "/update/hard/one",
        response_model=ResponseMessage,
        summary=f"Update a single {noun} by ID, including soft-deleted",
    )
    async def hard_update_one(payload: Update, service: Service):
        await service.hard_update(to_update_record(entity, payload))
        return ResponseMessage(message=f"{label} updated successfully")

    @router.put(
        "/update/hard/all",
        response_model=ResponseMessage,
        summary=f"Update multiple {nouns}, including soft-deleted",
    )
    async def hard_update_all(payloads: list[Update], service: Service):
        await service.hard_update_all([to_update_record(entity, payload) for payload in payloads])
        return ResponseMessage(message=f"{plural} updated successfully")

    # ===== Soft delete =====

    @router.put("/soft/delete/one", response_model=ResponseMessage, summary=f"Soft delete a single {noun} by ID")
    async def soft_delete_one(id: Annotated[IdType, Query()], service: Service):
        await service.soft_delete(id)
        return ResponseMessage(message=f"{label} soft deleted successfully")

    @router.put("/soft/delete/many", response_model=ResponseMessage, summary=f"Soft delete multiple {nouns} by ID")
    async def soft_delete_many(
        service: Service,
        id_list: IdList,
    ):
        await service.soft_delete_many(id_list)
        return ResponseMessage(message=f"{plural} soft deleted successfully")

    # ===== Hard delete =====

    @router.get("/hard/delete/many", response_model=ResponseMessage, summary=f"Hard delete multiple {nouns} by ID")
    async def hard_delete_many(
        service: Service,
        id_list: IdList,
    ):
        await service.hard_delete_many(id_list)
        return ResponseMessage(message=f"{plural} hard deleted successfully")

    @router.get("/hard/delete/all", response_model=ResponseMessage, summary=f"Hard delete all {nouns}")
    async def hard_delete_all(service: Service):
        await service.hard_delete_all()
        return ResponseMessage(message=f"All {nouns} hard deleted successfully")

    @router.get("/hard/delete/{id}", response_model=ResponseMessage, summary=f"Hard delete a single {noun} by ID")
    async def hard_delete_one(id: IdType, service: Service):
        await service.hard_delete(id)
        return ResponseMessage(message=f"{label} hard deleted successfully")

    return router
