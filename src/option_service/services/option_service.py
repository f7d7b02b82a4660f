# src/option_service/services/option_service.py
"""
Generic CRUD and soft-delete service for option entities.

One ``OptionService`` instance serves one entity. Every public method runs as
a single transaction: if any record in a bulk call fails validation, nothing
from that call is persisted.
"""
from datetime import datetime
from typing import Any, Callable, Generic, Sequence, TypeVar

from option_service.domain.entities import OptionEntity
from option_service.domain.exceptions import (
    AlreadyDeleted,
    AlreadyExists,
    InvalidInput,
    NotFound,
    NullInput,
)
from option_service.domain.models import Deleted, lifecycle_of, utcnow
from option_service.infrastructure.database.base_model import OptionRecord
from option_service.infrastructure.database.repositories.base import transactional
from option_service.infrastructure.ids import PrefixedIdGenerator
from option_service.infrastructure.observability.logging import get_logger
from option_service.interfaces import IIdGenerator, IOptionRepository

T = TypeVar("T", bound=OptionRecord)

logger = get_logger(__name__)


class OptionService(Generic[T]):
    """
    Business rules for one option table.

    - ``name`` must be unique among active options at creation time
    - default reads and updates only see active options
    - ``hard_*`` reads and updates also see soft-deleted options
    - a soft-deleted option can still be hard-deleted

    Example:
        service = OptionService(entity, OptionRepository(entity.model, session))
        option = await service.save(entity.model(name="Open", description="desc"))
        await service.soft_delete(option.id)
    """

    def __init__(
        self,
        entity: OptionEntity,
        repository: IOptionRepository[T],
        id_generator: IIdGenerator | None = None,
        clock: Callable[[], datetime] = utcnow,
        reject_duplicate_names_in_batch: bool = True,
    ):
        self.entity = entity
        self.repository = repository
        self.session = repository.session
        self.clock = clock
        self.reject_duplicate_names_in_batch = reject_duplicate_names_in_batch

        if id_generator is None and entity.id_kind == "string":
            id_generator = PrefixedIdGenerator(entity.id_prefix, clock=clock)
        self.id_generator = id_generator

        self.log = logger.bind(entity=entity.slug)

    # ===== Messages =====

    @property
    def label(self) -> str:
        return self.entity.label

    def _not_found(self, id: Any) -> NotFound:
        return NotFound(
            f"{self.label} not found with id: {id}",
            details={"entity": self.entity.slug, "id": id},
        )

    def _require_id(self, id: Any) -> None:
        if id is None:
            raise NullInput(f"{self.label} ID cannot be null", details={"entity": self.entity.slug})

    def _require_list(self, items: Sequence[Any] | None, what: str) -> None:
        if not items:
            raise InvalidInput(
                f"{self.label} {what} list cannot be null or empty",
                details={"entity": self.entity.slug},
            )

    # ===== Helpers =====

    def _assign_new(self, record: T, now: datetime) -> T:
        if record.id is None and self.id_generator is not None:
            record.id = self.id_generator.next()
        record.created_at = now
        record.updated_at = now
        record.deleted_at = None
        return record

    async def _check_name_available(self, record: T) -> None:
        if await self.repository.exists_by_name(record.name):
            raise AlreadyExists(
                f"{self.label} already exists: {record.name}",
                details={"entity": self.entity.slug, "name": record.name},
            )

    async def _load(self, id: Any, include_deleted: bool) -> T:
        self._require_id(id)
        existing = await self.repository.find_by_id(id)
        if existing is None:
            raise self._not_found(id)
        if not include_deleted and isinstance(lifecycle_of(existing), Deleted):
            raise self._not_found(id)
        return existing

    async def _load_all(self, records: Sequence[T] | None, include_deleted: bool) -> list[tuple[T, T]]:
        """Validate every incoming record before anything is changed."""
        self._require_list(records, "model")
        pairs = []
        for record in records:
            if record is None:
                raise NullInput(f"{self.label} cannot be null", details={"entity": self.entity.slug})
            pairs.append((await self._load(record.id, include_deleted), record))
        return pairs

    def _overwrite(self, existing: T, incoming: T, now: datetime) -> T:
        for field in self.entity.value_fields:
            setattr(existing, field, getattr(incoming, field))
        existing.updated_at = now
        return existing

    async def _reconcile(self, ids: Sequence[Any] | None) -> list[T]:
        """Fetch every requested id, failing with the full set of missing ids."""
        self._require_list(ids, "ID")
        if any(id is None for id in ids):
            raise NullInput(f"{self.label} ID cannot be null", details={"entity": self.entity.slug})

        requested = list(dict.fromkeys(ids))
        found = await self.repository.find_all_by_id(requested)
        found_ids = {record.id for record in found}
        missing = [id for id in requested if id not in found_ids]
        if missing:
            raise NotFound(
                f"{self.entity.plural} not found with ids: {missing}",
                details={"entity": self.entity.slug, "ids": missing},
            )
        return list(found)

    # ===== Create =====

    @transactional
    async def save(self, record: T | None) -> T:
        if record is None:
            raise NullInput(f"{self.label} cannot be null", details={"entity": self.entity.slug})
        await self._check_name_available(record)

        saved = await self.repository.save(self._assign_new(record, self.clock()))
        self.log.info("option.created", id=saved.id, name=saved.name)
        return saved

    @transactional
    async def save_many(self, records: Sequence[T] | None) -> list[T]:
        self._require_list(records, "model")

        seen: set[str] = set()
        for record in records:
            if record is None:
                raise NullInput(f"{self.label} cannot be null", details={"entity": self.entity.slug})
            if self.reject_duplicate_names_in_batch and record.name in seen:
                raise AlreadyExists(
                    f"{self.label} name repeated in request: {record.name}",
                    details={"entity": self.entity.slug, "name": record.name},
                )
            seen.add(record.name)
            await self._check_name_available(record)

        now = self.clock()
        saved = await self.repository.save_all([self._assign_new(record, now) for record in records])
        self.log.info("option.created_many", ids=[record.id for record in saved])
        return saved

    # ===== Read =====

    @transactional
    async def read_one(self, id: Any) -> T:
        return await self._load(id, include_deleted=False)

    @transactional
    async def read_many(self, ids: Sequence[Any] | None) -> list[T]:
        """Active options among ``ids`` in request order; unknown or deleted ids are skipped."""
        if not ids:
            raise NullInput(f"{self.label} ID list cannot be null", details={"entity": self.entity.slug})
        if any(id is None for id in ids):
            raise NullInput(f"{self.label} ID cannot be null", details={"entity": self.entity.slug})

        requested = list(dict.fromkeys(ids))
        by_id = {record.id: record for record in await self.repository.find_all_by_id(requested)}
        return [
            by_id[id]
            for id in requested
            if id in by_id and not by_id[id].is_deleted
        ]

    @transactional
    async def read_all(self) -> list[T]:
        return list(await self.repository.find_by_deleted_at_is_null())

    @transactional
    async def hard_read_all(self) -> list[T]:
        return list(await self.repository.find_all())

    # ===== Update =====

    @transactional
    async def update_one(self, record: T | None) -> T:
        if record is None:
            raise NullInput(f"{self.label} cannot be null", details={"entity": self.entity.slug})
        existing = await self._load(record.id, include_deleted=False)

        saved = await self.repository.save(self._overwrite(existing, record, self.clock()))
        self.log.info("option.updated", id=saved.id)
        return saved

    @transactional
    async def update_many(self, records: Sequence[T] | None) -> list[T]:
        pairs = await self._load_all(records, include_deleted=False)

        now = self.clock()
        saved = await self.repository.save_all(
            [self._overwrite(existing, incoming, now) for existing, incoming in pairs]
        )
        self.log.info("option.updated_many", ids=[record.id for record in saved])
        return saved

    @transactional
    async def hard_update(self, record: T | None) -> T:
        """Overwrite an option whether or not it is soft-deleted; ``deleted_at`` is kept."""
        if record is None:
            raise NullInput(f"{self.label} cannot be null", details={"entity": self.entity.slug})
        existing = await self._load(record.id, include_deleted=True)

        saved = await self.repository.save(self._overwrite(existing, record, self.clock()))
        self.log.info("option.hard_updated", id=saved.id)
        return saved

    @transactional
    async def hard_update_all(self, records: Sequence[T] | None) -> list[T]:
        pairs = await self._load_all(records, include_deleted=True)

        now = self.clock()
        saved = await self.repository.save_all(
            [self._overwrite(existing, incoming, now) for existing, incoming in pairs]
        )
        self.log.info("option.hard_updated_many", ids=[record.id for record in saved])
        return saved

    # ===== Delete =====

    def _mark_deleted(self, record: T, now: datetime) -> T:
        if isinstance(lifecycle_of(record), Deleted):
            raise AlreadyDeleted(
                f"{self.label} is already deleted with id: {record.id}",
                details={"entity": self.entity.slug, "id": record.id},
            )
        record.deleted_at = now
        record.updated_at = now
        return record

    @transactional
    async def soft_delete(self, id: Any) -> T:
        existing = await self._load(id, include_deleted=True)

        saved = await self.repository.save(self._mark_deleted(existing, self.clock()))
        self.log.info("option.soft_deleted", id=saved.id)
        return saved

    @transactional
    async def soft_delete_many(self, ids: Sequence[Any] | None) -> list[T]:
        found = await self._reconcile(ids)

        now = self.clock()
        saved = await self.repository.save_all([self._mark_deleted(record, now) for record in found])
        self.log.info("option.soft_deleted_many", ids=[record.id for record in saved])
        return saved

    @transactional
    async def hard_delete(self, id: Any) -> None:
        self._require_id(id)
        if not await self.repository.exists_by_id(id):
            raise self._not_found(id)

        await self.repository.delete_by_id(id)
        self.log.info("option.hard_deleted", id=id)

    @transactional
    async def hard_delete_many(self, ids: Sequence[Any] | None) -> int:
        found = await self._reconcile(ids)

        ids = [record.id for record in found]
        removed = await self.repository.delete_all_by_id(ids)
        self.log.info("option.hard_deleted_many", ids=ids, count=removed)
        return removed

    @transactional
    async def hard_delete_all(self) -> int:
        removed = await self.repository.delete_all()
        self.log.warning("option.hard_deleted_all", count=removed)
        return removed
