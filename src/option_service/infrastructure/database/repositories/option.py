# src/option_service/infrastructure/database/repositories/option.py
from typing import Any, Sequence, TypeVar

from sqlalchemy import delete as sql_delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from option_service.infrastructure.database.base_model import OptionRecord
from option_service.infrastructure.database.repositories.base import BaseRepository
from option_service.interfaces import IOptionRepository

T = TypeVar("T", bound=OptionRecord)


class OptionRepository(BaseRepository[T], IOptionRepository[T]):
    """
    Persistence gateway for one option table.

    The same class serves every option entity; the table is picked by the
    ``model`` passed in. Nothing here commits.

    Example:
        repo = OptionRepository(TenderStatusOption, session)
        active = await repo.find_by_deleted_at_is_null()
    """

    def __init__(self, model: type[T], session: AsyncSession, enable_query_logging: bool = False):
        super().__init__(model, session, enable_query_logging)

    async def save(self, record: T) -> T:
        # merge gives insert-or-overwrite by primary key
        merged = await self.session.merge(record)
        await self.session.flush()
        await self.session.refresh(merged)
        return merged

    async def save_all(self, records: Sequence[T]) -> list[T]:
        merged = [await self.session.merge(record) for record in records]
        await self.session.flush()
        for record in merged:
            await self.session.refresh(record)
        return merged

    async def find_by_id(self, id: Any) -> T | None:
        query = select(self.model).where(self.model.id == id)
        self._log_query(query, {"id": id})
        result = await self.session.execute(query)
        return result.scalars().first()

    async def find_all_by_id(self, ids: Sequence[Any]) -> Sequence[T]:
        if not ids:
            return []
        query = select(self.model).where(self.model.id.in_(list(ids)))
        self._log_query(query, {"ids": ids})
        result = await self.session.execute(query)
        return result.scalars().all()

    async def find_by_deleted_at_is_null(self) -> Sequence[T]:
        query = self._exclude_deleted(select(self.model)).order_by(self.model.created_at)
        result = await self.session.execute(query)
        return result.scalars().all()

    async def find_all(self) -> Sequence[T]:
        query = select(self.model).order_by(self.model.created_at)
        result = await self.session.execute(query)
        return result.scalars().all()

    async def exists_by_name(self, name: str, include_deleted: bool = False) -> bool:
        condition = self._exclude_deleted(
            select(self.model.id).where(self.model.name == name), include_deleted
        )
        result = await self.session.execute(select(condition.exists()))
        return bool(result.scalar())

    async def exists_by_id(self, id: Any) -> bool:
        result = await self.session.execute(
            select(select(self.model.id).where(self.model.id == id).exists())
        )
        return bool(result.scalar())

    async def delete_by_id(self, id: Any) -> None:
        await self.delete_all_by_id([id])

    async def delete_all_by_id(self, ids: Sequence[Any]) -> int:
        if not ids:
            return 0
        query = sql_delete(self.model).where(self.model.id.in_(list(ids)))
        self._log_query(query, {"ids": ids})
        result = await self.session.execute(query)
        return result.rowcount

    async def delete_all(self) -> int:
        result = await self.session.execute(sql_delete(self.model))
        return result.rowcount
