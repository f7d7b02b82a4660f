# src/option_service/infrastructure/database/repositories/base.py
from typing import TypeVar, Generic
from functools import wraps
import logging

from sqlalchemy import Select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

T = TypeVar("T", bound=SQLModel)

logger = logging.getLogger(__name__)


def transactional(func):
    """
    Decorator to run a method as one transaction on ``self.session``.

    Commits on success, rolls back on exception. Used by the service layer so
    that a bulk operation either fully applies or leaves no trace.

    Example:
        @transactional
        async def save_many(self, records):
            for record in records:
                await self._check_name(record)
            return await self.repository.save_all(records)
    """
    @wraps(func)
    async def wrapper(self, *args, **kwargs):
        try:
            result = await func(self, *args, **kwargs)
            await self.session.commit()
            return result
        except Exception:
            await self.session.rollback()
            raise
    return wrapper


class BaseRepository(Generic[T]):
    """
    Base repository holding the model and session.

    Example:
        class OptionRepository(BaseRepository[T]):
            async def find_by_deleted_at_is_null(self):
                query = self._exclude_deleted(select(self.model))
                result = await self.session.execute(query)
                return result.scalars().all()
    """

    def __init__(self, model: type[T], session: AsyncSession, enable_query_logging: bool = False):
        self.model = model
        self.session = session
        self.enable_query_logging = enable_query_logging

    def _exclude_deleted(self, query: Select, include_deleted: bool = False) -> Select:
        """Exclude soft-deleted records from query unless include_deleted=True."""
        if not include_deleted:
            query = query.where(self.model.deleted_at.is_(None))
        return query

    def _log_query(self, query, params: dict = None) -> None:
        """Log SQL query with parameters for debugging."""
        if self.enable_query_logging:
            logger.debug(f"Query: {query}")
            if params:
                logger.debug(f"Params: {params}")
