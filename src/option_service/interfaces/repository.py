# src/option_service/interfaces/repository.py
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Sequence, Any

T = TypeVar("T")


class IOptionRepository(ABC, Generic[T]):
    """
    Persistence gateway for one option table.

    Implementations flush but never commit; the caller owns the transaction.

    Example:
        class OptionRepository(BaseRepository[T], IOptionRepository[T]):
            async def find_by_id(self, id: Any) -> T | None:
                ...
    """

    @abstractmethod
    async def save(self, record: T) -> T:
        """Insert, or overwrite the row with the same id."""
        pass

    @abstractmethod
    async def save_all(self, records: Sequence[T]) -> list[T]:
        """Insert or overwrite every record."""
        pass

    @abstractmethod
    async def find_by_id(self, id: Any) -> T | None:
        """Get a record by id, soft-deleted or not."""
        pass

    @abstractmethod
    async def find_all_by_id(self, ids: Sequence[Any]) -> Sequence[T]:
        """Get the records that exist among ``ids``; missing ids are omitted."""
        pass

    @abstractmethod
    async def find_by_deleted_at_is_null(self) -> Sequence[T]:
        """Get every active record."""
        pass

    @abstractmethod
    async def find_all(self) -> Sequence[T]:
        """Get every record including soft-deleted ones."""
        pass

    @abstractmethod
    async def exists_by_name(self, name: str, include_deleted: bool = False) -> bool:
        """Check whether a record with ``name`` exists."""
        pass

    @abstractmethod
    async def exists_by_id(self, id: Any) -> bool:
        """Check whether a record with ``id`` exists."""
        pass

    @abstractmethod
    async def delete_by_id(self, id: Any) -> None:
        """Remove one row."""
        pass

    @abstractmethod
    async def delete_all_by_id(self, ids: Sequence[Any]) -> int:
        """Remove the rows among ``ids``; returns the number removed."""
        pass

    @abstractmethod
    async def delete_all(self) -> int:
        """Remove every row; returns the number removed."""
        pass
