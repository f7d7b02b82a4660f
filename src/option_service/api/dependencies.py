# src/option_service/api/dependencies.py
from typing import Annotated, AsyncGenerator, Callable, Awaitable
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from option_service.config.settings import Settings, get_settings
from option_service.domain.entities import OptionEntity
from option_service.infrastructure.database.connection import db
from option_service.infrastructure.database.repositories import OptionRepository
from option_service.infrastructure.ids import PrefixedIdGenerator
from option_service.services import OptionService


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """One session per request; the service commits or rolls back."""
    async with db.session() as session:
        yield session


# Type aliases for clean injection
AppSettings = Annotated[Settings, Depends(get_settings)]
DbSession = Annotated[AsyncSession, Depends(get_db_session)]


def option_service_provider(entity: OptionEntity) -> Callable[..., Awaitable[OptionService]]:
    """
    Build the dependency that yields an ``OptionService`` for ``entity``.

    Example:
        OptionServiceDep = Annotated[OptionService, Depends(option_service_provider(entity))]
    """

    async def get_option_service(session: DbSession, settings: AppSettings) -> OptionService:
        id_generator = None
        if entity.id_kind == "string":
            id_generator = PrefixedIdGenerator(
                entity.id_prefix,
                upper_bound=settings.id_random_upper_bound,
            )
        return OptionService(
            entity,
            OptionRepository(entity.model, session, enable_query_logging=settings.db_echo_sql),
            id_generator=id_generator,
            reject_duplicate_names_in_batch=settings.reject_duplicate_names_in_batch,
        )

    get_option_service.__name__ = f"get_{entity.slug}_service"
    return get_option_service
