# src/option_service/api/app.py
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from option_service.config.settings import Settings, get_settings
from option_service.api.middleware.cors import get_cors_middleware_config
from option_service.api.middleware.request_id import RequestIDMiddleware
from option_service.api.middleware.logging import RequestLoggingMiddleware
from option_service.api.middleware.errors import register_error_handlers
from option_service.api.router import build_api_router
from option_service.api.routes import health
from option_service.domain.entities import enabled_entities
from option_service.infrastructure.database import db
from option_service.infrastructure.observability.logging import configure_logging, get_logger
from option_service.infrastructure.observability.error_tracking import (
    init_sentry,
    flush as flush_sentry,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    settings: Settings = app.state.settings

    init_sentry(
        dsn=settings.sentry_dsn,
        environment=settings.sentry_environment or settings.environment,
        release=settings.app_version,
        sample_rate=settings.sentry_sample_rate,
        traces_sample_rate=settings.sentry_traces_sample_rate,
    )

    await db.connect(
        url=settings.database_url.get_secret_value(),
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
        pool_recycle=settings.db_pool_recycle,
        pool_pre_ping=True,
        echo_sql=settings.db_echo_sql,
    )
    if settings.db_create_tables:
        await db.create_all()
    logger.info("Application started", entities=len(app.state.entities), environment=settings.environment)

    yield

    await db.disconnect()
    flush_sentry(timeout=5.0)
    logger.info("Application stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Application factory.

    Args:
        settings: Settings to use instead of the environment (tests pass their own)
    """
    settings = settings or get_settings()
    configure_logging(settings)
    entities = enabled_entities(settings.enabled_entities)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="""
# Option Service API

CRUD and soft-delete API for the reference options of the e-procurement
system (tender statuses, plan statuses, currencies, genders, ...).

Every option entity is served under `/api/<entity>` with the same routes:

- `POST /create/one`, `POST /create/many`
- `GET /read/one?id=`, `GET /read/all`, `GET /read/hard/all`, `POST /read/many?id_list=`
- `PUT /update/one`, `PUT /update/many`, `PUT /update/hard/one`, `PUT /update/hard/all`
- `PUT /soft/delete/one?id=`, `PUT /soft/delete/many?idList=`
- `GET /hard/delete/{id}`, `GET /hard/delete/many?idList=`, `GET /hard/delete/all`

Soft-deleted options are hidden from the default read and update routes but
remain visible to the `hard` variants until they are hard-deleted.
        """,
        docs_url="/docs" if settings.debug or not settings.is_production else None,
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Health",
                "description": "Liveness and readiness probes.",
            },
            *(
                {"name": entity.tag, "description": f"{entity.plural}."}
                for entity in entities
            ),
        ],
    )
    app.state.settings = settings
    app.state.entities = entities

    app.dependency_overrides[get_settings] = lambda: settings

    # Middleware (order matters - added in reverse order of execution)
    # Request ID should be first so it's available to all other middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    cors_config = get_cors_middleware_config(settings)
    app.add_middleware(CORSMiddleware, **cors_config)

    register_error_handlers(app, settings)

    # ============================================================================
    # Routes
    # ============================================================================

    app.include_router(health.router)
    app.include_router(build_api_router(entities), prefix=settings.api_prefix)

    return app


app = create_app()
