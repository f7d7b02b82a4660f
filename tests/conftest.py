# tests/conftest.py
"""
Main pytest configuration and shared fixtures for all tests.

This module provides:
- Async test support (pytest-asyncio auto mode, configured in pyproject.toml)
- A fresh in-memory SQLite database per test (aiosqlite + StaticPool)
- Service fixtures with deterministic id generators and clocks
- FastAPI app and httpx AsyncClient bound to the test database
- Factory Boy integration
"""

from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator, Callable

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from option_service.api.app import create_app
from option_service.api.dependencies import get_db_session
from option_service.config.settings import Settings
from option_service.domain.entities import OptionEntity, get_entity
from option_service.infrastructure.database import models  # noqa: F401
from option_service.infrastructure.database.repositories import OptionRepository
from option_service.infrastructure.ids import SequenceIdGenerator
from option_service.services import OptionService


# ============================================================================
# Pytest Configuration
# ============================================================================

pytest_plugins = ["tests.factories.fixtures"]


# ============================================================================
# Settings and Configuration
# ============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """
    Test settings isolated from the environment and any .env file.

    Uses in-memory SQLite (fast and doesn't require external DB).
    """
    return Settings(
        _env_file=None,
        app_name="Option Service Test",
        app_version="0.1.0-test",
        environment="local",
        debug=True,
        database_url="sqlite+aiosqlite:///:memory:",
        db_create_tables=False,
        log_level=40,  # ERROR level to reduce noise in tests
        log_format="console",
        sentry_dsn=None,
        enabled_entities=[
            "tender_status_option",
            "plan_status_option",
            "execution_period_option",
            "country_option",
        ],
    )


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
async def test_engine():
    """
    In-memory database with every option table created.

    StaticPool keeps a single connection so all sessions see the same database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def db_session(test_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """
    Provide a database session.

    The service under test commits, so isolation comes from the per-test
    engine rather than from a rolled-back outer transaction.
    """
    async with test_session_factory() as session:
        yield session


# ============================================================================
# Entities and Services
# ============================================================================

@pytest.fixture
def tender_status_entity() -> OptionEntity:
    """A string-id entity."""
    return get_entity("tender_status_option")


@pytest.fixture
def plan_status_entity() -> OptionEntity:
    """A numeric-id entity."""
    return get_entity("plan_status_option")


class FakeClock:
    """Clock that advances one second on every call."""

    def __init__(self, start: datetime = datetime(2024, 5, 17, 9, 30, 0, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_service(db_session: AsyncSession, clock: FakeClock) -> Callable[..., OptionService]:
    """
    Build an OptionService for any entity on the test session.

    Usage:
        service = make_service(tender_status_entity)
        service = make_service(entity, reject_duplicate_names_in_batch=False)
    """

    def _make(entity: OptionEntity, **kwargs) -> OptionService:
        if entity.id_kind == "string":
            kwargs.setdefault("id_generator", SequenceIdGenerator(entity.id_prefix))
        kwargs.setdefault("clock", clock)
        return OptionService(entity, OptionRepository(entity.model, db_session), **kwargs)

    return _make


@pytest.fixture
def tender_status_service(make_service, tender_status_entity) -> OptionService:
    return make_service(tender_status_entity)


@pytest.fixture
def plan_status_service(make_service, plan_status_entity) -> OptionService:
    return make_service(plan_status_entity)


# ============================================================================
# FastAPI Application and Client
# ============================================================================

@pytest.fixture
def app(test_settings: Settings, test_session_factory) -> FastAPI:
    """
    Create FastAPI application for testing.

    Requests get sessions from the test database instead of the global manager.
    """
    application = create_app(test_settings)

    async def _get_test_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with test_session_factory() as session:
            yield session

    application.dependency_overrides[get_db_session] = _get_test_db_session
    return application


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """
    Async HTTP client for testing FastAPI endpoints.

    Usage:
        async def test_endpoint(async_client):
            response = await async_client.get("/api/tender_status_option/read/all")
            assert response.status_code == 200
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
