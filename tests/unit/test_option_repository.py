"""Tests for OptionRepository queries."""

from datetime import datetime, timedelta

import pytest
from sqlalchemy.exc import StatementError

from option_service.domain.models import utcnow
from option_service.infrastructure.database.repositories import OptionRepository

pytestmark = pytest.mark.unit


@pytest.fixture
def repo(db_session, tender_status_entity):
    return OptionRepository(tender_status_entity.model, db_session)


@pytest.fixture
async def stored(repo, tender_status_factory):
    """Two active rows and one soft-deleted row."""
    records = await repo.save_all([
        tender_status_factory.build(id="T_1", name="Open"),
        tender_status_factory.build(id="T_2", name="Closed"),
        tender_status_factory.build(id="T_3", name="Cancelled", deleted_at=utcnow()),
    ])
    await repo.session.commit()
    return records


class TestFind:

    async def test_find_by_id(self, repo, stored):
        found = await repo.find_by_id("T_1")

        assert found is not None
        assert found.name == "Open"

    async def test_find_by_id_missing(self, repo, stored):
        assert await repo.find_by_id("T_9") is None

    async def test_find_all_by_id_omits_missing(self, repo, stored):
        found = await repo.find_all_by_id(["T_1", "T_9", "T_3"])

        assert {record.id for record in found} == {"T_1", "T_3"}

    async def test_find_all_by_id_empty(self, repo, stored):
        assert await repo.find_all_by_id([]) == []

    async def test_active_only(self, repo, stored):
        found = await repo.find_by_deleted_at_is_null()

        assert {record.id for record in found} == {"T_1", "T_2"}

    async def test_find_all_includes_deleted(self, repo, stored):
        assert len(await repo.find_all()) == 3


class TestExists:

    async def test_exists_by_name_active(self, repo, stored):
        assert await repo.exists_by_name("Open") is True

    async def test_exists_by_name_ignores_deleted(self, repo, stored):
        """Soft-deleted rows do not count unless asked for."""
        assert await repo.exists_by_name("Cancelled") is False
        assert await repo.exists_by_name("Cancelled", include_deleted=True) is True

    async def test_exists_by_id(self, repo, stored):
        assert await repo.exists_by_id("T_3") is True
        assert await repo.exists_by_id("T_9") is False


class TestSave:

    async def test_save_overwrites_by_id(self, repo, stored, tender_status_factory):
        await repo.save(tender_status_factory.build(id="T_1", name="Reopened"))
        await repo.session.commit()

        assert (await repo.find_by_id("T_1")).name == "Reopened"
        assert len(await repo.find_all()) == 3


class TestDelete:

    async def test_delete_by_id(self, repo, stored):
        await repo.delete_by_id("T_1")
        await repo.session.commit()

        assert await repo.exists_by_id("T_1") is False

    async def test_delete_all_by_id_counts_rows(self, repo, stored):
        removed = await repo.delete_all_by_id(["T_1", "T_3", "T_9"])
        await repo.session.commit()

        assert removed == 2
        assert [record.id for record in await repo.find_all()] == ["T_2"]

    async def test_delete_all(self, repo, stored):
        assert await repo.delete_all() == 3
        await repo.session.commit()

        assert await repo.find_all() == []


class TestTimestamps:

    async def test_read_back_as_aware_utc(self, repo, stored):
        """Values loaded from the database carry a UTC offset."""
        repo.session.expire_all()

        found = await repo.find_by_id("T_3")

        assert found.created_at.utcoffset() == timedelta(0)
        assert found.deleted_at.utcoffset() == timedelta(0)

    async def test_naive_value_rejected(self, repo, tender_status_factory):
        record = tender_status_factory.build(id="T_9", name="Naive", created_at=datetime(2024, 1, 1))

        with pytest.raises(StatementError, match="timezone"):
            await repo.save(record)
        await repo.session.rollback()
