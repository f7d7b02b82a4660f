"""
Tests for OptionService.

Covers the creation rules, active-only versus hard reads and updates, soft
and hard deletion, and the all-or-nothing behaviour of bulk calls.
"""

import pytest

from option_service.domain.entities import get_entity
from option_service.domain.exceptions import (
    AlreadyDeleted,
    AlreadyExists,
    InvalidInput,
    NotFound,
    NullInput,
)

pytestmark = pytest.mark.unit


class TestSave:

    async def test_assigns_prefixed_id_and_timestamps(self, tender_status_service, tender_status_factory):
        """A new option gets a generated id and equal created/updated stamps."""
        saved = await tender_status_service.save(tender_status_factory.build(name="Open"))

        assert saved.id == "TENDER_STATUS_OPT_1"
        assert saved.name == "Open"
        assert saved.created_at is not None
        assert saved.created_at == saved.updated_at
        assert saved.deleted_at is None

    async def test_numeric_entity_gets_database_id(self, plan_status_service, plan_status_factory):
        """Numeric entities leave id assignment to the database."""
        first = await plan_status_service.save(plan_status_factory.build(name="Draft"))
        second = await plan_status_service.save(plan_status_factory.build(name="Approved"))

        assert isinstance(first.id, int)
        assert second.id > first.id

    async def test_none_rejected(self, tender_status_service):
        with pytest.raises(NullInput, match="Tender status option cannot be null"):
            await tender_status_service.save(None)

    async def test_duplicate_active_name_rejected(self, tender_status_service, tender_status_factory):
        """Name must be unique among active options."""
        await tender_status_service.save(tender_status_factory.build(name="Open"))

        with pytest.raises(AlreadyExists, match="Tender status option already exists: Open"):
            await tender_status_service.save(tender_status_factory.build(name="Open"))

        assert len(await tender_status_service.read_all()) == 1

    async def test_name_of_soft_deleted_option_can_be_reused(self, tender_status_service, tender_status_factory):
        """A soft-deleted option does not block its name."""
        old = await tender_status_service.save(tender_status_factory.build(name="Open"))
        await tender_status_service.soft_delete(old.id)

        new = await tender_status_service.save(tender_status_factory.build(name="Open"))

        assert new.id != old.id
        assert len(await tender_status_service.hard_read_all()) == 2


class TestSaveMany:

    async def test_saves_all(self, tender_status_service, tender_status_factory):
        saved = await tender_status_service.save_many(tender_status_factory.build_batch(3))

        assert [record.id for record in saved] == [
            "TENDER_STATUS_OPT_1",
            "TENDER_STATUS_OPT_2",
            "TENDER_STATUS_OPT_3",
        ]
        assert len(await tender_status_service.read_all()) == 3

    async def test_empty_list_rejected(self, tender_status_service):
        with pytest.raises(InvalidInput, match="list cannot be null or empty"):
            await tender_status_service.save_many([])

    async def test_existing_name_rolls_back_whole_batch(self, tender_status_service, tender_status_factory):
        """One conflicting name means nothing from the batch is stored."""
        await tender_status_service.save(tender_status_factory.build(name="Open"))

        with pytest.raises(AlreadyExists):
            await tender_status_service.save_many([
                tender_status_factory.build(name="Closed"),
                tender_status_factory.build(name="Open"),
            ])

        names = [record.name for record in await tender_status_service.read_all()]
        assert names == ["Open"]

    async def test_repeated_name_in_batch_rejected(self, tender_status_service, tender_status_factory):
        with pytest.raises(AlreadyExists, match="repeated in request"):
            await tender_status_service.save_many([
                tender_status_factory.build(name="Open"),
                tender_status_factory.build(name="Open"),
            ])

        assert await tender_status_service.read_all() == []

    async def test_repeated_name_allowed_when_check_disabled(
        self, make_service, tender_status_entity, tender_status_factory
    ):
        service = make_service(tender_status_entity, reject_duplicate_names_in_batch=False)

        saved = await service.save_many([
            tender_status_factory.build(name="Open"),
            tender_status_factory.build(name="Open"),
        ])

        assert len(saved) == 2


class TestRead:

    async def test_read_one(self, tender_status_service, tender_status_factory):
        saved = await tender_status_service.save(tender_status_factory.build(name="Open"))

        found = await tender_status_service.read_one(saved.id)

        assert found.id == saved.id
        assert found.name == "Open"

    async def test_read_one_missing(self, tender_status_service):
        with pytest.raises(NotFound, match="Tender status option not found with id: NOPE"):
            await tender_status_service.read_one("NOPE")

    async def test_read_one_soft_deleted_is_not_found(self, tender_status_service, tender_status_factory):
        saved = await tender_status_service.save(tender_status_factory.build())
        await tender_status_service.soft_delete(saved.id)

        with pytest.raises(NotFound):
            await tender_status_service.read_one(saved.id)

    async def test_read_one_none_id(self, tender_status_service):
        with pytest.raises(NullInput, match="ID cannot be null"):
            await tender_status_service.read_one(None)

    async def test_read_all_empty(self, tender_status_service):
        assert await tender_status_service.read_all() == []

    async def test_read_all_excludes_soft_deleted(self, tender_status_service, tender_status_factory):
        kept, dropped = await tender_status_service.save_many(tender_status_factory.build_batch(2))
        await tender_status_service.soft_delete(dropped.id)

        assert [record.id for record in await tender_status_service.read_all()] == [kept.id]

    async def test_hard_read_all_includes_soft_deleted(self, tender_status_service, tender_status_factory):
        kept, dropped = await tender_status_service.save_many(tender_status_factory.build_batch(2))
        await tender_status_service.soft_delete(dropped.id)

        records = {record.id: record for record in await tender_status_service.hard_read_all()}

        assert set(records) == {kept.id, dropped.id}
        assert records[dropped.id].deleted_at is not None
        assert records[kept.id].deleted_at is None


class TestReadMany:

    async def test_keeps_request_order(self, tender_status_service, tender_status_factory):
        a, b, c = await tender_status_service.save_many(tender_status_factory.build_batch(3))

        found = await tender_status_service.read_many([c.id, a.id, b.id])

        assert [record.id for record in found] == [c.id, a.id, b.id]

    async def test_skips_missing_and_deleted(self, tender_status_service, tender_status_factory):
        a, b = await tender_status_service.save_many(tender_status_factory.build_batch(2))
        await tender_status_service.soft_delete(b.id)

        found = await tender_status_service.read_many([a.id, b.id, "MISSING"])

        assert [record.id for record in found] == [a.id]

    async def test_repeated_ids_returned_once(self, tender_status_service, tender_status_factory):
        saved = await tender_status_service.save(tender_status_factory.build())

        found = await tender_status_service.read_many([saved.id, saved.id])

        assert len(found) == 1

    async def test_empty_list_rejected(self, tender_status_service):
        with pytest.raises(NullInput):
            await tender_status_service.read_many([])

    async def test_none_list_rejected(self, tender_status_service):
        with pytest.raises(NullInput):
            await tender_status_service.read_many(None)


class TestUpdate:

    async def test_update_one_overwrites_fields(
        self, tender_status_service, tender_status_factory, tender_status_entity
    ):
        saved = await tender_status_service.save(tender_status_factory.build(name="Open", description="old"))
        created_at = saved.created_at

        await tender_status_service.update_one(
            tender_status_entity.model(id=saved.id, name="Reopened", description="new")
        )

        found = await tender_status_service.read_one(saved.id)
        assert found.name == "Reopened"
        assert found.description == "new"
        assert found.created_at == created_at
        assert found.updated_at > created_at

    async def test_update_one_missing(self, tender_status_service, tender_status_entity):
        with pytest.raises(NotFound):
            await tender_status_service.update_one(tender_status_entity.model(id="NOPE", name="x"))

    async def test_update_one_soft_deleted_is_not_found(
        self, tender_status_service, tender_status_factory, tender_status_entity
    ):
        saved = await tender_status_service.save(tender_status_factory.build())
        await tender_status_service.soft_delete(saved.id)

        with pytest.raises(NotFound):
            await tender_status_service.update_one(tender_status_entity.model(id=saved.id, name="x"))

    async def test_update_one_without_id(self, tender_status_service, tender_status_entity):
        with pytest.raises(NullInput):
            await tender_status_service.update_one(tender_status_entity.model(name="x"))

    async def test_update_many_is_all_or_nothing(
        self, tender_status_service, tender_status_factory, tender_status_entity
    ):
        """A missing id in the batch leaves every other option untouched."""
        saved = await tender_status_service.save(tender_status_factory.build(name="Open"))
        saved_id = saved.id
        model = tender_status_entity.model

        with pytest.raises(NotFound):
            await tender_status_service.update_many([
                model(id=saved_id, name="Changed"),
                model(id="NOPE", name="Other"),
            ])

        assert (await tender_status_service.read_one(saved_id)).name == "Open"

    async def test_update_many(self, tender_status_service, tender_status_factory, tender_status_entity):
        a, b = await tender_status_service.save_many(tender_status_factory.build_batch(2))
        model = tender_status_entity.model

        await tender_status_service.update_many([model(id=a.id, name="A"), model(id=b.id, name="B")])

        names = [record.name for record in await tender_status_service.read_many([a.id, b.id])]
        assert names == ["A", "B"]

    async def test_update_many_empty(self, tender_status_service):
        with pytest.raises(InvalidInput):
            await tender_status_service.update_many([])

    async def test_hard_update_keeps_deleted_at(
        self, tender_status_service, tender_status_factory, tender_status_entity
    ):
        """Hard update reaches soft-deleted options without restoring them."""
        saved = await tender_status_service.save(tender_status_factory.build(name="Open"))
        deleted = await tender_status_service.soft_delete(saved.id)
        deleted_at = deleted.deleted_at

        updated = await tender_status_service.hard_update(
            tender_status_entity.model(id=saved.id, name="Archived")
        )

        assert updated.name == "Archived"
        assert updated.deleted_at == deleted_at

    async def test_hard_update_missing(self, tender_status_service, tender_status_entity):
        with pytest.raises(NotFound):
            await tender_status_service.hard_update(tender_status_entity.model(id="NOPE", name="x"))

    async def test_hard_update_all(self, tender_status_service, tender_status_factory, tender_status_entity):
        a, b = await tender_status_service.save_many(tender_status_factory.build_batch(2))
        await tender_status_service.soft_delete(b.id)
        model = tender_status_entity.model

        await tender_status_service.hard_update_all([model(id=a.id, name="A"), model(id=b.id, name="B")])

        records = {record.id: record for record in await tender_status_service.hard_read_all()}
        assert records[a.id].name == "A"
        assert records[b.id].name == "B"
        assert records[b.id].deleted_at is not None


class TestSoftDelete:

    async def test_sets_deleted_at(self, tender_status_service, tender_status_factory):
        saved = await tender_status_service.save(tender_status_factory.build())

        deleted = await tender_status_service.soft_delete(saved.id)

        assert deleted.deleted_at is not None
        assert deleted.updated_at == deleted.deleted_at

    async def test_twice_rejected(self, tender_status_service, tender_status_factory):
        saved = await tender_status_service.save(tender_status_factory.build())
        await tender_status_service.soft_delete(saved.id)

        with pytest.raises(AlreadyDeleted):
            await tender_status_service.soft_delete(saved.id)

    async def test_missing(self, tender_status_service):
        with pytest.raises(NotFound):
            await tender_status_service.soft_delete("NOPE")

    async def test_many_reports_every_missing_id(self, tender_status_service, tender_status_factory):
        """Nothing is deleted when some ids are unknown."""
        saved = await tender_status_service.save(tender_status_factory.build())
        saved_id = saved.id

        with pytest.raises(NotFound) as exc_info:
            await tender_status_service.soft_delete_many([saved_id, "A", "B"])

        assert exc_info.value.details["ids"] == ["A", "B"]
        assert [record.id for record in await tender_status_service.read_all()] == [saved_id]

    async def test_many(self, tender_status_service, tender_status_factory):
        a, b, c = await tender_status_service.save_many(tender_status_factory.build_batch(3))

        await tender_status_service.soft_delete_many([a.id, c.id])

        assert [record.id for record in await tender_status_service.read_all()] == [b.id]

    async def test_many_with_already_deleted_rolls_back(self, tender_status_service, tender_status_factory):
        a, b = await tender_status_service.save_many(tender_status_factory.build_batch(2))
        a_id, b_id = a.id, b.id
        await tender_status_service.soft_delete(b_id)

        with pytest.raises(AlreadyDeleted):
            await tender_status_service.soft_delete_many([a_id, b_id])

        assert [record.id for record in await tender_status_service.read_all()] == [a_id]

    async def test_many_empty(self, tender_status_service):
        with pytest.raises(InvalidInput):
            await tender_status_service.soft_delete_many([])


class TestHardDelete:

    async def test_removes_row(self, tender_status_service, tender_status_factory):
        saved = await tender_status_service.save(tender_status_factory.build())

        await tender_status_service.hard_delete(saved.id)

        with pytest.raises(NotFound):
            await tender_status_service.read_one(saved.id)
        assert await tender_status_service.hard_read_all() == []

    async def test_soft_deleted_can_be_hard_deleted(self, tender_status_service, tender_status_factory):
        saved = await tender_status_service.save(tender_status_factory.build())
        await tender_status_service.soft_delete(saved.id)

        await tender_status_service.hard_delete(saved.id)

        assert await tender_status_service.hard_read_all() == []

    async def test_missing(self, tender_status_service):
        with pytest.raises(NotFound):
            await tender_status_service.hard_delete("NOPE")

    async def test_many(self, tender_status_service, tender_status_factory):
        a, b, c = await tender_status_service.save_many(tender_status_factory.build_batch(3))

        removed = await tender_status_service.hard_delete_many([a.id, b.id, a.id])

        assert removed == 2
        assert [record.id for record in await tender_status_service.hard_read_all()] == [c.id]

    async def test_many_with_missing_id_deletes_nothing(self, tender_status_service, tender_status_factory):
        saved = await tender_status_service.save(tender_status_factory.build())

        with pytest.raises(NotFound):
            await tender_status_service.hard_delete_many([saved.id, "NOPE"])

        assert len(await tender_status_service.hard_read_all()) == 1

    async def test_many_none_element(self, tender_status_service):
        with pytest.raises(NullInput):
            await tender_status_service.hard_delete_many(["A", None])

    async def test_all(self, tender_status_service, tender_status_factory):
        _, dropped, _ = await tender_status_service.save_many(tender_status_factory.build_batch(3))
        await tender_status_service.soft_delete(dropped.id)

        assert await tender_status_service.hard_delete_all() == 3
        assert await tender_status_service.hard_read_all() == []

    async def test_all_on_empty_table(self, tender_status_service):
        assert await tender_status_service.hard_delete_all() == 0


class TestNumericEntity:

    async def test_round_trip(self, plan_status_service, plan_status_factory, plan_status_entity):
        saved = await plan_status_service.save(plan_status_factory.build(name="Draft"))

        await plan_status_service.update_one(plan_status_entity.model(id=saved.id, name="Final"))
        assert (await plan_status_service.read_one(saved.id)).name == "Final"

        await plan_status_service.soft_delete(saved.id)
        assert await plan_status_service.read_all() == []

        await plan_status_service.hard_delete(saved.id)
        assert await plan_status_service.hard_read_all() == []


class TestExtraFields:

    async def test_country_code_and_dial_code_round_trip(self, make_service):
        country = get_entity("country_option")
        service = make_service(country)

        saved = await service.save(country.model(name="Rwanda", code="RW", dial_code="+250"))
        await service.update_one(country.model(id=saved.id, name="Rwanda", code="RWA", dial_code="+250"))

        found = await service.read_one(saved.id)
        assert found.code == "RWA"
        assert found.dial_code == "+250"
