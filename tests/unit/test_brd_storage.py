"""BrdStorage unit tests (tmp_path 기반 파일 저장소)."""

import json

import pytest

from brd_generator.exceptions import RequirementNotFoundError
from brd_generator.models import (
    BrdDocument,
    BrdStatus,
    FunctionalRequirement,
    GenerationMode,
)


@pytest.fixture
def document(brd_payload):
    return BrdDocument.model_validate(brd_payload)


async def completed_record_id(storage, request, document) -> str:
    record_id = await storage.create_record(request)
    await storage.update_status(record_id, BrdStatus.IN_PROGRESS)
    await storage.update_status(record_id, BrdStatus.COMPLETED, content=document)
    return record_id


class TestCreateAndGet:
    async def test_create_record(self, temp_storage, sample_request):
        record_id = await temp_storage.create_record(sample_request, mode=GenerationMode.MULTI)

        record = await temp_storage.get_record(record_id)
        assert record.status == BrdStatus.PENDING
        assert record.client_name == "Acme Bank"
        assert record.process_area == "account_opening"
        assert record.generation_mode == GenerationMode.MULTI
        assert record.content is None

    async def test_file_is_camel_case_without_transcript(self, temp_storage, sample_request):
        record_id = await temp_storage.create_record(sample_request)

        path = temp_storage.brd_path / f"{record_id}.json"
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["clientName"] == "Acme Bank"
        assert data["status"] == "pending"
        assert "Aadhaar" not in path.read_text(encoding="utf-8")

    async def test_each_create_gets_new_id(self, temp_storage, sample_request):
        first = await temp_storage.create_record(sample_request)
        second = await temp_storage.create_record(sample_request)
        assert first != second

    async def test_get_missing(self, temp_storage):
        assert await temp_storage.get_record("nonexistent") is None

    async def test_corrupt_file_is_skipped(self, temp_storage, sample_request):
        await temp_storage.create_record(sample_request)
        (temp_storage.brd_path / "broken.json").write_text("{not json", encoding="utf-8")

        assert await temp_storage.get_record("broken") is None
        assert len(await temp_storage.list_records()) == 1


class TestListAndDelete:
    async def test_list_filters_and_paginates(self, temp_storage, sample_request):
        ids = [await temp_storage.create_record(sample_request) for _ in range(3)]
        await temp_storage.update_status(ids[0], BrdStatus.FAILED, error_message="cancelled")

        assert len(await temp_storage.list_records()) == 3
        assert len(await temp_storage.list_records(limit=2)) == 2
        failed = await temp_storage.list_records(status=BrdStatus.FAILED)
        assert [record.id for record in failed] == [ids[0]]

    async def test_count_records_ignores_paging(self, temp_storage, sample_request):
        ids = [await temp_storage.create_record(sample_request) for _ in range(3)]
        await temp_storage.update_status(ids[0], BrdStatus.FAILED, error_message="cancelled")

        assert len(await temp_storage.list_records(limit=1)) == 1
        assert await temp_storage.count_records() == 3
        assert await temp_storage.count_records(BrdStatus.PENDING) == 2

    async def test_list_newest_first(self, temp_storage, sample_request):
        first = await temp_storage.create_record(sample_request)
        second = await temp_storage.create_record(sample_request)

        records = await temp_storage.list_records()
        assert [record.id for record in records] == [second, first]

    async def test_delete(self, temp_storage, sample_request):
        record_id = await temp_storage.create_record(sample_request)

        assert await temp_storage.delete_record(record_id) is True
        assert await temp_storage.get_record(record_id) is None
        assert await temp_storage.delete_record(record_id) is False


class TestStatusTransitions:
    async def test_forward_path(self, temp_storage, sample_request, document):
        record_id = await completed_record_id(temp_storage, sample_request, document)

        record = await temp_storage.get_record(record_id)
        assert record.status == BrdStatus.COMPLETED
        assert record.content == document
        assert record.updated_at >= record.created_at

    async def test_terminal_state_is_final(self, temp_storage, sample_request, document):
        record_id = await temp_storage.create_record(sample_request)
        await temp_storage.update_status(record_id, BrdStatus.IN_PROGRESS)
        assert await temp_storage.update_status(record_id, BrdStatus.FAILED, error_message="cancelled")

        assert not await temp_storage.update_status(record_id, BrdStatus.COMPLETED, content=document)
        record = await temp_storage.get_record(record_id)
        assert record.status == BrdStatus.FAILED
        assert record.content is None

    async def test_cannot_skip_in_progress(self, temp_storage, sample_request, document):
        record_id = await temp_storage.create_record(sample_request)
        assert not await temp_storage.update_status(record_id, BrdStatus.COMPLETED, content=document)

    async def test_backwards_transition_rejected(self, temp_storage, sample_request):
        record_id = await temp_storage.create_record(sample_request)
        await temp_storage.update_status(record_id, BrdStatus.IN_PROGRESS)
        assert not await temp_storage.update_status(record_id, BrdStatus.PENDING)

    async def test_missing_record(self, temp_storage):
        assert not await temp_storage.update_status("nonexistent", BrdStatus.IN_PROGRESS)


class TestContentUpdates:
    async def test_apply_enhancement(self, temp_storage, sample_request, document):
        record_id = await completed_record_id(temp_storage, sample_request, document)
        revised = FunctionalRequirement(id="FR-002", title="CKYC lookup with retry", priority="Critical")

        record = await temp_storage.apply_enhancement(record_id, revised)

        assert record.content.functional_requirements[1] == revised
        stored = await temp_storage.get_record(record_id)
        assert stored.content.functional_requirements[1].title == "CKYC lookup with retry"
        assert stored.content.functional_requirements[0].id == "FR-001"

    async def test_apply_enhancement_unknown_requirement(self, temp_storage, sample_request, document):
        record_id = await completed_record_id(temp_storage, sample_request, document)

        with pytest.raises(RequirementNotFoundError):
            await temp_storage.apply_enhancement(record_id, FunctionalRequirement(id="FR-099"))

    async def test_apply_enhancement_requires_completed(self, temp_storage, sample_request):
        record_id = await temp_storage.create_record(sample_request)
        assert await temp_storage.apply_enhancement(record_id, FunctionalRequirement(id="FR-001")) is None

    async def test_update_content(self, temp_storage, sample_request, document):
        record_id = await completed_record_id(temp_storage, sample_request, document)
        replacement = document.model_copy(update={"assumptions": ["Replaced"]})

        assert await temp_storage.update_content(record_id, replacement)
        assert (await temp_storage.get_record(record_id)).content.assumptions == ["Replaced"]

    async def test_update_content_requires_completed(self, temp_storage, sample_request, document):
        record_id = await temp_storage.create_record(sample_request)
        assert not await temp_storage.update_content(record_id, document)
