"""Unit tests for the application submission use case."""

import asyncio
from dataclasses import replace
from uuid import UUID

import pytest

from application.services import NotificationDispatcher
from application.use_cases import SubmitApplicationUseCase, UploadDocumentUseCase
from domain.entities import ApplicationDraft
from domain.enums import ApplicationStatus, Industry
from domain.exceptions import PersistenceError, ValidationError
from domain.value_objects import StoredDocument
from fakes import PDF, InMemoryApplicationRepository, MiB, RecordingNotificationSender


class ScheduledCalls(list):
    """Scheduler that records calls instead of running them."""

    def __call__(self, func, *args):
        self.append((func, args))


@pytest.fixture
def scheduled():
    return ScheduledCalls()


@pytest.fixture
def use_case(application_repository, storage, sender, scheduled):
    return SubmitApplicationUseCase(
        application_repository=application_repository,
        storage=storage,
        dispatcher=NotificationDispatcher(sender),
        schedule=scheduled,
    )


class TestSuccessfulSubmission:
    """Test the happy path."""

    async def test_end_to_end_submission(self, use_case, stored_draft, application_repository):
        result = await use_case.execute(stored_draft)

        assert UUID(result.tracking_token).version == 4
        record = application_repository.rows[result.application_id]
        assert record.status == ApplicationStatus.SUBMITTED
        assert record.founder_name == "Ada Lovelace"
        assert record.email == "ada@example.com"
        assert record.venture_name == "Analytical Engines"
        assert record.industry == Industry.TECHNOLOGY
        assert record.gdpr_consent is True
        assert record.pitch_deck_key == stored_draft.pitch_deck.storage_key
        assert record.tracking_token == result.tracking_token

    async def test_notifications_scheduled_after_commit(self, use_case, stored_draft, scheduled):
        result = await use_case.execute(stored_draft)

        assert len(scheduled) == 1
        func, args = scheduled[0]
        assert args[0].id == result.application_id

    async def test_business_plan_key_persisted(self, use_case, stored_draft, storage, application_repository):
        key = await storage.save(b"%PDF plan", PDF)
        plan = StoredDocument(filename="plan.pdf", content_type=PDF, size=9, storage_key=key)

        result = await use_case.execute(replace(stored_draft, business_plan=plan))

        assert application_repository.rows[result.application_id].business_plan_key == key

    async def test_concurrent_submissions_get_distinct_tokens(self, use_case, stored_draft, application_repository):
        results = await asyncio.gather(*(use_case.execute(stored_draft) for _ in range(20)))

        tokens = {r.tracking_token for r in results}
        ids = {r.application_id for r in results}
        assert len(tokens) == 20
        assert len(ids) == 20
        assert len(application_repository.rows) == 20

    async def test_dispatcher_failure_does_not_change_result(self, application_repository, storage, stored_draft):
        failing = RecordingNotificationSender(fail_for={"ada@example.com", RecordingNotificationSender.REVIEW_CHANNEL})
        use_case = SubmitApplicationUseCase(
            application_repository=application_repository,
            storage=storage,
            dispatcher=NotificationDispatcher(failing),
        )

        result = await use_case.execute(stored_draft)
        await asyncio.sleep(0)
        await asyncio.sleep(0)

        assert result.application_id in application_repository.rows

    async def test_scheduler_failure_is_not_fatal(self, application_repository, storage, sender, stored_draft):
        def broken_scheduler(func, *args):
            raise RuntimeError("no loop")

        use_case = SubmitApplicationUseCase(
            application_repository=application_repository,
            storage=storage,
            dispatcher=NotificationDispatcher(sender),
            schedule=broken_scheduler,
        )
        result = await use_case.execute(stored_draft)
        assert result.application_id == 1


class TestRejectedSubmission:
    """Test that nothing is persisted when a rule fails."""

    @pytest.mark.parametrize("overrides,field", [
        ({"email": "not-an-email"}, "email"),
        ({"founder_name": " "}, "founder_name"),
        ({"venture_name": ""}, "venture_name"),
        ({"phone": "12ab"}, "phone"),
        ({"gdpr_consent": False}, "gdpr_consent"),
        ({"pitch_deck": None}, "pitch_deck"),
    ])
    async def test_invalid_field_rejected(self, use_case, stored_draft, application_repository, scheduled, overrides, field):
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(replace(stored_draft, **overrides))

        assert field in exc_info.value.errors
        assert application_repository.rows == {}
        assert scheduled == []

    async def test_unknown_storage_key_rejected(self, use_case, stored_draft, application_repository):
        ghost = replace(stored_draft.pitch_deck, storage_key="f" * 32)
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(replace(stored_draft, pitch_deck=ghost))
        assert set(exc_info.value.errors) == {"pitch_deck"}
        assert application_repository.rows == {}

    async def test_unuploaded_document_rejected(self, use_case, valid_draft):
        with pytest.raises(ValidationError, match="pitch_deck"):
            await use_case.execute(valid_draft)

    async def test_uploaded_files_left_in_place_on_rejection(self, use_case, stored_draft, storage):
        with pytest.raises(ValidationError):
            await use_case.execute(replace(stored_draft, gdpr_consent=False))
        assert await storage.exists(stored_draft.pitch_deck.storage_key)

    async def test_persistence_failure_propagates(self, storage, stored_draft, scheduled):
        use_case = SubmitApplicationUseCase(
            application_repository=InMemoryApplicationRepository(fail=True),
            storage=storage,
            schedule=scheduled,
        )
        with pytest.raises(PersistenceError):
            await use_case.execute(stored_draft)
        assert scheduled == []

    async def test_slow_persistence_times_out(self, storage, stored_draft):
        use_case = SubmitApplicationUseCase(
            application_repository=InMemoryApplicationRepository(delay=1.0),
            storage=storage,
            timeout_seconds=0.01,
        )
        with pytest.raises(PersistenceError, match="timed out"):
            await use_case.execute(stored_draft)


class TestUploadThenSubmit:
    """Test the upload handler and submission service together."""

    async def test_ada_lovelace_application(self, storage, application_repository, sender):
        upload = UploadDocumentUseCase(storage)
        deck = await upload.execute(b"%PDF" + b"\0" * (2 * MiB - 4), PDF, "deck.pdf", field_name="pitch_deck")
        submit = SubmitApplicationUseCase(application_repository, storage, NotificationDispatcher(sender))

        result = await submit.execute(ApplicationDraft(
            founder_name="Ada Lovelace",
            email="ada@example.com",
            venture_name="Analytical Engines",
            industry="Technology",
            gdpr_consent=True,
            pitch_deck=deck,
        ))
        # Let the background notification task run
        for _ in range(5):
            await asyncio.sleep(0)

        assert application_repository.rows[result.application_id].status == ApplicationStatus.SUBMITTED
        confirmation = next(m for m in sender.sent if m["recipients"] == ["ada@example.com"])
        assert result.tracking_token in confirmation["body"]
