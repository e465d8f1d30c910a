"""Use Case for accepting a complete founder application."""

import asyncio
from dataclasses import dataclass
from typing import Any, Callable, Optional

from application.interfaces import IFileStorage
from application.services import NotificationDispatcher
from domain.entities import Application, ApplicationDraft, generate_tracking_token
from domain.exceptions import PersistenceError, ValidationError
from domain.repositories import IApplicationRepository
from domain.services import ensure_valid
from domain.value_objects import StoredDocument
from infrastructure.config import get_logger


Scheduler = Callable[..., Any]


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a committed submission."""

    application_id: int
    tracking_token: str
    application: Application


class SubmitApplicationUseCase:
    """
    Validate, persist and acknowledge one application.

    Uploaded documents are not removed when validation or persistence fails;
    orphaned objects are tolerated rather than coordinating storage and
    database in one transaction.
    """

    def __init__(
        self,
        application_repository: IApplicationRepository,
        storage: IFileStorage,
        dispatcher: Optional[NotificationDispatcher] = None,
        schedule: Optional[Scheduler] = None,
        max_document_bytes: Optional[int] = None,
        timeout_seconds: float = 10.0,
    ):
        self.application_repo = application_repository
        self.storage = storage
        self.dispatcher = dispatcher
        self.schedule = schedule or _schedule_task
        self.max_document_bytes = max_document_bytes
        self.timeout_seconds = timeout_seconds
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, draft: ApplicationDraft) -> SubmissionResult:
        """
        Accept an application whose documents were already uploaded.

        Args:
            draft: Complete form data with StoredDocument references

        Returns:
            SubmissionResult with internal id and tracking token

        Raises:
            ValidationError: A field, file or consent check failed
            PersistenceError: The record could not be written
        """
        # 1. Server-side validation is authoritative
        ensure_valid(draft, self.max_document_bytes)
        await self._ensure_documents_stored(draft)

        # 2. Public token
        application = Application.from_draft(draft, tracking_token=generate_tracking_token())

        # 3. Persist
        try:
            saved = await asyncio.wait_for(
                self.application_repo.create(application),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError:
            self.logger.error(f"Persisting application timed out after {self.timeout_seconds}s")
            raise PersistenceError("Saving the application timed out, please try again.") from None

        self.logger.info(
            f"Application {saved.id} submitted for venture '{saved.venture_name}'",
            extra={"application_id": saved.id, "tracking_token": saved.tracking_token},
        )

        # Side effect: best-effort notifications once the row is committed
        if self.dispatcher is not None:
            try:
                self.schedule(self.dispatcher.dispatch, saved)
            except Exception as e:
                self.logger.error(f"Could not schedule notifications for application {saved.id}: {e}")

        # 4. Result
        return SubmissionResult(
            application_id=saved.id,
            tracking_token=saved.tracking_token,
            application=saved,
        )

    async def _ensure_documents_stored(self, draft: ApplicationDraft) -> None:
        errors = {}
        for field_name, document in (("pitch_deck", draft.pitch_deck), ("business_plan", draft.business_plan)):
            if document is None:
                continue
            if not isinstance(document, StoredDocument) or not await self.storage.exists(document.storage_key):
                errors[field_name] = "Uploaded file could not be found, please upload it again."
        if errors:
            raise ValidationError(errors)


_background_tasks: set[asyncio.Task] = set()


def _schedule_task(func: Callable[..., Any], *args: Any) -> None:
    """Run a coroutine function in the background on the current loop."""
    task = asyncio.get_running_loop().create_task(func(*args))
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
