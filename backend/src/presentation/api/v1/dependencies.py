"""FastAPI dependency injection setup."""

from functools import lru_cache
from typing import AsyncGenerator

from fastapi import BackgroundTasks, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.config import get_settings
from infrastructure.database import get_session
from infrastructure.database.repositories import (
    SQLAlchemyApplicationRepository,
    SQLAlchemyInquiryRepository,
)
from infrastructure.notifications import SMTPNotificationSender
from infrastructure.storage import LocalFileStorage
from application.interfaces import IFileStorage, INotificationSender
from application.services import NotificationDispatcher
from application.use_cases import (
    GetApplicationStatusUseCase,
    RecordInquiryUseCase,
    SubmitApplicationUseCase,
    UploadDocumentUseCase,
)
from domain.repositories import IApplicationRepository, IInquiryRepository


# Database session dependency
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    async for session in get_session():
        yield session


# Repository dependencies
def get_application_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IApplicationRepository:
    """Get application repository dependency."""
    return SQLAlchemyApplicationRepository(session)


def get_inquiry_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IInquiryRepository:
    """Get inquiry repository dependency."""
    return SQLAlchemyInquiryRepository(session)


# External service dependencies
@lru_cache()
def get_file_storage() -> IFileStorage:
    """Get document storage dependency."""
    return LocalFileStorage(get_settings().upload_dir)


def get_notification_sender() -> INotificationSender:
    """Get notification sender dependency."""
    return SMTPNotificationSender(get_settings())


def get_notification_dispatcher(
    sender: INotificationSender = Depends(get_notification_sender),
) -> NotificationDispatcher:
    """Get notification dispatcher dependency."""
    return NotificationDispatcher(sender, tracking_base_url=get_settings().tracking_base_url)


# Use case dependencies
def get_upload_document_use_case(
    storage: IFileStorage = Depends(get_file_storage),
) -> UploadDocumentUseCase:
    """Get upload handler dependency."""
    settings = get_settings()
    return UploadDocumentUseCase(
        storage,
        max_bytes=settings.max_upload_bytes,
        timeout_seconds=settings.upload_timeout_seconds,
    )


def get_submit_application_use_case(
    background_tasks: BackgroundTasks,
    repository: IApplicationRepository = Depends(get_application_repository),
    storage: IFileStorage = Depends(get_file_storage),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> SubmitApplicationUseCase:
    """
    Get submission use case dependency.

    Notifications are scheduled as background tasks so they run after the
    response has been sent.
    """
    settings = get_settings()
    return SubmitApplicationUseCase(
        application_repository=repository,
        storage=storage,
        dispatcher=dispatcher,
        schedule=background_tasks.add_task,
        max_document_bytes=settings.max_upload_bytes,
        timeout_seconds=settings.database_timeout_seconds,
    )


def get_application_status_use_case(
    repository: IApplicationRepository = Depends(get_application_repository),
) -> GetApplicationStatusUseCase:
    """Get status lookup dependency."""
    return GetApplicationStatusUseCase(repository)


def get_record_inquiry_use_case(
    repository: IInquiryRepository = Depends(get_inquiry_repository),
) -> RecordInquiryUseCase:
    """Get inquiry recording dependency."""
    return RecordInquiryUseCase(repository)
