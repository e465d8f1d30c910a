"""Pytest configuration and shared fixtures."""

import os

# Must be set before any module reads the cached settings
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SMTP_SERVER", "")

import pytest

from domain.entities import ApplicationDraft
from domain.value_objects import Document, DocumentUpload, StoredDocument
from fakes import (
    PDF,
    MiB,
    InMemoryApplicationRepository,
    InMemoryFileStorage,
    InMemoryInquiryRepository,
    RecordingNotificationSender,
)


@pytest.fixture
def pitch_deck():
    """Fixture for a 2 MB PDF pitch deck as described by the client."""
    return Document(filename="deck.pdf", content_type=PDF, size=2 * MiB)


@pytest.fixture
def valid_draft(pitch_deck):
    """Fixture for a draft that passes every step."""
    return ApplicationDraft(
        founder_name="Ada Lovelace",
        email="ada@example.com",
        venture_name="Analytical Engines",
        industry="Technology",
        pitch_deck=pitch_deck,
        gdpr_consent=True,
    )


@pytest.fixture
def storage():
    return InMemoryFileStorage()


@pytest.fixture
def application_repository():
    return InMemoryApplicationRepository()


@pytest.fixture
def inquiry_repository():
    return InMemoryInquiryRepository()


@pytest.fixture
def sender():
    return RecordingNotificationSender()


@pytest.fixture
async def stored_draft(valid_draft, storage):
    """Fixture for a valid draft whose pitch deck is already in storage."""
    content = b"%PDF-1.7" + b"\0" * (2 * MiB - 8)
    key = await storage.save(content, PDF)
    stored = StoredDocument(filename="deck.pdf", content_type=PDF, size=len(content), storage_key=key)
    return ApplicationDraft(
        founder_name=valid_draft.founder_name,
        email=valid_draft.email,
        venture_name=valid_draft.venture_name,
        industry=valid_draft.industry,
        pitch_deck=stored,
        gdpr_consent=True,
    )


@pytest.fixture
def upload_draft(valid_draft):
    """Fixture for a valid client-side draft carrying file content."""
    deck = DocumentUpload.from_bytes("deck.pdf", PDF, b"%PDF-1.7 sample deck")
    return ApplicationDraft(
        founder_name=valid_draft.founder_name,
        email=valid_draft.email,
        venture_name=valid_draft.venture_name,
        industry=valid_draft.industry,
        pitch_deck=deck,
        gdpr_consent=True,
    )


@pytest.fixture
async def db_engine():
    """Fixture for a fresh in-memory database with all tables created."""
    from infrastructure.database import create_engine_from_url, init_db

    engine = create_engine_from_url("sqlite+aiosqlite:///:memory:")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def api_client(db_engine, tmp_path, sender):
    """
    Fixture for an HTTP client bound to the app.

    The database, document storage and notification sender are replaced
    with test instances; ``sender.sent`` shows the notifications.
    """
    import httpx
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    from infrastructure.database import get_session
    from infrastructure.storage import LocalFileStorage
    from main import app
    from presentation.api.v1.dependencies import get_db_session, get_file_storage, get_notification_sender

    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    file_storage = LocalFileStorage(tmp_path / "uploads")

    async def override_db_session():
        async for session in get_session(factory):
            yield session

    app.dependency_overrides[get_db_session] = override_db_session
    app.dependency_overrides[get_file_storage] = lambda: file_storage
    app.dependency_overrides[get_notification_sender] = lambda: sender

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        client.file_storage = file_storage
        yield client

    app.dependency_overrides.clear()
