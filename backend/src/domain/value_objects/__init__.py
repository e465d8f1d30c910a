"""Domain Value Objects - Immutable objects without identity."""

from .document import Document, StoredDocument, DocumentUpload

__all__ = ["Document", "StoredDocument", "DocumentUpload"]
