"""Use Case for accepting an uploaded document into private storage."""

import asyncio
from typing import Optional

from application.interfaces import IFileStorage
from domain.exceptions import StorageError, ValidationError
from domain.services.field_rules import MAX_DOCUMENT_BYTES, check_document
from domain.value_objects import Document, StoredDocument
from infrastructure.config import get_logger


class UploadDocumentUseCase:
    """Check a document at the boundary and write it to storage exactly once."""

    def __init__(
        self,
        storage: IFileStorage,
        max_bytes: int = MAX_DOCUMENT_BYTES,
        timeout_seconds: float = 30.0,
    ):
        self.storage = storage
        self.max_bytes = max_bytes
        self.timeout_seconds = timeout_seconds
        self.logger = get_logger(self.__class__.__name__)

    async def execute(
        self,
        content: bytes,
        content_type: str,
        filename: str,
        field_name: str = "file",
        declared_size: Optional[int] = None,
    ) -> StoredDocument:
        """
        Validate and store one document.

        Args:
            content: File bytes as received
            content_type: Media type declared by the client
            filename: Client-side file name, kept for display only
            field_name: Form field the file arrived in, used in error reports
            declared_size: Size claimed by the client, if any

        Returns:
            StoredDocument referencing the new object

        Raises:
            ValidationError: Type or size violation; nothing is written
            StorageError: The write failed or timed out
        """
        size = len(content)
        if declared_size is not None:
            size = max(size, declared_size)

        document = Document(filename=filename or "document", content_type=content_type or "", size=size)
        reason = check_document(document, self.max_bytes)
        if reason:
            self.logger.info(f"Rejected upload for {field_name}: {reason}")
            raise ValidationError({field_name: reason})

        try:
            storage_key = await asyncio.wait_for(
                self.storage.save(content, document.content_type),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError:
            self.logger.error(f"Upload for {field_name} timed out after {self.timeout_seconds}s")
            raise StorageError("Document upload timed out, please try again.") from None

        self.logger.info(
            f"Stored {field_name} ({document.size} bytes)",
            extra={"storage_key": storage_key},
        )
        return StoredDocument(
            filename=document.filename,
            content_type=document.content_type,
            size=len(content),
            storage_key=storage_key,
        )
