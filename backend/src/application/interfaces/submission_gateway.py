"""Client-side gateway interface to the submission endpoint."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import ApplicationDraft


class SubmissionRejected(Exception):
    """
    The server refused a submission or could not be reached.

    Attributes:
        message: Message suitable for showing to the applicant
        errors: Field errors reported by the server, if any
        retryable: Whether resubmitting unchanged data may succeed
    """

    def __init__(self, message: str, errors: Optional[dict[str, str]] = None, retryable: bool = False):
        super().__init__(message)
        self.message = message
        self.errors = errors or {}
        self.retryable = retryable


class ISubmissionGateway(ABC):
    """Abstract network boundary used by the application wizard."""

    @abstractmethod
    async def submit(self, draft: ApplicationDraft) -> str:
        """
        Send a complete draft with its documents.

        Args:
            draft: Draft whose documents are DocumentUpload instances

        Returns:
            Tracking token issued by the server

        Raises:
            SubmissionRejected: On any non-success outcome
        """
        pass
