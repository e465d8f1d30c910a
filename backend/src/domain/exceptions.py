"""Domain errors raised while accepting submissions."""

from typing import Optional


class SubmissionError(Exception):
    """Base class for all submission failures."""


class ValidationError(SubmissionError, ValueError):
    """
    A field or file failed validation.

    Attributes:
        errors: Mapping of field name to a human-readable reason
    """

    def __init__(self, errors: dict[str, str], message: Optional[str] = None):
        self.errors = dict(errors)
        super().__init__(message or "Submission failed validation: " + ", ".join(sorted(self.errors)))


class StorageError(SubmissionError):
    """Writing an uploaded document failed. The caller may retry."""


class PersistenceError(SubmissionError):
    """Writing a record failed. Nothing was committed; the caller may retry."""


class NotificationError(SubmissionError):
    """A best-effort message could not be delivered."""
