"""HTTP clients."""

from .submission_client import ApplicationSubmissionClient, FIELD_NAMES

__all__ = ["ApplicationSubmissionClient", "FIELD_NAMES"]
