"""Application Interfaces - Abstract definitions for external services."""

from .file_storage import IFileStorage
from .notification_sender import INotificationSender
from .submission_gateway import ISubmissionGateway, SubmissionRejected

__all__ = [
    "IFileStorage",
    "INotificationSender",
    "ISubmissionGateway",
    "SubmissionRejected",
]
