"""Application Use Cases."""

from .upload_document import UploadDocumentUseCase
from .submit_application import SubmitApplicationUseCase, SubmissionResult
from .get_application_status import GetApplicationStatusUseCase
from .update_application_status import UpdateApplicationStatusUseCase
from .record_inquiry import RecordInquiryUseCase

__all__ = [
    "UploadDocumentUseCase",
    "SubmitApplicationUseCase",
    "SubmissionResult",
    "GetApplicationStatusUseCase",
    "UpdateApplicationStatusUseCase",
    "RecordInquiryUseCase",
]
