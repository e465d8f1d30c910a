"""Pydantic schemas for request/response validation."""

from .application_schemas import (
    ApplicationStatusResponse,
    ErrorResponse,
    RecordCreatedResponse,
    SubmissionResponse,
    WIRE_FIELD_NAMES,
    to_wire_errors,
)
from .inquiry_schemas import ContactMessageRequest, EventRegistrationRequest
from .health_schemas import HealthResponse

__all__ = [
    "ApplicationStatusResponse",
    "ContactMessageRequest",
    "ErrorResponse",
    "EventRegistrationRequest",
    "HealthResponse",
    "RecordCreatedResponse",
    "SubmissionResponse",
    "WIRE_FIELD_NAMES",
    "to_wire_errors",
]
