"""Domain Services - Stateless rules that span entities."""

from .field_rules import ALLOWED_DOCUMENT_TYPES, MAX_DOCUMENT_BYTES, check_document
from .submission_validator import TOTAL_STEPS, ensure_valid, validate_application, validate_step

__all__ = [
    "ALLOWED_DOCUMENT_TYPES",
    "MAX_DOCUMENT_BYTES",
    "TOTAL_STEPS",
    "check_document",
    "ensure_valid",
    "validate_application",
    "validate_step",
]
