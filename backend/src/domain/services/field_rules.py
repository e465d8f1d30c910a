"""Field-level rules shared by every public form."""

import re
from typing import Optional

from domain.value_objects import Document


MAX_DOCUMENT_BYTES = 5 * 1024 * 1024

ALLOWED_DOCUMENT_TYPES = frozenset({
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
})

# ASCII only; checked with fullmatch so a trailing newline is rejected
EMAIL_PATTERN = re.compile(r"[\w.-]+@([\w-]+\.)+[\w-]{2,4}", re.ASCII)
PHONE_PATTERN = re.compile(r"\d{7,}", re.ASCII)


def is_blank(value: Optional[str]) -> bool:
    """Check whether a text value is missing or whitespace only."""
    return value is None or not str(value).strip()


def is_valid_email(value: Optional[str]) -> bool:
    return bool(value) and EMAIL_PATTERN.fullmatch(value) is not None


def is_valid_phone(value: Optional[str]) -> bool:
    """Phone numbers are digits only with at least 7 of them."""
    return bool(value) and PHONE_PATTERN.fullmatch(value) is not None


def check_document(
    document: Optional[Document],
    max_bytes: int = MAX_DOCUMENT_BYTES,
) -> Optional[str]:
    """
    Check a document's declared media type and size.

    Args:
        document: Document to check
        max_bytes: Inclusive size ceiling

    Returns:
        Reason the document is rejected, or None if it is acceptable
    """
    if document is None:
        return None
    if not document.content_type or document.content_type not in ALLOWED_DOCUMENT_TYPES:
        return "File must be a PDF, DOC or DOCX document."
    if document.size > max_bytes:
        return f"File must not exceed {max_bytes // (1024 * 1024)}MB."
    return None
