"""Contact form message entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from domain.exceptions import ValidationError
from domain.services.field_rules import is_blank, is_valid_email, is_valid_phone


@dataclass
class ContactMessage:
    """A question sent through the public contact form."""

    name: str
    email: str
    message: str
    phone: Optional[str] = None
    id: Optional[int] = None
    is_resolved: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Validate contact message."""
        errors = {}
        if is_blank(self.name):
            errors["name"] = "Name is required."
        if not is_valid_email(self.email):
            errors["email"] = "Valid email is required."
        if self.phone and not is_valid_phone(self.phone):
            errors["phone"] = "Please enter a valid phone number (digits only, min 7)."
        if is_blank(self.message):
            errors["message"] = "Message cannot be empty."
        if errors:
            raise ValidationError(errors)

    def __str__(self) -> str:
        return f"ContactMessage(id={self.id}, email={self.email})"
