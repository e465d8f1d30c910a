"""Event registration entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from domain.exceptions import ValidationError
from domain.services.field_rules import is_blank, is_valid_email


@dataclass
class EventRegistration:
    """An attendee signing up for a program event."""

    event_name: str
    email: str
    organization: Optional[str] = None
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        errors = {}
        if is_blank(self.event_name):
            errors["event_name"] = "Event name is required."
        if not is_valid_email(self.email):
            errors["email"] = "Valid email is required."
        if errors:
            raise ValidationError(errors)
