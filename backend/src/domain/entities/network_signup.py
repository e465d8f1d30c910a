"""Mentor and investor network signup entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from domain.enums import NetworkRole
from domain.exceptions import ValidationError
from domain.services.field_rules import is_blank


PENDING_REVIEW = "Pending Review"


@dataclass
class NetworkSignup:
    """
    Entity representing a mentor or investor joining the network.

    Attributes:
        name: Full name
        role: Mentor or Investor
        expertise_areas: Free-form skill tags
        cv_key: Storage key of an uploaded CV, if any
        status: Review status, managed outside the public API
    """

    name: str
    role: NetworkRole
    expertise_areas: list[str] = field(default_factory=list)
    cv_key: Optional[str] = None
    id: Optional[int] = None
    status: str = PENDING_REVIEW
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Validate signup."""
        if is_blank(self.name):
            raise ValidationError({"name": "Name is required."})
        self.expertise_areas = [area.strip() for area in self.expertise_areas if area and area.strip()]
