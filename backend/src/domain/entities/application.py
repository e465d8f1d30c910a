"""Application entity representing one founder's submission to the program."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from domain.enums import ApplicationStatus, Industry
from domain.exceptions import ValidationError
from domain.value_objects import Document, StoredDocument


def generate_tracking_token() -> str:
    """Issue a new public tracking token (random UUID4, never derived from a counter)."""
    return str(uuid4())


@dataclass(frozen=True)
class ApplicationDraft:
    """
    Immutable snapshot of the fields collected by the application form.

    Document fields hold ``Document`` instances on the client side and
    ``StoredDocument`` instances once the files have been uploaded.
    """

    founder_name: str = ""
    email: str = ""
    phone: str = ""
    venture_name: str = ""
    industry: str = Industry.TECHNOLOGY.value
    pitch_deck: Optional[Document] = None
    business_plan: Optional[Document] = None
    gdpr_consent: bool = False


@dataclass
class Application:
    """
    Entity representing a persisted application.

    The tracking token and creation timestamp are set once; only the
    review workflow may change ``status``.
    """

    founder_name: str
    email: str
    venture_name: str
    pitch_deck_key: str
    gdpr_consent: bool
    id: Optional[int] = None
    tracking_token: str = field(default_factory=generate_tracking_token)
    phone: Optional[str] = None
    industry: Industry = Industry.TECHNOLOGY
    business_plan_key: Optional[str] = None
    status: ApplicationStatus = ApplicationStatus.SUBMITTED
    created_at: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def from_draft(cls, draft: ApplicationDraft, tracking_token: str) -> "Application":
        """
        Build a new application from a validated draft.

        Args:
            draft: Draft whose documents were accepted by the upload handler
            tracking_token: Freshly issued public token

        Returns:
            Unsaved Application in Submitted status
        """
        if not isinstance(draft.pitch_deck, StoredDocument):
            raise ValidationError({"pitch_deck": "Pitch Deck upload is required."})
        business_plan_key = None
        if draft.business_plan is not None:
            if not isinstance(draft.business_plan, StoredDocument):
                raise ValidationError({"business_plan": "Business plan was not uploaded."})
            business_plan_key = draft.business_plan.storage_key

        return cls(
            founder_name=draft.founder_name.strip(),
            email=draft.email.strip(),
            phone=draft.phone.strip() or None,
            venture_name=draft.venture_name.strip(),
            industry=Industry(draft.industry),
            pitch_deck_key=draft.pitch_deck.storage_key,
            business_plan_key=business_plan_key,
            gdpr_consent=draft.gdpr_consent,
            tracking_token=tracking_token,
        )

    def change_status(self, new_status: ApplicationStatus) -> ApplicationStatus:
        """
        Move the application along the review workflow.

        Returns:
            The previous status

        Raises:
            ValidationError: If the workflow does not allow the transition
        """
        if not self.status.can_transition_to(new_status):
            raise ValidationError(
                {"status": f"Cannot move from {self.status.value} to {new_status.value}."}
            )
        previous = self.status
        self.status = new_status
        return previous

    def __str__(self) -> str:
        return f"Application(id={self.id}, venture={self.venture_name}, status={self.status.value})"
