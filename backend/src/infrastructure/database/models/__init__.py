"""SQLAlchemy ORM models."""

from .application_model import ApplicationModel
from .inquiry_models import ContactMessageModel, EventRegistrationModel, NetworkSignupModel

__all__ = [
    "ApplicationModel",
    "ContactMessageModel",
    "EventRegistrationModel",
    "NetworkSignupModel",
]
