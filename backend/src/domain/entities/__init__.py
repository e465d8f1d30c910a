"""Domain Entities - Objects with identity."""

from .application import Application, ApplicationDraft, generate_tracking_token
from .contact_message import ContactMessage
from .event_registration import EventRegistration
from .network_signup import NetworkSignup

__all__ = [
    "Application",
    "ApplicationDraft",
    "generate_tracking_token",
    "ContactMessage",
    "EventRegistration",
    "NetworkSignup",
]
