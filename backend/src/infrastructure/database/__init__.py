"""Database infrastructure module."""

from .session import Base, engine, get_session, init_db, close_db, create_engine_from_url
from .models import ApplicationModel, ContactMessageModel, EventRegistrationModel, NetworkSignupModel

__all__ = [
    "Base",
    "engine",
    "get_session",
    "init_db",
    "close_db",
    "create_engine_from_url",
    "ApplicationModel",
    "ContactMessageModel",
    "EventRegistrationModel",
    "NetworkSignupModel",
]
