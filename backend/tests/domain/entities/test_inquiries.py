"""Unit tests for contact, event and network entities."""

import pytest

from domain.entities import ContactMessage, EventRegistration, NetworkSignup
from domain.entities.network_signup import PENDING_REVIEW
from domain.enums import NetworkRole
from domain.exceptions import ValidationError


class TestContactMessage:
    """Test ContactMessage validation."""

    def test_valid_message(self):
        message = ContactMessage(name="Ada", email="ada@example.com", message="Hello")
        assert message.is_resolved is False

    def test_missing_fields_reported_together(self):
        with pytest.raises(ValidationError) as exc_info:
            ContactMessage(name=" ", email="nope", message="", phone="12")
        assert set(exc_info.value.errors) == {"name", "email", "message", "phone"}


class TestEventRegistration:
    """Test EventRegistration validation."""

    def test_valid_registration(self):
        registration = EventRegistration(event_name="Demo Day", email="ada@example.com")
        assert registration.organization is None

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError, match="email"):
            EventRegistration(event_name="Demo Day", email="ada")


class TestNetworkSignup:
    """Test NetworkSignup validation."""

    def test_defaults_to_pending_review(self):
        signup = NetworkSignup(name="Grace", role=NetworkRole.MENTOR)
        assert signup.status == PENDING_REVIEW

    def test_expertise_areas_are_cleaned(self):
        signup = NetworkSignup(name="Grace", role=NetworkRole.INVESTOR, expertise_areas=[" AI ", "", "Fintech"])
        assert signup.expertise_areas == ["AI", "Fintech"]

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            NetworkSignup(name="", role=NetworkRole.MENTOR)
