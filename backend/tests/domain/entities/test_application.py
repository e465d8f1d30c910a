"""Unit tests for Application entity and review statuses."""

from dataclasses import replace
from uuid import UUID

import pytest

from domain.entities import Application, ApplicationDraft, generate_tracking_token
from domain.enums import ApplicationStatus, Industry
from domain.exceptions import ValidationError


def make_application(**overrides) -> Application:
    fields = dict(
        founder_name="Ada Lovelace",
        email="ada@example.com",
        venture_name="Analytical Engines",
        pitch_deck_key="a" * 32,
        gdpr_consent=True,
    )
    fields.update(overrides)
    return Application(**fields)


class TestTrackingToken:
    """Test tracking token generation."""

    def test_token_is_uuid4(self):
        token = generate_tracking_token()
        assert UUID(token).version == 4
        assert len(token) == 36

    def test_tokens_do_not_repeat(self):
        tokens = {generate_tracking_token() for _ in range(1000)}
        assert len(tokens) == 1000


class TestApplicationFromDraft:
    """Test building an application from a draft."""

    async def test_from_stored_draft(self, stored_draft):
        application = Application.from_draft(stored_draft, tracking_token="token-1")
        assert application.id is None
        assert application.tracking_token == "token-1"
        assert application.founder_name == "Ada Lovelace"
        assert application.industry == Industry.TECHNOLOGY
        assert application.pitch_deck_key == stored_draft.pitch_deck.storage_key
        assert application.business_plan_key is None
        assert application.status == ApplicationStatus.SUBMITTED

    async def test_blank_phone_stored_as_none(self, stored_draft):
        application = Application.from_draft(replace(stored_draft, phone="  "), "token")
        assert application.phone is None

    def test_unuploaded_pitch_deck_rejected(self, valid_draft):
        with pytest.raises(ValidationError) as exc_info:
            Application.from_draft(valid_draft, "token")
        assert "pitch_deck" in exc_info.value.errors

    def test_empty_draft_defaults(self):
        draft = ApplicationDraft()
        assert draft.industry == "Technology"
        assert draft.gdpr_consent is False
        assert draft.pitch_deck is None


class TestStatusTransitions:
    """Test the review workflow."""

    def test_new_application_is_submitted(self):
        assert make_application().status == ApplicationStatus.SUBMITTED

    @pytest.mark.parametrize("path", [
        [ApplicationStatus.UNDER_REVIEW, ApplicationStatus.INTERVIEW, ApplicationStatus.ACCEPTED],
        [ApplicationStatus.UNDER_REVIEW, ApplicationStatus.REJECTED],
        [ApplicationStatus.REJECTED],
        [ApplicationStatus.UNDER_REVIEW, ApplicationStatus.ACCEPTED],
    ])
    def test_allowed_paths(self, path):
        application = make_application()
        for status in path:
            application.change_status(status)
        assert application.status == path[-1]

    def test_change_status_returns_previous(self):
        application = make_application()
        assert application.change_status(ApplicationStatus.UNDER_REVIEW) == ApplicationStatus.SUBMITTED

    @pytest.mark.parametrize("start,target", [
        (ApplicationStatus.SUBMITTED, ApplicationStatus.ACCEPTED),
        (ApplicationStatus.SUBMITTED, ApplicationStatus.SUBMITTED),
        (ApplicationStatus.INTERVIEW, ApplicationStatus.UNDER_REVIEW),
        (ApplicationStatus.ACCEPTED, ApplicationStatus.REJECTED),
        (ApplicationStatus.REJECTED, ApplicationStatus.UNDER_REVIEW),
    ])
    def test_disallowed_transitions(self, start, target):
        application = make_application(status=start)
        with pytest.raises(ValidationError, match="status"):
            application.change_status(target)
        assert application.status == start

    def test_final_statuses(self):
        assert ApplicationStatus.ACCEPTED.is_final
        assert ApplicationStatus.REJECTED.is_final
        assert not ApplicationStatus.SUBMITTED.is_final

    def test_status_values_match_review_labels(self):
        assert [s.value for s in ApplicationStatus] == [
            "Submitted", "Under Review", "Interview", "Accepted", "Rejected",
        ]
