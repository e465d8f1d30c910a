"""Unit tests for the wizard controller."""

import asyncio

from application.interfaces import ISubmissionGateway, SubmissionRejected
from application.wizard import ApplicationWizard, Next, ReturnHome, UpdateField, WizardStep
from domain.value_objects import DocumentUpload
from fakes import PDF


class FakeGateway(ISubmissionGateway):
    """Gateway that records calls and returns or raises a canned outcome."""

    def __init__(self, outcome="token-1", gate: asyncio.Event = None):
        self.outcome = outcome
        self.gate = gate
        self.calls = []

    async def submit(self, draft):
        self.calls.append(draft)
        if self.gate is not None:
            await self.gate.wait()
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


def fill(wizard):
    for action in (
        UpdateField("founder_name", "Ada Lovelace"),
        UpdateField("email", "ada@example.com"),
        Next(),
        UpdateField("venture_name", "Analytical Engines"),
        Next(),
        UpdateField("pitch_deck", DocumentUpload.from_bytes("deck.pdf", PDF, b"%PDF-1.4")),
        Next(),
        UpdateField("gdpr_consent", True),
    ):
        wizard.dispatch(action)
    return wizard


class TestSubmit:
    """Test the single network call per accepted submit."""

    async def test_success(self):
        gateway = FakeGateway()
        wizard = fill(ApplicationWizard(gateway))

        state = await wizard.submit()

        assert state.step == WizardStep.SUCCESS
        assert state.tracking_token == "token-1"
        assert len(gateway.calls) == 1
        assert gateway.calls[0].founder_name == "Ada Lovelace"

    async def test_double_submit_makes_one_call(self):
        gate = asyncio.Event()
        gateway = FakeGateway(gate=gate)
        wizard = fill(ApplicationWizard(gateway))

        first = asyncio.create_task(wizard.submit())
        await asyncio.sleep(0)
        second = await wizard.submit()
        assert second.is_submitting

        gate.set()
        state = await first

        assert len(gateway.calls) == 1
        assert state.step == WizardStep.SUCCESS

    async def test_invalid_draft_never_reaches_gateway(self):
        gateway = FakeGateway()
        wizard = fill(ApplicationWizard(gateway))
        wizard.dispatch(UpdateField("gdpr_consent", False))

        state = await wizard.submit()

        assert gateway.calls == []
        assert "gdpr_consent" in state.errors

    async def test_rejection_keeps_form_for_retry(self):
        gateway = FakeGateway(outcome=SubmissionRejected("Submission failed validation: email", {"email": "Invalid"}))
        wizard = fill(ApplicationWizard(gateway))

        state = await wizard.submit()

        assert state.step == WizardStep.CONSENT
        assert state.submission_error == "Submission failed validation: email"
        assert state.errors == {"email": "Invalid"}

        gateway.outcome = "token-2"
        state = await wizard.submit()
        assert state.tracking_token == "token-2"
        assert len(gateway.calls) == 2

    async def test_unexpected_error_reports_generic_message(self):
        wizard = fill(ApplicationWizard(FakeGateway(outcome=RuntimeError("socket closed"))))

        state = await wizard.submit()

        assert state.submission_error == "Could not connect to the server or file upload failed."
        assert not state.is_submitting


class TestOnChange:
    """Test state change notifications."""

    def test_listener_called_on_change_only(self):
        seen = []
        wizard = ApplicationWizard(FakeGateway(), on_change=seen.append)

        wizard.dispatch(UpdateField("founder_name", "Ada"))
        wizard.dispatch(Next())
        wizard.dispatch(UpdateField("email", "ada@example.com"))
        wizard.dispatch(Next())

        assert len(seen) == 4
        assert seen[-1].step == WizardStep.VENTURE

    def test_ignored_action_does_not_notify(self):
        seen = []
        wizard = ApplicationWizard(FakeGateway(), on_change=seen.append)
        state = wizard.state

        wizard.dispatch(ReturnHome())

        assert seen == []
        assert wizard.state is state
