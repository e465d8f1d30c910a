"""Stateful driver around the wizard reducer."""

from typing import Callable, Optional

from application.interfaces import ISubmissionGateway, SubmissionRejected
from application.wizard.state_machine import (
    Action,
    SubmitFailed,
    SubmitRequested,
    SubmitSucceeded,
    WizardState,
    reduce,
)
from infrastructure.config import get_logger


class ApplicationWizard:
    """
    Hold the current wizard state and perform the single network call.

    UI code dispatches actions and renders ``state``; it never touches the
    gateway directly.
    """

    def __init__(
        self,
        gateway: ISubmissionGateway,
        on_change: Optional[Callable[[WizardState], None]] = None,
    ):
        self.gateway = gateway
        self.on_change = on_change
        self.state = WizardState()
        self.logger = get_logger(self.__class__.__name__)

    def dispatch(self, action: Action) -> WizardState:
        """Apply an action and notify the listener if the state changed."""
        new_state = reduce(self.state, action)
        if new_state is not self.state:
            self.state = new_state
            if self.on_change is not None:
                self.on_change(new_state)
        return self.state

    async def submit(self) -> WizardState:
        """
        Submit the draft if the wizard is ready.

        A call made while another submission is in flight, or while the
        draft is invalid, does not reach the gateway.
        """
        before = self.state
        self.dispatch(SubmitRequested())
        if not self.state.is_submitting or before.is_submitting:
            return self.state

        try:
            tracking_token = await self.gateway.submit(self.state.draft)
        except SubmissionRejected as e:
            self.logger.warning(f"Submission failed: {e.message}")
            return self.dispatch(SubmitFailed(message=e.message, errors=e.errors))
        except Exception as e:
            self.logger.error(f"Submission error: {str(e)}", exc_info=True)
            return self.dispatch(
                SubmitFailed(message="Could not connect to the server or file upload failed.")
            )
        return self.dispatch(SubmitSucceeded(tracking_token=tracking_token))
