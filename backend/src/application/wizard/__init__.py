"""Application wizard: immutable state machine and its controller."""

from .state_machine import (
    Back,
    Next,
    ReturnHome,
    SubmitFailed,
    SubmitRequested,
    SubmitSucceeded,
    UpdateField,
    WizardState,
    WizardStep,
    reduce,
)
from .controller import ApplicationWizard

__all__ = [
    "ApplicationWizard",
    "Back",
    "Next",
    "ReturnHome",
    "SubmitFailed",
    "SubmitRequested",
    "SubmitSucceeded",
    "UpdateField",
    "WizardState",
    "WizardStep",
    "reduce",
]
