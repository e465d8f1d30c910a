"""Finite-state machine driving the four-step application wizard."""

from dataclasses import dataclass, field, fields, replace
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from domain.entities import ApplicationDraft
from domain.services import TOTAL_STEPS, validate_application, validate_step


class WizardStep(IntEnum):
    """Screens of the wizard; SUCCESS is terminal."""

    FOUNDER = 1
    VENTURE = 2
    DOCUMENTS = 3
    CONSENT = 4
    SUCCESS = 5


_DRAFT_FIELDS = frozenset(f.name for f in fields(ApplicationDraft))
_NO_ERRORS: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True)
class WizardState:
    """
    Immutable wizard state. Each transition yields a new instance.

    Attributes:
        step: Current screen
        draft: Fields entered so far
        errors: Field errors for the current screen
        is_submitting: A submission request is in flight
        submission_error: Message reported by the server on the last failure
        tracking_token: Token issued on success
    """

    step: WizardStep = WizardStep.FOUNDER
    draft: ApplicationDraft = field(default_factory=ApplicationDraft)
    errors: Mapping[str, str] = field(default_factory=lambda: _NO_ERRORS)
    is_submitting: bool = False
    submission_error: Optional[str] = None
    tracking_token: Optional[str] = None

    @property
    def can_submit(self) -> bool:
        return self.step == WizardStep.CONSENT and not self.is_submitting


@dataclass(frozen=True)
class UpdateField:
    name: str
    value: Any


@dataclass(frozen=True)
class Next:
    pass


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class SubmitRequested:
    pass


@dataclass(frozen=True)
class SubmitSucceeded:
    tracking_token: str


@dataclass(frozen=True)
class SubmitFailed:
    message: str
    errors: Mapping[str, str] = field(default_factory=lambda: _NO_ERRORS)


@dataclass(frozen=True)
class ReturnHome:
    pass


Action = Union[UpdateField, Next, Back, SubmitRequested, SubmitSucceeded, SubmitFailed, ReturnHome]


def _freeze(errors: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(errors)) if errors else _NO_ERRORS


def reduce(state: WizardState, action: Action) -> WizardState:
    """
    Compute the state that follows ``action``.

    Actions that make no sense in the current state return it unchanged.
    """
    if isinstance(action, ReturnHome):
        if state.step == WizardStep.SUCCESS:
            return WizardState()
        return state

    if state.step == WizardStep.SUCCESS:
        return state

    if isinstance(action, UpdateField):
        if action.name not in _DRAFT_FIELDS:
            raise ValueError(f"Unknown form field: {action.name}")
        if state.is_submitting:
            return state
        errors = {k: v for k, v in state.errors.items() if k != action.name}
        return replace(
            state,
            draft=replace(state.draft, **{action.name: action.value}),
            errors=_freeze(errors),
        )

    if isinstance(action, Next):
        if state.step >= TOTAL_STEPS:
            return state
        errors = validate_step(int(state.step), state.draft)
        if errors:
            return replace(state, errors=_freeze(errors))
        return replace(state, step=WizardStep(state.step + 1), errors=_NO_ERRORS)

    if isinstance(action, Back):
        if state.is_submitting or state.step == WizardStep.FOUNDER:
            return replace(state, errors=_NO_ERRORS)
        return replace(
            state,
            step=WizardStep(state.step - 1),
            errors=_NO_ERRORS,
            submission_error=None,
        )

    if isinstance(action, SubmitRequested):
        if not state.can_submit:
            return state
        errors = validate_application(state.draft)
        if errors:
            return replace(state, errors=_freeze(errors))
        return replace(state, is_submitting=True, errors=_NO_ERRORS, submission_error=None)

    if isinstance(action, SubmitSucceeded):
        if not state.is_submitting:
            return state
        return replace(
            state,
            step=WizardStep.SUCCESS,
            is_submitting=False,
            tracking_token=action.tracking_token,
        )

    if isinstance(action, SubmitFailed):
        if not state.is_submitting:
            return state
        return replace(
            state,
            is_submitting=False,
            submission_error=action.message,
            errors=_freeze(action.errors),
        )

    raise TypeError(f"Unsupported wizard action: {type(action).__name__}")
