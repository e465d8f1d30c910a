"""Step-by-step validation of the founder application form."""

from typing import Optional

from domain.entities.application import ApplicationDraft
from domain.enums import Industry
from domain.exceptions import ValidationError
from domain.services.field_rules import (
    MAX_DOCUMENT_BYTES,
    check_document,
    is_blank,
    is_valid_email,
    is_valid_phone,
)


TOTAL_STEPS = 4

_INDUSTRIES = {industry.value for industry in Industry}


def _validate_founder(draft: ApplicationDraft, max_bytes: int) -> dict[str, str]:
    errors = {}
    if is_blank(draft.founder_name):
        errors["founder_name"] = "Full Name is required."
    if not is_valid_email(draft.email):
        errors["email"] = "Valid email is required."
    if draft.phone and not is_valid_phone(draft.phone):
        errors["phone"] = "Please enter a valid phone number (digits only, min 7)."
    return errors


def _validate_venture(draft: ApplicationDraft, max_bytes: int) -> dict[str, str]:
    errors = {}
    if is_blank(draft.venture_name):
        errors["venture_name"] = "Venture Name is required."
    if draft.industry not in _INDUSTRIES:
        errors["industry"] = "Please choose one of: " + ", ".join(sorted(_INDUSTRIES)) + "."
    return errors


def _validate_documents(draft: ApplicationDraft, max_bytes: int) -> dict[str, str]:
    errors = {}
    if draft.pitch_deck is None:
        errors["pitch_deck"] = "Pitch Deck upload is required."
    else:
        reason = check_document(draft.pitch_deck, max_bytes)
        if reason:
            errors["pitch_deck"] = reason

    reason = check_document(draft.business_plan, max_bytes)
    if reason:
        errors["business_plan"] = reason
    return errors


def _validate_consent(draft: ApplicationDraft, max_bytes: int) -> dict[str, str]:
    if draft.gdpr_consent is not True:
        return {"gdpr_consent": "GDPR consent is required for submission."}
    return {}


_STEP_RULES = {
    1: _validate_founder,
    2: _validate_venture,
    3: _validate_documents,
    4: _validate_consent,
}


def validate_step(
    step: int,
    draft: ApplicationDraft,
    max_bytes: int = MAX_DOCUMENT_BYTES,
) -> dict[str, str]:
    """
    Validate the fields belonging to one step of the form.

    Args:
        step: Step number, 1 to 4
        draft: Fields collected so far
        max_bytes: Inclusive document size ceiling

    Returns:
        Mapping of invalid field name to reason; empty when the step is valid
    """
    try:
        rule = _STEP_RULES[step]
    except KeyError:
        raise ValueError(f"Unknown form step: {step}") from None
    return rule(draft, max_bytes)


def validate_application(
    draft: ApplicationDraft,
    max_bytes: int = MAX_DOCUMENT_BYTES,
) -> dict[str, str]:
    """Run every step's rules against the complete draft."""
    errors: dict[str, str] = {}
    for step in range(1, TOTAL_STEPS + 1):
        errors.update(validate_step(step, draft, max_bytes))
    return errors


def ensure_valid(draft: ApplicationDraft, max_bytes: Optional[int] = None) -> None:
    """
    Raise if the complete draft fails any rule.

    Raises:
        ValidationError: With every failing field
    """
    errors = validate_application(draft, max_bytes or MAX_DOCUMENT_BYTES)
    if errors:
        raise ValidationError(errors)
