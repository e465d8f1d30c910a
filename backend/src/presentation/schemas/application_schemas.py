"""Application-related Pydantic schemas."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Internal field name -> multipart form field name
WIRE_FIELD_NAMES = {
    "founder_name": "founderName",
    "email": "email",
    "phone": "phone",
    "venture_name": "ventureName",
    "industry": "industry",
    "gdpr_consent": "gdprConsent",
    "pitch_deck": "pitchDeck",
    "business_plan": "businessPlan",
}


def to_wire_errors(errors: dict[str, str]) -> dict[str, str]:
    """Rename field errors to the names the client sent."""
    return {WIRE_FIELD_NAMES.get(field, field): reason for field, reason in errors.items()}


class CamelModel(BaseModel):
    """Base schema serialised with camelCase keys."""
    
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SubmissionResponse(CamelModel):
    """Response schema for an accepted application."""
    
    success: bool = Field(True, description="Always true for accepted submissions")
    submission_id: int = Field(..., description="Internal application id")
    tracking_token: str = Field(..., description="Public token for status lookups")
    
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "success": True,
                    "submissionId": 42,
                    "trackingToken": "3f0c6f8e-2b7c-4f6e-9a57-6d1f0f3b5c21"
                }
            ]
        },
    )


class ErrorResponse(CamelModel):
    """Response schema for a rejected request."""
    
    success: bool = Field(False, description="Always false for failures")
    message: str = Field(..., description="Human-readable failure reason")
    errors: dict[str, str] = Field(default_factory=dict, description="Field name to reason")


class ApplicationStatusResponse(CamelModel):
    """Public status of an application."""
    
    tracking_token: str
    venture_name: str
    status: str
    created_at: datetime


class RecordCreatedResponse(CamelModel):
    """Response schema for contact, event and network submissions."""
    
    success: bool = True
    id: Optional[int] = None
