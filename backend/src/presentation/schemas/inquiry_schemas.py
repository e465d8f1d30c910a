"""Request schemas for the contact and event forms."""

from typing import Optional
from pydantic import Field

from presentation.schemas.application_schemas import CamelModel


class ContactMessageRequest(CamelModel):
    """Request schema for the contact form."""
    
    name: str = Field(..., max_length=255)
    email: str = Field(..., max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    message: str = Field(..., max_length=5000)


class EventRegistrationRequest(CamelModel):
    """Request schema for an event registration."""
    
    event_name: str = Field(..., max_length=255)
    email: str = Field(..., max_length=255)
    organization: Optional[str] = Field(None, max_length=255)
