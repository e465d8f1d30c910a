"""Domain Repository Interfaces - Abstract definitions."""

from .application_repository import IApplicationRepository
from .inquiry_repository import IInquiryRepository

__all__ = ["IApplicationRepository", "IInquiryRepository"]
