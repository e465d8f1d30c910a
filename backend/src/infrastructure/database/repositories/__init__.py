"""Repository implementations."""

from .sqlalchemy_application_repository import SQLAlchemyApplicationRepository
from .sqlalchemy_inquiry_repository import SQLAlchemyInquiryRepository

__all__ = ["SQLAlchemyApplicationRepository", "SQLAlchemyInquiryRepository"]
