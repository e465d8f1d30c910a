"""SQLAlchemy implementation of the inquiry repository."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import ContactMessage, EventRegistration, NetworkSignup
from domain.exceptions import PersistenceError
from domain.repositories import IInquiryRepository
from infrastructure.database.models import (
    ContactMessageModel,
    EventRegistrationModel,
    NetworkSignupModel,
)


class SQLAlchemyInquiryRepository(IInquiryRepository):
    """Persist secondary form submissions, one table per form."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
    
    async def add_contact_message(self, message: ContactMessage) -> ContactMessage:
        model = ContactMessageModel(
            name=message.name.strip(),
            email=message.email.strip(),
            phone=message.phone or None,
            message=message.message.strip(),
            is_resolved=message.is_resolved,
            created_at=message.created_at,
        )
        await self._insert(model)
        message.id = model.id
        return message
    
    async def add_event_registration(self, registration: EventRegistration) -> EventRegistration:
        model = EventRegistrationModel(
            event_name=registration.event_name.strip(),
            email=registration.email.strip(),
            organization=registration.organization or None,
            created_at=registration.created_at,
        )
        await self._insert(model)
        registration.id = model.id
        return registration
    
    async def add_network_signup(self, signup: NetworkSignup) -> NetworkSignup:
        model = NetworkSignupModel(
            name=signup.name.strip(),
            role=signup.role.value,
            expertise_areas=list(signup.expertise_areas),
            cv_key=signup.cv_key,
            status=signup.status,
            created_at=signup.created_at,
        )
        await self._insert(model)
        signup.id = model.id
        return signup
    
    async def _insert(self, model) -> None:
        """Add, commit and refresh one row."""
        try:
            self.session.add(model)
            await self.session.flush()
            await self.session.commit()
            await self.session.refresh(model)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise PersistenceError(f"Could not save {model.__tablename__} record") from e
