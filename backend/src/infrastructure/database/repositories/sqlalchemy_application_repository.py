"""SQLAlchemy implementation of application repository."""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Application
from domain.enums import ApplicationStatus, Industry
from domain.exceptions import PersistenceError
from domain.repositories import IApplicationRepository
from infrastructure.config import get_logger
from infrastructure.database.models import ApplicationModel


logger = get_logger(__name__)


class SQLAlchemyApplicationRepository(IApplicationRepository):
    """Concrete implementation of IApplicationRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def create(self, application: Application) -> Application:
        """Insert and commit a new application."""
        model = self._entity_to_model(application)
        try:
            self.session.add(model)
            await self.session.flush()
            await self.session.commit()
            await self.session.refresh(model)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to persist application: {e}", exc_info=True)
            raise PersistenceError("Could not save the application, please try again.") from e
        return self._model_to_entity(model)
    
    async def get_by_id(self, application_id: int) -> Optional[Application]:
        """Retrieve an application by internal id."""
        stmt = select(ApplicationModel).where(ApplicationModel.id == application_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def get_by_tracking_token(self, tracking_token: str) -> Optional[Application]:
        """Retrieve an application by its public tracking token."""
        stmt = select(ApplicationModel).where(ApplicationModel.tracking_token == tracking_token)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def set_status(self, application_id: int, status: ApplicationStatus) -> Application:
        """Store a new review status; nothing else on the row is writable."""
        stmt = select(ApplicationModel).where(ApplicationModel.id == application_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            raise PersistenceError(f"Application {application_id} not found")
        
        try:
            model.status = status.value
            await self.session.flush()
            await self.session.commit()
            await self.session.refresh(model)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise PersistenceError(f"Could not update application {application_id}") from e
        
        return self._model_to_entity(model)
    
    def _entity_to_model(self, entity: Application) -> ApplicationModel:
        """Convert domain entity to ORM model."""
        return ApplicationModel(
            id=entity.id,
            tracking_token=entity.tracking_token,
            founder_name=entity.founder_name,
            email=entity.email,
            phone=entity.phone,
            venture_name=entity.venture_name,
            industry=entity.industry.value,
            pitch_deck_key=entity.pitch_deck_key,
            business_plan_key=entity.business_plan_key,
            gdpr_consent=entity.gdpr_consent,
            status=entity.status.value,
            created_at=entity.created_at,
        )
    
    def _model_to_entity(self, model: ApplicationModel) -> Application:
        """Convert ORM model to domain entity."""
        return Application(
            id=model.id,
            tracking_token=model.tracking_token,
            founder_name=model.founder_name,
            email=model.email,
            phone=model.phone,
            venture_name=model.venture_name,
            industry=Industry(model.industry),
            pitch_deck_key=model.pitch_deck_key,
            business_plan_key=model.business_plan_key,
            gdpr_consent=model.gdpr_consent,
            status=ApplicationStatus(model.status),
            created_at=model.created_at,
        )
