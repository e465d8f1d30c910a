"""Health check endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from presentation.api.v1.dependencies import get_db_session
from presentation.schemas import HealthResponse
from infrastructure.config import get_logger, get_settings

router = APIRouter(tags=["health"])
logger = get_logger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health_check(session: AsyncSession = Depends(get_db_session)) -> HealthResponse:
    """
    Health check endpoint.
    
    Returns service status, version and database reachability.
    """
    settings = get_settings()
    
    try:
        await session.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.warning(f"Database health check failed: {e}")
        database = "unavailable"
    
    return HealthResponse(
        status="healthy" if database == "ok" else "degraded",
        version=settings.app_version,
        database=database,
    )
