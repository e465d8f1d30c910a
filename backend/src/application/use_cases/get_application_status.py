"""Use Case for looking up an application by its public tracking token."""

from typing import Any, Optional

from domain.repositories import IApplicationRepository
from infrastructure.config import get_logger


class GetApplicationStatusUseCase:
    """Expose the review status of an application to its submitter."""

    def __init__(self, application_repository: IApplicationRepository):
        self.application_repo = application_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, tracking_token: str) -> Optional[dict[str, Any]]:
        """
        Returns:
            {"tracking_token", "venture_name", "status", "created_at"} or None
        """
        application = await self.application_repo.get_by_tracking_token(tracking_token)
        if application is None:
            self.logger.info("Status lookup for unknown tracking token")
            return None

        return {
            "tracking_token": application.tracking_token,
            "venture_name": application.venture_name,
            "status": application.status,
            "created_at": application.created_at,
        }
