"""Use Case behind the review workflow's setStatus capability."""

from domain.entities import Application
from domain.enums import ApplicationStatus
from domain.exceptions import PersistenceError
from domain.repositories import IApplicationRepository
from infrastructure.config import get_logger


class UpdateApplicationStatusUseCase:
    """
    Move an application along the review workflow.

    Only reviewers call this; submitters can never change a status.
    Every change is written to the audit log.
    """

    def __init__(self, application_repository: IApplicationRepository):
        self.application_repo = application_repository
        self.logger = get_logger("audit")

    async def execute(self, application_id: int, new_status: ApplicationStatus) -> Application:
        """
        Raises:
            PersistenceError: Unknown application or failed write
            ValidationError: Transition not allowed by the workflow
        """
        application = await self.application_repo.get_by_id(application_id)
        if application is None:
            raise PersistenceError(f"Application {application_id} not found")

        previous = application.change_status(new_status)
        updated = await self.application_repo.set_status(application_id, new_status)

        self.logger.info(
            f"Application {application_id} status changed: {previous.value} -> {new_status.value}",
            extra={"application_id": application_id},
        )
        return updated
