"""Application repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import Application
from domain.enums import ApplicationStatus


class IApplicationRepository(ABC):
    """
    Abstract repository interface for Application entity.

    Implementations must make ``create`` durable before returning so that
    anything triggered afterwards only ever sees committed rows.
    """

    @abstractmethod
    async def create(self, application: Application) -> Application:
        """
        Persist a new application.

        Args:
            application: Application entity without an id

        Returns:
            Stored Application with its internal id assigned

        Raises:
            PersistenceError: If the write fails; nothing is left behind
        """
        pass

    @abstractmethod
    async def get_by_id(self, application_id: int) -> Optional[Application]:
        """Retrieve an application by internal id."""
        pass

    @abstractmethod
    async def get_by_tracking_token(self, tracking_token: str) -> Optional[Application]:
        """
        Retrieve an application by its public tracking token.

        Args:
            tracking_token: Token issued at submission time

        Returns:
            Application if found, None otherwise
        """
        pass

    @abstractmethod
    async def set_status(self, application_id: int, status: ApplicationStatus) -> Application:
        """
        Store a new review status.

        Raises:
            PersistenceError: If the application does not exist or the write fails
        """
        pass
