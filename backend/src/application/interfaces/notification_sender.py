"""Notification sender interface for outbound messages."""

from abc import ABC, abstractmethod
from typing import Optional


class INotificationSender(ABC):
    """
    Abstract interface for delivering plain-text messages.

    This lets the dispatcher stay independent of SMTP or any other transport.
    """

    @abstractmethod
    async def send(self, subject: str, body: str, recipients: Optional[list[str]] = None) -> bool:
        """
        Send one message.

        Args:
            subject: Message subject
            body: Plain-text body
            recipients: Addresses to deliver to; None means the review channel

        Returns:
            True if delivered, False if sending was skipped

        Raises:
            NotificationError: If delivery was attempted and failed
        """
        pass
