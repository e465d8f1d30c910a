"""Best-effort notifications sent after an application is committed."""

import asyncio
from typing import Optional

from application.interfaces import INotificationSender
from domain.entities import Application
from infrastructure.config import get_logger


CONFIRMATION_SUBJECT = "We received your application"
REVIEW_SUBJECT = "New incubation application: {venture}"


class NotificationDispatcher:
    """
    Send the submitter confirmation and the reviewer alert.

    Each message gets a single attempt. A failure is logged and never
    reaches the submitter or blocks the other message.
    """

    def __init__(self, sender: INotificationSender, tracking_base_url: Optional[str] = None):
        self.sender = sender
        self.tracking_base_url = tracking_base_url
        self.logger = get_logger(self.__class__.__name__)

    async def dispatch(self, application: Application) -> dict[str, bool]:
        """
        Notify the submitter and the review channel concurrently.

        Returns:
            Delivery outcome per channel ("confirmation", "review")
        """
        confirmation, review = await asyncio.gather(
            self._attempt("confirmation", self.send_confirmation(application)),
            self._attempt("review", self.send_review_alert(application)),
        )
        return {"confirmation": confirmation, "review": review}

    async def send_confirmation(self, application: Application) -> bool:
        body = (
            f"Dear {application.founder_name},\n\n"
            f"Thank you for applying with {application.venture_name}. "
            f"Your application has been received and is now {application.status.value}.\n\n"
            f"Tracking ID: {application.tracking_token}\n"
        )
        if self.tracking_base_url:
            body += f"Check your status at: {self.tracking_base_url.rstrip('/')}/{application.tracking_token}\n"
        body += "\nWe will be in touch once the review is complete."
        return await self.sender.send(CONFIRMATION_SUBJECT, body, recipients=[application.email])

    async def send_review_alert(self, application: Application) -> bool:
        body = (
            f"Application #{application.id} was submitted.\n\n"
            f"Venture: {application.venture_name}\n"
            f"Industry: {application.industry.value}\n"
            f"Founder: {application.founder_name} <{application.email}>\n"
            f"Tracking ID: {application.tracking_token}\n"
            f"Submitted at: {application.created_at.isoformat()}\n"
        )
        subject = REVIEW_SUBJECT.format(venture=application.venture_name)
        return await self.sender.send(subject, body, recipients=None)

    async def _attempt(self, channel: str, send) -> bool:
        try:
            delivered = await send
        except Exception as e:
            self.logger.error(f"Failed to send {channel} notification: {e}", extra={"channel": channel})
            return False
        if not delivered:
            self.logger.warning(f"{channel} notification skipped", extra={"channel": channel})
        return bool(delivered)
