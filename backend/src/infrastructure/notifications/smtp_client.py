"""SMTP client for sending notification emails via standard library."""

import asyncio
import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from typing import Optional

from application.interfaces import INotificationSender
from domain.exceptions import NotificationError
from infrastructure.config import Settings, get_settings, get_logger

logger = get_logger(__name__)


def send_email(
    body: str,
    subject: str,
    recipients: list[str],
    settings: Optional[Settings] = None,
) -> bool:
    """
    Send a plain-text email using SMTP with STARTTLS.
    
    Args:
        body: The plain-text message body.
        subject: The subject of the email.
        recipients: Addresses to deliver to.
        settings: Settings to read the SMTP configuration from.
        
    Returns:
        bool: True if sent, False if sending was skipped.
        
    Raises:
        NotificationError: If the SMTP conversation failed.
    """
    settings = settings or get_settings()
    
    # Validation
    if not settings.smtp_server or not settings.smtp_email or not settings.smtp_password:
        logger.warning("SMTP configuration missing. Skipping email.")
        return False
    
    if not recipients:
        logger.warning("No recipient emails configured. Skipping email.")
        return False
    
    msg = MIMEMultipart()
    msg['From'] = settings.smtp_email
    msg['To'] = ', '.join(recipients)
    msg['Subject'] = subject
    msg.attach(MIMEText(body, 'plain', 'utf-8'))
    
    try:
        logger.info(f"Connecting to SMTP server: {settings.smtp_server}:{settings.smtp_port}...")
        with smtplib.SMTP(settings.smtp_server, settings.smtp_port, timeout=settings.smtp_timeout_seconds) as server:
            server.ehlo()
            server.starttls()
            server.ehlo()
            server.login(settings.smtp_email, settings.smtp_password)
            server.send_message(msg, to_addrs=recipients)
    except (smtplib.SMTPException, OSError) as e:
        raise NotificationError(f"Failed to send email '{subject}': {e}") from e
    
    logger.info(f"Email sent successfully to {len(recipients)} recipient(s)")
    return True


class SMTPNotificationSender(INotificationSender):
    """Notification sender backed by ``send_email``, run off the event loop."""
    
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
    
    async def send(self, subject: str, body: str, recipients: Optional[list[str]] = None) -> bool:
        if recipients is None:
            recipients = self.settings.review_recipients or (
                [self.settings.smtp_email] if self.settings.smtp_email else []
            )
        return await asyncio.to_thread(send_email, body, subject, recipients, self.settings)
