"""Outbound notification transports."""

from .smtp_client import SMTPNotificationSender, send_email

__all__ = ["SMTPNotificationSender", "send_email"]
