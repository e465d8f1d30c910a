"""Application services shared by several use cases."""

from .notification_dispatcher import NotificationDispatcher

__all__ = ["NotificationDispatcher"]
