"""Notification service for customer-facing order updates."""

import logging

from foodmate.models.message_models import Notification

logger = logging.getLogger(__name__)


class NotificationService:
    """Records notifications sent to users.

    Delivery is a structured log line; the in-memory log lets the calling
    layer display what was sent.
    """

    def __init__(self) -> None:
        """Initialize an empty notification log."""
        self._sent: list[Notification] = []

    def send(self, user_id: str, message: str) -> Notification:
        """Send a notification.

        Args:
            user_id: Recipient
            message: Text to send

        Returns:
            Notification: The recorded notification
        """
        notification = Notification(user_id=user_id, message=message)
        self._sent.append(notification)
        logger.info(f"Notification to {user_id}: {message}")
        return notification

    def list_for_user(self, user_id: str) -> list[Notification]:
        """List notifications sent to a user, oldest first."""
        return [n for n in self._sent if n.user_id == user_id]

    def list_all(self) -> list[Notification]:
        """List every notification sent, oldest first."""
        return list(self._sent)
