"""Notification errors."""

from __future__ import annotations

from sgi.domain.exceptions import SgiError


class NotificationNotFoundError(SgiError):
    """Raised when marking a notification that does not exist as read."""

    def __init__(self, notification_id: int) -> None:
        self.notification_id = notification_id
        super().__init__(f"Notification not found: {notification_id}")
