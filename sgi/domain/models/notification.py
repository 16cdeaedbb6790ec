"""Notification domain model."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime


@dataclass(frozen=True, eq=True)
class Notification:
    """An in-app notification generated by the notification emitter.

    Attributes:
        id: Unique, monotonically allocated id.
        message: Text shown to the user.
        timestamp: When the notification was generated.
        read: Whether the user has seen it.
    """

    id: int
    message: str
    timestamp: datetime
    read: bool = False

    def as_read(self) -> Notification:
        """Create a copy flagged as read."""
        if self.read:
            return self
        return replace(self, read=True)
