"""Notification Emitter.

Reacts to lifecycle events by prepending notification records, and owns
read/unread tracking.

Rules:
1. MOST RECENT FIRST - new notifications are prepended
2. DERIVED UNREAD - the unread count is recomputed on every call and never
   stored, so it cannot go stale across a mutation
3. GENERATION ONLY - displaying notifications is the UI's concern
"""

from __future__ import annotations

from sgi.application.ports.time_authority import TimeAuthorityProtocol
from sgi.application.services.base import LoggingMixin
from sgi.application.services.entity_store import EntityStore
from sgi.application.services.request_lifecycle_service import (
    LifecycleEvent,
    LifecycleEventType,
)
from sgi.domain.errors.notification import NotificationNotFoundError
from sgi.domain.models.notification import Notification

MESSAGE_TEMPLATES: dict[LifecycleEventType, str] = {
    LifecycleEventType.CREATED: "New request created: {protocol}",
    LifecycleEventType.DISPATCHED: "Request {protocol} updated: team on the way",
    LifecycleEventType.COMPLETED: "Request {protocol} completed",
    LifecycleEventType.CANCELLED: "Request {protocol} cancelled",
}


class NotificationEmitter(LoggingMixin):
    """Generates notifications and tracks read state.

    Attributes:
        _store: Entity store holding the notifications.
        _time: Time authority for notification timestamps.
    """

    def __init__(
        self,
        store: EntityStore,
        time_authority: TimeAuthorityProtocol,
    ) -> None:
        self._store = store
        self._time = time_authority
        self._init_logger(component="notifications")

    def handle_lifecycle_event(self, event: LifecycleEvent) -> Notification:
        """Lifecycle subscriber: append a notification for the event."""
        message = MESSAGE_TEMPLATES[event.event_type].format(
            protocol=event.request.protocol
        )
        return self.emit(message)

    def emit(self, message: str) -> Notification:
        """Prepend a new unread notification.

        Args:
            message: Text of the notification.

        Returns:
            The stored notification.
        """
        notification = Notification(
            id=self._store.next_notification_id(),
            message=message,
            timestamp=self._time.now(),
            read=False,
        )
        self._store.prepend_notification(notification)
        self._log_operation("emit", notification_id=notification.id).info(
            "notification_emitted"
        )
        return notification

    def notifications(self) -> list[Notification]:
        """All notifications, most recent first."""
        return self._store.notifications()

    def mark_read(self, notification_id: int) -> Notification:
        """Flip exactly one notification to read.

        Raises:
            NotificationNotFoundError: If the id is unknown.
        """
        log = self._log_operation("mark_read", notification_id=notification_id)
        for notification in self._store.notifications():
            if notification.id == notification_id:
                updated = notification.as_read()
                if updated is not notification:
                    self._store.update_notification(updated)
                    log.debug("notification_marked_read")
                return updated
        log.warning("notification_not_found")
        raise NotificationNotFoundError(notification_id)

    def mark_all_read(self) -> int:
        """Flip every notification to read.

        Returns:
            How many notifications changed.
        """
        current = self._store.notifications()
        changed = sum(1 for n in current if not n.read)
        if changed:
            self._store.replace_notifications([n.as_read() for n in current])
        self._log_operation("mark_all_read").info(
            "notifications_marked_read", changed=changed
        )
        return changed

    def unread_count(self) -> int:
        """Number of unread notifications, computed on every call."""
        return sum(1 for n in self._store.notifications() if not n.read)
