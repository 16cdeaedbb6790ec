"""Read-side queries over stored requests: filters, per-user lists, stats."""

from __future__ import annotations

from dataclasses import dataclass

from sgi.application.services.entity_store import EntityStore
from sgi.domain.models.lighting_request import LightingRequest, Priority, RequestStatus
from sgi.domain.models.user import User

ALL = "all"


@dataclass(frozen=True)
class RequestStats:
    """Dashboard counters."""

    total: int
    pending: int
    progress: int
    done: int
    cancelled: int
    critical: int


class RequestQueryService:
    """Filtering and counting for the admin dashboard and citizen lists."""

    def __init__(self, store: EntityStore) -> None:
        self._store = store

    def filter(
        self,
        status: RequestStatus | str = ALL,
        priority: Priority | str = ALL,
        search: str = "",
    ) -> list[LightingRequest]:
        """Filter requests, keeping store order.

        Args:
            status: A status or "all".
            priority: A priority or "all".
            search: Case-insensitive substring on address, protocol or type.
        """
        status_filter = None if status == ALL else RequestStatus(status)
        priority_filter = None if priority == ALL else Priority(priority)
        needle = search.strip()

        return [
            request
            for request in self._store.requests()
            if (status_filter is None or request.status == status_filter)
            and (priority_filter is None or request.priority == priority_filter)
            and (not needle or request.matches_text(needle))
        ]

    def requests_for(self, user: User) -> list[LightingRequest]:
        """Requests reported by the user (matched on email)."""
        if user.is_anonymous:
            return []
        return [r for r in self._store.requests() if r.reporter.email == user.email]

    def stats(self) -> RequestStats:
        requests = self._store.requests()

        def count(status: RequestStatus) -> int:
            return sum(1 for r in requests if r.status == status)

        return RequestStats(
            total=len(requests),
            pending=count(RequestStatus.PENDING),
            progress=count(RequestStatus.PROGRESS),
            done=count(RequestStatus.DONE),
            cancelled=count(RequestStatus.CANCELLED),
            critical=sum(1 for r in requests if r.priority == Priority.CRITICAL),
        )
