"""Lighting request domain model.

This module defines the core request domain: the status state machine,
the closed set of timeline event kinds and the immutable request record.

State Machine:
    pending  -> progress   (dispatch: team assigned, ETA set)
    progress -> done       (complete)
    pending  -> cancelled  (cancel, admin actors only)
    progress -> cancelled  (cancel, admin actors only)

Terminal States:
    done and cancelled accept no further actions.

Invariants:
    - protocol is non-empty and never changes after creation
    - timeline is non-empty, ordered by occurred_at ascending, append-only
    - progress/done/cancelled are only reachable through a recorded
      timeline event of matching kind
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum

from sgi.domain.errors.lifecycle import OutOfOrderEventError
from sgi.domain.models.coordinates import Coordinates


class RequestStatus(Enum):
    """Status in the request lifecycle.

    States:
        PENDING: Initial state after creation
        PROGRESS: A team has been dispatched
        DONE: Service completed (terminal)
        CANCELLED: Withdrawn by an administrator (terminal)
    """

    PENDING = "pending"
    PROGRESS = "progress"
    DONE = "done"
    CANCELLED = "cancelled"

    def is_terminal(self) -> bool:
        """Check if no further actions are permitted from this status."""
        return self in TERMINAL_STATUSES

    def valid_actions(self) -> list[LifecycleAction]:
        """Get the actions accepted from this status, in table order."""
        return [
            action
            for action, transition in TRANSITION_TABLE.items()
            if self in transition.sources
        ]


class Priority(Enum):
    """Triage priority of a request."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TimelineEventKind(Enum):
    """Closed set of audit event kinds.

    Presentation (icons, colors) is resolved from the kind at the UI
    boundary; the core never stores icon names.
    """

    RECEIVED = "received"
    UNDER_REVIEW = "under_review"
    DISPATCHED = "dispatched"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class LifecycleAction(Enum):
    """Actions that drive status transitions."""

    DISPATCH = "dispatch"
    COMPLETE = "complete"
    CANCEL = "cancel"


@dataclass(frozen=True)
class Transition:
    """One row of the transition table.

    Attributes:
        sources: Statuses the action is accepted from.
        target: Status the action produces.
        event_kind: Kind of the timeline event the action appends.
    """

    sources: frozenset[RequestStatus]
    target: RequestStatus
    event_kind: TimelineEventKind


TERMINAL_STATUSES: frozenset[RequestStatus] = frozenset(
    {RequestStatus.DONE, RequestStatus.CANCELLED}
)

# Keyed by action; actor role checks happen before this table is consulted
TRANSITION_TABLE: dict[LifecycleAction, Transition] = {
    LifecycleAction.DISPATCH: Transition(
        sources=frozenset({RequestStatus.PENDING}),
        target=RequestStatus.PROGRESS,
        event_kind=TimelineEventKind.DISPATCHED,
    ),
    LifecycleAction.COMPLETE: Transition(
        sources=frozenset({RequestStatus.PROGRESS}),
        target=RequestStatus.DONE,
        event_kind=TimelineEventKind.COMPLETED,
    ),
    LifecycleAction.CANCEL: Transition(
        sources=frozenset({RequestStatus.PENDING, RequestStatus.PROGRESS}),
        target=RequestStatus.CANCELLED,
        event_kind=TimelineEventKind.CANCELLED,
    ),
}

# Timeline evidence required for a request to be in a given status
_STATUS_EVIDENCE: dict[RequestStatus, TimelineEventKind] = {
    RequestStatus.PROGRESS: TimelineEventKind.DISPATCHED,
    RequestStatus.DONE: TimelineEventKind.COMPLETED,
    RequestStatus.CANCELLED: TimelineEventKind.CANCELLED,
}

DATE_FORMAT = "%d/%m/%Y"
TIME_FORMAT = "%H:%M"


@dataclass(frozen=True, eq=True)
class TimelineEvent:
    """An immutable audit record attached to a request.

    Attributes:
        occurred_at: When the causing action happened (timezone-aware).
        title: Short human-readable heading.
        description: Detail line.
        kind: Enumerated event kind.
    """

    occurred_at: datetime
    title: str
    description: str
    kind: TimelineEventKind

    @property
    def date(self) -> str:
        """Calendar date in dd/mm/YYYY."""
        return self.occurred_at.strftime(DATE_FORMAT)

    @property
    def time(self) -> str:
        """Wall-clock time in HH:MM."""
        return self.occurred_at.strftime(TIME_FORMAT)


@dataclass(frozen=True, eq=True)
class Reporter:
    """Contact details of the citizen who reported the defect."""

    name: str
    email: str
    phone: str = ""


@dataclass(frozen=True, eq=True)
class LightingRequest:
    """A public-lighting defect report.

    Only the lifecycle engine constructs new requests and derives updated
    copies; every other component reads them.

    Attributes:
        id: Unique, monotonically allocated internal id.
        protocol: Externally visible case identifier ({year}-{seq:04d}-LP).
        type: Problem type label (e.g. "Damaged Pole").
        address: Human-readable location.
        status: Current lifecycle status.
        priority: Triage priority.
        coordinates: Location of the defect.
        created_at: Creation timestamp (timezone-aware).
        reporter: Citizen contact details.
        description: Free-text detail supplied by the reporter.
        timeline: Ordered, append-only audit trail.
        assigned_team: Team dispatched to the site, once dispatched.
        estimated_time: Estimated time to resolution, once dispatched.
    """

    id: int
    protocol: str
    type: str
    address: str
    status: RequestStatus
    priority: Priority
    coordinates: Coordinates
    created_at: datetime
    reporter: Reporter
    description: str = ""
    timeline: tuple[TimelineEvent, ...] = field(default_factory=tuple)
    assigned_team: str | None = None
    estimated_time: str | None = None

    def __post_init__(self) -> None:
        """Validate request invariants."""
        if not self.protocol:
            raise ValueError("Request protocol must not be empty")
        if not self.timeline:
            raise ValueError(f"Request {self.protocol} must have at least one timeline event")
        for earlier, later in zip(self.timeline, self.timeline[1:]):
            if later.occurred_at < earlier.occurred_at:
                raise ValueError(
                    f"Request {self.protocol} timeline is not ordered by occurrence time"
                )
        required_kind = _STATUS_EVIDENCE.get(self.status)
        if required_kind is not None and not any(
            event.kind == required_kind for event in self.timeline
        ):
            raise ValueError(
                f"Request {self.protocol} is {self.status.value} without a "
                f"'{required_kind.value}' timeline event"
            )

    @property
    def created_date(self) -> str:
        """Creation date in dd/mm/YYYY."""
        return self.created_at.strftime(DATE_FORMAT)

    @property
    def last_event(self) -> TimelineEvent:
        """The newest timeline event."""
        return self.timeline[-1]

    def with_event(
        self,
        event: TimelineEvent,
        status: RequestStatus | None = None,
        assigned_team: str | None = None,
        estimated_time: str | None = None,
    ) -> LightingRequest:
        """Create new request with an event appended (and optionally a new status).

        Since LightingRequest is frozen, returns new instance. The receiver
        is never modified, so a rejected append leaves no trace.

        Args:
            event: The timeline event to append.
            status: New status, or None to keep the current one.
            assigned_team: Team to record, or None to keep the current one.
            estimated_time: ETA to record, or None to keep the current one.

        Returns:
            New LightingRequest with the event appended.

        Raises:
            OutOfOrderEventError: If the event is earlier than the newest event.
        """
        if event.occurred_at < self.last_event.occurred_at:
            raise OutOfOrderEventError(
                request_id=self.id,
                last_occurred_at=self.last_event.occurred_at,
                attempted_at=event.occurred_at,
            )

        return replace(
            self,
            status=status if status is not None else self.status,
            timeline=self.timeline + (event,),
            assigned_team=assigned_team if assigned_team is not None else self.assigned_team,
            estimated_time=(
                estimated_time if estimated_time is not None else self.estimated_time
            ),
        )

    def matches_text(self, needle: str) -> bool:
        """Case-insensitive substring match on address, protocol or type."""
        folded = needle.casefold()
        return (
            folded in self.address.casefold()
            or folded in self.protocol.casefold()
            or folded in self.type.casefold()
        )
