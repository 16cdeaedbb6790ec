"""Request Lifecycle Engine.

Validates and applies status transitions on lighting requests, generates
protocol numbers and appends timeline events. This is the sole creation
path for requests and the sole producer of timeline events.

Rules:
1. ATOMIC - an action is fully validated (existence, actor, transition
   table, timeline order) before anything is written; a rejected action
   leaves status, timeline and assignment fields untouched
2. ROLE AT THE BOUNDARY - cancel checks the actor's role before the
   transition table is consulted; the table itself knows nothing of roles
3. STRICT ORDER - timeline appends stamped before the newest event are
   rejected with OutOfOrderEventError, never reordered
4. EVENT AFTER SAVE - subscribers hear about a change only after it has
   been written to the store; a failing subscriber never undoes it
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from sgi.application.ports.time_authority import TimeAuthorityProtocol
from sgi.application.services.base import LoggingMixin
from sgi.application.services.entity_store import EntityStore
from sgi.config.lighting_config import DEFAULT_LIGHTING_CONFIG, LightingConfig
from sgi.domain.errors.lifecycle import (
    ActorNotAuthorizedError,
    IllegalTransitionError,
    OutOfOrderEventError,
    RequestNotFoundError,
)
from sgi.domain.models.coordinates import Coordinates
from sgi.domain.models.lighting_request import (
    TRANSITION_TABLE,
    LifecycleAction,
    LightingRequest,
    Priority,
    Reporter,
    RequestStatus,
    TimelineEvent,
    TimelineEventKind,
)
from sgi.domain.models.user import User, UserRole


@dataclass(frozen=True)
class RequestOptions:
    """Optional parameters for request creation.

    Attributes:
        description: Reporter's free-text detail. Default: "".
        coordinates: Defect location. Default: the configured home location.
        address: Human-readable address. Default: "Map location (lat, lng)"
            when coordinates are given, else the configured default address.
        priority: Explicit priority. Default: looked up from the configured
            priority table by problem type.
    """

    description: str = ""
    coordinates: Coordinates | None = None
    address: str | None = None
    priority: Priority | None = None


class LifecycleEventType(Enum):
    """What happened to a request."""

    CREATED = "created"
    DISPATCHED = "dispatched"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


_EVENT_TYPE_BY_ACTION: dict[LifecycleAction, LifecycleEventType] = {
    LifecycleAction.DISPATCH: LifecycleEventType.DISPATCHED,
    LifecycleAction.COMPLETE: LifecycleEventType.COMPLETED,
    LifecycleAction.CANCEL: LifecycleEventType.CANCELLED,
}


@dataclass(frozen=True)
class LifecycleEvent:
    """Published to subscribers after a creation or transition is stored.

    Attributes:
        event_type: What happened.
        request: The request as stored after the change.
        previous_status: Status before a transition (None for creation).
    """

    event_type: LifecycleEventType
    request: LightingRequest
    previous_status: RequestStatus | None = None


LifecycleListener = Callable[[LifecycleEvent], None]


class RequestLifecycleEngine(LoggingMixin):
    """State machine over request status with protocol generation.

    Attributes:
        _store: Entity store holding the requests.
        _time: Time authority for every stamp.
        _config: Lighting configuration (priority table, dispatch defaults).
        _sequence: Protocol sequence of the last created request.
        _lock: Serializes creation so protocol sequences are never shared.
        _listeners: Subscribers notified after each stored change.
    """

    def __init__(
        self,
        store: EntityStore,
        time_authority: TimeAuthorityProtocol,
        config: LightingConfig = DEFAULT_LIGHTING_CONFIG,
    ) -> None:
        """Initialize the engine.

        The protocol sequence continues from the number of requests already
        in the store, so the first request created in a session with five
        stored requests gets sequence 6.

        Args:
            store: Entity store holding the requests.
            time_authority: Source of timestamps.
            config: Lighting configuration.
        """
        self._store = store
        self._time = time_authority
        self._config = config
        self._sequence = len(store.requests())
        self._lock = threading.Lock()
        self._listeners: list[LifecycleListener] = []
        self._init_logger(component="lifecycle")

    def subscribe(self, listener: LifecycleListener) -> None:
        """Register a subscriber for lifecycle events."""
        self._listeners.append(listener)

    # -------- Creation --------

    def create_request(
        self,
        problem_type: str,
        reporter: Reporter,
        options: RequestOptions | None = None,
    ) -> LightingRequest:
        """Create a new pending request.

        Allocates the next id and protocol, picks the default priority for
        the problem type and seeds the timeline with a 'received' event.

        Args:
            problem_type: Problem type label (e.g. "Damaged Pole").
            reporter: Contact details of the reporting citizen.
            options: Optional creation parameters.

        Returns:
            The stored request.
        """
        options = options or RequestOptions()
        log = self._log_operation("create_request", problem_type=problem_type)

        coordinates = options.coordinates or self._config.home_location
        if options.address:
            address = options.address
        elif options.coordinates is not None:
            address = f"Map location ({coordinates.lat:.4f}, {coordinates.lng:.4f})"
        else:
            address = self._config.default_address
        priority = options.priority or self._config.priority_for(problem_type)

        with self._lock:
            now = self._time.now()
            sequence, protocol = self._allocate_protocol(now.year)
            received = TimelineEvent(
                occurred_at=now,
                title="Request Received",
                description=(
                    "EMERGENCY protocol generated"
                    if priority == Priority.CRITICAL
                    else "Protocol generated automatically"
                ),
                kind=TimelineEventKind.RECEIVED,
            )
            request = LightingRequest(
                id=self._store.next_request_id(),
                protocol=protocol,
                type=problem_type,
                address=address,
                status=RequestStatus.PENDING,
                priority=priority,
                coordinates=coordinates,
                created_at=now,
                reporter=reporter,
                description=options.description,
                timeline=(received,),
            )
            self._store.add_request(request)
            self._sequence = sequence

        log.info(
            "request_created",
            request_id=request.id,
            protocol=protocol,
            priority=priority.value,
        )
        self._emit(LifecycleEvent(LifecycleEventType.CREATED, request))
        return request

    def _allocate_protocol(self, year: int) -> tuple[int, str]:
        """Next unused (sequence, protocol); skips protocols already stored."""
        sequence = self._sequence + 1
        protocol = self._format_protocol(year, sequence)
        while self._store.has_protocol(protocol):
            sequence += 1
            protocol = self._format_protocol(year, sequence)
        return sequence, protocol

    def _format_protocol(self, year: int, sequence: int) -> str:
        return f"{year}-{sequence:04d}-{self._config.protocol_suffix}"

    # -------- Transitions --------

    def dispatch(
        self,
        request_id: int,
        team: str | None = None,
        estimated_time: str | None = None,
    ) -> LightingRequest:
        """Dispatch a team to a pending request (pending -> progress).

        Args:
            request_id: Target request.
            team: Team name. Default: configured default team.
            estimated_time: ETA text. Default: configured default ETA.

        Returns:
            The updated request.

        Raises:
            RequestNotFoundError: If the request does not exist.
            IllegalTransitionError: If the request is not pending.
            OutOfOrderEventError: If the clock is behind the newest event.
        """
        team = team or self._config.default_team
        estimated_time = estimated_time or self._config.default_estimated_time
        return self._apply(
            request_id,
            LifecycleAction.DISPATCH,
            title="Team Dispatched",
            description=f"{team} on the way to the site",
            assigned_team=team,
            estimated_time=estimated_time,
        )

    def complete(self, request_id: int, note: str | None = None) -> LightingRequest:
        """Mark a request in progress as done (progress -> done).

        Raises:
            RequestNotFoundError: If the request does not exist.
            IllegalTransitionError: If the request is not in progress.
            OutOfOrderEventError: If the clock is behind the newest event.
        """
        return self._apply(
            request_id,
            LifecycleAction.COMPLETE,
            title="Service Completed",
            description=note or "Maintenance completed successfully",
        )

    def cancel(
        self,
        request_id: int,
        actor: User,
        reason: str | None = None,
    ) -> LightingRequest:
        """Cancel a pending or in-progress request. Admin actors only.

        Raises:
            ActorNotAuthorizedError: If the actor is not an admin.
            RequestNotFoundError: If the request does not exist.
            IllegalTransitionError: If the request is done or cancelled.
            OutOfOrderEventError: If the clock is behind the newest event.
        """
        if actor.role != UserRole.ADMIN:
            self._log_operation(
                "cancel", request_id=request_id, actor_id=actor.id
            ).warning("cancel_rejected_not_admin", actor_role=actor.role.value)
            raise ActorNotAuthorizedError(
                action=LifecycleAction.CANCEL.value, actor_role=actor.role.value
            )
        return self._apply(
            request_id,
            LifecycleAction.CANCEL,
            title="Request Cancelled",
            description=reason or "Cancelled by the administration",
        )

    def _apply(
        self,
        request_id: int,
        action: LifecycleAction,
        title: str,
        description: str,
        assigned_team: str | None = None,
        estimated_time: str | None = None,
    ) -> LightingRequest:
        log = self._log_operation(action.value, request_id=request_id)

        current = self._store.get_request(request_id)
        if current is None:
            log.warning("transition_rejected_not_found")
            raise RequestNotFoundError(request_id)

        transition = TRANSITION_TABLE[action]
        if current.status not in transition.sources:
            log.warning(
                "transition_rejected_illegal",
                current_status=current.status.value,
                attempted_status=transition.target.value,
            )
            raise IllegalTransitionError(
                request_id=request_id,
                current_status=current.status,
                attempted_status=transition.target,
                action=action.value,
                allowed_actions=[a.value for a in current.status.valid_actions()],
            )

        event = TimelineEvent(
            occurred_at=self._time.now(),
            title=title,
            description=description,
            kind=transition.event_kind,
        )
        try:
            updated = current.with_event(
                event,
                status=transition.target,
                assigned_team=assigned_team,
                estimated_time=estimated_time,
            )
        except OutOfOrderEventError as e:
            log.warning(
                "transition_rejected_out_of_order",
                last_occurred_at=e.last_occurred_at.isoformat(),
                attempted_at=e.attempted_at.isoformat(),
            )
            raise

        self._store.replace_request(updated)
        log.info(
            "transition_applied",
            protocol=updated.protocol,
            from_status=current.status.value,
            to_status=updated.status.value,
            timeline_length=len(updated.timeline),
        )
        self._emit(
            LifecycleEvent(
                _EVENT_TYPE_BY_ACTION[action], updated, previous_status=current.status
            )
        )
        return updated

    def _emit(self, event: LifecycleEvent) -> None:
        for listener in self._listeners:
            try:
                listener(event)
            except Exception as e:
                self._log_operation(
                    "emit",
                    request_id=event.request.id,
                    event_type=event.event_type.value,
                ).warning("lifecycle_listener_failed", error=str(e))
