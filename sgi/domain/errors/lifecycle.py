"""Lifecycle errors for the lighting request state machine.

This module defines errors raised by the request lifecycle engine when a
transition is rejected. A rejected transition never leaves a partial
mutation behind: status, timeline and assignment fields are unchanged.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sgi.domain.exceptions import SgiError

if TYPE_CHECKING:
    from sgi.domain.models.lighting_request import RequestStatus


class LifecycleError(SgiError):
    """Base error for request lifecycle operations."""

    pass


class IllegalTransitionError(LifecycleError):
    """Raised when an action is not permitted from the current status.

    Attributes:
        request_id: Id of the request the action targeted.
        current_status: Status the request is in.
        attempted_status: Status the action would have produced.
        action: Name of the rejected action (dispatch, complete, cancel).
        allowed_actions: Actions that are valid from the current status.
    """

    def __init__(
        self,
        request_id: int,
        current_status: RequestStatus,
        attempted_status: RequestStatus,
        action: str,
        allowed_actions: list[str] | None = None,
    ) -> None:
        """Initialize illegal transition error.

        Args:
            request_id: Id of the targeted request.
            current_status: Current request status.
            attempted_status: Target status of the rejected action.
            action: The rejected action name.
            allowed_actions: Valid actions from current status (optional).
        """
        self.request_id = request_id
        self.current_status = current_status
        self.attempted_status = attempted_status
        self.action = action
        self.allowed_actions = allowed_actions or []

        allowed_str = (
            f" Valid actions: {self.allowed_actions}" if self.allowed_actions else ""
        )
        super().__init__(
            f"Illegal transition for request {request_id}: "
            f"{current_status.value} -> {attempted_status.value} ({action}).{allowed_str}"
        )


class OutOfOrderEventError(LifecycleError):
    """Raised when a timeline append would be earlier than the last event.

    Timelines are ordered by occurrence time ascending. An append stamped
    before the newest existing event is rejected rather than reordered.

    Attributes:
        request_id: Id of the request whose timeline was targeted.
        last_occurred_at: Timestamp of the newest existing event.
        attempted_at: Timestamp of the rejected event.
    """

    def __init__(
        self,
        request_id: int,
        last_occurred_at: datetime,
        attempted_at: datetime,
    ) -> None:
        self.request_id = request_id
        self.last_occurred_at = last_occurred_at
        self.attempted_at = attempted_at
        super().__init__(
            f"Out-of-order timeline event for request {request_id}: "
            f"{attempted_at.isoformat()} is earlier than {last_occurred_at.isoformat()}"
        )


class RequestNotFoundError(LifecycleError):
    """Raised when an action targets a request id that does not exist."""

    def __init__(self, request_id: int) -> None:
        self.request_id = request_id
        super().__init__(f"Request not found: {request_id}")


class ActorNotAuthorizedError(LifecycleError):
    """Raised when an actor's role does not permit the requested action.

    Role checks happen at the engine's call boundary, before the
    transition table is consulted.

    Attributes:
        action: The action that was attempted.
        actor_role: Role value of the acting user.
    """

    def __init__(self, action: str, actor_role: str) -> None:
        self.action = action
        self.actor_role = actor_role
        super().__init__(
            f"Actor with role '{actor_role}' is not allowed to {action} requests"
        )
