"""Domain models for SGI Cidade."""

from sgi.domain.models.coordinates import Coordinates
from sgi.domain.models.lighting_request import (
    TERMINAL_STATUSES,
    TRANSITION_TABLE,
    LifecycleAction,
    LightingRequest,
    Priority,
    Reporter,
    RequestStatus,
    TimelineEvent,
    TimelineEventKind,
    Transition,
)
from sgi.domain.models.marker import Marker, MarkerColor, marker_color_for
from sgi.domain.models.notification import Notification
from sgi.domain.models.suggestion import (
    GazetteerEntry,
    PlaceSuggestion,
    RequestSuggestion,
    SuggestionItem,
)
from sgi.domain.models.user import ANONYMOUS_USER, SessionView, User, UserRole
from sgi.domain.models.view_state import (
    MAX_ZOOM,
    MIN_ZOOM,
    AppliedView,
    ViewState,
    clamp_zoom,
)

__all__: list[str] = [
    "ANONYMOUS_USER",
    "AppliedView",
    "Coordinates",
    "GazetteerEntry",
    "LifecycleAction",
    "LightingRequest",
    "MAX_ZOOM",
    "MIN_ZOOM",
    "Marker",
    "MarkerColor",
    "Notification",
    "PlaceSuggestion",
    "Priority",
    "Reporter",
    "RequestStatus",
    "RequestSuggestion",
    "SessionView",
    "SuggestionItem",
    "TERMINAL_STATUSES",
    "TRANSITION_TABLE",
    "TimelineEvent",
    "TimelineEventKind",
    "Transition",
    "User",
    "UserRole",
    "ViewState",
    "clamp_zoom",
    "marker_color_for",
]
