"""Map marker model and color precedence."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sgi.domain.models.coordinates import Coordinates
from sgi.domain.models.lighting_request import LightingRequest, Priority, RequestStatus


class MarkerColor(Enum):
    """Marker fill colors, in precedence order."""

    CRITICAL = "#dc2626"
    DONE = "#16a34a"
    PROGRESS = "#2563eb"
    PENDING = "#eab308"


def marker_color_for(request: LightingRequest) -> MarkerColor:
    """Pick a marker color.

    Precedence is a total order evaluated top to bottom:
    critical priority, then done status, then progress status, then the
    pending default.
    """
    if request.priority == Priority.CRITICAL:
        return MarkerColor.CRITICAL
    if request.status == RequestStatus.DONE:
        return MarkerColor.DONE
    if request.status == RequestStatus.PROGRESS:
        return MarkerColor.PROGRESS
    return MarkerColor.PENDING


@dataclass(frozen=True, eq=True)
class Marker:
    """A marker handed to the map widget."""

    id: int
    coordinates: Coordinates
    color: MarkerColor

    @classmethod
    def for_request(cls, request: LightingRequest) -> Marker:
        return cls(
            id=request.id,
            coordinates=request.coordinates,
            color=marker_color_for(request),
        )
