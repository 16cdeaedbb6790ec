"""Map view state owned by the map view synchronization controller."""

from __future__ import annotations

from dataclasses import dataclass

from sgi.domain.models.coordinates import Coordinates

MIN_ZOOM: int = 10
MAX_ZOOM: int = 18


def clamp_zoom(zoom: float, min_zoom: int = MIN_ZOOM, max_zoom: int = MAX_ZOOM) -> int:
    """Round and clamp a zoom level into [min_zoom, max_zoom]."""
    return max(min_zoom, min(max_zoom, int(round(zoom))))


@dataclass(frozen=True, eq=True)
class ViewState:
    """Desired map view.

    Attributes:
        center: Map center.
        zoom: Integer zoom level within [10, 18].
        highlighted_request_id: Request the view is focused on, if any.
    """

    center: Coordinates
    zoom: int
    highlighted_request_id: int | None = None

    def __post_init__(self) -> None:
        """Validate zoom bounds."""
        if not (MIN_ZOOM <= self.zoom <= MAX_ZOOM):
            raise ValueError(f"zoom must be in [{MIN_ZOOM}, {MAX_ZOOM}], got {self.zoom}")


@dataclass(frozen=True, eq=True)
class AppliedView:
    """Snapshot of the last view pushed to (or reported by) the widget."""

    center: Coordinates
    zoom: int

    def matches(self, desired: ViewState, epsilon: float) -> bool:
        """Check whether pushing the desired view would change anything."""
        return self.zoom == desired.zoom and self.center.is_close_to(
            desired.center, epsilon
        )
