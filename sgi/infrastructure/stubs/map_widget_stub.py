"""Map widget stub that records every call from the view controller."""

from __future__ import annotations

from sgi.domain.models.coordinates import Coordinates
from sgi.domain.models.marker import Marker


class MapWidgetStub:
    """MapWidgetProtocol implementation that records calls.

    Attributes:
        view_calls: (center, zoom) for each set_view call, in order.
        marker_calls: Marker lists for each set_markers call, in order.
    """

    def __init__(self) -> None:
        self.view_calls: list[tuple[Coordinates, int]] = []
        self.marker_calls: list[list[Marker]] = []

    def set_view(self, center: Coordinates, zoom: int) -> None:
        self.view_calls.append((center, zoom))

    def set_markers(self, markers: list[Marker]) -> None:
        self.marker_calls.append(list(markers))

    @property
    def current_view(self) -> tuple[Coordinates, int] | None:
        return self.view_calls[-1] if self.view_calls else None

    @property
    def current_markers(self) -> list[Marker]:
        return self.marker_calls[-1] if self.marker_calls else []

    def clear(self) -> None:
        self.view_calls.clear()
        self.marker_calls.clear()
