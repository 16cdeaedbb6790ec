"""Map widget port.

The widget is stateful and interactive: users drag and scroll-zoom it and
it reports its own changes back through the controller's on_zoom_end /
on_move_end / on_widget_click callbacks. The core assumes nothing about
the tile provider beyond a URL template and an attribution string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from sgi.domain.models.coordinates import Coordinates
    from sgi.domain.models.marker import Marker

MapClickHandler = Callable[["Coordinates"], None]


class MapWidgetProtocol(Protocol):
    """Protocol for the map widget driven by the view controller.

    Methods:
        set_view: Move the widget to a center/zoom
        set_markers: Replace the rendered marker set
    """

    def set_view(self, center: Coordinates, zoom: int) -> None:
        """Apply a view to the widget.

        The controller only calls this when the desired view differs from
        the last-applied snapshot.
        """
        ...

    def set_markers(self, markers: list[Marker]) -> None:
        """Replace the markers shown on the widget."""
        ...
