"""Map View Synchronization Controller.

Owns the authoritative desired view (center, zoom, highlighted request)
and reconciles it against a stateful, independently interactive map widget.

The widget reports its own changes (user zoom, pan) back to the
controller. Pushing the desired view on every pass would either loop
(push -> widget echoes -> push) or fight an in-progress gesture, so the
controller keeps a last-applied snapshot separate from the desired value:

- reconcile() pushes to the widget only when desired differs from the
  snapshot, then updates the snapshot
- widget-originated events update desired first and then the snapshot,
  so the following reconcile() is a no-op

Applying an already-matching view never re-invokes the widget mutator.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from sgi.application.ports.map_widget import MapClickHandler, MapWidgetProtocol
from sgi.application.services.base import LoggingMixin
from sgi.application.services.entity_store import EntityStore
from sgi.config.lighting_config import DEFAULT_LIGHTING_CONFIG, LightingConfig
from sgi.domain.models.coordinates import Coordinates
from sgi.domain.models.lighting_request import LightingRequest
from sgi.domain.models.marker import Marker
from sgi.domain.models.view_state import AppliedView, ViewState, clamp_zoom


@dataclass(frozen=True)
class TileSource:
    """Tile layer description handed to the widget."""

    url_template: str
    attribution: str


class MapViewController(LoggingMixin):
    """Reconciles the desired map view against the widget.

    Attributes:
        _widget: The map widget being driven.
        _store: Entity store (marker data and highlight lookups).
        _config: Lighting configuration (zoom levels, home location).
        _desired: The view the controller wants the widget to show.
        _applied: Last view pushed to or reported by the widget.
        _click_handler: Receiver of click-to-report events.
    """

    def __init__(
        self,
        widget: MapWidgetProtocol,
        store: EntityStore,
        config: LightingConfig = DEFAULT_LIGHTING_CONFIG,
    ) -> None:
        """Initialize the controller at the home location and default zoom.

        Nothing is pushed to the widget until the first reconcile().
        """
        self._widget = widget
        self._store = store
        self._config = config
        self._desired = ViewState(
            center=config.home_location,
            zoom=config.default_zoom,
        )
        self._applied: AppliedView | None = None
        self._click_handler: MapClickHandler | None = None
        self._init_logger(component="map")

    @property
    def desired_view(self) -> ViewState:
        return self._desired

    @property
    def applied_view(self) -> AppliedView | None:
        return self._applied

    @property
    def tile_source(self) -> TileSource:
        return TileSource(
            url_template=self._config.tile_url_template,
            attribution=self._config.tile_attribution,
        )

    # -------- Reconciliation --------

    def reconcile(self) -> bool:
        """Push the desired view to the widget if it differs from the snapshot.

        Returns:
            True if the widget was updated, False if the pass was a no-op.
        """
        if self._applied is not None and self._applied.matches(
            self._desired, self._config.view_epsilon
        ):
            return False

        self._widget.set_view(self._desired.center, self._desired.zoom)
        self._applied = AppliedView(center=self._desired.center, zoom=self._desired.zoom)
        self._log_operation("reconcile").debug(
            "view_applied",
            lat=self._desired.center.lat,
            lng=self._desired.center.lng,
            zoom=self._desired.zoom,
        )
        return True

    def _set_desired(self, desired: ViewState) -> bool:
        self._desired = desired
        return self.reconcile()

    # -------- External intent --------

    def set_desired_zoom(self, zoom: float) -> bool:
        """Set the desired zoom, clamped to the configured bounds."""
        clamped = clamp_zoom(zoom, self._config.min_zoom, self._config.max_zoom)
        return self._set_desired(replace(self._desired, zoom=clamped))

    def zoom_in(self) -> bool:
        return self.set_desired_zoom(self._desired.zoom + 1)

    def zoom_out(self) -> bool:
        return self.set_desired_zoom(self._desired.zoom - 1)

    def set_highlighted(self, request_id: int | None) -> bool:
        """Focus the view on a request, or clear the focus.

        For an existing request the desired center becomes its coordinates
        and the desired zoom the highlight zoom, replacing whatever the user
        had panned to. None clears the highlight without moving the map.
        Unknown ids are ignored.

        Returns:
            True if the widget was updated.
        """
        log = self._log_operation("set_highlighted", request_id=request_id)
        if request_id is None:
            self._desired = replace(self._desired, highlighted_request_id=None)
            return self.reconcile()

        request = self._store.get_request(request_id)
        if request is None:
            log.warning("highlight_ignored_unknown_request")
            return False

        log.info("request_highlighted", protocol=request.protocol)
        return self._set_desired(
            ViewState(
                center=request.coordinates,
                zoom=self._config.highlight_zoom,
                highlighted_request_id=request.id,
            )
        )

    def center_on(self, coordinates: Coordinates, zoom: float | None = None) -> bool:
        """Recentre on a point, optionally changing zoom; clears any highlight."""
        target_zoom = (
            self._desired.zoom
            if zoom is None
            else clamp_zoom(zoom, self._config.min_zoom, self._config.max_zoom)
        )
        return self._set_desired(ViewState(center=coordinates, zoom=target_zoom))

    def recentre_on_known_origin(self) -> bool:
        """The "home" action: configured home location at the home zoom."""
        return self.center_on(self._config.home_location, self._config.home_zoom)

    # -------- Widget-originated events --------

    def on_zoom_end(self, zoom: float) -> None:
        """The user finished zooming the widget.

        Desired is updated first, then the snapshot records what the widget
        actually shows, so the next reconcile() only acts if the reported
        zoom was out of bounds. Fractional zooms are rounded the same way
        for both.
        """
        reported = int(round(zoom))
        clamped = clamp_zoom(reported, self._config.min_zoom, self._config.max_zoom)
        self._desired = replace(self._desired, zoom=clamped)
        center = self._applied.center if self._applied else self._desired.center
        self._applied = AppliedView(center=center, zoom=reported)
        self._log_operation("on_zoom_end").debug("widget_zoom_recorded", zoom=clamped)
        self.reconcile()

    def on_move_end(self, center: Coordinates) -> None:
        """The user finished panning the widget."""
        self._desired = replace(self._desired, center=center)
        zoom = self._applied.zoom if self._applied else self._desired.zoom
        self._applied = AppliedView(center=center, zoom=zoom)
        self.reconcile()

    def register_click_handler(self, handler: MapClickHandler | None) -> None:
        """Register the click-to-report receiver (None to unregister)."""
        self._click_handler = handler

    def on_widget_click(self, coordinates: Coordinates) -> None:
        """Forward a map click verbatim; the view is left untouched."""
        if self._click_handler is None:
            self._log_operation("on_widget_click").debug("click_ignored_no_handler")
            return
        self._click_handler(coordinates)

    # -------- Markers --------

    def markers(self, requests: Iterable[LightingRequest] | None = None) -> list[Marker]:
        """One marker per visible request (all stored requests by default)."""
        visible = self._store.requests() if requests is None else requests
        return [Marker.for_request(request) for request in visible]

    def refresh_markers(self, requests: Iterable[LightingRequest] | None = None) -> None:
        """Push the current marker set to the widget."""
        markers = self.markers(requests)
        self._widget.set_markers(markers)
        self._log_operation("refresh_markers").debug(
            "markers_pushed", count=len(markers)
        )
