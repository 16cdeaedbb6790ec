"""Unit tests for MapViewController.

Tests cover:
- Reconcile idempotency (no widget call when nothing changed)
- Zoom clamping and zoom in/out
- Highlight recentring and the home action
- Widget-originated events (no echo back to the widget)
- Click forwarding and marker rendering
"""

import pytest

from sgi.application.services.entity_store import EntityStore
from sgi.application.services.map_view_controller import MapViewController
from sgi.config.lighting_config import LightingConfig
from sgi.domain.models.coordinates import Coordinates
from sgi.domain.models.marker import MarkerColor
from sgi.infrastructure.stubs.map_widget_stub import MapWidgetStub

HOME = Coordinates(lat=-5.3686, lng=-49.1178)


class TestReconcile:
    """Tests for the last-applied snapshot."""

    def test_initial_desired_view(self, map_controller: MapViewController) -> None:
        assert map_controller.desired_view.center == HOME
        assert map_controller.desired_view.zoom == 13
        assert map_controller.applied_view is None

    def test_first_reconcile_pushes(
        self, map_controller: MapViewController, widget: MapWidgetStub
    ) -> None:
        assert map_controller.reconcile() is True
        assert widget.view_calls == [(HOME, 13)]

    def test_second_reconcile_is_noop(
        self, map_controller: MapViewController, widget: MapWidgetStub
    ) -> None:
        map_controller.reconcile()
        assert map_controller.reconcile() is False
        assert len(widget.view_calls) == 1

    def test_same_zoom_twice_calls_widget_once(
        self, map_controller: MapViewController, widget: MapWidgetStub
    ) -> None:
        map_controller.set_desired_zoom(14)
        map_controller.set_desired_zoom(14)
        assert widget.view_calls == [(HOME, 14)]

    def test_sub_epsilon_move_is_noop(
        self, map_controller: MapViewController, widget: MapWidgetStub
    ) -> None:
        map_controller.reconcile()
        nudged = Coordinates(lat=HOME.lat + 1e-12, lng=HOME.lng)
        assert map_controller.center_on(nudged) is False
        assert len(widget.view_calls) == 1


class TestZoom:
    """Tests for zoom changes."""

    @pytest.mark.parametrize(("requested", "applied"), [(3, 10), (25, 18), (15, 15)])
    def test_zoom_is_clamped(
        self,
        map_controller: MapViewController,
        widget: MapWidgetStub,
        requested: int,
        applied: int,
    ) -> None:
        map_controller.set_desired_zoom(requested)
        assert widget.current_view == (HOME, applied)

    def test_zoom_in_and_out(
        self, map_controller: MapViewController, widget: MapWidgetStub
    ) -> None:
        map_controller.zoom_in()
        map_controller.zoom_out()
        map_controller.zoom_out()
        assert [zoom for _, zoom in widget.view_calls] == [14, 13, 12]

    def test_zoom_in_at_max_is_noop(
        self, map_controller: MapViewController, widget: MapWidgetStub
    ) -> None:
        map_controller.set_desired_zoom(18)
        assert map_controller.zoom_in() is False
        assert len(widget.view_calls) == 1


class TestHighlight:
    """Tests for request highlighting and recentring."""

    def test_highlight_recentres_at_zoom_16(
        self,
        map_controller: MapViewController,
        widget: MapWidgetStub,
        seeded_store: EntityStore,
    ) -> None:
        request = seeded_store.get_request(4)

        assert map_controller.set_highlighted(4) is True

        view = map_controller.desired_view
        assert view.highlighted_request_id == 4
        assert view.zoom == 16
        assert view.center == request.coordinates
        assert widget.current_view == (request.coordinates, 16)

    def test_highlight_overrides_user_pan(
        self,
        map_controller: MapViewController,
        widget: MapWidgetStub,
        seeded_store: EntityStore,
    ) -> None:
        map_controller.reconcile()
        map_controller.on_move_end(Coordinates(lat=-5.30, lng=-49.00))

        map_controller.set_highlighted(2)

        assert widget.current_view == (seeded_store.get_request(2).coordinates, 16)

    def test_unknown_request_ignored(
        self, map_controller: MapViewController, widget: MapWidgetStub
    ) -> None:
        assert map_controller.set_highlighted(999) is False
        assert widget.view_calls == []
        assert map_controller.desired_view.highlighted_request_id is None

    def test_clear_highlight_keeps_view(
        self, map_controller: MapViewController, widget: MapWidgetStub
    ) -> None:
        map_controller.set_highlighted(4)
        assert map_controller.set_highlighted(None) is False
        assert map_controller.desired_view.highlighted_request_id is None
        assert len(widget.view_calls) == 1

    def test_home_action(
        self, map_controller: MapViewController, widget: MapWidgetStub
    ) -> None:
        map_controller.set_highlighted(4)
        map_controller.recentre_on_known_origin()
        assert widget.current_view == (HOME, 14)
        assert map_controller.desired_view.highlighted_request_id is None


class TestWidgetEvents:
    """Tests for events reported by the widget."""

    def test_user_zoom_is_not_echoed(
        self, map_controller: MapViewController, widget: MapWidgetStub
    ) -> None:
        map_controller.reconcile()
        map_controller.on_zoom_end(15)

        assert map_controller.desired_view.zoom == 15
        assert map_controller.reconcile() is False
        assert len(widget.view_calls) == 1

    @pytest.mark.parametrize(("reported", "expected"), [(13.6, 14), (15.2, 15)])
    def test_fractional_user_zoom_is_not_echoed(
        self,
        map_controller: MapViewController,
        widget: MapWidgetStub,
        reported: float,
        expected: int,
    ) -> None:
        map_controller.reconcile()
        widget.clear()
        map_controller.on_zoom_end(reported)

        assert map_controller.desired_view.zoom == expected
        assert map_controller.applied_view.zoom == expected
        assert widget.view_calls == []

    def test_user_pan_is_not_echoed(
        self, map_controller: MapViewController, widget: MapWidgetStub
    ) -> None:
        map_controller.reconcile()
        moved = Coordinates(lat=-5.35, lng=-49.10)
        map_controller.on_move_end(moved)

        assert map_controller.desired_view.center == moved
        assert map_controller.reconcile() is False
        assert len(widget.view_calls) == 1

    def test_out_of_bounds_widget_zoom_is_corrected(
        self, map_controller: MapViewController, widget: MapWidgetStub
    ) -> None:
        map_controller.reconcile()
        map_controller.on_zoom_end(19)
        assert widget.current_view == (HOME, 18)

    def test_click_forwarded_verbatim(
        self, map_controller: MapViewController, widget: MapWidgetStub
    ) -> None:
        clicks: list[Coordinates] = []
        map_controller.register_click_handler(clicks.append)
        point = Coordinates(lat=-5.3701, lng=-49.1201)

        map_controller.on_widget_click(point)

        assert clicks == [point]
        assert widget.view_calls == []

    def test_click_without_handler_is_ignored(
        self, map_controller: MapViewController
    ) -> None:
        map_controller.on_widget_click(HOME)


class TestMarkers:
    """Tests for marker rendering."""

    def test_one_marker_per_request(
        self, map_controller: MapViewController, widget: MapWidgetStub
    ) -> None:
        map_controller.refresh_markers()

        colors = {m.id: m.color for m in widget.current_markers}
        assert colors == {
            1: MarkerColor.PENDING,
            2: MarkerColor.PROGRESS,
            3: MarkerColor.DONE,
            4: MarkerColor.CRITICAL,
            5: MarkerColor.DONE,
        }

    def test_markers_for_subset(
        self,
        map_controller: MapViewController,
        seeded_store: EntityStore,
    ) -> None:
        subset = seeded_store.requests()[:2]
        assert [m.id for m in map_controller.markers(subset)] == [1, 2]

    def test_tile_source(
        self, map_controller: MapViewController, lighting_config: LightingConfig
    ) -> None:
        source = map_controller.tile_source
        assert source.url_template == lighting_config.tile_url_template
        assert "OpenStreetMap" in source.attribution
