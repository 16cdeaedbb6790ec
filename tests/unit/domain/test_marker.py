"""Unit tests for marker color precedence."""

from datetime import datetime, timedelta, timezone

import pytest

from sgi.domain.models.coordinates import Coordinates
from sgi.domain.models.lighting_request import (
    LightingRequest,
    Priority,
    Reporter,
    RequestStatus,
    TimelineEvent,
    TimelineEventKind,
)
from sgi.domain.models.marker import Marker, MarkerColor, marker_color_for

T0 = datetime(2026, 1, 1, 10, 0, tzinfo=timezone(timedelta(hours=-3)))

_EVIDENCE = {
    RequestStatus.PENDING: (),
    RequestStatus.PROGRESS: (TimelineEventKind.DISPATCHED,),
    RequestStatus.DONE: (TimelineEventKind.DISPATCHED, TimelineEventKind.COMPLETED),
    RequestStatus.CANCELLED: (TimelineEventKind.CANCELLED,),
}


def _request(status: RequestStatus, priority: Priority) -> LightingRequest:
    kinds = (TimelineEventKind.RECEIVED,) + _EVIDENCE[status]
    return LightingRequest(
        id=7,
        protocol="2026-0007-LP",
        type="Damaged Pole",
        address="Av. Transamazônica - Amapá",
        status=status,
        priority=priority,
        coordinates=Coordinates(lat=-5.348, lng=-49.1045),
        created_at=T0,
        reporter=Reporter("Ana Paula", "ana@email.com"),
        timeline=tuple(
            TimelineEvent(occurred_at=T0, title="t", description="d", kind=k)
            for k in kinds
        ),
    )


class TestMarkerColor:
    """Tests for the color precedence order."""

    def test_hex_values(self) -> None:
        assert MarkerColor.CRITICAL.value == "#dc2626"
        assert MarkerColor.DONE.value == "#16a34a"
        assert MarkerColor.PROGRESS.value == "#2563eb"
        assert MarkerColor.PENDING.value == "#eab308"

    @pytest.mark.parametrize("status", list(RequestStatus))
    def test_critical_wins_over_any_status(self, status: RequestStatus) -> None:
        assert marker_color_for(_request(status, Priority.CRITICAL)) == MarkerColor.CRITICAL

    def test_done(self) -> None:
        assert marker_color_for(_request(RequestStatus.DONE, Priority.HIGH)) == MarkerColor.DONE

    def test_progress(self) -> None:
        assert (
            marker_color_for(_request(RequestStatus.PROGRESS, Priority.LOW))
            == MarkerColor.PROGRESS
        )

    def test_pending_default(self) -> None:
        assert (
            marker_color_for(_request(RequestStatus.PENDING, Priority.MEDIUM))
            == MarkerColor.PENDING
        )

    def test_cancelled_falls_back_to_default(self) -> None:
        assert (
            marker_color_for(_request(RequestStatus.CANCELLED, Priority.MEDIUM))
            == MarkerColor.PENDING
        )


class TestMarker:
    def test_for_request(self) -> None:
        request = _request(RequestStatus.PROGRESS, Priority.HIGH)
        marker = Marker.for_request(request)
        assert marker.id == request.id
        assert marker.coordinates == request.coordinates
        assert marker.color == MarkerColor.PROGRESS
