"""Unit tests for SystemTimeAuthority."""

from datetime import datetime, timedelta, timezone

from sgi.application.ports.time_authority import TimeAuthorityProtocol
from sgi.application.services.time_authority_service import SystemTimeAuthority


class TestSystemTimeAuthority:
    def test_implements_protocol(self) -> None:
        assert isinstance(SystemTimeAuthority(), TimeAuthorityProtocol)

    def test_now_uses_local_offset(self) -> None:
        now = SystemTimeAuthority().now()
        assert now.utcoffset() == timedelta(hours=-3)

    def test_custom_offset(self) -> None:
        now = SystemTimeAuthority(utc_offset_hours=1).now()
        assert now.utcoffset() == timedelta(hours=1)

    def test_now_tracks_wall_clock(self) -> None:
        before = datetime.now(timezone.utc)
        now = SystemTimeAuthority().now()
        assert abs(now - before) < timedelta(seconds=5)
