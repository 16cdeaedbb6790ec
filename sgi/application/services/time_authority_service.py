"""System time authority.

The only production module allowed to read the wall clock. Every other
service receives a TimeAuthorityProtocol and asks it for timestamps.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from sgi.application.ports.time_authority import TimeAuthorityProtocol


class SystemTimeAuthority(TimeAuthorityProtocol):
    """Time authority backed by the system clock.

    Local time is expressed with a fixed UTC offset (Marabá uses UTC-3
    all year), so stamps stay comparable without a tz database.

    Attributes:
        _local_tz: Fixed-offset timezone used by now().
    """

    def __init__(self, utc_offset_hours: int = -3) -> None:
        """Initialize the time authority.

        Args:
            utc_offset_hours: Offset of local wall-clock time from UTC.
        """
        self._local_tz = timezone(timedelta(hours=utc_offset_hours))

    def now(self) -> datetime:
        """Return current local time (timezone-aware)."""
        return datetime.now(self._local_tz)
