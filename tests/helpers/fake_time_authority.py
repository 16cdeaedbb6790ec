"""FakeTimeAuthority - Controllable time authority for deterministic tests.

Usage Patterns:
--------------

1. Frozen Time Pattern:
    >>> fake_time = FakeTimeAuthority(frozen_at=datetime(2026, 1, 15, 10, 0, tzinfo=LOCAL_TZ))
    >>> assert fake_time.now() == datetime(2026, 1, 15, 10, 0, tzinfo=LOCAL_TZ)

2. Time Advancement Pattern:
    >>> fake_time.advance(seconds=3600)  # 1 hour later
    >>> assert fake_time.now().hour == 11

3. Going Backwards:
    advance() refuses negative amounts; use set_time() to move the clock
    back, e.g. to produce an out-of-order timeline event.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from sgi.application.ports.time_authority import TimeAuthorityProtocol

LOCAL_TZ = timezone(timedelta(hours=-3))


class FakeTimeAuthority(TimeAuthorityProtocol):
    """Controllable time authority for deterministic tests.

    Attributes:
        _current_time: The controlled current local time.
    """

    def __init__(self, frozen_at: datetime | None = None) -> None:
        """Initialize the fake time authority.

        Args:
            frozen_at: Datetime to freeze time at. Defaults to
                2026-01-01 10:00 at UTC-3. Naive values are taken as UTC-3.
        """
        if frozen_at is None:
            frozen_at = datetime(2026, 1, 1, 10, 0, 0, tzinfo=LOCAL_TZ)
        if frozen_at.tzinfo is None:
            frozen_at = frozen_at.replace(tzinfo=LOCAL_TZ)
        self._current_time: datetime = frozen_at

    def now(self) -> datetime:
        return self._current_time

    # =========================================================================
    # Test Control Methods
    # =========================================================================

    def advance(
        self,
        seconds: float | int | None = None,
        delta: timedelta | None = None,
    ) -> None:
        """Advance time by the specified amount.

        Args:
            seconds: Number of seconds to advance.
            delta: A timedelta to advance by. Takes precedence over seconds.

        Raises:
            ValueError: If neither argument is given or the amount is negative.
        """
        if delta is not None:
            advance_seconds = delta.total_seconds()
        elif seconds is not None:
            advance_seconds = float(seconds)
        else:
            raise ValueError("Must provide either 'seconds' or 'delta' argument")

        if advance_seconds < 0:
            raise ValueError(
                f"Cannot advance time backwards. Got {advance_seconds} seconds. "
                "Use set_time() for explicit time changes."
            )
        self._current_time += timedelta(seconds=advance_seconds)

    def set_time(self, new_time: datetime) -> None:
        """Set the clock to an arbitrary value (backwards allowed)."""
        if new_time.tzinfo is None:
            new_time = new_time.replace(tzinfo=LOCAL_TZ)
        self._current_time = new_time
