"""
Clock adapters.

Both satisfy the ClockPort used by the dates component:
- SystemClock reads the wall clock
- FrozenClock returns a fixed instant (deterministic tests)
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta


class SystemClock:
    def now(self) -> datetime:
        return datetime.now()

    def now_utc(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """
    Clock that returns a fixed time.

    Useful for deterministic testing of relative-time formatting.
    """

    def __init__(self, frozen_utc: datetime) -> None:
        # Naive datetimes are taken as UTC
        if frozen_utc.tzinfo is None:
            frozen_utc = frozen_utc.replace(tzinfo=UTC)
        self._frozen_utc = frozen_utc.astimezone(UTC)

    def now(self) -> datetime:
        """Get frozen time as a naive UTC datetime."""
        return self._frozen_utc.replace(tzinfo=None)

    def now_utc(self) -> datetime:
        """Get frozen UTC time."""
        return self._frozen_utc

    def advance(self, delta: timedelta) -> None:
        """Advance frozen time by delta."""
        self._frozen_utc = self._frozen_utc + delta
