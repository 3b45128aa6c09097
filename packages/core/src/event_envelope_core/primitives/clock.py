"""Clock abstraction used to stamp messages with their time of recording."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Protocol for time sources."""

    def now(self) -> datetime:
        """Return the current, timezone-aware instant."""
        ...


class SystemClock(Clock):
    """Wall-clock time in a fixed timezone (UTC by default)."""

    def __init__(self, tz: tzinfo = timezone.utc) -> None:
        self._tz = tz

    def now(self) -> datetime:
        return datetime.now(self._tz)


class FrozenClock(Clock):
    """Clock that only moves when told to. Intended for tests.

    Usage::

        clock = FrozenClock(datetime(2024, 1, 1, tzinfo=timezone.utc))
        clock.tick(timedelta(seconds=5))
    """

    def __init__(self, at: datetime | None = None) -> None:
        self._at = _aware(at or datetime.now(timezone.utc))

    def now(self) -> datetime:
        return self._at

    def fixate(self, at: datetime) -> None:
        """Pin the clock to *at* (naive values are read as UTC)."""
        self._at = _aware(at)

    def tick(self, delta: timedelta = timedelta(seconds=1)) -> datetime:
        """Advance the clock by *delta* and return the new instant."""
        self._at = self._at + delta
        return self._at


def _aware(at: datetime) -> datetime:
    if at.tzinfo is None:
        return at.replace(tzinfo=timezone.utc)
    return at
