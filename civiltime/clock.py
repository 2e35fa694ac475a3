"""Sources of "now".

Reading the system clock is the only impure operation in civiltime, so it
sits behind the Clock protocol. Library code never calls it implicitly;
callers pass a Clock, and tests pass a FixedClock.
"""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable

from civiltime.core.duration import Duration
from civiltime.core.instant import Instant


@runtime_checkable
class Clock(Protocol):
    """Anything that can report the current instant."""

    def now(self) -> Instant:
        ...


class SystemClock:
    """The host's wall clock, via ``time.time_ns()``."""

    __slots__ = ()

    def now(self) -> Instant:
        return Instant(time.time_ns())

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """A clock stopped at one instant, advanced only on request.

    Examples:
        >>> clock = FixedClock(Instant(0))
        >>> clock.advance(Duration(seconds=5))
        >>> clock.now()
        Instant(nanos=5000000000)
    """

    __slots__ = ("_now",)

    def __init__(self, now: Instant) -> None:
        self._now = now

    def now(self) -> Instant:
        return self._now

    def advance(self, delta: Duration) -> None:
        """Move the clock by an exact Duration."""
        self._now = self._now + delta

    def __repr__(self) -> str:
        return f"FixedClock({self._now!r})"


_SYSTEM_CLOCK = SystemClock()


def system_clock() -> SystemClock:
    """Return the shared SystemClock."""
    return _SYSTEM_CLOCK


__all__ = ["Clock", "SystemClock", "FixedClock", "system_clock"]
