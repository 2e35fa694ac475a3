"""Instant class representing an absolute, zone-independent point in time.

An Instant is a signed nanosecond count since 1970-01-01T00:00:00Z. It has
no calendar of its own; CivilFields are obtained by reading it in a zone.
"""

from __future__ import annotations

from fractions import Fraction
from typing import TYPE_CHECKING, overload

from civiltime._internal.constants import NANOS_PER_MILLISECOND, NANOS_PER_SECOND

if TYPE_CHECKING:
    from civiltime.clock import Clock
    from civiltime.core.civil import CivilFields
    from civiltime.core.duration import Duration
    from civiltime.core.period import Period
    from civiltime.core.zoned import ZonedInstant
    from civiltime.zones.timezone import TimeZone


class Instant:
    """An absolute moment, counted in nanoseconds from the Unix epoch.

    Instants are totally ordered, hashable and immutable. Arithmetic with a
    Duration is plain integer arithmetic. Arithmetic with a Period needs a
    zone; ``Instant + Period`` reads the instant in UTC, use
    ``instant.at(zone) + period`` for any other zone.

    Examples:
        >>> Instant.from_epoch_seconds(0)
        Instant(nanos=0)

        >>> from civiltime.core.duration import Duration
        >>> Instant(0) + Duration(seconds=1) == Instant.from_epoch_seconds(1)
        True

        >>> str(Instant.from_epoch_seconds(1583650800))
        '2020-03-08T07:00:00Z'
    """

    __slots__ = ("_nanos",)

    def __init__(self, nanos: int = 0) -> None:
        """Create an Instant from nanoseconds since the epoch.

        Raises:
            TypeError: If nanos is not an integer.
        """
        if not isinstance(nanos, int) or isinstance(nanos, bool):
            raise TypeError(f"nanos must be an integer, got {type(nanos).__name__}")
        self._nanos: int = nanos

    @classmethod
    def epoch(cls) -> Instant:
        """Return 1970-01-01T00:00:00Z."""
        return cls(0)

    @classmethod
    def from_epoch_seconds(cls, seconds: int | Fraction) -> Instant:
        """Create an Instant from (possibly fractional) epoch seconds.

        Raises:
            ValueError: If ``seconds`` is not a whole number of nanoseconds.
        """
        nanos = Fraction(seconds) * NANOS_PER_SECOND
        if nanos.denominator != 1:
            raise ValueError(f"{seconds} seconds is not a whole number of nanoseconds")
        return cls(int(nanos))

    @classmethod
    def from_epoch_millis(cls, millis: int) -> Instant:
        """Create an Instant from epoch milliseconds."""
        return cls(millis * NANOS_PER_MILLISECOND)

    @classmethod
    def now(cls, clock: Clock | None = None) -> Instant:
        """Return the current instant from ``clock`` (the system clock by default)."""
        from civiltime.clock import system_clock

        return (clock or system_clock()).now()

    @property
    def epoch_nanos(self) -> int:
        """Return nanoseconds since the epoch."""
        return self._nanos

    @property
    def epoch_seconds(self) -> Fraction:
        """Return exact seconds since the epoch.

        Examples:
            >>> Instant(1_500_000_000).epoch_seconds
            Fraction(3, 2)
        """
        return Fraction(self._nanos, NANOS_PER_SECOND)

    @property
    def whole_epoch_seconds(self) -> int:
        """Return seconds since the epoch, floored."""
        return self._nanos // NANOS_PER_SECOND

    def to_civil(self, zone: TimeZone | str | None = None) -> CivilFields:
        """Read this instant as civil fields in ``zone`` (UTC by default)."""
        from civiltime.convert.civil import to_civil

        return to_civil(self, zone)

    def at(self, zone: TimeZone | str) -> ZonedInstant:
        """Pair this instant with a display zone."""
        from civiltime.core.zoned import ZonedInstant

        return ZonedInstant(self, zone)

    @overload
    def __add__(self, other: Duration) -> Instant: ...

    @overload
    def __add__(self, other: Period) -> Instant: ...

    def __add__(self, other: object) -> Instant:
        """Add a Duration exactly, or a Period on the UTC calendar."""
        from civiltime.core.duration import Duration
        from civiltime.core.period import Period

        if isinstance(other, Duration):
            return Instant(self._nanos + other.nanoseconds)
        if isinstance(other, Period):
            from civiltime.arithmetic.ops import add_period

            return add_period(self, other)
        return NotImplemented

    def __radd__(self, other: object) -> Instant:
        return self.__add__(other)

    @overload
    def __sub__(self, other: Instant) -> Duration: ...

    @overload
    def __sub__(self, other: Duration) -> Instant: ...

    @overload
    def __sub__(self, other: Period) -> Instant: ...

    def __sub__(self, other: object) -> Instant | Duration:
        """Subtract an Instant (giving a Duration), a Duration or a Period."""
        from civiltime.core.duration import Duration
        from civiltime.core.period import Period

        if isinstance(other, Instant):
            return Duration(nanoseconds=self._nanos - other._nanos)
        if isinstance(other, Duration):
            return Instant(self._nanos - other.nanoseconds)
        if isinstance(other, Period):
            from civiltime.arithmetic.ops import add_period

            return add_period(self, -other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(("Instant", self._nanos))

    def __repr__(self) -> str:
        return f"Instant(nanos={self._nanos})"

    def __str__(self) -> str:
        """Return the UTC reading in ISO 8601 form with a ``Z`` suffix."""
        from civiltime.core.civil import CivilFields

        return f"{CivilFields.from_wall_nanos(self._nanos)}Z"


__all__ = ["Instant"]
