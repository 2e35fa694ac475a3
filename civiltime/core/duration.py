"""Duration class representing an exact span of elapsed time.

This module provides the Duration class: a single signed nanosecond count,
independent of calendar and zone.
"""

from __future__ import annotations

from fractions import Fraction
from typing import overload

from civiltime._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from civiltime.units.timeunit import TimeUnit


class Duration:
    """An exact span of time with nanosecond precision.

    Duration is one signed magnitude. Adding durations is commutative and
    associative, every duration has an inverse, and none of it depends on a
    calendar or a zone. A day here is exactly 86,400 seconds; use Period for
    "one calendar day".

    Attributes:
        nanoseconds: The total signed length in nanoseconds.

    Examples:
        >>> Duration(hours=7, minutes=15).total_seconds
        Fraction(26100, 1)

        >>> Duration.from_days(1) == Duration(seconds=86_400)
        True

        >>> -Duration(seconds=30)
        Duration(nanoseconds=-30000000000)
    """

    __slots__ = ("_nanos",)

    def __init__(
        self,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
    ) -> None:
        """Create a Duration from component parts.

        All parameters can be positive, negative, or zero; they are summed
        into one nanosecond count.

        Examples:
            >>> Duration(days=1)
            Duration(nanoseconds=86400000000000)

            >>> Duration(milliseconds=1500).total_seconds
            Fraction(3, 2)
        """
        self._nanos: int = (
            days * NANOS_PER_DAY
            + hours * NANOS_PER_HOUR
            + minutes * NANOS_PER_MINUTE
            + seconds * NANOS_PER_SECOND
            + milliseconds * NANOS_PER_MILLISECOND
            + microseconds * NANOS_PER_MICROSECOND
            + nanoseconds
        )

    @classmethod
    def zero(cls) -> Duration:
        """Create a zero-length duration."""
        return cls()

    @classmethod
    def from_nanos(cls, nanos: int) -> Duration:
        """Create a Duration from a nanosecond count."""
        return cls(nanoseconds=nanos)

    @classmethod
    def from_seconds(cls, seconds: int | Fraction) -> Duration:
        """Create a Duration from seconds.

        Fractional seconds are accepted as a Fraction and must resolve to
        whole nanoseconds.

        Raises:
            ValueError: If the value is not a whole number of nanoseconds.

        Examples:
            >>> Duration.from_seconds(Fraction(1, 4))
            Duration(nanoseconds=250000000)
        """
        nanos = Fraction(seconds) * NANOS_PER_SECOND
        if nanos.denominator != 1:
            raise ValueError(f"{seconds} seconds is not a whole number of nanoseconds")
        return cls(nanoseconds=int(nanos))

    @classmethod
    def from_minutes(cls, minutes: int) -> Duration:
        """Create a Duration from a number of minutes."""
        return cls(minutes=minutes)

    @classmethod
    def from_hours(cls, hours: int) -> Duration:
        """Create a Duration from a number of hours.

        Examples:
            >>> Duration.from_hours(25) == Duration(days=1, hours=1)
            True
        """
        return cls(hours=hours)

    @classmethod
    def from_days(cls, days: int) -> Duration:
        """Create a Duration of exactly ``days * 86400`` seconds."""
        return cls(days=days)

    @property
    def nanoseconds(self) -> int:
        """Return the total length in nanoseconds."""
        return self._nanos

    @property
    def total_seconds(self) -> Fraction:
        """Return the exact length in seconds.

        Examples:
            >>> Duration(milliseconds=-250).total_seconds
            Fraction(-1, 4)
        """
        return Fraction(self._nanos, NANOS_PER_SECOND)

    @property
    def is_zero(self) -> bool:
        """Return True if this is a zero-length duration."""
        return self._nanos == 0

    @property
    def is_negative(self) -> bool:
        """Return True if this duration is negative."""
        return self._nanos < 0

    def in_units(self, unit: TimeUnit | str) -> Fraction:
        """Project this duration onto a fixed unit.

        The result is exact; it is a whole number whenever the duration is
        a whole number of that unit.

        Args:
            unit: A TimeUnit or unit name ("seconds", "hours", ...).

        Returns:
            The length expressed in ``unit``.

        Raises:
            ValueError: For MONTH and YEAR, which have no fixed length.

        Examples:
            >>> Duration(hours=7, minutes=15).in_units(TimeUnit.HOUR)
            Fraction(29, 4)
            >>> Duration(days=2).in_units("days")
            Fraction(2, 1)
        """
        if isinstance(unit, str):
            unit = TimeUnit.from_name(unit)
        if unit.nanos is None:
            raise ValueError(
                f"cannot express a Duration in {unit.value}s: the unit has no fixed length"
            )
        return Fraction(self._nanos, unit.nanos)

    def components(self) -> tuple[int, int, int, int, int]:
        """Split into (days, hours, minutes, seconds, nanoseconds) of |self|.

        The sign is not included; check ``is_negative``.
        """
        rest = abs(self._nanos)
        days, rest = divmod(rest, NANOS_PER_DAY)
        hours, rest = divmod(rest, NANOS_PER_HOUR)
        minutes, rest = divmod(rest, NANOS_PER_MINUTE)
        seconds, nanos = divmod(rest, NANOS_PER_SECOND)
        return (days, hours, minutes, seconds, nanos)

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(nanoseconds=self._nanos + other._nanos)

    def __radd__(self, other: object) -> Duration:
        """Support sum() by handling 0 + Duration."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(nanoseconds=self._nanos - other._nanos)

    def __neg__(self) -> Duration:
        return Duration(nanoseconds=-self._nanos)

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        return Duration(nanoseconds=abs(self._nanos))

    def __mul__(self, other: object) -> Duration:
        """Multiply by an integer scalar."""
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Duration(nanoseconds=self._nanos * other)

    def __rmul__(self, other: object) -> Duration:
        return self.__mul__(other)

    @overload
    def __floordiv__(self, other: int) -> Duration: ...

    @overload
    def __floordiv__(self, other: Duration) -> int: ...

    def __floordiv__(self, other: object) -> Duration | int:
        """Divide by an int (floored Duration) or by a Duration (count)."""
        if isinstance(other, Duration):
            return self._nanos // other._nanos
        if isinstance(other, int) and not isinstance(other, bool):
            return Duration(nanoseconds=self._nanos // other)
        return NotImplemented

    def __truediv__(self, other: object) -> Fraction:
        """Exact ratio of two durations."""
        if not isinstance(other, Duration):
            return NotImplemented
        return Fraction(self._nanos, other._nanos)

    def __mod__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(nanoseconds=self._nanos % other._nanos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(("Duration", self._nanos))

    def __bool__(self) -> bool:
        return self._nanos != 0

    def __repr__(self) -> str:
        return f"Duration(nanoseconds={self._nanos})"

    def __str__(self) -> str:
        """Return an ISO 8601 style string with exact units.

        Examples:
            >>> str(Duration(hours=7, minutes=15))
            'PT7H15M'
            >>> str(Duration(days=-1, seconds=-1))
            '-P1DT1S'
        """
        if self._nanos == 0:
            return "PT0S"

        days, hours, minutes, seconds, nanos = self.components()
        sign = "-" if self._nanos < 0 else ""
        out = f"{sign}P"
        if days:
            out += f"{days}D"
        if hours or minutes or seconds or nanos:
            out += "T"
            if hours:
                out += f"{hours}H"
            if minutes:
                out += f"{minutes}M"
            if nanos:
                frac = f"{nanos:09d}".rstrip("0")
                out += f"{seconds}.{frac}S"
            elif seconds:
                out += f"{seconds}S"
        return out


__all__ = ["Duration"]
