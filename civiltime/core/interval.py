"""Interval class representing an explicit span between two instants.

An Interval keeps its endpoints in the order given. It may be degenerate
(start == end) or reversed (end before start); the sign is reported
rather than silently fixed.
"""

from __future__ import annotations

from fractions import Fraction
from typing import TYPE_CHECKING, Union

from civiltime._internal.constants import (
    MONTHS_PER_YEAR,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from civiltime.core.duration import Duration
from civiltime.core.instant import Instant
from civiltime.core.period import Period

if TYPE_CHECKING:
    from civiltime.units.timeunit import TimeUnit
    from civiltime.zones.timezone import TimeZone


class Interval:
    """A span from ``start`` to ``end``, half-open [start, end) once ordered.

    Attributes:
        start: The first endpoint as given.
        end: The second endpoint as given.

    Examples:
        >>> a = Instant.from_epoch_seconds(0)
        >>> b = Instant.from_epoch_seconds(90)
        >>> Interval(a, b).as_duration().total_seconds
        Fraction(90, 1)
        >>> Interval(b, a).sign
        -1
        >>> Interval(b, a).as_duration().total_seconds
        Fraction(-90, 1)
    """

    __slots__ = ("_start", "_end")

    def __init__(self, start: Instant, end: Instant) -> None:
        """Create an interval between two instants, in the given order.

        Raises:
            TypeError: If either endpoint is not an Instant.
        """
        if not isinstance(start, Instant) or not isinstance(end, Instant):
            raise TypeError(
                f"Interval endpoints must be Instants, got "
                f"{type(start).__name__} and {type(end).__name__}"
            )
        self._start = start
        self._end = end

    @classmethod
    def of(
        cls,
        start: Instant,
        amount: Union[Duration, Period],
        zone: TimeZone | str | None = None,
    ) -> Interval:
        """Create ``[start, start + amount)``.

        A Period is applied on the calendar of ``zone`` (UTC by default); a
        Duration ignores the zone.

        Raises:
            TypeError: If amount is neither a Duration nor a Period.
        """
        if isinstance(amount, Duration):
            return cls(start, start + amount)
        if isinstance(amount, Period):
            from civiltime.arithmetic.ops import add_period

            return cls(start, add_period(start, amount, zone))
        raise TypeError(f"expected Duration or Period, got {type(amount).__name__}")

    @property
    def start(self) -> Instant:
        return self._start

    @property
    def end(self) -> Instant:
        return self._end

    @property
    def sign(self) -> int:
        """1 if end is after start, -1 if before, 0 if they coincide."""
        if self._end > self._start:
            return 1
        if self._end < self._start:
            return -1
        return 0

    @property
    def is_degenerate(self) -> bool:
        """True when start == end."""
        return self._start == self._end

    @property
    def is_reversed(self) -> bool:
        """True when end is before start."""
        return self._end < self._start

    def normalized(self) -> Interval:
        """Return the same span with endpoints in chronological order."""
        if self.is_reversed:
            return Interval(self._end, self._start)
        return self

    def reversed(self) -> Interval:
        """Return the interval with its endpoints swapped."""
        return Interval(self._end, self._start)

    def as_duration(self) -> Duration:
        """Exact signed elapsed time ``end - start``. Zone-independent."""
        return Duration(nanoseconds=self._end.epoch_nanos - self._start.epoch_nanos)

    def as_period(self, zone: TimeZone | str | None = None) -> Period:
        """Decompose the span into calendar units on the wall clock of ``zone``.

        Working from the earlier endpoint, take as many whole months as fit
        without overshooting the later endpoint (reported as years and
        months), then whole days, then the wall-clock remainder as hours,
        minutes, seconds and nanoseconds. The Period is never negative;
        read ``sign`` for the direction.

        Adding the result to the earlier endpoint with ``add_period`` gives
        back the later one, unless a DST transition lies between them, in
        which case the two differ by the transition offset.

        Args:
            zone: Zone whose calendar and clock are used (UTC by default).

        Examples:
            >>> from civiltime.convert.civil import from_civil
            >>> from civiltime.core.civil import CivilFields
            >>> start = from_civil(CivilFields(2020, 2, 28))
            >>> Interval(start, from_civil(CivilFields(2020, 3, 1))).as_period()
            Period(days=2)
        """
        from civiltime.arithmetic.ops import shift_fields
        from civiltime.convert.civil import from_civil, to_civil
        from civiltime.zones.timezone import as_zone

        tz = as_zone(zone)
        lo, hi = sorted((self._start, self._end), key=lambda i: i.epoch_nanos)
        first = to_civil(lo, tz)
        last = to_civil(hi, tz)

        months = max((last.year - first.year) * MONTHS_PER_YEAR + (last.month - first.month), 0)
        while months > 0 and shift_fields(first, Period(months=months)) > last:
            months -= 1
        anchor = shift_fields(first, Period(months=months))

        rest = last.wall_nanos - anchor.wall_nanos
        if rest < 0:
            # A fall-back transition can make the later instant read earlier
            # on the wall clock; measure what is left in elapsed time.
            rest = max(hi.epoch_nanos - from_civil(anchor, tz).epoch_nanos, 0)

        days, rest = divmod(rest, NANOS_PER_DAY)
        hours, rest = divmod(rest, NANOS_PER_HOUR)
        minutes, rest = divmod(rest, NANOS_PER_MINUTE)
        seconds, nanos = divmod(rest, NANOS_PER_SECOND)
        years, months = divmod(months, MONTHS_PER_YEAR)
        return Period(
            years=years,
            months=months,
            days=days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            nanoseconds=nanos,
        )

    def in_units(self, unit: TimeUnit | str) -> Fraction:
        """Exact signed length expressed in a fixed unit."""
        return self.as_duration().in_units(unit)

    def contains(self, instant: Instant) -> bool:
        """True if ``instant`` lies in the ordered span [earlier, later).

        A degenerate interval contains nothing.
        """
        lo, hi = sorted((self._start, self._end), key=lambda i: i.epoch_nanos)
        return lo <= instant < hi

    def __contains__(self, instant: Instant) -> bool:
        return self.contains(instant)

    def overlaps(self, other: Interval) -> bool:
        """True if the two ordered spans share at least one instant.

        Spans that only touch ([a, b) and [b, c)) do not overlap.
        """
        a = self.normalized()
        b = other.normalized()
        if a.is_degenerate or b.is_degenerate:
            return False
        return a._start < b._end and b._start < a._end

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self) -> int:
        return hash(("Interval", self._start, self._end))

    def __repr__(self) -> str:
        return f"Interval({self._start!r}, {self._end!r})"

    def __str__(self) -> str:
        return f"{self._start}/{self._end}"


__all__ = ["Interval"]
