"""Period class representing calendar-relative offsets.

This module provides the Period class for offsets whose length depends on
where they are applied (months, years, calendar days across DST) as opposed
to exact elapsed time (Duration).
"""

from __future__ import annotations

from fractions import Fraction
from typing import TYPE_CHECKING

from civiltime._internal.constants import (
    MONTHS_PER_YEAR,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from civiltime.units.timeunit import TimeUnit

if TYPE_CHECKING:
    from civiltime.core.duration import Duration
    from civiltime.core.instant import Instant
    from civiltime.zones.timezone import TimeZone

_COMPONENTS = ("years", "months", "days", "hours", "minutes", "seconds", "nanoseconds")


class Period:
    """A calendar-relative offset with year through nanosecond components.

    Unlike Duration, a Period means "move the calendar and the wall clock",
    so its exact length depends on the anchor and the zone. Adding one month
    to Jan 31 yields the last day of February; adding one day across a
    spring-forward transition elapses 23 hours.

    Components are stored as given, without normalization: Period(months=14)
    stays 14 months. They are applied to an instant in one fixed pass, years
    and months first, then days, then the clock fields (see
    ``civiltime.arithmetic.ops.add_period``).

    Attributes:
        years, months, days, hours, minutes, seconds, nanoseconds: Signed
            integer components.

    Examples:
        >>> p = Period(years=1, months=2)
        >>> p.total_months
        14

        >>> from civiltime import Instant, CivilFields, from_civil
        >>> jan31 = from_civil(CivilFields(2021, 1, 31), "UTC")
        >>> (jan31 + Period(months=1)).to_civil().date_tuple()
        (2021, 2, 28)
    """

    __slots__ = (
        "_years",
        "_months",
        "_days",
        "_hours",
        "_minutes",
        "_seconds",
        "_nanoseconds",
    )

    def __init__(
        self,
        years: int = 0,
        months: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        nanoseconds: int = 0,
        *,
        weeks: int = 0,
    ) -> None:
        """Create a Period from component parts.

        All parameters can be positive, negative, or zero. ``weeks`` is a
        convenience that adds seven days per week to ``days``.

        Raises:
            TypeError: If a component is not an integer.

        Examples:
            >>> Period(months=-3)
            Period(months=-3)

            >>> Period(weeks=2, days=1).days
            15
        """
        values = (years, months, days, hours, minutes, seconds, nanoseconds, weeks)
        for value in values:
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(
                    f"Period components must be integers, got {type(value).__name__}"
                )
        self._years = years
        self._months = months
        self._days = days + weeks * 7
        self._hours = hours
        self._minutes = minutes
        self._seconds = seconds
        self._nanoseconds = nanoseconds

    @classmethod
    def of_years(cls, years: int) -> Period:
        """Create a Period of a given number of years."""
        return cls(years=years)

    @classmethod
    def of_months(cls, months: int) -> Period:
        """Create a Period of a given number of months."""
        return cls(months=months)

    @classmethod
    def of_days(cls, days: int) -> Period:
        """Create a Period of a given number of calendar days."""
        return cls(days=days)

    @classmethod
    def of_hours(cls, hours: int) -> Period:
        """Create a Period of a given number of wall-clock hours."""
        return cls(hours=hours)

    @classmethod
    def zero(cls) -> Period:
        """Create a zero-length period."""
        return cls()

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def days(self) -> int:
        return self._days

    @property
    def hours(self) -> int:
        return self._hours

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def nanoseconds(self) -> int:
        return self._nanoseconds

    @property
    def total_months(self) -> int:
        """Return years * 12 + months.

        Examples:
            >>> Period(years=-1, months=3).total_months
            -9
        """
        return self._years * MONTHS_PER_YEAR + self._months

    @property
    def clock_nanos(self) -> int:
        """Return the hour through nanosecond components as one wall-clock count."""
        return (
            self._hours * NANOS_PER_HOUR
            + self._minutes * NANOS_PER_MINUTE
            + self._seconds * NANOS_PER_SECOND
            + self._nanoseconds
        )

    @property
    def is_zero(self) -> bool:
        """Return True if every component is zero."""
        return not any(self.as_tuple())

    def as_tuple(self) -> tuple[int, int, int, int, int, int, int]:
        """Return (years, months, days, hours, minutes, seconds, nanoseconds)."""
        return (
            self._years,
            self._months,
            self._days,
            self._hours,
            self._minutes,
            self._seconds,
            self._nanoseconds,
        )

    def as_dict(self) -> dict[str, int]:
        """Return the components keyed by name."""
        return dict(zip(_COMPONENTS, self.as_tuple()))

    def normalized(self) -> Period:
        """Fold months into years and clock overflow upward.

        Months become years + months, and nanoseconds, seconds and minutes
        carry into hours. Hours are never folded into days and days never
        into months: those carries are not exact on a DST or month boundary.
        Each group keeps the sign of its total.

        Examples:
            >>> Period(months=14).normalized()
            Period(years=1, months=2)

            >>> Period(minutes=135).normalized()
            Period(hours=2, minutes=15)

            >>> Period(months=-14).normalized()
            Period(years=-1, months=-2)
        """
        years, months = _split_signed(self.total_months, MONTHS_PER_YEAR)
        hours, rest = _split_signed(self.clock_nanos, NANOS_PER_HOUR)
        minutes, rest = _split_signed(rest, NANOS_PER_MINUTE)
        seconds, nanos = _split_signed(rest, NANOS_PER_SECOND)
        return Period(
            years=years,
            months=months,
            days=self._days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            nanoseconds=nanos,
        )

    def to_duration(
        self, anchor: Instant, zone: TimeZone | str | None = None
    ) -> Duration:
        """Measure this Period exactly by applying it at ``anchor``.

        Args:
            anchor: Where the Period is applied.
            zone: Zone whose calendar and clock are used (UTC by default).

        Returns:
            ``(anchor + self) - anchor`` as an exact Duration.

        Examples:
            >>> from civiltime import CivilFields, from_civil
            >>> feb = from_civil(CivilFields(2020, 2, 1), "UTC")
            >>> Period(months=1).to_duration(feb).in_units("days")
            Fraction(29, 1)
        """
        from civiltime.arithmetic.ops import add_period

        return add_period(anchor, self, zone) - anchor

    def in_units(
        self,
        unit: TimeUnit | str,
        anchor: Instant | None = None,
        zone: TimeZone | str | None = None,
    ) -> Fraction:
        """Project this Period onto a caller-chosen unit.

        - MONTH and YEAR: only for Periods made of years and months.
        - Fixed units with an ``anchor``: the exact elapsed length at that
          anchor (DST and month lengths included).
        - Fixed units without an anchor: only for Periods without years and
          months; days count as 24 hours.

        Raises:
            ValueError: When the projection would need information the
                caller did not give.

        Examples:
            >>> Period(years=1, months=6).in_units(TimeUnit.YEAR)
            Fraction(3, 2)
            >>> Period(days=1, hours=12).in_units("hours")
            Fraction(36, 1)
        """
        if isinstance(unit, str):
            unit = TimeUnit.from_name(unit)

        if unit is TimeUnit.MONTH or unit is TimeUnit.YEAR:
            if self._days or self.clock_nanos:
                raise ValueError(
                    f"cannot express {self} in {unit.value}s: it has day or time components"
                )
            per = MONTHS_PER_YEAR if unit is TimeUnit.YEAR else 1
            return Fraction(self.total_months, per)

        if anchor is not None:
            return self.to_duration(anchor, zone).in_units(unit)

        if self.total_months:
            raise ValueError(
                f"cannot express {self} in {unit.value}s without an anchor: "
                "month and year lengths vary"
            )
        nominal = self._days * NANOS_PER_DAY + self.clock_nanos
        return Fraction(nominal, unit.nanos)

    def __add__(self, other: object) -> Period:
        """Add two Periods component by component."""
        if not isinstance(other, Period):
            return NotImplemented
        return Period(*(a + b for a, b in zip(self.as_tuple(), other.as_tuple())))

    def __radd__(self, other: object) -> Period:
        """Support sum() by handling 0 + Period."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return Period(*(a - b for a, b in zip(self.as_tuple(), other.as_tuple())))

    def __neg__(self) -> Period:
        return Period(*(-a for a in self.as_tuple()))

    def __pos__(self) -> Period:
        return self

    def __mul__(self, other: object) -> Period:
        """Multiply every component by an integer scalar."""
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Period(*(a * other for a in self.as_tuple()))

    def __rmul__(self, other: object) -> Period:
        return self.__mul__(other)

    def __eq__(self, other: object) -> bool:
        """Compare component by component.

        Period(months=12) != Period(years=1); compare ``normalized()``
        values for that.
        """
        if not isinstance(other, Period):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self) -> int:
        return hash(("Period",) + self.as_tuple())

    def __bool__(self) -> bool:
        return not self.is_zero

    def __repr__(self) -> str:
        parts = [f"{name}={value}" for name, value in self.as_dict().items() if value]
        return f"Period({', '.join(parts)})"

    def __str__(self) -> str:
        """Return an ISO 8601 duration string, components as stored.

        Examples:
            >>> str(Period(years=1, months=2, days=3, hours=4))
            'P1Y2M3DT4H'
            >>> str(Period())
            'P0D'
        """
        if self.is_zero:
            return "P0D"

        out = "P"
        if self._years:
            out += f"{self._years}Y"
        if self._months:
            out += f"{self._months}M"
        if self._days:
            out += f"{self._days}D"
        if self._hours or self._minutes or self._seconds or self._nanoseconds:
            out += "T"
            if self._hours:
                out += f"{self._hours}H"
            if self._minutes:
                out += f"{self._minutes}M"
            if self._nanoseconds:
                frac = f"{abs(self._nanoseconds):09d}".rstrip("0")
                out += f"{self._seconds}.{frac}S"
            elif self._seconds:
                out += f"{self._seconds}S"
        return out


def _split_signed(total: int, unit: int) -> tuple[int, int]:
    """divmod that truncates toward zero, so both parts share the sign."""
    quotient, remainder = divmod(abs(total), unit)
    if total < 0:
        return (-quotient, -remainder)
    return (quotient, remainder)


__all__ = ["Period"]
