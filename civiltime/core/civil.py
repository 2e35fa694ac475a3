"""CivilFields: the calendar and clock reading of an instant in some zone.

CivilFields carries no zone and no offset. It is what a wall calendar and
a wall clock show, validated against the proleptic Gregorian calendar.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from civiltime._internal.calendar import (
    epoch_days_to_weekday,
    epoch_days_to_ymd,
    days_before_month,
    ymd_to_epoch_days,
)
from civiltime._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from civiltime._internal.validation import validate_date, validate_time

#: Names accepted by ``CivilFields.replace`` and ``with_field``.
FIELD_NAMES: tuple[str, ...] = (
    "year",
    "month",
    "day",
    "hour",
    "minute",
    "second",
    "nanosecond",
)


@dataclass(frozen=True, order=True)
class CivilFields:
    """Year, month, day, hour, minute, second and nanosecond.

    Fields are validated on construction: ``day`` never exceeds the length
    of that month in that year, and clock fields stay in their ranges.
    Ordering compares the wall-clock reading field by field, which is
    chronological for fields taken from the same zone and offset.

    Attributes:
        year: Astronomical year (0 is 1 BCE).
        month: 1-12.
        day: 1 to the month's length.
        hour: 0-23.
        minute: 0-59.
        second: 0-59.
        nanosecond: 0-999,999,999.

    Raises:
        InvalidCivilDate: If any field is out of range.

    Examples:
        >>> CivilFields(2020, 2, 29).day
        29
        >>> CivilFields(2021, 2, 29)
        Traceback (most recent call last):
        ...
        civiltime.errors.InvalidCivilDate: day must be between 1 and 28 for 2021-02, got 29
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0

    def __post_init__(self) -> None:
        validate_date(self.year, self.month, self.day)
        validate_time(self.hour, self.minute, self.second, self.nanosecond)

    @classmethod
    def from_wall_nanos(cls, wall_nanos: int) -> CivilFields:
        """Decompose a wall-clock nanosecond count (epoch-relative, no zone).

        Examples:
            >>> CivilFields.from_wall_nanos(0)
            CivilFields(year=1970, month=1, day=1, hour=0, minute=0, second=0, nanosecond=0)
        """
        days, rest = divmod(wall_nanos, NANOS_PER_DAY)
        year, month, day = epoch_days_to_ymd(days)
        hour, rest = divmod(rest, NANOS_PER_HOUR)
        minute, rest = divmod(rest, NANOS_PER_MINUTE)
        second, nanosecond = divmod(rest, NANOS_PER_SECOND)
        return cls(year, month, day, hour, minute, second, nanosecond)

    @property
    def epoch_days(self) -> int:
        """Days from 1970-01-01 to this date."""
        return ymd_to_epoch_days(self.year, self.month, self.day)

    @property
    def nanos_of_day(self) -> int:
        """Nanoseconds elapsed on the wall clock since midnight."""
        return (
            self.hour * NANOS_PER_HOUR
            + self.minute * NANOS_PER_MINUTE
            + self.second * NANOS_PER_SECOND
            + self.nanosecond
        )

    @property
    def wall_nanos(self) -> int:
        """These fields read as if they were UTC, in nanoseconds since the epoch.

        Two CivilFields subtract on the wall clock through this value, so a
        skipped or repeated DST hour does not enter the difference.
        """
        return self.epoch_days * NANOS_PER_DAY + self.nanos_of_day

    def date_tuple(self) -> tuple[int, int, int]:
        """Return (year, month, day)."""
        return (self.year, self.month, self.day)

    def time_tuple(self) -> tuple[int, int, int, int]:
        """Return (hour, minute, second, nanosecond)."""
        return (self.hour, self.minute, self.second, self.nanosecond)

    def weekday(self) -> int:
        """Day of week, Monday=0 through Sunday=6."""
        return epoch_days_to_weekday(self.epoch_days)

    def day_of_year(self) -> int:
        """1-indexed day within the year."""
        return days_before_month(self.year, self.month) + self.day

    def replace(self, **changes: int) -> CivilFields:
        """Return a copy with some fields replaced.

        The result is validated like any other CivilFields; no clamping.

        Raises:
            TypeError: For a name that is not a civil field.
            InvalidCivilDate: If the replacement is impossible.

        Examples:
            >>> CivilFields(2020, 1, 31).replace(month=3)
            CivilFields(year=2020, month=3, day=31, hour=0, minute=0, second=0, nanosecond=0)
        """
        unknown = set(changes) - set(FIELD_NAMES)
        if unknown:
            raise TypeError(f"unknown civil field(s): {', '.join(sorted(unknown))}")
        return dataclasses.replace(self, **changes)

    def __str__(self) -> str:
        """ISO 8601 style ``YYYY-MM-DDTHH:MM:SS[.fffffffff]`` without offset."""
        year = f"{self.year:04d}" if self.year >= 0 else f"{self.year:05d}"
        out = (
            f"{year}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )
        if self.nanosecond:
            out += "." + f"{self.nanosecond:09d}".rstrip("0")
        return out


__all__ = ["CivilFields", "FIELD_NAMES"]
