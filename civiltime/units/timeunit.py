"""TimeUnit enumeration for standard time units.

This module provides the TimeUnit enum used when projecting a Duration or
Period onto a caller-chosen unit.
"""

from __future__ import annotations

from enum import Enum

from civiltime._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)


class TimeUnit(Enum):
    """Standard time units for temporal operations.

    Fixed units know their exact length in nanoseconds. MONTH and YEAR do
    not: their length depends on where on the calendar they are applied, so
    ``nanos`` is None for them.

    Note:
        DAY here is exactly 24 hours. A calendar day across a DST transition
        is a Period concern, not a unit conversion.

    Examples:
        >>> TimeUnit.HOUR.nanos
        3600000000000

        >>> TimeUnit.MONTH.is_calendar
        True
    """

    NANOSECOND = "nanosecond"
    MICROSECOND = "microsecond"
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def nanos(self) -> int | None:
        """Length of one unit in nanoseconds, or None for MONTH and YEAR."""
        return _NANOS[self]

    @property
    def is_calendar(self) -> bool:
        """True for units whose length varies with the calendar."""
        return _NANOS[self] is None

    @classmethod
    def from_name(cls, name: str) -> TimeUnit:
        """Look up a unit by name, accepting plurals ("hours", "Days").

        Raises:
            ValueError: If the name is not a known unit.
        """
        key = name.strip().lower()
        if key.endswith("s"):
            key = key[:-1]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"unknown time unit: {name!r}") from None


_NANOS: dict[TimeUnit, int | None] = {
    TimeUnit.NANOSECOND: 1,
    TimeUnit.MICROSECOND: NANOS_PER_MICROSECOND,
    TimeUnit.MILLISECOND: NANOS_PER_MILLISECOND,
    TimeUnit.SECOND: NANOS_PER_SECOND,
    TimeUnit.MINUTE: NANOS_PER_MINUTE,
    TimeUnit.HOUR: NANOS_PER_HOUR,
    TimeUnit.DAY: NANOS_PER_DAY,
    TimeUnit.WEEK: 7 * NANOS_PER_DAY,
    TimeUnit.MONTH: None,  # Variable length
    TimeUnit.YEAR: None,  # Variable length (leap years)
}


__all__ = ["TimeUnit"]
