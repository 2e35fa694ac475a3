"""Validation utilities for civiltime.

Range checks for civil fields. Every failure is an InvalidCivilDate that
names the offending field and value.

This module is not part of the public API.
"""

from __future__ import annotations

from civiltime._internal.calendar import days_in_month
from civiltime._internal.constants import MAX_YEAR, MIN_YEAR, NANOS_PER_SECOND
from civiltime.errors import InvalidCivilDate


def validate_range(name: str, value: int, min_val: int, max_val: int) -> None:
    """Validate that ``min_val <= value <= max_val``.

    Raises:
        InvalidCivilDate: If value is out of range.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidCivilDate(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    if value < min_val or value > max_val:
        raise InvalidCivilDate(
            f"{name} must be between {min_val} and {max_val}, got {value}"
        )


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a valid Gregorian date.

    Raises:
        InvalidCivilDate: If the date is impossible.

    Examples:
        >>> validate_date(2020, 2, 29)
        >>> validate_date(2021, 2, 29)
        Traceback (most recent call last):
        ...
        civiltime.errors.InvalidCivilDate: day must be between 1 and 28 for 2021-02, got 29
    """
    validate_range("year", year, MIN_YEAR, MAX_YEAR)
    validate_range("month", month, 1, 12)

    max_day = days_in_month(year, month)
    if not isinstance(day, int) or day < 1 or day > max_day:
        raise InvalidCivilDate(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_time(hour: int, minute: int, second: int, nanosecond: int) -> None:
    """Validate clock fields. Leap seconds (second=60) are rejected."""
    validate_range("hour", hour, 0, 23)
    validate_range("minute", minute, 0, 59)
    validate_range("second", second, 0, 59)
    validate_range("nanosecond", nanosecond, 0, NANOS_PER_SECOND - 1)


__all__ = [
    "validate_range",
    "validate_date",
    "validate_time",
]
