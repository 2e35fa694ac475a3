"""Calendar utilities for civiltime.

Exact proleptic Gregorian arithmetic: leap years, month lengths, and the
mapping between (year, month, day) and a day count. Day counts are either
ordinals (ordinal 1 = 0001-01-01) or epoch days (epoch day 0 = 1970-01-01).

This module is not part of the public API.
"""

from __future__ import annotations

from civiltime._internal.constants import (
    DAYS_IN_MONTH,
    MONTHS_PER_YEAR,
    UNIX_EPOCH_ORDINAL,
)

# Days in the 400, 100 and 4 year cycles of the Gregorian calendar
_DAYS_PER_400Y = 146_097
_DAYS_PER_100Y = 36_524
_DAYS_PER_4Y = 1_461


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2020)
        True
        >>> is_leap_year(2019)
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1 and for 0000-12-31 is 0. Floor division
    keeps the formula valid for years before 1.
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal back to (year, month, day).

    Works for any integer ordinal: ``divmod`` floors, so ordinals before
    0001-01-01 land in negative 400-year cycles.

    Examples:
        >>> ordinal_to_ymd(1)
        (1, 1, 1)
        >>> ordinal_to_ymd(0)
        (0, 12, 31)
    """
    n400, n = divmod(ordinal - 1, _DAYS_PER_400Y)
    n100, n = divmod(n, _DAYS_PER_100Y)
    n4, n = divmod(n, _DAYS_PER_4Y)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap cycle: the divisions overshoot by one year
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert a 1-indexed day of year to (month, day)."""
    n = doy - 1
    month = (n + 50) >> 5  # estimate, too large by at most one
    if days_before_month(year, month) > n:
        month -= 1
    return (month, n - days_before_month(year, month) + 1)


def ymd_to_epoch_days(year: int, month: int, day: int) -> int:
    """Convert a date to days since 1970-01-01.

    Examples:
        >>> ymd_to_epoch_days(1970, 1, 1)
        0
        >>> ymd_to_epoch_days(1969, 12, 31)
        -1
    """
    return ymd_to_ordinal(year, month, day) - UNIX_EPOCH_ORDINAL


def epoch_days_to_ymd(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to (year, month, day)."""
    return ordinal_to_ymd(days + UNIX_EPOCH_ORDINAL)


def epoch_days_to_weekday(days: int) -> int:
    """Day of week for an epoch day (Monday=0, Sunday=6).

    1970-01-01 was a Thursday.
    """
    return (days + 3) % 7


def shift_months(year: int, month: int, months: int) -> tuple[int, int]:
    """Move (year, month) by a signed number of months.

    Month overflow carries into the year in either direction.

    Examples:
        >>> shift_months(2020, 12, 1)
        (2021, 1)
        >>> shift_months(2020, 1, -13)
        (2018, 12)
    """
    total = year * MONTHS_PER_YEAR + (month - 1) + months
    new_year, month_index = divmod(total, MONTHS_PER_YEAR)
    return (new_year, month_index + 1)


def clamp_day(year: int, month: int, day: int) -> int:
    """Clamp a day to the last valid day of the month, never rolling over."""
    return min(day, days_in_month(year, month))


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "ymd_to_epoch_days",
    "epoch_days_to_ymd",
    "epoch_days_to_weekday",
    "shift_months",
    "clamp_day",
]
