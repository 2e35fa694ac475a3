"""The one canonical English month and weekday table.

Every parse path and the formatter use these functions, so an
abbreviation accepted in one place is accepted everywhere. Abbreviations
are exactly the first three letters of the full name, matched without
regard to case, with an optional trailing period.

This module is not part of the public API.
"""

from __future__ import annotations

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

_FULL_MONTHS = {name.lower(): index for index, name in enumerate(MONTH_NAMES, 1)}
_ABBR_MONTHS = {name[:3].lower(): index for index, name in enumerate(MONTH_NAMES, 1)}
_FULL_WEEKDAYS = {name.lower(): index for index, name in enumerate(WEEKDAY_NAMES)}
_ABBR_WEEKDAYS = {name[:3].lower(): index for index, name in enumerate(WEEKDAY_NAMES)}


def month_from_full_name(text: str) -> int | None:
    """Return 1-12 for a full month name, else None."""
    return _FULL_MONTHS.get(text.strip().lower())


def month_from_abbreviation(text: str) -> int | None:
    """Return 1-12 for a three-letter abbreviation ("Mar", "mar."), else None.

    Examples:
        >>> month_from_abbreviation("SEP.")
        9
        >>> month_from_abbreviation("Sept") is None
        True
    """
    key = text.strip().lower()
    if key.endswith("."):
        key = key[:-1]
    if len(key) != 3:
        return None
    return _ABBR_MONTHS.get(key)


def weekday_from_name(text: str) -> int | None:
    """Return Monday=0..Sunday=6 for a full or three-letter weekday name."""
    key = text.strip().lower().rstrip(".")
    if key in _FULL_WEEKDAYS:
        return _FULL_WEEKDAYS[key]
    return _ABBR_WEEKDAYS.get(key)


def is_weekday_name(text: str) -> bool:
    return weekday_from_name(text) is not None


def month_name(month: int) -> str:
    return MONTH_NAMES[month - 1]


def month_abbreviation(month: int) -> str:
    return MONTH_NAMES[month - 1][:3]


def weekday_name(weekday: int) -> str:
    return WEEKDAY_NAMES[weekday]


def weekday_abbreviation(weekday: int) -> str:
    return WEEKDAY_NAMES[weekday][:3]


__all__ = [
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
    "month_from_full_name",
    "month_from_abbreviation",
    "weekday_from_name",
    "is_weekday_name",
    "month_name",
    "month_abbreviation",
    "weekday_name",
    "weekday_abbreviation",
]
