"""Small conversions shared by the parser and the formatter.

This module is not part of the public API.
"""

from __future__ import annotations

from civiltime.errors import InvalidCivilDate


def to_24_hour(hour: int, marker: str) -> int:
    """Convert a 12-hour reading; ``marker`` is am or pm in any case or dotting.

    Raises:
        InvalidCivilDate: If ``hour`` is not in 1..12.

    Examples:
        >>> to_24_hour(12, "am"), to_24_hour(12, "PM"), to_24_hour(3, "p.m.")
        (0, 12, 15)
    """
    if not 1 <= hour <= 12:
        raise InvalidCivilDate(f"12-hour clock reading must be in 1..12, got {hour}")
    is_pm = marker.strip().lower().startswith("p")
    return hour % 12 + (12 if is_pm else 0)


def to_12_hour(hour: int) -> tuple[int, bool]:
    """Return (1..12, is_pm) for a 24-hour reading."""
    return (hour % 12 or 12, hour >= 12)


def fraction_to_nanos(fraction: str) -> int:
    """Scale the digits after the decimal point to nanoseconds.

    Digits beyond the ninth are dropped.

    Examples:
        >>> fraction_to_nanos("25")
        250000000
    """
    if not fraction:
        return 0
    return int(fraction.ljust(9, "0")[:9])


def nanos_to_fraction(nanosecond: int, digits: int) -> str:
    """Render the first ``digits`` decimal places of a second, truncating."""
    return f"{nanosecond:09d}"[:digits]


__all__ = ["fraction_to_nanos", "nanos_to_fraction", "to_12_hour", "to_24_hour"]
