"""civiltime exception hierarchy.

All civiltime-specific exceptions inherit from CivilTimeError. The DST
resolution branches (ambiguous and nonexistent local times) are not errors;
they are reported on ``Resolution.kind`` instead.
"""

from __future__ import annotations


class CivilTimeError(Exception):
    """Base exception for all civiltime errors."""

    pass


class InvalidCivilDate(CivilTimeError, ValueError):
    """Civil fields that cannot exist.

    Raised when a field is outside its physical range for the given year.

    Examples:
        - Month value outside 1-12
        - February 29 in a non-leap year
        - Hour value outside 0-23
    """

    pass


class AmbiguousDate(CivilTimeError):
    """Not enough information to read a date.

    Raised instead of guessing.

    Examples:
        - "2020121" (month 1 day 21, or month 12 day 1)
        - A two-digit year with no pivot policy configured
    """

    pass


class UnknownZone(CivilTimeError, LookupError):
    """Zone identifier that no lookup can resolve.

    Examples:
        - "Mars/Olympus_Mons"
        - "+25:00"
    """

    pass


class FormatMismatch(CivilTimeError, ValueError):
    """String matches no candidate pattern.

    Examples:
        - "yesterday" against a numeric template
        - "2020-03-07" against the pattern "%d/%m/%Y"
    """

    pass


__all__ = [
    "CivilTimeError",
    "InvalidCivilDate",
    "AmbiguousDate",
    "UnknownZone",
    "FormatMismatch",
]
