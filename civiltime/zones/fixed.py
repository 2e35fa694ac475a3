"""Fixed-offset zones: "UTC", "Z", "+05:30", "-0800", "UTC+1".

These zones never observe DST. Their ids are parsed, not looked up, so
every well-formed offset id is known.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from civiltime.errors import UnknownZone
from civiltime.zones.lookup import ZoneOffset

if TYPE_CHECKING:
    from civiltime.core.instant import Instant

_OFFSET_PATTERN = re.compile(r"^(?:UTC|GMT)?([+-])(\d{1,2})(?::?(\d{2}))?$", re.ASCII)
_UTC_NAMES = frozenset({"Z", "UTC", "GMT", "ETC/UTC", "ETC/GMT"})

# Largest real-world offsets are -12:00 and +14:00
_MAX_OFFSET_HOURS = 14


def parse_offset_id(zone_id: str) -> int | None:
    """Parse a fixed-offset zone id into seconds east of UTC.

    Returns None when ``zone_id`` is not a fixed-offset id at all, so the
    caller can try other lookups.

    Raises:
        UnknownZone: If the id looks like an offset but is out of range.

    Examples:
        >>> parse_offset_id("+05:30")
        19800
        >>> parse_offset_id("-0800")
        -28800
        >>> parse_offset_id("UTC")
        0
        >>> parse_offset_id("America/New_York") is None
        True
    """
    s = zone_id.strip()
    if s.upper() in _UTC_NAMES:
        return 0

    match = _OFFSET_PATTERN.match(s)
    if not match:
        return None

    sign_str, hours_str, minutes_str = match.groups()
    hours = int(hours_str)
    minutes = int(minutes_str) if minutes_str else 0

    if hours > _MAX_OFFSET_HOURS or (hours == _MAX_OFFSET_HOURS and minutes > 0):
        raise UnknownZone(f"offset hours out of range: {zone_id!r}")
    if minutes > 59:
        raise UnknownZone(f"offset minutes out of range: {zone_id!r}")

    sign = 1 if sign_str == "+" else -1
    return sign * (hours * 3600 + minutes * 60)


def format_offset(offset_seconds: int, colon: bool = True) -> str:
    """Render an offset as ``+HH:MM`` (or ``+HHMM``).

    Examples:
        >>> format_offset(-18000)
        '-05:00'
        >>> format_offset(19800, colon=False)
        '+0530'
    """
    sign = "+" if offset_seconds >= 0 else "-"
    total_minutes = abs(offset_seconds) // 60
    hours, minutes = divmod(total_minutes, 60)
    sep = ":" if colon else ""
    return f"{sign}{hours:02d}{sep}{minutes:02d}"


class FixedOffsetLookup:
    """Lookup for fixed-offset ids. Stateless."""

    __slots__ = ()

    def knows(self, zone_id: str) -> bool:
        try:
            return parse_offset_id(zone_id) is not None
        except UnknownZone:
            return False

    def lookup(self, zone_id: str, instant: Instant) -> ZoneOffset:
        offset = parse_offset_id(zone_id)
        if offset is None:
            raise UnknownZone(f"not a fixed-offset zone: {zone_id!r}")
        return ZoneOffset(offset, False)

    def __repr__(self) -> str:
        return "FixedOffsetLookup()"


__all__ = ["FixedOffsetLookup", "parse_offset_id", "format_offset"]
