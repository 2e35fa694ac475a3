"""Conversions between Instants and epoch timestamps or stdlib datetimes.

Functions:
    to_unix_seconds: Instant to whole Unix seconds (floored).
    from_unix_seconds: Unix seconds to Instant.
    to_unix_millis: Instant to Unix milliseconds (floored).
    from_unix_millis: Unix milliseconds to Instant.
    from_datetime: Aware ``datetime.datetime`` to Instant.
    to_datetime: Instant to an aware ``datetime.datetime`` at a fixed offset.

The Unix epoch is 1970-01-01 00:00:00 UTC.

Examples:
    >>> to_unix_seconds(from_unix_seconds(1583650800))
    1583650800
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from civiltime._internal.constants import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
)
from civiltime.core.instant import Instant
from civiltime.zones.timezone import as_zone

if TYPE_CHECKING:
    from civiltime.zones.timezone import TimeZone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_unix_seconds(instant: Instant) -> int:
    """Return whole seconds since the epoch, floored."""
    return instant.whole_epoch_seconds


def from_unix_seconds(seconds: int) -> Instant:
    """Create an Instant from whole Unix seconds."""
    return Instant(seconds * NANOS_PER_SECOND)


def to_unix_millis(instant: Instant) -> int:
    """Return whole milliseconds since the epoch, floored."""
    return instant.epoch_nanos // NANOS_PER_MILLISECOND


def from_unix_millis(millis: int) -> Instant:
    """Create an Instant from Unix milliseconds."""
    return Instant.from_epoch_millis(millis)


def from_datetime(dt: datetime) -> Instant:
    """Convert an aware stdlib datetime to an Instant.

    Raises:
        ValueError: If ``dt`` is naive; a naive datetime names no instant.

    Examples:
        >>> from_datetime(datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc))
        Instant(nanos=1000000000)
    """
    if dt.tzinfo is None or dt.utcoffset() is None:
        raise ValueError(f"cannot convert naive datetime {dt!r} to an Instant")
    delta = dt - _EPOCH
    return Instant(
        (delta.days * 86_400 + delta.seconds) * NANOS_PER_SECOND
        + delta.microseconds * NANOS_PER_MICROSECOND
    )


def to_datetime(instant: Instant, zone: TimeZone | str | None = None) -> datetime:
    """Convert to an aware stdlib datetime carrying the zone's offset at that instant.

    Sub-microsecond precision is truncated.

    Examples:
        >>> to_datetime(Instant(0), "+05:30").isoformat()
        '1970-01-01T05:30:00+05:30'
    """
    tz = as_zone(zone)
    offset = tz.offset_at(instant).offset_seconds
    micros = instant.epoch_nanos // NANOS_PER_MICROSECOND
    utc = _EPOCH + timedelta(microseconds=micros)
    return utc.astimezone(timezone(timedelta(seconds=offset)))


__all__ = [
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_millis",
    "from_unix_millis",
    "from_datetime",
    "to_datetime",
]
