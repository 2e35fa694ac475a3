"""IANA zones through the standard library's ``zoneinfo`` reader.

Zone rules come from the system zone database or, when the host has none,
from the ``tzdata`` distribution. Each zone file is read once per process
and cached; lookups only read the cached rules.
"""

from __future__ import annotations

import functools
import logging
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from civiltime.errors import UnknownZone
from civiltime.zones.lookup import ZoneOffset, check_offset

if TYPE_CHECKING:
    from civiltime.core.instant import Instant

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Instants outside what ``datetime`` can represent are looked up at the
# nearest representable second; zone rules are constant out there.
_MIN_SECONDS = int((datetime(1, 1, 2, tzinfo=timezone.utc) - _EPOCH).total_seconds())
_MAX_SECONDS = int((datetime(9999, 12, 30, tzinfo=timezone.utc) - _EPOCH).total_seconds())


@functools.lru_cache(maxsize=None)
def load_zone(zone_id: str) -> ZoneInfo:
    """Load and cache the rules for one IANA zone.

    Raises:
        UnknownZone: If no zone database has ``zone_id``.
    """
    try:
        zone = ZoneInfo(zone_id)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise UnknownZone(f"unknown zone: {zone_id!r}") from exc
    logger.debug("loaded zone rules for %s", zone_id)
    return zone


class IanaZoneLookup:
    """Lookup backed by the IANA time zone database.

    Examples:
        >>> lookup = IanaZoneLookup()
        >>> lookup.knows("America/New_York")
        True
        >>> lookup.knows("Mars/Olympus_Mons")
        False
    """

    __slots__ = ()

    def knows(self, zone_id: str) -> bool:
        try:
            load_zone(zone_id)
        except UnknownZone:
            return False
        return True

    def lookup(self, zone_id: str, instant: Instant) -> ZoneOffset:
        zone = load_zone(zone_id)
        seconds = min(max(instant.whole_epoch_seconds, _MIN_SECONDS), _MAX_SECONDS)
        local = (_EPOCH + timedelta(seconds=seconds)).astimezone(zone)

        utcoffset = local.utcoffset() or timedelta(0)
        dst = local.dst() or timedelta(0)
        offset = check_offset(int(utcoffset.total_seconds()), zone_id)
        return ZoneOffset(offset, dst != timedelta(0))

    def __repr__(self) -> str:
        return "IanaZoneLookup()"


def clear_cache() -> None:
    """Forget loaded zone rules (for tests that swap zone databases)."""
    load_zone.cache_clear()


__all__ = ["IanaZoneLookup", "load_zone", "clear_cache"]
