"""TimeZone: a zone identifier bound to the lookup that resolves it.

The process-wide default lookup is built once, on first use, and is
read-only afterwards: fixed-offset ids first, then the IANA database.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, ClassVar

from civiltime.errors import UnknownZone
from civiltime.zones.fixed import FixedOffsetLookup
from civiltime.zones.iana import IanaZoneLookup
from civiltime.zones.lookup import ChainedLookup, ZoneLookup, ZoneOffset

if TYPE_CHECKING:
    from civiltime.core.instant import Instant

logger = logging.getLogger(__name__)

_default_lookup: ZoneLookup | None = None
_default_lock = threading.Lock()


def default_lookup() -> ZoneLookup:
    """Return the process-wide lookup, building it on first call."""
    global _default_lookup
    if _default_lookup is None:
        with _default_lock:
            if _default_lookup is None:
                _default_lookup = ChainedLookup([FixedOffsetLookup(), IanaZoneLookup()])
                logger.debug("initialized default zone lookup: %r", _default_lookup)
    return _default_lookup


def set_default_lookup(lookup: ZoneLookup | None) -> None:
    """Replace the process-wide lookup.

    Call before the first conversion; passing None restores the built-in
    chain on next use. TimeZone objects already created keep the lookup
    they were bound to.
    """
    global _default_lookup
    with _default_lock:
        _default_lookup = lookup
    TimeZone._utc_instance = None


class TimeZone:
    """A zone id resolved through a ZoneLookup.

    The id is checked when the TimeZone is created, so an unknown id fails
    early with UnknownZone rather than on first use.

    Attributes:
        zone_id: The identifier, e.g. "America/New_York" or "+05:30".
        lookup: The lookup that resolves it.

    Examples:
        >>> TimeZone.utc().zone_id
        'UTC'

        >>> from civiltime.core.instant import Instant
        >>> TimeZone("+05:30").offset_at(Instant(0)).offset_seconds
        19800

        >>> TimeZone("Mars/Olympus_Mons")
        Traceback (most recent call last):
        ...
        civiltime.errors.UnknownZone: unknown zone: 'Mars/Olympus_Mons'
    """

    __slots__ = ("_zone_id", "_lookup")

    # UTC singleton instance (lazily initialized)
    _utc_instance: ClassVar[TimeZone | None] = None

    def __init__(self, zone_id: str, lookup: ZoneLookup | None = None) -> None:
        """Bind ``zone_id`` to ``lookup`` (the process default if None).

        Raises:
            UnknownZone: If the lookup cannot resolve ``zone_id``.
        """
        if not isinstance(zone_id, str):
            raise UnknownZone(f"zone id must be a string, got {type(zone_id).__name__}")
        lookup = lookup if lookup is not None else default_lookup()
        if not lookup.knows(zone_id):
            raise UnknownZone(f"unknown zone: {zone_id!r}")
        self._zone_id = zone_id
        self._lookup = lookup

    @classmethod
    def utc(cls) -> TimeZone:
        """Return the UTC zone. All calls return the same instance."""
        if cls._utc_instance is None:
            cls._utc_instance = cls("UTC")
        return cls._utc_instance

    @property
    def zone_id(self) -> str:
        return self._zone_id

    @property
    def lookup(self) -> ZoneLookup:
        return self._lookup

    def offset_at(self, instant: Instant) -> ZoneOffset:
        """Return the offset and DST flag in effect at ``instant``."""
        return self._lookup.lookup(self._zone_id, instant)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeZone):
            return NotImplemented
        return self._zone_id == other._zone_id and self._lookup is other._lookup

    def __hash__(self) -> int:
        return hash(("TimeZone", self._zone_id))

    def __repr__(self) -> str:
        return f"TimeZone({self._zone_id!r})"

    def __str__(self) -> str:
        return self._zone_id


def as_zone(zone: TimeZone | str | None) -> TimeZone:
    """Coerce a TimeZone, a zone id, or None (UTC) to a TimeZone.

    Raises:
        UnknownZone: If a string id does not resolve.
    """
    if zone is None:
        return TimeZone.utc()
    if isinstance(zone, TimeZone):
        return zone
    return TimeZone(zone)


__all__ = [
    "TimeZone",
    "as_zone",
    "default_lookup",
    "set_default_lookup",
]
