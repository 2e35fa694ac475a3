"""Timezone offset lookup interface.

A lookup answers one question: what offset from UTC, and is it daylight
saving time, for this zone at this instant. Offsets are a pure function of
(zone id, instant); lookups hold no per-call state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NamedTuple, Protocol, Sequence, runtime_checkable

from civiltime._internal.constants import MAX_UTC_OFFSET_SECONDS
from civiltime.errors import UnknownZone

if TYPE_CHECKING:
    from civiltime.core.instant import Instant

logger = logging.getLogger(__name__)


class ZoneOffset(NamedTuple):
    """Result of one lookup.

    Attributes:
        offset_seconds: Seconds east of UTC (local = UTC + offset).
        is_dst: True while daylight saving time is in effect.
    """

    offset_seconds: int
    is_dst: bool = False


@runtime_checkable
class ZoneLookup(Protocol):
    """Interface every zone source implements."""

    def knows(self, zone_id: str) -> bool:
        """Return True if ``zone_id`` resolves through this lookup."""
        ...

    def lookup(self, zone_id: str, instant: Instant) -> ZoneOffset:
        """Return the offset in effect for ``zone_id`` at ``instant``.

        Raises:
            UnknownZone: If the zone id is not known to this lookup.
        """
        ...


def check_offset(offset_seconds: int, zone_id: str) -> int:
    """Reject offsets outside +/- 24 hours.

    Raises:
        UnknownZone: If the offset is out of range.
    """
    if abs(offset_seconds) >= MAX_UTC_OFFSET_SECONDS:
        raise UnknownZone(
            f"offset {offset_seconds}s for zone {zone_id!r} is outside +/-24 hours"
        )
    return offset_seconds


class ChainedLookup:
    """Try several lookups in order; the first that knows a zone answers.

    Examples:
        >>> from civiltime.zones.fixed import FixedOffsetLookup
        >>> chain = ChainedLookup([FixedOffsetLookup()])
        >>> chain.knows("+05:30")
        True
    """

    __slots__ = ("_lookups",)

    def __init__(self, lookups: Sequence[ZoneLookup]) -> None:
        self._lookups: tuple[ZoneLookup, ...] = tuple(lookups)

    @property
    def lookups(self) -> tuple[ZoneLookup, ...]:
        return self._lookups

    def _find(self, zone_id: str) -> ZoneLookup | None:
        for lookup in self._lookups:
            if lookup.knows(zone_id):
                return lookup
        return None

    def knows(self, zone_id: str) -> bool:
        return self._find(zone_id) is not None

    def lookup(self, zone_id: str, instant: Instant) -> ZoneOffset:
        source = self._find(zone_id)
        if source is None:
            raise UnknownZone(f"unknown zone: {zone_id!r}")
        return source.lookup(zone_id, instant)

    def __repr__(self) -> str:
        return f"ChainedLookup({list(self._lookups)!r})"


__all__ = [
    "ZoneOffset",
    "ZoneLookup",
    "ChainedLookup",
    "check_offset",
]
