"""In-memory transition tables.

A TransitionTable describes one zone as an initial offset plus a sorted
list of instants at which the offset changes. It is the lookup used for
custom zones and for deterministic tests that should not depend on the
installed zone database.
"""

from __future__ import annotations

import bisect
from typing import TYPE_CHECKING, Iterable

from civiltime.errors import UnknownZone
from civiltime.zones.lookup import ZoneOffset, check_offset

if TYPE_CHECKING:
    from civiltime.core.instant import Instant


class TransitionTable:
    """A single zone defined by explicit transitions.

    Args:
        zone_id: The id this table answers to.
        initial: Offset in effect before the first transition.
        transitions: ``(instant, offset)`` pairs; the offset applies from
            that instant (inclusive) until the next transition.

    Raises:
        ValueError: If two transitions share an instant.

    Examples:
        >>> from civiltime.core.instant import Instant
        >>> table = TransitionTable(
        ...     "Test/Zone",
        ...     ZoneOffset(-18000, False),
        ...     [(Instant.from_epoch_seconds(1583650800), ZoneOffset(-14400, True))],
        ... )
        >>> table.lookup("Test/Zone", Instant.from_epoch_seconds(1583650800))
        ZoneOffset(offset_seconds=-14400, is_dst=True)
    """

    __slots__ = ("_zone_id", "_initial", "_starts", "_offsets")

    def __init__(
        self,
        zone_id: str,
        initial: ZoneOffset,
        transitions: Iterable[tuple[Instant, ZoneOffset]] = (),
    ) -> None:
        ordered = sorted(transitions, key=lambda item: item[0].epoch_nanos)
        starts = [instant.epoch_nanos for instant, _ in ordered]
        if len(set(starts)) != len(starts):
            raise ValueError(f"duplicate transition instants in zone {zone_id!r}")

        check_offset(initial.offset_seconds, zone_id)
        for _, offset in ordered:
            check_offset(offset.offset_seconds, zone_id)

        self._zone_id = zone_id
        self._initial = initial
        self._starts: list[int] = starts
        self._offsets: list[ZoneOffset] = [offset for _, offset in ordered]

    @property
    def zone_id(self) -> str:
        return self._zone_id

    def transitions(self) -> list[tuple[int, ZoneOffset]]:
        """Return ``(epoch_nanos, offset)`` pairs in order."""
        return list(zip(self._starts, self._offsets))

    def knows(self, zone_id: str) -> bool:
        return zone_id == self._zone_id

    def lookup(self, zone_id: str, instant: Instant) -> ZoneOffset:
        if zone_id != self._zone_id:
            raise UnknownZone(f"unknown zone: {zone_id!r}")
        index = bisect.bisect_right(self._starts, instant.epoch_nanos)
        if index == 0:
            return self._initial
        return self._offsets[index - 1]

    def __repr__(self) -> str:
        return (
            f"TransitionTable({self._zone_id!r}, {self._initial!r}, "
            f"{len(self._starts)} transitions)"
        )


__all__ = ["TransitionTable"]
