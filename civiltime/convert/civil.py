"""Calendar converter: instants to civil fields and back.

Reading an instant in a zone is always well defined. Going the other way
is not: around a DST transition a wall-clock reading can occur twice
(fall back) or never (spring forward). Both cases are resolved by one
fixed policy:

    - Ambiguous reading: the EARLIER of the two instants.
    - Nonexistent reading: the NEXT VALID INSTANT after the gap, i.e. the
      transition instant itself. 02:30 in a 02:00 -> 03:00 gap resolves to
      03:00 under the new offset.

``resolve_civil`` reports which branch was taken on ``Resolution.kind``.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from civiltime._internal.constants import NANOS_PER_SECOND, TRANSITION_PROBE_SECONDS
from civiltime.core.civil import CivilFields
from civiltime.core.instant import Instant
from civiltime.errors import CivilTimeError
from civiltime.zones.lookup import ZoneOffset
from civiltime.zones.timezone import as_zone

if TYPE_CHECKING:
    from civiltime.zones.timezone import TimeZone

logger = logging.getLogger(__name__)

_PROBE_NANOS = TRANSITION_PROBE_SECONDS * NANOS_PER_SECOND


class ResolutionKind(enum.Enum):
    """Which branch resolved civil fields to an instant."""

    EXACT = "exact"
    AMBIGUOUS = "ambiguous"
    NONEXISTENT = "nonexistent"


@dataclass(frozen=True)
class Resolution:
    """Tagged result of resolving civil fields in a zone.

    Attributes:
        instant: The resolved instant.
        offset: Offset in effect at ``instant``.
        kind: EXACT, AMBIGUOUS (earlier instant chosen) or NONEXISTENT
            (moved to the end of the gap).
        requested: The civil fields that were resolved.
        alternative: For AMBIGUOUS, the later instant that was not chosen.
    """

    instant: Instant
    offset: ZoneOffset
    kind: ResolutionKind
    requested: CivilFields
    alternative: Instant | None = None

    @property
    def is_ambiguous(self) -> bool:
        return self.kind is ResolutionKind.AMBIGUOUS

    @property
    def is_nonexistent(self) -> bool:
        return self.kind is ResolutionKind.NONEXISTENT


def to_civil(instant: Instant, zone: TimeZone | str | None = None) -> CivilFields:
    """Read ``instant`` as civil fields in ``zone`` (UTC by default).

    Raises:
        UnknownZone: If ``zone`` is an id that does not resolve.

    Examples:
        >>> to_civil(Instant.from_epoch_seconds(1583650800), "America/New_York")
        CivilFields(year=2020, month=3, day=8, hour=3, minute=0, second=0, nanosecond=0)
    """
    tz = as_zone(zone)
    offset = tz.offset_at(instant)
    return CivilFields.from_wall_nanos(
        instant.epoch_nanos + offset.offset_seconds * NANOS_PER_SECOND
    )


def with_zone(instant: Instant, target_zone: TimeZone | str) -> CivilFields:
    """Re-express ``instant`` in ``target_zone``.

    The instant itself never changes; only its civil reading does.
    """
    return to_civil(instant, target_zone)


def resolve_civil(fields: CivilFields, zone: TimeZone | str | None = None) -> Resolution:
    """Map civil fields in ``zone`` to an instant, tagging DST branches.

    Candidate offsets are those in effect one day either side of the wall
    reading. A candidate is valid when the instant it produces really has
    that offset. Two valid candidates mean a repeated reading, none means
    a skipped one.

    Raises:
        UnknownZone: If ``zone`` is an id that does not resolve.
        CivilTimeError: If the zone changes offset more than once around
            the reading, which no real zone does.

    Examples:
        >>> r = resolve_civil(CivilFields(2020, 11, 1, 1, 30), "America/New_York")
        >>> r.kind
        <ResolutionKind.AMBIGUOUS: 'ambiguous'>
        >>> r.offset.offset_seconds
        -14400
    """
    tz = as_zone(zone)
    wall = fields.wall_nanos

    before = tz.offset_at(Instant(wall - _PROBE_NANOS))
    after = tz.offset_at(Instant(wall + _PROBE_NANOS))

    valid: list[tuple[Instant, ZoneOffset]] = []
    for seconds in sorted({before.offset_seconds, after.offset_seconds}):
        candidate = Instant(wall - seconds * NANOS_PER_SECOND)
        actual = tz.offset_at(candidate)
        if actual.offset_seconds == seconds:
            valid.append((candidate, actual))
    valid.sort(key=lambda item: item[0].epoch_nanos)

    if len(valid) == 1:
        instant, offset = valid[0]
        return Resolution(instant, offset, ResolutionKind.EXACT, fields)

    if len(valid) == 2:
        (instant, offset), (later, _) = valid
        logger.debug(
            "%s is repeated in %s; using the earlier instant %s", fields, tz, instant
        )
        return Resolution(instant, offset, ResolutionKind.AMBIGUOUS, fields, later)

    if after.offset_seconds <= before.offset_seconds:
        raise CivilTimeError(
            f"cannot resolve {fields} in {tz}: offset changes more than once nearby"
        )

    instant = _find_transition(tz, wall, before, after)
    logger.debug(
        "%s is skipped in %s; moving to the end of the gap at %s", fields, tz, instant
    )
    return Resolution(instant, tz.offset_at(instant), ResolutionKind.NONEXISTENT, fields)


def _find_transition(
    tz: TimeZone, wall: int, before: ZoneOffset, after: ZoneOffset
) -> Instant:
    """Bisect for the first instant that carries the post-gap offset.

    Reading ``wall`` under the old offset lands after the transition and
    under the new offset lands before it, so the transition lies between.
    """
    target = after.offset_seconds
    lo = wall - after.offset_seconds * NANOS_PER_SECOND
    hi = wall - before.offset_seconds * NANOS_PER_SECOND
    if tz.offset_at(Instant(hi)).offset_seconds != target:
        hi = wall + _PROBE_NANOS

    while hi - lo > 1:
        mid = (lo + hi) // 2
        if tz.offset_at(Instant(mid)).offset_seconds == target:
            hi = mid
        else:
            lo = mid
    return Instant(hi)


def from_civil(fields: CivilFields, zone: TimeZone | str | None = None) -> Instant:
    """Map civil fields in ``zone`` to an instant.

    Ambiguous readings resolve to the earlier instant, nonexistent readings
    to the end of the gap. Use ``resolve_civil`` to see which applied.

    Examples:
        >>> from_civil(CivilFields(1970, 1, 1), "UTC")
        Instant(nanos=0)
    """
    return resolve_civil(fields, zone).instant


def with_field(
    instant: Instant,
    field: str,
    value: int,
    zone: TimeZone | str | None = None,
) -> Instant:
    """Rebuild ``instant`` with one civil field replaced.

    The instant is read in ``zone``, the field is replaced, and the result
    is resolved back. Nothing is clamped: replacing the month of Jan 31
    with 2 raises.

    Raises:
        TypeError: If ``field`` is not a civil field name.
        InvalidCivilDate: If the replaced fields are impossible.

    Examples:
        >>> start = from_civil(CivilFields(2020, 1, 15, 12), "UTC")
        >>> to_civil(with_field(start, "month", 6)).date_tuple()
        (2020, 6, 15)
    """
    tz = as_zone(zone)
    fields = to_civil(instant, tz).replace(**{field: value})
    return from_civil(fields, tz)


__all__ = [
    "Resolution",
    "ResolutionKind",
    "from_civil",
    "resolve_civil",
    "to_civil",
    "with_field",
    "with_zone",
]
