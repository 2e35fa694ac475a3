"""ZonedInstant: an Instant together with the zone it is read in.

The zone only changes how the instant is displayed and which calendar
Period arithmetic uses. Two ZonedInstants with the same instant are the
same moment whatever their zones.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from civiltime.core.civil import CivilFields
from civiltime.core.duration import Duration
from civiltime.core.instant import Instant
from civiltime.core.period import Period
from civiltime.zones.timezone import as_zone

if TYPE_CHECKING:
    from civiltime.clock import Clock
    from civiltime.convert.civil import Resolution
    from civiltime.core.interval import Interval
    from civiltime.zones.lookup import ZoneOffset
    from civiltime.zones.timezone import TimeZone


class ZonedInstant:
    """An Instant read in a specific zone.

    Attributes:
        instant: The absolute moment.
        zone: The zone used for civil fields and Period arithmetic.

    Examples:
        >>> z = ZonedInstant.of(CivilFields(2020, 3, 7, 12), "America/New_York")
        >>> (z + Period(days=1)).fields.hour
        12
        >>> (z + Duration(days=1)).fields.hour
        13
    """

    __slots__ = ("_instant", "_zone")

    def __init__(self, instant: Instant, zone: TimeZone | str | None = None) -> None:
        if not isinstance(instant, Instant):
            raise TypeError(f"instant must be an Instant, got {type(instant).__name__}")
        self._instant = instant
        self._zone = as_zone(zone)

    @classmethod
    def of(cls, fields: CivilFields, zone: TimeZone | str | None = None) -> ZonedInstant:
        """Resolve civil fields in ``zone`` (DST policy of ``from_civil``)."""
        return cls.resolve(fields, zone)[0]

    @classmethod
    def resolve(
        cls, fields: CivilFields, zone: TimeZone | str | None = None
    ) -> tuple[ZonedInstant, Resolution]:
        """Like ``of`` but also return how the fields were resolved."""
        from civiltime.convert.civil import resolve_civil

        tz = as_zone(zone)
        resolution = resolve_civil(fields, tz)
        return cls(resolution.instant, tz), resolution

    @classmethod
    def now(cls, zone: TimeZone | str | None = None, clock: Clock | None = None) -> ZonedInstant:
        """Return the current instant in ``zone``."""
        return cls(Instant.now(clock), zone)

    @property
    def instant(self) -> Instant:
        return self._instant

    @property
    def zone(self) -> TimeZone:
        return self._zone

    @property
    def fields(self) -> CivilFields:
        """Civil fields of the instant in this zone."""
        from civiltime.convert.civil import to_civil

        return to_civil(self._instant, self._zone)

    @property
    def offset(self) -> ZoneOffset:
        """Offset and DST flag in effect at this instant."""
        return self._zone.offset_at(self._instant)

    def with_zone(self, zone: TimeZone | str) -> ZonedInstant:
        """Same instant, read in another zone."""
        return ZonedInstant(self._instant, zone)

    def with_field(self, field: str, value: int) -> ZonedInstant:
        """Rebuild with one civil field replaced (no clamping)."""
        from civiltime.convert.civil import with_field

        return ZonedInstant(with_field(self._instant, field, value, self._zone), self._zone)

    def format(self, pattern: str) -> str:
        """Render with a token pattern (see ``civiltime.format``)."""
        from civiltime.format.pattern import format_instant

        return format_instant(self._instant, self._zone, pattern)

    def until(self, other: ZonedInstant | Instant) -> Interval:
        """Interval from this instant to ``other``."""
        from civiltime.core.interval import Interval

        end = other.instant if isinstance(other, ZonedInstant) else other
        return Interval(self._instant, end)

    def __add__(self, other: object) -> ZonedInstant:
        """Add a Duration exactly or a Period on this zone's calendar."""
        if isinstance(other, Duration):
            return ZonedInstant(self._instant + other, self._zone)
        if isinstance(other, Period):
            from civiltime.arithmetic.ops import add_period

            return ZonedInstant(add_period(self._instant, other, self._zone), self._zone)
        return NotImplemented

    @overload
    def __sub__(self, other: Duration) -> ZonedInstant: ...

    @overload
    def __sub__(self, other: Period) -> ZonedInstant: ...

    @overload
    def __sub__(self, other: ZonedInstant) -> Duration: ...

    def __sub__(self, other: object) -> ZonedInstant | Duration:
        if isinstance(other, ZonedInstant):
            return self._instant - other._instant
        if isinstance(other, Instant):
            return self._instant - other
        if isinstance(other, (Duration, Period)):
            return self + (-other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        """Equal when the instants are equal; the zone is presentation only."""
        if not isinstance(other, ZonedInstant):
            return NotImplemented
        return self._instant == other._instant

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ZonedInstant):
            return NotImplemented
        return self._instant < other._instant

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ZonedInstant):
            return NotImplemented
        return self._instant <= other._instant

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ZonedInstant):
            return NotImplemented
        return self._instant > other._instant

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ZonedInstant):
            return NotImplemented
        return self._instant >= other._instant

    def __hash__(self) -> int:
        return hash(self._instant)

    def __repr__(self) -> str:
        return f"ZonedInstant({self._instant!r}, {self._zone!r})"

    def __str__(self) -> str:
        """ISO 8601 reading with numeric offset and the zone id in brackets."""
        from civiltime.zones.fixed import format_offset

        offset = format_offset(self.offset.offset_seconds)
        return f"{self.fields}{offset}[{self._zone.zone_id}]"


__all__ = ["ZonedInstant"]
