"""Period and Duration arithmetic on instants.

Duration arithmetic is integer addition on the instant's nanosecond count.
Period arithmetic goes through the calendar of a zone:

    1. Read the instant as civil fields in the zone.
    2. Apply years and months as one month count, carrying month overflow
       into the year, then clamp the day to the target month's length
       (Jan 31 + 1 month is the last day of February, never March 1st).
    3. Apply days on the calendar, then hours, minutes, seconds and
       nanoseconds on the wall clock, carrying overflow into days.
    4. Resolve the new fields back to an instant; a DST transition on the
       way shifts the result by the transition offset.

The order of step 2 and 3 is fixed. A multi-field Period is one pass, not a
chain of single-unit additions, so Feb 29 + (1 year, 1 month) is Mar 29.

Examples:
    2021-01-31 + Period(months=1) -> 2021-02-28
    2020-01-31 + Period(months=1) -> 2020-02-29
    2020-02-29 + Period(years=1)  -> 2021-02-28
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from civiltime._internal.calendar import clamp_day, shift_months, ymd_to_epoch_days
from civiltime._internal.constants import NANOS_PER_DAY
from civiltime.convert.civil import Resolution, resolve_civil, to_civil
from civiltime.core.civil import CivilFields
from civiltime.core.duration import Duration
from civiltime.core.instant import Instant
from civiltime.core.period import Period
from civiltime.zones.timezone import as_zone

if TYPE_CHECKING:
    from civiltime.core.zoned import ZonedInstant
    from civiltime.zones.timezone import TimeZone

InstantLike = Union[Instant, "ZonedInstant"]


def add_duration(instant: Instant, duration: Duration) -> Instant:
    """Add an exact Duration. Always defined; commutative and associative."""
    return Instant(instant.epoch_nanos + duration.nanoseconds)


def subtract_duration(instant: Instant, duration: Duration) -> Instant:
    """Subtract an exact Duration."""
    return Instant(instant.epoch_nanos - duration.nanoseconds)


def shift_fields(fields: CivilFields, period: Period) -> CivilFields:
    """Apply a Period to civil fields in the canonical order, with clamping.

    This is steps 2 and 3 of Period arithmetic; no zone is involved.

    Raises:
        InvalidCivilDate: If the result leaves the supported year range.

    Examples:
        >>> shift_fields(CivilFields(2020, 1, 31), Period(months=1))
        CivilFields(year=2020, month=2, day=29, hour=0, minute=0, second=0, nanosecond=0)

        >>> shift_fields(CivilFields(2020, 3, 7, 23, 30), Period(hours=8, minutes=15)).time_tuple()
        (7, 45, 0, 0)
    """
    year, month = shift_months(fields.year, fields.month, period.total_months)
    day = clamp_day(year, month, fields.day)

    days = ymd_to_epoch_days(year, month, day) + period.days
    wall = days * NANOS_PER_DAY + fields.nanos_of_day + period.clock_nanos
    return CivilFields.from_wall_nanos(wall)


def _split_zone(
    instant: InstantLike, zone: TimeZone | str | None
) -> tuple[Instant, TimeZone]:
    """Pick the zone for Period arithmetic: explicit, else the instant's own, else UTC."""
    from civiltime.core.zoned import ZonedInstant

    if isinstance(instant, ZonedInstant):
        return instant.instant, as_zone(zone if zone is not None else instant.zone)
    return instant, as_zone(zone)


def apply_period(
    instant: InstantLike,
    period: Period,
    zone: TimeZone | str | None = None,
) -> Resolution:
    """Add a Period and report how the result was resolved.

    Same as ``add_period`` but returns the Resolution, so callers can see
    when the shifted wall time fell into a DST gap or overlap.
    """
    base, tz = _split_zone(instant, zone)
    shifted = shift_fields(to_civil(base, tz), period)
    return resolve_civil(shifted, tz)


def add_period(
    instant: InstantLike,
    period: Period,
    zone: TimeZone | str | None = None,
) -> Instant:
    """Add a calendar-relative Period in a zone.

    Args:
        instant: An Instant, or a ZonedInstant whose zone is the default.
        period: The Period to apply.
        zone: Zone whose calendar is used. Defaults to the ZonedInstant's
            zone, else UTC.

    Returns:
        The resulting Instant.

    Examples:
        >>> from civiltime.convert.civil import from_civil
        >>> jan31 = from_civil(CivilFields(2021, 1, 31))
        >>> to_civil(add_period(jan31, Period(months=1))).date_tuple()
        (2021, 2, 28)
    """
    return apply_period(instant, period, zone).instant


def subtract_period(
    instant: InstantLike,
    period: Period,
    zone: TimeZone | str | None = None,
) -> Instant:
    """Subtract a Period: add its negation in one pass."""
    return add_period(instant, -period, zone)


__all__ = [
    "add_duration",
    "subtract_duration",
    "shift_fields",
    "apply_period",
    "add_period",
    "subtract_period",
]
