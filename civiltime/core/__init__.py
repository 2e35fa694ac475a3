"""Core temporal types.

This module provides the fundamental value types:
    - Instant: Absolute moment, nanoseconds since the Unix epoch
    - CivilFields: Calendar and clock reading, no zone attached
    - Duration: Exact elapsed time
    - Period: Calendar-relative offset (years, months, days, clock units)
    - Interval: Explicit span between two instants
    - ZonedInstant: Instant paired with the zone it is read in
"""

from __future__ import annotations

from civiltime.core.civil import CivilFields
from civiltime.core.duration import Duration
from civiltime.core.instant import Instant
from civiltime.core.interval import Interval
from civiltime.core.period import Period
from civiltime.core.zoned import ZonedInstant

__all__: list[str] = [
    "CivilFields",
    "Duration",
    "Instant",
    "Interval",
    "Period",
    "ZonedInstant",
]
