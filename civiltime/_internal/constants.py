"""Internal constants for civiltime.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

MONTHS_PER_YEAR: int = 12

# Year limits for civil fields
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Proleptic Gregorian ordinal of 1970-01-01 (ordinal 1 = 0001-01-01)
UNIX_EPOCH_ORDINAL: int = 719_163

# Offsets beyond +/- 24 hours are rejected by every lookup
MAX_UTC_OFFSET_SECONDS: int = 24 * SECONDS_PER_HOUR

# How far either side of a wall time to look for competing offsets
TRANSITION_PROBE_SECONDS: int = SECONDS_PER_DAY


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MONTHS_PER_YEAR",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "UNIX_EPOCH_ORDINAL",
    "MAX_UTC_OFFSET_SECONDS",
    "TRANSITION_PROBE_SECONDS",
]
