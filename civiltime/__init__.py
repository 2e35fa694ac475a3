"""civiltime: calendar-aware date and time arithmetic.

civiltime keeps two kinds of offset apart: exact elapsed time (Duration)
and calendar movement (Period). Instants are absolute; zones only decide
how an instant reads on a calendar and wall clock.

Core Types:
    Instant: Absolute moment, integer nanoseconds since the Unix epoch
    CivilFields: Calendar and clock reading with no zone attached
    Duration: Exact elapsed time
    Period: Calendar-relative offset (years, months, days, clock units)
    Interval: Explicit span between two instants
    ZonedInstant: Instant paired with the zone it is read in

Zones:
    TimeZone: Zone id bound to a lookup
    TransitionTable, FixedOffsetLookup, IanaZoneLookup: Offset rules

Conversion and Arithmetic:
    to_civil, from_civil, resolve_civil: Instant <-> civil fields (DST-aware)
    add_period, subtract_period, add_duration, subtract_duration

Parsing and Formatting:
    parse: Flexible parser under a declared field order
    infer_pattern, stamp: Patterns from a worked example
    format_fields, format_instant, parse_with_pattern: Token patterns

Exceptions:
    CivilTimeError: Base exception
    InvalidCivilDate: Impossible civil fields
    AmbiguousDate: Input does not pin down a date
    UnknownZone: Zone id no lookup resolves
    FormatMismatch: Input matches no pattern

Example:
    >>> from civiltime import CivilFields, Duration, Period, ZonedInstant
    >>> anchor = ZonedInstant.of(CivilFields(2020, 3, 7, 12), "America/New_York")
    >>> str(anchor + Period(days=1))
    '2020-03-08T12:00:00-04:00[America/New_York]'
    >>> str(anchor + Duration(days=1))
    '2020-03-08T13:00:00-04:00[America/New_York]'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from civiltime.core.civil import CivilFields
from civiltime.core.duration import Duration
from civiltime.core.instant import Instant
from civiltime.core.interval import Interval
from civiltime.core.period import Period
from civiltime.core.zoned import ZonedInstant

# Units
from civiltime.units.timeunit import TimeUnit

# Zones
from civiltime.zones import (
    FixedOffsetLookup,
    IanaZoneLookup,
    TimeZone,
    TransitionTable,
    ZoneLookup,
    ZoneOffset,
    set_default_lookup,
)

# Clock
from civiltime.clock import Clock, FixedClock, SystemClock

# Conversion and arithmetic
from civiltime.arithmetic import (
    add_duration,
    add_period,
    subtract_duration,
    subtract_period,
)
from civiltime.convert import (
    Resolution,
    ResolutionKind,
    from_civil,
    resolve_civil,
    to_civil,
    with_field,
    with_zone,
)

# Exceptions
from civiltime.errors import (
    AmbiguousDate,
    CivilTimeError,
    FormatMismatch,
    InvalidCivilDate,
    UnknownZone,
)

# Parsing and formatting
from civiltime.format import (
    Stamp,
    format_fields,
    format_instant,
    parse_with_pattern,
    stamp,
)
from civiltime.parse import (
    FieldOrder,
    ParseOptions,
    ParseResult,
    PivotPolicy,
    infer_pattern,
    parse,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "CivilFields",
    "Duration",
    "Instant",
    "Interval",
    "Period",
    "ZonedInstant",
    # Units
    "TimeUnit",
    # Zones
    "FixedOffsetLookup",
    "IanaZoneLookup",
    "TimeZone",
    "TransitionTable",
    "ZoneLookup",
    "ZoneOffset",
    "set_default_lookup",
    # Clock
    "Clock",
    "FixedClock",
    "SystemClock",
    # Conversion and arithmetic
    "Resolution",
    "ResolutionKind",
    "add_duration",
    "add_period",
    "from_civil",
    "resolve_civil",
    "subtract_duration",
    "subtract_period",
    "to_civil",
    "with_field",
    "with_zone",
    # Exceptions
    "AmbiguousDate",
    "CivilTimeError",
    "FormatMismatch",
    "InvalidCivilDate",
    "UnknownZone",
    # Parsing and formatting
    "FieldOrder",
    "ParseOptions",
    "ParseResult",
    "PivotPolicy",
    "Stamp",
    "format_fields",
    "format_instant",
    "infer_pattern",
    "parse",
    "parse_with_pattern",
    "stamp",
]
