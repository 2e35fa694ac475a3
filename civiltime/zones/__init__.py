"""Timezone offset lookup.

Zones are external rule tables behind one interface,
``lookup(zone_id, instant) -> ZoneOffset``:
    - FixedOffsetLookup: "UTC", "+05:30", "-0800"
    - IanaZoneLookup: IANA ids through ``zoneinfo`` and ``tzdata``
    - TransitionTable: explicit transitions for custom or test zones
    - ChainedLookup: first lookup that knows an id answers

TimeZone binds an id to a lookup; ``default_lookup()`` is the
process-wide chain of fixed offsets then IANA zones.
"""

from __future__ import annotations

from civiltime.zones.fixed import FixedOffsetLookup, format_offset, parse_offset_id
from civiltime.zones.iana import IanaZoneLookup
from civiltime.zones.lookup import ChainedLookup, ZoneLookup, ZoneOffset
from civiltime.zones.table import TransitionTable
from civiltime.zones.timezone import (
    TimeZone,
    as_zone,
    default_lookup,
    set_default_lookup,
)

__all__: list[str] = [
    "ChainedLookup",
    "FixedOffsetLookup",
    "IanaZoneLookup",
    "TimeZone",
    "TransitionTable",
    "ZoneLookup",
    "ZoneOffset",
    "as_zone",
    "default_lookup",
    "format_offset",
    "parse_offset_id",
    "set_default_lookup",
]
