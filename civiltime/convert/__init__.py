"""Conversions between instants and other representations.

    - civil: instants to civil fields in a zone and back (DST-aware)
    - epoch: Unix timestamps and stdlib ``datetime`` interop
"""

from __future__ import annotations

from civiltime.convert.civil import (
    Resolution,
    ResolutionKind,
    from_civil,
    resolve_civil,
    to_civil,
    with_field,
    with_zone,
)
from civiltime.convert.epoch import (
    from_datetime,
    from_unix_millis,
    from_unix_seconds,
    to_datetime,
    to_unix_millis,
    to_unix_seconds,
)

__all__: list[str] = [
    "Resolution",
    "ResolutionKind",
    "from_civil",
    "resolve_civil",
    "to_civil",
    "with_field",
    "with_zone",
    "from_datetime",
    "from_unix_millis",
    "from_unix_seconds",
    "to_datetime",
    "to_unix_millis",
    "to_unix_seconds",
]
