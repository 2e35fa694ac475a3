"""Formatting and pattern-driven parsing.

Public API:
    format_fields: Render civil fields with a token pattern.
    format_instant: Render an instant as read in a zone.
    parse_with_pattern: Read civil fields back with a token pattern.
    parse_instant_with_pattern: Read an instant, honouring %z and %Z.
    Stamp, stamp: Infer a pattern from an example and reuse it.

Examples:
    >>> from civiltime.format import stamp
    >>> stamp("2020-03-07 14:30").pattern
    '%Y-%m-%d %H:%M'
"""

from __future__ import annotations

from civiltime.format.pattern import (
    compile_pattern,
    format_fields,
    format_instant,
    parse_instant_with_pattern,
    parse_with_pattern,
)
from civiltime.format.stamp import Stamp, stamp

__all__: list[str] = [
    "Stamp",
    "compile_pattern",
    "format_fields",
    "format_instant",
    "parse_instant_with_pattern",
    "parse_with_pattern",
    "stamp",
]
