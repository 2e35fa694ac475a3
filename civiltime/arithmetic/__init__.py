"""Arithmetic on instants.

Functions:
    add_duration, subtract_duration: Exact elapsed-time offsets.
    add_period, subtract_period: Calendar-relative offsets in a zone.
    apply_period: add_period that also reports DST resolution.
    shift_fields: The zone-free calendar step of Period arithmetic.
"""

from __future__ import annotations

from civiltime.arithmetic.ops import (
    add_duration,
    add_period,
    apply_period,
    shift_fields,
    subtract_duration,
    subtract_period,
)

__all__: list[str] = [
    "add_duration",
    "add_period",
    "apply_period",
    "shift_fields",
    "subtract_duration",
    "subtract_period",
]
