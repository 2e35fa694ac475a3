"""Unit types for civiltime.

    - TimeUnit: Standard time units (SECOND, HOUR, DAY, MONTH, etc.)
"""

from __future__ import annotations

from civiltime.units.timeunit import TimeUnit

__all__: list[str] = [
    "TimeUnit",
]
