"""Internal utilities for civiltime.

This module contains private implementation details:
    - Calendar arithmetic
    - Constants and magic numbers
    - Field validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from civiltime._internal.validation import (
    validate_date,
    validate_range,
    validate_time,
)

__all__: list[str] = [
    "validate_date",
    "validate_range",
    "validate_time",
]
