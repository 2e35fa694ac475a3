"""Pytest configuration and fixtures for civiltime tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so civiltime can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from civiltime.core.instant import Instant  # noqa: E402
from civiltime.zones.lookup import ZoneOffset  # noqa: E402
from civiltime.zones.table import TransitionTable  # noqa: E402
from civiltime.zones.timezone import TimeZone  # noqa: E402

# New York in 2020: EDT from 2020-03-08 07:00 UTC, EST again from
# 2020-11-01 06:00 UTC.
SPRING_FORWARD_2020 = 1583650800
FALL_BACK_2020 = 1604210400


@pytest.fixture
def new_york() -> TimeZone:
    """America/New_York from the IANA database."""
    return TimeZone("America/New_York")


@pytest.fixture
def synthetic_new_york() -> TimeZone:
    """A TransitionTable zone mirroring New York's 2020 rules."""
    table = TransitionTable(
        "Test/New_York_2020",
        ZoneOffset(-18000, False),
        [
            (Instant.from_epoch_seconds(SPRING_FORWARD_2020), ZoneOffset(-14400, True)),
            (Instant.from_epoch_seconds(FALL_BACK_2020), ZoneOffset(-18000, False)),
        ],
    )
    return TimeZone("Test/New_York_2020", table)
