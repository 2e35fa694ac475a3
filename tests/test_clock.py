"""Tests for the clock abstraction."""

from __future__ import annotations

from civiltime import (
    CivilFields,
    Duration,
    FixedClock,
    Instant,
    SystemClock,
    ZonedInstant,
    from_civil,
)
from civiltime.clock import system_clock


class TestFixedClock:
    """Tests for the controllable clock."""

    def test_now_is_fixed(self) -> None:
        clock = FixedClock(Instant(42))
        assert clock.now() == Instant(42)
        assert clock.now() == Instant(42)

    def test_advance(self) -> None:
        clock = FixedClock(Instant(0))
        clock.advance(Duration(hours=1))
        assert clock.now() == Instant.from_epoch_seconds(3600)

    def test_zoned_now(self, new_york) -> None:
        clock = FixedClock(from_civil(CivilFields(2020, 7, 1, 16)))
        now = ZonedInstant.now(new_york, clock)
        assert now.fields == CivilFields(2020, 7, 1, 12)


class TestSystemClock:
    """Tests for the wall clock."""

    def test_moves_forward(self) -> None:
        clock = SystemClock()
        first = clock.now()
        assert clock.now() >= first
        assert first > from_civil(CivilFields(2020, 1, 1))

    def test_shared_instance(self) -> None:
        assert system_clock() is system_clock()
        assert isinstance(system_clock(), SystemClock)
