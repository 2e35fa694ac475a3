"""Tests for Interval."""

from __future__ import annotations

from fractions import Fraction

import pytest

from civiltime import (
    CivilFields,
    Duration,
    Instant,
    Interval,
    Period,
    ZonedInstant,
    add_period,
    from_civil,
)

from conftest import FALL_BACK_2020


def utc(*fields: int) -> Instant:
    return from_civil(CivilFields(*fields))


class TestIntervalConstruction:
    """Tests for building intervals."""

    def test_keeps_given_order(self) -> None:
        a, b = utc(2020, 1, 1), utc(2020, 1, 2)
        interval = Interval(b, a)
        assert interval.start == b
        assert interval.end == a
        assert interval.is_reversed
        assert interval.sign == -1
        assert interval.normalized() == Interval(a, b)
        assert interval.reversed() == Interval(a, b)

    def test_degenerate(self) -> None:
        a = utc(2020, 1, 1)
        interval = Interval(a, a)
        assert interval.is_degenerate
        assert interval.sign == 0
        assert interval.as_duration() == Duration()
        assert interval.as_period().is_zero
        assert a not in interval

    def test_rejects_non_instants(self) -> None:
        with pytest.raises(TypeError):
            Interval(0, utc(2020, 1, 1))  # type: ignore[arg-type]

    def test_of_duration_and_period(self, new_york) -> None:
        start = from_civil(CivilFields(2020, 3, 7, 12), new_york)
        assert Interval.of(start, Duration(days=1)).as_duration() == Duration(days=1)
        assert Interval.of(start, Period(days=1), new_york).as_duration() == Duration(hours=23)

    def test_of_rejects_other_amounts(self) -> None:
        with pytest.raises(TypeError):
            Interval.of(utc(2020, 1, 1), 5)  # type: ignore[arg-type]


class TestAsDuration:
    """Tests for exact length."""

    def test_signed(self) -> None:
        a, b = utc(2020, 1, 1), utc(2020, 1, 2)
        assert Interval(a, b).as_duration() == Duration(days=1)
        assert Interval(b, a).as_duration() == Duration(days=-1)

    def test_in_units(self) -> None:
        a, b = utc(2020, 1, 1), utc(2020, 1, 1, 1, 30)
        assert Interval(a, b).in_units("hours") == Fraction(3, 2)


class TestAsPeriod:
    """Tests for calendar decomposition."""

    @pytest.mark.parametrize(
        "start,end,expected",
        [
            ((2020, 1, 31), (2020, 3, 1), Period(months=1, days=1)),
            ((2020, 2, 28), (2020, 3, 1), Period(days=2)),
            ((2021, 2, 28), (2021, 3, 1), Period(days=1)),
            ((2019, 6, 15), (2021, 8, 20, 6), Period(years=2, months=2, days=5, hours=6)),
            ((2020, 1, 31), (2020, 2, 29), Period(months=1)),
        ],
    )
    def test_utc(self, start, end, expected) -> None:
        assert Interval(utc(*start), utc(*end)).as_period() == expected

    def test_never_negative(self) -> None:
        a, b = utc(2020, 1, 31), utc(2020, 3, 1)
        assert Interval(b, a).as_period() == Period(months=1, days=1)
        assert Interval(b, a).sign == -1

    def test_overnight_shift_across_spring_forward(self, new_york) -> None:
        start = from_civil(CivilFields(2020, 3, 7, 23, 30), new_york)
        end = from_civil(CivilFields(2020, 3, 8, 7, 45), new_york)
        interval = Interval(start, end)

        period = interval.as_period(new_york)
        assert period == Period(hours=8, minutes=15)
        assert interval.as_duration() == Duration(hours=7, minutes=15)
        assert add_period(start, period, new_york) == end
        assert Duration(nanoseconds=period.clock_nanos) - interval.as_duration() == Duration(hours=1)

    def test_repeated_hour(self, new_york) -> None:
        start = Instant.from_epoch_seconds(FALL_BACK_2020 - 1800)
        end = Instant.from_epoch_seconds(FALL_BACK_2020 + 900)
        assert Interval(start, end).as_period(new_york) == Period(minutes=45)

    def test_round_trip_without_transition(self) -> None:
        start = utc(2020, 1, 31, 8)
        end = utc(2022, 5, 3, 17, 20)
        period = Interval(start, end).as_period()
        assert add_period(start, period) == end


class TestMembership:
    """Tests for contains and overlaps."""

    def test_half_open(self) -> None:
        a, b = utc(2020, 1, 1), utc(2020, 1, 2)
        interval = Interval(a, b)
        assert a in interval
        assert b not in interval
        assert utc(2020, 1, 1, 12) in Interval(b, a)

    def test_overlaps(self) -> None:
        a, b, c, d = (utc(2020, 1, day) for day in (1, 2, 3, 4))
        assert Interval(a, c).overlaps(Interval(b, d))
        assert Interval(c, a).overlaps(Interval(b, d))
        assert not Interval(a, b).overlaps(Interval(b, c))
        assert not Interval(a, d).overlaps(Interval(b, b))

    def test_zoned_until(self, new_york) -> None:
        start = ZonedInstant.of(CivilFields(2020, 3, 7, 23, 30), new_york)
        end = ZonedInstant.of(CivilFields(2020, 3, 8, 7, 45), new_york)
        assert start.until(end).as_duration() == Duration(hours=7, minutes=15)
