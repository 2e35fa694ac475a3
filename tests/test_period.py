"""Tests for Period."""

from __future__ import annotations

from fractions import Fraction

import pytest

from civiltime import CivilFields, Period, TimeUnit, from_civil


class TestConstruction:
    """Tests for Period construction."""

    def test_components_stored_as_given(self) -> None:
        p = Period(months=14)
        assert p.months == 14
        assert p.years == 0

    def test_weeks_fold_into_days(self) -> None:
        assert Period(weeks=2, days=1).days == 15

    def test_rejects_non_integer(self) -> None:
        with pytest.raises(TypeError):
            Period(days=1.5)  # type: ignore[arg-type]

    def test_total_months(self) -> None:
        assert Period(years=1, months=2).total_months == 14
        assert Period(years=-1, months=3).total_months == -9

    def test_zero(self) -> None:
        assert Period.zero().is_zero
        assert not Period()
        assert Period(nanoseconds=1)


class TestNormalization:
    """Tests for Period.normalized."""

    def test_months_fold_into_years(self) -> None:
        assert Period(months=14).normalized() == Period(years=1, months=2)
        assert Period(months=-14).normalized() == Period(years=-1, months=-2)

    def test_clock_carries_into_hours(self) -> None:
        assert Period(minutes=135).normalized() == Period(hours=2, minutes=15)

    def test_hours_never_fold_into_days(self) -> None:
        assert Period(hours=49).normalized() == Period(hours=49)

    def test_days_never_fold_into_months(self) -> None:
        assert Period(days=45).normalized() == Period(days=45)

    def test_equality_is_componentwise(self) -> None:
        assert Period(months=12) != Period(years=1)
        assert Period(months=12).normalized() == Period(years=1)


class TestArithmetic:
    """Tests for Period operators."""

    def test_add_and_subtract(self) -> None:
        assert Period(months=1) + Period(days=2) == Period(months=1, days=2)
        assert Period(days=5) - Period(days=7) == Period(days=-2)

    def test_negate_and_scale(self) -> None:
        assert -Period(years=1, hours=2) == Period(years=-1, hours=-2)
        assert Period(days=2) * 3 == Period(days=6)

    def test_sum(self) -> None:
        assert sum([Period(days=1), Period(hours=1)]) == Period(days=1, hours=1)


class TestUnits:
    """Tests for Period.in_units and to_duration."""

    def test_calendar_units(self) -> None:
        assert Period(years=1, months=6).in_units(TimeUnit.YEAR) == Fraction(3, 2)
        assert Period(years=1, months=6).in_units("months") == 18

    def test_calendar_units_reject_days(self) -> None:
        with pytest.raises(ValueError):
            Period(months=1, days=1).in_units("months")

    def test_fixed_units_without_anchor(self) -> None:
        assert Period(days=1, hours=12).in_units("hours") == 36

    def test_months_need_anchor(self) -> None:
        with pytest.raises(ValueError):
            Period(months=1).in_units("days")

    def test_month_length_depends_on_anchor(self) -> None:
        feb_leap = from_civil(CivilFields(2020, 2, 1))
        feb = from_civil(CivilFields(2021, 2, 1))
        assert Period(months=1).in_units("days", anchor=feb_leap) == 29
        assert Period(months=1).in_units("days", anchor=feb) == 28

    def test_day_across_spring_forward(self, new_york) -> None:
        anchor = from_civil(CivilFields(2020, 3, 7, 12), new_york)
        assert Period(days=1).in_units("hours", anchor=anchor, zone=new_york) == 23
        assert Period(days=1).to_duration(anchor, new_york).total_seconds == 23 * 3600


class TestString:
    """Tests for str() and repr()."""

    def test_iso(self) -> None:
        assert str(Period(years=1, months=2, days=3, hours=4)) == "P1Y2M3DT4H"
        assert str(Period()) == "P0D"
        assert str(Period(seconds=1, nanoseconds=500_000_000)) == "PT1.5S"

    def test_repr_lists_nonzero_components(self) -> None:
        assert repr(Period(days=2)) == "Period(days=2)"
        assert repr(Period()) == "Period()"
