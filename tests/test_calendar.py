"""Tests for the proleptic Gregorian calendar helpers and name tables."""

from __future__ import annotations

import pytest

from civiltime._internal.calendar import (
    clamp_day,
    days_in_month,
    days_in_year,
    epoch_days_to_weekday,
    epoch_days_to_ymd,
    is_leap_year,
    ordinal_to_ymd,
    shift_months,
    ymd_to_epoch_days,
    ymd_to_ordinal,
)
from civiltime._internal.names import (
    month_abbreviation,
    month_from_abbreviation,
    month_from_full_name,
    weekday_from_name,
)
from civiltime._internal.validation import validate_date, validate_time
from civiltime.errors import InvalidCivilDate


class TestLeapYears:
    """Tests for leap year rules."""

    @pytest.mark.parametrize(
        "year,expected",
        [(2000, True), (1900, False), (2020, True), (2021, False), (2100, False), (0, True)],
    )
    def test_is_leap_year(self, year: int, expected: bool) -> None:
        assert is_leap_year(year) is expected

    def test_days_in_year(self) -> None:
        assert days_in_year(2020) == 366
        assert days_in_year(2021) == 365


class TestMonthLengths:
    """Tests for days_in_month."""

    def test_february(self) -> None:
        assert days_in_month(2020, 2) == 29
        assert days_in_month(2021, 2) == 28
        assert days_in_month(1900, 2) == 28

    def test_thirty_day_months(self) -> None:
        for month in (4, 6, 9, 11):
            assert days_in_month(2021, month) == 30

    def test_bad_month(self) -> None:
        with pytest.raises(ValueError):
            days_in_month(2021, 13)


class TestDayCounts:
    """Tests for ordinal and epoch-day conversion."""

    def test_ordinal_anchors(self) -> None:
        assert ymd_to_ordinal(1, 1, 1) == 1
        assert ordinal_to_ymd(1) == (1, 1, 1)
        assert ordinal_to_ymd(0) == (0, 12, 31)

    def test_epoch_anchors(self) -> None:
        assert ymd_to_epoch_days(1970, 1, 1) == 0
        assert ymd_to_epoch_days(1969, 12, 31) == -1
        assert ymd_to_epoch_days(2000, 1, 1) == 10957
        assert ymd_to_epoch_days(2020, 3, 8) == 18329

    def test_cycle_boundaries(self) -> None:
        """Last day of 400-, 100- and 4-year cycles."""
        for date in [(2000, 12, 31), (1900, 12, 31), (2004, 12, 31), (2003, 12, 31)]:
            assert epoch_days_to_ymd(ymd_to_epoch_days(*date)) == date

    def test_round_trip_across_centuries(self) -> None:
        for days in range(-800_000, 800_000, 997):
            assert ymd_to_epoch_days(*epoch_days_to_ymd(days)) == days

    def test_consecutive_days_are_consecutive_dates(self) -> None:
        previous = epoch_days_to_ymd(-1)
        for days in range(0, 1500):
            current = epoch_days_to_ymd(days)
            assert current > previous
            previous = current

    def test_weekday(self) -> None:
        assert epoch_days_to_weekday(0) == 3  # Thursday
        assert epoch_days_to_weekday(ymd_to_epoch_days(2020, 3, 7)) == 5  # Saturday


class TestMonthShifting:
    """Tests for shift_months and clamp_day."""

    @pytest.mark.parametrize(
        "start,months,expected",
        [
            ((2020, 12), 1, (2021, 1)),
            ((2020, 1), -1, (2019, 12)),
            ((2020, 1), -13, (2018, 12)),
            ((2020, 5), 24, (2022, 5)),
            ((2020, 5), 0, (2020, 5)),
        ],
    )
    def test_shift_months(self, start: tuple[int, int], months: int, expected: tuple[int, int]) -> None:
        assert shift_months(start[0], start[1], months) == expected

    def test_clamp_day(self) -> None:
        assert clamp_day(2021, 2, 31) == 28
        assert clamp_day(2020, 2, 31) == 29
        assert clamp_day(2020, 4, 15) == 15


class TestValidation:
    """Tests for civil field validation."""

    def test_valid(self) -> None:
        validate_date(2020, 2, 29)
        validate_time(23, 59, 59, 999_999_999)

    @pytest.mark.parametrize(
        "date",
        [(2021, 2, 29), (2020, 0, 1), (2020, 13, 1), (2020, 4, 31), (2020, 1, 0), (10000, 1, 1)],
    )
    def test_invalid_dates(self, date: tuple[int, int, int]) -> None:
        with pytest.raises(InvalidCivilDate):
            validate_date(*date)

    def test_leap_second_rejected(self) -> None:
        with pytest.raises(InvalidCivilDate):
            validate_time(23, 59, 60, 0)

    def test_invalid_date_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            validate_date(2021, 2, 29)


class TestNameTable:
    """Tests for the shared month and weekday table."""

    def test_full_names(self) -> None:
        assert month_from_full_name("march") == 3
        assert month_from_full_name("DECEMBER") == 12
        assert month_from_full_name("Mar") is None

    def test_abbreviations_are_first_three_letters(self) -> None:
        for month in range(1, 13):
            assert month_from_abbreviation(month_abbreviation(month)) == month

    def test_abbreviation_forms(self) -> None:
        assert month_from_abbreviation("sep.") == 9
        assert month_from_abbreviation("SEP") == 9
        assert month_from_abbreviation("Sept") is None
        assert month_from_abbreviation("March") is None

    def test_weekdays(self) -> None:
        assert weekday_from_name("Monday") == 0
        assert weekday_from_name("thu") == 3
        assert weekday_from_name("Sun.") == 6
        assert weekday_from_name("Someday") is None
