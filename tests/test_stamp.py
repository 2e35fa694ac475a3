"""Tests for pattern inference and Stamp."""

from __future__ import annotations

import pytest

from civiltime import (
    CivilFields,
    FieldOrder,
    Instant,
    ParseOptions,
    PivotPolicy,
    Stamp,
    ZonedInstant,
    from_civil,
    infer_pattern,
    stamp,
)
from civiltime.errors import AmbiguousDate, FormatMismatch

from conftest import SPRING_FORWARD_2020

PIVOT_2020 = ParseOptions(pivot=PivotPolicy(2020))


# =============================================================================
# Inference
# =============================================================================


class TestInferPattern:
    """Tests for working out a pattern from one example."""

    @pytest.mark.parametrize(
        "example,pattern,pattern_id",
        [
            ("2020-03-07", "%Y-%m-%d", "numeric_dash:YMD"),
            ("12/25/2020", "%m/%d/%Y", "numeric_slash:MDY"),
            ("25/12/2020", "%d/%m/%Y", "numeric_slash:DMY"),
            ("25.12.2020", "%d.%m.%Y", "numeric_dot:DMY"),
            ("20200307", "%Y%m%d", "compact:YMD"),
            ("March 7, 2020", "%B %-d, %Y", "month_name:YMD"),
            ("7 Mar 2020", "%-d %b %Y", "month_abbrev:YMD"),
            ("Saturday, March 7, 2020", "%A, %B %-d, %Y", "month_name:YMD"),
            ("2020-03-07T14:30:00", "%Y-%m-%dT%H:%M:%S", "numeric_dash:YMD"),
        ],
    )
    def test_examples(self, example, pattern, pattern_id) -> None:
        inferred = infer_pattern(example)
        assert inferred.pattern == pattern
        assert inferred.pattern_id == pattern_id

    def test_fields_read_back(self) -> None:
        inferred = infer_pattern("Sat, Mar 7, 2020 2:05 pm")
        assert inferred.pattern == "%a, %b %-d, %Y %-I:%M %P"
        assert inferred.fields == CivilFields(2020, 3, 7, 14, 5)

    def test_fraction_and_offset(self) -> None:
        inferred = infer_pattern("2020-03-07 14:30:15.250 +0530")
        assert inferred.pattern == "%Y-%m-%d %H:%M:%S.%3f %z"
        assert inferred.fields.nanosecond == 250_000_000

    def test_order_priority(self) -> None:
        assert infer_pattern("03/07/20", options=PIVOT_2020).pattern == "%y/%m/%d"
        inferred = infer_pattern("03/07/20", orders=("MDY",), options=PIVOT_2020)
        assert inferred.pattern == "%m/%d/%y"
        assert inferred.order is FieldOrder.MDY

    def test_two_digit_year_without_pivot(self) -> None:
        with pytest.raises(AmbiguousDate):
            infer_pattern("12/25/20", orders=("MDY",))

    @pytest.mark.parametrize(
        "example",
        ["hello world", "2020-03", "13/13/2020", "March 2020", "2020-03-07 14:30 EST"],
    )
    def test_unreadable(self, example) -> None:
        with pytest.raises(FormatMismatch):
            infer_pattern(example)


# =============================================================================
# Stamp
# =============================================================================


class TestStamp:
    """Tests for format-by-example."""

    def test_properties(self) -> None:
        s = Stamp("Saturday, March 7, 2020")
        assert s.example == "Saturday, March 7, 2020"
        assert s.pattern == "%A, %B %-d, %Y"
        assert s.pattern_id == "month_name:YMD"
        assert s.order is FieldOrder.YMD
        assert s.example_fields == CivilFields(2020, 3, 7)

    def test_format_fields(self) -> None:
        s = stamp("12/25/2020 2:05 PM")
        assert s.format_fields(CivilFields(2021, 1, 2, 0, 7)) == "01/02/2021 12:07 AM"

    def test_format_instant_and_zoned(self, new_york) -> None:
        s = stamp("2020-03-07 14:30 +0530")
        instant = Instant.from_epoch_seconds(SPRING_FORWARD_2020)
        assert s.format(instant) == "2020-03-08 07:00 +0000"
        assert s.format(instant, new_york) == "2020-03-08 03:00 -0400"
        assert s.format(ZonedInstant(instant, new_york)) == "2020-03-08 03:00 -0400"
        assert s.format(ZonedInstant(instant, new_york), "Asia/Tokyo") == "2020-03-08 16:00 +0900"

    def test_parse(self) -> None:
        s = stamp("25/12/2020")
        assert s.parse("07/03/2021") == CivilFields(2021, 3, 7)
        with pytest.raises(FormatMismatch):
            s.parse("2021-03-07")

    def test_parse_instant(self, new_york) -> None:
        s = stamp("2020-03-07 14:30")
        assert s.parse_instant("2020-03-08 02:30", new_york) == Instant.from_epoch_seconds(
            SPRING_FORWARD_2020
        )
        assert s.parse_instant("1970-01-01 00:00") == Instant(0)

    def test_pivot_carries_to_parse(self) -> None:
        s = stamp("03/07/20", orders=("MDY",), options=PIVOT_2020)
        assert s.parse("12/31/97") == CivilFields(1997, 12, 31)

    def test_equality_on_pattern(self) -> None:
        assert stamp("2020-03-07") == stamp("1999-12-31")
        assert hash(stamp("2020-03-07")) == hash(stamp("1999-12-31"))
        assert stamp("2020-03-07") != stamp("07/03/2020", orders=("DMY",))

    def test_repr(self) -> None:
        assert repr(stamp("2020-03-07")) == "Stamp('2020-03-07', pattern='%Y-%m-%d')"

    def test_round_trip(self) -> None:
        s = stamp("Sat, 7 Mar 2020 14:30:00")
        value = from_civil(CivilFields(2024, 2, 29, 8, 15))
        assert s.format(value) == "Thu, 29 Feb 2024 08:15:00"
        assert s.parse(s.format(value)) == CivilFields(2024, 2, 29, 8, 15)
