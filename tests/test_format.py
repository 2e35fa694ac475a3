"""Tests for token-pattern formatting and parsing."""

from __future__ import annotations

import pytest

from civiltime import CivilFields, Instant, ParseOptions, PivotPolicy, from_civil
from civiltime.errors import AmbiguousDate, FormatMismatch, InvalidCivilDate
from civiltime.format import (
    compile_pattern,
    format_fields,
    format_instant,
    parse_instant_with_pattern,
    parse_with_pattern,
)

from conftest import SPRING_FORWARD_2020

SAMPLE = CivilFields(2020, 3, 7, 14, 5, 9, 123_456_789)


class TestCompilePattern:
    """Tests for pattern tokenizing."""

    def test_tokens(self) -> None:
        tokens = compile_pattern("%Y-%-m %3f%%")
        assert [(t.text, t.is_directive) for t in tokens] == [
            ("Y", True),
            ("-", False),
            ("-m", True),
            (" ", False),
            ("3f", True),
            ("%", False),
        ]

    @pytest.mark.parametrize("pattern", ["%Q", "%Y-%", "%-y", "%0f"])
    def test_unsupported(self, pattern) -> None:
        with pytest.raises(ValueError):
            compile_pattern(pattern)


class TestFormatFields:
    """Tests for rendering civil fields."""

    @pytest.mark.parametrize(
        "pattern,expected",
        [
            ("%Y-%m-%dT%H:%M:%S", "2020-03-07T14:05:09"),
            ("%y %-m/%-d", "20 3/7"),
            ("%B %b %A %a", "March Mar Saturday Sat"),
            ("%I:%M %p", "02:05 PM"),
            ("%-I:%M%P", "2:05pm"),
            ("%S.%f", "09.123456"),
            ("%S.%3f", "09.123"),
            ("%S.%9f", "09.123456789"),
            ("100%%", "100%"),
        ],
    )
    def test_directives(self, pattern, expected) -> None:
        assert format_fields(SAMPLE, pattern) == expected

    def test_midnight_and_noon(self) -> None:
        assert format_fields(CivilFields(2020, 1, 1, 0, 7), "%-I:%M %p") == "12:07 AM"
        assert format_fields(CivilFields(2020, 1, 1, 12, 7), "%-I:%M %p") == "12:07 PM"
        assert format_fields(CivilFields(2020, 1, 1, 9), "%H %-H") == "09 9"

    def test_negative_year(self) -> None:
        assert format_fields(CivilFields(-44, 3, 15), "%Y-%m-%d") == "-0044-03-15"

    def test_offset_and_zone_need_values(self) -> None:
        with pytest.raises(ValueError):
            format_fields(SAMPLE, "%z")
        with pytest.raises(ValueError):
            format_fields(SAMPLE, "%Z")
        assert format_fields(SAMPLE, "%z %Z", offset_seconds=19800, zone_id="Asia/Kolkata") == (
            "+0530 Asia/Kolkata"
        )


class TestFormatInstant:
    """Tests for rendering instants in a zone."""

    def test_new_york(self, new_york) -> None:
        instant = Instant.from_epoch_seconds(SPRING_FORWARD_2020)
        assert format_instant(instant, new_york, "%Y-%m-%d %H:%M %z %Z") == (
            "2020-03-08 03:00 -0400 America/New_York"
        )
        before = Instant.from_epoch_seconds(SPRING_FORWARD_2020 - 60)
        assert format_instant(before, new_york, "%H:%M %z") == "01:59 -0500"

    def test_utc_default(self) -> None:
        assert format_instant(Instant(0), None, "%Y-%m-%d %H:%M %z") == "1970-01-01 00:00 +0000"


class TestParseWithPattern:
    """Tests for reading strings back with a pattern."""

    def test_basic(self) -> None:
        assert parse_with_pattern("07/03/2020", "%d/%m/%Y") == CivilFields(2020, 3, 7)
        assert parse_with_pattern("march 7, 2020 2:05 pm", "%B %-d, %Y %-I:%M %p") == (
            CivilFields(2020, 3, 7, 14, 5)
        )

    def test_inverse_of_format(self) -> None:
        for pattern in (
            "%Y-%m-%dT%H:%M:%S.%9f",
            "%a, %d %b %Y %I:%M:%S %p",
            "%A %B %-d %Y %-H:%M:%S.%3f",
        ):
            text = format_fields(SAMPLE, pattern)
            parsed = parse_with_pattern(text, pattern)
            assert parsed.date_tuple() == SAMPLE.date_tuple()
            assert (parsed.hour, parsed.minute, parsed.second) == (14, 5, 9)

    def test_mismatch(self) -> None:
        with pytest.raises(FormatMismatch):
            parse_with_pattern("2020-03-07", "%d/%m/%Y")

    def test_pattern_without_day(self) -> None:
        with pytest.raises(FormatMismatch):
            parse_with_pattern("2020-03", "%Y-%m")

    def test_twelve_hour_needs_marker(self) -> None:
        with pytest.raises(FormatMismatch):
            parse_with_pattern("2020-03-07 02:05", "%Y-%m-%d %I:%M")

    def test_conflicting_repeats(self) -> None:
        with pytest.raises(FormatMismatch):
            parse_with_pattern("2020 2021-03-07", "%Y %Y-%m-%d")
        assert parse_with_pattern("2020 2020-03-07", "%Y %Y-%m-%d").year == 2020

    def test_weekday_must_agree(self) -> None:
        with pytest.raises(InvalidCivilDate):
            parse_with_pattern("Sun 2020-03-07", "%a %Y-%m-%d")

    def test_two_digit_year(self) -> None:
        with pytest.raises(AmbiguousDate):
            parse_with_pattern("03/07/20", "%m/%d/%y")
        options = ParseOptions(pivot=PivotPolicy(2020))
        assert parse_with_pattern("03/07/97", "%m/%d/%y", options).year == 1997

    def test_impossible_date(self) -> None:
        with pytest.raises(InvalidCivilDate):
            parse_with_pattern("02/30/2020", "%m/%d/%Y")


class TestParseInstantWithPattern:
    """Tests for resolving parsed strings to instants."""

    def test_offset(self) -> None:
        instant = parse_instant_with_pattern("2020-03-07 14:30 +0530", "%Y-%m-%d %H:%M %z")
        assert instant == from_civil(CivilFields(2020, 3, 7, 9, 0))

    def test_zone_id(self) -> None:
        instant = parse_instant_with_pattern(
            "2020-03-08 02:30 America/New_York", "%Y-%m-%d %H:%M %Z"
        )
        assert instant == Instant.from_epoch_seconds(SPRING_FORWARD_2020)

    def test_zone_argument(self, new_york) -> None:
        instant = parse_instant_with_pattern("2020-03-08 02:30", "%Y-%m-%d %H:%M", new_york)
        assert instant == Instant.from_epoch_seconds(SPRING_FORWARD_2020)

    def test_offset_wins(self, new_york) -> None:
        instant = parse_instant_with_pattern(
            "2020-03-07 14:30 +0000 America/New_York", "%Y-%m-%d %H:%M %z %Z", new_york
        )
        assert instant == from_civil(CivilFields(2020, 3, 7, 14, 30))
