"""Tests for zone lookups and TimeZone."""

from __future__ import annotations

import pytest

from civiltime import Instant
from civiltime.errors import UnknownZone
from civiltime.zones import (
    ChainedLookup,
    FixedOffsetLookup,
    IanaZoneLookup,
    TimeZone,
    TransitionTable,
    ZoneLookup,
    ZoneOffset,
    as_zone,
    default_lookup,
    format_offset,
    parse_offset_id,
    set_default_lookup,
)

from conftest import FALL_BACK_2020, SPRING_FORWARD_2020


def at(seconds: int) -> Instant:
    return Instant.from_epoch_seconds(seconds)


# =============================================================================
# Fixed offsets
# =============================================================================


class TestFixedOffsets:
    """Tests for fixed-offset zone ids."""

    @pytest.mark.parametrize(
        "zone_id,expected",
        [
            ("UTC", 0),
            ("Z", 0),
            ("+05:30", 19800),
            ("-0800", -28800),
            ("UTC+3", 10800),
            ("GMT-04:00", -14400),
        ],
    )
    def test_parse_offset_id(self, zone_id: str, expected: int) -> None:
        assert parse_offset_id(zone_id) == expected

    def test_not_an_offset(self) -> None:
        assert parse_offset_id("America/New_York") is None

    def test_out_of_range(self) -> None:
        with pytest.raises(UnknownZone):
            parse_offset_id("+25:00")
        assert not FixedOffsetLookup().knows("+25:00")

    def test_format_offset(self) -> None:
        assert format_offset(-18000) == "-05:00"
        assert format_offset(19800, colon=False) == "+0530"

    def test_lookup_is_constant(self) -> None:
        lookup = FixedOffsetLookup()
        assert lookup.lookup("+05:30", at(0)) == ZoneOffset(19800, False)
        assert lookup.lookup("+05:30", at(10**9)) == ZoneOffset(19800, False)


# =============================================================================
# IANA zones
# =============================================================================


class TestIanaZones:
    """Tests for the tzdata-backed lookup."""

    def test_new_york_2020(self) -> None:
        lookup = IanaZoneLookup()
        assert lookup.lookup("America/New_York", at(SPRING_FORWARD_2020 - 1)) == ZoneOffset(-18000, False)
        assert lookup.lookup("America/New_York", at(SPRING_FORWARD_2020)) == ZoneOffset(-14400, True)
        assert lookup.lookup("America/New_York", at(FALL_BACK_2020 - 1)) == ZoneOffset(-14400, True)
        assert lookup.lookup("America/New_York", at(FALL_BACK_2020)) == ZoneOffset(-18000, False)

    def test_unknown(self) -> None:
        assert not IanaZoneLookup().knows("Mars/Olympus_Mons")
        with pytest.raises(UnknownZone):
            IanaZoneLookup().lookup("Mars/Olympus_Mons", at(0))

    def test_far_instants_are_clamped(self) -> None:
        lookup = IanaZoneLookup()
        far = Instant(10**20)
        assert lookup.lookup("Asia/Tokyo", far).offset_seconds == 32400


# =============================================================================
# Transition tables
# =============================================================================


class TestTransitionTable:
    """Tests for explicit transition tables."""

    def test_lookup_boundaries(self, synthetic_new_york) -> None:
        lookup = synthetic_new_york.lookup
        zone_id = synthetic_new_york.zone_id
        assert lookup.lookup(zone_id, at(SPRING_FORWARD_2020 - 1)).offset_seconds == -18000
        assert lookup.lookup(zone_id, at(SPRING_FORWARD_2020)).offset_seconds == -14400
        assert lookup.lookup(zone_id, at(FALL_BACK_2020)).offset_seconds == -18000

    def test_matches_iana_around_transitions(self, synthetic_new_york, new_york) -> None:
        for base in (SPRING_FORWARD_2020, FALL_BACK_2020):
            for delta in (-3600, -1, 0, 1, 3600):
                instant = at(base + delta)
                assert synthetic_new_york.offset_at(instant) == new_york.offset_at(instant)

    def test_transitions_are_sorted(self) -> None:
        table = TransitionTable(
            "Test/Unsorted",
            ZoneOffset(0),
            [(at(200), ZoneOffset(7200)), (at(100), ZoneOffset(3600))],
        )
        assert [offset.offset_seconds for _, offset in table.transitions()] == [3600, 7200]

    def test_duplicate_transition(self) -> None:
        with pytest.raises(ValueError):
            TransitionTable("Test/Dup", ZoneOffset(0), [(at(1), ZoneOffset(3600)), (at(1), ZoneOffset(0))])

    def test_offset_out_of_range(self) -> None:
        with pytest.raises(UnknownZone):
            TransitionTable("Test/Far", ZoneOffset(86400))

    def test_other_ids_unknown(self) -> None:
        table = TransitionTable("Test/Only", ZoneOffset(0))
        assert not table.knows("UTC")
        with pytest.raises(UnknownZone):
            table.lookup("UTC", at(0))

    def test_satisfies_protocol(self) -> None:
        assert isinstance(TransitionTable("Test/Only", ZoneOffset(0)), ZoneLookup)


# =============================================================================
# TimeZone and the default lookup
# =============================================================================


class TestTimeZone:
    """Tests for TimeZone."""

    def test_unknown_zone_fails_early(self) -> None:
        with pytest.raises(UnknownZone):
            TimeZone("Mars/Olympus_Mons")

    def test_unknown_zone_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            TimeZone("Not/A_Zone")

    def test_non_string(self) -> None:
        with pytest.raises(UnknownZone):
            TimeZone(5)  # type: ignore[arg-type]

    def test_utc_singleton(self) -> None:
        assert TimeZone.utc() is TimeZone.utc()
        assert as_zone(None) is TimeZone.utc()

    def test_as_zone(self, new_york) -> None:
        assert as_zone(new_york) is new_york
        assert as_zone("America/New_York") == new_york

    def test_offset_at(self, new_york) -> None:
        assert new_york.offset_at(at(SPRING_FORWARD_2020)) == ZoneOffset(-14400, True)


class TestChainedLookup:
    """Tests for ChainedLookup and the process default."""

    def test_first_lookup_that_knows_answers(self) -> None:
        table = TransitionTable("UTC", ZoneOffset(3600))
        chain = ChainedLookup([table, FixedOffsetLookup()])
        assert chain.lookup("UTC", at(0)).offset_seconds == 3600
        assert chain.lookup("+02:00", at(0)).offset_seconds == 7200

    def test_unknown_everywhere(self) -> None:
        chain = ChainedLookup([FixedOffsetLookup()])
        assert not chain.knows("America/New_York")
        with pytest.raises(UnknownZone):
            chain.lookup("America/New_York", at(0))

    def test_default_lookup_is_shared(self) -> None:
        assert default_lookup() is default_lookup()

    def test_replace_default_lookup(self) -> None:
        table = TransitionTable("Test/Default", ZoneOffset(3600))
        try:
            set_default_lookup(ChainedLookup([table, FixedOffsetLookup()]))
            assert TimeZone("Test/Default").offset_at(at(0)).offset_seconds == 3600
            with pytest.raises(UnknownZone):
                TimeZone("America/New_York")
        finally:
            set_default_lookup(None)
        assert TimeZone("America/New_York").zone_id == "America/New_York"
