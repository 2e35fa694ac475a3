"""Token-pattern formatting and the matching parser.

A pattern is literal text with %-directives. The same table drives both
directions, so anything ``format_fields`` writes, ``parse_with_pattern``
reads back.

Supported Directives:
    %Y - 4-digit year (2020)
    %y - 2-digit year (20); parsing needs a pivot policy
    %m - zero-padded month (03)       %-m - month (3)
    %B - full month name (March)      %b - 3-letter month (Mar)
    %d - zero-padded day (07)         %-d - day (7)
    %A - full weekday (Saturday)      %a - 3-letter weekday (Sat)
    %H - zero-padded 24-hour (09)     %-H - 24-hour (9)
    %I - zero-padded 12-hour (09)     %-I - 12-hour (9)
    %M - minute (05)
    %S - second (07)
    %f - fraction of a second, 6 digits; %3f, %9f etc. for other widths
    %p - AM/PM                        %P - am/pm
    %z - UTC offset (+0530)
    %Z - zone id (America/New_York)
    %% - literal %

Names are English and locale-independent.

Examples:
    >>> from civiltime.core.civil import CivilFields
    >>> format_fields(CivilFields(2020, 3, 7, 14, 5), "%B %-d, %Y %-I:%M %p")
    'March 7, 2020 2:05 PM'

    >>> parse_with_pattern("March 7, 2020 2:05 PM", "%B %-d, %Y %-I:%M %p")
    CivilFields(year=2020, month=3, day=7, hour=14, minute=5, second=0, nanosecond=0)
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from civiltime._internal.fields import (
    fraction_to_nanos,
    nanos_to_fraction,
    to_12_hour,
    to_24_hour,
)
from civiltime._internal.names import (
    MONTH_NAMES,
    WEEKDAY_NAMES,
    month_abbreviation,
    month_from_abbreviation,
    month_from_full_name,
    month_name,
    weekday_abbreviation,
    weekday_from_name,
    weekday_name,
)
from civiltime.core.civil import CivilFields
from civiltime.errors import FormatMismatch, InvalidCivilDate
from civiltime.parse.options import ParseOptions, resolve_year
from civiltime.zones.fixed import format_offset, parse_offset_id
from civiltime.zones.timezone import as_zone

if TYPE_CHECKING:
    from civiltime.core.instant import Instant
    from civiltime.zones.timezone import TimeZone

_SIMPLE_CODES = frozenset("YymdBbAaHIMSpPzZ")
_UNPADDED_CODES = frozenset("mdHI")


@dataclass(frozen=True)
class PatternToken:
    """One piece of a compiled pattern.

    Attributes:
        text: The directive code without the leading % ("Y", "-m", "3f"),
            or the literal text.
        is_directive: Whether ``text`` is a directive code.
    """

    text: str
    is_directive: bool


@functools.lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> tuple[PatternToken, ...]:
    """Split a pattern into literal and directive tokens.

    Raises:
        ValueError: If the pattern has an unsupported or truncated directive.

    Examples:
        >>> [t.text for t in compile_pattern("%Y-%-m")]
        ['Y', '-', '-m']
    """
    tokens: list[PatternToken] = []
    literal: list[str] = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char != "%":
            literal.append(char)
            i += 1
            continue

        code, i = _read_directive(pattern, i + 1)
        if code == "%":
            literal.append("%")
            continue
        if literal:
            tokens.append(PatternToken("".join(literal), False))
            literal = []
        tokens.append(PatternToken(code, True))

    if literal:
        tokens.append(PatternToken("".join(literal), False))
    return tuple(tokens)


def _read_directive(pattern: str, i: int) -> tuple[str, int]:
    """Read the directive code starting just after a %."""
    rest = pattern[i:]
    if rest[:1] == "%":
        return "%", i + 1
    if rest[:1] == "-" and rest[1:2] in _UNPADDED_CODES:
        return rest[:2], i + 2
    if rest[:1].isdigit() and rest[1:2] == "f" and rest[0] != "0":
        return rest[:2], i + 2
    if rest[:1] == "f":
        return "f", i + 1
    if rest[:1] in _SIMPLE_CODES:
        return rest[:1], i + 1
    shown = f"%{rest[:2]}" if rest else "%"
    raise ValueError(
        f"unsupported format directive {shown!r} in {pattern!r}. "
        "Supported: %Y %y %m %-m %B %b %d %-d %A %a %H %-H %I %-I %M %S "
        "%f %3f %9f %p %P %z %Z %%"
    )


def _fraction_digits(code: str) -> int:
    return 6 if code == "f" else int(code[0])


def format_fields(
    fields: CivilFields,
    pattern: str,
    offset_seconds: int | None = None,
    zone_id: str | None = None,
) -> str:
    """Render civil fields with a token pattern.

    Args:
        fields: The civil reading to render.
        pattern: Pattern with %-directives.
        offset_seconds: Offset rendered by %z.
        zone_id: Zone id rendered by %Z.

    Raises:
        ValueError: If the pattern is unsupported, or uses %z or %Z
            without the matching argument.
    """
    out: list[str] = []
    for token in compile_pattern(pattern):
        if not token.is_directive:
            out.append(token.text)
        else:
            out.append(_format_directive(fields, token.text, offset_seconds, zone_id))
    return "".join(out)


def _format_directive(
    fields: CivilFields,
    code: str,
    offset_seconds: int | None,
    zone_id: str | None,
) -> str:
    if code == "Y":
        if fields.year >= 0:
            return f"{fields.year:04d}"
        return f"-{-fields.year:04d}"
    if code == "y":
        return f"{fields.year % 100:02d}"
    if code == "m":
        return f"{fields.month:02d}"
    if code == "-m":
        return str(fields.month)
    if code == "B":
        return month_name(fields.month)
    if code == "b":
        return month_abbreviation(fields.month)
    if code == "d":
        return f"{fields.day:02d}"
    if code == "-d":
        return str(fields.day)
    if code == "A":
        return weekday_name(fields.weekday())
    if code == "a":
        return weekday_abbreviation(fields.weekday())
    if code == "H":
        return f"{fields.hour:02d}"
    if code == "-H":
        return str(fields.hour)
    if code in ("I", "-I"):
        hour12, _ = to_12_hour(fields.hour)
        return f"{hour12:02d}" if code == "I" else str(hour12)
    if code == "M":
        return f"{fields.minute:02d}"
    if code == "S":
        return f"{fields.second:02d}"
    if code.endswith("f"):
        return nanos_to_fraction(fields.nanosecond, _fraction_digits(code))
    if code in ("p", "P"):
        _, is_pm = to_12_hour(fields.hour)
        marker = "PM" if is_pm else "AM"
        return marker if code == "p" else marker.lower()
    if code == "z":
        if offset_seconds is None:
            raise ValueError("%z needs an offset; use format_instant or pass offset_seconds")
        return format_offset(offset_seconds, colon=False)
    if code == "Z":
        if zone_id is None:
            raise ValueError("%Z needs a zone; use format_instant or pass zone_id")
        return zone_id
    raise ValueError(f"unsupported format directive %{code}")


def format_instant(instant: Instant, zone: TimeZone | str | None, pattern: str) -> str:
    """Render ``instant`` as read in ``zone`` (UTC if None).

    Examples:
        >>> from civiltime.core.instant import Instant
        >>> format_instant(Instant.from_epoch_seconds(1583650800), "America/New_York", "%H:%M %z")
        '03:00 -0400'
    """
    from civiltime.convert.civil import to_civil

    tz = as_zone(zone)
    offset = tz.offset_at(instant)
    return format_fields(to_civil(instant, tz), pattern, offset.offset_seconds, tz.zone_id)


# Parsing


def _alternation(names: list[str]) -> str:
    return "|".join(re.escape(n) for n in sorted(names, key=len, reverse=True))


_DIRECTIVE_REGEX: dict[str, str] = {
    "Y": r"[+-]?\d{4}",
    "y": r"\d{2}",
    "m": r"\d{2}",
    "-m": r"\d{1,2}",
    "B": _alternation(list(MONTH_NAMES)),
    "b": _alternation([name[:3] for name in MONTH_NAMES]),
    "d": r"\d{2}",
    "-d": r"\d{1,2}",
    "A": _alternation(list(WEEKDAY_NAMES)),
    "a": _alternation([name[:3] for name in WEEKDAY_NAMES]),
    "H": r"\d{2}",
    "-H": r"\d{1,2}",
    "I": r"\d{2}",
    "-I": r"\d{1,2}",
    "M": r"\d{2}",
    "S": r"\d{2}",
    "p": r"[AaPp][Mm]",
    "P": r"[AaPp][Mm]",
    "z": r"Z|[+-]\d{2}:?\d{2}",
    "Z": r"[A-Za-z][A-Za-z0-9_+\-/]*|[+-]\d{2}:?\d{2}",
}


class _CompiledParser(NamedTuple):
    regex: re.Pattern[str]
    codes: dict[str, str]


@functools.lru_cache(maxsize=256)
def _parser_for(pattern: str) -> _CompiledParser:
    """Build the regex for a pattern; each directive gets its own group."""
    parts: list[str] = []
    codes: dict[str, str] = {}
    for index, token in enumerate(compile_pattern(pattern)):
        if not token.is_directive:
            parts.append(re.escape(token.text))
            continue
        if token.text.endswith("f"):
            body = rf"\d{{{_fraction_digits(token.text)}}}"
        else:
            body = _DIRECTIVE_REGEX[token.text]
        group = f"g{index}"
        codes[group] = token.text
        parts.append(f"(?P<{group}>{body})")
    return _CompiledParser(re.compile("".join(parts), re.IGNORECASE), codes)


class PatternReading(NamedTuple):
    """Everything a pattern read from a string.

    Attributes:
        fields: The civil fields.
        offset_seconds: Offset from %z, if the pattern has one.
        zone_id: Zone id from %Z, if the pattern has one.
    """

    fields: CivilFields
    offset_seconds: int | None
    zone_id: str | None


def read_pattern(
    text: str, pattern: str, options: ParseOptions | None = None
) -> PatternReading:
    """Parse ``text`` with ``pattern``, keeping any offset or zone it carries.

    Raises:
        FormatMismatch: If the text does not fit the pattern, or the
            pattern lacks a year, month or day.
        AmbiguousDate: For %y with no pivot policy on ``options``.
        InvalidCivilDate: If the fields read are impossible, or a weekday
            name disagrees with the date.
    """
    if options is None:
        options = ParseOptions()
    parser = _parser_for(pattern)
    match = parser.regex.fullmatch(text.strip())
    if match is None:
        raise FormatMismatch(f"{text!r} does not match pattern {pattern!r}")

    values: dict[str, str] = {}
    for group, code in parser.codes.items():
        key = code.lstrip("-")
        if key[:1].isdigit():
            key = "f"
        captured = match.group(group)
        if key in values and values[key].lower() != captured.lower():
            raise FormatMismatch(
                f"%{code} read {captured!r} but an earlier %{code} read {values[key]!r}"
            )
        values[key] = captured

    year = _read_year(values, options)
    month = _read_month(values)
    if year is None or month is None or "d" not in values:
        raise FormatMismatch(f"pattern {pattern!r} needs a year, a month and a day to parse")

    hour = 0
    if "H" in values:
        hour = int(values["H"])
    elif "I" in values:
        marker = values.get("p") or values.get("P")
        if marker is None:
            raise FormatMismatch(f"pattern {pattern!r} uses %I without %p or %P")
        hour = to_24_hour(int(values["I"]), marker)

    fields = CivilFields(
        year,
        month,
        int(values["d"]),
        hour,
        int(values.get("M", 0)),
        int(values.get("S", 0)),
        fraction_to_nanos(values.get("f", "")),
    )

    weekday_text = values.get("A") or values.get("a")
    if weekday_text is not None and weekday_from_name(weekday_text) != fields.weekday():
        raise InvalidCivilDate(
            f"{weekday_text!r} does not match {fields.date_tuple()}, "
            f"which is a {weekday_name(fields.weekday())}"
        )

    offset_seconds = None
    if "z" in values:
        offset_seconds = parse_offset_id(values["z"])
    return PatternReading(fields, offset_seconds, values.get("Z"))


def _read_year(values: dict[str, str], options: ParseOptions) -> int | None:
    if "Y" in values:
        return int(values["Y"])
    if "y" in values:
        return resolve_year(values["y"], options)
    return None


def _read_month(values: dict[str, str]) -> int | None:
    if "m" in values:
        return int(values["m"])
    if "B" in values:
        return month_from_full_name(values["B"])
    if "b" in values:
        return month_from_abbreviation(values["b"])
    return None


def parse_with_pattern(
    text: str, pattern: str, options: ParseOptions | None = None
) -> CivilFields:
    """Parse ``text`` with ``pattern``; the inverse of ``format_fields``.

    %z and %Z must match when present but do not change the fields; use
    ``parse_instant_with_pattern`` to honour them.

    Examples:
        >>> parse_with_pattern("07/03/2020", "%d/%m/%Y").date_tuple()
        (2020, 3, 7)
    """
    return read_pattern(text, pattern, options).fields


def parse_instant_with_pattern(
    text: str,
    pattern: str,
    zone: TimeZone | str | None = None,
    options: ParseOptions | None = None,
) -> Instant:
    """Parse ``text`` with ``pattern`` and resolve it to an instant.

    A parsed %z offset takes precedence, then a parsed %Z zone id, then
    ``zone`` (UTC if None).

    Raises:
        UnknownZone: If a parsed %Z id does not resolve.
    """
    from civiltime.convert.civil import from_civil

    reading = read_pattern(text, pattern, options)
    if reading.offset_seconds is not None:
        target: TimeZone | str | None = format_offset(reading.offset_seconds)
    elif reading.zone_id is not None:
        target = reading.zone_id
    else:
        target = zone
    return from_civil(reading.fields, target)


__all__ = [
    "PatternReading",
    "PatternToken",
    "compile_pattern",
    "format_fields",
    "format_instant",
    "parse_instant_with_pattern",
    "parse_with_pattern",
    "read_pattern",
]
