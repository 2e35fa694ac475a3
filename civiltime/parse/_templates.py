"""Date templates for the flexible parser, in priority order.

Each template pairs a regex with an extractor. The regex decides the
shape of the string; the extractor reads the groups under a field order
and returns the date components, or None when the groups do not fit that
order (a five-digit month, say), in which case the next template is tried.

Internal module - use parse() from civiltime.parse instead.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Pattern

from civiltime._internal.calendar import days_in_month
from civiltime._internal.names import (
    WEEKDAY_NAMES,
    month_from_abbreviation,
    month_from_full_name,
)
from civiltime.errors import AmbiguousDate
from civiltime.parse.options import FieldOrder, ParseOptions, resolve_year

Components = dict[str, int]
Extractor = Callable[["re.Match[str]", FieldOrder, ParseOptions], Optional[Components]]


@dataclass(frozen=True)
class DateTemplate:
    """A candidate date shape.

    Attributes:
        name: Identifier reported as ``ParseResult.pattern_id``.
        pattern: Compiled regex, matched against the whole string.
        extractor: Reads the date components from a match.
    """

    name: str
    pattern: Pattern[str]
    extractor: Extractor


def _weekday_alternation() -> str:
    names = [name for full in WEEKDAY_NAMES for name in (full, full[:3])]
    return "|".join(sorted(names, key=len, reverse=True))


# Optional leading weekday: "Saturday, ", "Sat "
_WEEKDAY_PREFIX = rf"(?:(?P<weekday>{_weekday_alternation()})\.?,?\s+)?"

# Optional time of day: "T14:30", " 2:30:15.250 pm"
_TIME_SUFFIX = (
    r"(?:(?:T|\s+)"
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:[.,](?P<fraction>\d{1,9}))?)?"
    r"\s*(?P<ampm>[AaPp]\.?[Mm]\.?)?)?"
)

_NUMERIC_FIELD = r"\d{1,4}"
_NAMED_FIELD = r"[A-Za-z]+\.?|\d{1,4}"
_NAMED_SEP = r"(?:\s*[-/,]\s*|\s+)"


def _compile(body: str) -> Pattern[str]:
    return re.compile(rf"^{_WEEKDAY_PREFIX}{body}{_TIME_SUFFIX}$", re.IGNORECASE)


def _numeric(separator: str) -> Pattern[str]:
    sep = re.escape(separator)
    return _compile(
        rf"(?P<a>{_NUMERIC_FIELD}){sep}(?P<b>{_NUMERIC_FIELD}){sep}(?P<c>{_NUMERIC_FIELD})"
    )


def _named() -> Pattern[str]:
    return _compile(
        rf"(?P<a>{_NAMED_FIELD}){_NAMED_SEP}(?P<b>{_NAMED_FIELD}){_NAMED_SEP}(?P<c>{_NAMED_FIELD})"
    )


def _extract_numeric(
    match: re.Match[str], order: FieldOrder, options: ParseOptions
) -> Components | None:
    """Assign three numeric groups to the fields of ``order``."""
    texts = dict(zip(order.fields, (match.group("a"), match.group("b"), match.group("c"))))
    if len(texts["M"]) > 2 or len(texts["D"]) > 2 or len(texts["Y"]) not in (2, 4):
        return None
    return {
        "year": resolve_year(texts["Y"], options),
        "month": int(texts["M"]),
        "day": int(texts["D"]),
    }


def _named_extractor(lookup: Callable[[str], int | None]) -> Extractor:
    """Build an extractor for templates carrying one month word.

    The other two groups are the day and the year. A group of three or
    four digits is the year; otherwise they follow ``order`` with the
    month left out.
    """

    def extract(
        match: re.Match[str], order: FieldOrder, options: ParseOptions
    ) -> Components | None:
        groups = [match.group("a"), match.group("b"), match.group("c")]
        words = [g for g in groups if not g.isdigit()]
        if len(words) != 1:
            return None
        month = lookup(words[0])
        if month is None:
            return None

        first, second = [g for g in groups if g.isdigit()]
        if len(first) > 2 and len(second) <= 2:
            year_text, day_text = first, second
        elif len(second) > 2 and len(first) <= 2:
            day_text, year_text = first, second
        elif len(first) <= 2 and len(second) <= 2:
            rest = [f for f in order.fields if f != "M"]
            year_text, day_text = (first, second) if rest[0] == "Y" else (second, first)
        else:
            return None
        if len(year_text) not in (2, 4):
            return None

        return {
            "year": resolve_year(year_text, options),
            "month": month,
            "day": int(day_text),
        }

    return extract


def _split_widths(total: int) -> list[tuple[int, int]]:
    return [(a, total - a) for a in (1, 2) if 1 <= total - a <= 2]


def _extract_compact(
    match: re.Match[str], order: FieldOrder, options: ParseOptions
) -> Components | None:
    """Split a run of digits into fields of ``order``.

    Every width assignment (a four- or two-digit year, one- or two-digit
    month and day) is tried. Exactly one valid reading is accepted; more
    than one is ambiguous; none means the template does not apply.
    """
    digits = match.group("digits")
    readings: set[tuple[str, int, int]] = set()
    month_day = [f for f in order.fields if f != "Y"]

    for year_width in (4, 2):
        for first, second in _split_widths(len(digits) - year_width):
            widths = {"Y": year_width}
            widths.update(zip(month_day, (first, second)))
            texts: dict[str, str] = {}
            pos = 0
            for field in order.fields:
                texts[field] = digits[pos : pos + widths[field]]
                pos += widths[field]
            month, day = int(texts["M"]), int(texts["D"])
            if not 1 <= month <= 12:
                continue
            # Century unknown until the pivot runs; Feb 29 is allowed here.
            year_for_check = int(texts["Y"]) if year_width == 4 else 2000
            if not 1 <= day <= days_in_month(year_for_check, month):
                continue
            readings.add((texts["Y"], month, day))

    if not readings:
        return None
    if len(readings) > 1:
        shown = ", ".join(
            f"year {y} month {m} day {d}" for y, m, d in sorted(readings)
        )
        raise AmbiguousDate(f"{digits!r} splits more than one way: {shown}")

    ((year_text, month, day),) = readings
    return {"year": resolve_year(year_text, options), "month": month, "day": day}


TEMPLATES: tuple[DateTemplate, ...] = (
    DateTemplate("numeric_dash", _numeric("-"), _extract_numeric),
    DateTemplate("numeric_slash", _numeric("/"), _extract_numeric),
    DateTemplate("numeric_dot", _numeric("."), _extract_numeric),
    DateTemplate("month_name", _named(), _named_extractor(month_from_full_name)),
    DateTemplate("month_abbrev", _named(), _named_extractor(month_from_abbreviation)),
    DateTemplate("compact", _compile(r"(?P<digits>\d{5,8})"), _extract_compact),
)


__all__ = ["Components", "DateTemplate", "TEMPLATES"]
