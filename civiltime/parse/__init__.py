"""Flexible date/time parsing under a declared field order.

The caller states the field order ("Y-M-D", "m/d/y", FieldOrder.DMY) and
the parser tries its date templates in one fixed priority, taking the
first that fits the whole string:

    numeric_dash   2020-03-07
    numeric_slash  03/07/2020
    numeric_dot    07.03.2020
    month_name     March 7, 2020 / 7 March 2020
    month_abbrev   Mar 7 2020 / 7-Mar-2020
    compact        20200307 / 200307

Any of them may carry a leading weekday and a trailing time of day
("T14:30", " 2:30 pm"). When the input does not say enough (a two-digit
year with no pivot policy, digits that split more than one way) the
parser raises AmbiguousDate rather than guessing.

Public API:
    parse: Read a string into civil fields.
    parse_instant: Read a string and resolve it in a zone.
    infer_pattern: Work out a formatting pattern from an example.
    ParseResult: Fields plus the template and order that produced them.
    ParseOptions, PivotPolicy, FieldOrder: Configuration.

Examples:
    >>> from civiltime.parse import parse
    >>> parse("03/07/2020", "m/d/y").fields.date_tuple()
    (2020, 3, 7)

    >>> parse("7-Mar-2020 14:30", "DMY").pattern_id
    'month_abbrev'
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from civiltime._internal.fields import fraction_to_nanos, to_24_hour
from civiltime._internal.names import weekday_from_name, weekday_name
from civiltime.core.civil import CivilFields
from civiltime.errors import FormatMismatch, InvalidCivilDate
from civiltime.parse._templates import TEMPLATES, Components
from civiltime.parse.infer import InferredPattern, infer_pattern
from civiltime.parse.options import DEFAULT_ORDERS, FieldOrder, ParseOptions, PivotPolicy

if TYPE_CHECKING:
    from civiltime.core.instant import Instant
    from civiltime.zones.timezone import TimeZone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a successful parse.

    Attributes:
        fields: The civil fields read from the string.
        pattern_id: Name of the template that matched, e.g. "numeric_slash".
        order: The field order the string was read under.
    """

    fields: CivilFields
    pattern_id: str
    order: FieldOrder


def parse(
    text: str,
    order: FieldOrder | str,
    options: ParseOptions | None = None,
) -> ParseResult:
    """Parse ``text`` as a date, optionally with a time of day.

    Args:
        text: The string to read. Surrounding whitespace is ignored.
        order: Declared field order for the numeric fields.
        options: Pivot policy and switches; defaults to ParseOptions().

    Returns:
        ParseResult with the fields and the template that fired.

    Raises:
        FormatMismatch: If no template matches the string.
        AmbiguousDate: If the string does not pin down the date.
        InvalidCivilDate: If a template matches but the date is impossible.
        ValueError: If ``order`` is not a recognised field order.

    Examples:
        >>> from civiltime.parse import ParseOptions, PivotPolicy
        >>> opts = ParseOptions(pivot=PivotPolicy(2020))
        >>> parse("3/7/97", "MDY", opts).fields.year
        1997

        >>> parse("2020121", "YMD")
        Traceback (most recent call last):
        ...
        civiltime.errors.AmbiguousDate: '2020121' splits more than one way: year 2020 month 1 day 21, year 2020 month 12 day 1
    """
    field_order = FieldOrder.parse(order)
    if options is None:
        options = ParseOptions()

    stripped = text.strip()
    if not stripped:
        raise FormatMismatch("empty string")

    for template in TEMPLATES:
        match = template.pattern.match(stripped)
        if match is None:
            continue
        if match.group("hour") is not None and not options.allow_time:
            continue
        components = template.extractor(match, field_order, options)
        if components is None:
            continue

        fields = _build_fields(components, match)
        logger.debug(
            "parsed %r as %s with %s (%s)", text, fields, template.name, field_order.value
        )
        return ParseResult(fields, template.name, field_order)

    raise FormatMismatch(
        f"no date template matches {text!r} in {field_order.value} order"
    )


def parse_instant(
    text: str,
    order: FieldOrder | str,
    zone: TimeZone | str | None = None,
    options: ParseOptions | None = None,
) -> Instant:
    """Parse ``text`` and resolve the fields in ``zone`` (UTC by default).

    The DST policy of ``civiltime.convert.civil.from_civil`` applies.
    """
    from civiltime.convert.civil import from_civil

    return from_civil(parse(text, order, options).fields, zone)


def _build_fields(components: Components, match: re.Match[str]) -> CivilFields:
    """Combine date components with the time suffix and check the weekday."""
    hour = minute = second = nanosecond = 0
    if match.group("hour") is not None:
        hour = int(match.group("hour"))
        minute = int(match.group("minute"))
        second = int(match.group("second") or 0)
        nanosecond = fraction_to_nanos(match.group("fraction") or "")
        ampm = match.group("ampm")
        if ampm:
            hour = to_24_hour(hour, ampm)

    fields = CivilFields(
        components["year"],
        components["month"],
        components["day"],
        hour,
        minute,
        second,
        nanosecond,
    )

    weekday = match.group("weekday")
    if weekday:
        expected = weekday_from_name(weekday)
        if expected != fields.weekday():
            raise InvalidCivilDate(
                f"{weekday!r} does not match {fields.date_tuple()}, "
                f"which is a {weekday_name(fields.weekday())}"
            )
    return fields


__all__ = [
    "DEFAULT_ORDERS",
    "FieldOrder",
    "InferredPattern",
    "ParseOptions",
    "ParseResult",
    "PivotPolicy",
    "infer_pattern",
    "parse",
    "parse_instant",
]
