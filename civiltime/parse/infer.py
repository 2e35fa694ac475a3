"""Pattern inference from a worked example.

Given one example such as "Saturday, March 7, 2020 2:05 PM", work out the
token pattern that would print it ("%A, %B %-d, %Y %-I:%M %p"). The
example is split into numbers, words and punctuation. Words become month
and weekday directives, numbers become year, month and day directives
under each candidate field order in turn, and the first order whose
reading of the example is a real date wins.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, NamedTuple

from civiltime._internal.names import (
    month_from_abbreviation,
    month_from_full_name,
    weekday_from_name,
)
from civiltime.core.civil import CivilFields
from civiltime.errors import FormatMismatch, InvalidCivilDate
from civiltime.parse.options import DEFAULT_ORDERS, FieldOrder, ParseOptions

logger = logging.getLogger(__name__)

_TIME_PATTERN = re.compile(
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,9}))?)?"
    r"(?:(?P<gap>\s*)(?P<ampm>[AaPp][Mm]))?"
)
_OFFSET_TAIL = re.compile(r"(?P<gap>\s*)[+-]\d{4}")
_TOKEN_PATTERN = re.compile(r"\d+|[A-Za-z]+|[^\dA-Za-z]+")

# Words kept verbatim between the date and the time
_LITERAL_WORDS = frozenset({"t", "at", "on", "of"})

_SEPARATOR_KINDS = {"-": "numeric_dash", "/": "numeric_slash", ".": "numeric_dot"}


@dataclass(frozen=True)
class InferredPattern:
    """A pattern worked out from an example.

    Attributes:
        pattern_id: Which rule fired, as "<shape>:<order>", e.g.
            "numeric_slash:MDY" or "month_name:DMY".
        pattern: Token pattern for ``civiltime.format``.
        fields: The example read back through ``pattern``.
        order: The field order that produced the reading.
    """

    pattern_id: str
    pattern: str
    fields: CivilFields
    order: FieldOrder


class _Piece(NamedTuple):
    kind: str  # "literal", "directive" or "number"
    text: str


def _escape(text: str) -> str:
    return text.replace("%", "%%")


def _time_pattern(match: re.Match[str]) -> str:
    hour = match.group("hour")
    ampm = match.group("ampm")
    code = "I" if ampm else "H"
    out = f"%{'' if len(hour) == 2 else '-'}{code}:%M"
    if match.group("second"):
        out += ":%S"
    fraction = match.group("fraction")
    if fraction:
        out += ".%f" if len(fraction) == 6 else f".%{len(fraction)}f"
    if ampm:
        out += _escape(match.group("gap")) + ("%P" if ampm.islower() else "%p")
    return out


def _classify_word(word: str, example: str) -> _Piece:
    if word.lower() in _LITERAL_WORDS:
        return _Piece("literal", word)
    if len(word) == 3 and month_from_abbreviation(word) is not None:
        return _Piece("directive", "b")
    if month_from_full_name(word) is not None:
        return _Piece("directive", "B")
    if weekday_from_name(word) is not None:
        return _Piece("directive", "a" if len(word) == 3 else "A")
    raise FormatMismatch(f"unrecognized word {word!r} in {example!r}")


def _date_pieces(text: str, example: str) -> list[_Piece]:
    pieces: list[_Piece] = []
    for token in _TOKEN_PATTERN.findall(text):
        if token.isdigit():
            pieces.append(_Piece("number", token))
        elif token.isalpha():
            pieces.append(_classify_word(token, example))
        else:
            pieces.append(_Piece("literal", token))
    return pieces


def _shape(pieces: list[_Piece], numbers: list[str]) -> str:
    """Name the shape of the date part, mirroring the parser's template ids."""
    directives = {p.text for p in pieces if p.kind == "directive"}
    if "B" in directives:
        return "month_name"
    if "b" in directives:
        return "month_abbrev"
    if len(numbers) == 1:
        return "compact"
    between: set[str] = set()
    seen = 0
    for piece in pieces:
        if piece.kind == "number":
            seen += 1
        elif piece.kind == "literal" and 0 < seen < len(numbers):
            between.add(piece.text.strip())
    if len(between) == 1:
        return _SEPARATOR_KINDS.get(between.pop(), "numeric")
    return "numeric"


def _assign(numbers: list[str], named: bool, order: FieldOrder) -> list[str] | None:
    """Field letters for each number under ``order``, or None if they don't fit."""
    if named:
        first, second = numbers
        if len(first) > 2 and len(second) <= 2:
            return ["Y", "D"]
        if len(second) > 2 and len(first) <= 2:
            return ["D", "Y"]
        if len(first) <= 2 and len(second) <= 2:
            return [f for f in order.fields if f != "M"]
        return None
    return list(order.fields)


def _directive(field: str, digits: str) -> str | None:
    if field == "Y":
        return {4: "%Y", 2: "%y"}.get(len(digits))
    code = "m" if field == "M" else "d"
    return {2: f"%{code}", 1: f"%-{code}"}.get(len(digits))


def _candidate(pieces: list[_Piece], numbers: list[str], order: FieldOrder) -> str | None:
    """Build the date pattern for one field order."""
    named = any(p.kind == "directive" and p.text in ("B", "b") for p in pieces)

    if not named and len(numbers) == 1:
        codes = {"Y": "%Y" if len(numbers[0]) == 8 else "%y", "M": "%m", "D": "%d"}
        compact = "".join(codes[field] for field in order.fields)
        return "".join(
            compact if p.kind == "number" else _render(p) for p in pieces
        )

    letters = _assign(numbers, named, order)
    if letters is None:
        return None
    out: list[str] = []
    index = 0
    for piece in pieces:
        if piece.kind == "number":
            code = _directive(letters[index], piece.text)
            if code is None:
                return None
            out.append(code)
            index += 1
        else:
            out.append(_render(piece))
    return "".join(out)


def _render(piece: _Piece) -> str:
    if piece.kind == "directive":
        return f"%{piece.text}"
    return _escape(piece.text)


def infer_pattern(
    example: str,
    orders: Iterable[FieldOrder | str] = DEFAULT_ORDERS,
    options: ParseOptions | None = None,
) -> InferredPattern:
    """Work out the token pattern behind a worked example.

    Field orders are tried in the order given; the first whose reading of
    the example is a valid civil date wins.

    Args:
        example: A date, optionally with a time of day and a trailing
            numeric offset ("+0530").
        orders: Candidate field orders, highest priority first.
        options: Pivot policy for examples with a two-digit year.

    Returns:
        InferredPattern with the pattern and the example read through it.

    Raises:
        FormatMismatch: If the example has an unknown word, a date shape
            the inference does not handle, or no order reads it as a date.
        AmbiguousDate: If the example has a two-digit year and ``options``
            has no pivot policy.

    Examples:
        >>> infer_pattern("12/25/2020").pattern
        '%m/%d/%Y'
        >>> infer_pattern("25/12/2020").pattern_id
        'numeric_slash:DMY'
        >>> infer_pattern("Sat, Mar 7, 2020 2:05 pm").pattern
        '%a, %b %-d, %Y %-I:%M %P'
    """
    # Imported here to avoid a circular import with civiltime.format.
    from civiltime.format.pattern import parse_with_pattern

    text = example.strip()
    date_text, time_text = text, ""
    time_match = _TIME_PATTERN.search(text)
    if time_match is not None:
        date_text = text[: time_match.start()]
        time_text = _time_pattern(time_match)
        tail = text[time_match.end() :]
        offset = _OFFSET_TAIL.fullmatch(tail)
        if offset is not None:
            time_text += _escape(offset.group("gap")) + "%z"
        elif tail.strip():
            raise FormatMismatch(f"cannot read {tail.strip()!r} after the time in {example!r}")

    pieces = _date_pieces(date_text, example)
    numbers = [p.text for p in pieces if p.kind == "number"]
    named = any(p.kind == "directive" and p.text in ("B", "b") for p in pieces)
    if named and len(numbers) != 2:
        raise FormatMismatch(f"expected a day and a year beside the month name in {example!r}")
    if not named and not (
        len(numbers) == 3 or (len(numbers) == 1 and len(numbers[0]) in (6, 8))
    ):
        raise FormatMismatch(f"cannot find a year, month and day in {example!r}")

    shape = _shape(pieces, numbers)
    tried: list[str] = []
    for order in (FieldOrder.parse(o) for o in orders):
        tried.append(order.value)
        date_pattern = _candidate(pieces, numbers, order)
        if date_pattern is None:
            continue
        pattern = date_pattern + time_text
        try:
            fields = parse_with_pattern(text, pattern, options)
        except (InvalidCivilDate, FormatMismatch):
            continue
        pattern_id = f"{shape}:{order.value}"
        logger.debug("inferred %r from %r (%s)", pattern, example, pattern_id)
        return InferredPattern(pattern_id, pattern, fields, order)

    raise FormatMismatch(
        f"no field order in {', '.join(tried)} reads {example!r} as a valid date"
    )


__all__ = ["InferredPattern", "infer_pattern"]
