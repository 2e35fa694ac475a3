"""Stamp: format by example.

Show a Stamp one worked example of the output you want and it prints any
instant the same way, and reads strings of that shape back.

Examples:
    >>> from civiltime.core.civil import CivilFields
    >>> s = stamp("Saturday, March 7, 2020")
    >>> s.pattern
    '%A, %B %-d, %Y'
    >>> s.format_fields(CivilFields(2021, 12, 25))
    'Saturday, December 25, 2021'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from civiltime.format.pattern import (
    format_fields,
    format_instant,
    parse_instant_with_pattern,
    parse_with_pattern,
)
from civiltime.parse.infer import InferredPattern, infer_pattern
from civiltime.parse.options import DEFAULT_ORDERS, FieldOrder, ParseOptions

if TYPE_CHECKING:
    from civiltime.core.civil import CivilFields
    from civiltime.core.instant import Instant
    from civiltime.core.zoned import ZonedInstant
    from civiltime.zones.timezone import TimeZone


class Stamp:
    """A pattern inferred from an example, reusable in both directions.

    Attributes:
        example: The example the pattern was inferred from.
        pattern: The inferred token pattern.
        pattern_id: Which inference rule fired, e.g. "month_name:MDY".
        order: The field order the example was read under.
    """

    __slots__ = ("_example", "_inferred", "_options")

    def __init__(
        self,
        example: str,
        orders: Iterable[FieldOrder | str] = DEFAULT_ORDERS,
        options: ParseOptions | None = None,
    ) -> None:
        """Infer the pattern behind ``example``.

        Raises:
            FormatMismatch: If no pattern can be inferred.
            AmbiguousDate: If the example has a two-digit year and
                ``options`` has no pivot policy.
        """
        self._example = example
        self._options = options
        self._inferred: InferredPattern = infer_pattern(example, tuple(orders), options)

    @property
    def example(self) -> str:
        return self._example

    @property
    def pattern(self) -> str:
        return self._inferred.pattern

    @property
    def pattern_id(self) -> str:
        return self._inferred.pattern_id

    @property
    def order(self) -> FieldOrder:
        return self._inferred.order

    @property
    def example_fields(self) -> CivilFields:
        """The example read back through the inferred pattern."""
        return self._inferred.fields

    def format(
        self,
        value: Instant | ZonedInstant,
        zone: TimeZone | str | None = None,
    ) -> str:
        """Print ``value`` in the example's shape.

        A ZonedInstant is printed in its own zone unless ``zone`` is given;
        a bare Instant is printed in ``zone`` (UTC if None).
        """
        from civiltime.core.zoned import ZonedInstant

        if isinstance(value, ZonedInstant):
            return format_instant(value.instant, zone or value.zone, self.pattern)
        return format_instant(value, zone, self.pattern)

    def format_fields(self, fields: CivilFields) -> str:
        """Print bare civil fields in the example's shape."""
        return format_fields(fields, self.pattern)

    def parse(self, text: str) -> CivilFields:
        """Read a string of the example's shape back into civil fields."""
        return parse_with_pattern(text, self.pattern, self._options)

    def parse_instant(self, text: str, zone: TimeZone | str | None = None) -> Instant:
        """Read a string of the example's shape and resolve it in ``zone``."""
        return parse_instant_with_pattern(text, self.pattern, zone, self._options)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stamp):
            return NotImplemented
        return self.pattern == other.pattern

    def __hash__(self) -> int:
        return hash(("Stamp", self.pattern))

    def __repr__(self) -> str:
        return f"Stamp({self._example!r}, pattern={self.pattern!r})"


def stamp(
    example: str,
    orders: Iterable[FieldOrder | str] = DEFAULT_ORDERS,
    options: ParseOptions | None = None,
) -> Stamp:
    """Build a Stamp from a worked example."""
    return Stamp(example, orders, options)


__all__ = ["Stamp", "stamp"]
