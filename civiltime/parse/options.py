"""Configuration for the flexible parser.

Field order, the two-digit-year pivot and the other parser switches are
plain frozen values passed into each call; the parser keeps no state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from civiltime.errors import AmbiguousDate

if TYPE_CHECKING:
    from civiltime.clock import Clock


class FieldOrder(Enum):
    """Order of the year, month and day fields in a date string.

    Values:
        YMD: Year-Month-Day (ISO-like)
        MDY: Month-Day-Year (US convention)
        DMY: Day-Month-Year (European convention)
    """

    YMD = "YMD"
    MDY = "MDY"
    DMY = "DMY"

    @property
    def fields(self) -> tuple[str, str, str]:
        """The field letters in order, e.g. ("M", "D", "Y")."""
        a, b, c = self.value
        return (a, b, c)

    @classmethod
    def parse(cls, template: FieldOrder | str) -> FieldOrder:
        """Read a field-order template such as "Y-M-D", "m/d/y" or "DMY".

        Separators are ignored and letters are case-insensitive.

        Raises:
            ValueError: If the template does not name one of the orders.

        Examples:
            >>> FieldOrder.parse("m/d/y")
            <FieldOrder.MDY: 'MDY'>
        """
        if isinstance(template, FieldOrder):
            return template
        letters = "".join(c for c in template.upper() if c.isalpha())
        try:
            return cls(letters)
        except ValueError:
            raise ValueError(
                f"unknown field order {template!r}; expected one of "
                f"{', '.join(order.value for order in cls)}"
            ) from None


DEFAULT_ORDERS: tuple[FieldOrder, ...] = (FieldOrder.YMD, FieldOrder.MDY, FieldOrder.DMY)


@dataclass(frozen=True)
class PivotPolicy:
    """How a two-digit year picks its century.

    The resolved year is the one ending in those two digits that lies in
    ``[reference_year - window, reference_year - window + 100)``. With the
    default window of 50 that is ``[reference_year - 50, reference_year + 50)``.

    Attributes:
        reference_year: The year the window is centred on.
        window: How many years before ``reference_year`` the window starts.

    Examples:
        >>> policy = PivotPolicy(2020)
        >>> policy.resolve(97), policy.resolve(68), policy.resolve(70)
        (1997, 2068, 1970)
    """

    reference_year: int
    window: int = 50

    def __post_init__(self) -> None:
        if not 0 <= self.window <= 100:
            raise ValueError(f"pivot window must be in 0..100, got {self.window}")

    @classmethod
    def around(cls, clock: Clock | None = None, window: int = 50) -> PivotPolicy:
        """Build a policy centred on the current UTC year of ``clock``."""
        from civiltime.clock import system_clock
        from civiltime.convert.civil import to_civil

        now = (clock if clock is not None else system_clock()).now()
        return cls(to_civil(now).year, window)

    def resolve(self, two_digit_year: int) -> int:
        """Map 0-99 to a full year inside the window.

        Raises:
            ValueError: If the value is not in 0..99.
        """
        if not 0 <= two_digit_year <= 99:
            raise ValueError(f"two-digit year must be in 0..99, got {two_digit_year}")
        base = self.reference_year - self.window
        return base + (two_digit_year - base) % 100


@dataclass(frozen=True)
class ParseOptions:
    """Switches for the flexible parser.

    Attributes:
        pivot: Century policy for two-digit years. None means two-digit
            years are rejected with AmbiguousDate.
        allow_time: Whether a time-of-day suffix is accepted.
    """

    pivot: PivotPolicy | None = None
    allow_time: bool = True


def resolve_year(text: str, options: ParseOptions) -> int:
    """Turn the digits of a year field into a full year.

    Four digits are taken as written; two digits go through the pivot.

    Raises:
        AmbiguousDate: For a two-digit year with no pivot policy.
        ValueError: For any other width.
    """
    if len(text) == 4:
        return int(text)
    if len(text) == 2:
        if options.pivot is None:
            raise AmbiguousDate(
                f"two-digit year {text!r} needs a pivot policy to pick its century"
            )
        return options.pivot.resolve(int(text))
    raise ValueError(f"year must have 2 or 4 digits, got {text!r}")


__all__ = [
    "DEFAULT_ORDERS",
    "FieldOrder",
    "ParseOptions",
    "PivotPolicy",
    "resolve_year",
]
