"""Defines the named :class:`.DurationUnit` table and the :class:`.Scale` enumeration.

Each unit stores two independent magnitudes: its size in alt milliseconds and its size in
standard milliseconds. The alt column is purely decimal; the standard column uses conventional
lengths (a 30-day month, a 365-day year). The columns are independent of each other and do not
share a common ratio. The only anchor relating the scales is that one alt day elapses in exactly
one standard day.

The table columns answer "how long is this named unit in each scale's own subdivision". The
:meth:`.DurationUnit.equivalentStandard` and :meth:`.DurationUnit.equivalentAlt` methods answer a
different question, "how much of the other scale elapses during this unit", and therefore go
through :mod:`.conversions` scaling instead of reading the other column.
"""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass
from enum import Enum

# Local Imports
from ..common.exceptions import UnknownUnitError
from .conversions import scaleAltToStd, scaleStdToAlt


class Scale(str, Enum):
    """Enumeration of the two time scales a magnitude may be expressed in."""

    ALT = "alt"
    STD = "std"

    @property
    def other(self) -> Scale:
        """:class:`.Scale`: the opposite scale."""
        return Scale.STD if self is Scale.ALT else Scale.ALT


@dataclass(frozen=True)
class DurationUnit:
    """Named magnitude with a fixed size in each scale."""

    name: str
    """str: lower-case unit name used for lookups."""

    alt_value: int
    """int: size of one unit in alt milliseconds."""

    std_value: int
    """int: size of one unit in standard milliseconds."""

    def altMagnitude(self) -> int:
        """Return the size of this unit in alt milliseconds."""
        return self.alt_value

    def stdMagnitude(self) -> int:
        """Return the size of this unit in standard milliseconds."""
        return self.std_value

    def magnitude(self, scale: Scale) -> int:
        """Return the size of this unit in the milliseconds of `scale`.

        Args:
            scale (:class:`.Scale`): scale the unit is read in.

        Returns:
            ``int``: :meth:`.altMagnitude` or :meth:`.stdMagnitude`.
        """
        if Scale(scale) is Scale.ALT:
            return self.alt_value
        return self.std_value

    def equivalentStandard(self) -> int:
        """Return how many standard milliseconds elapse during one alt unit of this name.

        Raises:
            TimeOverflowError: if scaling overflows.
        """
        return scaleAltToStd(self.alt_value)

    def equivalentAlt(self) -> int:
        """Return how many alt milliseconds elapse during one standard unit of this name.

        Raises:
            TimeOverflowError: if scaling overflows.
        """
        return scaleStdToAlt(self.std_value)

    def __repr__(self) -> str:
        """Return a string representation of this :class:`.DurationUnit`."""
        return f"DurationUnit({self.name}, alt={self.alt_value}, std={self.std_value})"


MILLENNIUM = DurationUnit("millennium", 1_000_000_000_000, 31_536_000_000_000)
CENTURY = DurationUnit("century", 100_000_000_000, 3_153_600_000_000)
DECADE = DurationUnit("decade", 10_000_000_000, 315_360_000_000)
YEAR = DurationUnit("year", 1_000_000_000, 31_536_000_000)
MONTH = DurationUnit("month", 100_000_000, 2_592_000_000)
WEEK = DurationUnit("week", 10_000_000, 604_800_000)
DAY = DurationUnit("day", 1_000_000, 86_400_000)
HOUR = DurationUnit("hour", 100_000, 3_600_000)
MINUTE = DurationUnit("minute", 10_000, 60_000)
SECOND = DurationUnit("second", 1_000, 1_000)
MILLISECOND = DurationUnit("millisecond", 1, 1)

DURATION_UNITS: tuple[DurationUnit, ...] = (
    MILLENNIUM,
    CENTURY,
    DECADE,
    YEAR,
    MONTH,
    WEEK,
    DAY,
    HOUR,
    MINUTE,
    SECOND,
    MILLISECOND,
)
"""``tuple``: every :class:`.DurationUnit`, largest first."""

_UNITS_BY_NAME: dict[str, DurationUnit] = {unit.name: unit for unit in DURATION_UNITS}


def getDurationUnit(name: str) -> DurationUnit:
    """Look up a :class:`.DurationUnit` by its name, ignoring case and surrounding whitespace.

    Args:
        name (``str``): unit name, e.g. ``"Day"`` or ``"millisecond"``.

    Raises:
        UnknownUnitError: if no unit has that name.

    Returns:
        :class:`.DurationUnit`: the matching table entry.
    """
    try:
        return _UNITS_BY_NAME[name.strip().lower()]
    except KeyError as err:
        valid = ", ".join(_UNITS_BY_NAME)
        raise UnknownUnitError(f"Unknown duration unit {name!r}, expected one of: {valid}") from err
