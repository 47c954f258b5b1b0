"""Defines the mutable :class:`.EpochDate` wrapper around a milliseconds magnitude."""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Local Imports
from .instant import Instant
from .maths import checkInt64

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from .clock import AltClock


class EpochDate:
    """Mutable holder of milliseconds since a scale's zero point.

    Comparison, equality, and hashing depend only on the stored magnitude. Arithmetic belongs to
    :class:`.Instant`; convert with :meth:`.toInstant` and :meth:`.fromInstant`.
    """

    def __init__(self, milliseconds: int = 0):
        """Construct an `EpochDate` object.

        Args:
            milliseconds (``int``, optional): milliseconds since the zero point. Defaults to 0.
        """
        self._milliseconds = checkInt64(milliseconds)

    @classmethod
    def epoch(cls) -> EpochDate:
        """Return a new wrapper at the scale's zero point."""
        return cls(0)

    @classmethod
    def now(cls, clock: AltClock) -> EpochDate:
        """Return a new wrapper holding the current alt time read from `clock`."""
        return cls(clock.currentTimeMillis())

    @classmethod
    def fromInstant(cls, instant: Instant) -> EpochDate:
        """Return a new wrapper holding the millisecond value of `instant`.

        Raises:
            TimeOverflowError: if `instant` has no 64-bit millisecond value.
        """
        return cls(instant.asMillis())

    def toInstant(self) -> Instant:
        """Return the :class:`.Instant` equivalent of this date."""
        return Instant.fromMillis(self._milliseconds)

    def getTime(self) -> int:
        """Return the stored milliseconds."""
        return self._milliseconds

    def setTime(self, milliseconds: int) -> None:
        """Replace the stored milliseconds."""
        self._milliseconds = checkInt64(milliseconds)

    def copy(self) -> EpochDate:
        """Return an independent wrapper with the same magnitude."""
        return EpochDate(self._milliseconds)

    def before(self, when: EpochDate) -> bool:
        """Return whether this date is strictly earlier than `when`."""
        return self._milliseconds < when.getTime()

    def after(self, when: EpochDate) -> bool:
        """Return whether this date is strictly later than `when`."""
        return self._milliseconds > when.getTime()

    def compareTo(self, other: EpochDate) -> int:
        """Compare with `other`, returning -1, 0, or 1."""
        mine, theirs = self._milliseconds, other.getTime()
        return (mine > theirs) - (mine < theirs)

    def __eq__(self, other):
        """."""
        if not isinstance(other, EpochDate):
            return NotImplemented
        return self._milliseconds == other.getTime()

    def __lt__(self, other):
        """."""
        if not isinstance(other, EpochDate):
            return NotImplemented
        return self.before(other)

    def __le__(self, other):
        """."""
        if not isinstance(other, EpochDate):
            return NotImplemented
        return not self.after(other)

    def __gt__(self, other):
        """."""
        if not isinstance(other, EpochDate):
            return NotImplemented
        return self.after(other)

    def __ge__(self, other):
        """."""
        if not isinstance(other, EpochDate):
            return NotImplemented
        return not self.before(other)

    def __hash__(self):
        """Hash on the stored magnitude only."""
        return hash(self._milliseconds)

    def __repr__(self):
        """Return a string representation of this :class:`.EpochDate`."""
        return f"EpochDate({self._milliseconds} ms)"

    def __str__(self):
        """Return the stored magnitude as a plain integer string."""
        return str(self._milliseconds)
