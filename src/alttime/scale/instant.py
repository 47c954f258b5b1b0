"""Defines the immutable :class:`.Instant` value type.

An :class:`.Instant` is a precise point in a single time scale, stored as a coarse count of that
scale's seconds plus a fine nanosecond adjustment. The adjustment is always normalized into
``[0, 1_000_000_000)`` with floor semantics, so a point one nanosecond before the epoch is
``Instant(seconds=-1, adjustment=999_999_999)``, never ``Instant(seconds=0, adjustment=-1)``.

An :class:`.Instant` does not record which scale it belongs to. Callers obtain a raw magnitude in
the scale they want (see :class:`.AltClock` for the alt-time adapter) and keep instants of
different scales apart themselves.

.. code-block:: python

    before = Instant.fromSeconds(0, -1)
    assert (before.seconds, before.adjustment) == (-1, 999_999_999)
    assert Instant.fromMillis(5000).asMillis() == 5000
    assert before < EPOCH
"""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass

# Local Imports
from .constants import (
    MICROS_PER_SECOND,
    MILLIS_PER_SECOND,
    NANOS_PER_MICRO,
    NANOS_PER_MILLI,
    NANOS_PER_SECOND,
)
from .maths import checkedAdd, checkedMultiply, checkInt64, floorDiv, floorMod


@dataclass(frozen=True, order=True)
class Instant:
    """Precise point in time, ordered by `seconds` then `adjustment`.

    Use the ``from*`` factories rather than the constructor; the constructor only accepts an
    already-normalized pair and raises ``ValueError`` otherwise.
    """

    seconds: int
    """int: coarse component, signed 64-bit count of the scale's seconds."""

    adjustment: int
    """int: fine component, nanoseconds in ``[0, 1_000_000_000)``."""

    def __post_init__(self):
        """Validate the normalized pair."""
        checkInt64(self.seconds)
        if isinstance(self.adjustment, bool) or not isinstance(self.adjustment, int):
            raise TypeError(f"Instant adjustment must be an int, got {type(self.adjustment).__name__}")
        if not 0 <= self.adjustment < NANOS_PER_SECOND:
            raise ValueError(f"Instant adjustment must be in [0, {NANOS_PER_SECOND}), got {self.adjustment}")

    @classmethod
    def fromSeconds(cls, seconds: int, adjustment: int | None = None) -> Instant:
        """Create an :class:`.Instant` from a seconds count and an optional nanosecond adjustment.

        Args:
            seconds (``int``): seconds since the scale's zero point.
            adjustment (``int``, optional): nanoseconds to add, of any sign and size. It is
                folded into `seconds` with floor division.

        Raises:
            TimeOverflowError: if the carry from `adjustment` pushes `seconds` out of range.

        Returns:
            :class:`.Instant`: the normalized instant.
        """
        checkInt64(seconds)
        if adjustment is None:
            return cls(seconds, 0)

        checkInt64(adjustment)
        return cls(
            checkedAdd(seconds, floorDiv(adjustment, NANOS_PER_SECOND)),
            floorMod(adjustment, NANOS_PER_SECOND),
        )

    @classmethod
    def fromMillis(cls, millis: int, nano_adjustment: int | None = None) -> Instant:
        """Create an :class:`.Instant` from a milliseconds count and an optional nanosecond adjustment.

        Args:
            millis (``int``): milliseconds since the scale's zero point.
            nano_adjustment (``int``, optional): extra nanoseconds, of any sign and size.

        Raises:
            TimeOverflowError: if `nano_adjustment` is outside the 64-bit range, or if its carry
                pushes the seconds out of range.

        Returns:
            :class:`.Instant`: the normalized instant.
        """
        checkInt64(millis)
        seconds = floorDiv(millis, MILLIS_PER_SECOND)
        sub_second_nanos = floorMod(millis, MILLIS_PER_SECOND) * NANOS_PER_MILLI
        if nano_adjustment is None:
            return cls(seconds, sub_second_nanos)

        checkInt64(nano_adjustment)
        seconds = checkedAdd(seconds, floorDiv(nano_adjustment, NANOS_PER_SECOND))
        # Both remainders are below one second, so their sum is below two seconds
        return cls.fromSeconds(seconds, sub_second_nanos + floorMod(nano_adjustment, NANOS_PER_SECOND))

    @classmethod
    def fromNanos(cls, nanos: int) -> Instant:
        """Create an :class:`.Instant` from a nanoseconds count; never overflows for 64-bit input."""
        return cls.fromSeconds(0, nanos)

    def asMillis(self) -> int:
        """Return this instant as whole milliseconds, rounded toward negative infinity.

        Raises:
            TimeOverflowError: if the result does not fit in 64 bits.
        """
        return self._derive(MILLIS_PER_SECOND, NANOS_PER_MILLI)

    def asMicros(self) -> int:
        """Return this instant as whole microseconds, rounded toward negative infinity.

        Raises:
            TimeOverflowError: if the result does not fit in 64 bits.
        """
        return self._derive(MICROS_PER_SECOND, NANOS_PER_MICRO)

    def asNanos(self) -> int:
        """Return this instant as nanoseconds.

        Raises:
            TimeOverflowError: if the result does not fit in 64 bits.
        """
        return self._derive(NANOS_PER_SECOND, 1)

    def _derive(self, factor: int, divisor: int) -> int:
        """Compute ``seconds * factor + adjustment // divisor`` with checked arithmetic.

        For a negative `seconds` with a non-zero adjustment, one second is borrowed before the
        multiplication. The result is the same, but instants near the bottom of the range whose
        value fits in 64 bits no longer overflow in the intermediate product.
        """
        if self.seconds < 0 and self.adjustment > 0:
            scaled = checkedMultiply(self.seconds + 1, factor)
            return checkedAdd(scaled, self.adjustment // divisor - factor)
        return checkedAdd(checkedMultiply(self.seconds, factor), self.adjustment // divisor)

    def plusSeconds(self, seconds: int) -> Instant:
        """Return a copy of this instant shifted by `seconds`.

        Raises:
            TimeOverflowError: if the shifted instant is out of range.
        """
        return self._plus(checkInt64(seconds), 0)

    def plusMillis(self, millis: int) -> Instant:
        """Return a copy of this instant shifted by `millis`.

        Raises:
            TimeOverflowError: if the shifted instant is out of range.
        """
        checkInt64(millis)
        return self._plus(
            floorDiv(millis, MILLIS_PER_SECOND),
            floorMod(millis, MILLIS_PER_SECOND) * NANOS_PER_MILLI,
        )

    def plusNanos(self, nanos: int) -> Instant:
        """Return a copy of this instant shifted by `nanos`.

        Raises:
            TimeOverflowError: if the shifted instant is out of range.
        """
        return self._plus(0, checkInt64(nanos))

    def _plus(self, seconds_to_add: int, nanos_to_add: int) -> Instant:
        """Shift by a seconds count and a nanosecond count, both already 64-bit."""
        if seconds_to_add == 0 and nanos_to_add == 0:
            return self

        epoch_seconds = checkedAdd(self.seconds, seconds_to_add)
        epoch_seconds = checkedAdd(epoch_seconds, floorDiv(nanos_to_add, NANOS_PER_SECOND))
        # Both terms are below one second, so their sum cannot leave the 64-bit range
        return Instant.fromSeconds(epoch_seconds, self.adjustment + floorMod(nanos_to_add, NANOS_PER_SECOND))

    def compareTo(self, other: Instant) -> int:
        """Compare with `other`, returning -1, 0, or 1.

        Raises:
            TypeError: if `other` is not an :class:`.Instant`.
        """
        if not isinstance(other, Instant):
            raise TypeError(f"Cannot compare Instant with {type(other).__name__}")
        mine = (self.seconds, self.adjustment)
        theirs = (other.seconds, other.adjustment)
        return (mine > theirs) - (mine < theirs)


EPOCH: Instant = Instant(0, 0)
""":class:`.Instant`: zero point of a scale, ``seconds = 0`` and ``adjustment = 0``."""
