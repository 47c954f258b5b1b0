"""Defines the :class:`.TimeSpan` accumulator of named durations."""

from __future__ import annotations

# Standard Library Imports
import logging

# Local Imports
from ..common.logger import ROOT_LOGGER_NAME
from .conversions import scaleAltToStd, scaleStdToAlt
from .date import EpochDate
from .instant import EPOCH, Instant
from .maths import checkedAdd, checkedMultiply, checkInt64
from .units import DurationUnit, Scale


class TimeSpan:
    """Timespan to which named durations may be added, in a single scale.

    Each :meth:`.add` reads the unit's magnitude in this span's scale, so adding a ``MONTH`` to an
    alt span adds ``10**8`` alt milliseconds while adding it to a standard span adds 30 standard
    days. The running total is held to 64 bits like every other magnitude.

    .. code-block:: python

        span = TimeSpan(Scale.ALT)
        span.add(DAY, 2)
        span.add(HOUR, -5)
        later = span.toInstant(start)
    """

    def __init__(self, scale: Scale = Scale.ALT):
        """Construct an empty `TimeSpan` object.

        Args:
            scale (:class:`.Scale`, optional): scale the named units are read in. Defaults to alt.
        """
        self.scale = Scale(scale)
        self._total_millis = 0
        self.logger = logging.getLogger(ROOT_LOGGER_NAME)

    def add(self, unit: DurationUnit, amount: int) -> None:
        """Add `amount` of `unit` to this span; use a negative `amount` to subtract.

        Args:
            unit (:class:`.DurationUnit`): named duration to add.
            amount (``int``): signed count of `unit`.

        Raises:
            TypeError: if `unit` is not a :class:`.DurationUnit`.
            TimeOverflowError: if the addition overflows; the span is left unchanged.
        """
        if not isinstance(unit, DurationUnit):
            raise TypeError(f"TimeSpan: expected a DurationUnit, got {type(unit).__name__}")
        delta = checkedMultiply(unit.magnitude(self.scale), checkInt64(amount))
        self._total_millis = checkedAdd(self._total_millis, delta)
        self.logger.debug(f"TimeSpan: added {amount} {unit.name} ({delta} {self.scale.value} ms)")

    def totalMillis(self) -> int:
        """Return the accumulated magnitude, in this span's scale's milliseconds."""
        return self._total_millis

    def toInstant(self, start: Instant = EPOCH) -> Instant:
        """Return `start` shifted by this span.

        Args:
            start (:class:`.Instant`, optional): starting point in this span's scale.
                Defaults to :data:`.EPOCH`.

        Raises:
            TimeOverflowError: if the shifted instant is out of range.
        """
        return start.plusMillis(self._total_millis)

    def toDate(self, start: EpochDate | None = None) -> EpochDate:
        """Return a new :class:`.EpochDate` at `start` shifted by this span.

        Args:
            start (:class:`.EpochDate`, optional): starting date in this span's scale.
                Defaults to the scale's zero point. `start` itself is not modified.

        Raises:
            TimeOverflowError: if the resulting date is out of range.
        """
        if start is None:
            start = EpochDate.epoch()
        return EpochDate.fromInstant(self.toInstant(start.toInstant()))

    def toStandard(self) -> TimeSpan:
        """Return a new span holding this span's duration scaled into standard time."""
        return self._rescaled(Scale.STD)

    def toAlt(self) -> TimeSpan:
        """Return a new span holding this span's duration scaled into alt time."""
        return self._rescaled(Scale.ALT)

    def _rescaled(self, target: Scale) -> TimeSpan:
        """Copy this span into `target`, scaling the total when `target` is the other scale."""
        span = TimeSpan(target)
        if target is self.scale.other:
            scaler = scaleAltToStd if self.scale is Scale.ALT else scaleStdToAlt
            span._total_millis = scaler(self._total_millis)
        else:
            span._total_millis = self._total_millis
        return span

    def __repr__(self):
        """Return a string representation of this :class:`.TimeSpan`."""
        return f"TimeSpan({self._total_millis} {self.scale.value} ms)"
