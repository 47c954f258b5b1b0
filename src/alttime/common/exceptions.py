"""Contains all the custom-defined exceptions used in alttime."""

from __future__ import annotations


class TimeOverflowError(OverflowError):
    """Exception indicating a checked time calculation left the signed 64-bit range.

    This is the single arithmetic failure raised by :mod:`alttime.scale`. It is never
    caught, logged, or clamped internally; callers decide whether to clamp, truncate, or abort.
    """


class UnknownUnitError(ValueError):
    """Exception indicating a :class:`.DurationUnit` name lookup did not match any unit."""
