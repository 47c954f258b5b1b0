"""Overflow-checked integer arithmetic held to the signed 64-bit range.

Python integers never wrap, so every operation here computes the exact result and then checks
it against :data:`.INT64_MIN` and :data:`.INT64_MAX`. A result outside that range raises
:class:`.TimeOverflowError` instead of being truncated or wrapped.
"""

from __future__ import annotations

# Local Imports
from ..common.exceptions import TimeOverflowError
from .constants import INT64_MAX, INT64_MIN


def checkInt64(value: int) -> int:
    """Ensure `value` is an integer inside the signed 64-bit range.

    Args:
        value (``int``): value to validate.

    Raises:
        TypeError: if `value` is not an ``int`` (``bool`` is rejected too).
        TimeOverflowError: if `value` lies outside the signed 64-bit range.

    Returns:
        ``int``: `value`, unchanged.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an integer time magnitude, got {type(value).__name__}")
    if value < INT64_MIN or value > INT64_MAX:
        raise TimeOverflowError(f"{value} exceeds the signed 64-bit range")
    return value


def checkedAdd(augend: int, addend: int) -> int:
    """Add two 64-bit integers, raising on overflow."""
    return checkInt64(checkInt64(augend) + checkInt64(addend))


def checkedSubtract(minuend: int, subtrahend: int) -> int:
    """Subtract two 64-bit integers, raising on overflow."""
    return checkInt64(checkInt64(minuend) - checkInt64(subtrahend))


def checkedMultiply(multiplicand: int, multiplier: int) -> int:
    """Multiply two 64-bit integers, raising on overflow."""
    return checkInt64(checkInt64(multiplicand) * checkInt64(multiplier))


def floorDiv(dividend: int, divisor: int) -> int:
    """Integer division rounded toward negative infinity.

    Note:
        The only input that can leave the 64-bit range is ``INT64_MIN // -1``, which no time
        calculation performs since every divisor used is a positive constant.
    """
    return dividend // divisor


def floorMod(dividend: int, divisor: int) -> int:
    """Remainder with the sign of `divisor`, pairing with :func:`.floorDiv`.

    For a positive `divisor` the result always lies in ``[0, divisor)``.
    """
    return dividend % divisor


def truncDiv(dividend: int, divisor: int) -> int:
    """Integer division rounded toward zero.

    Used by scaling so that ``truncDiv(-x, d) == -truncDiv(x, d)``; a negative duration scales to
    exactly the negation of the equivalent positive duration.
    """
    if divisor == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient
