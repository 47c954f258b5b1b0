"""Helper functions that relate magnitudes between the alternate and standard time scales.

There are two distinct operations, and they are not interchangeable:

* **Scaling** multiplies a magnitude by the fixed ratio between the scales. Zero always maps to
  zero, so scaling is the correct operation for *durations* (differences, spans, counters).
* **Conversion** scales and then shifts by the fixed offset between the two scales' zero points.
  It is the correct operation for *absolute instants* only.

Applying conversion to a duration adds the epoch offset where none belongs, and applying scaling
to an absolute instant drops it. Every function here names which of the two it performs.

All functions accept and return signed 64-bit integer milliseconds (or any finer unit, since
scaling is unit-independent) and raise :class:`.TimeOverflowError` rather than wrapping.
Division in the scaling step truncates toward zero, so ``scaleStdToAlt(scaleAltToStd(x))`` may
differ from ``x`` by one unit, and negative magnitudes round toward zero as well.
"""

from __future__ import annotations

# Local Imports
from .constants import EPOCH_OFFSET_MILLIS, STD_PER_ALT_DENOMINATOR, STD_PER_ALT_NUMERATOR
from .maths import checkedAdd, checkedMultiply, checkedSubtract, truncDiv


def scaleAltToStd(alt_value: int) -> int:
    """Scale, not convert, an alt-time magnitude into standard time.

    Args:
        alt_value (``int``): duration in alt milliseconds (or any finer alt unit).

    Raises:
        TimeOverflowError: if the intermediate product leaves the 64-bit range.

    Returns:
        ``int``: equivalent duration in standard units, truncated toward zero.
    """
    return truncDiv(checkedMultiply(alt_value, STD_PER_ALT_NUMERATOR), STD_PER_ALT_DENOMINATOR)


def scaleStdToAlt(std_value: int) -> int:
    """Scale, not convert, a standard-time magnitude into alt time.

    Args:
        std_value (``int``): duration in standard milliseconds (or any finer standard unit).

    Raises:
        TimeOverflowError: if the intermediate product leaves the 64-bit range.

    Returns:
        ``int``: equivalent duration in alt units, truncated toward zero.
    """
    return truncDiv(checkedMultiply(std_value, STD_PER_ALT_DENOMINATOR), STD_PER_ALT_NUMERATOR)


def convertAltToStd(alt_millis: int) -> int:
    """Convert an absolute alt-time instant into standard milliseconds since the standard epoch.

    The magnitude is scaled first and then shifted by :data:`.EPOCH_OFFSET_MILLIS`, so the alt
    zero point maps to the offset itself, never to zero.

    Args:
        alt_millis (``int``): alt milliseconds since the alt zero point.

    Raises:
        TimeOverflowError: if either the scaling or the offset addition overflows.

    Returns:
        ``int``: standard milliseconds since the standard epoch.
    """
    return checkedAdd(scaleAltToStd(alt_millis), EPOCH_OFFSET_MILLIS)


def convertStdToAlt(std_millis: int) -> int:
    """Convert an absolute standard-time instant into alt milliseconds since the alt zero point.

    The inverse of :func:`.convertAltToStd`: the offset is removed first, then the remainder is
    scaled.

    Args:
        std_millis (``int``): standard milliseconds since the standard epoch.

    Raises:
        TimeOverflowError: if either the offset subtraction or the scaling overflows.

    Returns:
        ``int``: alt milliseconds since the alt zero point.
    """
    return scaleStdToAlt(checkedSubtract(std_millis, EPOCH_OFFSET_MILLIS))
