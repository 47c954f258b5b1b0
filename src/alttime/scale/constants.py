"""Fixed constants relating the alternate and standard time scales.

Constants specific to a single class remain in that class' module.
"""

from __future__ import annotations

# Third Party Imports
from numpy import iinfo, int64

# 64-bit range every checked operation is held to
INT64_MIN: int = int(iinfo(int64).min)
INT64_MAX: int = int(iinfo(int64).max)

STD_PER_ALT_NUMERATOR: int = 432
"""``int``: numerator of the standard-per-alt ratio, one alt millisecond is 86.4 standard milliseconds."""

STD_PER_ALT_DENOMINATOR: int = 5
"""``int``: denominator of the standard-per-alt ratio."""

EPOCH_OFFSET_MILLIS: int = 946_684_800_000
"""``int``: standard milliseconds from the standard epoch (1970-01-01T00:00Z) to the alt zero point (2000-01-01T00:00Z)."""

# Sub-second conversion constants
MILLIS_PER_SECOND: int = 1_000
MICROS_PER_SECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MILLI: int = 1_000_000
NANOS_PER_MICRO: int = 1_000
