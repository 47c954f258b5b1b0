"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# alttime Imports
from alttime.scale.constants import INT64_MAX, INT64_MIN

# Common 64-bit boundary values
I64_MAX: int = INT64_MAX
I64_MIN: int = INT64_MIN

# Fixed clock readings, in standard milliseconds since the standard epoch
ALT_ZERO_STD_MILLIS: int = 946_684_800_000
"""``int``: 2000-01-01T00:00Z, the alt zero point, as a standard reading."""

ONE_DAY_AFTER_ALT_ZERO_STD_MILLIS: int = ALT_ZERO_STD_MILLIS + 86_400_000
"""``int``: one standard day after the alt zero point."""
