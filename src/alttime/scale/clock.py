"""Defines the :class:`.AltClock` adapter that reads an injected standard-time clock.

The core value types never read a clock. This module is the single seam where a standard-time
reading enters the package: the reading is converted (absolute wall-clock values) or scaled
(monotonic counters) into alt time before any :class:`.Instant` is built from it.
"""

from __future__ import annotations

# Standard Library Imports
import logging
import time
from typing import TYPE_CHECKING

# Local Imports
from ..common.exceptions import TimeOverflowError
from ..common.logger import ROOT_LOGGER_NAME
from .constants import NANOS_PER_MILLI
from .conversions import convertStdToAlt, scaleStdToAlt
from .instant import Instant

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable


def systemTimeMillis() -> int:
    """Return the wall-clock time in standard milliseconds since the standard epoch."""
    return time.time_ns() // NANOS_PER_MILLI


def systemNanoTime() -> int:
    """Return a monotonic counter in standard nanoseconds with an arbitrary origin."""
    return time.monotonic_ns()


class AltClock:
    """Reads an injected standard-time clock and reports the reading in alt time.

    Both sources are zero-argument callables returning signed 64-bit integers. The millisecond
    source has wall-clock semantics and need not be monotonic.
    """

    def __init__(
        self,
        millis_source: Callable[[], int] = systemTimeMillis,
        nanos_source: Callable[[], int] = systemNanoTime,
    ) -> None:
        """Construct an `AltClock` object.

        Args:
            millis_source (``callable``, optional): standard milliseconds since the standard epoch.
                Defaults to :func:`.systemTimeMillis`.
            nanos_source (``callable``, optional): standard nanosecond counter.
                Defaults to :func:`.systemNanoTime`.
        """
        self._millis_source = millis_source
        self._nanos_source = nanos_source
        self.logger = logging.getLogger(ROOT_LOGGER_NAME)

    def standardMillis(self) -> int:
        """Return the raw reading of the millisecond source, in standard milliseconds."""
        return self._millis_source()

    def currentTimeMillis(self) -> int:
        """Return the current time in alt milliseconds since the alt zero point.

        Raises:
            TimeOverflowError: if the standard reading cannot be converted.
        """
        std_millis = self.standardMillis()
        try:
            return convertStdToAlt(std_millis)
        except TimeOverflowError:
            self.logger.error(f"Clock reading {std_millis} cannot be converted to alt time")
            raise

    def nanoTime(self) -> int:
        """Return the nanosecond counter scaled into alt nanoseconds.

        The counter has no fixed origin, so it is scaled rather than converted; only differences
        between two readings are meaningful.
        """
        return scaleStdToAlt(self._nanos_source())

    def instant(self) -> Instant:
        """Return the current alt-time :class:`.Instant`."""
        alt_millis = self.currentTimeMillis()
        self.logger.debug(f"Alt clock reading: {alt_millis} alt ms")
        return Instant.fromMillis(alt_millis)
