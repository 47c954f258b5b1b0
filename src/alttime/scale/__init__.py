"""Contains the alternate time scale: conversions, named units, and instant value types.

The functions and class API are deliberately small. Magnitudes are plain 64-bit integers, and the
two operations relating the scales are kept apart by name: *scaling* for durations and
*conversion* for absolute instants (see :mod:`.conversions`).
"""

# Local Imports
# forward-facing API import
from .clock import AltClock  # noqa: F401
from .conversions import convertAltToStd, convertStdToAlt, scaleAltToStd, scaleStdToAlt  # noqa: F401
from .date import EpochDate  # noqa: F401
from .instant import EPOCH, Instant  # noqa: F401
from .span import TimeSpan  # noqa: F401
from .units import DURATION_UNITS, DurationUnit, Scale, getDurationUnit  # noqa: F401
