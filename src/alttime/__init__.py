"""Main Module Documentation.

The top-level module is documented below, which mainly serves as a command line entry point for
converting and scaling magnitudes between the alternate and standard time scales.
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from .scale.clock import AltClock
    from .scale.units import DurationUnit

__version__ = "1.0.0"


def runConversion(
    value: int | None,
    source_scale: str = "std",
    mode: str = "convert",
    unit: DurationUnit | None = None,
    clock: AltClock | None = None,
) -> int:
    """Scale or convert a magnitude from `source_scale` into the other scale's milliseconds.

    Args:
        value (``int`` | ``None``): count of `unit` in `source_scale`. ``None`` reads the current
            time from `clock` instead, which is only meaningful for ``mode="convert"``. With
            ``source_scale="alt"`` the reading is the clock's alt time, truncated to whole alt
            milliseconds, so the standard result lags the true standard time by up to 86 ms.
        source_scale (``str``, optional): ``"alt"`` or ``"std"``. Defaults to ``"std"``.
        mode (``str``, optional): ``"scale"`` for durations, ``"convert"`` for absolute instants.
            Defaults to ``"convert"``.
        unit (:class:`.DurationUnit`, optional): unit `value` is counted in. Defaults to
            :data:`.MILLISECOND`.
        clock (:class:`.AltClock`, optional): clock read when `value` is ``None``. Defaults to a
            clock over the system time.

    Raises:
        ValueError: if `mode` or `source_scale` is unknown, or if the clock is read in scale mode.
        TimeOverflowError: if any step leaves the 64-bit range.

    Returns:
        ``int``: the resulting magnitude, in milliseconds of the other scale.
    """
    # Local Imports
    from .scale.clock import AltClock
    from .scale.conversions import convertAltToStd, convertStdToAlt, scaleAltToStd, scaleStdToAlt
    from .scale.maths import checkedMultiply
    from .scale.units import MILLISECOND, Scale

    scale = Scale(source_scale)
    operations = {
        ("scale", Scale.ALT): scaleAltToStd,
        ("scale", Scale.STD): scaleStdToAlt,
        ("convert", Scale.ALT): convertAltToStd,
        ("convert", Scale.STD): convertStdToAlt,
    }
    if (mode, scale) not in operations:
        raise ValueError(f"Unknown conversion mode: {mode!r}")

    if value is None:
        if mode != "convert":
            raise ValueError("The current clock reading is an absolute instant, use 'convert' mode")
        if clock is None:
            clock = AltClock()
        magnitude = clock.standardMillis() if scale is Scale.STD else clock.currentTimeMillis()

    else:
        if unit is None:
            unit = MILLISECOND
        magnitude = checkedMultiply(value, unit.magnitude(scale))

    return operations[(mode, scale)](magnitude)


def main() -> None:
    """alttime main entry point.

    This is the function that the :command:`alttime` command points to. See :mod:`.cli` for
    details on what command line options are available.
    """
    # Local Imports
    from .common.cli import getCommandLineParser
    from .common.exceptions import TimeOverflowError
    from .common.logger import ROOT_LOGGER_NAME, Logger

    # Parse command line arguments and pass them to runConversion
    parser = getCommandLineParser()
    cli_args = parser.parse_args()
    logger = Logger(ROOT_LOGGER_NAME)

    try:
        result = runConversion(
            cli_args.value,
            source_scale=cli_args.source_scale,
            mode=cli_args.mode,
            unit=cli_args.unit,
        )
    except TimeOverflowError as err:
        logger.error(f"Conversion overflowed: {err}")
        raise SystemExit(1) from err
    except ValueError as err:
        parser.error(str(err))

    print(result)
