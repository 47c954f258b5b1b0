"""Define the command line interface for the alttime conversion tool."""

from __future__ import annotations

# Standard Library Imports
import argparse

# Local Imports
from ..scale.units import getDurationUnit
from .behavioral_config import BehavioralConfig
from .exceptions import UnknownUnitError
from .logger import alttimeLogError

SCALE_CHOICES: tuple[str, ...] = ("alt", "std")
MODE_CHOICES: tuple[str, ...] = ("scale", "convert")


def unitChecker(name):
    """Checks for valid duration unit names passed to the CLI parser.

    Args:
        name (``str``): unit name given to CLI parser.

    Raises:
        argparse.ArgumentTypeError: if no unit has that name

    Returns:
        :class:`.DurationUnit`: the matching unit
    """
    try:
        return getDurationUnit(name)
    except UnknownUnitError as err:
        alttimeLogError("Bad unit name given to CLI")
        raise argparse.ArgumentTypeError(str(err)) from err


def getCommandLineParser():
    """Create parser for command line arguments.

    Returns:
        ``argparse.ArgumentParser``: valid parser object
    """
    config = BehavioralConfig.getConfig()
    parser = argparse.ArgumentParser(description="alttime Command Line Interface")

    parser.add_argument(
        "value",
        metavar="VALUE",
        nargs="?",
        default=None,
        type=int,
        help=(
            "Integer count of UNIT in the source scale. DEFAULT: the current clock reading, which in "
            "the alt scale is truncated to whole alt milliseconds"
        ),
    )

    parser.add_argument(
        "-s",
        "--source-scale",
        dest="source_scale",
        choices=SCALE_CHOICES,
        default="std",
        help="Scale VALUE is expressed in; the result is in the other scale. DEFAULT: std",
    )

    parser.add_argument(
        "-m",
        "--mode",
        dest="mode",
        choices=MODE_CHOICES,
        default=config.cli.DefaultMode,
        help="'scale' for durations, 'convert' for absolute instants. DEFAULT: from config",
    )

    parser.add_argument(
        "-u",
        "--unit",
        dest="unit",
        metavar="UNIT",
        default=config.cli.DefaultUnit,
        type=unitChecker,
        help="Named duration unit VALUE is counted in. DEFAULT: from config",
    )

    return parser
