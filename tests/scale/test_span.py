from __future__ import annotations

# Third Party Imports
import pytest

# alttime Imports
from alttime.common.exceptions import TimeOverflowError
from alttime.scale.date import EpochDate
from alttime.scale.instant import EPOCH, Instant
from alttime.scale.span import TimeSpan
from alttime.scale.units import DAY, HOUR, MILLENNIUM, MONTH, SECOND, Scale

# Local Imports
from .. import I64_MAX


def testAddReadsScale():
    """The same named unit adds a different magnitude in each scale."""
    alt_span, std_span = TimeSpan(Scale.ALT), TimeSpan(Scale.STD)
    alt_span.add(MONTH, 1)
    std_span.add(MONTH, 1)
    assert alt_span.totalMillis() == 100_000_000
    assert std_span.totalMillis() == 2_592_000_000


def testSignedAmounts():
    """Negative amounts subtract."""
    span = TimeSpan()
    span.add(DAY, 2)
    span.add(HOUR, -5)
    assert span.scale is Scale.ALT
    assert span.totalMillis() == 1_500_000


def testToInstant():
    """A span shifts a starting instant, defaulting to the epoch."""
    span = TimeSpan()
    span.add(SECOND, -3)
    assert span.toInstant() == Instant.fromSeconds(-3)
    assert span.toInstant(Instant.fromMillis(500)) == Instant.fromMillis(-2_500)
    assert TimeSpan().toInstant(EPOCH) is EPOCH


def testToDate():
    """A span shifts a starting date without modifying it."""
    span = TimeSpan(Scale.STD)
    span.add(HOUR, 1)
    start = EpochDate(1_000)
    assert span.toDate(start) == EpochDate(3_601_000)
    assert start.getTime() == 1_000
    assert span.toDate() == EpochDate(3_600_000)


def testAddOverflowLeavesSpanUnchanged():
    """A failed addition raises and keeps the previous total."""
    span = TimeSpan()
    span.add(DAY, 1)
    with pytest.raises(TimeOverflowError):
        span.add(MILLENNIUM, I64_MAX)
    with pytest.raises(TimeOverflowError):
        span.add(MILLENNIUM, 9_300_000)
    assert span.totalMillis() == 1_000_000


def testToInstantOverflow():
    """Shifting past the end of the range raises."""
    span = TimeSpan()
    span.add(SECOND, 1)
    with pytest.raises(TimeOverflowError):
        span.toInstant(Instant.fromSeconds(I64_MAX))


def testAddRejectsNonUnits():
    """Only named units can be added."""
    with pytest.raises(TypeError):
        TimeSpan().add(1_000, 1)


def testRescale():
    """Spans rescale into the other scale as durations, with no epoch offset."""
    span = TimeSpan(Scale.ALT)
    span.add(DAY, 1)
    standard = span.toStandard()
    assert standard.scale is Scale.STD
    assert standard.totalMillis() == 86_400_000
    assert standard.toAlt().totalMillis() == 1_000_000
    assert span.toAlt().totalMillis() == 1_000_000
    assert span.toAlt() is not span
    assert repr(standard) == "TimeSpan(86400000 std ms)"


def testRescaleFromStandard():
    """A standard span truncates toward zero when rescaled into alt time."""
    span = TimeSpan(Scale.STD)
    span.add(SECOND, -1)
    alt = span.toAlt()
    assert alt.scale is Scale.ALT
    assert alt.totalMillis() == -11
    assert span.toStandard().totalMillis() == -1_000
