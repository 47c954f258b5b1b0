from __future__ import annotations

# Standard Library Imports
import logging
import sys

# Third Party Imports
import pytest

# alttime Imports
from alttime.common.behavioral_config import CONFIG_ENV_VARIABLE, BehavioralConfig

# Local Imports
from . import ONE_DAY_AFTER_ALT_ZERO_STD_MILLIS


@pytest.fixture(autouse=True)
def _patchMissingEnvVariables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Automatically delete the config environment variable, if set.

    Args:
        monkeypatch (:class:`pytest.MonkeyPatch`): monkeypatch obj to track changes

    Note:
        This is used so tests can assume a "blank" configuration, and it won't
        overwrite a user's custom-set environment variables.
    """
    with monkeypatch.context() as m_patch:
        m_patch.delenv(CONFIG_ENV_VARIABLE, raising=False)
        yield
        # Make sure we reset the config after each test function
        BehavioralConfig.resetConfig()


@pytest.fixture(scope="session", name="test_logger")
def getTestLoggerObject() -> logging.Logger:
    """Create a custom :class:`logging.Logger` object."""
    logger = logging.getLogger("Unit Test Logger")
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger


@pytest.fixture(name="fixed_clock_reading")
def getFixedClockReading() -> int:
    """Return a fixed standard-time clock reading, in milliseconds: 2000-01-02T00:00Z."""
    return ONE_DAY_AFTER_ALT_ZERO_STD_MILLIS
