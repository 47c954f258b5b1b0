from __future__ import annotations

# Standard Library Imports
from collections import OrderedDict
from logging import DEBUG, INFO
from typing import TYPE_CHECKING

# Third Party Imports
import pytest

# alttime Imports
from alttime.common.behavioral_config import CONFIG_ENV_VARIABLE, BehavioralConfig, SubConfig

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    import logging
    from pathlib import Path

CONFIG_FILE_VALID: tuple[str, ...] = (
    "[logging]\n",
    "OutputLocation = ./logs/\n",
    "Level = INFO\n",
    "MaxFileSize = 2048\n",
    "MaxFileCount = 10\n",
    "[cli]\n",
    "DefaultUnit = Day\n",
)

CORRECT_DEFAULTS = OrderedDict(
    {
        "logging": {
            "OutputLocation": "stdout",
            "Level": DEBUG,
            "MaxFileSize": 1048576,
            "MaxFileCount": 50,
            "AllowMultipleHandlers": False,
        },
        "cli": {
            "DefaultUnit": "millisecond",
            "DefaultMode": "convert",
        },
    },
)


@pytest.fixture(name="config_path")
def writeCustomSettingsFile(tmp_path: Path) -> Path:
    """Write a non-default config file into the pytest tmp dir.

    Args:
        tmp_path (:class:`pathlib.Path`): per-test temporary directory

    Returns:
        :class:`pathlib.Path`: location of the custom config file
    """
    config_path = tmp_path / "test.config"
    with open(config_path, "w", encoding="utf-8") as config_file:
        config_file.writelines(CONFIG_FILE_VALID)
    return config_path


def testImported():
    """Test that the packaged config file results in the default values."""
    config = BehavioralConfig.getConfig()
    for section, section_conf in CORRECT_DEFAULTS.items():
        for option, value in section_conf.items():
            conf_section = getattr(config, section)
            conf_option = getattr(conf_section, option)
            assert value == conf_option


def testSinglePattern():
    """Test that :class:`.BehavioralConfig` is a proper Singleton class."""
    config = BehavioralConfig.getConfig()
    # alttime Imports
    from alttime.common.behavioral_config import BehavioralConfig as SecondConfig

    assert config is SecondConfig.getConfig()


def testOverwrite():
    """Test overwriting the default :class:`.BehavioralConfig` directly with custom settings."""
    custom_config = BehavioralConfig.getConfig()
    custom_config.logging.OutputLocation = "./logs/"
    custom_config.logging.Level = INFO

    second_config = BehavioralConfig.getConfig()
    assert second_config.logging.OutputLocation == "./logs/"
    assert second_config.logging.Level == INFO
    assert custom_config is second_config


def testNonDefaultFile(test_logger: logging.Logger, config_path: Path):
    """Test loading the :class:`.BehavioralConfig` from a custom config file.

    Args:
        test_logger (:class:`logging.Logger`): unit test logger object
        config_path (:class:`pathlib.Path`): non-default config file
    """
    test_logger.debug(f"Custom config: {config_path}")
    file_config = BehavioralConfig(str(config_path))

    assert file_config.logging.OutputLocation == "./logs/"
    assert file_config.logging.Level == INFO
    assert file_config.logging.MaxFileSize == 2048
    assert file_config.logging.MaxFileCount == 10
    # Options missing from the file keep their defaults, string options are lower-cased
    assert file_config.logging.AllowMultipleHandlers is False
    assert file_config.cli.DefaultUnit == "day"
    assert file_config.cli.DefaultMode == "convert"

    # Constructing a config replaces the shared instance
    assert BehavioralConfig.getConfig() is file_config


def testEnvironmentVariable(monkeypatch: pytest.MonkeyPatch, config_path: Path):
    """Test that the environment variable is consulted when the shared config is first loaded."""
    BehavioralConfig.resetConfig()
    monkeypatch.setenv(CONFIG_ENV_VARIABLE, str(config_path))

    config = BehavioralConfig.getConfig()
    assert config.logging.MaxFileSize == 2048
    assert config.cli.DefaultUnit == "day"


def testMissingFileUsesDefaults(tmp_path: Path):
    """A config path that does not exist falls back to the defaults."""
    config = BehavioralConfig(str(tmp_path / "missing.config"))
    assert config.logging.Level == DEBUG
    assert config.cli.DefaultUnit == "millisecond"


def testResetConfig():
    """Resetting drops the shared instance so the next access builds a new one."""
    config = BehavioralConfig.getConfig()
    BehavioralConfig.resetConfig()
    assert BehavioralConfig.getConfig() is not config


def testSubConfigSetOnce():
    """A `SubConfig` field can only be set once through `setonce`."""
    sub = SubConfig("logging")
    sub.setonce("Level", INFO)
    with pytest.raises(AttributeError, match="already has a value"):
        sub.setonce("Level", DEBUG)
    with pytest.raises(TypeError):
        SubConfig(1)
