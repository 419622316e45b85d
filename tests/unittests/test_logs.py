"""ABOUTME: Tests for the logging setup.
ABOUTME: Verifies the YAML dictConfig loader and the shipped logging config."""

import logging
from pathlib import Path

import pytest

from battlecoach.logs import init_logging
from battlecoach.settings import settings


def test_init_logging_applies_config(tmp_path: Path) -> None:
    config_path = tmp_path / "logging.yml"
    config_path.write_text(
        """
version: 1
disable_existing_loggers: false
loggers:
  battlecoach.test_logs:
    level: ERROR
"""
    )

    config = init_logging(config_path)

    assert config["version"] == 1
    assert logging.getLogger("battlecoach.test_logs").level == logging.ERROR


def test_shipped_logging_config() -> None:
    config = init_logging(settings.logging_config_path)
    assert "console" in config["handlers"]
    assert logging.getLogger("battlecoach").level == logging.INFO


def test_level_override(tmp_path: Path) -> None:
    """The level argument wins over the one in the file, even for a logger the file does not list."""
    config_path = tmp_path / "logging.yml"
    config_path.write_text("version: 1\ndisable_existing_loggers: false\n")

    config = init_logging(config_path, level="debug")

    assert config["loggers"]["battlecoach"]["level"] == "DEBUG"
    assert logging.getLogger("battlecoach").level == logging.DEBUG


def test_verbose_shipped_config() -> None:
    init_logging(settings.logging_config_path, level="DEBUG")
    assert logging.getLogger("battlecoach").level == logging.DEBUG


def test_not_a_dict_config(tmp_path: Path) -> None:
    config_path = tmp_path / "logging.yml"
    config_path.write_text("- just\n- a list\n")

    with pytest.raises(ValueError, match="Not a logging dictConfig"):
        init_logging(config_path)
