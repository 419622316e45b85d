"""ABOUTME: Logging setup for battlecoach from a YAML dictConfig file.
ABOUTME: Can raise the package logger's level for verbose CLI runs."""

import logging
import logging.config
import typing
from pathlib import Path

import yaml

PACKAGE_LOGGER = "battlecoach"


def init_logging(filepath: Path, level: str | None = None) -> dict[str, typing.Any]:
    """Read logging config yaml file from `filepath` and apply it globally.

    :param filepath: Path to the logging configuration yaml file.
    :param level: Level name replacing the one the file sets for the battlecoach logger.
    :returns: The applied logging configuration as dict.
    :raises ValueError: If the file is not a dictConfig mapping with a `version` key.
    """
    config = yaml.safe_load(filepath.read_text(encoding="utf-8"))
    if not isinstance(config, dict) or "version" not in config:
        raise ValueError(f"Not a logging dictConfig: {filepath}")

    if level is not None:
        config.setdefault("loggers", {}).setdefault(PACKAGE_LOGGER, {})["level"] = level.upper()

    logging.config.dictConfig(config)
    logging.getLogger(__name__).debug("Logging initialized from %s", filepath)
    return config
