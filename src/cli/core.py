"""Shared CLI utilities and common operations."""

from __future__ import annotations

import logging
from pathlib import Path

from config import ConsoleSettings, load_settings_from_cli
from logging_utils.logger import configure_logging
from shell.models import VerbosityLevel

_LOG_LEVELS = {
    VerbosityLevel.QUIET: logging.ERROR,
    VerbosityLevel.NORMAL: logging.WARNING,
    VerbosityLevel.VERBOSE: logging.DEBUG,
}


def level_for_verbosity(verbosity: VerbosityLevel) -> int:
    """Map a reporter verbosity to the matching root logging level."""
    return _LOG_LEVELS[verbosity]


def prepare_initial_settings(
    config_file: Path | None, verbose: bool, quiet: bool, color: str | None
) -> ConsoleSettings:
    """Initialize settings from CLI arguments.

    Args:
        config_file: Optional path to config file
        verbose: --verbose flag
        quiet: --quiet flag
        color: --color value, if given

    Returns:
        Merged ConsoleSettings instance
    """
    configure_logging()
    return load_settings_from_cli(config_file, verbose=verbose, quiet=quiet, color=color)
