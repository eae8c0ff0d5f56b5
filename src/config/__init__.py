"""Configuration module for cross.

This module loads the console settings (color mode, verbosity flags) from
config files, the environment and the command line.
"""

from __future__ import annotations

from config.loader import load_settings, load_settings_from_cli
from config.models import ConsoleSettings

__all__ = [
    # Models
    "ConsoleSettings",
    # Loaders
    "load_settings",
    "load_settings_from_cli",
]
