from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from exceptions import InvalidArgumentError
from shell.models import ColorMode, VerbosityLevel
from shell.policy import resolve_color_mode, resolve_verbosity
from shell.reporter import ConsoleReporter

DEFAULT_ROOT_DIR = Path.home() / ".cross"


class ConsoleSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    verbose: bool = False
    quiet: bool = False
    color: str | None = Field(
        default=None, description="Color mode: always, never or auto (unset means auto)"
    )

    @field_validator("color")
    @classmethod
    def _check_color(cls, value: str | None) -> str | None:
        # Exact match only: " auto" and "Always" are rejected like on the command line.
        try:
            resolve_color_mode(value)
        except InvalidArgumentError as exc:
            raise ValueError(str(exc)) from exc
        return value

    def color_mode(self) -> ColorMode:
        """Resolve the configured color string.

        Raises:
            InvalidArgumentError: If the string is not a known color mode
        """
        return resolve_color_mode(self.color)

    def verbosity(self) -> VerbosityLevel:
        """Resolve verbose/quiet; terminates the process if both are set."""
        return resolve_verbosity(self.color_mode(), self.verbose, self.quiet)

    def build_reporter(self) -> ConsoleReporter:
        return ConsoleReporter(self.color_mode(), self.verbosity())
