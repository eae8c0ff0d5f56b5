"""Resolution of raw command-line flags into color and verbosity settings."""

from __future__ import annotations

from typing import NoReturn

from exceptions import InvalidArgumentError
from shell.models import ColorMode, VerbosityLevel

# Exit status used when --verbose and --quiet are both given.
VERBOSITY_CONFLICT_EXIT_CODE = 101

_COLOR_CHOICES = ("auto", "always", "never")


def resolve_color_mode(requested: str | None) -> ColorMode:
    """Map an optional ``--color`` value to a ColorMode.

    Args:
        requested: Raw flag value, or None when the flag was not given

    Returns:
        The matching ColorMode; AUTO when nothing was requested

    Raises:
        InvalidArgumentError: If the value is not exactly one of
            ``always``, ``never`` or ``auto``
    """
    if requested is None:
        return ColorMode.AUTO
    if isinstance(requested, str) and requested in _COLOR_CHOICES:
        return ColorMode(requested)
    raise InvalidArgumentError("--color", requested, _COLOR_CHOICES)


def resolve_verbosity(color_mode: ColorMode, verbose: bool, quiet: bool) -> VerbosityLevel:
    """Map the verbose/quiet flags to a VerbosityLevel.

    Both flags together are a startup error: a red diagnostic is printed
    using ``color_mode`` and the process terminates with
    VERBOSITY_CONFLICT_EXIT_CODE.
    """
    if verbose and quiet:
        _reject_conflict(color_mode)
    if verbose:
        return VerbosityLevel.VERBOSE
    if quiet:
        return VerbosityLevel.QUIET
    return VerbosityLevel.NORMAL


def _reject_conflict(color_mode: ColorMode) -> NoReturn:
    from shell.reporter import ConsoleReporter

    reporter = ConsoleReporter.from_color_mode(color_mode)
    reporter.fatal("cannot set both --verbose and --quiet", VERBOSITY_CONFLICT_EXIT_CODE)
