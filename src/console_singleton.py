"""Centralized reporter singleton for global color/quiet/verbose control."""

from __future__ import annotations

from shell.reporter import ConsoleReporter

_reporter: ConsoleReporter | None = None


def get_reporter() -> ConsoleReporter:
    """Get the shared ConsoleReporter instance.

    Returns:
        The global reporter configured by configure_reporter().
        If not configured, returns a default reporter (auto color, normal verbosity).
    """
    global _reporter
    if _reporter is None:
        _reporter = ConsoleReporter()
    return _reporter


def configure_reporter(
    *, verbose: bool = False, quiet: bool = False, color: str | None = None
) -> ConsoleReporter:
    """Configure the global reporter from command-line flags.

    Args:
        verbose: Enable debug output
        quiet: Suppress everything except errors and required output
        color: One of "always", "never", "auto", or None for auto

    Raises:
        InvalidArgumentError: If ``color`` is not a known color mode

    Note:
        Passing both ``verbose`` and ``quiet`` prints an error and terminates.
        Calling this again replaces the existing reporter.
    """
    global _reporter
    _reporter = ConsoleReporter.create(verbose, quiet, color)
    return _reporter


def set_reporter(reporter: ConsoleReporter | None) -> None:
    """Install an already-built reporter (or clear it with None)."""
    global _reporter
    _reporter = reporter
