"""Console reporter: colorized, verbosity-aware status output.

All diagnostics (error, warning, note, status) go to standard error, program
output (print, info, debug) goes to standard output. Each stream carries its
own ``needs_erase`` flag, set by an in-place progress write and cleared by the
next real write to that stream, which first emits the Erase in Line sequence.

The reporter is not thread safe: a status line is written in several parts
(label, colon, body), so concurrent users must serialize access themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import NoReturn, TypeVar

from exceptions import FatalExit
from logging_utils.logger import get_logger
from shell.models import ColorMode, VerbosityLevel
from shell.policy import resolve_color_mode, resolve_verbosity
from shell.streams import PRIMARY, SECONDARY, StreamCapabilities, StreamId, get_stream
from shell.styling import apply_styles, cross_prefix, wants_color

logger = get_logger(__name__)

# ANSI "Erase in Line" sequence.
ERASE_LINE = "\x1b[K"
USAGE_SYNOPSIS = "    cross [+toolchain] [OPTIONS] [SUBCOMMAND]"
HELP_FLAG = "--help"

T = TypeVar("T")


class ConsoleReporter:
    """Message emission API bound to a color mode and verbosity level."""

    def __init__(
        self,
        color_mode: ColorMode = ColorMode.AUTO,
        verbosity: VerbosityLevel = VerbosityLevel.NORMAL,
        *,
        capabilities: StreamCapabilities | None = None,
    ):
        self.color_mode = color_mode
        self.verbosity = verbosity
        self.primary_needs_erase = False
        self.secondary_needs_erase = False
        self.capabilities = capabilities or StreamCapabilities()

    @classmethod
    def create(
        cls,
        verbose: bool,
        quiet: bool,
        color: str | None,
        *,
        capabilities: StreamCapabilities | None = None,
    ) -> ConsoleReporter:
        """Build a reporter from raw command-line flags.

        Raises:
            InvalidArgumentError: If ``color`` is not a known color mode

        Terminates the process (FatalExit) if both ``verbose`` and ``quiet``
        are set.
        """
        color_mode = resolve_color_mode(color)
        verbosity = resolve_verbosity(color_mode, verbose, quiet)
        return cls(color_mode, verbosity, capabilities=capabilities)

    @classmethod
    def from_color_mode(cls, color_mode: ColorMode) -> ConsoleReporter:
        return cls(color_mode, VerbosityLevel.NORMAL)

    @classmethod
    def from_verbosity(cls, verbosity: VerbosityLevel) -> ConsoleReporter:
        return cls(ColorMode.AUTO, verbosity)

    def __repr__(self) -> str:
        return (
            f"ConsoleReporter(color_mode={self.color_mode.value!r}, "
            f"verbosity={self.verbosity.name}, "
            f"primary_needs_erase={self.primary_needs_erase}, "
            f"secondary_needs_erase={self.secondary_needs_erase})"
        )

    @property
    def is_verbose(self) -> bool:
        return self.verbosity.is_verbose

    # ------------------------------------------------------------------
    # Scoped verbosity

    def with_verbosity(
        self, level: VerbosityLevel, action: Callable[[ConsoleReporter], T]
    ) -> T:
        """Run ``action`` with ``level`` in effect, restoring the old level afterward."""
        old = self.verbosity
        self.verbosity = level
        try:
            return action(self)
        finally:
            self.verbosity = old

    def as_quiet(self, action: Callable[[ConsoleReporter], T]) -> T:
        return self.with_verbosity(VerbosityLevel.QUIET, action)

    def as_normal(self, action: Callable[[ConsoleReporter], T]) -> T:
        return self.with_verbosity(VerbosityLevel.NORMAL, action)

    def as_verbose(self, action: Callable[[ConsoleReporter], T]) -> T:
        return self.with_verbosity(VerbosityLevel.VERBOSE, action)

    @contextmanager
    def verbosity_override(self, level: VerbosityLevel) -> Iterator[ConsoleReporter]:
        """Context-manager form of :meth:`with_verbosity`."""
        old = self.verbosity
        self.verbosity = level
        try:
            yield self
        finally:
            self.verbosity = old

    # ------------------------------------------------------------------
    # Low-level writing

    def needs_erase(self, stream_id: StreamId) -> bool:
        if stream_id is PRIMARY:
            return self.primary_needs_erase
        if stream_id is SECONDARY:
            return self.secondary_needs_erase
        raise ValueError(f"not an output stream: {stream_id.value}")

    def _set_needs_erase(self, stream_id: StreamId, value: bool) -> None:
        if stream_id is PRIMARY:
            self.primary_needs_erase = value
        elif stream_id is SECONDARY:
            self.secondary_needs_erase = value
        else:
            raise ValueError(f"not an output stream: {stream_id.value}")

    def _check_erase(self, stream_id: StreamId) -> None:
        if self.needs_erase(stream_id):
            get_stream(stream_id).write(ERASE_LINE)
            self._set_needs_erase(stream_id, False)

    def _colorize(self, stream_id: StreamId) -> bool:
        return wants_color(self.color_mode, self.capabilities, stream_id)

    def _write(
        self, stream_id: StreamId, text: str, *styles: str, colorize: bool = False
    ) -> None:
        get_stream(stream_id).write(apply_styles(text, styles) if colorize else text)

    def _line(self, stream_id: StreamId, message: object) -> None:
        self._check_erase(stream_id)
        self._write(stream_id, f"{message}\n")

    def _status(
        self, stream_id: StreamId, label: str, message: object | None, color: str
    ) -> None:
        # "{label}: {message}", with both the label and ':' in bold.
        self._check_erase(stream_id)
        colorize = self._colorize(stream_id)
        self._write(stream_id, cross_prefix(label), "bold", color, colorize=colorize)
        self._write(stream_id, ":", "bold", colorize=colorize)
        if message is None:
            self._write(stream_id, " ")
        else:
            self._write(stream_id, f" {message}\n")

    def log_debug(self, msg: str, *args: object) -> None:
        """Log a debug record, first erasing any progress line parked on stderr.

        Log records share stderr with the diagnostics, so a pending progress
        line is cleared the same way a status message would clear it. Nothing
        is written when debug logging is disabled.
        """
        if not logger.isEnabledFor(logging.DEBUG):
            return
        self._check_erase(SECONDARY)
        logger.debug(msg, *args)

    # ------------------------------------------------------------------
    # Message API

    def error(self, message: object | None = None) -> None:
        """Print a red 'error' message. Never suppressed."""
        self._status(SECONDARY, "error", message, "red")

    def fatal(self, message: object, code: int) -> NoReturn:
        """Print a red 'error' message and terminate with ``code``."""
        try:
            self.error(message)
            self.log_debug("terminating with exit status %d", code)
        finally:
            raise FatalExit(code)

    def warn(self, message: object | None = None) -> None:
        """Print an amber 'warning' message."""
        if self.verbosity >= VerbosityLevel.NORMAL:
            self._status(SECONDARY, "warning", message, "yellow")

    def note(self, message: object | None = None) -> None:
        """Print a cyan 'note' message."""
        if self.verbosity >= VerbosityLevel.NORMAL:
            self._status(SECONDARY, "note", message, "cyan")

    def status(self, message: object) -> None:
        if self.verbosity >= VerbosityLevel.NORMAL:
            self._line(SECONDARY, message)

    def print(self, message: object) -> None:
        """Print a high-priority message to stdout. Never suppressed."""
        self._line(PRIMARY, message)

    def info(self, message: object) -> None:
        """Print a normal message to stdout."""
        if self.verbosity >= VerbosityLevel.NORMAL:
            self._line(PRIMARY, message)

    def debug(self, message: object) -> None:
        """Print a debugging message to stdout, only when verbose."""
        if self.verbosity >= VerbosityLevel.VERBOSE:
            self._line(PRIMARY, message)

    def progress(self, message: object, stream_id: StreamId = SECONDARY) -> None:
        """Write an in-place progress line that the next message overwrites.

        No newline is written and the cursor is returned to the start of the
        line; the stream is then flagged so its next write erases the line.
        """
        if self.verbosity < VerbosityLevel.NORMAL:
            return
        self._check_erase(stream_id)
        stream = get_stream(stream_id)
        stream.write(f"{message}\r")
        stream.flush()
        self._set_needs_erase(stream_id, True)

    def fatal_usage(self, argument: object, code: int) -> NoReturn:
        """Report a required option given without a value, then terminate."""
        try:
            self._error_usage(argument)
            self.log_debug("terminating with exit status %d", code)
        finally:
            raise FatalExit(code)

    def _error_usage(self, argument: object) -> None:
        stream = SECONDARY
        self._check_erase(stream)
        colorize = self._colorize(stream)
        self._write(stream, cross_prefix("error"), "bold", "red", colorize=colorize)
        self._write(stream, ":", "bold", colorize=colorize)
        self._write(stream, " The argument '")
        self._write(stream, str(argument), "yellow", colorize=colorize)
        self._write(stream, "' requires a value but none was supplied\n")
        self._write(stream, "Usage:\n")
        self._write(stream, f"{USAGE_SYNOPSIS}\n")
        self._write(stream, "\n")
        self._write(stream, "For more information try ")
        self._write(stream, HELP_FLAG, "green", colorize=colorize)
        self._write(stream, "\n")
        get_stream(stream).flush()
