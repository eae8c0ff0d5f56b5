"""Console output layer for cross.

This package resolves the ``--color``/``--verbose``/``--quiet`` flags and
provides the reporter used for all user-facing output.
"""

from __future__ import annotations

from shell.models import ColorMode, VerbosityLevel
from shell.policy import VERBOSITY_CONFLICT_EXIT_CODE, resolve_color_mode, resolve_verbosity
from shell.reporter import ERASE_LINE, ConsoleReporter
from shell.streams import StreamCapabilities, StreamId, StreamQueries, fixed_queries
from shell.styling import TOOL_TAG, cross_prefix, default_indent, indent, style_text

__all__ = [
    # Models
    "ColorMode",
    "VerbosityLevel",
    # Policies
    "VERBOSITY_CONFLICT_EXIT_CODE",
    "resolve_color_mode",
    "resolve_verbosity",
    # Reporter
    "ConsoleReporter",
    "ERASE_LINE",
    # Streams
    "StreamCapabilities",
    "StreamId",
    "StreamQueries",
    "fixed_queries",
    # Styling
    "TOOL_TAG",
    "cross_prefix",
    "default_indent",
    "indent",
    "style_text",
]
