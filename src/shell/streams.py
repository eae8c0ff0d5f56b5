"""Stream identity and capability lookup.

The reporter never holds on to a stream object: each write looks the stream up
again through :func:`get_stream`, so redirections made after construction
(``contextlib.redirect_stdout``, pytest's ``capsys``, click's test runner) are
honored. Capability queries are likewise re-run on every call.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from rich.console import Console


class StreamId(str, Enum):
    STDIN = "stdin"
    STDOUT = "stdout"
    STDERR = "stderr"


# The two output channels tracked by the reporter.
PRIMARY = StreamId.STDOUT
SECONDARY = StreamId.STDERR


def get_stream(stream_id: StreamId) -> TextIO:
    """Return the process-wide stream currently bound to ``stream_id``."""
    return getattr(sys, stream_id.value)


@dataclass(frozen=True)
class StreamQueries:
    """Capability queries for a single stream."""

    is_terminal: Callable[[], bool]
    supports_color: Callable[[], bool]


def _rich_console(stream_id: StreamId) -> Console:
    # rich applies the usual environment rules (NO_COLOR, FORCE_COLOR, TERM=dumb)
    # on top of the isatty() check.
    return Console(file=get_stream(stream_id), stderr=stream_id is StreamId.STDERR)


def _supports_color(console: Console) -> bool:
    return console.color_system is not None and not console.no_color


def rich_queries(stream_id: StreamId) -> StreamQueries:
    """Build queries that ask rich about the stream at call time."""
    return StreamQueries(
        is_terminal=lambda: _rich_console(stream_id).is_terminal,
        supports_color=lambda: _supports_color(_rich_console(stream_id)),
    )


def fixed_queries(*, is_terminal: bool, supports_color: bool) -> StreamQueries:
    """Build queries with constant answers, for tests and forced environments."""
    return StreamQueries(is_terminal=lambda: is_terminal, supports_color=lambda: supports_color)


class StreamCapabilities:
    """Lookup table from stream id to its terminal/color queries."""

    def __init__(self, queries: Mapping[StreamId, StreamQueries] | None = None):
        table = {stream_id: rich_queries(stream_id) for stream_id in StreamId}
        if queries:
            table.update(queries)
        self._queries = table

    def queries_for(self, stream_id: StreamId) -> StreamQueries:
        return self._queries[stream_id]

    def is_terminal(self, stream_id: StreamId) -> bool:
        return self._queries[stream_id].is_terminal()

    def supports_color(self, stream_id: StreamId) -> bool:
        return self._queries[stream_id].supports_color()
