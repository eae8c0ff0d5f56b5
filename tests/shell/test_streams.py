from __future__ import annotations

import io
import sys

import pytest

from shell.streams import PRIMARY, SECONDARY, StreamCapabilities, StreamId, fixed_queries, get_stream


class FakeTerminal(io.StringIO):
    def isatty(self) -> bool:
        return True


@pytest.fixture
def plain_env(monkeypatch):
    for name in ("FORCE_COLOR", "NO_COLOR", "TTY_COMPATIBLE", "COLORTERM"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TERM", "xterm")


def test_primary_and_secondary_streams() -> None:
    assert PRIMARY is StreamId.STDOUT
    assert SECONDARY is StreamId.STDERR


def test_get_stream_follows_redirection(monkeypatch) -> None:
    replacement = io.StringIO()
    monkeypatch.setattr(sys, "stdout", replacement)
    assert get_stream(StreamId.STDOUT) is replacement


def test_rich_queries_reports_pipe_as_plain(monkeypatch, plain_env) -> None:
    monkeypatch.setattr(sys, "stdout", io.StringIO())
    capabilities = StreamCapabilities()

    assert capabilities.is_terminal(StreamId.STDOUT) is False
    assert capabilities.supports_color(StreamId.STDOUT) is False


def test_rich_queries_reports_terminal_with_color(monkeypatch, plain_env) -> None:
    monkeypatch.setattr(sys, "stderr", FakeTerminal())
    capabilities = StreamCapabilities()

    assert capabilities.is_terminal(StreamId.STDERR) is True
    assert capabilities.supports_color(StreamId.STDERR) is True


def test_rich_queries_honors_no_color(monkeypatch, plain_env) -> None:
    monkeypatch.setattr(sys, "stderr", FakeTerminal())
    monkeypatch.setenv("NO_COLOR", "1")
    capabilities = StreamCapabilities()

    assert capabilities.is_terminal(StreamId.STDERR) is True
    assert capabilities.supports_color(StreamId.STDERR) is False


def test_rich_queries_is_not_cached(monkeypatch, plain_env) -> None:
    capabilities = StreamCapabilities()
    monkeypatch.setattr(sys, "stdout", FakeTerminal())
    assert capabilities.supports_color(StreamId.STDOUT) is True
    monkeypatch.setattr(sys, "stdout", io.StringIO())
    assert capabilities.supports_color(StreamId.STDOUT) is False


def test_injected_queries_overrides_only_its_stream() -> None:
    fake = fixed_queries(is_terminal=True, supports_color=False)
    capabilities = StreamCapabilities({StreamId.STDIN: fake})

    assert capabilities.queries_for(StreamId.STDIN) is fake
    assert capabilities.is_terminal(StreamId.STDIN) is True
    assert capabilities.supports_color(StreamId.STDIN) is False
    assert capabilities.queries_for(StreamId.STDOUT) is not fake
