from shell.models import ColorMode
from shell.streams import StreamCapabilities, StreamId, StreamQueries, fixed_queries
from shell.styling import cross_prefix, default_indent, indent, style_text, wants_color


def _capabilities(color: bool) -> StreamCapabilities:
    queries = fixed_queries(is_terminal=color, supports_color=color)
    return StreamCapabilities({StreamId.STDOUT: queries, StreamId.STDERR: queries})


def test_cross_prefix_and_default_indent() -> None:
    assert cross_prefix("error") == "[cross] error"
    assert default_indent() == len("[cross] ") == 8


def test_indent_prefixes_every_line() -> None:
    assert indent("first\nsecond", 4) == "    first\n    second"
    assert indent("", 4) == ""


def test_style_text_applies_styles_in_order() -> None:
    text = style_text("label", ("bold", "red"), ColorMode.ALWAYS, _capabilities(False), StreamId.STDERR)
    assert text == "\x1b[1;31mlabel\x1b[0m"


def test_style_text_never_is_plain() -> None:
    text = style_text("label", ("bold", "red"), ColorMode.NEVER, _capabilities(True), StreamId.STDERR)
    assert text == "label"


def test_style_text_auto_follows_stream_capability() -> None:
    colored = style_text("x", ("green",), ColorMode.AUTO, _capabilities(True), StreamId.STDOUT)
    plain = style_text("x", ("green",), ColorMode.AUTO, _capabilities(False), StreamId.STDOUT)
    assert colored == "\x1b[32mx\x1b[0m"
    assert plain == "x"


def test_style_text_without_styles_is_unchanged() -> None:
    assert style_text("plain", (), ColorMode.ALWAYS, _capabilities(True), StreamId.STDOUT) == "plain"


def test_wants_color_auto_queries_each_time() -> None:
    answers = iter([True, False])
    queries = StreamQueries(is_terminal=lambda: True, supports_color=lambda: next(answers))
    capabilities = StreamCapabilities({StreamId.STDERR: queries})

    assert wants_color(ColorMode.AUTO, capabilities, StreamId.STDERR) is True
    assert wants_color(ColorMode.AUTO, capabilities, StreamId.STDERR) is False


def test_wants_color_forced_modes_skip_the_lookup() -> None:
    def fail() -> bool:
        raise AssertionError("capability should not be consulted")

    queries = StreamQueries(is_terminal=fail, supports_color=fail)
    capabilities = StreamCapabilities({StreamId.STDERR: queries})

    assert wants_color(ColorMode.ALWAYS, capabilities, StreamId.STDERR) is True
    assert wants_color(ColorMode.NEVER, capabilities, StreamId.STDERR) is False
