"""Text styling and label helpers."""

from __future__ import annotations

from collections.abc import Sequence

from rich.color import ColorSystem
from rich.style import Style

from shell.models import ColorMode
from shell.streams import StreamCapabilities, StreamId

TOOL_TAG = "[cross]"


def cross_prefix(label: str) -> str:
    """Prefix a status label with the tool tag, e.g. ``[cross] error``."""
    return f"{TOOL_TAG} {label}"


def default_indent() -> int:
    """Width of the tool tag plus its separating space."""
    return len(cross_prefix(""))


def indent(message: str, spaces: int) -> str:
    """Indent every line of ``message`` by ``spaces`` spaces."""
    pad = " " * spaces
    return "\n".join(f"{pad}{line}" for line in message.splitlines())


def wants_color(
    color_mode: ColorMode, capabilities: StreamCapabilities, stream_id: StreamId
) -> bool:
    if color_mode is ColorMode.ALWAYS:
        return True
    if color_mode is ColorMode.NEVER:
        return False
    return capabilities.supports_color(stream_id)


def style_text(
    text: str,
    styles: Sequence[str],
    color_mode: ColorMode,
    capabilities: StreamCapabilities,
    stream_id: StreamId,
) -> str:
    """Apply an ordered list of style attributes to ``text``.

    Args:
        text: Text to render
        styles: Style attributes applied in order, e.g. ``("bold", "red")``
        color_mode: Resolved color policy
        capabilities: Capability table consulted in AUTO mode
        stream_id: Destination stream of the text

    Returns:
        ``text`` wrapped in ANSI SGR codes, or unchanged when no styling applies
    """
    if not styles or not text:
        return text
    if not wants_color(color_mode, capabilities, stream_id):
        return text
    return apply_styles(text, styles)


def apply_styles(text: str, styles: Sequence[str]) -> str:
    """Render ``text`` with ``styles`` unconditionally."""
    if not styles or not text:
        return text
    style = Style.combine(Style.parse(attr) for attr in styles)
    return style.render(text, color_system=ColorSystem.STANDARD)
