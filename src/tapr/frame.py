"""Horizontal frame lines drawn above, between and below table rows."""

from __future__ import annotations

from typing import Literal, Sequence

import wcwidth as _wcwidth

from tapr.theme import AnsiTableTheme, TableTheme

VERTICAL = "│"
HORIZONTAL = "─"
CROSSING_TOP = "┬"
CROSSING_MIDDLE = "┼"
CROSSING_BOTTOM = "┴"

SEPARATOR_WIDTH = _wcwidth.wcswidth(VERTICAL)

FrameKind = Literal["top", "middle", "bottom"]

_CROSSINGS: dict[str, str] = {
    "top": CROSSING_TOP,
    "middle": CROSSING_MIDDLE,
    "bottom": CROSSING_BOTTOM,
}


def render_frame(
    kind: FrameKind,
    allocation: Sequence[int],
    gutter_width: int = 0,
    theme: TableTheme | None = None,
) -> str:
    """Draw one horizontal rule matching the column layout."""
    theme = theme or AnsiTableTheme()
    crossing = _CROSSINGS[kind]
    parts: list[str] = []
    if gutter_width > 0:
        parts.append(HORIZONTAL * gutter_width + crossing)
    parts.append(crossing.join(HORIZONTAL * width for width in allocation))
    return theme.frame("".join(parts))
