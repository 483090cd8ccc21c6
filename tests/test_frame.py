"""Tests for tapr.frame -- horizontal rules."""

from __future__ import annotations

from tapr.frame import SEPARATOR_WIDTH, render_frame
from tapr.theme import PLAIN_THEME, AnsiTableTheme


class TestRenderFrame:
    def test_separator_is_one_column(self) -> None:
        assert SEPARATOR_WIDTH == 1

    def test_top(self) -> None:
        assert render_frame("top", [2, 3], 0, PLAIN_THEME) == "──┬───"

    def test_middle_with_gutter(self) -> None:
        assert render_frame("middle", [2, 3], 2, PLAIN_THEME) == "──┼──┼───"

    def test_bottom(self) -> None:
        assert render_frame("bottom", [1, 1, 1], 0, PLAIN_THEME) == "─┴─┴─"

    def test_single_column_has_no_crossing(self) -> None:
        assert render_frame("top", [4], 0, PLAIN_THEME) == "────"

    def test_styled_with_frame_color(self) -> None:
        assert render_frame("top", [1], 0, AnsiTableTheme()) == "\x1b[90m─\x1b[0m"

    def test_theme_defaults_to_colored(self) -> None:
        assert render_frame("top", [2, 3], 0) == "\x1b[90m──┬───\x1b[0m"
        assert render_frame("bottom", [1]) == "\x1b[90m─\x1b[0m"
