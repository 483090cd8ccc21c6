"""Tests for tapr.table -- the full table pipeline."""

from __future__ import annotations

import csv

import pytest

from tapr.errors import InvalidTextError, TooManyColumnsError
from tapr.reader import split_csv_line, split_tsv_line
from tapr.table import determine_column_widths, gutter_width_for, render_table
from tapr.theme import PLAIN_THEME


def _table(lines: list[str], **kwargs) -> list[str]:
    kwargs.setdefault("terminal_width", 80)
    kwargs.setdefault("split", split_csv_line)
    return list(render_table(lines, theme=PLAIN_THEME, **kwargs))


class TestGutterWidth:
    def test_digits_of_line_count(self) -> None:
        assert gutter_width_for(9, True) == 1
        assert gutter_width_for(10, True) == 2
        assert gutter_width_for(1234, True) == 4

    def test_disabled(self) -> None:
        assert gutter_width_for(1234, False) == 0


class TestDetermineColumnWidths:
    def test_gutter_reduces_usable_width(self) -> None:
        sample = [["x" * 10] * 3]
        # 3 * 7 + 2 == 23 fits exactly without a gutter...
        assert determine_column_widths(sample, 0, 23) == [7, 7, 7]
        # ...but not once a gutter of 1 plus its separator is taken out.
        with pytest.raises(TooManyColumnsError):
            determine_column_widths(sample, 1, 23)


class TestRenderTable:
    def test_empty_input_renders_nothing(self) -> None:
        assert _table([]) == []

    def test_plain_table(self) -> None:
        assert _table(["a,b", "1,2"]) == ["─┬─", "a│b", "1│2", "─┴─"]

    def test_header_gets_middle_rule(self) -> None:
        assert _table(["a,b", "1,2"], header=True) == ["─┬─", "a│b", "─┼─", "1│2", "─┴─"]

    def test_line_numbers(self) -> None:
        assert _table(["a,b", "1,2"], line_number=True) == [
            "─┬─┬─",
            "1│a│b",
            "2│1│2",
            "─┴─┴─",
        ]

    def test_line_numbers_with_header(self) -> None:
        assert _table(["a,b", "1,2"], line_number=True, header=True) == [
            "─┬─┬─",
            " │a│b",
            "─┼─┼─",
            "1│1│2",
            "─┴─┴─",
        ]

    def test_tsv(self) -> None:
        assert _table(["a\tb"], split=split_tsv_line) == ["─┬─", "a│b", "─┴─"]

    def test_rows_beyond_sample_wrap_instead_of_failing(self) -> None:
        out = _table(["a", "abcdefghij"], line_sampling=1)
        assert out[0] == "─"
        assert out[1] == "a"
        assert out[2:12] == list("abcdefghij")
        assert out[-1] == "─"

    def test_zero_sampling_uses_every_line(self) -> None:
        out = _table(["a", "abcdefghij"], line_sampling=0)
        assert out[2] == "abcdefghij"

    def test_too_many_columns(self) -> None:
        with pytest.raises(TooManyColumnsError) as exc_info:
            _table([",".join(["xxxxxxxxxx"] * 20)], terminal_width=30)
        assert exc_info.value.columns == 20

    def test_invalid_line_after_sample_propagates(self) -> None:
        gen = render_table(
            ["a,b", "x" * (csv.field_size_limit() + 1)],
            terminal_width=80,
            split=split_csv_line,
            line_sampling=1,
            theme=PLAIN_THEME,
        )
        assert next(gen) == "─┬─"
        assert next(gen) == "a│b"
        with pytest.raises(InvalidTextError) as exc_info:
            next(gen)
        assert exc_info.value.linenum == 2
