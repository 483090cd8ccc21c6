"""Whole-table pipeline: sample, allocate, then draw frames and rows."""

from __future__ import annotations

from typing import Iterator, Sequence

from tapr.allocator import allocate
from tapr.frame import SEPARATOR_WIDTH, render_frame
from tapr.reader import SplitLine
from tapr.render import Row, render_row
from tapr.stats import aggregate
from tapr.theme import AnsiTableTheme, TableTheme


def gutter_width_for(line_count: int, line_number: bool) -> int:
    """Digits needed to print the largest line number, or 0 without a gutter."""
    return len(str(line_count)) if line_number else 0


def determine_column_widths(
    sample: Sequence[Sequence[str]],
    gutter_width: int,
    terminal_width: int,
) -> list[int]:
    usable_width = terminal_width
    if gutter_width > 0:
        usable_width -= gutter_width + SEPARATOR_WIDTH
    return allocate(aggregate(sample), usable_width)


def render_table(
    lines: Sequence[str],
    *,
    terminal_width: int,
    split: SplitLine,
    line_number: bool = False,
    header: bool = False,
    line_sampling: int = 100,
    theme: TableTheme | None = None,
) -> Iterator[str]:
    """Yield the physical output lines of *lines* drawn as a table.

    Only the first *line_sampling* lines (all of them for 0) shape the column
    widths; later, wider cells simply wrap onto more passes.
    """
    if not lines:
        return
    theme = theme or AnsiTableTheme()

    gutter_width = gutter_width_for(len(lines), line_number)
    sampled = lines if line_sampling == 0 else lines[:line_sampling]
    sample = [split(li + 1, line) for li, line in enumerate(sampled)]
    allocation = determine_column_widths(sample, gutter_width, terminal_width)

    yield render_frame("top", allocation, gutter_width, theme)
    for li, line in enumerate(lines):
        cells = sample[li] if li < len(sample) else split(li + 1, line)
        number = li if header else li + 1
        yield from render_row(Row(cells, number), allocation, gutter_width, theme)
        if header and li == 0:
            yield render_frame("middle", allocation, gutter_width, theme)
    yield render_frame("bottom", allocation, gutter_width, theme)
