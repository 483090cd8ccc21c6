"""Per-column width statistics over a sample of rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from tapr.width import display_width


@dataclass(frozen=True)
class ColumnWidthTriple:
    """Minimum, median and maximum display width of one column."""

    min: int
    median: int
    max: int


def aggregate(sample: Sequence[Sequence[str]]) -> list[ColumnWidthTriple]:
    """Summarize the display widths of each column in *sample*.

    Ragged rows count as width 0 for the columns they lack. The sample must
    hold at least one row.
    """
    line_count = len(sample)
    if line_count == 0:
        raise ValueError("cannot aggregate column widths of an empty sample")

    width_lists: list[list[int]] = []
    for ri, cells in enumerate(sample):
        for ci, cell in enumerate(cells):
            if ci >= len(width_lists):
                width_lists.append([0] * line_count)
            width_lists[ci][ri] = display_width(cell)

    median_index = 0 if line_count == 1 else (line_count + 1) // 2

    triples: list[ColumnWidthTriple] = []
    for widths in width_lists:
        widths.sort()
        triples.append(ColumnWidthTriple(widths[0], widths[median_index], widths[-1]))
    return triples
