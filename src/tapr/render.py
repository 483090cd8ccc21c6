"""Row rendering with column-synchronized wrapping.

A logical row becomes one or more physical lines ("passes"). Every column
keeps a cursor into its grapheme clusters; each pass advances all cursors
together, so a wrapped cell never drifts out of its column. A column that
runs out of content early renders blank padding for the remaining passes.
"""

from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass
from typing import Iterator, Sequence

from tapr.frame import VERTICAL
from tapr.theme import AnsiTableTheme, TableTheme, row_style
from tapr.width import cluster_width, segment

logger = logging.getLogger(__name__)


@dataclass
class Row:
    """The cells of one input line. Line number 0 marks the header."""

    cells: Sequence[str]
    line_number: int = 0


def is_numeric(cell: str) -> bool:
    """Return ``True`` if *cell* is non-empty and made only of ASCII digits."""
    return cell != "" and all("0" <= ch <= "9" for ch in cell)


def _column_clusters(cells: Sequence[str], column_count: int) -> list[list[str]]:
    clusters = [segment(cell) for cell in cells]
    if len(clusters) > column_count:
        logger.debug("dropping %d cell(s) beyond %d columns", len(clusters) - column_count, column_count)
        del clusters[column_count:]
    while len(clusters) < column_count:
        clusters.append([])
    return clusters


def advance_cursors(
    clusters: Sequence[Sequence[str]],
    allocation: Sequence[int],
    cursors: Sequence[int],
) -> list[int]:
    """Return where each column's cursor stands after one more pass.

    A column takes clusters while they fit its width, and always takes at
    least one when any remain, even if that cluster alone is too wide.
    """
    advanced: list[int] = []
    for column, width, start in zip(clusters, allocation, cursors):
        end = start
        used = 0
        while end < len(column):
            w = cluster_width(column[end])
            if used == 0 or used + w <= width:
                used += w
                end += 1
            else:
                break
        advanced.append(end)
    return advanced


def iter_passes(
    clusters: Sequence[Sequence[str]],
    allocation: Sequence[int],
) -> Iterator[list[Sequence[str]]]:
    """Yield, pass by pass, the slice of clusters each column renders."""
    cursors = [0] * len(clusters)
    while any(cursor < len(column) for cursor, column in zip(cursors, clusters)):
        advanced = advance_cursors(clusters, allocation, cursors)
        yield [column[start:end] for column, start, end in zip(clusters, cursors, advanced)]
        cursors = advanced


def render_cell(fragment: Sequence[str], width: int, right_align: bool) -> str:
    """Pad *fragment* with spaces to fill *width* columns."""
    used = sum(cluster_width(g) for g in fragment)
    text = unicodedata.normalize("NFC", "".join(fragment))
    padding = " " * max(0, width - used)
    if right_align:
        return padding + text
    return text + padding


def render_row(
    row: Row,
    allocation: Sequence[int],
    gutter_width: int = 0,
    theme: TableTheme | None = None,
) -> list[str]:
    """Render *row* as physical lines fitted to *allocation*.

    *gutter_width* of 0 disables the line-number gutter. The line number is
    shown on the first pass only, and never for the header.
    """
    theme = theme or AnsiTableTheme()
    column_count = len(allocation)
    clusters = _column_clusters(row.cells, column_count)
    right_aligns = [
        ci < len(row.cells) and is_numeric(row.cells[ci]) for ci in range(column_count)
    ]
    style = row_style(theme, row.line_number)
    separator = theme.frame(VERTICAL)

    passes = list(iter_passes(clusters, allocation))
    if not passes and column_count > 0:
        passes.append([[] for _ in clusters])

    lines: list[str] = []
    for fragments in passes:
        gutter = ""
        if gutter_width > 0:
            label = str(row.line_number) if row.line_number != 0 and not lines else ""
            gutter = style(label.rjust(gutter_width)) + separator
        cells = [
            style(render_cell(fragment, width, right_align))
            for fragment, width, right_align in zip(fragments, allocation, right_aligns)
        ]
        lines.append(gutter + separator.join(cells))
    return lines
