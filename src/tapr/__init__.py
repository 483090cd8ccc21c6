"""tapr: pretty-print CSV and TSV as a boxed table fitted to the terminal."""

from tapr.allocator import COMFORT_WIDTH, allocate
from tapr.errors import DecodeError, InvalidTextError, TaprError, TooManyColumnsError
from tapr.frame import FrameKind, render_frame
from tapr.render import Row, is_numeric, render_row
from tapr.stats import ColumnWidthTriple, aggregate
from tapr.table import render_table
from tapr.theme import PLAIN_THEME, AnsiTableTheme, PlainTableTheme, TableTheme

__all__ = [
    "COMFORT_WIDTH",
    "AnsiTableTheme",
    "ColumnWidthTriple",
    "DecodeError",
    "FrameKind",
    "InvalidTextError",
    "PLAIN_THEME",
    "PlainTableTheme",
    "Row",
    "TableTheme",
    "TaprError",
    "TooManyColumnsError",
    "aggregate",
    "allocate",
    "is_numeric",
    "render_frame",
    "render_row",
    "render_table",
]
