"""Reading input lines and splitting them into cells."""

from __future__ import annotations

import csv
import sys
from pathlib import Path
from typing import BinaryIO, Callable, Sequence

from tapr.errors import DecodeError, InvalidTextError

SplitLine = Callable[[int, str], list[str]]


def _decode_lines(stream: BinaryIO) -> list[str]:
    lines: list[str] = []
    for li, raw in enumerate(stream):
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(li + 1) from e
        lines.append(line.rstrip("\r\n"))
    return lines


def read_lines(path: str) -> list[str]:
    """Read all lines of *path*, or of standard input when *path* is ``-``."""
    if path == "-":
        return _decode_lines(sys.stdin.buffer)
    with Path(path).open("rb") as fp:
        return _decode_lines(fp)


def split_csv_line(linenum: int, line: str) -> list[str]:
    """Split one CSV record. *linenum* is 1-based and only used for errors.

    Stray quotes are kept lenient: ``"a"b`` reads as the field ``ab``.
    """
    try:
        return next(csv.reader([line]), [])
    except csv.Error as e:
        raise InvalidTextError(linenum, line) from e


def split_tsv_line(linenum: int, line: str) -> list[str]:
    return line.split("\t")


def sniff_delimiter(lines: Sequence[str], force_csv: bool = False, force_tsv: bool = False) -> str:
    """Pick ``","`` or ``"\\t"``. A tab anywhere in the input means TSV."""
    if force_csv and force_tsv:
        raise ValueError("options --csv and --tsv are mutually exclusive")
    if force_csv or (not force_tsv and not any("\t" in line for line in lines)):
        return ","
    return "\t"


def splitter_for(delimiter: str) -> SplitLine:
    return split_csv_line if delimiter == "," else split_tsv_line
