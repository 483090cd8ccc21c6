"""Styling layer: maps row kinds to text-styling functions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

_RESET = "\x1b[0m"
_WHITE = "\x1b[37m"
_BLUE = "\x1b[34m"
_GREEN = "\x1b[32m"
_GRAY = "\x1b[90m"


class TableTheme(Protocol):
    header: Callable[[str], str]
    even_row: Callable[[str], str]
    odd_row: Callable[[str], str]
    frame: Callable[[str], str]


def _color(code: str) -> Callable[[str], str]:
    def apply(text: str) -> str:
        return f"{code}{text}{_RESET}"

    return apply


def _identity(text: str) -> str:
    return text


@dataclass
class AnsiTableTheme:
    """Default colored theme."""

    header: Callable[[str], str] = _color(_WHITE)
    even_row: Callable[[str], str] = _color(_BLUE)
    odd_row: Callable[[str], str] = _color(_GREEN)
    frame: Callable[[str], str] = _color(_GRAY)


@dataclass
class PlainTableTheme:
    """Theme that leaves text unstyled."""

    header: Callable[[str], str] = _identity
    even_row: Callable[[str], str] = _identity
    odd_row: Callable[[str], str] = _identity
    frame: Callable[[str], str] = _identity


PLAIN_THEME = PlainTableTheme()


def row_style(theme: TableTheme, line_number: int) -> Callable[[str], str]:
    """Pick the style for a row: header for line 0, else by parity."""
    if line_number == 0:
        return theme.header
    if line_number % 2 == 0:
        return theme.even_row
    return theme.odd_row
