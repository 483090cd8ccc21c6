"""Exceptions raised by tapr."""

from __future__ import annotations


class TaprError(Exception):
    """Base class for every error tapr reports to the user."""


class TooManyColumnsError(TaprError):
    """The usable width cannot hold every column at its comfort width."""

    def __init__(self, columns: int) -> None:
        super().__init__(f"too many columns: {columns}")
        self.columns = columns


class DecodeError(TaprError):
    """An input line could not be decoded."""

    def __init__(self, linenum: int, message: str | None = None) -> None:
        super().__init__(message or f"line {linenum}: decode error")
        self.linenum = linenum


class InvalidTextError(DecodeError):
    """An input line could not be split into cells."""

    def __init__(self, linenum: int, text: str) -> None:
        super().__init__(linenum, f"line {linenum}: invalid text: {text}")
        self.text = text
