"""Terminal size detection."""

from __future__ import annotations

import os
import sys


def get_terminal_width() -> int | None:
    """Return the column count of the terminal on stdout, else stderr.

    Returns ``None`` when neither stream is attached to a terminal.
    """
    for stream in (sys.stdout, sys.stderr):
        try:
            return os.get_terminal_size(stream.fileno()).columns
        except (AttributeError, ValueError, OSError):
            continue
    return None
