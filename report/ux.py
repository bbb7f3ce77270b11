"""
Report UX: ANSI colors for terminal output.
"""

from __future__ import annotations

import sys
from typing import IO, Optional


# ANSI codes (no external deps)
_RESET = "\033[0m"
_BOLD = "\033[1m"
_RED = "\033[31m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_CYAN = "\033[36m"
_LIGHT_BLACK = "\033[90m"

COLORS = {
    "bold": _BOLD,
    "red": _RED,
    "green": _GREEN,
    "yellow": _YELLOW,
    "cyan": _CYAN,
    "light_black": _LIGHT_BLACK,
    "dim": _LIGHT_BLACK,
}


def colorize(text: str, color: str, use_color: bool = True) -> str:
    """Wrap text in the ANSI code for color. Unknown colors raise KeyError."""
    code = COLORS[color]
    return f"{code}{text}{_RESET}" if use_color else text


def should_use_color(force: Optional[bool] = None, stream: Optional[IO[str]] = None) -> bool:
    """Use color only when the stream (stdout by default) is a TTY, unless force is set."""
    if force is not None:
        return force
    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())
