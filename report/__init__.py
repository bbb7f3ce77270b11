"""Terminal presentation helpers: ANSI colors."""

from report.ux import COLORS, colorize, should_use_color

__all__ = [
    "COLORS",
    "colorize",
    "should_use_color",
]
