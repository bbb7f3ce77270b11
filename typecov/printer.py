"""
Base text printer: output sink, optional colors and indentation.

Report printers subclass Printer and only emit through printl/printn/printt
so that indentation and colors are handled in one place.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import IO, Iterator, Optional

from report.ux import colorize as _colorize

INDENT_WIDTH = 2


class Printer:
    def __init__(
        self,
        out: Optional[IO[str]] = None,
        colors: bool = True,
        indent_level: int = 0,
    ) -> None:
        self.out = out if out is not None else sys.stdout
        self.colors = colors
        self.indent_level = indent_level

    def indent(self) -> None:
        self.indent_level += INDENT_WIDTH

    def dedent(self) -> None:
        self.indent_level = max(0, self.indent_level - INDENT_WIDTH)

    @contextmanager
    def indented(self) -> Iterator[None]:
        """Indent everything printed inside the block; restored even if the block raises."""
        self.indent()
        try:
            yield
        finally:
            self.dedent()

    def print_text(self, string: str) -> None:
        """Write string as-is: no indentation, no newline."""
        self.out.write(string)

    def printn(self) -> None:
        self.print_text("\n")

    def printt(self) -> None:
        """Write the current indentation only."""
        self.print_text(" " * self.indent_level)

    def printl(self, string: str) -> None:
        """Write an indented line."""
        self.printt()
        self.print_text(string)
        self.printn()

    def colorize(self, string: str, color: str) -> str:
        return _colorize(string, color, self.colors)
