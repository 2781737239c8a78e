"""Terminal output with cursor positioning, and line input."""

from __future__ import annotations

import sys
from typing import TextIO


class Console:
    """A text terminal addressed by (x, y) cells, zero-based."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def move_cursor(self, x: int, y: int) -> None:
        """Place the cursor at column ``x``, row ``y``."""
        self.stdout.write(f"\033[{y + 1};{x + 1}H")

    def clear_screen(self) -> None:
        """Erase the screen and home the cursor."""
        self.stdout.write("\033[2J\033[1;1H")
        self.stdout.flush()

    def print_at(self, x: int, y: int, text: str) -> None:
        """Write ``text`` starting at (x, y)."""
        self.move_cursor(x, y)
        self.stdout.write(text)
        self.stdout.flush()

    def write(self, text: str) -> None:
        """Write ``text`` at the current cursor position."""
        self.stdout.write(text)
        self.stdout.flush()

    def read_line(self) -> str:
        """Read one line without its line ending; raise EOFError when input ends."""
        line = self.stdin.readline()
        if not line:
            raise EOFError("no more input")
        return line.rstrip("\r\n")