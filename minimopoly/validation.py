"""Validated keyboard input."""

from __future__ import annotations

import re

from .console import Console

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_ERROR_LINE = "Invalid option. Try again.  "
_BLANK_LINE = " " * len(_ERROR_LINE)


def _parse_leading_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def get_valid_input(console: Console, minimum: int, maximum: int) -> int:
    """Read lines until one starts with an integer in [minimum, maximum]."""
    while True:
        choice = _parse_leading_int(console.read_line())
        if choice is not None and minimum <= choice <= maximum:
            console.print_at(55, 15, _BLANK_LINE)
            return choice
        console.print_at(55, 15, _ERROR_LINE)


def get_yes_no_input(console: Console) -> bool:
    """Read lines until a single 'y' or 'n' (any case); True means yes."""
    while True:
        line = console.read_line()
        choice = line.lower() if len(line) == 1 else ""
        if choice in ("y", "n"):
            return choice == "y"
        console.write(" Error: Please enter 'y' or 'n'. Try again: ")