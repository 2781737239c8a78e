"""Board drawing and movement."""

from __future__ import annotations

from dataclasses import replace

from .console import Console
from .constants import BOARD_PERIMETER, BOARD_SYMBOLS, GO_BONUS
from .player import Player

_START_X = 2
_START_Y = 2
_CELL_WIDTH = 8


def grid_coords(position: int) -> tuple[int, int]:
    """Map a board position (0-19) to (row, col) on the 6x6 grid.

    Positions outside the board map to (0, 0).
    """
    if 0 <= position <= 5:
        return 0, position
    if 6 <= position <= 9:
        return position - 5, 5
    if 10 <= position <= 15:
        return 5, 15 - position
    if 16 <= position <= 19:
        return 4 - (position - 16), 0
    return 0, 0


def _cell_origin(position: int) -> tuple[int, int]:
    row, col = grid_coords(position)
    return _START_X + col * _CELL_WIDTH, _START_Y + row * 2


def print_board(console: Console, p1: Player, p2: Player) -> None:
    """Draw all tiles and both player markers."""
    for position, symbol in enumerate(BOARD_SYMBOLS):
        x, y = _cell_origin(position)
        console.print_at(x, y, f"[ {symbol} ]")

    x1, y1 = _cell_origin(p1.position)
    console.print_at(x1 + 5, y1, p1.icon)

    x2, y2 = _cell_origin(p2.position)
    if p1.position == p2.position:
        console.print_at(x2 + 6, y2, p2.icon)
        console.print_at(x2 + 4, y2, p2.icon)
    else:
        console.print_at(x2 + 2, y2, p2.icon)


def move_player(player: Player, roll: int) -> Player:
    """Return the player advanced by ``roll``, with the GO bonus if GO was passed."""
    old_position = player.position
    new_position = (old_position + roll) % BOARD_PERIMETER
    money = player.money + GO_BONUS if new_position < old_position else player.money
    return replace(
        player,
        position=new_position,
        money=money,
        properties=set(player.properties),
    )