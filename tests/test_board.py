import io
import re

import pytest

from minimopoly.board import grid_coords, move_player, print_board
from minimopoly.console import Console
from minimopoly.constants import BOARD_PERIMETER, BOARD_SYMBOLS, GO_BONUS, P1_ICON, P2_ICON
from minimopoly.player import Player

_ESC = re.compile(r"\x1b\[(\d+);(\d+)H([^\x1b]*)")


def draw(p1, p2):
    out = io.StringIO()
    print_board(Console(io.StringIO(), out), p1, p2)
    return [(int(col) - 1, int(row) - 1, text) for row, col, text in _ESC.findall(out.getvalue())]


def test_corners():
    assert grid_coords(0) == (0, 0)
    assert grid_coords(5) == (0, 5)
    assert grid_coords(15) == (5, 0)


def test_coords_unique_and_on_perimeter():
    coords = [grid_coords(i) for i in range(BOARD_PERIMETER)]
    assert len(set(coords)) == BOARD_PERIMETER
    for row, col in coords:
        assert row in (0, 5) or col in (0, 5)


def test_coords_consecutive_positions_adjacent():
    for i in range(BOARD_PERIMETER):
        r1, c1 = grid_coords(i)
        r2, c2 = grid_coords((i + 1) % BOARD_PERIMETER)
        assert abs(r1 - r2) + abs(c1 - c2) == 1


def test_out_of_range_maps_to_origin():
    assert grid_coords(-1) == grid_coords(0)
    assert grid_coords(BOARD_PERIMETER) == grid_coords(0)


def test_move_without_passing_go():
    p = Player.new("Ann")
    p.position = 3
    moved = move_player(p, 4)
    assert moved.position == 7
    assert moved.money == p.money
    assert p.position == 3


def test_move_passing_go_pays_bonus():
    p = Player.new("Ann")
    p.position = 19
    moved = move_player(p, 3)
    assert moved.position == 2
    assert moved.money == p.money + GO_BONUS


def test_move_copies_properties():
    p = Player.new("Ann")
    p.properties.add(1)
    moved = move_player(p, 2)
    moved.properties.add(3)
    assert p.properties == {1}


def test_board_draws_every_tile():
    writes = draw(Player.new("A", P1_ICON), Player.new("B", P2_ICON))
    cells = [text for _, _, text in writes[:BOARD_PERIMETER]]
    assert cells == [f"[ {s} ]" for s in BOARD_SYMBOLS]


def test_markers_on_different_tiles():
    p1 = Player.new("A", P1_ICON)
    p2 = Player.new("B", P2_ICON)
    p2.position = 7
    writes = draw(p1, p2)
    cells = writes[:BOARD_PERIMETER]
    markers = writes[BOARD_PERIMETER:]
    assert len(markers) == 2
    x1, y1, _ = cells[p1.position]
    x2, y2, _ = cells[p2.position]
    assert markers[0] == (x1 + 5, y1, P1_ICON)
    assert markers[1] == (x2 + 2, y2, P2_ICON)


@pytest.mark.parametrize("position", [0, 9, 16])
def test_markers_on_same_tile(position):
    p1 = Player.new("A", P1_ICON)
    p2 = Player.new("B", P2_ICON)
    p1.position = p2.position = position
    writes = draw(p1, p2)
    x, y, _ = writes[position]
    assert writes[BOARD_PERIMETER:] == [
        (x + 5, y, P1_ICON),
        (x + 6, y, P2_ICON),
        (x + 4, y, P2_ICON),
    ]