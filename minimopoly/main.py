"""Command entry point and the main game loop."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Callable, Sequence

from .actions import GameState
from .console import Console
from .constants import NUM_PLAYERS
from .flow import (
    check_game_over,
    draw_ui,
    handle_turn_menu,
    pause_for_next_turn,
    perform_turn_action,
    setup_game,
    show_winner,
)
from .gameio import SaveStore


def run_game(
    console: Console,
    store: SaveStore,
    rng: random.Random | None = None,
    sleep: Callable[[float], None] | None = None,
) -> GameState:
    """Play a whole game and return its final state."""
    rng = rng if rng is not None else random.Random()
    sleep = sleep if sleep is not None else time.sleep

    state = setup_game(console, store, sleep)
    while not state.is_game_over:
        draw_ui(state, console)
        handle_turn_menu(state, console, store)
        if state.is_game_over:
            break
        perform_turn_action(state, console, rng, sleep)
        check_game_over(state, console)
        if not state.is_game_over:
            pause_for_next_turn(console)
            state.current_player_index = (state.current_player_index + 1) % NUM_PLAYERS

    show_winner(state, console)
    return state


def _use_utf8_output() -> None:
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is None:
        return
    try:
        reconfigure(encoding="utf-8")
    except (ValueError, OSError):
        pass


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game in the terminal; return the exit status."""
    parser = argparse.ArgumentParser(prog="minimopoly", description="A two-player board game.")
    parser.add_argument(
        "--directory", default=".", help="directory holding the save files (default: current)"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the dice")
    args = parser.parse_args(argv)

    _use_utf8_output()
    console = Console()
    store = SaveStore(args.directory, console)
    rng = random.Random(args.seed)
    try:
        run_game(console, store, rng, time.sleep)
    except (EOFError, KeyboardInterrupt):
        console.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())