"""Turn flow: game setup, screen layout, the turn menu, turn actions and the end of game."""

from __future__ import annotations

import random
import time
from typing import Callable

from .actions import (
    GameState,
    handle_go_to_jail,
    handle_jail_turn,
    handle_property,
    handle_special_card,
    handle_tax,
    property_owner_index,
    roll_dice,
)
from .board import move_player, print_board
from .console import Console
from .constants import (
    BANKRUPTCY_LIMIT,
    BOARD_LAYOUT,
    BOARD_SYMBOLS,
    GO_BONUS,
    MAX_PROPERTIES,
    P1_ICON,
    P2_ICON,
    PROPERTY_NAMES,
    TileType,
)
from .gameio import SaveStore
from .player import Player
from .validation import get_valid_input

Sleeper = Callable[[float], None]

_RULE = "=" * 40
_BLANK_MESSAGE_LINE = " " * 57
_MESSAGE_ROWS = range(19, 28)


def _clear_messages(console: Console) -> None:
    for row in _MESSAGE_ROWS:
        console.print_at(2, row, _BLANK_MESSAGE_LINE)


def _wait_for_enter(console: Console) -> None:
    try:
        console.read_line()
    except EOFError:
        pass


def _read_name(console: Console) -> str:
    while True:
        words = console.read_line().split()
        if words:
            return words[0]


def _ask_names(console: Console, first_row: int) -> list[Player]:
    console.print_at(2, first_row, "Player 1 name: ")
    first = _read_name(console)
    console.print_at(2, first_row + 1, "Player 2 name: ")
    second = _read_name(console)
    return [Player.new(first), Player.new(second)]


def setup_game(console: Console, store: SaveStore, sleep: Sleeper | None = None) -> GameState:
    """Show the welcome screen, then load the saved game or start a new one."""
    sleep = sleep if sleep is not None else time.sleep
    console.clear_screen()
    console.print_at(2, 1, _RULE)
    console.print_at(2, 2, "      WELCOME TO MINIMOPOLY 🏁")
    console.print_at(2, 3, _RULE)

    if store.save_exists():
        first, second = store.saved_player_names()
        console.print_at(2, 5, "A saved game was found:")
        console.print_at(2, 6, f" -> {first} vs {second}")
        console.print_at(2, 8, "What do you want to do?")
        console.print_at(2, 9, "1. Load game 💾")
        console.print_at(2, 10, "2. Start a new game (the previous one will be deleted) 🚮")
        console.move_cursor(2, 12)
        choice = get_valid_input(console, 1, 2)

        if choice == 1:
            console.print_at(2, 14, "Loading saved game...")
            sleep(2)
            console.print_at(2, 1, f"Loading game for {first} and {second}...")
            sleep(2)
            console.print_at(2, 3, "Game loaded successfully!")
            console.print_at(2, 4, f"Welcome back, {first} and {second}!")
            sleep(2)
            players = [store.load_player(first), store.load_player(second)]
        else:
            store.delete_old_save_files()
            console.clear_screen()
            console.print_at(2, 1, "Previous files deleted. Creating new game...")
            players = _ask_names(console, 3)
    else:
        console.print_at(2, 5, "No saved games found.")
        console.print_at(2, 6, "Starting new game...")
        sleep(2)
        players = _ask_names(console, 8)

    players[0].icon = P1_ICON
    players[1].icon = P2_ICON
    return GameState(players=players)


def draw_ui(state: GameState, console: Console) -> None:
    """Draw the board, the legend, the current player's status and the menu."""
    current = state.current_player()
    first, second = state.players[0], state.players[1]

    console.clear_screen()
    console.print_at(2, 0, f" MINIMOPOLY - TURN OF {current.name} ")

    print_board(console, first, second)
    console.print_at(
        2, 14, f"Leyenda:  {first.icon} {first.name}   {second.icon} {second.name}"
    )

    console.print_at(55, 2, "--- STATUS ---")
    console.print_at(55, 3, f"Money: ${current.money} 💰")
    console.print_at(55, 4, f"Properties: {current.property_count()} 🏠")
    console.print_at(55, 5, f"Jail Cards: {current.get_out_of_jail_cards} 🔑")

    console.print_at(55, 8, "--- MENU ---")
    console.print_at(55, 9, "1. Roll dice 🎲")
    console.print_at(55, 10, "2. View my properties")
    console.print_at(55, 11, "3. Save and Exit")
    console.print_at(55, 12, "4. Exit without saving")

    console.print_at(2, 18, "--- TURN MESSAGES ---")


def _show_properties(console: Console, player: Player) -> None:
    _clear_messages(console)
    console.print_at(2, 19, f"{player.name}'s properties:")
    row = 20
    for position in sorted(player.properties):
        console.print_at(4, row, f"-> {BOARD_SYMBOLS[position]} {PROPERTY_NAMES[position]}")
        row += 1
    if not player.properties:
        console.print_at(4, row, "(You don't have any properties yet)")


def handle_turn_menu(state: GameState, console: Console, store: SaveStore) -> None:
    """Run the pre-roll menu until the player rolls, saves and exits, or exits."""
    current = state.current_player()
    while True:
        console.print_at(55, 14, "Choose an option: ")
        choice = get_valid_input(console, 1, 4)
        if choice == 1:
            return
        if choice == 2:
            _show_properties(console, current)
            continue
        if choice == 3:
            store.save_game(state)
        state.is_game_over = True
        return


def perform_turn_action(
    state: GameState,
    console: Console,
    rng: random.Random,
    sleep: Sleeper | None = None,
) -> None:
    """Serve a jail turn, or roll, move and resolve the tile landed on."""
    sleep = sleep if sleep is not None else time.sleep
    current = state.current_player()

    _clear_messages(console)
    console.move_cursor(2, 19)

    if current.turns_in_jail > 0:
        handle_jail_turn(state, console)
        return

    roll = roll_dice(rng)
    console.write(f"{current.name} is rolling the dice... ")
    console.move_cursor(2, 20)
    console.write("Rolling... ")
    sleep(1)
    console.write(f"{current.name} rolled a {roll}!\n")

    old_position = current.position
    moved = move_player(current, roll)
    state.players[state.current_player_index] = moved

    console.move_cursor(2, 20)
    if moved.position < old_position:
        console.write(f"Passed GO and collects ${GO_BONUS}!\n")
        console.move_cursor(2, 21)

    console.move_cursor(2, 23)
    tile = BOARD_LAYOUT[moved.position]
    if tile is TileType.PROPERTY:
        handle_property(state, console)
    elif tile is TileType.CARD:
        handle_special_card(state, console, rng)
    elif tile is TileType.TAX:
        handle_tax(state, console)
    elif tile is TileType.GO_TO_JAIL:
        handle_go_to_jail(state, console)


def check_game_over(state: GameState, console: Console) -> None:
    """End the game on a bankruptcy or once every property has been bought."""
    for player in state.players:
        if player.money < BANKRUPTCY_LIMIT:
            player.is_bankrupt = True
            state.is_game_over = True
            console.print_at(2, 26, f"!{player.name} has gone bankrupt! 📉")
            console.print_at(2, 28, "Press Enter to see the winner...")
            _wait_for_enter(console)

    owned = sum(
        1
        for position, tile in enumerate(BOARD_LAYOUT)
        if tile is TileType.PROPERTY and property_owner_index(state, position) != -1
    )
    if owned >= MAX_PROPERTIES:
        state.is_game_over = True
        console.print_at(2, 26, "!All properties have been bought!")
        console.print_at(2, 28, "Press Enter to see the winner...")
        _wait_for_enter(console)


def determine_winner(state: GameState) -> Player:
    """Pick the winner: the solvent player, else most properties, else most money."""
    first, second = state.players[0], state.players[1]
    if first.is_bankrupt:
        return second
    if second.is_bankrupt:
        return first
    if first.property_count() != second.property_count():
        return first if first.property_count() > second.property_count() else second
    return first if first.money > second.money else second


def show_winner(state: GameState, console: Console) -> None:
    """Clear the screen and announce the winner."""
    winner = determine_winner(state)
    console.clear_screen()
    console.print_at(1, 1, "==================== END OF GAME ====================")
    console.print_at(1, 3, f"!!! The winner is {winner.name} 🏆 !!!")
    console.print_at(1, 5, "=" * 52)
    console.move_cursor(0, 7)


def pause_for_next_turn(console: Console) -> None:
    """Wait for Enter before the next turn."""
    console.print_at(2, 28, "Press Enter to pass the turn...")
    _wait_for_enter(console)