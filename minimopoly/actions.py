"""Game state and the rules applied when a player lands on a tile."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .console import Console
from .constants import (
    GO_BONUS,
    JAIL_POSITION,
    JAIL_TURNS_TO_SKIP,
    PROPERTY_NAMES,
    PROPERTY_PRICES,
    PROPERTY_RENTS,
    RENT_MULTIPLIER,
    TAX_AMOUNT,
    property_set_of,
)
from .player import Player
from .validation import get_yes_no_input


@dataclass
class GameState:
    """Everything describing a game in progress."""

    players: list[Player]
    current_player_index: int = 0
    is_game_over: bool = False

    def current_player(self) -> Player:
        """The player whose turn it is."""
        return self.players[self.current_player_index]


def _say(console: Console, text: str) -> None:
    console.write(text + "\n")


def roll_dice(rng: random.Random) -> int:
    """Roll a six-sided die."""
    return rng.randint(1, 6)


def property_owner_index(state: GameState, position: int) -> int:
    """Index of the player owning ``position``, or -1 if nobody owns it."""
    return next(
        (index for index, player in enumerate(state.players) if position in player.properties),
        -1,
    )


def owns_full_set(owner: Player, position: int) -> bool:
    """True if ``owner`` holds every property of the set containing ``position``."""
    group = property_set_of(position)
    if group is None:
        return False
    return all(member in owner.properties for member in group)


def handle_property(state: GameState, console: Console) -> None:
    """Offer an unowned property for sale, or charge rent on an owned one."""
    current = state.current_player()
    position = current.position
    owner_index = property_owner_index(state, position)
    name = PROPERTY_NAMES[position]
    price = PROPERTY_PRICES[position]

    if owner_index == -1:
        _say(console, f"The property '{name}' is available.")
        _say(console, f"It costs ${price}. Your money: ${current.money}")
        if current.money >= price:
            console.write("Do you want to buy it? (y/n): ")
            if get_yes_no_input(console):
                current.money -= price
                current.properties.add(position)
                _say(console, f"{current.name} has purchased '{name}'.")
        else:
            _say(console, "You don't have enough money for this property.")
    elif owner_index != state.current_player_index:
        owner = state.players[owner_index]
        rent = PROPERTY_RENTS[position]
        if owns_full_set(owner, position):
            _say(
                console,
                f"WATCH OUT! {owner.name} owns the complete set. "
                f"Rent is multiplied by {RENT_MULTIPLIER}!",
            )
            rent *= RENT_MULTIPLIER
        _say(console, f"This property belongs to {owner.name}. You must pay a rent of ${rent}.")
        current.money -= rent
        owner.money += rent
    else:
        _say(console, "You landed on your own property. You are safe at home!")


def handle_special_card(state: GameState, console: Console, rng: random.Random) -> None:
    """Apply a random surprise card to the current player."""
    current = state.current_player()
    effect = rng.randrange(3)
    _say(console, "You landed on a Surprise Card tile!")
    if effect == 0:
        _say(console, "You found a treasure! You earn $100. 💎")
        current.money += 100
    elif effect == 1:
        _say(console, "Pay a speeding ticket. You lose $50. 💸")
        current.money -= 50
    else:
        _say(console, "You got a 'Get Out of Jail Free' card! 🔑")
        current.get_out_of_jail_cards += 1


def handle_go_to_jail(state: GameState, console: Console) -> None:
    """Send the current player straight to jail."""
    current = state.current_player()
    _say(console, f"Go directly to Jail! Do not pass GO, do not collect ${GO_BONUS}.")
    current.position = JAIL_POSITION
    current.turns_in_jail = JAIL_TURNS_TO_SKIP + 1


def _ask_use_card(console: Console) -> bool:
    while True:
        console.write("You have a Get Out of Jail Free card. Use it? (y/n): ")
        line = console.read_line().strip()
        while not line:
            line = console.read_line().strip()
        choice = line[0].lower()
        if choice in ("y", "n"):
            return choice == "y"
        _say(console, "Error: Invalid option.")


def handle_jail_turn(state: GameState, console: Console) -> None:
    """Play a turn for a jailed player: offer a card, then serve one turn."""
    current = state.current_player()
    _say(console, f"{current.name} is in jail.")
    if current.get_out_of_jail_cards > 0 and _ask_use_card(console):
        current.get_out_of_jail_cards -= 1
        current.turns_in_jail = 0
        _say(console, "You used the card. You are free!")

    if current.turns_in_jail > 0:
        current.turns_in_jail -= 1
        if current.turns_in_jail > 0:
            _say(
                console,
                f"You remain in jail. You have {current.turns_in_jail} more turn(s) to wait.",
            )
        else:
            _say(console, "You have served your sentence. You can move on your next turn.")


def handle_tax(state: GameState, console: Console) -> None:
    """Charge the current player the income tax."""
    current = state.current_player()
    _say(console, f"Income Tax. You must pay ${TAX_AMOUNT}.")
    current.money -= TAX_AMOUNT