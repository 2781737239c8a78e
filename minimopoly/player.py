"""The player record and its helpers."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import STARTING_MONEY


@dataclass
class Player:
    """All state belonging to a single player."""

    name: str
    icon: str = ""
    money: int = STARTING_MONEY
    position: int = 0
    properties: set[int] = field(default_factory=set)
    get_out_of_jail_cards: int = 0
    turns_in_jail: int = 0
    is_bankrupt: bool = False

    @classmethod
    def new(cls, name: str, icon: str = "") -> "Player":
        """Create a player with the starting values."""
        return cls(name=name, icon=icon)

    def property_count(self) -> int:
        """Number of properties this player owns."""
        return len(self.properties)

    def status_lines(self) -> list[str]:
        """Lines describing the player's status."""
        return [
            f"-> Name: {self.name}",
            f"-> Money: ${self.money}",
            f"-> Get Out of Jail cards: {self.get_out_of_jail_cards}",
        ]