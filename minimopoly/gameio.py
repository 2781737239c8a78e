"""Saving and loading games as plain text files."""

from __future__ import annotations

import os
import re
from pathlib import Path

from .actions import GameState
from .console import Console
from .constants import BOARD_PERIMETER, P1_ICON, P2_ICON
from .player import Player

_MASTER_FILE = "savegame.txt"
_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str, default: int = 0) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else default


def _ints(text: str) -> list[int]:
    values = []
    pos = 0
    while (match := _INT.match(text, pos)) is not None:
        values.append(int(match.group(1)))
        pos = match.end()
    return values


class SaveStore:
    """Save files kept in one directory: one per player plus a master file."""

    def __init__(self, directory: str | os.PathLike[str] = ".", console: Console | None = None) -> None:
        self.directory = Path(directory)
        self.console = console if console is not None else Console()

    def _player_path(self, name: str) -> Path:
        return self.directory / f"{name}.txt"

    @property
    def _master_path(self) -> Path:
        return self.directory / _MASTER_FILE

    def _say(self, text: str) -> None:
        self.console.write(text + "\n")

    def save_exists(self) -> bool:
        """True if a master save file is present."""
        return self._master_path.is_file()

    def saved_player_names(self) -> tuple[str, str]:
        """Names of the two saved players; empty strings where missing."""
        try:
            lines = self._master_path.read_text(encoding="utf-8").splitlines()
        except OSError:
            lines = []
        lines += ["", ""]
        return lines[0], lines[1]

    def save_player(self, player: Player) -> None:
        """Write one player's data to their own file."""
        owned = "".join(f"{index} " for index in sorted(player.properties))
        content = (
            f"{player.name}\n{player.money}\n{player.position}\n"
            f"{player.get_out_of_jail_cards}\n{owned}\n"
        )
        self._player_path(player.name).write_text(content, encoding="utf-8")

    def load_player(self, name: str) -> Player:
        """Load a player by name, or create a fresh one if no file exists."""
        try:
            text = self._player_path(name).read_text(encoding="utf-8")
        except OSError:
            self._say(f"No data found for {name}. Creating new player.")
            return Player.new(name)

        lines = text.splitlines()
        has_property_line = len(lines) >= 5
        lines += [""] * 5
        player = Player(
            name=lines[0],
            money=_leading_int(lines[1]),
            position=_leading_int(lines[2]),
            get_out_of_jail_cards=_leading_int(lines[3]),
        )
        if has_property_line:
            player.properties = {i for i in _ints(lines[4]) if 0 <= i < BOARD_PERIMETER}
        player.icon = P1_ICON if name == self.saved_player_names()[0] else P2_ICON
        self._say(f"Data for {player.name} loaded successfully.")
        return player

    def save_game(self, state: GameState) -> None:
        """Save both players and the master file naming them."""
        self._say("Saving game...")
        first, second = state.players[0], state.players[1]
        self.save_player(first)
        self.save_player(second)
        self._master_path.write_text(f"{first.name}\n{second.name}\n", encoding="utf-8")
        self._say("Game saved successfully.")

    def delete_old_save_files(self) -> None:
        """Remove the files of the previously saved game, if any."""
        if not self.save_exists():
            return
        self._say("Deleting data from the previous game...")
        for name in self.saved_player_names():
            try:
                self._player_path(name).unlink(missing_ok=True)
            except OSError:
                pass
        self._master_path.unlink(missing_ok=True)