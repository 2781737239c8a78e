# minimopoly

A small two-player property-trading game that runs in a terminal.

Two players, shown as 🚗 and 🎩, take turns going around a board of 20 tiles.
They buy properties, pay each other rent, draw surprise cards and try not to
go bankrupt.

The screen is drawn with ANSI cursor-positioning escape codes, so the game
needs a terminal that understands them and can show emoji.

## Installing

```
pip install .
```

## Playing

```
minimopoly
```

Options:

- `--directory DIR`: the directory that holds the save files. The default is
  the current directory.
- `--seed N`: a seed for the die and the surprise cards, so that a game can be
  replayed.

The same command can also be started with `python -m minimopoly.main`.

When the game starts, it looks for a saved game in the save directory. If it
finds one, you can load it or start a new game. Starting a new game deletes
the old save files. Otherwise you are asked for the two player names. Only the
first word of each name is used.

Each turn begins with a menu:

1. Roll dice
2. View my properties
3. Save and Exit
4. Exit without saving

If input ends or the game is interrupted with Ctrl-C, the command stops with
exit status 1. Otherwise it exits with status 0.

## Rules

- Each player starts with $500. Passing GO pays $150.
- If you land on an unowned property, you may buy it when you have at least
  its price.
- If you land on the other player's property, you pay them its rent. The rent
  is four times higher when the owner holds every property of that set.
- A Surprise Card tile gives one of three things at random: $100, a $50 fine,
  or a "Get Out of Jail Free" card.
- An Income Tax tile costs $150.
- The "Go To Jail" tile sends you to jail. Each jailed turn serves one turn of
  the sentence. Landing there costs you your next two turns. At the start of
  a jailed turn you may use a "Get Out of Jail Free" card to be freed at once.
- A player whose money falls below -$200 goes bankrupt, and the game ends.
- The game also ends once all 11 properties have been bought.

When the game ends, including by choosing an exit option from the menu, the
winner is chosen as follows:

- If a player is bankrupt, the other player wins.
- Otherwise the player with more properties wins.
- If both own the same number, the player with more money wins. If their money
  is also equal, the second player wins.

## Saved games

"Save and Exit" writes a file named `savegame.txt` to the save directory. It
also writes one file named `<name>.txt` for each player. A player file holds
the player's name, money, position, jail cards and owned properties. Time left
in jail is not saved. A loaded player starts out free.

If a player's file is missing when a game is loaded, that player starts over
with the starting values.

## Using it from Python

The game can be driven with any text streams, for example in tests:

```python
import io
import random

from minimopoly.console import Console
from minimopoly.gameio import SaveStore
from minimopoly.main import run_game

console = Console(stdin=io.StringIO("Ann\nBob\n4\n"), stdout=io.StringIO())
store = SaveStore("saves", console)
state = run_game(console, store, random.Random(1), sleep=lambda seconds: None)
```

`run_game` plays a whole game and returns the final `GameState`. The rules
themselves are in `minimopoly.actions`, movement and drawing of the board are
in `minimopoly.board`, and the turn flow is in `minimopoly.flow`.

## Running the tests

```
pip install .[test]
pytest
```