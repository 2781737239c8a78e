"""Fixed game values: economy, board layout, property data and sets."""

from __future__ import annotations

from enum import Enum

NUM_PLAYERS = 2
BOARD_PERIMETER = 20
MAX_PROPERTIES = 11
STARTING_MONEY = 500
GO_BONUS = 150
JAIL_POSITION = 5
GO_TO_JAIL_POSITION = 15
BANKRUPTCY_LIMIT = -200
TAX_AMOUNT = 150
JAIL_TURNS_TO_SKIP = 1
P1_ICON = "🚗"
P2_ICON = "🎩"


class TileType(str, Enum):
    """Logical kind of a board tile."""

    START = "S"
    PROPERTY = "P"
    CARD = "C"
    TAX = "I"
    JAIL = "J"
    GO_TO_JAIL = "G"
    PARKING = "E"


_T = TileType

BOARD_LAYOUT: tuple[TileType, ...] = (
    _T.START, _T.PROPERTY, _T.CARD, _T.PROPERTY, _T.TAX, _T.GO_TO_JAIL,
    _T.PROPERTY, _T.PROPERTY, _T.CARD, _T.PROPERTY,
    _T.PARKING, _T.PROPERTY, _T.TAX, _T.PROPERTY, _T.PROPERTY, _T.JAIL,
    _T.CARD, _T.PROPERTY, _T.PROPERTY, _T.PROPERTY,
)

BOARD_SYMBOLS: tuple[str, ...] = (
    "🏁", "🏠", "❔", "🏠", "💲", "🚓",
    "🏢", "🏢", "❔", "🏢",
    "🅿️", "🏛️", "💲", "🏛️", "🏛️", "👮",
    "❔", "🏙️", "🏙️", "🏙️",
)

PROPERTY_NAMES: tuple[str, ...] = (
    "GO!", "Mediterranean Avenue", "Surprise Card", "Baltic Avenue", "Income Tax", "Go To Jail",
    "St. Charles Place", "Virginia Avenue", "Surprise Card", "St. James Place", "Free Parking",
    "Tenessee Avenue", "Income Tax", "Kentucky Avenue", "Illinois Avenue",
    "Jail (just visiting)", "Surprise Card", "Oregon Avenue", "Arkansas Avenue", "California Avenue",
)

PROPERTY_PRICES: tuple[int, ...] = (
    0, 60, 0, 60, 0, 0, 100, 100, 0, 120, 0, 140, 0, 140, 160, 0, 0, 180, 180, 200,
)

PROPERTY_RENTS: tuple[int, ...] = (
    0, 10, 0, 12, 0, 0, 15, 15, 0, 18, 0, 20, 0, 20, 22, 0, 0, 25, 25, 30,
)

RENT_MULTIPLIER = 4

PROPERTY_SETS: tuple[tuple[int, ...], ...] = (
    (1, 3),
    (6, 7, 9),
    (11, 13, 14),
    (17, 18, 19),
)


def property_set_of(position: int) -> tuple[int, ...] | None:
    """Return the property set containing ``position``, or None if it is in no set."""
    return next((group for group in PROPERTY_SETS if position in group), None)