"""Common type definitions used throughout the backpack."""

from enum import Enum
from typing import NamedTuple, TYPE_CHECKING

if TYPE_CHECKING:
    from backpack.game.item import Item


class MenuOption(Enum):
    """Actions offered by the terminal menu."""
    QUIT = 0
    INSERT = 1
    REMOVE = 2
    LIST = 3
    SEARCH = 4


class FoundItem(NamedTuple):
    """Result of a successful name search."""
    position: int
    item: 'Item'

