"""Inventory system for the loot backpack."""

from typing import Iterator, List, Optional, Tuple

from backpack.game.errors import (
    CapacityExceededError, EmptyInventoryError, PositionOutOfRangeError,
    ItemNotFoundError
)
from backpack.game.item import Item
from backpack.shared.constants.game_constants import INVENTORY_CAPACITY, LOGGER_NAME
from backpack.shared.types.game_types import FoundItem
from backpack.utils.logger import get_logger

logger = get_logger(f"{LOGGER_NAME}.inventory")


class Inventory:
    """Ordered, capacity-bounded sequential list of items.

    Storage is a preallocated slot array plus a length counter. Items occupy
    slots ``0..length-1`` with no gaps; removal shifts later items left.
    Positions passed in and out of the public methods are 1-based.

    Not thread-safe. Callers sharing an instance across threads must hold a
    lock around every call.
    """

    def __init__(self, max_capacity: int = INVENTORY_CAPACITY):
        """Initialize an inventory."""
        if max_capacity < 0:
            raise ValueError("max_capacity must not be negative")
        self.max_capacity = max_capacity
        self._slots: List[Optional[Item]] = [None] * max_capacity
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Item]:
        return iter(self.list())

    def __repr__(self):
        return f"Inventory({self._length}/{self.max_capacity})"

    def insert(self, item: Item) -> None:
        """Append an item after the current last one.

        Raises:
            CapacityExceededError: the backpack already holds max_capacity items.
        """
        if self.is_full():
            logger.rejected_action("insert", f"full, '{item.name}' not added")
            raise CapacityExceededError(self.max_capacity)

        self._slots[self._length] = item
        self._length += 1
        logger.inventory_action("insert", f"{item.describe()} at position {self._length}")

    def remove_at(self, position: int) -> Item:
        """Remove and return the item at a 1-based position.

        Every item after it moves one slot earlier, so this costs O(length).

        Raises:
            EmptyInventoryError: nothing to remove.
            PositionOutOfRangeError: position is not within 1..length.
        """
        if self._length == 0:
            logger.rejected_action("remove", "backpack is empty")
            raise EmptyInventoryError()

        index = position - 1
        if index < 0 or index >= self._length:
            logger.rejected_action("remove", f"position {position} of {self._length}")
            raise PositionOutOfRangeError(position, self._length)

        removed = self._slots[index]
        for i in range(index, self._length - 1):
            self._slots[i] = self._slots[i + 1]
        self._length -= 1
        self._slots[self._length] = None

        logger.inventory_action("remove", f"'{removed.name}' from position {position}")
        return removed

    def list(self) -> Tuple[Item, ...]:
        """Snapshot of the items in storage order."""
        return tuple(self._slots[:self._length])

    def find_by_name(self, name: str) -> Optional[FoundItem]:
        """Find the first item whose name equals ``name`` exactly.

        Matching is case-sensitive with no trimming. Returns None when
        nothing matches.
        """
        for i in range(self._length):
            item = self._slots[i]
            if item.name == name:
                return FoundItem(i + 1, item)
        return None

    def get_by_name(self, name: str) -> FoundItem:
        """Like find_by_name but raises ItemNotFoundError on a miss."""
        found = self.find_by_name(name)
        if found is None:
            raise ItemNotFoundError(name)
        return found

    def total_weight(self) -> float:
        """Get the total weight of items in the backpack."""
        return sum(item.weight for item in self.list())

    def remaining_capacity(self) -> int:
        """Number of free slots."""
        return self.max_capacity - self._length

    def is_full(self) -> bool:
        """Check if the backpack is at capacity."""
        return self._length >= self.max_capacity

    def is_empty(self) -> bool:
        """Check if the backpack holds nothing."""
        return self._length == 0
