"""Exceptions raised by the inventory core."""


class InventoryError(Exception):
    """Base class for recoverable inventory errors."""


class CapacityExceededError(InventoryError):
    """Raised when inserting into a full inventory."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"Backpack is full ({capacity}/{capacity} items).")


class EmptyInventoryError(InventoryError):
    """Raised when removing from an empty inventory."""

    def __init__(self):
        super().__init__("Backpack is empty.")


class PositionOutOfRangeError(InventoryError):
    """Raised when a 1-based position is outside 1..length."""

    def __init__(self, position: int, length: int):
        self.position = position
        self.length = length
        super().__init__(f"Position {position} is out of range (1 to {length}).")


class ItemNotFoundError(InventoryError):
    """Raised when no item carries the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No item named '{name}' in the backpack.")


class InvalidItemError(InventoryError, ValueError):
    """Raised when an item field breaks its length bound."""
