"""Item record stored in the backpack."""

from dataclasses import dataclass
from typing import Dict, Any

from backpack.game.errors import InvalidItemError
from backpack.shared.constants.game_constants import (
    MAX_NAME_LENGTH, MAX_CATEGORY_LENGTH
)


@dataclass(frozen=True)
class Item:
    """A single loot record.

    Items are immutable once created; replacing one means removing it and
    inserting a new record. Weight is informational and never checked against
    a limit.
    """
    name: str
    category: str
    weight: float = 0.0
    quantity: int = 1

    def __post_init__(self):
        if len(self.name) > MAX_NAME_LENGTH:
            raise InvalidItemError(
                f"Item name must be at most {MAX_NAME_LENGTH} characters "
                f"(got {len(self.name)})."
            )
        if len(self.category) > MAX_CATEGORY_LENGTH:
            raise InvalidItemError(
                f"Item category must be at most {MAX_CATEGORY_LENGTH} characters "
                f"(got {len(self.category)})."
            )

    def describe(self) -> str:
        """One-line summary used in menu messages."""
        return (f"{self.name} (Category: {self.category}, Qty: {self.quantity}, "
                f"Weight: {self.weight:.2f})")

    def to_dict(self) -> Dict[str, Any]:
        """Convert item to a plain dictionary."""
        return {
            'name': self.name,
            'category': self.category,
            'weight': self.weight,
            'quantity': self.quantity
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Item':
        """Create an item from dictionary data, e.g. a config entry."""
        if data.get('name') is None:
            raise InvalidItemError("Item data is missing field 'name'")
        try:
            name = str(data['name'])
            category = str(data.get('category') or '')
            weight = float(data.get('weight', 0))
            quantity = int(data.get('quantity', 1))
        except (TypeError, ValueError) as e:
            raise InvalidItemError(f"Item data has a bad value: {e}") from e

        return cls(name=name, category=category, weight=weight, quantity=quantity)
