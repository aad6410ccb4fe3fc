"""Text parsing and formatting utilities for the terminal menu."""

from typing import Optional, Sequence

from backpack.shared.constants.game_constants import TABLE_WIDTH, WEIGHT_DECIMALS
from backpack.shared.types.game_types import MenuOption


class InputError(ValueError):
    """Raised when a line typed by the user cannot be parsed."""


class FieldParser:
    """Parses raw user input into typed item fields."""

    def __init__(self):
        """Initialize the field parser."""
        self.aliases = {
            "i": MenuOption.INSERT,
            "add": MenuOption.INSERT,
            "r": MenuOption.REMOVE,
            "rm": MenuOption.REMOVE,
            "l": MenuOption.LIST,
            "ls": MenuOption.LIST,
            "s": MenuOption.SEARCH,
            "find": MenuOption.SEARCH,
            "q": MenuOption.QUIT,
            "quit": MenuOption.QUIT,
            "exit": MenuOption.QUIT
        }

    def parse_menu_option(self, input_text: str) -> Optional[MenuOption]:
        """Parse a menu choice. Returns None for anything unrecognized."""
        input_text = input_text.strip().lower()

        if not input_text:
            return None

        if input_text in self.aliases:
            return self.aliases[input_text]

        try:
            return MenuOption(int(input_text))
        except ValueError:
            return None

    def parse_text(self, input_text: str, field: str, max_length: int) -> str:
        """Trim a text field and check it is non-empty and within bounds."""
        text = input_text.strip()
        if not text:
            raise InputError(f"{field} cannot be empty.")
        if len(text) > max_length:
            raise InputError(f"{field} must be at most {max_length} characters.")
        return text

    def parse_weight(self, input_text: str) -> float:
        """Parse a weight in kg. A comma is accepted as the decimal separator."""
        text = input_text.strip().replace(",", ".")
        try:
            return float(text)
        except ValueError:
            raise InputError(f"'{input_text.strip()}' is not a valid weight.") from None

    def parse_int(self, input_text: str, field: str) -> int:
        """Parse a whole number."""
        text = input_text.strip()
        try:
            return int(text)
        except ValueError:
            raise InputError(f"'{text}' is not a valid {field.lower()}.") from None


class TextFormatter:
    """Formats backpack contents for display."""

    @staticmethod
    def rule(char: str = "=", width: int = TABLE_WIDTH) -> str:
        return char * width

    @staticmethod
    def center(text: str, width: int = TABLE_WIDTH) -> str:
        return text.center(width).rstrip()

    @staticmethod
    def format_row(position, name, category, quantity, weight) -> str:
        return f"| {position:<3} | {name:<20} | {category:<10} | {quantity:<5} | {weight:<11} |"

    @classmethod
    def format_table(cls, items: Sequence, title: str = "BACKPACK",
                     empty_text: str = "THE BACKPACK IS EMPTY!") -> str:
        """Render items as a fixed-width table.

        Long names and categories are not truncated, so those rows run wider
        than the frame.
        """
        lines = [cls.rule(), cls.center(title), cls.rule()]

        if not items:
            lines.append(cls.center(empty_text))
        else:
            lines.append(cls.format_row("#", "NAME", "CATEGORY", "QTY", "WEIGHT (kg)"))
            lines.append(cls.rule("-"))
            for position, item in enumerate(items, 1):
                lines.append(cls.format_row(
                    position,
                    item.name,
                    item.category,
                    item.quantity,
                    f"{item.weight:.{WEIGHT_DECIMALS}f}"
                ))

        lines.append(cls.rule())
        return "\n".join(lines)
