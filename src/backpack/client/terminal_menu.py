"""Terminal menu for managing the loot backpack.

The menu owns all console I/O. It reads and validates every field before
touching the inventory, so a bad line never changes the backpack.
"""

import argparse
import sys
from typing import Callable, Optional, TypeVar

from backpack import __version__
from backpack.config.config_manager import ConfigManager, ConfigError
from backpack.game.errors import InventoryError
from backpack.game.inventory import Inventory
from backpack.game.item import Item
from backpack.shared.constants.game_constants import (
    MAX_NAME_LENGTH, MAX_CATEGORY_LENGTH, SUGGESTED_CATEGORIES, DEFAULT_CONFIG_PATH
)
from backpack.shared.types.game_types import MenuOption
from backpack.utils.colors import (
    set_color_enabled, success_message, error_message, warning_message,
    item_found, announcement, info_message
)
from backpack.utils.logger import get_logger
from backpack.utils.parser import FieldParser, InputError, TextFormatter

T = TypeVar('T')

logger = get_logger()


class InventoryMenu:
    """Interactive menu driving a single Inventory."""

    def __init__(self, inventory: Inventory,
                 input_func: Optional[Callable[[str], str]] = None,
                 output_func: Optional[Callable[[str], None]] = None):
        """Initialize the menu.

        Args:
            inventory: The backpack to manage
            input_func: Reads one line, given a prompt. Raises EOFError at end of input.
            output_func: Writes one message
        """
        self.inventory = inventory
        self.read = input_func or input
        self.write = output_func or print
        self.parser = FieldParser()
        self.running = False

    def run(self):
        """Show the menu until the user quits or input ends."""
        self.running = True
        self.write(announcement(TextFormatter.rule("=", 52)))
        self.write(announcement(TextFormatter.center("WELCOME TO THE INVENTORY SIMULATION", 52)))
        self.write(announcement(TextFormatter.rule("=", 52)))
        logger.info(f"Menu started with {self.inventory!r}")

        try:
            while self.running:
                self.show_menu()
                option = self.parser.parse_menu_option(self.read("Choose an option: "))
                if option is None:
                    self.write(warning_message("\n[WARNING] Unrecognized option. Try again."))
                    continue
                self.handle_option(option)
        except (EOFError, KeyboardInterrupt):
            self.write("")
            self.quit()

        logger.info(f"Menu stopped with {self.inventory!r}")

    def show_menu(self):
        """Print the item count and available actions."""
        self.write(info_message(
            f"\n[BACKPACK] Items: {len(self.inventory)}/{self.inventory.max_capacity}"
        ))
        self.write("--- ACTIONS ---")
        self.write("1. Collect item (insert)")
        self.write("2. Discard item (remove)")
        self.write("3. Inspect backpack (list)")
        self.write("4. Search for item (find)")
        self.write("0. Quit")

    def handle_option(self, option: MenuOption):
        """Dispatch a parsed menu choice."""
        handlers = {
            MenuOption.INSERT: self.handle_insert,
            MenuOption.REMOVE: self.handle_remove,
            MenuOption.LIST: self.handle_list,
            MenuOption.SEARCH: self.handle_search,
            MenuOption.QUIT: self.quit,
        }
        handlers[option]()

    def quit(self):
        self.running = False
        self.write(info_message("Leaving the game... Good luck on your next mission!"))

    def prompt_field(self, prompt: str, parse: Callable[[str], T]) -> T:
        """Ask until ``parse`` accepts the line."""
        while True:
            try:
                return parse(self.read(prompt))
            except InputError as e:
                self.write(error_message(f"[ERROR] {e}"))

    def handle_insert(self):
        """Read a new item and add it to the backpack."""
        if self.inventory.is_full():
            self.write(error_message(
                f"\n[BACKPACK FULL] Maximum capacity ({self.inventory.max_capacity}) reached. "
                "Remove an item first."
            ))
            return

        self.write("\n--- Register New Item ---")
        name = self.prompt_field(
            f"Item name (max {MAX_NAME_LENGTH} characters): ",
            lambda text: self.parser.parse_text(text, "Name", MAX_NAME_LENGTH)
        )
        category = self.prompt_field(
            f"Category (e.g. {', '.join(SUGGESTED_CATEGORIES)}): ",
            lambda text: self.parser.parse_text(text, "Category", MAX_CATEGORY_LENGTH)
        )
        weight = self.prompt_field("Weight (kg): ", self.parser.parse_weight)
        quantity = self.prompt_field(
            "Quantity: ", lambda text: self.parser.parse_int(text, "Quantity")
        )

        try:
            item = Item(name=name, category=category, weight=weight, quantity=quantity)
            self.inventory.insert(item)
        except InventoryError as e:
            self.write(error_message(f"\n[ERROR] {e}"))
            return

        self.write(success_message(
            f"\n[SUCCESS] '{item.name}' ({item.category}) added to the backpack. "
            f"Space remaining: {self.inventory.remaining_capacity()}."
        ))

    def handle_remove(self):
        """Remove an item chosen by its position in the listing."""
        if self.inventory.is_empty():
            self.write(warning_message("\n[WARNING] The backpack is empty. Nothing to remove."))
            return

        self.handle_list()
        self.write("\n--- Remove Item ---")
        position = self.prompt_field(
            f"Enter the number of the item to remove (1 to {len(self.inventory)}): ",
            lambda text: self.parser.parse_int(text, "Position")
        )

        try:
            removed = self.inventory.remove_at(position)
        except InventoryError as e:
            self.write(error_message(f"\n[ERROR] Invalid position. {e}"))
            return

        self.write(success_message(f"\n[SUCCESS] Item '{removed.name}' removed from the backpack."))

    def handle_list(self):
        """Print the backpack as a table."""
        self.write("")
        self.write(TextFormatter.format_table(self.inventory.list()))
        if not self.inventory.is_empty():
            self.write(f"Total weight: {self.inventory.total_weight():.2f} kg")

    def handle_search(self):
        """Look an item up by exact name."""
        if self.inventory.is_empty():
            self.write(warning_message("\n[WARNING] The backpack is empty. No items to search."))
            return

        self.write("\n--- Search Item by Name ---")
        # the core matches byte for byte; only the line ending is dropped here
        name = self.read("Enter the item name: ").rstrip("\r\n")

        found = self.inventory.find_by_name(name)
        if found is None:
            self.write(warning_message(f"\n[NOT FOUND] The item '{name}' is not in the backpack."))
            return

        item = found.item
        self.write(item_found(
            f"\n[FOUND] Item '{item.name}' at position {found.position} "
            f"(Category: {item.category}, Qty: {item.quantity}, Weight: {item.weight:.2f})."
        ))


def build_inventory(config: ConfigManager) -> Inventory:
    """Create the backpack and load any configured starting items."""
    inventory = Inventory(max_capacity=config.capacity)
    for item in config.get_starting_items():
        inventory.insert(item)
    return inventory


def main(argv: Optional[list] = None) -> int:
    """Main function for the terminal menu."""
    parser = argparse.ArgumentParser(description="Manage a loot backpack from the terminal")
    parser.add_argument("--config", "-c", default=DEFAULT_CONFIG_PATH,
                        help="Path to backpack configuration file")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable ANSI colors")
    parser.add_argument("--log-level", default=None,
                        help="Override the configured log level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)

    config = ConfigManager(args.config)
    try:
        log_level = args.log_level or config.log_level
        get_logger().configure(log_level, config.log_file)
        set_color_enabled(config.color_enabled and not args.no_color)
        inventory = build_inventory(config)
    except (ConfigError, OSError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    except InventoryError as e:
        print(f"Could not load starting items: {e}", file=sys.stderr)
        return 1

    InventoryMenu(inventory).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
