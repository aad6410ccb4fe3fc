#!/usr/bin/env python3
"""Main entry point for Loot Backpack."""

import sys
import os

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))


def run():
    """Run the terminal menu."""
    from backpack.client.terminal_menu import main

    try:
        return main()
    except KeyboardInterrupt:
        print("\nGoodbye!")
        return 0


if __name__ == "__main__":
    sys.exit(run())
