"""Loot Backpack - a fixed-capacity inventory managed from a terminal menu."""

__version__ = "0.1.0"
