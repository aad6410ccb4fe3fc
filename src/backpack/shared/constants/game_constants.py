"""Backpack constants and configuration values."""

# Inventory
INVENTORY_CAPACITY = 10

# Item field limits (storage sizes minus the terminator in the old layout)
MAX_NAME_LENGTH = 49
MAX_CATEGORY_LENGTH = 19

# Suggested categories shown in the category prompt
SUGGESTED_CATEGORIES = ("Arma", "Medico", "Ferramenta")

# Text Formatting
TABLE_WIDTH = 65
WEIGHT_DECIMALS = 2

# Configuration
DEFAULT_CONFIG_PATH = "config/backpack.yaml"
DEFAULT_LOG_LEVEL = "INFO"
LOGGER_NAME = "loot_backpack"
