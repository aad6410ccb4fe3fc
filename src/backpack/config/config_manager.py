"""Configuration manager for loading backpack settings from YAML."""

import yaml
from typing import Any, Dict, List, Optional
from pathlib import Path

from backpack.game.errors import InvalidItemError
from backpack.game.item import Item
from backpack.shared.constants.game_constants import (
    INVENTORY_CAPACITY, DEFAULT_CONFIG_PATH, DEFAULT_LOG_LEVEL, LOGGER_NAME
)
from backpack.utils.logger import get_logger

logger = get_logger(f"{LOGGER_NAME}.config")


class ConfigError(Exception):
    """Raised when the configuration file cannot be parsed."""


class ConfigManager:
    """Manages loading and caching of configuration data."""

    def __init__(self, config_file: Optional[str] = None):
        """Initialize the config manager.

        Args:
            config_file: Path to the YAML settings file. If None, uses default.
                A missing file is not an error; defaults apply.
        """
        self.config_file = Path(config_file or DEFAULT_CONFIG_PATH)
        self._settings_cache: Optional[Dict[str, Any]] = None

    def load_settings(self) -> Dict[str, Any]:
        """Load settings from the YAML file, cached after the first call."""
        if self._settings_cache is None:
            if self.config_file.exists():
                try:
                    with open(self.config_file, 'r', encoding='utf-8') as f:
                        settings = yaml.safe_load(f) or {}
                except yaml.YAMLError as e:
                    raise ConfigError(f"Error parsing configuration file {self.config_file}: {e}") from e

                if not isinstance(settings, dict):
                    raise ConfigError(f"Configuration file {self.config_file} must contain a mapping")
            else:
                logger.debug(f"Config file {self.config_file} not found, using defaults")
                settings = {}

            self._settings_cache = settings

        return self._settings_cache

    def reload_config(self):
        """Clear cache and force reload of the configuration file."""
        self._settings_cache = None

    def get_setting(self, *path, default=None):
        """Get a setting value by path.

        Args:
            *path: Path components (e.g., 'inventory', 'capacity')
            default: Default value if setting not found

        Returns:
            The setting value or default
        """
        value = self.load_settings()
        for key in path:
            if isinstance(value, dict):
                value = value.get(key)
            else:
                return default
            if value is None:
                return default
        return value

    @property
    def capacity(self) -> int:
        capacity = self.get_setting('inventory', 'capacity', default=INVENTORY_CAPACITY)
        # bool is an int subclass; YAML true/false must not pass as 1/0
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ConfigError(f"inventory.capacity must be an integer, got {capacity!r}")
        if capacity < 0:
            raise ConfigError(f"inventory.capacity must not be negative, got {capacity}")
        return capacity

    @property
    def color_enabled(self) -> bool:
        return bool(self.get_setting('display', 'color', default=True))

    @property
    def log_level(self) -> str:
        return str(self.get_setting('logging', 'level', default=DEFAULT_LOG_LEVEL))

    @property
    def log_file(self) -> Optional[str]:
        return self.get_setting('logging', 'file')

    def get_starting_items(self) -> List[Item]:
        """Build the items the backpack starts with."""
        entries = self.get_setting('inventory', 'starting_items', default=[])
        if not isinstance(entries, list):
            raise ConfigError("inventory.starting_items must be a list")

        items = []
        for entry in entries:
            if not isinstance(entry, dict):
                raise ConfigError(f"Starting item entry must be a mapping, got {entry!r}")
            try:
                items.append(Item.from_dict(entry))
            except InvalidItemError as e:
                raise ConfigError(f"Bad starting item {entry!r}: {e}") from e
        return items
