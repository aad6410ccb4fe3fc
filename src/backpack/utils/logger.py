"""Logging utilities for the backpack."""

import logging
import os
import sys
from typing import Optional, Union

from backpack.shared.constants.game_constants import LOGGER_NAME

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


class BackpackLogger:
    """Thin wrapper around a standard logger with inventory helpers."""

    def __init__(self, name: str = LOGGER_NAME):
        """Initialize the logger."""
        self.logger = logging.getLogger(name)

    def configure(self, level: Union[int, str] = logging.INFO, log_file: Optional[str] = None):
        """Set up log handlers.

        Console output goes to stderr so it does not mix with the menu.
        """
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
            if not isinstance(level, int):
                level = logging.INFO
        self.logger.setLevel(level)

        for handler in list(self.logger.handlers):
            if not isinstance(handler, logging.NullHandler):
                self.logger.removeHandler(handler)
                handler.close()

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
            # the file sees DEBUG even when the console is quieter
            self.logger.setLevel(logging.DEBUG)

    def debug(self, message: str, *args, **kwargs):
        """Log debug message."""
        self.logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs):
        """Log info message."""
        self.logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs):
        """Log warning message."""
        self.logger.warning(message, *args, **kwargs)

    def inventory_action(self, action: str, details: str = ""):
        """Log a change to the backpack contents."""
        message = f"INVENTORY {action}"
        if details:
            message += f" - {details}"
        self.debug(message)

    def rejected_action(self, action: str, reason: str):
        """Log an operation the backpack refused."""
        self.warning(f"INVENTORY {action} rejected - {reason}")


def get_logger(name: str = LOGGER_NAME) -> BackpackLogger:
    """Get a logger instance."""
    return BackpackLogger(name)
