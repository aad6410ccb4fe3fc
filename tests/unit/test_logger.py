"""Unit tests for logging helpers."""

import unittest
import logging
import sys
import os
import tempfile
from io import StringIO
from unittest import mock

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from backpack.game.errors import CapacityExceededError
from backpack.game.inventory import Inventory
from backpack.game.item import Item
from backpack.utils.logger import get_logger


class TestBackpackLogger(unittest.TestCase):
    """Test cases for BackpackLogger class."""

    def setUp(self):
        self.logger = get_logger()
        self.addCleanup(self.reset_handlers)

    def reset_handlers(self):
        for handler in list(self.logger.logger.handlers):
            if not isinstance(handler, logging.NullHandler):
                self.logger.logger.removeHandler(handler)
                handler.close()
        self.logger.logger.setLevel(logging.NOTSET)

    def test_inventory_actions_reach_the_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            log_file = os.path.join(tmpdir, "backpack.log")
            with mock.patch("sys.stderr", StringIO()) as stderr:
                self.logger.configure("WARNING", log_file)

                inventory = Inventory(max_capacity=1)
                inventory.insert(Item("Faca", "Arma", 0.5, 1))
                with self.assertRaises(CapacityExceededError):
                    inventory.insert(Item("Kit", "Medico"))

            self.reset_handlers()
            with open(log_file, encoding="utf-8") as f:
                contents = f.read()

        self.assertIn("INVENTORY insert - Faca", contents)
        self.assertIn("INVENTORY insert rejected", contents)
        # the console only shows warnings and up
        self.assertNotIn("INVENTORY insert - Faca", stderr.getvalue())
        self.assertIn("rejected", stderr.getvalue())

    def test_unknown_level_falls_back_to_info(self):
        with mock.patch("sys.stderr", StringIO()):
            self.logger.configure("chatty")
        self.assertEqual(self.logger.logger.level, logging.INFO)

if __name__ == '__main__':
    unittest.main()
