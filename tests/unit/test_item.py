"""Unit tests for the Item record."""

import unittest
import dataclasses
import sys
import os

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from backpack.game.errors import InvalidItemError
from backpack.game.item import Item
from backpack.shared.constants.game_constants import MAX_NAME_LENGTH, MAX_CATEGORY_LENGTH


class TestItem(unittest.TestCase):
    """Test cases for Item class."""

    def test_item_fields(self):
        item = Item("Faca", "Arma", 0.5, 1)
        self.assertEqual(item.name, "Faca")
        self.assertEqual(item.category, "Arma")
        self.assertEqual(item.weight, 0.5)
        self.assertEqual(item.quantity, 1)

    def test_item_is_immutable(self):
        item = Item("Faca", "Arma", 0.5, 1)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            item.quantity = 5

    def test_length_bounds(self):
        Item("n" * MAX_NAME_LENGTH, "c" * MAX_CATEGORY_LENGTH)
        with self.assertRaises(InvalidItemError):
            Item("n" * (MAX_NAME_LENGTH + 1), "Arma")
        with self.assertRaises(InvalidItemError):
            Item("Faca", "c" * (MAX_CATEGORY_LENGTH + 1))

    def test_weight_and_quantity_not_validated(self):
        item = Item("Pedra", "Misc", -1.0, -3)
        self.assertEqual(item.weight, -1.0)
        self.assertEqual(item.quantity, -3)

    def test_dict_conversion(self):
        item = Item("Kit Medico", "Medico", 1.2, 2)
        data = item.to_dict()
        self.assertEqual(data, {'name': 'Kit Medico', 'category': 'Medico',
                                'weight': 1.2, 'quantity': 2})
        self.assertEqual(Item.from_dict(data), item)

    def test_from_dict_defaults(self):
        item = Item.from_dict({'name': 'Corda', 'category': 'Ferramenta'})
        self.assertEqual(item.weight, 0.0)
        self.assertEqual(item.quantity, 1)

    def test_from_dict_bad_data(self):
        with self.assertRaises(InvalidItemError):
            Item.from_dict({'category': 'Arma'})
        with self.assertRaises(InvalidItemError):
            Item.from_dict({'name': 'Faca', 'category': 'Arma', 'quantity': 'many'})

    def test_from_dict_null_name(self):
        with self.assertRaises(InvalidItemError):
            Item.from_dict({'name': None, 'category': 'Arma'})

    def test_from_dict_ignores_type_key(self):
        item = Item.from_dict({'name': 'Faca', 'type': 'Arma'})
        self.assertEqual(item.category, '')

    def test_describe(self):
        item = Item("Faca", "Arma", 0.5, 1)
        self.assertEqual(item.describe(), "Faca (Category: Arma, Qty: 1, Weight: 0.50)")

if __name__ == '__main__':
    unittest.main()
