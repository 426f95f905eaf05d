import json
import logging
import os
import tempfile
import unittest

from binary_tree.src.base.config_loader import get_values, get_values_from_config


logging.basicConfig(level=logging.DEBUG)


class TestGetValues(unittest.TestCase):
    def test_values(self):
        self.assertEqual(get_values({"values": [3, 1, 2]}), [3, 1, 2])

    def test_empty(self):
        self.assertEqual(get_values({"values": []}), [])

    def test_missing_values(self):
        with self.assertRaises(ValueError):
            get_values({})

    def test_not_an_object(self):
        with self.assertRaises(ValueError):
            get_values([25, 15])
        with self.assertRaises(ValueError):
            get_values(25)
        with self.assertRaises(ValueError):
            get_values(None)

    def test_not_a_list(self):
        with self.assertRaises(ValueError):
            get_values({"values": "1 2 3"})

    def test_non_integer(self):
        with self.assertRaises(ValueError):
            get_values({"values": [1, "2"]})
        with self.assertRaises(ValueError):
            get_values({"values": [1.5]})
        with self.assertRaises(ValueError):
            get_values({"values": [True]})


class TestGetValuesFromConfig(unittest.TestCase):
    def test_default_config(self):
        self.assertEqual(
            get_values_from_config(),
            [25, 15, 50, 10, 22, 35, 70, 4, 12, 18, 24, 31, 44, 66, 90],
        )

    def test_given_path(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "conf.json")
            with open(path, "w") as file:
                json.dump({"values": [9, 8]}, file)
            self.assertEqual(get_values_from_config(path), [9, 8])

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(FileNotFoundError):
                get_values_from_config(os.path.join(tmp, "nope.json"))

    def test_top_level_array(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "conf.json")
            with open(path, "w") as file:
                json.dump([25, 15], file)
            with self.assertRaises(ValueError):
                get_values_from_config(path)
