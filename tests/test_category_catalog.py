"""
Tests for the category catalog and its CSV loader.
"""

import os
import tempfile
import unittest

from masareef_engine.config.category_catalog import (
    Category,
    Direction,
    DEFAULT_CATEGORIES,
    parse_direction,
    load_category_catalog_csv,
    categories_for_direction,
    find_category,
)


class TestCategoryCatalog(unittest.TestCase):
    """Test catalog helpers."""

    def test_default_catalog_directions(self):
        """The default catalog has both directions and both fallbacks."""
        income = categories_for_direction(DEFAULT_CATEGORIES, Direction.INCOME)
        expense = categories_for_direction(DEFAULT_CATEGORIES, Direction.EXPENSE)
        self.assertEqual(len(income) + len(expense), len(DEFAULT_CATEGORIES))
        self.assertIn("other_income", [cat.id for cat in income])
        self.assertIn("other", [cat.id for cat in expense])

    def test_parse_direction(self):
        """Direction labels are case-insensitive."""
        self.assertEqual(parse_direction("Income"), Direction.INCOME)
        self.assertEqual(parse_direction(" expense "), Direction.EXPENSE)
        with self.assertRaises(ValueError):
            parse_direction("transfer")

    def test_find_category(self):
        """Lookup by id."""
        self.assertEqual(find_category("food", DEFAULT_CATEGORIES).localized_name, "طعام")
        self.assertIsNone(find_category("missing", DEFAULT_CATEGORIES))
        self.assertIsNone(find_category("food", None))


class TestLoadCategoryCatalogCsv(unittest.TestCase):
    """Test loading a catalog from CSV."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.csv_path = os.path.join(self.temp_dir.name, "categories.csv")

    def tearDown(self):
        self.temp_dir.cleanup()

    def _write(self, content: str):
        with open(self.csv_path, "w", encoding="utf-8") as f:
            f.write(content)

    def test_load_catalog(self):
        """Rows load in order; blank ids are skipped."""
        self._write(
            "id,canonical_name,localized_name,direction\n"
            "food,Food,طعام,expense\n"
            ",Ignored,,expense\n"
            "salary,Salary,راتب,INCOME\n"
        )
        categories = load_category_catalog_csv(self.csv_path)
        self.assertEqual(categories, [
            Category("food", "Food", "طعام", Direction.EXPENSE),
            Category("salary", "Salary", "راتب", Direction.INCOME),
        ])

    def test_canonical_name_defaults_to_id(self):
        """A missing canonical name falls back to the id."""
        self._write("id,localized_name,direction\nother,أخرى,expense\n")
        categories = load_category_catalog_csv(self.csv_path)
        self.assertEqual(categories[0].canonical_name, "other")

    def test_missing_file(self):
        """A missing file raises FileNotFoundError."""
        with self.assertRaises(FileNotFoundError):
            load_category_catalog_csv(os.path.join(self.temp_dir.name, "nope.csv"))

    def test_unknown_direction(self):
        """A row with an unknown direction raises ValueError."""
        self._write("id,canonical_name,localized_name,direction\nx,X,س,sideways\n")
        with self.assertRaises(ValueError):
            load_category_catalog_csv(self.csv_path)


if __name__ == "__main__":
    unittest.main(verbosity=2)
