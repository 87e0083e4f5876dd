"""
Configuration module for the Masareef extraction engine.

Contains the extraction thresholds and the category catalog types.
"""

from .extraction_config import EXTRACTION_CONFIG
from .category_catalog import (
    Direction,
    Category,
    DEFAULT_CATEGORIES,
    parse_direction,
    load_category_catalog_csv,
    categories_for_direction,
    find_category,
)

__all__ = [
    "EXTRACTION_CONFIG",
    "Direction",
    "Category",
    "DEFAULT_CATEGORIES",
    "parse_direction",
    "load_category_catalog_csv",
    "categories_for_direction",
    "find_category",
]
