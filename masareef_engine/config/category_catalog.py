"""
Category catalog types and loader.

The engine never creates or mutates categories; callers supply them. A default
catalog and a CSV loader are provided for callers that keep their catalog in a file.
"""

import csv
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional


class Direction(Enum):
    """Transaction direction."""
    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class Category:
    """A caller-supplied category record."""
    id: str
    canonical_name: str
    localized_name: str
    direction: Direction


DEFAULT_CATEGORIES = [
    # Income Categories
    Category("salary", "Salary", "راتب", Direction.INCOME),
    Category("freelance", "Freelance", "عمل حر", Direction.INCOME),
    Category("investment", "Investment", "استثمار", Direction.INCOME),
    Category("business", "Business", "تجارة", Direction.INCOME),
    Category("gift", "Gift", "هدية", Direction.INCOME),
    Category("other_income", "Other Income", "دخل آخر", Direction.INCOME),
    # Expense Categories
    Category("food", "Food", "طعام", Direction.EXPENSE),
    Category("transport", "Transport", "مواصلات", Direction.EXPENSE),
    Category("shopping", "Shopping", "تسوق", Direction.EXPENSE),
    Category("bills", "Bills", "فواتير", Direction.EXPENSE),
    Category("entertainment", "Entertainment", "ترفيه", Direction.EXPENSE),
    Category("health", "Health", "صحة", Direction.EXPENSE),
    Category("education", "Education", "تعليم", Direction.EXPENSE),
    Category("other", "Other", "أخرى", Direction.EXPENSE),
]


def parse_direction(value: str) -> Direction:
    """
    Parse a direction label.

    Args:
        value: "income" or "expense" (case-insensitive)

    Returns:
        Matching Direction

    Raises:
        ValueError: If the label is not a known direction
    """
    label = (value or "").strip().lower()
    for direction in Direction:
        if direction.value == label:
            return direction
    raise ValueError(f"Unknown category direction: {value!r}")


def load_category_catalog_csv(csv_path: str) -> List[Category]:
    """
    Load a category catalog from a CSV file.

    Args:
        csv_path: Path to CSV file containing categories

    Returns:
        List of Category records in file order

    Example CSV format:
        id,canonical_name,localized_name,direction
        food,Food,طعام,expense
        salary,Salary,راتب,income
    """
    csv_file = Path(csv_path)
    if not csv_file.exists():
        raise FileNotFoundError(f"Category catalog file not found: {csv_path}")

    categories = []
    with open(csv_file, "r", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        for row in reader:
            category_id = (row.get("id") or "").strip()
            if not category_id:
                continue
            categories.append(Category(
                id=category_id,
                canonical_name=(row.get("canonical_name") or category_id).strip(),
                localized_name=(row.get("localized_name") or "").strip(),
                direction=parse_direction(row.get("direction", "")),
            ))

    return categories


def categories_for_direction(categories: Iterable[Category], direction: Direction) -> List[Category]:
    """Return the categories whose direction matches."""
    return [cat for cat in categories or [] if cat.direction == direction]


def find_category(category_id: str, categories: Iterable[Category]) -> Optional[Category]:
    """Look up a category by id."""
    for cat in categories or []:
        if cat.id == category_id:
            return cat
    return None
