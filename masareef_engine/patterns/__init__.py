"""
Pattern definitions for the Masareef extraction engine.

Contains all keyword tables for reading spoken transaction statements:
- Speech corrections, currency words and number words
- Direction keywords and overrides
- Category vocabulary
- Context indicators and context-based category hints
"""

from .text_patterns import (
    SPEECH_CORRECTIONS,
    CURRENCY_WORDS,
    NUMBER_WORDS,
    HUNDRED_WORDS,
    THOUSAND_WORDS,
    FRACTION_WORDS,
    NUMBER_PHRASES,
    CLITIC_PREFIXES,
    WEIGHT_UNITS,
    VOLUME_UNITS,
    COUNT_UNITS,
    FUEL_WORDS,
    UNIT_PRICE_MARKERS,
)
from .transaction_patterns import (
    EXPENSE_KEYWORDS,
    INCOME_KEYWORDS,
    EXPENSE_LOCATION_WORDS,
    INCOME_PAYMENT_WORDS,
    CATEGORY_PATTERNS,
    CONTEXT_INDICATORS,
    LOCATION_CATEGORY_HINTS,
)

__all__ = [
    "SPEECH_CORRECTIONS",
    "CURRENCY_WORDS",
    "NUMBER_WORDS",
    "HUNDRED_WORDS",
    "THOUSAND_WORDS",
    "FRACTION_WORDS",
    "NUMBER_PHRASES",
    "CLITIC_PREFIXES",
    "WEIGHT_UNITS",
    "VOLUME_UNITS",
    "COUNT_UNITS",
    "FUEL_WORDS",
    "UNIT_PRICE_MARKERS",
    "EXPENSE_KEYWORDS",
    "INCOME_KEYWORDS",
    "EXPENSE_LOCATION_WORDS",
    "INCOME_PAYMENT_WORDS",
    "CATEGORY_PATTERNS",
    "CONTEXT_INDICATORS",
    "LOCATION_CATEGORY_HINTS",
]
