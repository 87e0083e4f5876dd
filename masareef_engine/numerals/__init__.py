"""
Amount extraction from digit-form and word-form numerals.
"""

from .numeral_extractor import (
    extract_amounts,
    extract_complex_number,
    contains_numeral,
    is_numeral_token,
)

__all__ = [
    "extract_amounts",
    "extract_complex_number",
    "contains_numeral",
    "is_numeral_token",
]
