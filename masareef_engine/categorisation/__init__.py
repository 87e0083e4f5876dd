"""
Categorisation Module for the Masareef extraction engine.

Resolves clause categories through:
- Exact keyword matching (longest keyword first)
- Fuzzy matching (truncated prefixes, rapidfuzz token similarity)
- Context hints (places, quantities)
- Direction fallback categories
"""

from .engine import CategoryResolver, CategoryMatch
from .pattern_matching import (
    sort_keywords_longest_first,
    contains_keyword,
    match_keyword_list,
    match_keyword_prefixes,
    fuzzy_match_tokens,
)

__all__ = [
    # Main resolver
    "CategoryResolver",
    "CategoryMatch",
    # Pattern matching utilities
    "sort_keywords_longest_first",
    "contains_keyword",
    "match_keyword_list",
    "match_keyword_prefixes",
    "fuzzy_match_tokens",
]
