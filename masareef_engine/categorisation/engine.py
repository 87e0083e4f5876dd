"""
Category Resolver for spoken transaction statements.
Maps a clause to one of the caller's categories for a given direction.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ..config.category_catalog import Category, Direction, categories_for_direction, parse_direction
from ..config.extraction_config import EXTRACTION_CONFIG
from ..context.context_analyzer import ContextSignals, analyze_context
from ..patterns.text_patterns import WEIGHT_UNITS, VOLUME_UNITS, FUEL_WORDS
from ..patterns.transaction_patterns import CATEGORY_PATTERNS, LOCATION_CATEGORY_HINTS
from ..preprocessing.normalizer import normalize_text, normalize_keywords
from .pattern_matching import (
    sort_keywords_longest_first,
    match_keyword_list,
    match_keyword_prefixes,
    fuzzy_match_tokens,
)

logger = logging.getLogger(__name__)


@dataclass
class CategoryMatch:
    """Result of category resolution."""
    category_id: str
    match_method: str  # 'keyword', 'fuzzy', 'context', 'default'
    confidence: float
    matched_keyword: Optional[str] = None
    debug_rationale: Optional[str] = None  # Optional debug information


def _category_keys(category: Category) -> List[str]:
    """Names a category answers to: its id and canonical name, lower-cased."""
    canonical = (category.canonical_name or "").strip().lower()
    return [category.id.lower(), canonical, canonical.replace(" ", "_")]


class CategoryResolver:
    """Resolves the category of a clause against caller-supplied categories."""

    def __init__(self, category_patterns: Optional[Dict[str, Dict]] = None, debug_mode: bool = False):
        """Initialize the resolver with category vocabulary.

        Args:
            category_patterns: Category name -> {"keywords": [...]} mapping
                (defaults to the built-in vocabulary)
            debug_mode: If True, attach a rationale to every CategoryMatch
        """
        self.category_patterns = category_patterns or CATEGORY_PATTERNS
        self.debug_mode = debug_mode
        self.config = EXTRACTION_CONFIG["categorisation"]

        keyword_pairs = []
        for name, pattern_info in self.category_patterns.items():
            for keyword in normalize_keywords(pattern_info.get("keywords", [])):
                keyword_pairs.append((keyword, name.lower()))
        # Pre-computed sorted keywords (longest first)
        self.keywords_sorted = sort_keywords_longest_first(keyword_pairs)

        self.location_hints = {
            name: normalize_keywords(hints) for name, hints in LOCATION_CATEGORY_HINTS.items()
        }
        self.weight_units = normalize_keywords(WEIGHT_UNITS)
        self.volume_units = normalize_keywords(VOLUME_UNITS)
        self.fuel_words = normalize_keywords(FUEL_WORDS)

    def _build_debug_rationale(self, match_type: str, details: str = "") -> Optional[str]:
        """Build debug rationale string if debug mode is enabled."""
        if not self.debug_mode:
            return None

        if details:
            return f"{match_type}: {details}"
        return match_type

    def resolve(
        self,
        text,
        categories: Iterable[Category],
        direction: Direction,
        context: Optional[ContextSignals] = None
    ) -> str:
        """Resolve the category id for a clause. See resolve_with_details."""
        return self.resolve_with_details(text, categories, direction, context).category_id

    def resolve_with_details(
        self,
        text,
        categories: Iterable[Category],
        direction: Direction,
        context: Optional[ContextSignals] = None
    ) -> CategoryMatch:
        """
        Resolve the category of a clause.

        Only categories of the given direction are candidates. Tries, in
        order: exact keyword match, fuzzy match (truncated prefixes, then
        token similarity), context hints, then the direction's fallback.

        Args:
            text: Clause text
            categories: Caller-supplied categories (any direction)
            direction: Direction the clause was classified as
            context: Context signals for the clause (computed if omitted)

        Returns:
            CategoryMatch whose category_id belongs to the given direction or
            is that direction's reserved fallback id
        """
        if isinstance(direction, str):
            direction = parse_direction(direction)

        normalized = normalize_text(text)
        available = self._available_categories(categories, direction)

        if normalized and available:
            candidates = [(kw, name) for kw, name in self.keywords_sorted if name in available]

            # 1. Exact keyword
            exact = match_keyword_list(normalized, candidates)
            if exact:
                keyword, name = exact
                return self._match(available[name], "keyword", keyword, "keyword_match", f"{name}/{keyword}")

            # 2. Fuzzy: truncated prefixes, then token similarity
            prefix = match_keyword_prefixes(
                normalized,
                candidates,
                min_keyword_length=self.config["fuzzy_min_keyword_length"],
                min_prefix_length=self.config["fuzzy_min_prefix_length"],
            )
            if prefix:
                keyword, name = prefix
                return self._match(available[name], "fuzzy", keyword, "prefix_match", f"{name}/{keyword}")

            similar = fuzzy_match_tokens(
                normalized,
                candidates,
                threshold=self.config["fuzzy_similarity_threshold"],
                min_keyword_length=self.config["fuzzy_similarity_min_keyword_length"],
            )
            if similar:
                keyword, name, score = similar
                return self._match(
                    available[name], "fuzzy", keyword, "similarity_match", f"{name}/{keyword} ({score:.0f})"
                )

            # 3. Context hints
            if context is None:
                context = analyze_context(normalized)
            hinted = self._match_context(normalized, context, available)
            if hinted:
                return hinted

        return self._default_match(categories, direction)

    def _available_categories(
        self,
        categories: Iterable[Category],
        direction: Direction
    ) -> Dict[str, Category]:
        """Map every lower-cased id / canonical name of the direction's categories to the category."""
        available: Dict[str, Category] = {}
        for category in categories_for_direction(categories, direction):
            for key in _category_keys(category):
                if key:
                    available.setdefault(key, category)
        return available

    def _match_context(
        self,
        text: str,
        context: ContextSignals,
        available: Dict[str, Category]
    ) -> Optional[CategoryMatch]:
        if context.has_location_reference:
            for name, hints in self.location_hints.items():
                if name not in available:
                    continue
                for hint in hints:
                    if hint in text:
                        return self._match(available[name], "context", hint, "location_hint", f"{name}/{hint}")

        if context.has_quantity_indicator:
            hint = self._first_present(text, self.weight_units)
            if hint and "food" in available:
                return self._match(available["food"], "context", hint, "quantity_hint", f"food/{hint}")

            volume = self._first_present(text, self.volume_units)
            fuel = self._first_present(text, self.fuel_words)
            if volume and fuel and "transport" in available:
                return self._match(available["transport"], "context", fuel, "quantity_hint", f"transport/{fuel}")

        return None

    @staticmethod
    def _first_present(text: str, words: List[str]) -> Optional[str]:
        for word in words:
            if word in text:
                return word
        return None

    def _default_match(self, categories: Iterable[Category], direction: Direction) -> CategoryMatch:
        """Fall back to the caller's 'other' category for the direction, else the reserved id."""
        fallback_id = EXTRACTION_CONFIG["fallback_category_ids"][direction.value]
        category_id = fallback_id
        for category in categories_for_direction(categories, direction):
            if fallback_id in _category_keys(category):
                category_id = category.id
                break

        logger.debug("No category matched; falling back to %s", category_id)
        return CategoryMatch(
            category_id=category_id,
            match_method="default",
            confidence=self.config["confidence"]["default"],
            debug_rationale=self._build_debug_rationale("default", direction.value),
        )

    def _match(
        self,
        category: Category,
        method: str,
        keyword: str,
        match_type: str,
        details: str
    ) -> CategoryMatch:
        logger.debug("Category %s via %s (%s)", category.id, match_type, keyword)
        return CategoryMatch(
            category_id=category.id,
            match_method=method,
            confidence=self.config["confidence"][method],
            matched_keyword=keyword,
            debug_rationale=self._build_debug_rationale(match_type, details),
        )
