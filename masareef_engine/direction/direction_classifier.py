"""
Direction classification (income vs expense) for transaction clauses.
"""

import logging
from typing import List, Optional, Tuple

from ..config.category_catalog import Direction
from ..config.extraction_config import EXTRACTION_CONFIG
from ..context.context_analyzer import ContextSignals, analyze_context
from ..patterns.transaction_patterns import (
    EXPENSE_KEYWORDS,
    INCOME_KEYWORDS,
    EXPENSE_LOCATION_WORDS,
    INCOME_PAYMENT_WORDS,
)
from ..preprocessing.normalizer import normalize_text, normalize_keywords, compile_bounded_pattern

logger = logging.getLogger(__name__)


# Article and preposition clitics allowed in front of an override word ("بالمطعم", "للصيدلية")
OVERRIDE_PREFIX = "(?:وبال|بال|وال|لل|ال|ب|و|ف)?"


class DirectionClassifier:
    """Classifies a clause as income or expense from keyword scores and overrides."""

    def __init__(self):
        self.config = EXTRACTION_CONFIG["direction"]
        self.expense_keywords = normalize_keywords(EXPENSE_KEYWORDS)
        self.income_keywords = normalize_keywords(INCOME_KEYWORDS)
        self.bounded_keyword_patterns = {
            keyword: compile_bounded_pattern(keyword)
            for keyword in self.expense_keywords + self.income_keywords
            if len(keyword) <= self.config["bounded_keyword_length"]
        }
        self.expense_location_patterns = [
            compile_bounded_pattern(word, OVERRIDE_PREFIX)
            for word in normalize_keywords(EXPENSE_LOCATION_WORDS)
        ]
        self.income_payment_patterns = [
            compile_bounded_pattern(word, OVERRIDE_PREFIX)
            for word in normalize_keywords(INCOME_PAYMENT_WORDS)
        ]

    def _keyword_points(self, keyword: str) -> int:
        if len(keyword) > self.config["long_keyword_length"]:
            return self.config["long_keyword_points"]
        return self.config["short_keyword_points"]

    def _count_keyword(self, text: str, keyword: str) -> int:
        pattern = self.bounded_keyword_patterns.get(keyword)
        if pattern is not None:
            return len(pattern.findall(text))
        return text.count(keyword)

    def _score_keywords(self, text: str, keywords: List[str]) -> int:
        return sum(self._count_keyword(text, keyword) * self._keyword_points(keyword) for keyword in keywords)

    def score(self, text) -> Tuple[int, int]:
        """
        Score keyword evidence for each direction.

        Every occurrence of a keyword scores 1 point, or 2 when the keyword is
        longer than 4 characters. Keywords of 3 characters or fewer count only
        as whole words.

        Returns:
            Tuple of (income_score, expense_score)
        """
        normalized = normalize_text(text)
        return (
            self._score_keywords(normalized, self.income_keywords),
            self._score_keywords(normalized, self.expense_keywords),
        )

    def classify(self, text, context: Optional[ContextSignals] = None) -> Direction:
        """
        Classify a clause as income or expense.

        Args:
            text: Clause text
            context: Context signals for the clause (computed if omitted)

        Returns:
            Direction.INCOME or Direction.EXPENSE; Expense when evidence is
            tied, weak or absent
        """
        normalized = normalize_text(text)
        if not normalized:
            return Direction.EXPENSE

        if any(pattern.search(normalized) for pattern in self.expense_location_patterns):
            logger.debug("Expense location override: %s", normalized)
            return Direction.EXPENSE
        if any(pattern.search(normalized) for pattern in self.income_payment_patterns):
            logger.debug("Income payment override: %s", normalized)
            return Direction.INCOME

        income_score, expense_score = self.score(normalized)
        if income_score <= expense_score:
            return Direction.EXPENSE

        if context is None:
            context = analyze_context(normalized)

        # Mean of context confidence and income's share of the keyword evidence
        income_share = income_score / (income_score + expense_score)
        confidence = (context.confidence + income_share) / 2
        logger.debug(
            "Direction scores income=%d expense=%d confidence=%.2f",
            income_score, expense_score, confidence
        )

        if confidence > self.config["income_min_confidence"]:
            return Direction.INCOME
        return Direction.EXPENSE


_default_classifier = DirectionClassifier()


def classify_direction(text, context: Optional[ContextSignals] = None) -> Direction:
    """Classify a clause as income or expense using the default keyword tables."""
    return _default_classifier.classify(text, context)
