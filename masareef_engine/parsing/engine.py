"""
Transaction text parser.

Turns a free-form spoken or typed statement into zero or more structured
transactions: correction, context analysis, segmentation, then per clause
amount extraction, direction classification and category resolution.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..categorisation.engine import CategoryResolver
from ..config.category_catalog import Category, Direction, find_category
from ..config.extraction_config import EXTRACTION_CONFIG
from ..context.context_analyzer import analyze_context
from ..context.segmenter import segment_sentences
from ..direction.direction_classifier import DirectionClassifier
from ..numerals.numeral_extractor import extract_amounts
from ..preprocessing.normalizer import normalize_text
from ..preprocessing.speech_corrections import correct_speech_errors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedTransaction:
    """One transaction read from a statement."""
    direction: Direction
    amount: float
    category_id: str
    note: Optional[str] = None
    localized_category_name: Optional[str] = None


@dataclass
class ParseResult:
    """All transactions read from a statement, with the text as given."""
    transactions: List[ParsedTransaction] = field(default_factory=list)
    original_text: str = ""


class TransactionTextParser:
    """Parses spoken / typed transaction statements."""

    def __init__(
        self,
        direction_classifier: Optional[DirectionClassifier] = None,
        category_resolver: Optional[CategoryResolver] = None,
        debug_mode: bool = False
    ):
        """Initialize the parser.

        Args:
            direction_classifier: Classifier to use (default keyword tables if omitted)
            category_resolver: Resolver to use (default vocabulary if omitted)
            debug_mode: Passed to the default resolver to attach match rationale
        """
        self.direction_classifier = direction_classifier or DirectionClassifier()
        self.category_resolver = category_resolver or CategoryResolver(debug_mode=debug_mode)
        self.note_max_length = EXTRACTION_CONFIG["note_max_length"]

    def parse(self, text, categories: Iterable[Category]) -> ParseResult:
        """
        Parse a statement into transactions.

        Args:
            text: Raw statement (possibly a speech transcript)
            categories: Caller-supplied categories, both directions

        Returns:
            ParseResult with one transaction per extracted amount; empty when
            no numeral can be found anywhere in the text

        Example:
            >>> parser = TransactionTextParser()
            >>> result = parser.parse("اشتريت أكل بعشرين جنيه", DEFAULT_CATEGORIES)
            >>> result.transactions[0].amount, result.transactions[0].category_id
            (20.0, 'food')
        """
        if not text or not isinstance(text, str):
            return ParseResult(transactions=[], original_text=text if isinstance(text, str) else "")

        categories = list(categories or [])
        corrected = correct_speech_errors(text)
        global_context = analyze_context(corrected)
        clauses = segment_sentences(corrected, global_context)

        transactions = []
        for clause in clauses:
            transactions.extend(self._parse_clause(clause, categories))

        if not transactions:
            whole_text = normalize_text(corrected)
            if whole_text:
                logger.debug("No transactions from %d clause(s); retrying on whole text", len(clauses))
                transactions = self._parse_clause(whole_text, categories)

        logger.debug("Parsed %d transaction(s) from %r", len(transactions), text)
        return ParseResult(transactions=transactions, original_text=text)

    def _parse_clause(self, clause: str, categories: List[Category]) -> List[ParsedTransaction]:
        """Read every amount in one clause; all share the clause's direction and category."""
        clause_context = analyze_context(clause)
        amounts = extract_amounts(clause, clause_context)
        if not amounts:
            return []

        direction = self.direction_classifier.classify(clause, clause_context)
        match = self.category_resolver.resolve_with_details(clause, categories, direction, clause_context)
        if match.debug_rationale:
            logger.debug("Clause %r -> %s", clause, match.debug_rationale)

        category = find_category(match.category_id, categories)
        localized_name = category.localized_name if category else None
        note = clause if len(clause) < self.note_max_length else None

        return [
            ParsedTransaction(
                direction=direction,
                amount=amount,
                category_id=match.category_id,
                note=note,
                localized_category_name=localized_name,
            )
            for amount in amounts
        ]

    def suggest_category(self, text, categories: Iterable[Category], direction: Direction) -> str:
        """
        Suggest a category for partially typed text.

        No numeral is required, so this can run on every keystroke; debouncing
        is left to the caller.

        Returns:
            Category id for the direction (fallback id when nothing matches)
        """
        corrected = correct_speech_errors(text)
        normalized = normalize_text(corrected)
        return self.category_resolver.resolve(normalized, list(categories or []), direction)
