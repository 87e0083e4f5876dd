"""
Masareef Engine - spoken transaction extraction for a personal finance tracker.

Turns free-form colloquial Egyptian Arabic statements ("اشتريت أكل بعشرين جنيه")
into structured income / expense transactions.

Main Components:
    - preprocessing: Normalization, speech-error correction, transcript helpers
    - numerals: Digit-form and word-form amount extraction
    - context: Context cues and sentence segmentation
    - direction: Income / expense classification
    - categorisation: Category resolution against caller categories
    - parsing: The statement parser tying everything together
    - config: Extraction thresholds and the category catalog
    - patterns: Keyword and phrase tables
"""

from typing import Iterable, Optional, Union

# Preprocessing
from .preprocessing import (
    normalize_text,
    correct_speech_errors,
    select_best_alternative,
    clean_transcript,
)

# Components
from .numerals.numeral_extractor import extract_amounts, extract_complex_number
from .context.context_analyzer import ContextSignals, analyze_context
from .context.segmenter import segment_sentences
from .direction.direction_classifier import DirectionClassifier, classify_direction
from .categorisation.engine import CategoryResolver, CategoryMatch

# Parsing
from .parsing.engine import (
    TransactionTextParser,
    ParsedTransaction,
    ParseResult,
)

# Configuration
from .config.extraction_config import EXTRACTION_CONFIG
from .config.category_catalog import (
    Direction,
    Category,
    DEFAULT_CATEGORIES,
    load_category_catalog_csv,
)


__version__ = "1.0.0"
__all__ = [
    # Preprocessing
    "normalize_text",
    "correct_speech_errors",
    "select_best_alternative",
    "clean_transcript",
    # Components
    "extract_amounts",
    "extract_complex_number",
    "ContextSignals",
    "analyze_context",
    "segment_sentences",
    "DirectionClassifier",
    "classify_direction",
    "CategoryResolver",
    "CategoryMatch",
    # Parsing
    "TransactionTextParser",
    "ParsedTransaction",
    "ParseResult",
    # Configuration
    "EXTRACTION_CONFIG",
    "Direction",
    "Category",
    "DEFAULT_CATEGORIES",
    "load_category_catalog_csv",
    # Main functions
    "parse_transaction_text",
    "suggest_category_from_text",
]


_default_parser: Optional[TransactionTextParser] = None


def _get_parser() -> TransactionTextParser:
    global _default_parser
    if _default_parser is None:
        _default_parser = TransactionTextParser()
    return _default_parser


def parse_transaction_text(
    text: str,
    categories: Optional[Iterable[Category]] = None,
) -> ParseResult:
    """
    Main entry point for statement parsing.

    Args:
        text: Spoken or typed statement
        categories: Caller's categories (defaults to DEFAULT_CATEGORIES)

    Returns:
        ParseResult with the extracted transactions and the original text

    Example:
        >>> result = parse_transaction_text("استلمت راتب ألف جنيه")
        >>> txn = result.transactions[0]
        >>> txn.direction, txn.amount, txn.category_id
        (<Direction.INCOME: 'income'>, 1000.0, 'salary')
    """
    if categories is None:
        categories = DEFAULT_CATEGORIES
    return _get_parser().parse(text, categories)


def suggest_category_from_text(
    text: str,
    categories: Optional[Iterable[Category]] = None,
    direction: Union[Direction, str] = Direction.EXPENSE,
) -> str:
    """
    Suggest a category id for partially typed text (no amount needed).

    Example:
        >>> suggest_category_from_text("مواصلات")
        'transport'
    """
    if categories is None:
        categories = DEFAULT_CATEGORIES
    return _get_parser().suggest_category(text, categories, direction)
