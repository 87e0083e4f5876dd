"""
Sentence segmentation for multi-transaction utterances.

Splits a statement such as "اشتريت اكل ب 20 وكمان دفعت 10 مواصلات" into one
clause per transaction. List punctuation and "also" connectors always split;
verbs, places and "then" connectors only split when the context is rich enough
to trust them.
"""

import logging
import re
from typing import List, Optional, Pattern, Tuple

from ..config.extraction_config import EXTRACTION_CONFIG
from ..numerals.numeral_extractor import contains_numeral
from ..preprocessing.normalizer import normalize_text, normalize_keywords, LETTER_CLASS
from .context_analyzer import ContextSignals, analyze_context

logger = logging.getLogger(__name__)


ALSO_CONNECTORS = ["كمان", "ايضا", "أيضاً", "برضه", "كذلك", "بالإضافة"]

ACTION_VERBS = [
    "اشتريت", "دفعت", "صرفت", "جبت", "حاسبت", "سددت",
    "استلمت", "قبضت", "خدت", "وصلني", "جالي",
]

LOCATION_PREPOSITIONS = ["في", "ف", "من", "عند"]
LOCATION_PLACES = [
    "مطعم", "كافيه", "مول", "سوق", "ماركت", "سوبرماركت", "صيدلية",
    "محطة", "البنزينة", "النادي", "المحل", "الفرن",
]

TEMPORAL_CONNECTORS = ["بعد كده", "وبعدين", "بعدين", "وبعدها", "بعدها", "ثم"]


def _alternation(words: List[str]) -> str:
    return "|".join(
        re.escape(word) for word in sorted(normalize_keywords(words), key=len, reverse=True)
    )


# (pattern, requires a numeral after the cut)
STRONG_SEPARATORS: List[Tuple[Pattern, bool]] = [
    # List punctuation, but not a thousands comma
    (re.compile(r"[,;?!](?!\d)"), False),
    # "و" glued to the next amount: "ب 20 و30 ..."
    (re.compile(r"\s+و\s*(?=\d)"), False),
    (re.compile(rf"(?<!{LETTER_CLASS})و?(?:{_alternation(ALSO_CONNECTORS)})(?!{LETTER_CLASS})"), True),
]

SECONDARY_SEPARATORS: List[Tuple[Pattern, bool]] = [
    # "واشتريت": drop the "و", keep the verb with its clause
    (re.compile(rf"\s+و(?=(?:{_alternation(ACTION_VERBS)})(?!{LETTER_CLASS}))"), False),
    # Cut before "في المطعم", keeping the place with the clause that follows
    (re.compile(
        rf"\s+(?=(?:{_alternation(LOCATION_PREPOSITIONS)})\s+(?:ال)?(?:{_alternation(LOCATION_PLACES)})(?!{LETTER_CLASS}))"
    ), False),
    (re.compile(rf"(?<!{LETTER_CLASS})(?:{_alternation(TEMPORAL_CONNECTORS)})(?!{LETTER_CLASS})"), False),
]

CLAUSE_STRIP_CHARS = " ,;?!."


def _split_fragment(fragment: str, pattern: Pattern, numeral_after: bool) -> List[str]:
    """Split one fragment, keeping the split only if every piece is long enough."""
    pieces = []
    start = 0
    for match in pattern.finditer(fragment):
        if numeral_after and not contains_numeral(fragment[match.end():]):
            continue
        pieces.append(fragment[start:match.start()])
        start = match.end()
    pieces.append(fragment[start:])

    pieces = [piece.strip(CLAUSE_STRIP_CHARS) for piece in pieces]
    pieces = [piece for piece in pieces if piece]
    if len(pieces) < 2:
        return [fragment]

    min_length = EXTRACTION_CONFIG["segmentation"]["min_split_fragment_length"]
    if all(len(piece) > min_length for piece in pieces):
        return pieces
    return [fragment]


def _apply_separators(fragments: List[str], separators: List[Tuple[Pattern, bool]]) -> List[str]:
    for pattern, numeral_after in separators:
        split = []
        for fragment in fragments:
            split.extend(_split_fragment(fragment, pattern, numeral_after))
        fragments = split
    return fragments


def segment_sentences(text, context: Optional[ContextSignals] = None) -> List[str]:
    """
    Split a statement into candidate transaction clauses.

    Args:
        text: Statement text (normalized here)
        context: Context signals for the whole text (computed if omitted)

    Returns:
        Clauses that are longer than the minimum length and mention a
        numeral. If none survive but the text mentions a numeral, the whole
        normalized text is returned as the only clause.

    Example:
        >>> segment_sentences("اشتريت اكل ب 20 وكمان دفعت 10 جنيه مواصلات")
        ['اشتريت اكل ب 20', 'دفعت 10 جنيه مواصلات']
    """
    normalized = normalize_text(text)
    if not normalized:
        return []
    if context is None:
        context = analyze_context(normalized)

    config = EXTRACTION_CONFIG["segmentation"]
    fragments = _apply_separators([normalized], STRONG_SEPARATORS)
    if context.confidence > config["secondary_min_confidence"]:
        fragments = _apply_separators(fragments, SECONDARY_SEPARATORS)

    clauses = []
    for fragment in fragments:
        clause = fragment.strip(CLAUSE_STRIP_CHARS)
        if len(clause) > config["min_clause_length"] and contains_numeral(clause):
            clauses.append(clause)

    if not clauses and contains_numeral(normalized):
        logger.debug("No clause survived segmentation; using whole text")
        return [normalized]

    logger.debug("Segmented into %d clause(s)", len(clauses))
    return clauses
