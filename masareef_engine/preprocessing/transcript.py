"""
Helpers for transcripts coming out of a speech-to-text engine.

Speech engines return several alternatives per utterance; these helpers pick
the one most likely to describe a transaction and tidy engine artifacts.
"""

import re
from typing import Optional, Sequence

from .normalizer import normalize_digits, WHITESPACE_RE


FINANCIAL_KEYWORDS = [
    "صرف", "دفع", "اشتري", "جنيه", "ريال", "درهم", "دولار",
    "أكل", "اكل", "مواصلات", "فاتورة", "راتب", "مرتب",
]

KEYWORD_POINTS = 10
NUMBER_POINTS = 5
ARABIC_LETTER_POINTS = 1

DIGIT_RUN_RE = re.compile(r"\d+")
ARABIC_LETTER_RE = re.compile(r"[\u0600-\u06FF]")
# Speech engines sometimes emit a stray "ه" right before a number ("ه 50")
STRAY_HEH_BEFORE_DIGIT_RE = re.compile(r"(?<![\u0600-\u06FF])ه\s*(\d)")


def score_alternative(text: Optional[str]) -> int:
    """
    Score how much a transcript alternative looks like a transaction statement.

    Financial keywords score 10 each, digit runs 5 each and every Arabic
    letter 1.
    """
    if not text or not isinstance(text, str):
        return 0

    score = sum(KEYWORD_POINTS for keyword in FINANCIAL_KEYWORDS if keyword in text)
    score += NUMBER_POINTS * len(DIGIT_RUN_RE.findall(text))
    score += ARABIC_LETTER_POINTS * len(ARABIC_LETTER_RE.findall(text))
    return score


def select_best_alternative(alternatives: Sequence[str], default: str = "") -> str:
    """
    Pick the best transcript alternative.

    Args:
        alternatives: Alternatives returned by the speech engine
        default: The engine's own top choice; kept unless another scores higher

    Returns:
        The highest-scoring alternative
    """
    if not alternatives:
        return default

    best = default
    best_score = score_alternative(default)
    for alternative in alternatives:
        score = score_alternative(alternative)
        if score > best_score:
            best = alternative
            best_score = score
    return best


def clean_transcript(text: Optional[str]) -> str:
    """Collapse whitespace, convert native digits and drop stray "ه" before numbers."""
    if not text or not isinstance(text, str):
        return ""

    cleaned = normalize_digits(text)
    cleaned = STRAY_HEH_BEFORE_DIGIT_RE.sub(r"\1", cleaned)
    return WHITESPACE_RE.sub(" ", cleaned).strip()
