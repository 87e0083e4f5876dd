"""
Generic Pattern Matching for Category Resolution.

Provides reusable keyword matching: exact, truncated-prefix and token similarity.
Keyword lists are (keyword, label) pairs, already normalized.
"""

from typing import List, Optional, Sequence, Tuple

from rapidfuzz import fuzz

from ..preprocessing.normalizer import compile_bounded_pattern


# Keywords this short only match as whole words ("رز" must not match inside "مرزوق")
SHORT_KEYWORD_LENGTH = 2


def sort_keywords_longest_first(keywords: Sequence[Tuple[str, str]]) -> List[Tuple[str, str]]:
    """Sort (keyword, label) pairs longest first so specific phrases beat their fragments."""
    return sorted(keywords, key=lambda pair: len(pair[0]), reverse=True)


def contains_keyword(text: str, keyword: str) -> bool:
    """Substring match, bounded to whole words for very short keywords."""
    if len(keyword) <= SHORT_KEYWORD_LENGTH:
        return compile_bounded_pattern(keyword).search(text) is not None
    return keyword in text


def match_keyword_list(
    text: str,
    keywords: Sequence[Tuple[str, str]]
) -> Optional[Tuple[str, str]]:
    """
    Return the first (keyword, label) pair whose keyword occurs in text.

    Example:
        >>> match_keyword_list("اشتريت اكل", [("اكل", "food")])
        ('اكل', 'food')
    """
    for keyword, label in keywords:
        if contains_keyword(text, keyword):
            return (keyword, label)
    return None


def match_keyword_prefixes(
    text: str,
    keywords: Sequence[Tuple[str, str]],
    min_keyword_length: int = 3,
    min_prefix_length: int = 3
) -> Optional[Tuple[str, str]]:
    """
    Match truncated keyword prefixes (last character dropped) against text.

    Absorbs suffixed and slightly mis-transcribed forms such as "مواصلا".
    """
    for keyword, label in keywords:
        if len(keyword) < min_keyword_length:
            continue
        prefix = keyword[:max(min_prefix_length, len(keyword) - 1)]
        if prefix in text:
            return (keyword, label)
    return None


def fuzzy_match_tokens(
    text: str,
    keywords: Sequence[Tuple[str, str]],
    threshold: int = 85,
    min_keyword_length: int = 5
) -> Optional[Tuple[str, str, float]]:
    """
    Match single-word keywords against text tokens by rapidfuzz similarity.

    Returns:
        Tuple of (keyword, label, score) for the best match at or above
        threshold, or None
    """
    tokens = text.split()
    if not tokens:
        return None

    best_match = None
    best_score = 0.0
    for keyword, label in keywords:
        if len(keyword) < min_keyword_length or " " in keyword:
            continue
        score = max(fuzz.ratio(keyword, token) for token in tokens)
        if score >= threshold and score > best_score:
            best_score = score
            best_match = (keyword, label, score)

    return best_match
