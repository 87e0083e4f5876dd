"""
Amount extraction from spoken and typed transaction statements.

Reads digit-form amounts first, then decodes word-form numerals (including
multi-word compounds such as "مية وخمسة وعشرين") from whatever text remains.
"""

import logging
import re
from typing import Dict, Iterator, List, Optional, Tuple

from ..config.extraction_config import EXTRACTION_CONFIG
from ..context.context_analyzer import ContextSignals, analyze_context
from ..patterns.text_patterns import (
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
    UNIT_PRICE_MARKERS,
)
from ..preprocessing.normalizer import (
    normalize_text,
    normalize_keywords,
    compile_bounded_pattern,
    LETTER_CLASS,
)

logger = logging.getLogger(__name__)


# Lookup tables, normalized once
NORMALIZED_NUMBER_WORDS: Dict[str, float] = {
    normalize_text(word): value for word, value in NUMBER_WORDS.items()
}
NORMALIZED_HUNDRED_WORDS = set(normalize_keywords(HUNDRED_WORDS))
NORMALIZED_THOUSAND_WORDS = set(normalize_keywords(THOUSAND_WORDS))
NORMALIZED_FRACTION_WORDS: Dict[str, float] = {
    normalize_text(word): value for word, value in FRACTION_WORDS.items()
}
NORMALIZED_NUMBER_PHRASES: Dict[str, float] = {
    normalize_text(phrase): value for phrase, value in NUMBER_PHRASES.items()
}
NORMALIZED_UNITS = set(normalize_keywords(WEIGHT_UNITS + VOLUME_UNITS + COUNT_UNITS))
NORMALIZED_CONTAINER_UNITS = set(normalize_keywords(VOLUME_UNITS + COUNT_UNITS))

# Longest first so "ج.م" is removed before "ج"
CURRENCY_PATTERNS = [
    compile_bounded_pattern(word)
    for word in sorted(normalize_keywords(CURRENCY_WORDS), key=len, reverse=True)
]

DIGIT_NUMBER_PATTERN = r"\d{1,3}(?:,\d{3})+(?:\.\d+)?|\d+(?:\.\d+)?"
DIGIT_NUMBER_RE = re.compile(DIGIT_NUMBER_PATTERN)
DIGIT_TOKEN_RE = re.compile(rf"(?:{DIGIT_NUMBER_PATTERN})")

_UNIT_ALTERNATION = "|".join(
    re.escape(unit) for unit in sorted(NORMALIZED_UNITS, key=len, reverse=True)
)
_PRICE_MARKER_ALTERNATION = "|".join(
    re.escape(marker) for marker in sorted(normalize_keywords(UNIT_PRICE_MARKERS), key=len, reverse=True)
)

# "2 كيلو" - a quantity, not a price
QUANTITY_DIGITS_RE = re.compile(
    rf"(?:{DIGIT_NUMBER_PATTERN})\s*(?=(?:ال)?(?:{_UNIT_ALTERNATION})(?!{LETTER_CLASS}))"
)
# "الكيلو ب 150", "اللتر بسعر 12.5"
UNIT_PRICE_RE = re.compile(
    rf"(?<!{LETTER_CLASS})(?:ال)?(?:{_UNIT_ALTERNATION})\s*(?:(?:{_PRICE_MARKER_ALTERNATION})\s*)?"
    rf"({DIGIT_NUMBER_PATTERN})"
)

# Token kinds used by the word-form reducer
VALUE = "value"
HUNDRED = "hundred"
THOUSAND = "thousand"
FRACTION = "fraction"


def _token_candidates(token: str) -> Iterator[str]:
    """Yield the token itself, then the token with each attached clitic removed."""
    yield token
    for prefix in CLITIC_PREFIXES:
        if token.startswith(prefix) and len(token) > len(prefix) + 1:
            yield token[len(prefix):]


def _lookup_number_word(token: str) -> Optional[Tuple[str, float]]:
    """Classify a single token as a numeral word, or None."""
    for candidate in _token_candidates(token):
        # With the article these are nouns: "المية" is water, "التلات" is Tuesday
        has_article = "ال" in token[:len(token) - len(candidate)]
        if candidate in NORMALIZED_HUNDRED_WORDS:
            if has_article:
                continue
            return (HUNDRED, 100)
        if candidate in NORMALIZED_THOUSAND_WORDS:
            return (THOUSAND, 1000)
        if candidate in NORMALIZED_FRACTION_WORDS:
            return (FRACTION, NORMALIZED_FRACTION_WORDS[candidate])
        if candidate in NORMALIZED_NUMBER_WORDS:
            if has_article:
                continue
            return (VALUE, NORMALIZED_NUMBER_WORDS[candidate])
    return None


def _lookup_number_phrase(tokens: List[str]) -> Optional[float]:
    """Look up a multi-word numeral phrase, allowing a clitic on its first word."""
    for first in _token_candidates(tokens[0]):
        phrase = " ".join([first] + tokens[1:])
        if phrase in NORMALIZED_NUMBER_PHRASES:
            return NORMALIZED_NUMBER_PHRASES[phrase]
    return None


def is_numeral_token(token: str) -> bool:
    """Return True if the token is a digit-form number or a numeral word."""
    if not token:
        return False
    if DIGIT_TOKEN_RE.fullmatch(token):
        return True
    return _lookup_number_word(token) is not None


def contains_numeral(text) -> bool:
    """Return True if the text mentions any digit or numeral word."""
    normalized = normalize_text(text)
    if DIGIT_NUMBER_RE.search(normalized):
        return True
    return any(_lookup_number_word(token) is not None for token in normalized.split())


def extract_complex_number(text) -> Optional[float]:
    """
    Decode word-form numerals into a single value.

    Walks the tokens left to right, trying 3-word then 2-word phrase windows
    before single words, and folds them into a (total, current) accumulator:
    hundreds multiply current, thousands multiply current and flush it into
    total, everything else adds into current.

    Args:
        text: Text that may contain numeral words

    Returns:
        The decoded value if at least one numeral word was recognized and the
        value is positive, else None

    Example:
        >>> extract_complex_number("مية وخمسة وعشرين")
        125.0
        >>> extract_complex_number("الف ونص")
        1500.0
    """
    tokens = normalize_text(text).split()
    if not tokens:
        return None

    total = 0.0
    current = 0.0
    last_multiplier = 1
    found = False

    i = 0
    while i < len(tokens):
        entry = None
        consumed = 1
        for size in (3, 2):
            if i + size <= len(tokens):
                phrase_value = _lookup_number_phrase(tokens[i:i + size])
                if phrase_value is not None:
                    entry = (VALUE, phrase_value)
                    consumed = size
                    break
        if entry is None:
            entry = _lookup_number_word(tokens[i])

        if entry is not None:
            found = True
            kind, value = entry
            if kind == HUNDRED:
                current = (current or 1) * 100
                last_multiplier = 100
            elif kind == THOUSAND:
                current = (current or 1) * 1000
                total += current
                current = 0.0
                last_multiplier = 1000
            elif kind == FRACTION:
                current += value * last_multiplier
            elif value >= 1000:
                # Pre-composed thousands ("الفين") close the running group
                total += current + value
                current = 0.0
                last_multiplier = 1000
            else:
                current += value
                last_multiplier = 100 if value >= 100 else 1

        i += consumed

    result = total + current
    if found and result > 0:
        return float(result)
    return None


def _strip_currency(text: str) -> str:
    for pattern in CURRENCY_PATTERNS:
        text = pattern.sub(" ", text)
    return text


def _parse_digit_number(raw: str) -> Optional[float]:
    try:
        return float(raw.replace(",", ""))
    except ValueError:
        return None


def _remove_quantities(text: str) -> str:
    """Drop numbers that count units ("2 كيلو", "نص كيلو", "كيلو ونص") so they are not read as prices."""
    text = QUANTITY_DIGITS_RE.sub(" ", text)

    tokens = text.split()
    for idx, token in enumerate(tokens):
        candidates = list(_token_candidates(token))
        if not any(candidate in NORMALIZED_UNITS for candidate in candidates):
            continue
        if idx > 0 and is_numeral_token(tokens[idx - 1]):
            tokens[idx - 1] = ""
        if idx + 1 < len(tokens):
            following = _lookup_number_word(tokens[idx + 1])
            if following is None:
                continue
            if following[0] == FRACTION:
                tokens[idx + 1] = ""
            # "ازازة مية" is a bottle of water
            elif (following[0] == HUNDRED
                  and any(candidate in NORMALIZED_CONTAINER_UNITS for candidate in candidates)):
                tokens[idx + 1] = ""
    return " ".join(token for token in tokens if token)


def _extract_unit_prices(text: str) -> Tuple[List[float], str]:
    prices = []
    for match in UNIT_PRICE_RE.finditer(text):
        value = _parse_digit_number(match.group(1))
        if value is not None:
            prices.append(value)
    return prices, UNIT_PRICE_RE.sub(" ", text)


def _validate_amounts(amounts: List[float], context: ContextSignals) -> List[float]:
    """Deduplicate and drop implausible amounts, keeping first-seen order."""
    config = EXTRACTION_CONFIG["amounts"]
    valid: List[float] = []

    for amount in amounts:
        if any(abs(amount - seen) < config["dedupe_epsilon"] for seen in valid):
            continue
        if amount <= 0 or amount > config["max_amount"]:
            logger.debug("Dropping out-of-range amount %s", amount)
            continue
        if (amount > config["high_amount_threshold"]
                and context.confidence <= config["high_amount_min_confidence"]):
            logger.debug(
                "Dropping high amount %s (context confidence %.2f)", amount, context.confidence
            )
            continue
        valid.append(amount)

    return valid


def extract_amounts(text, context: Optional[ContextSignals] = None) -> List[float]:
    """
    Extract all plausible amounts mentioned in text.

    Currency words are stripped, digit-form numbers are read first and removed,
    then word-form numerals are decoded from what is left. With quantity
    phrasing, unit counts are ignored and unit prices are read first.

    Args:
        text: Statement text
        context: Context signals for the text (computed from the text if omitted)

    Returns:
        Positive amounts in order of appearance, deduplicated

    Example:
        >>> extract_amounts("اشتريت أكل بعشرين جنيه")
        [20.0]
    """
    normalized = normalize_text(text)
    if not normalized:
        return []
    if context is None:
        context = analyze_context(normalized)

    remaining = _strip_currency(normalized)
    amounts: List[float] = []

    if context.has_quantity_indicator:
        remaining = _remove_quantities(remaining)
        unit_prices, remaining = _extract_unit_prices(remaining)
        amounts.extend(unit_prices)

    for match in DIGIT_NUMBER_RE.finditer(remaining):
        value = _parse_digit_number(match.group())
        if value is not None:
            amounts.append(value)

    word_value = extract_complex_number(DIGIT_NUMBER_RE.sub(" ", remaining))
    if word_value is not None:
        amounts.append(word_value)

    return _validate_amounts(amounts, context)
