"""
Text normalization for spoken and typed Arabic transaction statements.

Canonicalizes digit scripts, letter-shape variants, diacritics, punctuation
and whitespace so that keyword tables only need to list one spelling.
"""

import re
from typing import Iterable, List


# Arabic-Indic and Eastern Arabic-Indic (Persian) digits to ASCII
DIGIT_TRANSLATION = {}
for _offset in range(10):
    DIGIT_TRANSLATION[0x0660 + _offset] = str(_offset)
    DIGIT_TRANSLATION[0x06F0 + _offset] = str(_offset)

# Letter-shape variants folded to one canonical form each
LETTER_TRANSLATION = {
    ord("أ"): "ا",
    ord("إ"): "ا",
    ord("آ"): "ا",
    ord("ٱ"): "ا",
    ord("ة"): "ه",
    ord("ى"): "ي",
}

PUNCTUATION_TRANSLATION = {
    ord("،"): ",",
    ord("؛"): ";",
    ord("؟"): "?",
    ord("٫"): ".",   # Arabic decimal separator
    ord("٬"): None,  # Arabic thousands separator
}

TEXT_TRANSLATION = {**DIGIT_TRANSLATION, **LETTER_TRANSLATION, **PUNCTUATION_TRANSLATION}

# Harakat, superscript alef and tatweel
DIACRITICS_RE = re.compile(r"[\u064B-\u065F\u0670\u0640]")
REPEATED_PUNCTUATION_RE = re.compile(r"([,;?!.])(?:\s*\1)+")
WHITESPACE_RE = re.compile(r"\s+")

# One letter, counting Arabic combining marks as part of the letter they sit on.
# Used instead of \b, which splits words at combining marks.
LETTER_CLASS = r"(?:[^\W\d_]|[\u064B-\u065F\u0670\u0640])"


def compile_bounded_pattern(phrase: str, prefix: str = "") -> "re.Pattern":
    """
    Compile a pattern matching phrase only where it is not glued to other letters.

    Args:
        phrase: Literal phrase to match
        prefix: Optional regex allowed between the left boundary and the phrase
            (e.g. attached clitics)

    Returns:
        Compiled case-insensitive pattern
    """
    return re.compile(
        rf"(?<!{LETTER_CLASS}){prefix}{re.escape(phrase)}(?!{LETTER_CLASS})",
        re.IGNORECASE,
    )


def normalize_digits(text: str) -> str:
    """Convert native-script digits to ASCII digits, leaving everything else."""
    if not text or not isinstance(text, str):
        return ""
    return text.translate(DIGIT_TRANSLATION)


def normalize_text(text) -> str:
    """
    Normalize text for matching.

    Args:
        text: Raw text to normalize

    Returns:
        Normalized lowercase text, or "" for empty / non-string input

    Example:
        >>> normalize_text("  اشتريت أكل   بـ ٢٠ جنيهاً ،، ")
        'اشتريت اكل ب 20 جنيها ,'
    """
    if not text or not isinstance(text, str):
        return ""

    normalized = DIACRITICS_RE.sub("", text.translate(TEXT_TRANSLATION))
    normalized = normalized.lower()
    normalized = REPEATED_PUNCTUATION_RE.sub(r"\1", normalized)
    normalized = WHITESPACE_RE.sub(" ", normalized)
    return normalized.strip()


def normalize_keywords(keywords: Iterable[str]) -> List[str]:
    """Normalize a keyword table once, dropping blanks and duplicates but keeping order."""
    seen = set()
    result = []
    for keyword in keywords:
        normalized = normalize_text(keyword)
        if normalized and normalized not in seen:
            seen.add(normalized)
            result.append(normalized)
    return result
