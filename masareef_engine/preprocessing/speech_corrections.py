"""
Speech-error correction for recognized transcripts.

Rewrites known mis-transcriptions and dialect spellings to their canonical
form before any keyword or number matching happens.
"""

from typing import List, Pattern, Tuple

from .normalizer import compile_bounded_pattern
from ..patterns.text_patterns import SPEECH_CORRECTIONS


# Compiled once, in declaration order
COMPILED_SPEECH_CORRECTIONS: List[Tuple[Pattern, str]] = [
    (compile_bounded_pattern(error), correction)
    for error, correction in SPEECH_CORRECTIONS
]


def correct_speech_errors(text) -> str:
    """
    Apply the speech-correction table to a transcript.

    Each rule only replaces whole words, so a rule never rewrites part of a
    longer word. Rules run in declaration order.

    Args:
        text: Raw transcript

    Returns:
        Corrected transcript, or "" for empty / non-string input

    Example:
        >>> correct_speech_errors("صرفط عشرين جنية")
        'صرفت عشرين جنيه'
    """
    if not text or not isinstance(text, str):
        return ""

    corrected = text
    for pattern, correction in COMPILED_SPEECH_CORRECTIONS:
        corrected = pattern.sub(correction, corrected)
    return corrected
