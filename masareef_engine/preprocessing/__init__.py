"""
Preprocessing for transaction statements.

Handles text normalization, speech-error correction and transcript cleanup.
"""

from .normalizer import (
    normalize_text,
    normalize_digits,
    normalize_keywords,
    compile_bounded_pattern,
)
from .speech_corrections import correct_speech_errors
from .transcript import (
    score_alternative,
    select_best_alternative,
    clean_transcript,
)

__all__ = [
    "normalize_text",
    "normalize_digits",
    "normalize_keywords",
    "compile_bounded_pattern",
    "correct_speech_errors",
    "score_alternative",
    "select_best_alternative",
    "clean_transcript",
]
