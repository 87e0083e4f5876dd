"""
Income / expense direction classification.
"""

from .direction_classifier import DirectionClassifier, classify_direction

__all__ = [
    "DirectionClassifier",
    "classify_direction",
]
