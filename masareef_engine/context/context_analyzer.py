"""
Context analysis for transaction statements.

Detects time, location, payment-method and quantity cues and turns them into a
confidence score used to validate amounts, gate segmentation and guide
categorisation.
"""

from dataclasses import dataclass
from typing import Dict, List

from ..config.extraction_config import EXTRACTION_CONFIG
from ..patterns.transaction_patterns import CONTEXT_INDICATORS
from ..preprocessing.normalizer import normalize_text, normalize_keywords


@dataclass(frozen=True)
class ContextSignals:
    """Context cues found in a piece of text."""
    has_time_reference: bool = False
    has_location_reference: bool = False
    has_payment_method: bool = False
    has_quantity_indicator: bool = False
    confidence: float = 0.5


NORMALIZED_CONTEXT_INDICATORS: Dict[str, List[str]] = {
    family: normalize_keywords(phrases)
    for family, phrases in CONTEXT_INDICATORS.items()
}


def _mentions_any(text: str, phrases: List[str]) -> bool:
    return any(phrase in text for phrase in phrases)


def analyze_context(text) -> ContextSignals:
    """
    Analyze context cues in text.

    Confidence starts at the configured base and gains a fixed increment for
    each indicator family present, capped at the configured maximum.

    Args:
        text: Raw or normalized text

    Returns:
        ContextSignals for the text
    """
    config = EXTRACTION_CONFIG["context"]
    normalized = normalize_text(text)

    has_time = _mentions_any(normalized, NORMALIZED_CONTEXT_INDICATORS["time"])
    has_location = _mentions_any(normalized, NORMALIZED_CONTEXT_INDICATORS["location"])
    has_payment = _mentions_any(normalized, NORMALIZED_CONTEXT_INDICATORS["payment"])
    has_quantity = _mentions_any(normalized, NORMALIZED_CONTEXT_INDICATORS["quantity"])

    increments = config["increments"]
    confidence = config["base_confidence"]
    if has_time:
        confidence += increments["time"]
    if has_location:
        confidence += increments["location"]
    if has_payment:
        confidence += increments["payment"]
    if has_quantity:
        confidence += increments["quantity"]

    return ContextSignals(
        has_time_reference=has_time,
        has_location_reference=has_location,
        has_payment_method=has_payment,
        has_quantity_indicator=has_quantity,
        confidence=round(min(confidence, config["max_confidence"]), 2),
    )
