"""
Context analysis and sentence segmentation.

The segmenter lives in ``masareef_engine.context.segmenter``; it depends on the
numeral extractor, which in turn depends on the context analyzer exported here.
"""

from .context_analyzer import ContextSignals, analyze_context

__all__ = [
    "ContextSignals",
    "analyze_context",
]
