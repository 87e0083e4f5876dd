"""
Extraction configuration for spoken transaction parsing.
Contains amount limits, context weights, segmentation and classification thresholds.
"""

EXTRACTION_CONFIG = {
    # Amount validation
    "amounts": {
        "max_amount": 1_000_000,
        # Amounts above this need a confident context to survive
        "high_amount_threshold": 10_000,
        "high_amount_min_confidence": 0.6,
        # Amounts closer than this are treated as the same mention
        "dedupe_epsilon": 0.01,
    },

    # Context confidence: base score plus one increment per indicator family
    "context": {
        "base_confidence": 0.5,
        "max_confidence": 1.0,
        "increments": {
            "time": 0.1,
            "location": 0.2,
            "payment": 0.1,
            "quantity": 0.1,
        },
    },

    # Sentence segmentation
    "segmentation": {
        # Secondary separators (verbs, locations, temporal connectors) need this much context
        "secondary_min_confidence": 0.7,
        # A split is kept only if every piece is longer than this
        "min_split_fragment_length": 5,
        # Final clauses must be longer than this
        "min_clause_length": 3,
    },

    # Direction classification
    "direction": {
        # Keywords longer than this score double
        "long_keyword_length": 4,
        "short_keyword_points": 1,
        "long_keyword_points": 2,
        # Keywords this short only count as whole words ("دخل" is not in "دخلت")
        "bounded_keyword_length": 3,
        # Income must beat expense AND clear this overall confidence
        "income_min_confidence": 0.6,
    },

    # Category resolution
    "categorisation": {
        "fuzzy_min_keyword_length": 3,
        "fuzzy_min_prefix_length": 3,
        # rapidfuzz token similarity (0-100) used after prefix matching fails
        "fuzzy_similarity_threshold": 85,
        "fuzzy_similarity_min_keyword_length": 5,
        "confidence": {
            "keyword": 0.95,
            "fuzzy": 0.75,
            "context": 0.6,
            "default": 0.0,
        },
    },

    # Reserved ids returned when no supplied category matches
    "fallback_category_ids": {
        "expense": "other",
        "income": "other_income",
    },

    # Clause text is attached as a note only when shorter than this
    "note_max_length": 100,
}
