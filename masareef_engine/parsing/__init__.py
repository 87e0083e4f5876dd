"""
Statement parsing: from raw text to structured transactions.
"""

from .engine import TransactionTextParser, ParsedTransaction, ParseResult

__all__ = [
    "TransactionTextParser",
    "ParsedTransaction",
    "ParseResult",
]
