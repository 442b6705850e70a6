"""
HQL token source - classified tokens with zero-based source spans
"""

from .models import LineIndex, SourcePosition, SourceSpan, Token, TokenKind, split_lines
from .token_walker import TokenWalker
from .tokenizer import HQLTokenizer, TokenizeError

__all__ = [
    "HQLTokenizer",
    "LineIndex",
    "SourcePosition",
    "SourceSpan",
    "Token",
    "TokenKind",
    "TokenWalker",
    "TokenizeError",
    "split_lines",
]
