from typing import Iterator, List, Tuple

from .models import Token


class TokenWalker:
    """Utilities for traversing the flat HQL token stream"""

    @staticmethod
    def significant(tokens: List[Token]) -> Iterator[Tuple[int, Token]]:
        """Yield (index, token) for every non-whitespace token"""
        for i, token in enumerate(tokens):
            if not token.is_whitespace:
                yield i, token
