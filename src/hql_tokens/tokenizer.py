"""
HQL tokenization on top of sqlglot's Hive dialect.

sqlglot reports each token as a pair of character offsets into the source;
this adapter turns them into zero-based SourceSpans, splits multi-word
keywords (``GROUP BY``) into one WORD per word and re-emits the gaps
sqlglot skips (whitespace and comments) as WHITESPACE tokens.
"""

import logging
import re
from typing import List, Optional

from sqlglot.dialects.dialect import Dialect
from sqlglot.errors import TokenError
from sqlglot.tokens import TokenType

from .models import LineIndex, SourcePosition, Token, TokenKind

logger = logging.getLogger(__name__)

WORD_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
WORDS_ONLY_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(?:\s+[A-Za-z_][A-Za-z0-9_]*)*")

PUNCTUATION_KINDS = {
    TokenType.L_PAREN: TokenKind.LEFT_PAREN,
    TokenType.R_PAREN: TokenKind.RIGHT_PAREN,
    TokenType.SEMICOLON: TokenKind.SEMICOLON,
}


class TokenizeError(Exception):
    """Raised when the token source rejects the text (e.g. unterminated string)"""

    def __init__(self, message: str, position: Optional[SourcePosition] = None):
        super().__init__(message)
        self.message = message
        self.position = position


class HQLTokenizer:
    """Produces the flat token stream the token rules walk over"""

    def __init__(self, dialect: str = "hive"):
        self.dialect = Dialect.get_or_raise(dialect)

    def tokenize(self, text: str) -> List[Token]:
        try:
            raw_tokens = self.dialect.tokenize(text)
        except TokenError as e:
            raise TokenizeError(str(e)) from e

        index = LineIndex(text)
        tokens: List[Token] = []
        cursor = 0

        for raw in raw_tokens:
            start, end = raw.start, raw.end + 1
            if start < cursor:
                # Synthetic or overlapping token, nothing new to cover
                continue
            if start > cursor:
                tokens.append(self._make(index, TokenKind.WHITESPACE, cursor, start))
            tokens.extend(self._classify(index, raw, start, end))
            cursor = end

        if cursor < len(text):
            tokens.append(self._make(index, TokenKind.WHITESPACE, cursor, len(text)))

        logger.debug("Tokenized %d characters into %d tokens", len(text), len(tokens))
        return tokens

    def _classify(self, index: LineIndex, raw, start: int, end: int) -> List[Token]:
        kind = PUNCTUATION_KINDS.get(raw.token_type)
        if kind is not None:
            return [self._make(index, kind, start, end)]

        if raw.token_type == TokenType.IDENTIFIER:
            return [
                Token(
                    kind=TokenKind.WORD,
                    text=raw.text,
                    span=index.span(start, end),
                    start_offset=start,
                    end_offset=end,
                    quoted=True,
                )
            ]

        source = index.text[start:end]
        if not WORDS_ONLY_PATTERN.fullmatch(source):
            return [self._make(index, TokenKind.OTHER, start, end)]

        # One WORD per word; the gaps inside a multi-word keyword become whitespace
        tokens = []
        position = start
        for match in WORD_PATTERN.finditer(source):
            word_start, word_end = start + match.start(), start + match.end()
            if word_start > position:
                tokens.append(self._make(index, TokenKind.WHITESPACE, position, word_start))
            tokens.append(self._make(index, TokenKind.WORD, word_start, word_end))
            position = word_end
        return tokens

    @staticmethod
    def _make(index: LineIndex, kind: TokenKind, start: int, end: int) -> Token:
        return Token(
            kind=kind,
            text=index.text[start:end],
            span=index.span(start, end),
            start_offset=start,
            end_offset=end,
        )
