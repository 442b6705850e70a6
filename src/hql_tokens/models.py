from bisect import bisect_right
from dataclasses import dataclass
from enum import Enum
from typing import List


@dataclass(frozen=True)
class SourcePosition:
    """Zero-based line/column location in the source text"""

    line: int
    column: int


@dataclass(frozen=True)
class SourceSpan:
    """Half-open region between two positions; end may equal start"""

    start: SourcePosition
    end: SourcePosition

    @classmethod
    def point(cls, position: SourcePosition) -> "SourceSpan":
        return cls(start=position, end=position)

    @classmethod
    def default(cls) -> "SourceSpan":
        return cls.point(SourcePosition(0, 0))


class TokenKind(Enum):
    WORD = "word"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    SEMICOLON = "semicolon"
    WHITESPACE = "whitespace"
    OTHER = "other"


@dataclass(frozen=True)
class Token:
    """A classified lexical unit with its span and raw character offsets"""

    kind: TokenKind
    text: str
    span: SourceSpan
    start_offset: int
    end_offset: int
    quoted: bool = False

    @property
    def is_whitespace(self) -> bool:
        return self.kind is TokenKind.WHITESPACE


def split_lines(text: str) -> List[str]:
    """Split on '\\n' only, dropping a trailing '\\r' from each line.

    Kept in step with LineIndex so text rules and token spans agree on
    line numbers.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class LineIndex:
    """Maps character offsets in a text to SourcePositions"""

    def __init__(self, text: str):
        self.text = text
        self._line_starts = [0]
        for i, char in enumerate(text):
            if char == "\n":
                self._line_starts.append(i + 1)

    def position(self, offset: int) -> SourcePosition:
        offset = max(0, min(offset, len(self.text)))
        line = bisect_right(self._line_starts, offset) - 1
        return SourcePosition(line, offset - self._line_starts[line])

    def span(self, start_offset: int, end_offset: int) -> SourceSpan:
        return SourceSpan(self.position(start_offset), self.position(end_offset))
