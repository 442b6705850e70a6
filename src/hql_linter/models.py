from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from hql_tokens import SourceSpan, Token


class Severity(str, Enum):
    """Diagnostic severity levels"""

    ERROR = "Error"
    WARNING = "Warning"
    INFORMATION = "Information"
    HINT = "Hint"

    @classmethod
    def parse(cls, value: "str | Severity") -> "Severity":
        """Case-insensitive lookup; unknown names fall back to WARNING"""
        if isinstance(value, Severity):
            return value
        for member in cls:
            if member.value.lower() == str(value).strip().lower():
                return member
        return cls.WARNING

    @property
    def rank(self) -> int:
        return {"Error": 4, "Warning": 3, "Information": 2, "Hint": 1}[self.value]


@dataclass(frozen=True)
class Diagnostic:
    """A positioned linting issue"""

    span: SourceSpan
    severity: Severity
    message: str
    code: Optional[str] = None
    source: str = "hql-lint"

    @property
    def line(self) -> int:
        return self.span.start.line

    @property
    def column(self) -> int:
        return self.span.start.column


@dataclass(frozen=True)
class LintContext:
    """Everything a rule may read during one lint pass"""

    text: str
    lines: List[str]
    tokens: Optional[List[Token]] = None
    severity: Severity = Severity.WARNING
