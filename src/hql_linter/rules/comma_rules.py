from typing import List, Optional

from hql_tokens import SourceSpan, Token, TokenKind, TokenWalker

from ..models import Diagnostic, LintContext, Severity
from .base import BaseRule
from .statement_rules import STATEMENT_STARTERS

# Words that legitimately begin (or end) a line inside one statement
CLAUSE_STARTERS = frozenset(
    {
        "FROM", "WHERE", "GROUP", "ORDER", "BY", "HAVING", "LIMIT", "OFFSET",
        "JOIN", "LEFT", "RIGHT", "INNER", "OUTER", "FULL", "CROSS", "SEMI", "ANTI",
        "LATERAL", "VIEW", "ON", "USING",
        "UNION", "INTERSECT", "EXCEPT", "MINUS",
        "AND", "OR", "NOT", "IN", "IS", "NULL", "LIKE", "RLIKE", "REGEXP", "BETWEEN", "EXISTS",
        "CASE", "WHEN", "THEN", "ELSE", "END", "AS", "DISTINCT", "ALL",
        "OVER", "PARTITION", "ROWS", "RANGE", "WINDOW", "PRECEDING", "FOLLOWING",
        "UNBOUNDED", "CURRENT", "ROW", "ASC", "DESC",
        "CLUSTER", "DISTRIBUTE", "SORT",
        "INTO", "TABLE", "OVERWRITE", "VALUES",
        "STORED", "LOCATION", "PARTITIONED", "CLUSTERED", "SORTED", "TBLPROPERTIES", "COMMENT",
    }
) | STATEMENT_STARTERS


class MissingCommaRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "missing-comma"

    @property
    def name(self) -> str:
        return "Missing comma"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def config_key(self) -> str:
        return "missing_comma"

    @property
    def configurable_severity(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return "Check for potential missing commas between columns split across lines"

    def check(self, context: LintContext) -> List[Diagnostic]:
        issues = []
        previous: Optional[Token] = None

        for _, token in TokenWalker.significant(context.tokens or []):
            if (
                previous is not None
                and previous.kind is TokenKind.WORD
                and token.kind is TokenKind.WORD
                and previous.span.end.line != token.span.start.line
                and self._looks_like_missing_comma(context.text, previous, token)
            ):
                issues.append(
                    self._create_diagnostic(
                        context,
                        SourceSpan.point(previous.span.end),
                        "Possible missing comma between columns in SELECT list",
                    )
                )
            previous = token

        return issues

    @staticmethod
    def _looks_like_missing_comma(text: str, first: Token, second: Token) -> bool:
        line_end = text.find("\n", first.end_offset)
        if line_end == -1:
            line_end = len(text)
        if text[first.end_offset:line_end].lstrip(" \t").startswith(","):
            return False

        # SELECT is a statement starter, so a line break after it is skipped too
        if first.text.upper() in CLAUSE_STARTERS or second.text.upper() in CLAUSE_STARTERS:
            return False
        return True
