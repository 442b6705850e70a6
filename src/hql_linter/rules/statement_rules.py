"""
Statement boundary tracking.

Walks the token stream once, keeping the parenthesis depth and the leading
keyword of the statement currently open. A statement-starter keyword at
depth 0 either continues the open statement (``WITH ... SELECT``,
``INSERT INTO t SELECT``, ``CREATE TABLE t AS SELECT``, ``EXPLAIN SELECT``)
or begins a new one, in which case the previous significant token must have
been a semicolon. This is a heuristic over tokens, not a parser.
"""

from typing import List, Optional

from hql_tokens import SourceSpan, Token, TokenKind, TokenWalker

from ..models import Diagnostic, LintContext, Severity
from .base import BaseRule

STATEMENT_STARTERS = frozenset(
    {
        "SELECT", "INSERT", "UPDATE", "DELETE", "CREATE", "DROP", "ALTER",
        "TRUNCATE", "WITH", "MERGE", "SHOW", "DESCRIBE", "EXPLAIN", "SET", "USE",
    }
)

# Open statements that a depth-0 SELECT extends instead of ending
SELECT_CONTINUES = frozenset({"WITH", "INSERT", "CREATE", "EXPLAIN"})


def is_continuation(open_statement: Optional[str], starter: str) -> bool:
    return open_statement in SELECT_CONTINUES and starter == "SELECT"


class MissingSemicolonRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "missing-semicolon"

    @property
    def name(self) -> str:
        return "Missing semicolon"

    @property
    def severity(self) -> Severity:
        return Severity.INFORMATION

    @property
    def config_key(self) -> str:
        return "semicolon"

    @property
    def description(self) -> str:
        return "Statements should end with a semicolon"

    def check(self, context: LintContext) -> List[Diagnostic]:
        issues = []
        paren_depth = 0
        open_statement: Optional[str] = None
        last_significant: Optional[Token] = None

        for _, token in TokenWalker.significant(context.tokens or []):
            if token.kind is TokenKind.LEFT_PAREN:
                paren_depth += 1
            elif token.kind is TokenKind.RIGHT_PAREN:
                # Stray ')' is reported by the parentheses rule
                if paren_depth > 0:
                    paren_depth -= 1
            elif token.kind is TokenKind.SEMICOLON:
                if paren_depth == 0:
                    open_statement = None
            elif token.kind is TokenKind.WORD and not token.quoted and paren_depth == 0:
                starter = token.text.upper()
                if starter in STATEMENT_STARTERS and not is_continuation(open_statement, starter):
                    if last_significant is not None and last_significant.kind is not TokenKind.SEMICOLON:
                        issues.append(
                            self._missing_at(context, last_significant, "Missing semicolon at end of statement")
                        )
                    open_statement = starter

            last_significant = token

        if (
            paren_depth == 0
            and open_statement is not None
            and last_significant is not None
            and last_significant.kind is not TokenKind.SEMICOLON
        ):
            issues.append(self._missing_at(context, last_significant, "Missing semicolon at end of file"))

        return issues

    def _missing_at(self, context: LintContext, token: Token, message: str) -> Diagnostic:
        """Zero-width marker right after `token`, where the ';' belongs"""
        return self._create_diagnostic(context, SourceSpan.point(token.span.end), message)
