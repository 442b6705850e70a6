from typing import List, Optional

from hql_tokens import SourceSpan, Token, TokenKind, TokenWalker

from ..models import Diagnostic, LintContext, Severity
from .base import BaseRule

KEYWORDS = frozenset(
    {
        # Clauses and DML/DDL core
        "SELECT", "FROM", "WHERE", "GROUP", "BY", "HAVING", "ORDER", "LIMIT",
        "JOIN", "LEFT", "RIGHT", "INNER", "OUTER", "CROSS", "FULL", "ON", "AS",
        "AND", "OR", "NOT", "IN", "EXISTS", "BETWEEN", "LIKE",
        "CASE", "WHEN", "THEN", "ELSE", "END",
        "INSERT", "INTO", "VALUES", "UPDATE", "DELETE", "CREATE", "TABLE", "DROP", "ALTER",
        "OFFSET", "USING", "DISTINCT", "SET", "MERGE", "WITH", "OVERWRITE",
        "UNION", "INTERSECT", "EXCEPT",
        # Hive specific
        "RLIKE", "REGEXP", "PARTITION", "PARTITIONED", "CLUSTERED", "SORTED",
        "BUCKETS", "SKEWED", "OVER", "ROWS", "UNBOUNDED", "PRECEDING", "FOLLOWING",
        "LATERAL", "VIEW", "DATABASE", "SCHEMA", "EXTERNAL", "TEMPORARY",
        "SHOW", "DESCRIBE", "EXPLAIN",
    }
)


class KeywordCasingRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "keyword-casing"

    @property
    def name(self) -> str:
        return "Keyword casing"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def config_key(self) -> str:
        return "keyword_casing"

    @property
    def configurable_severity(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return "SQL keywords should be uppercase"

    def check(self, context: LintContext) -> List[Diagnostic]:
        issues = []
        previous: Optional[Token] = None
        for _, token in TokenWalker.significant(context.tokens or []):
            after_dot = previous is not None and previous.text == "."
            previous = token
            # Quoted words and dotted name parts (hive.exec.dynamic.partition) are identifiers
            if token.kind is not TokenKind.WORD or token.quoted or after_dot:
                continue
            if token.text.upper() not in KEYWORDS:
                continue
            if token.text != token.text.upper():
                issues.append(
                    self._create_diagnostic(
                        context, token.span, f"Keyword '{token.text}' should be uppercase"
                    )
                )
        return issues


class ParenthesesRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "unbalanced-parentheses"

    @property
    def name(self) -> str:
        return "Parenthesis balance"

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def config_key(self) -> str:
        return "parentheses"

    @property
    def description(self) -> str:
        return "Every '(' must be closed by a matching ')'"

    def check(self, context: LintContext) -> List[Diagnostic]:
        balance = 0
        first_extra: Optional[Token] = None

        for token in context.tokens or []:
            if token.kind is TokenKind.LEFT_PAREN:
                balance += 1
            elif token.kind is TokenKind.RIGHT_PAREN:
                balance -= 1
                if balance < 0 and first_extra is None:
                    first_extra = token

        if balance > 0:
            return [
                self._create_diagnostic(
                    context,
                    SourceSpan.default(),
                    f"Unbalanced parentheses: {balance} unclosed '('",
                )
            ]
        if balance < 0 and first_extra is not None:
            return [
                self._create_diagnostic(
                    context, first_extra.span, "Unbalanced parentheses: extra ')'"
                )
            ]
        return []
