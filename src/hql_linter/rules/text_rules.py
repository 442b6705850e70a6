import re
from typing import List, Optional

from hql_tokens import SourcePosition, SourceSpan

from ..models import Diagnostic, LintContext, Severity
from .base import TextRule

HIVE_VARIABLE_PATTERN = re.compile(r"\$\{([^}]*)\}")
HIVE_NAMESPACES = ("hiveconf", "hivevar", "env", "system", "define")


class TrailingWhitespaceRule(TextRule):
    @property
    def rule_id(self) -> str:
        return "trailing-whitespace"

    @property
    def name(self) -> str:
        return "Trailing whitespace"

    @property
    def severity(self) -> Severity:
        return Severity.HINT

    @property
    def config_key(self) -> str:
        return "trailing_whitespace"

    @property
    def description(self) -> str:
        return "Lines should not end with spaces or tabs"

    def check(self, context: LintContext) -> List[Diagnostic]:
        issues = []
        for i, line in enumerate(context.lines):
            if not line.endswith((" ", "\t")):
                continue
            trimmed = line.rstrip()
            span = SourceSpan(SourcePosition(i, len(trimmed)), SourcePosition(i, len(line)))
            issues.append(self._create_diagnostic(context, span, "Trailing whitespace"))
        return issues


class HiveVariableRule(TextRule):
    @property
    def rule_id(self) -> str:
        return "hive-variable"

    @property
    def name(self) -> str:
        return "Hive variable reference"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def config_key(self) -> str:
        return "hive_variable"

    @property
    def configurable_severity(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return "Validate Hive variable syntax (${hiveconf:varname})"

    def check(self, context: LintContext) -> List[Diagnostic]:
        issues = []
        for i, line in enumerate(context.lines):
            for match in HIVE_VARIABLE_PATTERN.finditer(line):
                message = self._classify(match.group(1))
                if message is None:
                    continue
                span = SourceSpan(SourcePosition(i, match.start()), SourcePosition(i, match.end()))
                issues.append(self._create_diagnostic(context, span, message))
        return issues

    @staticmethod
    def _classify(inner: str) -> Optional[str]:
        """Return the problem with one ${...} body, or None if it is valid"""
        if not inner.strip():
            return "Empty Hive variable"
        if ":" not in inner:
            return "Invalid Hive variable: missing colon (expected ${namespace:name})"

        namespace, name = inner.split(":", 1)
        if namespace not in HIVE_NAMESPACES:
            return f"Invalid namespace '{namespace}'. Expected: {', '.join(HIVE_NAMESPACES)}"
        if not name.strip():
            return "Variable name is empty"
        return None
