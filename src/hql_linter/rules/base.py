from abc import ABC, abstractmethod
from typing import List, Optional

from hql_tokens import SourceSpan

from ..models import Diagnostic, LintContext, Severity


class BaseRule(ABC):
    """Abstract base class for all linting rules."""

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Stable diagnostic code (e.g., 'missing-semicolon')."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable rule name."""
        pass

    @property
    @abstractmethod
    def severity(self) -> Severity:
        """Default severity for this rule."""
        pass

    @property
    @abstractmethod
    def config_key(self) -> str:
        """Field of LintingRules that enables this rule."""
        pass

    @property
    def requires_tokens(self) -> bool:
        """Token rules only run after a successful tokenization."""
        return True

    @property
    def configurable_severity(self) -> bool:
        """Does the linting.severity setting override this rule's severity?"""
        return False

    @property
    def description(self) -> str:
        """Detailed description of what this rule checks."""
        return ""

    @abstractmethod
    def check(self, context: LintContext) -> List[Diagnostic]:
        """Run the check and return found diagnostics."""
        pass

    # Helper method for consistent diagnostic creation
    def _create_diagnostic(
        self,
        context: LintContext,
        span: SourceSpan,
        message: str,
        severity: Optional[Severity] = None,
    ) -> Diagnostic:
        """Helper to create a diagnostic with rule defaults."""
        if severity is None:
            severity = context.severity if self.configurable_severity else self.severity
        return Diagnostic(
            span=span,
            severity=severity,
            message=message,
            code=self.rule_id,
        )


class TextRule(BaseRule):
    """Rules that only need the raw lines and run before tokenization."""

    @property
    def requires_tokens(self) -> bool:
        return False
