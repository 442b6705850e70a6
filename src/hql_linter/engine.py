import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from hql_tokens import HQLTokenizer, SourceSpan, TokenizeError, split_lines

from .config import ConfigStore, HqlConfig
from .models import Diagnostic, LintContext, Severity
from .registry import RuleRegistry
from .rules.base import BaseRule

logger = logging.getLogger(__name__)

TOKENIZER_ERROR_CODE = "tokenizer-error"


class LinterEngine:
    """Core engine for HQL linting"""

    def __init__(
        self,
        config_store: Optional[ConfigStore] = None,
        tokenizer: Optional[HQLTokenizer] = None,
        registry: Optional[RuleRegistry] = None,
    ):
        self.config_store = config_store or ConfigStore()
        self.tokenizer = tokenizer or HQLTokenizer()
        self.registry = registry or RuleRegistry()

    def lint(self, text: str, config: Optional[HqlConfig] = None) -> List[Diagnostic]:
        """Run all enabled checks over one text snapshot"""
        # One snapshot for the whole pass
        linting = (config or self.config_store.snapshot()).linting

        if not linting.enabled:
            return []
        size = len(text.encode("utf-8"))
        if size > linting.max_file_size:
            logger.debug("Skipping lint: %d bytes exceeds maxFileSize %d", size, linting.max_file_size)
            return []

        rules = self.registry.get_enabled_rules(linting.rules)
        context = LintContext(text=text, lines=split_lines(text), severity=linting.severity)
        diagnostics: List[Diagnostic] = []

        for rule in rules:
            if not rule.requires_tokens:
                diagnostics.extend(self._run_rule(rule, context))

        try:
            tokens = self.tokenizer.tokenize(text)
        except TokenizeError as e:
            logger.debug("Tokenizer failed: %s", e.message)
            if linting.rules.string_literal:
                diagnostics.append(self._tokenizer_diagnostic(e))
            return diagnostics

        context = replace(context, tokens=tokens)
        for rule in rules:
            if rule.requires_tokens:
                diagnostics.extend(self._run_rule(rule, context))

        logger.debug("Lint pass: %d rules, %d diagnostics", len(rules), len(diagnostics))
        return diagnostics

    def lint_file(self, file_path: Path, config: Optional[HqlConfig] = None) -> List[Diagnostic]:
        text = Path(file_path).read_text(encoding="utf-8")
        return self.lint(text, config=config)

    def _run_rule(self, rule: BaseRule, context: LintContext) -> List[Diagnostic]:
        try:
            return rule.check(context)
        except Exception:
            # One broken rule must not hide the others
            logger.exception("Error in lint rule %s", rule.rule_id)
            return []

    @staticmethod
    def _tokenizer_diagnostic(error: TokenizeError) -> Diagnostic:
        span = SourceSpan.point(error.position) if error.position else SourceSpan.default()
        return Diagnostic(
            span=span,
            severity=Severity.ERROR,
            message=error.message,
            code=TOKENIZER_ERROR_CODE,
        )
