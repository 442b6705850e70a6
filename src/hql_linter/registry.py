from typing import List, Optional

from .config import LintingRules
from .rules.base import BaseRule


class RuleRegistry:
    """Registry for managing and loading linting rules"""

    def __init__(self):
        self._rules: List[BaseRule] = []
        self._load_builtin_rules()

    def register(self, rule: BaseRule):
        if self.get(rule.rule_id) is not None:
            raise ValueError(f"Rule '{rule.rule_id}' is already registered")
        self._rules.append(rule)

    def get(self, rule_id: str) -> Optional[BaseRule]:
        for rule in self._rules:
            if rule.rule_id == rule_id:
                return rule
        return None

    def get_all_rules(self) -> List[BaseRule]:
        return list(self._rules)

    def get_enabled_rules(self, rules_config: LintingRules) -> List[BaseRule]:
        """Rules switched on by the config, in registration order"""
        return [rule for rule in self._rules if rules_config.is_enabled(rule.config_key)]

    def _load_builtin_rules(self):
        from .rules.comma_rules import MissingCommaRule
        from .rules.statement_rules import MissingSemicolonRule
        from .rules.text_rules import HiveVariableRule, TrailingWhitespaceRule
        from .rules.token_rules import KeywordCasingRule, ParenthesesRule

        # Text rules first, then token rules in reporting order
        self.register(TrailingWhitespaceRule())
        self.register(HiveVariableRule())
        self.register(KeywordCasingRule())
        self.register(MissingSemicolonRule())
        self.register(ParenthesesRule())
        self.register(MissingCommaRule())


registry = RuleRegistry()
