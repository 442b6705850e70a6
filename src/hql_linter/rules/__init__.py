from .base import BaseRule, TextRule
from .comma_rules import CLAUSE_STARTERS, MissingCommaRule
from .statement_rules import STATEMENT_STARTERS, MissingSemicolonRule
from .text_rules import HiveVariableRule, TrailingWhitespaceRule
from .token_rules import KEYWORDS, KeywordCasingRule, ParenthesesRule

__all__ = [
    "BaseRule",
    "TextRule",
    "TrailingWhitespaceRule",
    "HiveVariableRule",
    "KeywordCasingRule",
    "MissingSemicolonRule",
    "ParenthesesRule",
    "MissingCommaRule",
    "KEYWORDS",
    "STATEMENT_STARTERS",
    "CLAUSE_STARTERS",
]
