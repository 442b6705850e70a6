"""
HQL Linter - positioned diagnostics for Hive query language source

This package provides:
- Text rules (trailing whitespace, ${namespace:name} variable references)
- Token rules (keyword casing, parenthesis balance)
- Statement boundary tracking (missing semicolons) and the missing-comma heuristic
- Configuration snapshots shared with the formatter
"""

__version__ = "0.1.0"

from .config import ConfigError, ConfigStore, FormattingConfig, HqlConfig, LintingConfig, LintingRules
from .engine import LinterEngine
from .models import Diagnostic, LintContext, Severity
from .registry import RuleRegistry, registry

__all__ = [
    "ConfigError",
    "ConfigStore",
    "Diagnostic",
    "FormattingConfig",
    "HqlConfig",
    "LintContext",
    "LinterEngine",
    "LintingConfig",
    "LintingRules",
    "RuleRegistry",
    "Severity",
    "registry",
]
