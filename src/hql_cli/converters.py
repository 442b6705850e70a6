from pathlib import Path

from hql_linter.models import Diagnostic

from .models import LintIssue


def diagnostic_to_lint_issue(diagnostic: Diagnostic, file_path: Path) -> LintIssue:
    """Convert an engine diagnostic to a report row (zero-based to 1-based)"""
    return LintIssue(
        severity=diagnostic.severity,
        file_path=str(file_path),
        line_number=diagnostic.span.start.line + 1,
        column=diagnostic.span.start.column + 1,
        end_line_number=diagnostic.span.end.line + 1,
        end_column=diagnostic.span.end.column + 1,
        rule_id=diagnostic.code,
        message=diagnostic.message,
    )
