from typing import Optional

from pydantic import BaseModel

from hql_linter.models import Severity


class LintIssue(BaseModel):
    """Report row for one diagnostic; line and column are 1-based"""

    severity: Severity
    file_path: str
    line_number: int
    column: int
    end_line_number: int
    end_column: int
    rule_id: Optional[str] = None
    message: str
