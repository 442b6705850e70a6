from dataclasses import dataclass, field
from typing import List

from hql_tokens import SourceSpan


@dataclass
class FormatOptions:
    """Editor indentation settings supplied with a format request"""

    insert_spaces: bool = True
    tab_size: int = 2


@dataclass
class TextEdit:
    span: SourceSpan
    new_text: str


@dataclass
class FormatResult:
    source: str
    modified: bool
    errors: List[str] = field(default_factory=list)


@dataclass
class FormatResults:
    results: List[FormatResult]
    total_files: int
    modified_files: int
    error_files: int
