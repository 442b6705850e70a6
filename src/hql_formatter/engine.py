import logging
from pathlib import Path
from typing import List, Optional

import sqlparse

from hql_linter.config import FormattingConfig
from hql_tokens import SourcePosition, SourceSpan, split_lines

from .models import FormatOptions, FormatResult, FormatResults, TextEdit

logger = logging.getLogger(__name__)

KEYWORD_CASE = {"upper": "upper", "lower": "lower", "preserve": None}


class FormatterEngine:
    """Formats HQL text through sqlparse using the formatting settings."""

    def __init__(self, config: Optional[FormattingConfig] = None):
        self.config = config or FormattingConfig()

    def format_string(self, source: str, options: Optional[FormatOptions] = None) -> FormatResult:
        """Reformat every statement and join them with the configured blank lines."""
        options = options or FormatOptions()
        errors = []

        try:
            statements = [s.strip() for s in sqlparse.split(source) if s.strip()]
            formatted = [
                sqlparse.format(
                    statement,
                    reindent=True,
                    keyword_case=KEYWORD_CASE[self.config.keyword_case],
                    indent_width=max(options.tab_size, 1),
                    indent_tabs=not options.insert_spaces,
                ).strip()
                for statement in statements
            ]
            separator = "\n" * (self.config.lines_between_queries + 1)
            result = separator.join(formatted)
            if source.endswith("\n") and result:
                result += "\n"
        except Exception as e:
            logger.exception("Formatting failed")
            errors.append(str(e))
            return FormatResult(source=source, modified=False, errors=errors)

        return FormatResult(source=result, modified=result != source, errors=errors)

    def format_document(self, text: str, options: Optional[FormatOptions] = None) -> List[TextEdit]:
        """Whole-document replacement edit, or nothing when there is nothing to apply."""
        if not self.config.enabled:
            return []

        result = self.format_string(text, options)
        if result.errors or not result.modified:
            return []

        lines = split_lines(text)
        last_line = max(len(lines), 1) - 1
        last_len = len(lines[-1]) if lines else 0
        if text.endswith("\n"):
            # Cover the final newline as well
            last_line, last_len = len(lines), 0
        span = SourceSpan(SourcePosition(0, 0), SourcePosition(last_line, last_len))
        return [TextEdit(span=span, new_text=result.source)]

    def format_files(self, files: List[Path], options: Optional[FormatOptions] = None, write: bool = True) -> FormatResults:
        """Batch format multiple files on disk."""
        results = []; modified_count = 0; error_count = 0
        for file_path in files:
            file_path = Path(file_path)
            try:
                source = file_path.read_text(encoding="utf-8")
                result = self.format_string(source, options)
                results.append(result)
                if result.errors: error_count += 1
                elif result.modified:
                    modified_count += 1
                    if write:
                        file_path.write_text(result.source, encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                results.append(FormatResult(source="", modified=False, errors=[str(e)]))
                error_count += 1
        return FormatResults(results=results, total_files=len(files), modified_files=modified_count, error_files=error_count)
