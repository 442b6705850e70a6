from .engine import FormatterEngine
from .models import FormatOptions, FormatResult, FormatResults, TextEdit

__all__ = ["FormatterEngine", "FormatOptions", "FormatResult", "FormatResults", "TextEdit"]
