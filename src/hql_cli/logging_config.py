import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGERS = ("hql_cli", "hql_linter", "hql_formatter", "hql_tokens")


def setup_logging(level: str = "WARNING") -> None:
    """Console logging on stderr for the hql packages"""
    handler = RichHandler(
        rich_tracebacks=True,
        show_time=False,
        show_path=False,
        console=Console(stderr=True),
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    for name in PACKAGE_LOGGERS:
        package_logger = logging.getLogger(name)
        # Remove existing handlers to avoid duplicates
        package_logger.handlers.clear()
        package_logger.addHandler(handler)
        package_logger.setLevel(level.upper())
