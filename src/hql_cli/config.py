import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from hql_linter.config import HqlConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path(".hql-lint.toml")


def _extract_table(data: Dict[str, Any]) -> Dict[str, Any]:
    """Settings live under [tool.hql-lint] in pyproject.toml, at top level otherwise"""
    tool_table = data.get("tool", {}).get("hql-lint")
    if tool_table is not None:
        return tool_table
    return {key: value for key, value in data.items() if key in ("linting", "formatting")}


def load_config(config_path: Optional[Path] = None) -> HqlConfig:
    """Load a TOML configuration file; defaults when missing or unreadable.

    Values that parse but fail validation raise ConfigError.
    """
    if config_path is None or not config_path.exists():
        return HqlConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Could not read %s, using defaults: %s", config_path, e)
        return HqlConfig()

    return HqlConfig.from_mapping(_extract_table(data))
