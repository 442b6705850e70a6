"""
Linter and formatter configuration.

Field names follow the client settings (``hql.linting.maxFileSize``,
``hql.linting.rules.keywordCasing``...) through camelCase aliases while the
Python attributes stay snake_case. All models are frozen: a configuration
change replaces the whole snapshot held by ConfigStore.
"""

import logging
import threading
from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .models import Severity

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration mapping does not validate"""


def _to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


class _ConfigModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class LintingRules(_ConfigModel):
    keyword_casing: bool = False
    semicolon: bool = True
    string_literal: bool = True
    parentheses: bool = True
    trailing_whitespace: bool = True
    missing_comma: bool = False
    hive_variable: bool = True

    def is_enabled(self, key: str) -> bool:
        return bool(getattr(self, key, False))


class LintingConfig(_ConfigModel):
    enabled: bool = True
    severity: Severity = Severity.WARNING
    max_file_size: int = Field(default=1_048_576, ge=0)
    rules: LintingRules = Field(default_factory=LintingRules)

    @field_validator("severity", mode="before")
    @classmethod
    def _parse_severity(cls, value: Any) -> Any:
        if isinstance(value, str):
            for member in Severity:
                if member.value.lower() == value.strip().lower():
                    return member
        return value


class FormattingConfig(_ConfigModel):
    enabled: bool = True
    keyword_case: Literal["upper", "lower", "preserve"] = "upper"
    lines_between_queries: int = Field(default=1, ge=0, le=10)


class HqlConfig(_ConfigModel):
    linting: LintingConfig = Field(default_factory=LintingConfig)
    formatting: FormattingConfig = Field(default_factory=FormattingConfig)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "HqlConfig":
        """Validate a plain mapping (client settings or TOML table)"""
        try:
            return cls.model_validate(dict(data or {}))
        except ValidationError as e:
            raise ConfigError(f"Invalid HQL configuration: {e}") from e


class ConfigStore:
    """Holds the active configuration snapshot; replaced whole, never mutated"""

    def __init__(self, config: Optional[HqlConfig] = None):
        self._lock = threading.Lock()
        self._config = config or HqlConfig()

    def snapshot(self) -> HqlConfig:
        with self._lock:
            return self._config

    def replace(self, config: HqlConfig) -> None:
        with self._lock:
            self._config = config
        logger.debug("Configuration replaced: %s", config.model_dump(by_alias=True))

    def update(self, data: Mapping[str, Any]) -> HqlConfig:
        config = HqlConfig.from_mapping(data)
        self.replace(config)
        return config
