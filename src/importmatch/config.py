"""Configuration loading and validation."""

from __future__ import annotations

import os
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from importmatch.errors import ConfigError, ConfigNotFoundError
from importmatch.pattern import split_pattern_option
from importmatch.table import DEFAULT_EXCLUDED_ROOTS

__all__ = ["Config", "IncludeImportsSettings"]


class IncludeImportsSettings(BaseModel):
    """Settings for the include_imports section."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    patterns: list[str] = Field(default_factory=list)
    default_exclusions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDED_ROOTS))
    verbose: bool = False

    @field_validator("patterns", mode="before")
    @classmethod
    def _split_patterns(cls, value: Any) -> Any:
        if isinstance(value, str):
            return split_pattern_option([value])
        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            return split_pattern_option(value)
        return value


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._include_imports: IncludeImportsSettings | None = None

    @classmethod
    def load(cls, yaml_path: str) -> Config:
        """Load configuration from a YAML file.

        Args:
            yaml_path: Path to the YAML configuration file.

        Returns:
            A new Config whose include_imports section has been validated.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the YAML is invalid or has structural errors.
        """
        if not os.path.isfile(yaml_path):
            raise ConfigNotFoundError(config_path=yaml_path)

        with open(yaml_path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {yaml_path}: {e}", cause=e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

        config = cls(data)
        # Validate eagerly so errors surface at load time.
        config.include_imports
        return config

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    @property
    def include_imports(self) -> IncludeImportsSettings:
        """Validated include_imports section.

        Raises:
            ConfigError: If the section does not match IncludeImportsSettings.
        """
        if self._include_imports is None:
            raw = self.get("include_imports", {})
            if raw is None:
                raw = {}
            if not isinstance(raw, dict):
                raise ConfigError(f"'include_imports' must be a mapping, got {type(raw).__name__}")
            try:
                self._include_imports = IncludeImportsSettings.model_validate(raw)
            except ValidationError as e:
                raise ConfigError(
                    f"Invalid include_imports config: {e.error_count()} error(s)",
                    details={"errors": e.errors(include_url=False)},
                    cause=e,
                ) from e
        return self._include_imports
