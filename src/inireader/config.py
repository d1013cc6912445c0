"""Configuration loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from inireader.errors import ConfigError, ConfigNotFoundError
from inireader.resolver import DEFAULT_MAX_DEPTH

__all__ = ["Config", "ReaderOptions"]


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load a YAML mapping from ``path``."""
        file_path = Path(path)
        if not file_path.is_file():
            raise ConfigNotFoundError(config_path=str(file_path))

        try:
            data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(message=f"Invalid YAML in {file_path}: {e}", cause=e) from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(message=f"Config file {file_path} must be a YAML mapping, got {type(data).__name__}")
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-path key, e.g. ``"reader.line_break"``.

        Returns ``default`` when a segment is missing or an earlier segment
        is not a mapping, so ``reader.encoding`` reads as absent when
        ``reader`` holds a scalar.
        """
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current


class ReaderOptions(BaseModel):
    """Parsing and lookup options for an IniReader.

    ``line_break=None`` splits on ``\\n`` and drops a trailing ``\\r`` from each
    line, so CRLF and LF input parse the same. ``max_depth`` caps nested placeholder
    expansion; ``None`` defers to the interpreter recursion limit.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    line_break: Literal["\n", "\r\n", "\r"] | None = None
    encoding: str = "utf-8"
    max_depth: int | None = Field(default=DEFAULT_MAX_DEPTH, ge=1)

    @classmethod
    def from_config(cls, config: Config) -> ReaderOptions:
        """Build options from the ``reader.*`` keys of a Config."""
        section = config.get("reader", {})
        if not isinstance(section, dict):
            raise ConfigError(message=f"'reader' must be a mapping, got {type(section).__name__}")
        try:
            return cls(**section)
        except ValidationError as e:
            raise ConfigError(message=f"Invalid reader options: {e}", cause=e) from e
