"""Configuration loader for promptpath."""

from __future__ import annotations

import os
import tempfile
import tomllib
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

import tomlkit
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from promptpath.constants import (
    DEFAULT_FOLDER_ICON,
    DEFAULT_HOME_ICON,
    DEFAULT_REGISTRY_ICON,
    DEFAULT_STYLE,
)
from promptpath.paths import get_config_path


class ConfigError(Exception):
    """Raised when the config file cannot be read or does not match the schema."""


class Properties:
    """Immutable key -> string store with a default supplied at every lookup."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = MappingProxyType(dict(values or {}))

    def get_string(self, key: str, default: str) -> str:
        """Return the value for *key*, or *default* if not set."""
        return self._values.get(str(key), default)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Properties({dict(self._values)!r})"


class PathSegmentConfig(BaseModel):
    """Settings of the path segment. Unset fields fall back to renderer defaults."""

    model_config = ConfigDict(extra="forbid")

    # Free text on purpose: an unknown style renders a diagnostic instead of failing the load
    style: str | None = Field(default=None, description="agnoster, short, full or folder")
    folder_separator_icon: str | None = Field(
        default=None, description="Separator between agnoster segments (default: path separator)"
    )
    home_icon: str | None = Field(default=None, description="Replaces the home directory")
    folder_icon: str | None = Field(default=None, description="Stands in for a skipped folder")
    windows_registry_icon: str | None = Field(
        default=None, description="Replaces the HKCU: registry root"
    )


class PromptPathConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    path: PathSegmentConfig = Field(default_factory=PathSegmentConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> PromptPathConfig:
        """Load configuration from TOML file or use defaults.

        Raises:
            ConfigError: If the file exists but cannot be read, parsed or validated.
        """
        if config_path is None:
            config_path = get_config_path()

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except OSError as exc:
            raise ConfigError(f"Cannot read {config_path}: {exc}") from exc
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {config_path}: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid config in {config_path}:\n{exc}") from exc

    @classmethod
    def with_defaults(cls) -> PromptPathConfig:
        """Config with every renderer default spelled out (what `init` writes)."""
        return cls(
            path=PathSegmentConfig(
                style=DEFAULT_STYLE.value,
                home_icon=DEFAULT_HOME_ICON,
                folder_icon=DEFAULT_FOLDER_ICON,
                windows_registry_icon=DEFAULT_REGISTRY_ICON,
            )
        )

    def to_properties(self, **overrides: str | None) -> Properties:
        """Build the property store for the path segment.

        Args:
            **overrides: Values that win over the file (None = keep file value)
        """
        values = self.path.model_dump(exclude_none=True)
        values.update({key: value for key, value in overrides.items() if value is not None})
        return Properties(values)

    def save(self, path: Path) -> None:
        """Serialize current config to TOML file.

        The document goes to a temp file next to *path* first, so a failed write
        never leaves a truncated config behind.

        Args:
            path: Path to write config file (created if missing)

        Raises:
            ConfigError: If the directory or file cannot be written.
        """
        doc = tomlkit.document()
        doc.add(tomlkit.comment("promptpath configuration"))

        path_table = tomlkit.table()
        for key, value in self.path.model_dump().items():
            if value is not None:
                path_table[key] = value
        doc["path"] = path_table

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".tmp_", suffix=".toml")
        except OSError as exc:
            raise ConfigError(f"Cannot write {path}: {exc}") from exc

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                tomlkit.dump(doc, handle)
            tmp_path.replace(path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise ConfigError(f"Cannot write {path}: {exc}") from exc
