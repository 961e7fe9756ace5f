"""Settings loader for claude_messages.

Loads configuration from a TOML file (``claude_messages.toml`` in the working
directory by default) and environment variables prefixed ``CLAUDE_MESSAGES_``.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TOML_PATH = Path("claude_messages.toml")


class DisplayConfig(BaseModel):
    """Pretty-printing configuration."""

    indent: int = Field(default=2, ge=0, le=8)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["debug", "info", "warning", "error"] = "info"
    json_format: bool = False


class TomlSettings(BaseModel):
    """Settings loaded from TOML file."""

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class Settings(BaseSettings):
    """Combined settings from TOML and the environment.

    Usage:
        from claude_messages.core import get_settings
        settings = get_settings()
    """

    model_config = SettingsConfigDict(
        env_prefix="CLAUDE_MESSAGES_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def indent(self) -> int:
        return self.display.indent

    @property
    def log_level(self) -> str:
        return self.logging.level


def load_toml_settings(path: Path | None = None) -> dict[str, Any]:
    """Load settings from TOML file.

    Returns:
        Dictionary of settings from TOML file, or empty dict if file doesn't exist.
    """
    toml_path = path or DEFAULT_TOML_PATH
    if not toml_path.exists():
        return {}

    with open(toml_path, "rb") as f:
        result: dict[str, Any] = tomllib.load(f)
        return result


def get_settings(path: Path | None = None) -> Settings:
    """Load and return the combined settings.

    Args:
        path: Optional TOML file; defaults to ``claude_messages.toml``.

    Returns:
        Settings object with all configuration.
    """
    toml_settings = TomlSettings(**load_toml_settings(path))

    # Only sections present in the TOML file are passed explicitly, so the
    # environment still fills in anything the file leaves out
    overrides = {
        name: getattr(toml_settings, name)
        for name in toml_settings.model_fields_set
    }
    return Settings(**overrides)


_settings: Settings | None = None


def settings() -> Settings:
    """Get cached settings singleton."""
    global _settings
    if _settings is None:
        _settings = get_settings()
    return _settings


def reload_settings(path: Path | None = None) -> Settings:
    """Reload settings from files.

    Returns:
        Fresh Settings object.
    """
    global _settings
    _settings = get_settings(path)
    return _settings
