"""TOML-based client configuration.

Settings come from, lowest priority first: built-in defaults, one TOML file,
a ``.env`` file in the current directory, and ``OPENOPUS_*`` environment
variables. Everything is merged into one dict and validated once.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from open_opus.client.api import DEFAULT_BASE_URL, DEFAULT_USER_AGENT

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]


DEFAULT_CONFIG_PATHS = [
    Path("config.toml"),
    Path.home() / ".config" / "open-opus" / "config.toml",
]

# environment variable -> (section, key)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "OPENOPUS_BASE_URL": ("api", "base_url"),
    "OPENOPUS_USER_AGENT": ("api", "user_agent"),
    "OPENOPUS_LOG_LEVEL": ("logging", "level"),
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ApiConfig(BaseModel):
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT


class LoggingConfig(BaseModel):
    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {LOG_LEVELS} (got '{v}')")
        return level


class AppConfig(BaseModel):
    """Top-level configuration."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Build the configuration.

    The TOML file is *path* if it exists, else the first of
    ``DEFAULT_CONFIG_PATHS`` that exists, else none. Invalid values raise
    ``pydantic.ValidationError``.
    """
    data = _read_toml(_find_config_file(path))

    env = {**read_dotenv(Path(".env")), **os.environ}
    for var, (section, key) in ENV_OVERRIDES.items():
        if env.get(var):
            data.setdefault(section, {})[key] = env[var]

    return AppConfig.model_validate(data)


def _find_config_file(path: Optional[Path]) -> Optional[Path]:
    candidates = ([path] if path else []) + DEFAULT_CONFIG_PATHS
    return next((candidate for candidate in candidates if candidate.exists()), None)


def _read_toml(path: Optional[Path]) -> dict[str, Any]:
    if path is None:
        return {}
    with open(path, "rb") as f:
        return tomllib.load(f)


def read_dotenv(path: Path) -> dict[str, str]:
    """Parse ``KEY=VALUE`` lines; blank lines, comments and junk are skipped."""
    if not path.exists():
        return {}

    values: dict[str, str] = {}
    for raw in path.read_text().splitlines():
        key, sep, value = raw.strip().partition("=")
        if not sep or key.startswith("#"):
            continue
        values[key.strip()] = value.strip().strip("\"'")
    return values
