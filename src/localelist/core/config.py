"""Configuration management.

Loads from TOML config files + environment variables.
Uses pydantic-settings for validation and env var overriding.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from babel import UnknownLocaleError
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from .errors import ConfigError
from .locales import for_language_tag


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class ObservabilityConfig(BaseModel):
    log_level: str = "INFO"
    log_format: str = "console"  # "json" or "console"


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Top-level settings.

    Loaded from TOML config files, overridden by environment variables.
    """

    # Used when the environment names no usable locale
    fallback_locale: str = "en-US"
    # POSIX category checked first (e.g. "LC_MESSAGES"); None = Babel's order
    locale_category: str | None = None

    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    model_config = {"env_prefix": "LOCALELIST_", "env_nested_delimiter": "__"}

    @field_validator("fallback_locale")
    @classmethod
    def fallback_locale_must_parse(cls, v: str) -> str:
        try:
            for_language_tag(v)
        except (UnknownLocaleError, ValueError) as exc:
            raise ValueError(f"Unusable fallback locale {v!r}: {exc}") from exc
        return v


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional).
        overrides: Dict of overrides to apply on top.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            import tomli

            with open(path, "rb") as f:
                try:
                    data = tomli.load(f)
                except tomli.TOMLDecodeError as exc:
                    raise ConfigError(f"Cannot parse {path}: {exc}") from exc

    if overrides:
        data.update(overrides)

    return Settings(**data)
