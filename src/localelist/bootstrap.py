"""Process-level wiring: settings, logging and the default locale list."""

from __future__ import annotations

from pathlib import Path
from typing import IO, Any

from localelist.core.config import Settings, load_settings
from localelist.core.locale_source import SystemLocaleSource
from localelist.domain.locale_list import set_default_locale_source
from localelist.observability.logger import setup_logging_from_settings


def configure(
    settings: Settings | None = None,
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
    log_stream: IO[str] | None = None,
) -> Settings:
    """Apply settings to logging and to the process-wide default list.

    Without *settings*, they are loaded from *config_path* (TOML),
    *overrides* and ``LOCALELIST_*`` environment variables.
    """
    if settings is None:
        settings = load_settings(config_path, overrides)

    setup_logging_from_settings(settings, stream=log_stream)
    set_default_locale_source(SystemLocaleSource.from_settings(settings))
    return settings
