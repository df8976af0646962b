"""Shared fixtures for the localelist test suite."""

from __future__ import annotations

import logging

import pytest
import structlog
from babel import Locale

from localelist.core.locale_source import FixedLocaleSource, SystemLocaleSource
from localelist.domain.locale_list import set_default_locale_source


# ---------------------------------------------------------------------------
# Locales
# ---------------------------------------------------------------------------

@pytest.fixture
def en_us() -> Locale:
    return Locale("en", territory="US")


@pytest.fixture
def fr_fr() -> Locale:
    return Locale("fr", territory="FR")


@pytest.fixture
def de_de() -> Locale:
    return Locale("de", territory="DE")


# ---------------------------------------------------------------------------
# Locale sources
# ---------------------------------------------------------------------------

@pytest.fixture
def fixed_source(en_us: Locale) -> FixedLocaleSource:
    """A source reporting en-US until told otherwise."""
    return FixedLocaleSource(en_us)


@pytest.fixture
def default_source(fixed_source: FixedLocaleSource):
    """Point the process-wide default list at ``fixed_source``."""
    set_default_locale_source(fixed_source)
    yield fixed_source
    set_default_locale_source(SystemLocaleSource.from_settings())


@pytest.fixture
def clean_locale_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every environment variable Babel reads the locale from."""
    for var in ("LANGUAGE", "LC_ALL", "LC_CTYPE", "LC_MESSAGES", "LANG"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@pytest.fixture
def reset_logging():
    """Undo setup_logging(): drop its handler and structlog config."""
    yield
    from localelist.observability import logger as logger_module

    package_logger = logging.getLogger(logger_module.PACKAGE_LOGGER)
    if logger_module._handler is not None:
        package_logger.removeHandler(logger_module._handler)
        logger_module._handler = None
    package_logger.setLevel(logging.NOTSET)
    structlog.reset_defaults()
