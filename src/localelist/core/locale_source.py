"""Current-locale sources.

SystemLocaleSource: the process environment (LANGUAGE, LC_ALL, ...)
FixedLocaleSource: an explicitly set locale (tests, embedding hosts)

The default locale list never reads the environment directly; it asks
a LocaleSource.
"""

from __future__ import annotations

import logging
from typing import Protocol

from babel import Locale, UnknownLocaleError, default_locale

from .config import Settings
from .locales import for_language_tag

logger = logging.getLogger(__name__)

# What Babel reports for the C and POSIX locales
_POSIX_IDENTIFIER = "en_US_POSIX"


class LocaleSource(Protocol):
    """Supplier of the current system locale."""

    def current(self) -> Locale:
        """The locale currently in effect."""
        ...


class SystemLocaleSource:
    """Current locale taken from the POSIX locale environment variables.

    Falls back to ``fallback_tag`` when no variable names a real locale:
    nothing is set, only the C/POSIX locale is set (Python itself sets
    ``LC_CTYPE=C.UTF-8`` when the environment is empty), or the named
    locale is unknown to Babel.
    """

    def __init__(
        self,
        fallback_tag: str = "en-US",
        category: str | None = None,
    ) -> None:
        self._fallback_tag = fallback_tag
        self._category = category

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> SystemLocaleSource:
        """Build from ``fallback_locale`` and ``locale_category``."""
        if settings is None:
            settings = Settings()
        return cls(
            fallback_tag=settings.fallback_locale,
            category=settings.locale_category,
        )

    def current(self) -> Locale:
        identifier = default_locale(self._category)
        if identifier and identifier != _POSIX_IDENTIFIER:
            try:
                return Locale.parse(identifier)
            except (UnknownLocaleError, ValueError):
                logger.warning(
                    "Unusable system locale %r, falling back to %s",
                    identifier,
                    self._fallback_tag,
                )
        return for_language_tag(self._fallback_tag)


class FixedLocaleSource:
    """Returns whatever locale was last set."""

    def __init__(self, locale: Locale) -> None:
        self._locale = locale

    def current(self) -> Locale:
        return self._locale

    def set_locale(self, locale: Locale) -> None:
        self._locale = locale
