"""Custom exception hierarchy for locale lists."""

from __future__ import annotations

from typing import Any


class LocaleListError(Exception):
    """Base exception for all locale list errors."""


# --- Configuration ---
class ConfigError(LocaleListError):
    """Invalid or unreadable configuration."""


# --- Construction ---
class NullEntryError(LocaleListError):
    """A locale list was given a missing (``None``) entry."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Locale list entry {index} is None")


class DuplicateEntryError(LocaleListError):
    """A locale list was given the same locale more than once."""

    def __init__(self, index: int, locale: Any):
        self.index = index
        self.locale = locale
        super().__init__(f"Locale list entry {index} repeats {locale}")
