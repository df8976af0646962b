"""Babel adapter for locale values.

LocaleList treats ``babel.Locale`` as an opaque value type.  Everything it
needs from Babel goes through the helpers here:

* ``to_language_tag``: canonical, hyphen-separated tag (``en-US``,
  ``zh-Hant-TW``)
* ``for_language_tag``: parse a tag; malformed or unknown input raises
  Babel's own ``ValueError`` / ``UnknownLocaleError``
* ``copy_locale``: detached copy, so stored entries can't be mutated
  through a caller's reference
* ``display``: Babel's display form (``en_US``)
"""

from __future__ import annotations

import copy

from babel import Locale
from babel.core import get_locale_identifier

TAG_SEPARATOR = "-"


def to_language_tag(locale: Locale) -> str:
    """Return the canonical tag for *locale*, e.g. ``"en-US"``."""
    return get_locale_identifier(
        (
            locale.language,
            locale.territory,
            locale.script,
            locale.variant,
            locale.modifier,
        ),
        sep=TAG_SEPARATOR,
    )


def for_language_tag(tag: str) -> Locale:
    """Parse a hyphen-separated tag into a ``Locale``.

    Raises:
        ValueError: *tag* is not syntactically a locale identifier.
        babel.UnknownLocaleError: *tag* names no locale known to CLDR.
    """
    return Locale.parse(tag, sep=TAG_SEPARATOR)


def copy_locale(locale: Locale) -> Locale:
    return copy.copy(locale)


def display(locale: Locale) -> str:
    return str(locale)
