"""LocaleList: an immutable, ordered list of unique locales.

Typically used to keep a user's ranked locale preferences.  The canonical
string form (``"en-US,fr-FR"``) is computed once at construction time and
is what ``for_language_tags`` reads back.

The process-wide default list is cached in a ``DefaultLocaleListCache``
and rebuilt lazily whenever the current system locale changes.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Sequence
from typing import Any

from babel import Locale, UnknownLocaleError
from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from localelist.core.errors import (
    DuplicateEntryError,
    LocaleListError,
    NullEntryError,
)
from localelist.core.locale_source import LocaleSource, SystemLocaleSource
from localelist.core.locales import (
    copy_locale,
    display,
    for_language_tag,
    to_language_tag,
)

logger = logging.getLogger(__name__)

_SEPARATOR = ","


class LocaleList:
    """Immutable list of locales, most preferred first.

    ``LocaleList()`` or ``LocaleList(None)`` is empty (prefer
    ``LocaleList.empty()``, which is pre-built).  ``LocaleList(locale)``
    holds one locale.  ``LocaleList([a, b, ...])`` holds several.

    Every locale is copied on the way in and on the way out.

    Raises:
        NullEntryError: a sequence element is ``None``.
        DuplicateEntryError: a sequence element equals an earlier one.
    """

    __slots__ = ("_locales", "_string_representation")

    def __init__(
        self,
        locales: Locale | Sequence[Locale | None] | None = None,
    ) -> None:
        if isinstance(locales, str):
            raise TypeError(
                "LocaleList needs Locale values; "
                "use LocaleList.for_language_tags() for tag strings"
            )

        if locales is None:
            stored: tuple[Locale, ...] = ()
            tags = ""
        elif isinstance(locales, Locale):
            clone = copy_locale(locales)
            stored = (clone,)
            tags = to_language_tag(clone)
        else:
            stored, tags = self._validate(locales)

        object.__setattr__(self, "_locales", stored)
        object.__setattr__(self, "_string_representation", tags)

    @staticmethod
    def _validate(
        locales: Sequence[Locale | None],
    ) -> tuple[tuple[Locale, ...], str]:
        accepted: list[Locale] = []
        seen: set[Locale] = set()
        tags: list[str] = []
        for index, locale in enumerate(locales):
            if locale is None:
                raise NullEntryError(index)
            if locale in seen:
                raise DuplicateEntryError(index, locale)
            clone = copy_locale(locale)
            accepted.append(clone)
            seen.add(clone)
            tags.append(to_language_tag(clone))
        return tuple(accepted), _SEPARATOR.join(tags)

    # ------------------------------------------------------------------
    # Immutability
    # ------------------------------------------------------------------

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._locales,))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get(self, index: int) -> Locale | None:
        """Locale at *index*, or ``None`` when out of range."""
        if 0 <= index < len(self._locales):
            return copy_locale(self._locales[index])
        return None

    def get_primary(self) -> Locale | None:
        """The most preferred locale, or ``None`` when empty."""
        return self.get(0)

    def is_empty(self) -> bool:
        return not self._locales

    def size(self) -> int:
        return len(self._locales)

    def to_language_tags(self) -> str:
        """Comma-separated canonical tags, e.g. ``"en-US,fr-FR"``."""
        return self._string_representation

    def __len__(self) -> int:
        return len(self._locales)

    def __iter__(self) -> Iterator[Locale]:
        return (copy_locale(locale) for locale in self._locales)

    def __contains__(self, locale: object) -> bool:
        return locale in self._locales

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, LocaleList):
            return NotImplemented
        mine, theirs = self._locales, other._locales
        if len(mine) != len(theirs):
            return False
        return all(a == b for a, b in zip(mine, theirs))

    def __hash__(self) -> int:
        result = 1
        for locale in self._locales:
            result = 31 * result + hash(locale)
        return result

    def __str__(self) -> str:
        shown = _SEPARATOR.join(display(locale) for locale in self._locales)
        return f"[{shown}]"

    def __repr__(self) -> str:
        return f"LocaleList.for_language_tags({self._string_representation!r})"

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @staticmethod
    def empty() -> LocaleList:
        """The shared empty list."""
        return _EMPTY

    @staticmethod
    def for_language_tags(text: str | None) -> LocaleList:
        """Build a list from its canonical form, e.g. ``"en-US,fr-FR"``.

        Tags are not trimmed and empty tags are not skipped; each one is
        handed to Babel as is, so malformed text raises Babel's errors.
        """
        if not text:
            return _EMPTY
        return LocaleList(
            [for_language_tag(tag) for tag in text.split(_SEPARATOR)]
        )

    @staticmethod
    def get_default() -> LocaleList:
        """One-entry list holding the current system locale."""
        return get_default()

    # ------------------------------------------------------------------
    # pydantic
    # ------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.to_language_tags()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        json_schema = handler(core_schema.str_schema())
        json_schema["description"] = "Comma-separated locale tags"
        return json_schema

    @classmethod
    def _coerce(cls, value: Any) -> LocaleList:
        if isinstance(value, LocaleList):
            return value
        try:
            if isinstance(value, str):
                return cls.for_language_tags(value)
            if isinstance(value, (list, tuple)):
                return cls([_coerce_entry(index, v) for index, v in enumerate(value)])
        except (LocaleListError, UnknownLocaleError) as exc:
            raise ValueError(str(exc)) from exc
        raise ValueError(
            "Expected a tag string or a sequence of locales, "
            f"got {type(value).__name__}"
        )


def _coerce_entry(index: int, value: Any) -> Locale | None:
    if isinstance(value, str):
        return for_language_tag(value)
    if value is None or isinstance(value, Locale):
        return value
    raise ValueError(
        f"Locale list entry {index} must be a tag or a Locale, "
        f"got {type(value).__name__}"
    )


_EMPTY = LocaleList()


# ---------------------------------------------------------------------------
# Default list cache
# ---------------------------------------------------------------------------


class DefaultLocaleListCache:
    """Lazily rebuilt one-entry list for the current system locale.

    Reading the source, comparing and rebuilding all happen under one
    lock, so callers only ever see a complete list.
    """

    def __init__(self, source: LocaleSource | None = None) -> None:
        self._lock = threading.Lock()
        self._source = source
        self._locale: Locale | None = None
        self._locale_list: LocaleList | None = None

    def get(self) -> LocaleList:
        with self._lock:
            if self._source is None:
                self._source = SystemLocaleSource.from_settings()
            current = self._source.current()
            cached = self._locale_list
            if (
                cached is None
                or current != self._locale
                or cached.size() != 1
                or current != cached.get_primary()
            ):
                cached = LocaleList(current)
                self._locale = cached.get_primary()
                self._locale_list = cached
                logger.debug(
                    "Rebuilt default locale list: %s",
                    cached.to_language_tags(),
                )
            return cached

    def set_source(self, source: LocaleSource) -> None:
        """Switch to *source* and drop the cached list."""
        with self._lock:
            self._source = source
            self._locale = None
            self._locale_list = None


_default_cache = DefaultLocaleListCache()


def get_default() -> LocaleList:
    """Process-wide default list; see ``DefaultLocaleListCache``."""
    return _default_cache.get()


def set_default_locale_source(source: LocaleSource) -> None:
    """Point the process-wide default list at another locale source."""
    _default_cache.set_source(source)
