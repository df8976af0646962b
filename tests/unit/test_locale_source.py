"""Test SystemLocaleSource and FixedLocaleSource."""

import logging

import pytest
from babel import Locale

from localelist.core.config import Settings
from localelist.core.locale_source import FixedLocaleSource, SystemLocaleSource


class TestSystemLocaleSource:
    def test_reads_language_variable(self, clean_locale_env):
        clean_locale_env.setenv("LANGUAGE", "de_DE")
        source = SystemLocaleSource(fallback_tag="en-US")
        assert source.current() == Locale("de", territory="DE")

    def test_strips_encoding(self, clean_locale_env):
        clean_locale_env.setenv("LANG", "fr_FR.UTF-8")
        source = SystemLocaleSource(fallback_tag="en-US")
        assert source.current() == Locale("fr", territory="FR")

    def test_fallback_when_unset(self, clean_locale_env):
        source = SystemLocaleSource(fallback_tag="ja-JP")
        assert source.current() == Locale("ja", territory="JP")

    def test_fallback_on_unknown_locale(self, clean_locale_env, caplog):
        clean_locale_env.setenv("LANG", "xx_XX")
        source = SystemLocaleSource(fallback_tag="en-US")
        with caplog.at_level(logging.WARNING, logger="localelist.core.locale_source"):
            assert source.current() == Locale("en", territory="US")
        assert "xx_XX" in caplog.text

    def test_category_checked(self, clean_locale_env):
        clean_locale_env.setenv("LC_MESSAGES", "es_ES")
        source = SystemLocaleSource(fallback_tag="en-US", category="LC_MESSAGES")
        assert source.current() == Locale("es", territory="ES")

    def test_fallback_from_settings(self, clean_locale_env):
        clean_locale_env.setenv("LOCALELIST_FALLBACK_LOCALE", "pt-BR")
        assert SystemLocaleSource.from_settings().current() == Locale("pt", territory="BR")

    def test_c_locale_counts_as_unset(self, clean_locale_env):
        clean_locale_env.setenv("LC_CTYPE", "C.UTF-8")
        source = SystemLocaleSource(fallback_tag="de-DE")
        assert source.current() == Locale("de", territory="DE")

    def test_posix_locale_counts_as_unset(self, clean_locale_env):
        clean_locale_env.setenv("LANG", "POSIX")
        source = SystemLocaleSource(fallback_tag="ja-JP")
        assert source.current() == Locale("ja", territory="JP")

    def test_real_locale_wins_over_c_locale(self, clean_locale_env):
        clean_locale_env.setenv("LC_CTYPE", "C.UTF-8")
        clean_locale_env.setenv("LANG", "fr_FR.UTF-8")
        clean_locale_env.setenv("LANGUAGE", "fr_FR")
        source = SystemLocaleSource(fallback_tag="de-DE")
        assert source.current() == Locale("fr", territory="FR")

    def test_from_settings_applies_both_fields(self, clean_locale_env):
        clean_locale_env.setenv("LC_MESSAGES", "es_ES")
        settings = Settings(fallback_locale="ja-JP", locale_category="LC_MESSAGES")
        assert SystemLocaleSource.from_settings(settings).current() == Locale(
            "es", territory="ES"
        )
        clean_locale_env.delenv("LC_MESSAGES")
        assert SystemLocaleSource.from_settings(settings).current() == Locale(
            "ja", territory="JP"
        )

    def test_follows_environment_changes(self, clean_locale_env):
        source = SystemLocaleSource(fallback_tag="en-US")
        clean_locale_env.setenv("LANG", "de_DE")
        assert source.current() == Locale("de", territory="DE")
        clean_locale_env.setenv("LANG", "fr_FR")
        assert source.current() == Locale("fr", territory="FR")


class TestFixedLocaleSource:
    def test_returns_locale(self, en_us):
        assert FixedLocaleSource(en_us).current() == en_us

    def test_set_locale(self, en_us, fr_fr):
        source = FixedLocaleSource(en_us)
        source.set_locale(fr_fr)
        assert source.current() == fr_fr
