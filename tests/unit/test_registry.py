"""Tests for the locale registry."""

import pytest

from kahu_studio.i18n import DEFAULT_REGISTRY, is_valid_locale
from kahu_studio.i18n.registry import LocaleRegistry


class TestConstruction:
    def test_default_registry(self):
        assert DEFAULT_REGISTRY.locales == ("fr", "en")
        assert DEFAULT_REGISTRY.default_locale == "fr"

    def test_default_must_be_member(self):
        with pytest.raises(ValueError, match="not one of"):
            LocaleRegistry(locales=("fr", "en"), default_locale="de")

    def test_empty_rejected(self):
        with pytest.raises(ValueError, match="at least one"):
            LocaleRegistry(locales=(), default_locale="fr")

    def test_duplicates_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            LocaleRegistry(locales=("fr", "fr"), default_locale="fr")

    def test_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_REGISTRY.default_locale = "en"  # type: ignore[misc]


class TestIsValidLocale:
    @pytest.mark.parametrize("code", ["fr", "en"])
    def test_valid(self, code):
        assert DEFAULT_REGISTRY.is_valid_locale(code) is True
        assert is_valid_locale(code) is True

    @pytest.mark.parametrize("code", ["FR", "En", "de", "", "fr-FR", " fr", None, 42])
    def test_invalid(self, code):
        assert DEFAULT_REGISTRY.is_valid_locale(code) is False

    def test_alternate_registry(self):
        registry = LocaleRegistry(locales=("en", "de"), default_locale="en")
        assert registry.is_valid_locale("de")
        assert not registry.is_valid_locale("fr")


class TestPathLocale:
    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/fr", "fr"),
            ("/en/objet", "en"),
            ("/fr/", "fr"),
            ("/frog", None),
            ("/", None),
            ("/objet/fr", None),
        ],
    )
    def test_path_locale(self, path, expected):
        assert DEFAULT_REGISTRY.path_locale(path) == expected


class TestSwitchLocalePath:
    def test_replaces_existing_locale(self):
        assert DEFAULT_REGISTRY.switch_locale_path("/fr/objet/capsules", "en") == "/en/objet/capsules"

    def test_inserts_missing_locale(self):
        assert DEFAULT_REGISTRY.switch_locale_path("/objet", "en") == "/en/objet"

    def test_root(self):
        assert DEFAULT_REGISTRY.switch_locale_path("/", "en") == "/en"
        assert DEFAULT_REGISTRY.switch_locale_path("/fr", "en") == "/en"
