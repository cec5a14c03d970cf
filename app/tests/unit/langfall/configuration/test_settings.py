"""Unit tests for langfall.configuration module.

Tests cover:
- I18nSettings defaults, environment overrides and validation
- Settings aggregation and production detection
- get_settings caching
"""

import pytest
from pydantic import ValidationError

from langfall.configuration import I18nSettings, Settings, get_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove settings variables that could leak in from the environment."""
    for name in (
        "PREFIX",
        "LOG_LEVEL",
        "I18N_TRANSLATIONS_DIR",
        "I18N_TRANSLATIONS_PATTERN",
        "I18N_FALLBACK_LANGUAGE",
        "I18N_SORT_BY_QUALITY",
        "I18N_USE_CACHE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.mark.unit
class TestI18nSettings:
    """Test suite for I18nSettings configuration."""

    def test_defaults(self):
        """I18nSettings uses correct default values."""
        i18n = I18nSettings()

        assert i18n.translations_dir == "locales"
        assert i18n.translations_pattern == "*.yml"
        assert i18n.fallback_language == "en"
        assert i18n.sort_by_quality is False
        assert i18n.use_cache is True

    def test_custom_values(self, monkeypatch):
        """I18nSettings reads environment variables."""
        monkeypatch.setenv("I18N_TRANSLATIONS_DIR", "/srv/l10n")
        monkeypatch.setenv("I18N_TRANSLATIONS_PATTERN", "**/*.yml")
        monkeypatch.setenv("I18N_FALLBACK_LANGUAGE", "DE")
        monkeypatch.setenv("I18N_SORT_BY_QUALITY", "true")
        monkeypatch.setenv("I18N_USE_CACHE", "false")

        i18n = I18nSettings()

        assert i18n.translations_dir == "/srv/l10n"
        assert i18n.translations_pattern == "**/*.yml"
        assert i18n.fallback_language == "de"
        assert i18n.sort_by_quality is True
        assert i18n.use_cache is False

    def test_blank_fallback_language_rejected(self, monkeypatch):
        """I18nSettings rejects a blank fallback language."""
        monkeypatch.setenv("I18N_FALLBACK_LANGUAGE", "  ")

        with pytest.raises(ValidationError):
            I18nSettings()


@pytest.mark.unit
class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_subsettings_instantiated(self):
        """Settings creates the i18n section automatically."""
        settings = Settings()
        assert isinstance(settings.i18n, I18nSettings)
        assert settings.LOG_LEVEL == "INFO"

    def test_subsettings_override(self):
        """Settings accepts a prebuilt i18n section."""
        i18n = I18nSettings(I18N_FALLBACK_LANGUAGE="fr")
        assert Settings(i18n=i18n).i18n.fallback_language == "fr"

    def test_is_production_without_prefix(self):
        """An empty PREFIX means production."""
        assert Settings().is_production is True

    def test_is_not_production_with_prefix(self, monkeypatch):
        """A PREFIX marks a non-production environment."""
        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False

    def test_get_settings_is_cached(self):
        """get_settings returns the same instance until the cache is cleared."""
        first = get_settings()
        assert get_settings() is first

        get_settings.cache_clear()
        assert get_settings() is not first
