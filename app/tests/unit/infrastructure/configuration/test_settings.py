"""Unit tests for infrastructure.configuration settings.

Tests cover:
- LocalizationSettings defaults and environment overrides
- Settings aggregation and production detection
"""

import pytest
from pydantic import ValidationError

from infrastructure.configuration import LocalizationSettings, Settings
from infrastructure.configuration.base import InfrastructureSettings

pytestmark = pytest.mark.unit


class TestLocalizationSettings:
    """Test suite for LocalizationSettings configuration."""

    def test_is_infrastructure_settings(self):
        """LocalizationSettings shares the infrastructure base config."""
        assert issubclass(LocalizationSettings, InfrastructureSettings)

    def test_defaults(self, monkeypatch):
        """Test LocalizationSettings uses correct default values."""
        for name in LocalizationSettings.model_fields:
            monkeypatch.delenv(name, raising=False)

        config = LocalizationSettings()

        assert config.LABELS_DEBUG is False
        assert config.LABELS_BASE_DIR == "."
        assert config.LABELS_EXTENSIONS_DIR == "extensions"
        assert config.LABELS_FILE_CACHE is True
        assert config.LABELS_CACHE_MAX_ENTRIES == 0
        assert config.LABELS_EXTRA_LOCALES == {}
        assert config.LABELS_LOCALE_DEPENDENCIES == {}

    def test_environment_overrides(self, monkeypatch):
        """Test LocalizationSettings reads the environment."""
        monkeypatch.setenv("LABELS_DEBUG", "true")
        monkeypatch.setenv("LABELS_BASE_DIR", "/srv/labels")
        monkeypatch.setenv("LABELS_EXTENSIONS_DIR", "ext")
        monkeypatch.setenv("LABELS_FILE_CACHE", "false")
        monkeypatch.setenv("LABELS_CACHE_MAX_ENTRIES", "500")

        config = LocalizationSettings()

        assert config.LABELS_DEBUG is True
        assert config.LABELS_BASE_DIR == "/srv/labels"
        assert config.LABELS_EXTENSIONS_DIR == "ext"
        assert config.LABELS_FILE_CACHE is False
        assert config.LABELS_CACHE_MAX_ENTRIES == 500

    def test_json_mappings_from_environment(self, monkeypatch):
        """Extra locales and dependencies are read as JSON."""
        monkeypatch.setenv("LABELS_EXTRA_LOCALES", '{"de_LU": "German (Luxembourg)"}')
        monkeypatch.setenv("LABELS_LOCALE_DEPENDENCIES", '{"de_LU": ["de"]}')

        config = LocalizationSettings()

        assert config.LABELS_EXTRA_LOCALES == {"de_LU": "German (Luxembourg)"}
        assert config.LABELS_LOCALE_DEPENDENCIES == {"de_LU": ["de"]}

    def test_null_mappings_become_empty(self):
        """None for a mapping setting is treated as empty."""
        config = LocalizationSettings(
            LABELS_EXTRA_LOCALES=None, LABELS_LOCALE_DEPENDENCIES=None
        )

        assert config.LABELS_EXTRA_LOCALES == {}
        assert config.LABELS_LOCALE_DEPENDENCIES == {}

    def test_negative_cache_capacity_rejected(self):
        """LABELS_CACHE_MAX_ENTRIES must not be negative."""
        with pytest.raises(ValidationError):
            LocalizationSettings(LABELS_CACHE_MAX_ENTRIES=-1)


class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_settings_loads_localization_section(self):
        """Settings instantiates the localization section."""
        settings = Settings()

        assert isinstance(settings.localization, LocalizationSettings)

    def test_settings_accepts_section_override(self):
        """A section passed in is used instead of a new one."""
        localization = LocalizationSettings(LABELS_DEBUG=True)

        settings = Settings(localization=localization)

        assert settings.localization is localization

    def test_is_production_without_prefix(self, monkeypatch):
        """An empty PREFIX means production."""
        monkeypatch.setenv("PREFIX", "")

        assert Settings().is_production is True

    def test_is_not_production_with_prefix(self, monkeypatch):
        """A PREFIX marks a non-production deployment."""
        monkeypatch.setenv("PREFIX", "dev-")

        assert Settings().is_production is False

    def test_log_level_from_environment(self, monkeypatch):
        """LOG_LEVEL is read from the environment."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        assert Settings().LOG_LEVEL == "DEBUG"
