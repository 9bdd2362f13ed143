"""Tests for CatalogConfig, the default locale chain and CatalogSettings."""

from __future__ import annotations

from pathlib import Path

import pydantic
import pytest

from cldr_catalog.config import (
    FALLBACK_DEFAULT_LOCALE,
    CatalogConfig,
    CatalogSettings,
    TranslationCatalog,
    default_locale,
)
from cldr_catalog.io import DirectorySource


class Translations:
    def __init__(self, default: str | None) -> None:
        self.default = default

    def known_locale_names(self) -> list[str]:
        return []

    def default_locale(self) -> str | None:
        return self.default


class TestDefaultLocale:
    """The default locale comes from the first provider that offers one."""

    def test_explicit(self) -> None:
        config = CatalogConfig(default_locale="de", translation_catalog=Translations("fr"))
        assert default_locale(config) == "de"

    def test_translation_catalog(self) -> None:
        config = CatalogConfig(translation_catalog=Translations("pt_BR"))
        assert isinstance(config.translation_catalog, TranslationCatalog)
        assert default_locale(config) == "pt-BR"

    def test_fallback(self) -> None:
        config = CatalogConfig(translation_catalog=Translations(None))
        assert default_locale(config) == FALLBACK_DEFAULT_LOCALE == "en-001"


class TestCatalogConfig:
    def test_frozen(self) -> None:
        config = CatalogConfig()
        with pytest.raises(pydantic.ValidationError):
            config.default_locale = "fr"  # type: ignore[misc]

    def test_locales_list_becomes_tuple(self) -> None:
        assert CatalogConfig(locales=["en", "fr"]).locales == ("en", "fr")

    def test_workers(self) -> None:
        assert CatalogConfig(max_workers=3).workers == 3
        assert CatalogConfig().workers >= 2

    def test_invalid_workers(self) -> None:
        with pytest.raises(ValueError):
            CatalogConfig(max_workers=0)


class TestCatalogSettings:
    """Settings read from CLDR_ environment variables."""

    def test_from_environment(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("CLDR_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("CLDR_LOCALES", "en, fr-*")
        monkeypatch.setenv("CLDR_DEFAULT_LOCALE", "fr")
        monkeypatch.setenv("CLDR_DEV", "true")
        monkeypatch.setenv("CLDR_MAX_WORKERS", "2")
        settings = CatalogSettings()
        config = settings.to_config()
        assert config.locales == ("en", "fr-*")
        assert config.default_locale == "fr"
        assert config.strict_validation is False
        assert config.max_workers == 2
        assert settings.data_dir == tmp_path

    def test_all_locales(self) -> None:
        assert CatalogSettings(locales="all").to_config().locales == "all"

    def test_no_locales(self) -> None:
        assert CatalogSettings(locales=None).to_config().locales is None

    def test_overrides(self) -> None:
        config = CatalogSettings().to_config(precompile_number_formats=("0.0",))
        assert config.precompile_number_formats == ("0.0",)

    def test_data_source_search_order(self, tmp_path: Path) -> None:
        settings = CatalogSettings(data_dir=tmp_path / "data", client_data_dir=tmp_path / "client")
        source = settings.data_source()
        assert isinstance(source, DirectorySource)
        assert source.roots == (tmp_path / "client", tmp_path / "data")
