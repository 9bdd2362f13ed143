"""Catalog configuration.

:class:`CatalogConfig` is an immutable value handed to the catalog when it is
constructed. :class:`CatalogSettings` reads the same options from environment
variables prefixed with ``CLDR_`` and builds a config and a data source.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Literal, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .io import DirectorySource
from .locale_names import locale_name_from_posix

FALLBACK_DEFAULT_LOCALE = "en-001"


@runtime_checkable
class TranslationCatalog(Protocol):
    """A message catalog that knows which locales it has translations for."""

    def known_locale_names(self) -> Iterable[str]: ...

    def default_locale(self) -> str | None: ...


class CatalogConfig(BaseModel):
    """Immutable configuration for a :class:`~cldr_catalog.catalog.LocaleCatalog`.

    Attributes:
        default_locale: Explicit default locale; see :func:`default_locale`.
        locales: ``"all"`` for every CLDR locale, a sequence of locale names
            or wildcard patterns, or None to use only the default locale.
        translation_catalog: Optional collaborator whose locales are added to
            the requested locales.
        strict_validation: When False, locale documents missing a required
            module load with a warning instead of failing.
        max_workers: Thread pool size for cross-locale scans.
        extra_system_types: Number system types accepted in addition to
            default, native, traditional and finance.
        precompile_number_formats: Extra patterns for the decimal format list.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    default_locale: str | None = None
    locales: Literal["all"] | tuple[str, ...] | None = None
    translation_catalog: TranslationCatalog | None = None
    strict_validation: bool = True
    max_workers: int | None = Field(default=None, ge=1)
    extra_system_types: tuple[str, ...] = ()
    precompile_number_formats: tuple[str, ...] = ()

    @property
    def workers(self) -> int:
        return self.max_workers or (os.cpu_count() or 1) * 2


def _configured_default(config: CatalogConfig) -> str | None:
    return config.default_locale


def _translation_catalog_default(config: CatalogConfig) -> str | None:
    if config.translation_catalog is None:
        return None
    return locale_name_from_posix(config.translation_catalog.default_locale())


def _fallback_default(config: CatalogConfig) -> str | None:
    return FALLBACK_DEFAULT_LOCALE


DEFAULT_LOCALE_PROVIDERS: tuple[Callable[[CatalogConfig], str | None], ...] = (
    _configured_default,
    _translation_catalog_default,
    _fallback_default,
)


def default_locale(config: CatalogConfig) -> str:
    """Return the first default locale offered by the providers, in order:

    * the default locale set in the config
    * the translation catalog's default locale
    * ``"en-001"``
    """
    for provider in DEFAULT_LOCALE_PROVIDERS:
        locale = provider(config)
        if locale:
            return locale
    return FALLBACK_DEFAULT_LOCALE


class CatalogSettings(BaseSettings):
    """Catalog settings read from ``CLDR_`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="CLDR_")

    data_dir: Path = Path("./priv/cldr")
    client_data_dir: Path | None = None
    default_locale: str | None = None
    # Comma separated names or patterns, or "all".
    locales: str | None = None
    dev: bool = False
    max_workers: int | None = Field(default=None, ge=1)

    def to_config(self, **overrides: object) -> CatalogConfig:
        names = [name.strip() for name in (self.locales or "").split(",") if name.strip()]
        locales: Literal["all"] | tuple[str, ...] | None = None
        if names == ["all"]:
            locales = "all"
        elif names:
            locales = tuple(names)
        values: dict[str, object] = {
            "default_locale": self.default_locale,
            "locales": locales,
            "strict_validation": not self.dev,
            "max_workers": self.max_workers,
        }
        values.update(overrides)
        return CatalogConfig(**values)

    def data_source(self) -> DirectorySource:
        roots = [self.client_data_dir] if self.client_data_dir else []
        return DirectorySource(*roots, self.data_dir)
