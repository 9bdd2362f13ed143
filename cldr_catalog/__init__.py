"""Normalized, queryable CLDR locale data."""

from .catalog import LocaleCatalog
from .config import CatalogConfig, CatalogSettings, TranslationCatalog
from .errors import (
    CldrError,
    ConfigurationError,
    DecodeError,
    NotFoundError,
    UnknownNumberSystemError,
    UnknownNumberSystemTypeError,
    UnknownTerritoryError,
    ValidationError,
)
from .inference import infer_era_ends, infer_rule_ranges
from .io import ArchiveSource, DataSource, DirectorySource, RawRecordLoader
from .locale_names import expand_locale_names, fallback_chain
from .models import LanguageTag, LocaleRecord
from .normalize import SchemaNormalizer

__all__ = [
    "ArchiveSource",
    "CatalogConfig",
    "CatalogSettings",
    "CldrError",
    "ConfigurationError",
    "DataSource",
    "DecodeError",
    "DirectorySource",
    "LanguageTag",
    "LocaleCatalog",
    "LocaleRecord",
    "NotFoundError",
    "RawRecordLoader",
    "SchemaNormalizer",
    "TranslationCatalog",
    "UnknownNumberSystemError",
    "UnknownNumberSystemTypeError",
    "UnknownTerritoryError",
    "ValidationError",
    "expand_locale_names",
    "fallback_chain",
    "infer_era_ends",
    "infer_rule_ranges",
]
