"""The locale catalog: memoized locale records and supplemental data."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, TypeVar

from . import loaders
from .config import CatalogConfig, default_locale
from .errors import NotFoundError, UnknownNumberSystemError, UnknownTerritoryError
from .io import DataSource, Decoder, RawRecordLoader, decode_json
from .locale_names import (
    ROOT_LOCALE,
    expand_locale_names,
    fallback_chain,
    locale_name_from_posix,
)
from .models import (
    CalendarInfo,
    LanguageTag,
    LocaleRecord,
    NumberSymbolSet,
    NumberSystemDefinition,
    RuleSet,
    TerritoryInfo,
    WeekInfo,
)
from .normalize import SchemaNormalizer, module_key
from .number_systems import NumberSystemResolver, NumberSystemSimilarityFinder
from .rbnf import parse_rbnf
from .symbols import SymbolTable

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Number format entries that hold no decimal patterns.
_NON_DECIMAL_FORMATS = frozenset({"currency_spacing", "currency_long"})


def _flatten(value: Any) -> list[Any]:
    if isinstance(value, list | tuple):
        return [item for element in value for item in _flatten(element)]
    return [value]


def extract_formats(value: Any) -> list[Any]:
    """Take the first pattern of every entry of a short or long format map."""
    if isinstance(value, Mapping):
        return [
            entry[0] if isinstance(entry, list | tuple) and entry else entry
            for entry in value.values()
        ]
    return _flatten(value)


class LocaleCatalog:
    """Owns every normalized locale record and the supplemental documents.

    Records are loaded from ``source`` on first request and memoized per
    locale name. Concurrent first requests for the same locale wait on one
    shared :class:`~concurrent.futures.Future`, so each locale is read and
    normalized at most once. A load that fails is not cached.

    Args:
        source: Where the consolidated CLDR documents are stored.
        config: Catalog configuration; defaults to :class:`CatalogConfig()`.
        decode: Converts document bytes into a tree. Defaults to JSON.
    """

    def __init__(
        self,
        source: DataSource,
        config: CatalogConfig | None = None,
        decode: Decoder = decode_json,
    ) -> None:
        self.config = config or CatalogConfig()
        self.loader = RawRecordLoader(source, decode)
        self._lock = threading.Lock()
        self._records: dict[str, Future[LocaleRecord]] = {}
        self._documents_lock = threading.Lock()
        self._documents: dict[str, Any] = {}
        self.symbols = self._build_symbols()
        self.normalizer = SchemaNormalizer(
            self.symbols, strict=self.config.strict_validation
        )
        self.resolver = NumberSystemResolver(self.symbols)
        self.similarity = NumberSystemSimilarityFinder(self, self.config.workers)

    def __repr__(self) -> str:
        return f"LocaleCatalog({self.loader.source!r})"

    def _build_symbols(self) -> SymbolTable:
        names: Iterable[str] | None = None
        if self.loader.source.exists(loaders.NUMBER_SYSTEMS):
            names = self.number_systems().keys()
        else:
            logger.debug(
                "%s not found, using the built-in number system names",
                loaders.NUMBER_SYSTEMS,
            )
        return SymbolTable.build(names, self.config.extra_system_types)

    def _supplemental(self, load: Callable[[RawRecordLoader], T]) -> T:
        with self._documents_lock:
            if load.__name__ not in self._documents:
                self._documents[load.__name__] = load(self.loader)
            return self._documents[load.__name__]

    # Locale records

    def get(self, locale_name: str) -> LocaleRecord:
        """Return the normalized record for ``locale_name``.

        Raises:
            NotFoundError: If the locale document does not exist.
            DecodeError: If the document cannot be decoded.
            ValidationError: If the document is not a valid locale.
        """
        with self._lock:
            future = self._records.get(locale_name)
            owner = future is None
            if owner:
                future = Future()
                self._records[locale_name] = future

        if not owner:
            logger.debug("Cache hit for locale %s", locale_name)
            return future.result()

        try:
            raw = self.loader.load_locale(locale_name)
            record = self.normalizer.normalize(raw, locale_name)
        except BaseException as e:
            with self._lock:
                self._records.pop(locale_name, None)
            future.set_exception(e)
            raise
        future.set_result(record)
        return record

    def is_loaded(self, locale_name: str) -> bool:
        with self._lock:
            future = self._records.get(locale_name)
        return future is not None and future.done()

    def rbnf_from_xml(self, locale_name: str) -> dict[str, dict[str, RuleSet]]:
        """Read the RBNF rule sets of a locale from ``rbnf/<locale>.xml``."""
        return parse_rbnf(self.loader.load_rbnf(locale_name))

    # Locale names

    def all_locale_names(self) -> list[str]:
        """Return every locale name available in CLDR, sorted."""
        return list(self._supplemental(loaders.load_available_locales))

    def default_locale(self) -> str:
        return default_locale(self.config)

    def configured_locale_names(self, config: CatalogConfig | None = None) -> list[str]:
        """Return the configured locale names with wildcards expanded.

        ``"all"`` selects every CLDR locale and no configured locales selects
        the default locale. ``root`` is always included.
        """
        config = config or self.config
        if config.locales == "all":
            names = self.all_locale_names()
        elif config.locales is None:
            names = expand_locale_names([default_locale(config)], self.all_locale_names())
        else:
            names = expand_locale_names(config.locales, self.all_locale_names())
        return sorted({*names, ROOT_LOCALE})

    def requested_locale_names(self, config: CatalogConfig | None = None) -> list[str]:
        """Return configured, translation catalog and default locale names."""
        config = config or self.config
        names = set(self.configured_locale_names(config))
        if config.translation_catalog is not None:
            names.update(
                locale_name_from_posix(name)
                for name in config.translation_catalog.known_locale_names()
            )
        names.add(default_locale(config))
        return sorted(names)

    def known_locale_names(self, config: CatalogConfig | None = None) -> list[str]:
        """Return the requested locale names that CLDR has data for."""
        available = set(self.all_locale_names())
        return [name for name in self.requested_locale_names(config) if name in available]

    def unknown_locale_names(self, config: CatalogConfig | None = None) -> list[str]:
        """Return the requested locale names that CLDR has no data for."""
        available = set(self.all_locale_names())
        return [
            name for name in self.requested_locale_names(config) if name not in available
        ]

    def known_locale_name(self, locale_name: str) -> str | None:
        return locale_name if locale_name in self.known_locale_names() else None

    def known_rbnf_locale_names(self) -> list[str]:
        """Return the known locales that define at least one RBNF rule group."""
        return [name for name in self.known_locale_names() if self.get(name).rbnf]

    def known_rbnf_locale_name(self, locale_name: str) -> str | None:
        return locale_name if locale_name in self.known_rbnf_locale_names() else None

    # Number systems

    def number_systems(self) -> dict[str, NumberSystemDefinition]:
        """Return the definition of every CLDR number system."""
        return dict(self._supplemental(loaders.load_number_systems))

    def known_number_systems(self) -> list[str]:
        return sorted(self.number_systems())

    def known_number_system_types(self, config: CatalogConfig | None = None) -> list[str]:
        """Return every number system type declared by a known locale.

        Locales are loaded on a thread pool.
        """
        names = self.known_locale_names(config)
        workers = (config or self.config).workers
        with ThreadPoolExecutor(max_workers=workers) as executor:
            types = executor.map(self.number_system_types_for, names)
            return sorted({system_type for found in types for system_type in found})

    def number_systems_for(self, locale_name: str) -> dict[str, str]:
        """Return the map of number system type to system name of a locale."""
        return dict(self.get(locale_name).number_systems)

    def number_system_names_for(self, locale_name: str) -> list[str]:
        return sorted(set(self.get(locale_name).number_systems.values()))

    def number_system_types_for(self, locale_name: str) -> list[str]:
        return sorted(self.get(locale_name).number_systems)

    def system_name_from(self, system: str, locale_name: str) -> str:
        """Resolve a number system name or type to a system name for a locale.

        Raises:
            UnknownNumberSystemError: If ``system`` cannot be resolved.
        """
        return self.resolver.resolve(self.get(locale_name), system)

    def number_system_type(self, system_type: str, locale_name: str) -> str:
        """Validate a number system type for a locale.

        Raises:
            UnknownNumberSystemTypeError: If the type is not known.
        """
        return self.resolver.resolve_type(self.get(locale_name), system_type)

    def number_system_for(self, locale_name: str, system: str) -> NumberSystemDefinition:
        """Return the definition of the system ``system`` denotes for a locale.

        Raises:
            UnknownNumberSystemError: If the system cannot be resolved or has
                no definition.
        """
        name = self.system_name_from(system, locale_name)
        definition = self.number_systems().get(name)
        if definition is None:
            raise UnknownNumberSystemError(system)
        return definition

    def number_symbols_for(
        self, locale_name: str, system: str | None = None
    ) -> NumberSymbolSet | None | dict[str, NumberSymbolSet | None]:
        """Return the number symbols of a locale.

        Without ``system`` all symbol sets are returned keyed by system name.
        With ``system``, which may be a name or a type, only the symbol set
        of that system is returned; it is None when the locale defines none.
        """
        record = self.get(locale_name)
        if system is None:
            return dict(record.number_symbols)
        name = self.resolver.resolve(record, system)
        return record.number_symbols.get(name)

    def find_like(self, locale_name: str, system: str) -> list[tuple[str, str]]:
        """Return the locale and system pairs with the digits and symbols of
        ``system`` in ``locale_name``. See :class:`NumberSystemSimilarityFinder`.
        """
        return self.similarity.find_like(locale_name, system)

    def decimal_formats_for(self, locale_name: str) -> list[str]:
        """Return the sorted, distinct decimal format patterns of a locale."""
        formats: list[Any] = []
        for system_formats in self.get(locale_name).number_formats.values():
            if not isinstance(system_formats, Mapping):
                continue
            for key, value in system_formats.items():
                if module_key(str(key)) in _NON_DECIMAL_FORMATS:
                    continue
                formats.extend(_flatten(value))
        patterns = (
            pattern
            for value in formats
            if not isinstance(value, int)
            for pattern in extract_formats(value)
        )
        return sorted({pattern for pattern in patterns if pattern is not None})

    def decimal_format_list(self, config: CatalogConfig | None = None) -> list[str]:
        """Return the decimal formats of every known locale plus the
        configured precompile formats."""
        config = config or self.config
        formats: set[str] = set(config.precompile_number_formats)
        for locale_name in self.known_locale_names(config):
            formats.update(self.decimal_formats_for(locale_name))
        return sorted(formats)

    # Calendars

    def calendar_info(self) -> dict[str, CalendarInfo]:
        """Return supplemental calendar data with era ends inferred."""
        return dict(self._supplemental(loaders.load_calendar_info))

    def known_calendars(self) -> list[str]:
        return sorted(self.calendar_info())

    def calendars_for_locale(self, locale_name: str) -> list[str]:
        """Return the calendars a locale has date formats for."""
        calendars = self.get(locale_name).dates.get("calendars") or {}
        return sorted(str(calendar) for calendar in calendars)

    # Territories and currencies

    def known_currencies(self) -> list[str]:
        return list(self._supplemental(loaders.load_currencies))

    def territory_containment(self) -> dict[str, list[str]]:
        return dict(self._supplemental(loaders.load_territory_containment))

    def known_territories(self) -> list[str]:
        """Return every territory code named by the territory containment."""
        territories: set[str] = set()
        for container, contained in self.territory_containment().items():
            territories.add(container)
            territories.update(contained)
        return sorted(territories)

    def territory_info(
        self, territory: str | None = None
    ) -> TerritoryInfo | dict[str, TerritoryInfo]:
        """Return information for one territory, or for all territories.

        Raises:
            UnknownTerritoryError: If ``territory`` has no information.
        """
        info = self._supplemental(loaders.load_territory_info)
        if territory is None:
            return dict(info)
        try:
            return info[str(territory).upper()]
        except KeyError as e:
            raise UnknownTerritoryError(territory) from e

    def territory_names(self, locale_name: str) -> dict[str, Any]:
        """Merge the territory display names along a locale's fallback chain.

        Names from more specific locales take precedence.
        """
        merged: dict[str, Any] = {}
        for fallback in fallback_chain(locale_name):
            try:
                territories = self.get(fallback).territories
            except NotFoundError:
                continue
            for code, name in territories.items():
                merged.setdefault(code, name)
        return merged

    # Other supplemental data

    def aliases(self) -> dict[str, Any]:
        return dict(self._supplemental(loaders.load_aliases))

    def likely_subtags(self) -> dict[str, LanguageTag]:
        return dict(self._supplemental(loaders.load_likely_subtags))

    def week_info(self) -> WeekInfo:
        return self._supplemental(loaders.load_week_info)

    def day_period_info(self) -> dict[str, Any]:
        return self._supplemental(loaders.load_day_periods)

    def version(self) -> Any:
        return self._supplemental(loaders.load_version)
