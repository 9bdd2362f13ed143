"""Resolution of number system references and the search for similar systems.

A number system can be referenced in two ways:

* by name, such as ``latn`` or ``arab``, or
* by type, such as ``default``, ``native``, ``traditional`` or ``finance``,
  which each locale maps to a name.

:class:`NumberSystemResolver` dereferences either form to a system name for
a locale. The name returned is not guaranteed to have digits or symbols
defined for that locale.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from .errors import UnknownNumberSystemError, UnknownNumberSystemTypeError
from .models import LocaleRecord, NumberSymbolSet
from .symbols import SymbolTable

if TYPE_CHECKING:
    from .catalog import LocaleCatalog

logger = logging.getLogger(__name__)


class NumberSystemResolver:
    """Resolves number system names and types against a locale record."""

    def __init__(self, symbols: SymbolTable) -> None:
        self.symbols = symbols

    def resolve(self, locale: LocaleRecord, reference: str) -> str:
        """Return the system name that ``reference`` denotes for ``locale``.

        A type declared by the locale maps to its system name. A name that the
        locale uses (as the value of any of its types) is returned as is.

        Raises:
            UnknownNumberSystemError: If the reference is neither.
        """
        system = self.validate_reference(locale, reference)
        systems = locale.number_systems
        if system in systems:
            return systems[system]
        if system in systems.values():
            return system
        raise UnknownNumberSystemError(reference)

    def validate_reference(self, locale: LocaleRecord, reference: str) -> str:
        if isinstance(reference, str) and self.symbols.is_name(reference.lower()):
            return self.symbols.atomize(reference.lower())
        try:
            return self.resolve_type(locale, reference)
        except UnknownNumberSystemTypeError as e:
            raise UnknownNumberSystemError(reference) from e

    def resolve_type(self, locale: LocaleRecord, candidate: str) -> str:
        """Validate a number system type for ``locale``.

        Strings are lower-cased and must either be in the symbol table or be
        a type the locale declares. No new symbols are created for unknown
        input.

        Raises:
            UnknownNumberSystemTypeError: If the type is unknown or the locale
                does not declare it.
        """
        if not isinstance(candidate, str):
            raise UnknownNumberSystemTypeError(candidate)
        lowered = candidate.lower()
        system_type = self.symbols.lookup(lowered)
        if system_type is None and lowered in locale.number_systems:
            return lowered
        if system_type is None or system_type not in locale.number_systems:
            raise UnknownNumberSystemTypeError(candidate)
        return system_type


class NumberSystemSimilarityFinder:
    """Finds locale and number system pairs with identical digits and symbols.

    Transliterating between number systems is expensive; a pair that uses the
    same digits and separators as the reference needs no transliteration.
    Each locale is checked independently on a thread pool.
    """

    def __init__(self, catalog: LocaleCatalog, max_workers: int) -> None:
        self.catalog = catalog
        self.max_workers = max_workers

    def digits_and_symbols(
        self, locale_name: str, system: str
    ) -> tuple[str | None, NumberSymbolSet | None]:
        definition = self.catalog.number_system_for(locale_name, system)
        return definition.digits, self.catalog.number_symbols_for(locale_name, system)

    def matches_in(
        self,
        locale_name: str,
        digits: str | None,
        symbols: NumberSymbolSet | None,
    ) -> list[tuple[str, str]]:
        """Return every system of ``locale_name`` matching digits and symbols."""
        matches: list[tuple[str, str]] = []
        for system in self.catalog.number_system_names_for(locale_name):
            try:
                these_digits, these_symbols = self.digits_and_symbols(locale_name, system)
            except UnknownNumberSystemError:
                continue
            if these_digits == digits and these_symbols == symbols:
                matches.append((locale_name, system))
        return matches

    def find_like(self, locale_name: str, system: str) -> list[tuple[str, str]]:
        """Return ``(locale, system)`` pairs like ``system`` in ``locale_name``.

        The result includes the reference pair itself and is sorted by locale
        then system name.

        Raises:
            UnknownNumberSystemError: If the reference cannot be resolved.
        """
        digits, symbols = self.digits_and_symbols(locale_name, system)
        locale_names = sorted({*self.catalog.known_locale_names(), locale_name})
        logger.debug(
            "Scanning %d locales for systems like %s/%s",
            len(locale_names),
            locale_name,
            system,
        )
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            results = executor.map(
                lambda name: self.matches_in(name, digits, symbols), locale_names
            )
            return sorted(pair for matches in results for pair in matches)
