"""Bounded symbol table for number system names and types.

Number system names and types are plain strings, but the set of strings
accepted as symbols is fixed when the table is built.
Unknown strings are passed through or rejected and never added, so the table
cannot grow while a process is running.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Any

STANDARD_SYSTEM_TYPES: tuple[str, ...] = ("default", "native", "traditional", "finance")

# Number system names defined by CLDR; used when no number_systems.json
# document is available to build the table from.
KNOWN_NUMBER_SYSTEMS: tuple[str, ...] = (
    "adlm", "ahom", "arab", "arabext", "armn", "armnlow", "bali", "beng",
    "bhks", "brah", "cakm", "cham", "cyrl", "deva", "ethi", "fullwide",
    "geor", "gong", "gonm", "grek", "greklow", "gujr", "guru", "hanidays",
    "hanidec", "hans", "hansfin", "hant", "hantfin", "hebr", "hmng", "java",
    "jpan", "jpanfin", "kali", "khmr", "knda", "lana", "lanatham", "laoo",
    "latn", "lepc", "limb", "mathbold", "mathdbl", "mathmono", "mathsanb",
    "mathsans", "mlym", "modi", "mong", "mroo", "mtei", "mymr", "mymrshan",
    "mymrtlng", "newa", "nkoo", "olck", "orya", "osma", "rohg", "roman",
    "romanlow", "saur", "shrd", "sind", "sinh", "sora", "sund", "takr",
    "talu", "taml", "tamldec", "telu", "thai", "tibt", "tirh", "vaii", "wara",
)  # fmt: skip

_NULL_VALUES = (None, "null")


class SymbolTable:
    """Fixed set of known number system names and number system types."""

    __slots__ = ("_names", "_types")

    def __init__(
        self,
        names: Iterable[str] = KNOWN_NUMBER_SYSTEMS,
        types: Iterable[str] = STANDARD_SYSTEM_TYPES,
    ) -> None:
        self._names: dict[str, str] = {sys.intern(n): sys.intern(n) for n in names}
        self._types: dict[str, str] = {sys.intern(t): sys.intern(t) for t in types}

    @classmethod
    def build(
        cls, names: Iterable[str] | None = None, extra_types: Iterable[str] = ()
    ) -> SymbolTable:
        """Build a table from system names plus the standard and extra types."""
        return cls(
            names if names is not None else KNOWN_NUMBER_SYSTEMS,
            (*STANDARD_SYSTEM_TYPES, *(t.lower() for t in extra_types)),
        )

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._names)

    @property
    def types(self) -> frozenset[str]:
        return frozenset(self._types)

    def is_name(self, value: object) -> bool:
        return isinstance(value, str) and value in self._names

    def is_type(self, value: object) -> bool:
        return isinstance(value, str) and value in self._types

    def lookup(self, value: str) -> str | None:
        """Return the table's instance of ``value`` or None if it is unknown."""
        return self._names.get(value) or self._types.get(value)

    def atomize(self, value: Any) -> Any:
        """Convert a source value into a symbol.

        Non-string values are returned unchanged and null-equivalents become
        None. Strings found in the table are returned as the table's own
        instance; unknown strings are returned as given without being added.
        """
        if value in _NULL_VALUES:
            return None
        if not isinstance(value, str):
            return value
        return self.lookup(value) or value
