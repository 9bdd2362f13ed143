"""Restructure raw locale documents into :class:`LocaleRecord` instances."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

import pydantic

from .errors import ValidationError
from .inference import infer_rule_ranges
from .models import REQUIRED_MODULES, LocaleRecord, NumberSymbolSet, Rule, RuleSet
from .rbnf import rule_group_name, rule_set_name
from .symbols import SymbolTable

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_INTEGER_KEY = re.compile(r"-?[0-9]+")
_THRESHOLD_KEYS = ("threshold", "base_value", "value", "rule")


def module_key(key: str) -> str:
    """Convert a key such as ``numberFormats`` to ``number_formats``."""
    return _CAMEL_BOUNDARY.sub("_", key).replace("-", "_").lower()


def integerize_keys(tree: Any) -> Any:
    """Recursively convert integer-like string keys into ints."""
    if isinstance(tree, Mapping):
        return {
            (int(k) if isinstance(k, str) and _INTEGER_KEY.fullmatch(k) else k): (
                integerize_keys(v)
            )
            for k, v in tree.items()
        }
    if isinstance(tree, list):
        return [integerize_keys(item) for item in tree]
    return tree


def group_units(units: Mapping[str, Any]) -> dict[str, dict[str, Any]]:
    """Group ``"<group>_<key>"`` unit entries into ``{group: {key: unit}}``.

    Entries without a key after the group name are dropped.
    """
    grouped: dict[str, dict[str, Any]] = {}
    for name, value in units.items():
        group, _, key = name.partition("_")
        if not key:
            continue
        grouped.setdefault(group, {})[key] = value
    return grouped


def structure_units(units: Mapping[str, Any]) -> dict[str, dict[str, dict[str, Any]]]:
    return {
        style: group_units(entries)
        for style, entries in units.items()
        if isinstance(entries, Mapping)
    }


def build_rule(raw: Any) -> Rule:
    """Build a rule from a mapping or a ``[threshold, definition]`` pair.

    Any range carried by the source is ignored; ranges are always inferred.
    """
    if isinstance(raw, Mapping):
        threshold = next(
            (str(raw[key]) for key in _THRESHOLD_KEYS if raw.get(key) is not None), ""
        )
        radix = raw.get("radix")
        definition = raw.get("definition", "")
    else:
        threshold, definition = str(raw[0]), raw[1]
        radix = None
    base, slash, divisor = threshold.partition("/")
    if slash and base.isdigit() and divisor.isdigit():
        threshold, radix = base, divisor
    return Rule(threshold=threshold, radix=radix, definition=definition)


def build_rule_set(name: str, raw: Any) -> RuleSet:
    access = "public"
    if name.startswith("%%"):
        name, access = name[2:], "private"
    elif name.startswith("%"):
        name = name[1:]
    if isinstance(raw, Mapping):
        access = raw.get("access") or access
        raw_rules = raw.get("rules") or []
    else:
        raw_rules = raw
    rules = infer_rule_ranges([build_rule(rule) for rule in raw_rules])
    normalized = rule_set_name(name)
    return RuleSet(name=normalized, access=access, rules=rules)


def structure_rbnf(rbnf: Mapping[str, Any]) -> dict[str, dict[str, RuleSet]]:
    structured: dict[str, dict[str, RuleSet]] = {}
    for group, sets in rbnf.items():
        rule_sets = (build_rule_set(name, raw) for name, raw in sets.items())
        structured[rule_group_name(group)] = {rs.name: rs for rs in rule_sets}
    return structured


class SchemaNormalizer:
    """Converts raw locale trees into normalized locale records.

    Args:
        symbols: Symbol table used to atomize number system names.
        strict: When False, a missing required module is logged as a warning
            and the record gets an empty value instead of raising.
    """

    def __init__(self, symbols: SymbolTable | None = None, *, strict: bool = True) -> None:
        self.symbols = symbols or SymbolTable()
        self.strict = strict

    def normalize(self, raw: Any, locale: str) -> LocaleRecord:
        """Normalize the raw tree of ``locale``.

        Raises:
            ValidationError: If a required module is missing while strict, or
                if a module does not have the expected shape.
        """
        if not isinstance(raw, Mapping):
            raise ValidationError(
                f"Locale file {locale!r} is invalid - expected a mapping, "
                f"got {type(raw).__name__}.",
                locale=locale,
            )
        modules, extras = self.split_modules(raw)
        self.assert_valid_keys(modules, locale)
        try:
            return LocaleRecord(
                name=locale,
                number_formats=modules.get("number_formats") or {},
                list_formats=modules.get("list_formats") or {},
                currencies=modules.get("currencies") or {},
                number_systems=self.atomize_number_systems(
                    modules.get("number_systems") or {}
                ),
                number_symbols=self.structure_number_symbols(
                    modules.get("number_symbols") or {}
                ),
                minimum_grouping_digits=modules.get("minimum_grouping_digits", 1),
                rbnf=structure_rbnf(modules.get("rbnf") or {}),
                units=structure_units(modules.get("units") or {}),
                date_fields=integerize_keys(modules.get("date_fields") or {}),
                dates=integerize_keys(modules.get("dates") or {}),
                territories=modules.get("territories") or {},
                languages=self.atomize_languages(modules.get("languages") or {}),
                extras=extras,
            )
        except (pydantic.ValidationError, AttributeError, IndexError, TypeError) as e:
            raise ValidationError(
                f"Locale file {locale!r} is invalid - {e}", locale=locale
            ) from e

    def split_modules(self, raw: Mapping[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
        """Separate required modules (canonical keys) from unmodeled ones."""
        modules: dict[str, Any] = {}
        extras: dict[str, Any] = {}
        for key, value in raw.items():
            canonical = module_key(key)
            if canonical in REQUIRED_MODULES:
                modules[canonical] = value
            else:
                extras[key] = value
        return modules, extras

    def assert_valid_keys(self, modules: Mapping[str, Any], locale: str) -> None:
        for module in REQUIRED_MODULES:
            if module in modules:
                continue
            message = (
                f"Locale file {locale!r} is invalid - map key {module!r} was not found."
            )
            if self.strict:
                raise ValidationError(message, locale=locale, module=module)
            logger.warning(message)

    def atomize_number_systems(self, systems: Mapping[str, Any]) -> dict[str, str]:
        atomized = {
            self.symbols.atomize(system_type): self.symbols.atomize(name)
            for system_type, name in systems.items()
        }
        return {k: v for k, v in atomized.items() if k is not None and v is not None}

    def structure_number_symbols(
        self, symbols: Mapping[str, Any]
    ) -> dict[str, NumberSymbolSet | None]:
        return {
            self.symbols.atomize(system): (
                NumberSymbolSet.model_validate(glyphs) if glyphs is not None else None
            )
            for system, glyphs in symbols.items()
        }

    def atomize_languages(self, languages: Mapping[str, Any]) -> dict[str, Any]:
        return {
            tag: (
                {module_key(k): v for k, v in attributes.items()}
                if isinstance(attributes, Mapping)
                else attributes
            )
            for tag, attributes in languages.items()
        }
