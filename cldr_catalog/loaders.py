"""Supplemental CLDR document loaders with Pydantic validation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

import pydantic

from .errors import ValidationError
from .inference import infer_era_ends
from .io import RawRecordLoader
from .models import (
    AvailableLocalesData,
    CalendarData,
    CalendarInfo,
    CurrencyPeriod,
    LanguageTag,
    NumberSystemDefinition,
    RawCurrencyPeriod,
    TerritoryInfo,
    WeekInfo,
)
from .normalize import module_key

T = TypeVar("T")

AVAILABLE_LOCALES = "available_locales.json"
TERRITORY_CONTAINMENT = "territory_containment.json"
TERRITORY_INFO = "territory_info.json"
ALIASES = "aliases.json"
LIKELY_SUBTAGS = "likely_subtags.json"
WEEK_DATA = "week_data.json"
DAY_PERIODS = "day_periods.json"
CALENDAR_DATA = "calendar_data.json"
CURRENCIES = "currencies.json"
NUMBER_SYSTEMS = "number_systems.json"
VERSION = "version.json"

WEEK_KEYS = ("first_day", "min_days", "weekend_start", "weekend_end")


def _validate(annotation: type[T] | Any, tree: Any, path: str) -> T:
    try:
        return pydantic.TypeAdapter(annotation).validate_python(tree)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Document {path!r} is invalid: {e}") from e


def _snake_keys(mapping: Mapping[str, Any]) -> dict[str, Any]:
    return {module_key(key.lstrip("_")): value for key, value in mapping.items()}


def _integerize(value: Any) -> Any:
    if isinstance(value, str) and value.lstrip("-").isdigit():
        return int(value)
    return value


def load_available_locales(loader: RawRecordLoader) -> list[str]:
    """Load and parse available_locales.json."""
    tree = loader.load_document(AVAILABLE_LOCALES)
    try:
        data = AvailableLocalesData.from_tree(tree)
    except (pydantic.ValidationError, KeyError, TypeError) as e:
        raise ValidationError(f"Document {AVAILABLE_LOCALES!r} is invalid: {e}") from e
    return sorted(data.names)


def load_likely_subtags(loader: RawRecordLoader) -> dict[str, LanguageTag]:
    """Load likely_subtags.json.

    Values may be tag strings (``"en-Latn-US"``) or subtag mappings.
    """
    tree = loader.load_document(LIKELY_SUBTAGS)
    if isinstance(tree, Mapping) and "supplemental" in tree:
        tree = tree["supplemental"]["likelySubtags"]
    return {
        tag: LanguageTag.parse(value)
        if isinstance(value, str)
        else _validate(LanguageTag, value, LIKELY_SUBTAGS)
        for tag, value in tree.items()
    }


def load_territory_containment(loader: RawRecordLoader) -> dict[str, list[str]]:
    """Load territory_containment.json."""
    tree = loader.load_document(TERRITORY_CONTAINMENT)
    return _validate(dict[str, list[str]], tree, TERRITORY_CONTAINMENT)


def normalize_currency_history(entries: list[Any]) -> list[CurrencyPeriod]:
    history: list[CurrencyPeriod] = []
    for entry in entries:
        for code, fields in entry.items():
            raw = RawCurrencyPeriod.model_validate(fields or {})
            history.append(CurrencyPeriod(code=code, **raw.model_dump()))
    return history


def normalize_territory(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Prepare one territory_info.json entry for validation."""
    data = _snake_keys(fields)
    data["currency"] = normalize_currency_history(data.get("currency") or [])
    data["language_population"] = {
        language: _snake_keys(stats)
        for language, stats in (data.get("language_population") or {}).items()
    }
    return data


def load_territory_info(loader: RawRecordLoader) -> dict[str, TerritoryInfo]:
    """Load territory_info.json keyed by upper-cased territory code.

    Currency history keeps source order, ``from``/``to`` dates are parsed
    from ISO-8601 and ``tender`` is True unless given as ``"false"``.
    """
    tree = loader.load_document(TERRITORY_INFO)
    try:
        normalized = {
            str(territory).upper(): normalize_territory(fields)
            for territory, fields in tree.items()
        }
    except (pydantic.ValidationError, AttributeError, TypeError) as e:
        raise ValidationError(f"Document {TERRITORY_INFO!r} is invalid: {e}") from e
    return _validate(dict[str, TerritoryInfo], normalized, TERRITORY_INFO)


def load_aliases(loader: RawRecordLoader) -> dict[str, Any]:
    """Load aliases.json; language aliases become :class:`LanguageTag`."""
    tree = dict(loader.load_document(ALIASES))
    languages = tree.get("language") or {}
    tree["language"] = {
        alias: LanguageTag.parse(value)
        if isinstance(value, str)
        else _validate(LanguageTag, value, ALIASES)
        for alias, value in languages.items()
    }
    return tree


def load_week_info(loader: RawRecordLoader) -> WeekInfo:
    """Load week_data.json with territory codes upper-cased."""
    tree = _snake_keys(loader.load_document(WEEK_DATA))
    data = {
        key: {str(t).upper(): _integerize(v) for t, v in (tree.get(key) or {}).items()}
        for key in WEEK_KEYS
    }
    return _validate(WeekInfo, data, WEEK_DATA)


def load_day_periods(loader: RawRecordLoader) -> dict[str, Any]:
    """Load day_periods.json unchanged."""
    return loader.load_document(DAY_PERIODS)


def load_calendar_info(loader: RawRecordLoader) -> dict[str, CalendarInfo]:
    """Load calendar_data.json and infer the end of every era."""
    tree = loader.load_document(CALENDAR_DATA)
    raw = _validate(dict[str, CalendarData], tree, CALENDAR_DATA)
    return {
        module_key(calendar): CalendarInfo(
            calendar_system=data.calendar_system,
            eras=dict(infer_era_ends(data.eras.items())),
        )
        for calendar, data in raw.items()
    }


def load_currencies(loader: RawRecordLoader) -> list[str]:
    """Load currencies.json, a list of ISO 4217 codes."""
    return _validate(list[str], loader.load_document(CURRENCIES), CURRENCIES)


def load_number_systems(loader: RawRecordLoader) -> dict[str, NumberSystemDefinition]:
    """Load number_systems.json keyed by system name."""
    tree = loader.load_document(NUMBER_SYSTEMS)
    return _validate(dict[str, NumberSystemDefinition], tree, NUMBER_SYSTEMS)


def load_version(loader: RawRecordLoader) -> Any:
    """Load version.json."""
    return loader.load_document(VERSION)
