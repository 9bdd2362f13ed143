"""Pydantic models for normalized CLDR locale and supplemental data."""

from __future__ import annotations

from datetime import date
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

REQUIRED_MODULES: tuple[str, ...] = (
    "number_formats",
    "list_formats",
    "currencies",
    "number_systems",
    "number_symbols",
    "minimum_grouping_digits",
    "rbnf",
    "units",
    "date_fields",
    "dates",
    "territories",
    "languages",
)


class LanguageTag(BaseModel, frozen=True):
    """BCP-47 language tag split into its subtags."""

    language: str
    script: str | None = None
    region: str | None = Field(
        default=None, validation_alias=AliasChoices("region", "territory")
    )
    variants: tuple[str, ...] = ()

    @classmethod
    def parse(cls, tag: str) -> LanguageTag:
        """Parse a BCP-47 (or POSIX) language tag."""
        subtags = tag.replace("_", "-").split("-")
        language = subtags[0].lower()
        script: str | None = None
        region: str | None = None
        variants_list: list[str] = []
        for subtag in subtags[1:]:
            if len(subtag) == 4 and subtag.isalpha():
                script = subtag.title()
            elif (len(subtag) == 2 and subtag.isalpha()) or (
                len(subtag) == 3 and subtag.isdigit()
            ):
                region = subtag.upper()
            elif subtag:
                variants_list.append(subtag.lower())
        return cls(
            language=language,
            script=script,
            region=region,
            variants=tuple(variants_list),
        )

    def __str__(self) -> str:
        parts: list[str] = [self.language]
        if self.script:
            parts.append(self.script)
        if self.region:
            parts.append(self.region)
        parts.extend(self.variants)
        return "-".join(parts)

    def __hash__(self) -> int:
        return hash((self.language, self.script, self.region, self.variants))


class NumberSymbolSet(BaseModel):
    """Glyphs for each number symbol role of one number system."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    decimal: str | None = None
    group: str | None = None
    list_separator: str | None = Field(default=None, alias="list")
    percent_sign: str | None = None
    plus_sign: str | None = None
    minus_sign: str | None = None
    approximately_sign: str | None = None
    exponential: str | None = None
    superscripting_exponent: str | None = None
    per_mille: str | None = None
    infinity: str | None = None
    nan: str | None = None
    time_separator: str | None = None
    currency_decimal: str | None = None
    currency_group: str | None = None


class NumberSystemDefinition(BaseModel, frozen=True):
    """Supplemental definition of a number system."""

    type: Literal["numeric", "algorithmic"]
    digits: str | None = None
    rules: str | None = None


class Rule(BaseModel, frozen=True):
    """A single RBNF rule.

    ``range`` is derived from the following rule in the same rule set and is
    ``None`` when the rule applies without an upper bound.
    """

    threshold: str
    radix: int | None = None
    definition: str
    range: int | None = None


class RuleSet(BaseModel, frozen=True):
    """An ordered RBNF rule set."""

    name: str
    access: Literal["public", "private"] = "public"
    rules: tuple[Rule, ...] = ()


class Era(BaseModel, frozen=True):
    """Calendar era; ``None`` marks an unbounded start or end."""

    start: int | None = None
    end: int | None = None


class CalendarInfo(BaseModel, frozen=True):
    """Supplemental calendar data with inferred era boundaries."""

    calendar_system: str | None = None
    eras: dict[int, Era] = Field(default_factory=dict)


class CurrencyPeriod(BaseModel, frozen=True):
    """One entry of a territory's currency history."""

    code: str
    from_date: date | None = None
    to_date: date | None = None
    tender: bool = True


class LanguagePopulation(BaseModel, frozen=True):
    """Population statistics of a language within a territory."""

    population_percent: float | None = None
    official_status: str | None = None
    writing_percent: float | None = None
    literacy_percent: float | None = None


class TerritoryInfo(BaseModel, frozen=True):
    """Supplemental information about a single territory."""

    currency: tuple[CurrencyPeriod, ...] = ()
    gdp: int | None = None
    population: int | None = None
    literacy_percent: float | None = None
    language_population: dict[str, LanguagePopulation] = Field(default_factory=dict)
    measurement_system: str | None = None
    paper_size: str | None = None
    telephone_country_code: int | None = None
    temperature_measurement: str | None = None


class WeekInfo(BaseModel, frozen=True):
    """Week conventions keyed by upper-cased territory code."""

    first_day: dict[str, int | str] = Field(default_factory=dict)
    min_days: dict[str, int | str] = Field(default_factory=dict)
    weekend_start: dict[str, int | str] = Field(default_factory=dict)
    weekend_end: dict[str, int | str] = Field(default_factory=dict)


class LocaleRecord(BaseModel, frozen=True):
    """Normalized, immutable data for one locale.

    Every required module is present as a field, empty when the source did
    not provide it. Top-level modules that are not modeled are kept
    unconverted in ``extras``.
    """

    name: str
    number_formats: dict[str, Any] = Field(default_factory=dict)
    list_formats: dict[str, Any] = Field(default_factory=dict)
    currencies: dict[str, Any] = Field(default_factory=dict)
    number_systems: dict[str, str] = Field(default_factory=dict)
    number_symbols: dict[str, NumberSymbolSet | None] = Field(default_factory=dict)
    minimum_grouping_digits: int = 1
    rbnf: dict[str, dict[str, RuleSet]] = Field(default_factory=dict)
    units: dict[str, dict[str, dict[str, Any]]] = Field(default_factory=dict)
    date_fields: dict[Any, Any] = Field(default_factory=dict)
    dates: dict[Any, Any] = Field(default_factory=dict)
    territories: dict[str, Any] = Field(default_factory=dict)
    languages: dict[str, Any] = Field(default_factory=dict)
    extras: dict[str, Any] = Field(default_factory=dict)


# Raw supplemental document models


class AvailableLocalesData(BaseModel):
    """Model for available_locales.json (a list or CLDR's nested form)."""

    names: list[str]

    @classmethod
    def from_tree(cls, tree: Any) -> AvailableLocalesData:
        if isinstance(tree, dict):
            return cls(names=tree["availableLocales"]["full"])
        return cls(names=tree)


class CalendarData(BaseModel):
    """Raw entry of calendar_data.json before era inference."""

    calendar_system: str | None = Field(
        default=None,
        validation_alias=AliasChoices("calendar_system", "calendarSystem"),
    )
    eras: dict[int, Era] = Field(default_factory=dict)

    @field_validator("eras", mode="before")
    @classmethod
    def _drop_source_end(cls, value: Any) -> Any:
        # Era ends are always derived from the next era's start.
        if not isinstance(value, dict):
            return value
        return {
            era: {k: v for k, v in fields.items() if k == "start"}
            if isinstance(fields, dict)
            else fields
            for era, fields in value.items()
        }


class RawCurrencyPeriod(BaseModel):
    """A currency history entry as it appears in territory_info.json."""

    from_date: date | None = Field(
        default=None, validation_alias=AliasChoices("from", "_from")
    )
    to_date: date | None = Field(default=None, validation_alias=AliasChoices("to", "_to"))
    tender: bool = Field(default=True, validation_alias=AliasChoices("tender", "_tender"))

    @field_validator("tender", mode="before")
    @classmethod
    def _tender(cls, value: Any) -> Any:
        return value != "false" and value is not False
