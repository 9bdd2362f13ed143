"""A small consolidated CLDR corpus written to disk for tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

LATN_DIGITS = "0123456789"
ARAB_DIGITS = "٠١٢٣٤٥٦٧٨٩"

LATN_SYMBOLS = {
    "decimal": ".",
    "group": ",",
    "list": ";",
    "percentSign": "%",
    "plusSign": "+",
    "minusSign": "-",
}

AVAILABLE_LOCALES = [
    "ar",
    "en",
    "en-AG",
    "en-AI",
    "en-AS",
    "en-AT",
    "en-AU",
    "fr",
    "fr-BE",
    "root",
]


def locale_document(**modules: Any) -> dict[str, Any]:
    """Return a locale document with every required module present."""
    document: dict[str, Any] = {
        "number_formats": {},
        "list_formats": {},
        "currencies": {},
        "number_systems": {"default": "latn", "native": "latn"},
        "number_symbols": {"latn": dict(LATN_SYMBOLS)},
        "minimum_grouping_digits": 1,
        "rbnf": {},
        "units": {},
        "date_fields": {},
        "dates": {},
        "territories": {},
        "languages": {},
    }
    document.update(modules)
    return document


def en_document() -> dict[str, Any]:
    document = locale_document(
        units={
            "short": {
                "length_meter": {"display_name": "m"},
                "length_kilometer": {"display_name": "km"},
                "duration": {"display_name": "dur"},
            }
        },
        dates={
            "calendars": {
                "gregorian": {"eras": {"0": "BC", "1": "AD"}},
                "japanese": {"eras": {"232": "Meiji", "233": "Taishō"}},
            }
        },
        date_fields={
            "day": {"relative_ticks": {"-1": "yesterday", "0": "today", "1": "tomorrow"}}
        },
        rbnf={
            "SpelloutRules": {
                "spellout-numbering": {
                    "access": "public",
                    "rules": [
                        {"base_value": "0", "definition": "zero;"},
                        {"base_value": "1", "definition": "one;"},
                        {"base_value": "10", "definition": "ten;"},
                        {"base_value": "x.x", "definition": "← point →;"},
                    ],
                },
                "%%spellout-lenient": [["0", "zero;"], ["100/1000", "hundred;"]],
            },
            "OrdinalRules": {
                "digits-ordinal": [["-x", "−→→;"], ["0", "=#,##0=th;"]],
            },
        },
        territories={"US": "United States", "AG": "Antigua and Barbuda"},
        languages={"en": {"displayName": "English"}, "fr": "French"},
        extraModule={"keptAs": "is"},
    )
    # Required modules may also use camelCase keys.
    document["numberFormats"] = {
        "latn": {
            "decimal_format": "#,##0.###",
            "percent_format": "#,##0%",
            "currency_format": "¤#,##0.00",
            "currency_spacing": {"before_currency": {"insert_between": " "}},
            "currency_long": {"one": "{0} {1}"},
            "decimal_short": {"1000": ["0K", "0K"], "10000": ["00K", "00K"]},
            "rounding": 0,
            "accounting_format": None,
        }
    }
    del document["number_formats"]
    document["minimumGroupingDigits"] = document.pop("minimum_grouping_digits")
    return document


LOCALE_DOCUMENTS: dict[str, dict[str, Any]] = {
    "root": locale_document(territories={"001": "world"}),
    "en": en_document(),
    "en-AG": locale_document(territories={"AG": "Antigua & Barbuda"}),
    "fr": locale_document(
        number_symbols={"latn": {"decimal": ",", "group": " "}},
        territories={"FR": "France"},
    ),
    "ar": locale_document(
        number_systems={"default": "arab", "native": "arab", "finance": "latn"},
        number_symbols={
            "arab": {"decimal": "٫", "group": "٬"},
            "latn": dict(LATN_SYMBOLS),
        },
    ),
}

SUPPLEMENTAL_DOCUMENTS: dict[str, Any] = {
    "available_locales.json": AVAILABLE_LOCALES,
    "number_systems.json": {
        "latn": {"type": "numeric", "digits": LATN_DIGITS},
        "arab": {"type": "numeric", "digits": ARAB_DIGITS},
        "roman": {"type": "algorithmic", "rules": "%roman-upper"},
    },
    "calendar_data.json": {
        "gregorian": {
            "calendar_system": "solar",
            "eras": {"0": {"end": 0}, "1": {"start": 1}},
        },
        "japanese": {
            "calendarSystem": "solar",
            "eras": {
                "0": {"start": -999999},
                "233": {"start": 1912},
                "232": {"start": 1868},
                "10": {"start": 1000, "end": 5},
            },
        },
        "islamic-civil": {"calendar_system": "lunar", "eras": {"0": {"start": 622}}},
    },
    "territory_containment.json": {
        "001": ["019", "150"],
        "019": ["021"],
        "021": ["US", "CA"],
        "150": ["FR"],
    },
    "territory_info.json": {
        "US": {
            "currency": [{"USD": {"from": "1792-01-01"}}, {"USN": {"tender": "false"}}],
            "gdp": 19490000000000,
            "population": 332639000,
            "literacyPercent": 99,
            "languagePopulation": {
                "en": {"populationPercent": 96, "officialStatus": "de_facto_official"}
            },
            "measurement_system": "US",
            "paper_size": "US-Letter",
            "telephone_country_code": 1,
            "temperature_measurement": "US",
        },
        "fr": {
            "currency": [
                {"FRF": {"from": "1960-01-01", "to": "2002-02-17"}},
                {"EUR": {"from": "1999-01-01"}},
            ],
            "population": 68000000,
        },
    },
    "aliases.json": {
        "language": {"iw": "he", "mo": {"language": "ro", "territory": "MD"}},
        "region": {"UK": "GB"},
    },
    "likely_subtags.json": {
        "en": "en-Latn-US",
        "fr": {"language": "fr", "script": "Latn", "territory": "FR"},
    },
    "week_data.json": {
        "firstDay": {"US": "sun", "001": "mon"},
        "minDays": {"001": "1", "gb": "4"},
        "weekendStart": {"001": "sat"},
        "weekendEnd": {"001": "sun"},
    },
    "day_periods.json": {"en": {"midnight": {"at": "00:00"}}},
    "currencies.json": ["EUR", "GBP", "USD"],
    "version.json": "47.0.0",
}

RBNF_EN_XML = """<?xml version="1.0" encoding="UTF-8"?>
<ldml>
  <identity><language type="en"/></identity>
  <rbnf>
    <rulesetGrouping type="SpelloutRules">
      <ruleset type="spellout-numbering-year">
        <rbnfrule value="x.x">=#,##0.#=;</rbnfrule>
        <rbnfrule value="0">=%spellout-numbering=;</rbnfrule>
        <rbnfrule value="1010" radix="100">←← →→;</rbnfrule>
      </ruleset>
      <ruleset type="and" access="private">
        <rbnfrule value="1">' and =%spellout-cardinal=;</rbnfrule>
      </ruleset>
    </rulesetGrouping>
    <rulesetGrouping type="OrdinalRules">
      <ruleset type="digits-ordinal">
        <rbnfrule value="0">=#,##0=th;</rbnfrule>
      </ruleset>
    </rulesetGrouping>
  </rbnf>
</ldml>
"""


def write_json(path: Path, tree: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(tree, ensure_ascii=False), encoding="utf-8")


def write_corpus(root: Path) -> Path:
    """Write the test corpus under ``root`` and return it."""
    for name, tree in SUPPLEMENTAL_DOCUMENTS.items():
        write_json(root / name, tree)
    for locale, tree in LOCALE_DOCUMENTS.items():
        write_json(root / "locales" / f"{locale}.json", tree)
    rbnf_dir = root / "rbnf"
    rbnf_dir.mkdir(parents=True, exist_ok=True)
    (rbnf_dir / "en.xml").write_text(RBNF_EN_XML, encoding="utf-8")
    return root


