"""RBNF rule sets read from CLDR XML documents.

Only the structure needed to build :class:`~cldr_catalog.models.Rule`
records is read: rule set groupings, their rule sets and each rule's value,
radix and definition text. The rule definitions themselves are not parsed.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

import pydantic

from .errors import DecodeError
from .inference import infer_rule_ranges
from .models import Rule, RuleSet

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def rule_group_name(name: str) -> str:
    """Normalize a rule group name, e.g. ``SpelloutRules`` -> ``spellout``."""
    if name.endswith("Rules") and name != "Rules":
        name = name[: -len("Rules")]
    return _CAMEL_BOUNDARY.sub("_", name).replace("-", "_").lower()


def rule_set_name(name: str) -> str:
    """Normalize a rule set name, e.g. ``spellout-numbering`` -> ``spellout_numbering``."""
    return name.replace("-", "_")


def parse_document(data: bytes) -> ET.Element:
    try:
        return ET.fromstring(data)
    except ET.ParseError as e:
        raise DecodeError(f"RBNF document could not be parsed: {e}") from e


def rule_groups(root: ET.Element) -> list[str]:
    """Return the type of every rule set grouping in document order."""
    return [node.get("type", "") for node in root.iter("rulesetGrouping")]


def _grouping(root: ET.Element, group: str) -> ET.Element | None:
    for node in root.iter("rulesetGrouping"):
        if node.get("type") == group:
            return node
    return None


def rule_sets(root: ET.Element, group: str) -> list[tuple[str, str]]:
    """Return ``(type, access)`` for each rule set of a grouping."""
    grouping = _grouping(root, group)
    if grouping is None:
        return []
    return [
        (node.get("type", ""), node.get("access") or "public")
        for node in grouping.findall("ruleset")
    ]


def rules(root: ET.Element, group: str, ruleset: str) -> tuple[Rule, ...]:
    """Return the rules of one rule set with their ranges inferred."""
    grouping = _grouping(root, group)
    if grouping is None:
        return ()
    for node in grouping.findall("ruleset"):
        if node.get("type") == ruleset:
            try:
                parsed = [
                    Rule(
                        threshold=rule.get("value", ""),
                        radix=rule.get("radix"),
                        definition=(rule.text or "").strip(),
                    )
                    for rule in node.findall("rbnfrule")
                ]
            except pydantic.ValidationError as e:
                raise DecodeError(f"RBNF rule set {ruleset!r} is invalid: {e}") from e
            return infer_rule_ranges(parsed)
    return ()


def parse_rbnf(data: bytes) -> dict[str, dict[str, RuleSet]]:
    """Build normalized rule sets for every grouping in an RBNF document."""
    root = parse_document(data)
    result: dict[str, dict[str, RuleSet]] = {}
    for group in rule_groups(root):
        sets: dict[str, RuleSet] = {}
        for name, access in rule_sets(root, group):
            normalized = rule_set_name(name)
            sets[normalized] = RuleSet(
                name=normalized, access=access, rules=rules(root, group, name)
            )
        result[rule_group_name(group)] = sets
    return result
