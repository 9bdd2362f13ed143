"""Boundary inference for calendar eras and RBNF rules."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from itertools import pairwise

from .models import Era, Rule

_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


def infer_era_ends(eras: Iterable[tuple[int, Era]]) -> list[tuple[int, Era]]:
    """Derive each era's end from the start of the era that follows it.

    Eras are sorted by id. Every era except the last ends one before the
    next era's start; the last era is open-ended.
    """
    ordered = sorted(eras, key=lambda item: item[0])
    inferred: list[tuple[int, Era]] = []
    for (era_id, era), (_, following) in pairwise(ordered):
        end = following.start - 1 if following.start is not None else None
        inferred.append((era_id, era.model_copy(update={"end": end})))
    if ordered:
        era_id, era = ordered[-1]
        inferred.append((era_id, era.model_copy(update={"end": None})))
    return inferred


def integer_threshold(threshold: str) -> int | None:
    """Return the threshold as an int only if it is an exact integer literal."""
    if _INTEGER_LITERAL.fullmatch(threshold):
        return int(threshold)
    return None


def range_from_next_rule(threshold: str, next_threshold: str) -> int | None:
    if integer_threshold(threshold) is None:
        return None
    return integer_threshold(next_threshold)


def infer_rule_ranges(rules: Sequence[Rule]) -> tuple[Rule, ...]:
    """Set each rule's upper bound from the rule that follows it.

    If a rule and its successor both have integer thresholds, the rule
    applies up to (not including) the successor's threshold. The ranges of
    the last rule and of any rule next to a symbolic threshold such as
    ``x.x`` or ``-x`` are undefined. Source order is kept.
    """
    inferred = [
        rule.model_copy(
            update={"range": range_from_next_rule(rule.threshold, following.threshold)}
        )
        for rule, following in pairwise(rules)
    ]
    if rules:
        inferred.append(rules[-1].model_copy(update={"range": None}))
    return tuple(inferred)
