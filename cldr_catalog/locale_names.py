"""Locale name utilities: wildcard expansion, POSIX names and fallback chains."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from .errors import ConfigurationError

ROOT_LOCALE = "root"
WILDCARD_MATCHERS = ("*", "+", ".", "[")


def locale_name_from_posix(name: str | None) -> str | None:
    """Transform a POSIX name (``en_GB``) into CLDR form (``en-GB``)."""
    if name is None:
        return None
    return name.replace("_", "-")


def locale_name_to_posix(name: str | None) -> str | None:
    """Transform a CLDR name (``en-GB``) into POSIX form (``en_GB``)."""
    if name is None:
        return None
    return name.replace("-", "_")


def is_pattern(locale_name: str) -> bool:
    return any(matcher in locale_name for matcher in WILDCARD_MATCHERS)


def compile_pattern(locale_name: str) -> re.Pattern[str]:
    try:
        return re.compile(locale_name)
    except re.error as e:
        raise ConfigurationError(
            f"Invalid regex in locale name {locale_name!r}: {e}"
        ) from e


def expand_locale_names(
    locale_names: Iterable[str], universe: Sequence[str]
) -> list[str]:
    """Expand wildcard entries into the matching names of ``universe``.

    An entry containing any of ``* + . [`` is treated as a regular expression
    and searched for in every name of ``universe``, in universe order. Other
    entries are kept as given. For every name with more than one subtag the
    base language is added in front of it, so that fallback to the language
    stays possible when only regional variants were asked for.

    >>> expand_locale_names(["en-A+"], ["en", "en-AG", "en-AI", "fr-BE"])
    ['en', 'en-AG', 'en-AI']

    Raises:
        ConfigurationError: If a pattern is not a valid regular expression.
    """
    expanded: list[str] = []
    for locale_name in locale_names:
        if is_pattern(locale_name):
            regex = compile_pattern(locale_name)
            expanded.extend(name for name in universe if regex.search(name))
        else:
            expanded.append(locale_name)

    with_languages: list[str] = []
    for locale_name in expanded:
        language, _, rest = locale_name.partition("-")
        with_languages.append(language)
        if rest:
            with_languages.append(locale_name)
    return list(dict.fromkeys(with_languages))


def fallback_chain(locale: str) -> list[str]:
    """Generate the fallback chain for a locale, ending with root."""
    if locale == ROOT_LOCALE:
        return [ROOT_LOCALE]
    parts = locale.split("-")
    chain = ["-".join(parts[:i]) for i in range(len(parts), 0, -1)]
    chain.append(ROOT_LOCALE)
    return chain
