"""Plural category rules, pluggable per locale."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from numbers import Real
from typing import Any

from .errors import InvalidPluralizationData

PLURAL_CATEGORIES = frozenset({"zero", "one", "two", "few", "many", "other"})

PluralRule = Callable[[Any], str]


def one_other(count: Any) -> str:
    """English-like rule: ``one`` for exactly one, ``other`` for the rest."""

    return "one" if count == 1 else "other"


def one_upto_two(count: Any) -> str:
    """French-like rule where zero and one share the ``one`` category."""

    if isinstance(count, Real) and 0 <= count < 2:
        return "one"
    return "other"


def other_only(count: Any) -> str:
    """Languages without grammatical number."""

    return "other"


def east_slavic(count: Any) -> str:
    """Russian/Ukrainian integer rules (``one``/``few``/``many``)."""

    if not isinstance(count, Real) or count != int(count):
        return "other"
    value = abs(int(count))
    mod10, mod100 = value % 10, value % 100
    if mod10 == 1 and mod100 != 11:
        return "one"
    if 2 <= mod10 <= 4 and not 12 <= mod100 <= 14:
        return "few"
    return "many"


_BUILTIN_RULES: dict[str, PluralRule] = {
    "fr": one_upto_two,
    "ja": other_only,
    "ko": other_only,
    "zh": other_only,
    "ru": east_slavic,
    "uk": east_slavic,
}


def is_plural_table(entry: Any) -> bool:
    """Return ``True`` when ``entry`` maps only plural categories."""

    return (
        isinstance(entry, Mapping)
        and bool(entry)
        and all(key in PLURAL_CATEGORIES for key in entry)
    )


def pluralize(entry: Any, count: Any, category: str) -> Any:
    """Select ``category`` from a pluralization table.

    A table holding ``zero`` answers a count of zero regardless of the rule.
    Non-mapping entries are returned untouched.
    """

    if not isinstance(entry, Mapping):
        return entry

    key = "zero" if count == 0 and "zero" in entry else category
    if key not in entry:
        raise InvalidPluralizationData(entry, count, key)
    return entry[key]


class PluralRules:
    """Registry mapping locales to plural rules."""

    def __init__(
        self,
        rules: Mapping[str, PluralRule] | None = None,
        default: PluralRule = one_other,
    ) -> None:
        self._rules: dict[str, PluralRule] = dict(_BUILTIN_RULES)
        self._rules.update(rules or {})
        self.default = default

    def register(self, locale: str, rule: PluralRule) -> None:
        self._rules[locale] = rule

    def rule_for(self, locale: str) -> PluralRule:
        """Return the rule for ``locale``, trying its language subtag next."""

        if locale in self._rules:
            return self._rules[locale]
        language = locale.replace("_", "-").split("-")[0]
        return self._rules.get(language, self.default)

    def category(self, locale: str, count: Any) -> str:
        return self.rule_for(locale)(count)

    def pluralize(self, locale: str, entry: Any, count: Any) -> Any:
        if not isinstance(entry, Mapping):
            return entry
        return pluralize(entry, count, self.category(locale, count))


__all__ = [
    "PLURAL_CATEGORIES",
    "PluralRule",
    "PluralRules",
    "east_slavic",
    "is_plural_table",
    "one_other",
    "one_upto_two",
    "other_only",
    "pluralize",
]
