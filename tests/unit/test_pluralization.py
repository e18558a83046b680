"""Unit tests for plural rules and the rule registry."""

from __future__ import annotations

import pytest

from transresolver.core.errors import InvalidPluralizationData
from transresolver.core.pluralization import (
    PluralRules,
    east_slavic,
    is_plural_table,
    one_other,
    one_upto_two,
    other_only,
    pluralize,
)


@pytest.mark.parametrize(
    ("count", "expected"),
    [(1, "one"), (0, "other"), (2, "other"), (1.5, "other")],
)
def test_one_other(count: float, expected: str) -> None:
    assert one_other(count) == expected


def test_one_upto_two() -> None:
    assert [one_upto_two(value) for value in (0, 1, 1.5, 2)] == ["one", "one", "one", "other"]


@pytest.mark.parametrize(
    ("count", "expected"),
    [(1, "one"), (21, "one"), (3, "few"), (24, "few"), (5, "many"), (11, "many"), (12, "many"), (1.5, "other")],
)
def test_east_slavic(count: float, expected: str) -> None:
    assert east_slavic(count) == expected


def test_registry_uses_language_subtag_and_default() -> None:
    rules = PluralRules()

    assert rules.rule_for("fr-CA") is one_upto_two
    assert rules.rule_for("ja") is other_only
    assert rules.rule_for("en-GB") is one_other
    assert rules.category("ru", 3) == "few"


def test_registry_accepts_custom_rules() -> None:
    rules = PluralRules({"xx": lambda count: "few" if count < 5 else "other"})
    rules.register("yy", other_only)

    assert rules.category("xx", 2) == "few"
    assert rules.category("yy", 1) == "other"
    assert rules.pluralize("xx", {"few": "a few", "other": "lots"}, 9) == "lots"


def test_pluralize_prefers_zero_entry() -> None:
    table = {"zero": "none", "one": "one", "other": "many"}

    assert pluralize(table, 0, "other") == "none"
    assert pluralize({"one": "one", "other": "many"}, 0, "other") == "many"


def test_pluralize_rejects_missing_category() -> None:
    with pytest.raises(InvalidPluralizationData) as excinfo:
        pluralize({"one": "one"}, 3, "other")

    assert excinfo.value.count == 3
    assert excinfo.value.category == "other"


def test_pluralize_returns_non_mappings() -> None:
    assert pluralize("plain", 3, "other") == "plain"


def test_is_plural_table() -> None:
    assert is_plural_table({"one": "a", "other": "b"})
    assert not is_plural_table({"one": "a", "title": "b"})
    assert not is_plural_table({})
    assert not is_plural_table("one")
