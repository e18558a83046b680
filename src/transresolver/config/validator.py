"""Consistency checks for translation catalogues and a CLI to run them."""

from __future__ import annotations

import argparse
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from transresolver.core.catalog import InMemoryCatalog
from transresolver.core.interpolation import INTERPOLATION_PATTERN
from transresolver.core.pluralization import is_plural_table

from .loader import TRANSLATIONS_DIRECTORY, load_catalog
from .schema import ConfigurationError
from .settings import load_settings


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def flatten_entries(tree: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """Flatten a tree into dotted keys, keeping plural tables as single entries."""

    items: dict[str, Any] = {}
    for key, value in tree.items():
        path = f"{prefix}.{key}" if prefix else key
        if isinstance(value, Mapping) and not is_plural_table(value):
            items.update(flatten_entries(value, path))
        else:
            items[path] = value
    return items


def placeholders(value: Any) -> set[str]:
    """Return the interpolation names used by a leaf or plural table."""

    if isinstance(value, Mapping):
        names: set[str] = set()
        for item in value.values():
            names |= placeholders(item)
        return names
    if not isinstance(value, str):
        return set()
    return {
        match.group("name") or match.group("formatted")
        for match in INTERPOLATION_PATTERN.finditer(value)
        if match.group("escaped") is None
    }


def _validate_plural_tables(locale: str, entries: Mapping[str, Any]) -> list[str]:
    errors: list[str] = []
    for key, value in entries.items():
        if is_plural_table(value) and "other" not in value:
            errors.append(
                _format_scope(f"{locale}.{key}", "pluralization table has no 'other' entry")
            )
    return errors


def _validate_against_base(
    locale: str,
    entries: Mapping[str, Any],
    base_locale: str,
    base_entries: Mapping[str, Any],
) -> list[str]:
    errors: list[str] = []

    missing = sorted(set(base_entries) - set(entries))
    if missing:
        errors.append(
            _format_scope(
                locale,
                f"missing {len(missing)} key(s) present in '{base_locale}': {', '.join(missing)}",
            )
        )

    for key in sorted(set(base_entries) & set(entries)):
        expected = placeholders(base_entries[key]) - {"count"}
        found = placeholders(entries[key]) - {"count"}
        if expected != found:
            errors.append(
                _format_scope(
                    f"{locale}.{key}",
                    (
                        f"placeholders {sorted(found)} differ from "
                        f"'{base_locale}' placeholders {sorted(expected)}"
                    ),
                )
            )

    return errors


def validate_catalog(
    catalog: InMemoryCatalog,
    base_locale: str,
    locales: Sequence[str] | None = None,
) -> dict[str, list[str]]:
    """Validate each locale against ``base_locale`` and return issues by locale."""

    base_entries = flatten_entries(catalog.tree(base_locale))
    results: dict[str, list[str]] = {}

    for locale in locales or catalog.available_locales():
        entries = flatten_entries(catalog.tree(locale))
        issues = _validate_plural_tables(locale, entries)
        if locale != base_locale:
            issues.extend(_validate_against_base(locale, entries, base_locale, base_entries))
        results[locale] = issues

    return results


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate translation catalogues against the base locale."
    )
    parser.add_argument(
        "sources",
        nargs="*",
        type=Path,
        help="Catalogue files or directories (defaults to the bundled translations)",
    )
    parser.add_argument(
        "--base-locale",
        help="Locale whose keys every other locale must provide (defaults to the configured default)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running catalogue validation from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    sources = args.sources or [TRANSLATIONS_DIRECTORY]
    base_locale = args.base_locale or load_settings().default_locale

    try:
        catalog = load_catalog(sources)
    except (ConfigurationError, FileNotFoundError) as error:
        print(f"failed to load catalogues: {error}")
        return 1

    if base_locale not in catalog.available_locales():
        print(f"base locale '{base_locale}' has no catalogue")
        return 1

    exit_code = 0
    for locale, issues in validate_catalog(catalog, base_locale).items():
        if issues:
            exit_code = 1
            print(f"[{locale}] {len(issues)} issue(s) detected:")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print(f"[{locale}] OK")

    return exit_code


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
