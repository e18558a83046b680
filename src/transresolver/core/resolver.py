"""Resolve translation keys against a catalog provider.

The resolver normalises keys, walks the locale (and any configured fallback
locales), applies ``default`` alternatives in order, pluralizes by ``count``,
interpolates ``%{name}`` placeholders and tags HTML-safe keys. It never writes
to the catalog, so a single instance can serve concurrent callers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from . import context
from .catalog import CatalogProvider
from .errors import InvalidLocale, MissingTranslation, TranslationError
from .handlers import (
    MissingTranslationMode,
    MissingTranslationStrategy,
    coerce_strategy,
    handle_missing,
)
from .html import is_html_key, mark_safe
from .interpolation import check_reserved_keys, interpolate
from .keys import DEFAULT_SEPARATOR, KeyLike, normalize_key
from .pluralization import PluralRules

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Key:
    """Marks a ``default`` alternative as a key to look up, not a literal."""

    value: KeyLike

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            object.__setattr__(self, "value", tuple(self.value))


def _as_alternatives(default: Any) -> list[Any]:
    if default is None:
        return []
    if isinstance(default, Sequence) and not isinstance(default, str):
        return [item for item in default if item is not None]
    return [default]


class Resolver:
    """Locale-scoped translation lookup with fallbacks and pluralization."""

    def __init__(
        self,
        catalog: CatalogProvider,
        *,
        default_locale: str | None = None,
        available_locales: Iterable[str] | None = None,
        enforce_available_locales: bool = True,
        plural_rules: PluralRules | None = None,
        separator: str = DEFAULT_SEPARATOR,
        missing: MissingTranslationStrategy | str = MissingTranslationMode.RAISE,
        locale_fallbacks: Mapping[str, Sequence[str]] | None = None,
    ) -> None:
        self.catalog = catalog
        self._default_locale = default_locale
        self._available_locales = (
            tuple(available_locales) if available_locales is not None else None
        )
        self.enforce_available_locales = enforce_available_locales
        self.plural_rules = plural_rules or PluralRules()
        self.separator = separator
        self.missing = coerce_strategy(missing)
        self.locale_fallbacks = {
            locale: tuple(chain) for locale, chain in (locale_fallbacks or {}).items()
        }

    @property
    def default_locale(self) -> str:
        return self._default_locale or context.get_default_locale()

    def available_locales(self) -> tuple[str, ...]:
        if self._available_locales is not None:
            return self._available_locales
        return self.catalog.available_locales()

    def resolve_locale(self, locale: str | None = None) -> str:
        """Return the locale a call should use, raising ``InvalidLocale``."""

        candidate = locale or context.current_locale() or self.default_locale
        if not isinstance(candidate, str) or not candidate.strip():
            raise InvalidLocale(candidate)
        if self.enforce_available_locales and candidate not in self.available_locales():
            raise InvalidLocale(candidate)
        return candidate

    def fallback_chain(self, locale: str) -> tuple[str, ...]:
        """Return ``locale`` followed by its configured fallback locales."""

        chain = [locale]
        for fallback in self.locale_fallbacks.get(locale, ()):
            if fallback not in chain:
                chain.append(fallback)
        return tuple(chain)

    def _lookup(self, locale: str, path: Sequence[str]) -> tuple[Any, str]:
        """Return the entry at ``path`` and the locale of the catalogue that held it."""

        for candidate in self.fallback_chain(locale):
            entry = self.catalog.lookup(candidate, path)
            if entry is not None:
                if candidate != locale:
                    _LOGGER.debug(
                        "Resolved %s from fallback locale %s", ".".join(path), candidate
                    )
                return entry, candidate
        return None, locale

    def _lookup_default(
        self,
        locale: str,
        scope: KeyLike | None,
        default: Any,
    ) -> tuple[Any, Sequence[str] | None, str]:
        for alternative in _as_alternatives(default):
            if isinstance(alternative, Key):
                path = normalize_key(alternative.value, scope, self.separator)
                entry, found_locale = self._lookup(locale, path)
                if entry is not None:
                    _LOGGER.debug("Using default key %s", ".".join(path))
                    return entry, path, found_locale
                continue
            return alternative, None, locale
        return None, None, locale

    def resolve(
        self,
        key: KeyLike,
        locale: str | None = None,
        *,
        scope: KeyLike | None = None,
        default: Any = None,
        count: Any = None,
        interpolations: Mapping[str, Any] | None = None,
        raise_missing: bool | None = None,
    ) -> Any:
        """Resolve ``key`` into a string, pluralization entry or subtree.

        ``default`` holds one alternative or a sequence of them: :class:`Key`
        instances are looked up in the same scope, any other value is used as
        a literal. The first alternative that resolves wins.
        """

        locale = self.resolve_locale(locale)
        values = dict(interpolations or {})
        check_reserved_keys(values, key)

        path = normalize_key(key, scope, self.separator)
        html_path: Sequence[str] = path
        entry, found_locale = self._lookup(locale, path) if path else (None, locale)

        if entry is None:
            entry, default_path, found_locale = self._lookup_default(locale, scope, default)
            if default_path is not None:
                html_path = default_path

        if entry is None:
            error = MissingTranslation(locale, path, key)
            if raise_missing:
                raise error
            return handle_missing(error, self.missing)

        if count is not None:
            values.setdefault("count", count)
            entry = self.plural_rules.pluralize(found_locale, entry, count)

        if is_html_key(html_path):
            entry = mark_safe(entry)

        if isinstance(entry, str):
            return interpolate(entry, values)
        return entry

    translate = resolve
    __call__ = resolve

    def resolve_many(
        self,
        keys: Iterable[KeyLike],
        locale: str | None = None,
        **options: Any,
    ) -> list[Any]:
        """Resolve each key independently, keeping failures in place.

        The result lists values and :class:`TranslationError` instances in
        the order of ``keys``; one failing key never aborts the batch.
        """

        results: list[Any] = []
        for key in keys:
            try:
                results.append(self.resolve(key, locale, **options))
            except TranslationError as error:
                results.append(error)
        return results

    def exists(
        self,
        key: KeyLike,
        locale: str | None = None,
        *,
        scope: KeyLike | None = None,
    ) -> bool:
        locale = self.resolve_locale(locale)
        path = normalize_key(key, scope, self.separator)
        return bool(path) and self._lookup(locale, path)[0] is not None

    def catalog_tree(self, locale: str | None = None) -> dict[str, Any]:
        """Return every entry stored for ``locale`` as a nested mapping."""

        locale = self.resolve_locale(locale)
        tree = self.catalog.lookup(locale, ())
        return dict(tree) if isinstance(tree, Mapping) else {}


__all__ = ["Key", "Resolver"]
