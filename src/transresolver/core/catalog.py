"""Catalog providers exposing ``lookup(locale, path)`` over translation trees."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence
from copy import deepcopy
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CatalogProvider(Protocol):
    """Storage capability consumed by :class:`~transresolver.core.resolver.Resolver`."""

    def lookup(self, locale: str, path: Sequence[str]) -> Any | None:
        """Return the entry at ``path`` for ``locale`` or ``None`` on a miss."""
        ...

    def available_locales(self) -> tuple[str, ...]:
        """Return the locales this provider holds entries for."""
        ...


def _deep_merge(target: MutableMapping[str, Any], source: Mapping[str, Any]) -> None:
    for key, value in source.items():
        name = str(key)
        existing = target.get(name)
        if isinstance(value, Mapping) and isinstance(existing, MutableMapping):
            _deep_merge(existing, value)
        elif isinstance(value, Mapping):
            fresh: dict[str, Any] = {}
            _deep_merge(fresh, value)
            target[name] = fresh
        else:
            target[name] = deepcopy(value)


class InMemoryCatalog:
    """Nested-mapping catalog populated once at load time."""

    def __init__(self, data: Mapping[str, Mapping[str, Any]] | None = None) -> None:
        self._trees: dict[str, dict[str, Any]] = {}
        for locale, tree in (data or {}).items():
            self.store_translations(locale, tree)

    def store_translations(self, locale: str, tree: Mapping[str, Any]) -> None:
        """Deep-merge ``tree`` into the entries for ``locale``."""

        if not isinstance(tree, Mapping):
            raise TypeError(f"Translations for {locale!r} must be a mapping")
        _deep_merge(self._trees.setdefault(str(locale), {}), tree)

    def lookup(self, locale: str, path: Sequence[str]) -> Any | None:
        cursor: Any = self._trees.get(locale)
        if cursor is None:
            return None
        for segment in path:
            if not isinstance(cursor, Mapping) or segment not in cursor:
                return None
            cursor = cursor[segment]
        if isinstance(cursor, (Mapping, list)):
            return deepcopy(cursor)
        return cursor

    def available_locales(self) -> tuple[str, ...]:
        return tuple(self._trees)

    def tree(self, locale: str) -> dict[str, Any]:
        """Return a copy of the full tree held for ``locale``."""

        return deepcopy(self._trees.get(locale, {}))

    def __repr__(self) -> str:
        return f"InMemoryCatalog(locales={list(self._trees)!r})"


class ChainCatalog:
    """Query several providers in order; the first hit wins."""

    def __init__(self, *providers: CatalogProvider) -> None:
        if not providers:
            raise ValueError("ChainCatalog requires at least one provider")
        self.providers: tuple[CatalogProvider, ...] = providers

    def lookup(self, locale: str, path: Sequence[str]) -> Any | None:
        for provider in self.providers:
            value = provider.lookup(locale, path)
            if value is not None:
                return value
        return None

    def available_locales(self) -> tuple[str, ...]:
        locales: dict[str, None] = {}
        for provider in self.providers:
            for locale in provider.available_locales():
                locales.setdefault(locale, None)
        return tuple(locales)


__all__ = ["CatalogProvider", "ChainCatalog", "InMemoryCatalog"]
