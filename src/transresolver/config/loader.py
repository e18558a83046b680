"""Build catalogues and resolvers from translation files on disk."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from transresolver.core.catalog import CatalogProvider, InMemoryCatalog
from transresolver.core.resolver import Resolver

from .schema import CatalogFile, ConfigurationError, ResolverSettings
from .settings import load_settings

_LOGGER = logging.getLogger(__name__)

TRANSLATIONS_DIRECTORY = Path(__file__).resolve().parents[1] / "translations"
CATALOG_SUFFIXES = (".yml", ".yaml", ".json")


def _read_payload(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        if path.suffix == ".json":
            return json.load(handle)
        return yaml.safe_load(handle) or {}


def read_catalog_file(path: Path) -> CatalogFile:
    """Parse and validate a single catalogue document."""

    try:
        payload = _read_payload(path)
    except (yaml.YAMLError, json.JSONDecodeError) as error:
        raise ConfigurationError(f"Unable to parse {path.name}: {error}") from error

    try:
        return CatalogFile.model_validate(payload)
    except ValidationError as error:
        raise ConfigurationError(f"Catalogue validation failed for {path.name}: {error}") from error


def catalog_files(source: Path) -> list[Path]:
    """Expand ``source`` into the catalogue files it names, sorted by path."""

    if source.is_dir():
        return sorted(
            path for path in source.rglob("*") if path.suffix in CATALOG_SUFFIXES
        )
    if source.is_file():
        return [source]
    raise FileNotFoundError(f"Translation source not found: {source}")


def load_catalog(sources: Iterable[Path | str]) -> InMemoryCatalog:
    """Merge every catalogue file under ``sources`` into one in-memory catalog.

    Later files override earlier ones key by key, so project files listed
    after library defaults win.
    """

    catalog = InMemoryCatalog()
    for source in sources:
        for path in catalog_files(Path(source)):
            document = read_catalog_file(path)
            for locale, tree in document.root.items():
                catalog.store_translations(locale, tree)
            _LOGGER.debug("Loaded %s for locales %s", path.name, ", ".join(document.locales()))
    return catalog


@lru_cache(maxsize=1)
def load_bundled_catalog() -> InMemoryCatalog:
    """Load and cache the catalogues shipped with the package."""

    return load_catalog([TRANSLATIONS_DIRECTORY])


def translations_source(settings: ResolverSettings) -> Path:
    if settings.translations_path:
        return Path(settings.translations_path)
    return TRANSLATIONS_DIRECTORY


def build_resolver(
    settings: ResolverSettings | None = None,
    catalog: CatalogProvider | None = None,
) -> Resolver:
    """Wire a :class:`Resolver` from settings and a catalogue provider."""

    settings = settings or load_settings()
    if catalog is None:
        source = translations_source(settings)
        catalog = (
            load_bundled_catalog()
            if source == TRANSLATIONS_DIRECTORY
            else load_catalog([source])
        )

    return Resolver(
        catalog,
        default_locale=settings.default_locale,
        available_locales=settings.available_locales,
        enforce_available_locales=settings.enforce_available_locales,
        separator=settings.separator,
        missing=settings.missing_translations,
        locale_fallbacks=settings.locale_fallbacks,
    )


__all__ = [
    "CATALOG_SUFFIXES",
    "TRANSLATIONS_DIRECTORY",
    "build_resolver",
    "catalog_files",
    "load_bundled_catalog",
    "load_catalog",
    "read_catalog_file",
    "translations_source",
]
