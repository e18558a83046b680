"""Locale-scoped translation lookup with fallbacks, pluralization and interpolation."""

from .catalog import CatalogProvider, ChainCatalog, InMemoryCatalog
from .context import (
    get_default_locale,
    get_locale,
    reset_locale,
    set_default_locale,
    set_locale,
    with_locale,
)
from .errors import (
    InvalidLocale,
    InvalidInterpolationValue,
    InvalidPluralizationData,
    MissingInterpolationArgument,
    MissingTranslation,
    ReservedInterpolationKey,
    TranslationError,
)
from .handlers import MissingTranslationMode
from .keys import normalize_key
from .pluralization import PluralRules
from .resolver import Key, Resolver

__all__ = [
    "CatalogProvider",
    "ChainCatalog",
    "InMemoryCatalog",
    "InvalidInterpolationValue",
    "InvalidLocale",
    "InvalidPluralizationData",
    "Key",
    "MissingInterpolationArgument",
    "MissingTranslation",
    "MissingTranslationMode",
    "PluralRules",
    "ReservedInterpolationKey",
    "Resolver",
    "TranslationError",
    "get_default_locale",
    "get_locale",
    "normalize_key",
    "reset_locale",
    "set_default_locale",
    "set_locale",
    "with_locale",
]
