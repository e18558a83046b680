"""Translation resolver package."""

from .core import (
    ChainCatalog,
    InMemoryCatalog,
    Key,
    MissingTranslationMode,
    Resolver,
    TranslationError,
    get_locale,
    set_locale,
    with_locale,
)

__all__ = [
    "ChainCatalog",
    "InMemoryCatalog",
    "Key",
    "MissingTranslationMode",
    "Resolver",
    "TranslationError",
    "get_locale",
    "set_locale",
    "with_locale",
]
