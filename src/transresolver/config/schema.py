"""Pydantic models describing resolver settings and catalogue files."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator, model_validator
from typing_extensions import Self

from transresolver.core.handlers import MissingTranslationMode

_LEAF_TYPES = (str, int, float, bool)


class ConfigurationError(ValueError):
    """Raised when settings or catalogue files violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class ResolverSettings(ImmutableModel):
    """Options used to build the default :class:`~transresolver.core.Resolver`."""

    default_locale: str = "en"
    available_locales: tuple[str, ...] | None = None
    enforce_available_locales: bool = True
    missing_translations: MissingTranslationMode = MissingTranslationMode.RAISE
    separator: str = "."
    locale_fallbacks: Mapping[str, tuple[str, ...]] = Field(default_factory=dict)
    translations_path: str | None = None

    @field_validator("default_locale")
    @classmethod
    def _require_locale(cls, value: str) -> str:
        if not value.strip():
            raise ConfigurationError("The default locale must be non-empty")
        return value.strip()

    @field_validator("separator")
    @classmethod
    def _require_separator(cls, value: str) -> str:
        if not value:
            raise ConfigurationError("The key separator must be non-empty")
        return value

    @field_validator("locale_fallbacks", mode="before")
    @classmethod
    def _coerce_fallbacks(cls, value: Any) -> Mapping[str, tuple[str, ...]]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ConfigurationError("Locale fallbacks must map locales to lists")
        fallbacks: dict[str, tuple[str, ...]] = {}
        for locale, chain in value.items():
            if isinstance(chain, str):
                chain = [chain]
            fallbacks[str(locale)] = tuple(str(item) for item in chain or ())
        return fallbacks

    @model_validator(mode="after")
    def _validate_locales(self) -> Self:
        if self.available_locales is not None:
            if not self.available_locales:
                raise ConfigurationError("available_locales must not be empty when set")
            if self.default_locale not in self.available_locales:
                raise ConfigurationError(
                    f"Default locale '{self.default_locale}' is not an available locale"
                )
        for locale, chain in self.locale_fallbacks.items():
            if locale in chain:
                raise ConfigurationError(f"Locale '{locale}' cannot fall back to itself")
        return self


def _validate_tree(tree: Mapping[Any, Any], trail: tuple[str, ...]) -> dict[str, Any]:
    validated: dict[str, Any] = {}
    for raw_key, value in tree.items():
        key = str(raw_key)
        location = ".".join((*trail, key))
        if isinstance(value, Mapping):
            if not value:
                raise ConfigurationError(f"{location}: empty namespaces are not allowed")
            validated[key] = _validate_tree(value, (*trail, key))
        elif value is None or isinstance(value, _LEAF_TYPES):
            validated[key] = value
        elif isinstance(value, list) and all(
            item is None or isinstance(item, _LEAF_TYPES) for item in value
        ):
            validated[key] = list(value)
        else:
            raise ConfigurationError(
                f"{location}: unsupported value of type {type(value).__name__}"
            )
    return validated


class CatalogFile(RootModel[dict[str, dict[str, Any]]]):
    """A catalogue document whose top-level keys are locales."""

    @field_validator("root", mode="before")
    @classmethod
    def _validate_locales(cls, value: Any) -> dict[str, dict[str, Any]]:
        if not isinstance(value, Mapping):
            raise ConfigurationError("Catalogue files must define a mapping of locales")
        catalogues: dict[str, dict[str, Any]] = {}
        for locale, tree in value.items():
            if not isinstance(tree, Mapping):
                raise ConfigurationError(f"Locale '{locale}' must map to a namespace")
            catalogues[str(locale)] = _validate_tree(tree, (str(locale),))
        return catalogues

    def locales(self) -> tuple[str, ...]:
        return tuple(self.root)


__all__ = [
    "CatalogFile",
    "ConfigurationError",
    "ImmutableModel",
    "ResolverSettings",
]
