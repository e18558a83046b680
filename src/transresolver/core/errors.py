"""Typed failures raised while resolving translations."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


class TranslationError(ValueError):
    """Base class for every failure surfaced by the resolver."""


class MissingTranslation(TranslationError):
    """Raised when neither the key nor any default resolves."""

    def __init__(self, locale: str, path: Sequence[str], key: Any = None) -> None:
        self.locale = locale
        self.path = tuple(path)
        self.key = key
        super().__init__(f"translation missing: {self.full_key}")

    @property
    def full_key(self) -> str:
        """Return ``locale.segment.segment`` for diagnostic display."""

        return ".".join((self.locale, *self.path))


class InvalidLocale(TranslationError):
    """Raised when the locale is unset or not one of the available locales."""

    def __init__(self, locale: Any) -> None:
        self.locale = locale
        super().__init__(f"{locale!r} is not a valid locale")


class InvalidPluralizationData(TranslationError):
    """Raised when a count is given but the entry cannot be pluralized."""

    def __init__(self, entry: Any, count: Any, category: str | None = None) -> None:
        self.entry = entry
        self.count = count
        self.category = category
        if category is None:
            message = f"translation data {entry!r} can not be used with count {count!r}"
        else:
            message = (
                f"translation data {entry!r} can not be used with count {count!r}; "
                f"key '{category}' is missing"
            )
        super().__init__(message)


class MissingInterpolationArgument(TranslationError):
    """Raised when a placeholder has no matching interpolation value."""

    def __init__(self, name: str, values: Mapping[str, Any], template: str) -> None:
        self.name = name
        self.values = dict(values)
        self.template = template
        super().__init__(
            f"missing interpolation argument {name!r} in {template!r} "
            f"({sorted(self.values)} given)"
        )


class InvalidInterpolationValue(TranslationError):
    """Raised when a value does not fit its ``%<name>fmt`` format specification."""

    def __init__(self, name: str, value: Any, template: str, spec: str) -> None:
        self.name = name
        self.value = value
        self.template = template
        self.spec = spec
        super().__init__(
            f"value {value!r} for {name!r} does not fit format %{spec} in {template!r}"
        )


class ReservedInterpolationKey(TranslationError):
    """Raised when an interpolation value uses a reserved option name."""

    def __init__(self, name: str, template: Any = None) -> None:
        self.name = name
        self.template = template
        super().__init__(f"reserved key {name!r} used in {template!r}")


__all__ = [
    "InvalidInterpolationValue",
    "InvalidLocale",
    "InvalidPluralizationData",
    "MissingInterpolationArgument",
    "MissingTranslation",
    "ReservedInterpolationKey",
    "TranslationError",
]
