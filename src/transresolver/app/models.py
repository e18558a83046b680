"""Pydantic models describing the translation API surface."""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from typing_extensions import Self

from transresolver.core.resolver import Key

__all__ = [
    "DefaultAlternative",
    "ResolveRequest",
    "format_validation_error",
]

KeyInput = Union[str, list[str]]


class DefaultAlternative(BaseModel):
    """One ``default`` entry: either a key to look up or a literal value."""

    model_config = ConfigDict(extra="forbid")

    key: KeyInput | None = None
    literal: Any = None

    @model_validator(mode="after")
    def _exactly_one(self) -> Self:
        if (self.key is None) == (self.literal is None):
            raise ValueError("default entries need exactly one of 'key' or 'literal'")
        return self

    def to_alternative(self) -> Any:
        return Key(self.key) if self.key is not None else self.literal


class ResolveRequest(BaseModel):
    """Payload accepted by ``POST /api/v1/translations/resolve``."""

    model_config = ConfigDict(extra="forbid")

    key: KeyInput | None = None
    keys: list[KeyInput] | None = None
    locale: str | None = None
    scope: KeyInput | None = None
    default: list[DefaultAlternative] = Field(default_factory=list)
    count: int | float | None = None
    interpolations: dict[str, Any] = Field(default_factory=dict)

    @field_validator("default", mode="before")
    @classmethod
    def _coerce_default(cls, value: Any) -> Any:
        if value is None:
            return []
        if not isinstance(value, list):
            value = [value]
        return [{"literal": item} if isinstance(item, str) else item for item in value]

    @model_validator(mode="after")
    def _require_keys(self) -> Self:
        if (self.key is None) == (self.keys is None):
            raise ValueError("provide either 'key' or 'keys'")
        return self

    @property
    def is_batch(self) -> bool:
        return self.keys is not None

    def alternatives(self) -> list[Any]:
        return [entry.to_alternative() for entry in self.default]

    def options(self) -> dict[str, Any]:
        """Keyword arguments forwarded to :meth:`Resolver.resolve`."""

        return {
            "scope": self.scope,
            "default": self.alternatives() or None,
            "count": self.count,
            "interpolations": self.interpolations,
        }


def format_validation_error(error: ValidationError) -> str:
    """Return a concise human-readable description of validation issues."""

    messages: list[str] = []
    for issue in error.errors():
        location = ".".join(str(part) for part in issue.get("loc", ()))
        message = issue.get("msg", "Invalid value")
        messages.append(f"{location}: {message}" if location else message)

    details = "; ".join(messages) if messages else str(error)
    return f"Invalid resolve payload: {details}"
