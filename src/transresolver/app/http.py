"""HTTP helper utilities shared across Flask blueprints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from flask import jsonify

from transresolver.core.errors import (
    InvalidInterpolationValue,
    InvalidLocale,
    InvalidPluralizationData,
    MissingInterpolationArgument,
    MissingTranslation,
    ReservedInterpolationKey,
    TranslationError,
)

_ERROR_CODES: tuple[tuple[type[TranslationError], str, int], ...] = (
    (MissingTranslation, "missing_translation", 404),
    (InvalidLocale, "invalid_locale", 400),
    (InvalidPluralizationData, "invalid_pluralization_data", 422),
    (InvalidInterpolationValue, "invalid_interpolation_value", 422),
    (MissingInterpolationArgument, "missing_interpolation_argument", 422),
    (ReservedInterpolationKey, "reserved_interpolation_key", 422),
)


def describe_error(error: TranslationError) -> tuple[str, int, dict[str, Any]]:
    """Return the error code, HTTP status and diagnostic fields for ``error``."""

    details: dict[str, Any] = {}
    if isinstance(error, MissingTranslation):
        details = {"locale": error.locale, "key": error.full_key}
    elif isinstance(error, InvalidLocale):
        details = {"locale": error.locale}
    elif isinstance(error, MissingInterpolationArgument):
        details = {"argument": error.name}
    elif isinstance(error, (ReservedInterpolationKey, InvalidInterpolationValue)):
        details = {"argument": error.name}

    for error_type, code, status in _ERROR_CODES:
        if isinstance(error, error_type):
            return code, status, details
    return "translation_error", 422, details


@dataclass(frozen=True)
class ProblemResponse:
    """RFC 7807-style error payload."""

    error: str
    status: int
    message: str | None = None
    extra: Mapping[str, Any] | None = None

    @classmethod
    def from_translation_error(cls, error: TranslationError) -> ProblemResponse:
        code, status, details = describe_error(error)
        return cls(error=code, status=status, message=str(error), extra=details or None)

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error}
        if self.message:
            payload["message"] = self.message
        if self.extra:
            payload.update(self.extra)
        return payload

    def to_response(self) -> tuple[Any, int]:
        return jsonify(self.as_dict()), self.status


def problem_response(
    error: str,
    *,
    status: int,
    message: str | None = None,
    **extra: Any,
) -> ProblemResponse:
    """Convenience factory mirroring Flask's ``jsonify`` interface."""

    return ProblemResponse(error=error, status=status, message=message, extra=extra or None)


__all__ = ["ProblemResponse", "describe_error", "problem_response"]
