"""Substitute ``%{name}`` placeholders in resolved templates."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from markupsafe import Markup, escape

from .errors import (
    InvalidInterpolationValue,
    MissingInterpolationArgument,
    ReservedInterpolationKey,
)

RESERVED_KEYS = frozenset(
    {
        "scope",
        "default",
        "separator",
        "resolve",
        "object",
        "fallback",
        "format",
        "cascade",
        "throw",
        "raise",
        "deep_interpolation",
    }
)

INTERPOLATION_PATTERN = re.compile(
    r"%%(?P<escaped>\{\w+\}|<\w+>)"
    r"|%\{(?P<name>\w+)\}"
    r"|%<(?P<formatted>\w+)>(?P<spec>[-+ 0#]*\d*(?:\.\d+)?[diouxXeEfFgGcrs])"
)


def check_reserved_keys(values: Mapping[str, Any] | None, template: Any = None) -> None:
    """Reject interpolation values that shadow lookup options."""

    for name in values or {}:
        if name in RESERVED_KEYS:
            raise ReservedInterpolationKey(name, template)


def interpolate(template: str, values: Mapping[str, Any] | None = None) -> str:
    """Return ``template`` with every placeholder replaced from ``values``.

    ``Markup`` templates stay ``Markup``; inserted values are escaped unless
    they are ``Markup`` themselves.
    """

    values = values or {}
    check_reserved_keys(values, template)

    html_safe = isinstance(template, Markup)
    convert = escape if html_safe else str

    def _replace(match: re.Match[str]) -> str:
        escaped = match.group("escaped")
        if escaped is not None:
            return "%" + escaped

        name = match.group("name") or match.group("formatted")
        if name not in values:
            raise MissingInterpolationArgument(name, values, str(template))

        value = values[name]
        spec = match.group("spec")
        if spec is not None:
            try:
                formatted = ("%" + spec) % (value,)
            except (TypeError, ValueError) as error:
                raise InvalidInterpolationValue(name, value, str(template), spec) from error
            return formatted if isinstance(value, Markup) else convert(formatted)
        return convert(value)

    result = INTERPOLATION_PATTERN.sub(_replace, str(template))
    return Markup(result) if html_safe else result


__all__ = [
    "INTERPOLATION_PATTERN",
    "RESERVED_KEYS",
    "check_reserved_keys",
    "interpolate",
]
