"""Normalise lookup keys and scopes into canonical segment paths."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Union

DEFAULT_SEPARATOR = "."

KeyLike = Union[str, Sequence[str]]


def _segments(value: KeyLike | None, separator: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        parts: Sequence[str] = (value,)
    else:
        parts = value

    segments: list[str] = []
    for part in parts:
        if part is None:
            continue
        for segment in str(part).split(separator):
            segment = segment.strip()
            if segment:
                segments.append(segment)
    return segments


def normalize_key(
    key: KeyLike,
    scope: KeyLike | None = None,
    separator: str = DEFAULT_SEPARATOR,
) -> tuple[str, ...]:
    """Combine ``scope`` and ``key`` into a tuple of non-empty segments.

    Both arguments accept a dotted string or a sequence of segments; segments
    may themselves contain separators, so ``["a.b", "c"]`` and ``"a.b.c"``
    normalise to the same path.
    """

    return tuple(_segments(scope, separator) + _segments(key, separator))


def join_key(path: Sequence[str], separator: str = DEFAULT_SEPARATOR) -> str:
    """Render a canonical path for display."""

    return separator.join(path)


__all__ = ["DEFAULT_SEPARATOR", "KeyLike", "join_key", "normalize_key"]
