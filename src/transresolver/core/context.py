"""Current and default locale carried in the execution context.

Each thread and asyncio task sees its own current locale, so setting it for
one unit of work never leaks into another running concurrently.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

DEFAULT_LOCALE = "en"

_default_locale = DEFAULT_LOCALE
_current_locale: ContextVar[str | None] = ContextVar("transresolver_locale", default=None)


def get_default_locale() -> str:
    return _default_locale


def set_default_locale(locale: str) -> None:
    """Replace the process-wide default locale (typically once at start-up)."""

    global _default_locale
    if not locale:
        raise ValueError("Default locale must be a non-empty string")
    _default_locale = locale


def current_locale() -> str | None:
    """Return the locale explicitly set for this context, if any."""

    return _current_locale.get()


def get_locale() -> str:
    """Return the locale set for this context, or the default locale."""

    return _current_locale.get() or _default_locale


def set_locale(locale: str | None) -> Token[str | None]:
    """Set the current locale and return a token for :func:`reset_locale`."""

    return _current_locale.set(locale)


def reset_locale(token: Token[str | None]) -> None:
    _current_locale.reset(token)


@contextmanager
def with_locale(locale: str | None) -> Iterator[str]:
    """Temporarily switch the current locale for the enclosed block."""

    token = set_locale(locale)
    try:
        yield get_locale()
    finally:
        reset_locale(token)


__all__ = [
    "DEFAULT_LOCALE",
    "current_locale",
    "get_default_locale",
    "get_locale",
    "reset_locale",
    "set_default_locale",
    "set_locale",
    "with_locale",
]
