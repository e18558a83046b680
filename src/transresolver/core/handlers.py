"""Strategies deciding what happens to a missing translation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any, Union

from markupsafe import Markup

from .errors import MissingTranslation
from .html import is_html_key

_LOGGER = logging.getLogger(__name__)


class MissingTranslationMode(str, Enum):
    """Built-in handling strategies."""

    RAISE = "raise"
    PLACEHOLDER = "placeholder"


MissingTranslationHandler = Callable[[MissingTranslation], Any]
MissingTranslationStrategy = Union[MissingTranslationMode, MissingTranslationHandler]


def _humanize(segment: str) -> str:
    return " ".join(word.capitalize() for word in segment.split("_") if word)


def placeholder_for(error: MissingTranslation) -> str:
    """Return the display string substituted in lenient mode."""

    message = str(error)
    if is_html_key(error.path):
        label = _humanize(error.path[-1])
        return Markup('<span class="translation_missing" title="{}">{}</span>').format(
            message, label
        )
    return message


def handle_missing(error: MissingTranslation, strategy: MissingTranslationStrategy) -> Any:
    """Apply ``strategy`` to ``error``: raise it or return a replacement."""

    if strategy == MissingTranslationMode.RAISE:
        raise error
    if strategy == MissingTranslationMode.PLACEHOLDER:
        _LOGGER.warning("Rendering placeholder for %s", error.full_key)
        return placeholder_for(error)
    if callable(strategy):
        return strategy(error)
    raise ValueError(f"Unknown missing translation strategy: {strategy!r}")


def coerce_strategy(value: MissingTranslationStrategy | str) -> MissingTranslationStrategy:
    """Accept mode names from configuration as well as enums and callables."""

    if isinstance(value, MissingTranslationMode) or callable(value):
        return value
    return MissingTranslationMode(str(value).strip().lower())


__all__ = [
    "MissingTranslationHandler",
    "MissingTranslationMode",
    "MissingTranslationStrategy",
    "coerce_strategy",
    "handle_missing",
    "placeholder_for",
]
