"""HTML-safety tagging for translation keys."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from markupsafe import Markup

HTML_SUFFIX = "_html"
HTML_LEAF = "html"


def is_html_key(path: Sequence[str]) -> bool:
    """Return ``True`` when the key's last segment marks HTML-safe content."""

    if not path:
        return False
    leaf = path[-1]
    return leaf == HTML_LEAF or leaf.endswith(HTML_SUFFIX)


def mark_safe(value: Any) -> Any:
    """Wrap strings, and string leaves of plural tables, in ``Markup``."""

    if isinstance(value, str):
        return Markup(value)
    if isinstance(value, Mapping):
        return {key: mark_safe(item) for key, item in value.items()}
    return value


__all__ = ["HTML_LEAF", "HTML_SUFFIX", "is_html_key", "mark_safe"]
