"""Helpers for reading locale hints and payloads from incoming requests."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from flask import Request
from werkzeug.exceptions import BadRequest


def _accept_language_candidates(header: str) -> list[str]:
    """Return language tags from ``Accept-Language`` ordered by preference."""

    weighted: list[tuple[float, int, str]] = []
    for position, part in enumerate(header.split(",")):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip()
        if not tag or tag == "*":
            continue
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                continue
        if quality > 0:
            weighted.append((-quality, position, tag))
    return [tag for _, _, tag in sorted(weighted)]


def negotiate_locale(header: str | None, available: Sequence[str]) -> str | None:
    """Pick the first ``Accept-Language`` tag (or its language) that is available."""

    if not header:
        return None
    for tag in _accept_language_candidates(header):
        for candidate in (tag, tag.replace("_", "-").split("-")[0]):
            for locale in available:
                if locale.lower() == candidate.lower():
                    return locale
    return None


def resolve_request_locale(
    req: Request,
    available: Sequence[str],
    payload: Mapping[str, Any] | None = None,
) -> str | None:
    """Return the locale requested by ``req``.

    An explicit payload ``locale`` or ``?locale=`` argument is returned as
    given so that unknown locales are reported; ``Accept-Language`` only
    contributes locales that are available.
    """

    locale = (payload or {}).get("locale")
    if isinstance(locale, str) and locale.strip():
        return locale.strip()

    locale_param = req.args.get("locale")
    if locale_param and locale_param.strip():
        return locale_param.strip()

    return negotiate_locale(req.headers.get("Accept-Language"), available)


def parse_json_object(req: Request) -> dict[str, Any]:
    """Extract a JSON object payload from ``req``."""

    data = req.get_json(silent=True)
    if data is None:
        raise BadRequest("Request body must be valid JSON")
    if not isinstance(data, Mapping):
        raise BadRequest("Request JSON must be an object")
    return dict(data)


__all__ = ["negotiate_locale", "parse_json_object", "resolve_request_locale"]
