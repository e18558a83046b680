"""Unit tests for request locale detection helpers."""

from __future__ import annotations

import pytest
from flask import Flask, request
from werkzeug.exceptions import BadRequest

from transresolver.app.request_parser import (
    negotiate_locale,
    parse_json_object,
    resolve_request_locale,
)

AVAILABLE = ("en", "pt", "fr")


def test_negotiate_locale_honours_quality_values() -> None:
    assert negotiate_locale("en;q=0.5, pt-BR;q=0.9", AVAILABLE) == "pt"
    assert negotiate_locale("de, *;q=0.1", AVAILABLE) is None
    assert negotiate_locale("fr;q=0, en", AVAILABLE) == "en"
    assert negotiate_locale(None, AVAILABLE) is None


def test_payload_locale_wins_over_headers(app: Flask) -> None:
    with app.test_request_context(
        "/api/v1/translations/resolve?locale=fr",
        method="POST",
        headers={"Accept-Language": "en"},
    ):
        assert resolve_request_locale(request, AVAILABLE, {"locale": "pt"}) == "pt"
        assert resolve_request_locale(request, AVAILABLE, {}) == "fr"


def test_accept_language_is_used_last(app: Flask) -> None:
    with app.test_request_context("/", headers={"Accept-Language": "pt-PT"}):
        assert resolve_request_locale(request, AVAILABLE) == "pt"


def test_parse_json_object_rejects_non_object(app: Flask) -> None:
    with app.test_request_context("/", method="POST", json=["not", "an", "object"]):
        with pytest.raises(BadRequest):
            parse_json_object(request)
