"""Integration tests for the translations API."""

from __future__ import annotations

from flask.testing import FlaskClient

from transresolver.app import create_app
from transresolver.core import InMemoryCatalog, Resolver


def test_translations_endpoint_returns_default_catalogue(client: FlaskClient) -> None:
    response = client.get("/api/v1/translations/")
    assert response.status_code == 200
    payload = response.get_json()

    assert payload["locale"] == "en"
    assert payload["available_locales"] == ["en", "pt", "fr"]
    assert payload["translations"]["hello_world"] == "Hello world!"
    assert payload["translations"]["products"]["index"]["title"] == "Products"
    assert payload["fallback"]["locale"] == "en"


def test_translations_endpoint_respects_locale_path(client: FlaskClient) -> None:
    response = client.get("/api/v1/translations/pt")
    assert response.status_code == 200
    payload = response.get_json()

    assert payload["locale"] == "pt"
    assert payload["translations"]["hello_world"] == "Olá mundo!"
    assert payload["fallback"]["translations"]["hello_world"] == "Hello world!"


def test_translations_endpoint_negotiates_accept_language(client: FlaskClient) -> None:
    response = client.get(
        "/api/v1/translations/", headers={"Accept-Language": "de-DE, fr-CA;q=0.8"}
    )

    assert response.get_json()["locale"] == "fr"


def test_unknown_locale_is_rejected(client: FlaskClient) -> None:
    response = client.get("/api/v1/translations/xx")

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"] == "invalid_locale"
    assert payload["locale"] == "xx"


def test_resolve_single_key_with_count(client: FlaskClient) -> None:
    response = client.post(
        "/api/v1/translations/resolve",
        json={"key": "inbox", "count": 3, "locale": "pt"},
    )

    assert response.status_code == 200
    payload = response.get_json()
    assert payload == {
        "locale": "pt",
        "key": "inbox",
        "value": "Você tem 3 mensagens",
        "html_safe": False,
    }


def test_resolve_uses_query_locale(client: FlaskClient) -> None:
    response = client.post(
        "/api/v1/translations/resolve?locale=fr",
        json={"key": ["products", "price"], "interpolations": {"price": 12}},
    )

    payload = response.get_json()
    assert payload["locale"] == "fr"
    assert payload["key"] == "products.price"
    assert payload["value"] == "12 €"


def test_resolve_html_key_escapes_values(client: FlaskClient) -> None:
    response = client.post(
        "/api/v1/translations/resolve",
        json={"key": "greeting.html", "interpolations": {"name": "<b>Ann</b>"}},
    )

    payload = response.get_json()
    assert payload["value"] == "<p>Hello, &lt;b&gt;Ann&lt;/b&gt;</p>"
    assert payload["html_safe"] is True


def test_resolve_defaults(client: FlaskClient) -> None:
    response = client.post(
        "/api/v1/translations/resolve",
        json={"key": "nope", "default": [{"key": "missing"}, {"key": "hello_world"}]},
    )
    assert response.get_json()["value"] == "Hello world!"

    response = client.post(
        "/api/v1/translations/resolve",
        json={"key": "nope", "default": "Fallback"},
    )
    assert response.get_json()["value"] == "Fallback"


def test_resolve_missing_key_returns_not_found(client: FlaskClient) -> None:
    response = client.post("/api/v1/translations/resolve", json={"key": "nope"})

    assert response.status_code == 404
    payload = response.get_json()
    assert payload["error"] == "missing_translation"
    assert payload["key"] == "en.nope"
    assert payload["message"] == "translation missing: en.nope"


def test_resolve_batch_keeps_per_key_errors(client: FlaskClient) -> None:
    response = client.post(
        "/api/v1/translations/resolve",
        json={"keys": ["hello_world", "nope", ["products", "index", "title"]]},
        headers={"Accept-Language": "pt-BR,pt;q=0.9"},
    )

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["locale"] == "pt"
    results = payload["results"]
    assert [entry["key"] for entry in results] == [
        "hello_world",
        "nope",
        "products.index.title",
    ]
    assert results[0]["value"] == "Olá mundo!"
    assert results[1]["error"]["error"] == "missing_translation"
    assert results[1]["error"]["key"] == "pt.nope"
    assert results[2]["value"] == "Produtos"


def test_resolve_rejects_reserved_interpolation_keys(client: FlaskClient) -> None:
    response = client.post(
        "/api/v1/translations/resolve",
        json={"key": "hello_world", "interpolations": {"scope": "x"}},
    )

    assert response.status_code == 422
    payload = response.get_json()
    assert payload["error"] == "reserved_interpolation_key"
    assert payload["argument"] == "scope"


def test_resolve_reports_missing_interpolation(client: FlaskClient) -> None:
    response = client.post("/api/v1/translations/resolve", json={"key": "welcome"})

    assert response.status_code == 422
    assert response.get_json()["error"] == "missing_interpolation_argument"


def test_resolve_validates_payload_shape(client: FlaskClient) -> None:
    response = client.post(
        "/api/v1/translations/resolve", json={"key": "a", "keys": ["b"]}
    )

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert payload["message"].startswith("Invalid resolve payload")


def test_resolve_rejects_non_object_payload(client: FlaskClient) -> None:
    response = client.post("/api/v1/translations/resolve", json=["hello_world"])

    assert response.status_code == 400
    assert response.get_json()["error"] == "bad_request"


def test_resolve_reports_values_rejected_by_format() -> None:
    resolver = Resolver(
        InMemoryCatalog({"en": {"files": "%<n>d files"}}), default_locale="en"
    )
    client = create_app(resolver).test_client()

    response = client.post(
        "/api/v1/translations/resolve",
        json={"key": "files", "interpolations": {"n": "abc"}},
    )

    assert response.status_code == 422
    payload = response.get_json()
    assert payload["error"] == "invalid_interpolation_value"
    assert payload["argument"] == "n"
