from flask.testing import FlaskClient

from transresolver.version import get_project_version


def test_health_endpoint_reports_resolver_state(client: FlaskClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["status"] == "ok"
    assert payload["version"] == get_project_version()
    assert payload["default_locale"] == "en"
    assert payload["available_locales"] == ["en", "pt", "fr"]
