"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Make ``src`` importable when pytest runs without an editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from transresolver.app import create_app  # noqa: E402
from transresolver.config.settings import (  # noqa: E402
    DEFAULT_LOCALE_ENV,
    MISSING_TRANSLATIONS_ENV,
    SETTINGS_ENV,
    load_settings,
)
from transresolver.core import InMemoryCatalog, Resolver  # noqa: E402

SAMPLE_TRANSLATIONS = {
    "en": {
        "hello": "Hello world",
        "welcome": "Welcome, %{name}!",
        "price": "%{price} €",
        "items": {"one": "one item", "other": "%{count} items"},
        "inbox": {"zero": "no messages", "one": "one message", "other": "%{count} messages"},
        "products": {"index": {"title": "Products"}},
        "title_html": "<b>%{name}</b>",
        "greeting": {"html": "<p>%{name}</p>"},
        "errors": {"messages": {"blank": "can't be blank"}},
    },
    "de": {"hello": "Hallo Welt"},
    "fr": {"items": {"one": "%{count} article", "other": "%{count} articles"}},
}


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop environment overrides and the cached settings around each test."""

    for name in (SETTINGS_ENV, DEFAULT_LOCALE_ENV, MISSING_TRANSLATIONS_ENV):
        monkeypatch.delenv(name, raising=False)
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


@pytest.fixture()
def catalog() -> InMemoryCatalog:
    """Return an in-memory catalogue populated with sample translations."""

    return InMemoryCatalog(SAMPLE_TRANSLATIONS)


@pytest.fixture()
def resolver(catalog: InMemoryCatalog) -> Resolver:
    """Return a strict resolver where German falls back to English."""

    return Resolver(catalog, default_locale="en", locale_fallbacks={"de": ["en"]})


@pytest.fixture()
def app() -> Flask:
    """Return a configured Flask application backed by the bundled catalogues."""

    application = create_app()
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()
