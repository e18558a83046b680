"""Application factory exposing the translation resolver over HTTP."""

from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import BadRequest

from transresolver.config.loader import build_resolver
from transresolver.core.errors import TranslationError
from transresolver.core.resolver import Resolver
from transresolver.version import get_project_version

from .http import ProblemResponse, problem_response
from .routes import register_routes

_LOGGER = logging.getLogger(__name__)


def create_app(resolver: Resolver | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__)
    app.extensions["transresolver"] = resolver or build_resolver()

    register_routes(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        current: Resolver = app.extensions["transresolver"]
        payload = {
            "status": "ok",
            "version": get_project_version(),
            "default_locale": current.default_locale,
            "available_locales": list(current.available_locales()),
        }
        return jsonify(payload)

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        """Return consistent JSON responses for malformed payloads."""

        message = error.description or "Invalid request"
        return problem_response("bad_request", status=400, message=message).to_response()

    @app.errorhandler(TranslationError)
    def handle_translation_error(error: TranslationError):
        """Surface resolver failures with their diagnostic fields."""

        problem = ProblemResponse.from_translation_error(error)
        _LOGGER.info("Translation request failed (%s): %s", problem.error, error)
        return problem.to_response()

    @app.errorhandler(ValueError)
    def handle_value_error(error: ValueError):
        """Gracefully surface other validation errors to clients."""

        return problem_response(
            "validation_error", status=400, message=str(error)
        ).to_response()

    return app


__all__ = ["create_app"]
