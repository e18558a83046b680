"""Expose catalogues and key resolution to HTTP consumers."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, current_app, jsonify, request
from markupsafe import Markup
from pydantic import ValidationError

from transresolver.app.http import describe_error, problem_response
from transresolver.app.models import ResolveRequest, format_validation_error
from transresolver.app.request_parser import parse_json_object, resolve_request_locale
from transresolver.core.context import with_locale
from transresolver.core.errors import TranslationError
from transresolver.core.keys import join_key, normalize_key
from transresolver.core.resolver import Resolver

blueprint = Blueprint("translations", __name__, url_prefix="/api/v1/translations")


def current_resolver() -> Resolver:
    return current_app.extensions["transresolver"]


def _catalogue_payload(resolver: Resolver, locale: str | None) -> dict[str, Any]:
    with with_locale(locale):
        resolved = resolver.resolve_locale()
        translations = resolver.catalog_tree()

    fallback_locale = resolver.default_locale
    return {
        "locale": resolved,
        "available_locales": list(resolver.available_locales()),
        "translations": translations,
        "fallback": {
            "locale": fallback_locale,
            "translations": resolver.catalog_tree(fallback_locale),
        },
    }


def _entry(key: Any, value: Any, separator: str) -> dict[str, Any]:
    display_key = join_key(normalize_key(key, separator=separator), separator)
    if isinstance(value, TranslationError):
        code, _, details = describe_error(value)
        return {
            "key": display_key,
            "error": {"error": code, "message": str(value), **details},
        }
    return {
        "key": display_key,
        "value": value,
        "html_safe": isinstance(value, Markup),
    }


@blueprint.get("/")
def get_default_translations():
    """Return the catalogue for the negotiated or default locale."""

    resolver = current_resolver()
    locale = resolve_request_locale(request, resolver.available_locales())
    return jsonify(_catalogue_payload(resolver, locale)), 200


@blueprint.get("/<locale>")
def get_locale_translations(locale: str):
    """Return the catalogue for a specific locale slug."""

    return jsonify(_catalogue_payload(current_resolver(), locale)), 200


@blueprint.post("/resolve")
def resolve_translations():
    """Resolve one key, or a batch of keys, with lookup options."""

    resolver = current_resolver()
    payload = parse_json_object(request)

    try:
        resolve_request = ResolveRequest.model_validate(payload)
    except ValidationError as error:
        return problem_response(
            "validation_error", status=400, message=format_validation_error(error)
        ).to_response()

    locale = resolve_request_locale(request, resolver.available_locales(), payload)
    options = resolve_request.options()

    with with_locale(locale):
        resolved_locale = resolver.resolve_locale()
        if resolve_request.is_batch:
            values = resolver.resolve_many(resolve_request.keys or [], **options)
            results = [
                _entry(key, value, resolver.separator)
                for key, value in zip(resolve_request.keys or [], values)
            ]
            return jsonify({"locale": resolved_locale, "results": results}), 200

        value = resolver.resolve(resolve_request.key, **options)

    entry = _entry(resolve_request.key, value, resolver.separator)
    return jsonify({"locale": resolved_locale, **entry}), 200
