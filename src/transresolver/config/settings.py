"""Settings loader wrapping the YAML defaults and environment overrides."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from transresolver.core.handlers import MissingTranslationMode

from .schema import ConfigurationError, ResolverSettings

_LOGGER = logging.getLogger(__name__)

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
SETTINGS_FILE = CONFIG_DIRECTORY / "settings.yaml"

SETTINGS_ENV = "TRANSRESOLVER_SETTINGS"
DEFAULT_LOCALE_ENV = "TRANSRESOLVER_DEFAULT_LOCALE"
MISSING_TRANSLATIONS_ENV = "TRANSRESOLVER_MISSING_TRANSLATIONS"


def load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path.name} must define a mapping at the top level")
    return data


def settings_file() -> Path:
    """Return the settings file, honouring ``TRANSRESOLVER_SETTINGS``."""

    override = os.getenv(SETTINGS_ENV)
    return Path(override) if override else SETTINGS_FILE


def _environment_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}

    locale = os.getenv(DEFAULT_LOCALE_ENV, "").strip()
    if locale:
        overrides["default_locale"] = locale

    mode = os.getenv(MISSING_TRANSLATIONS_ENV, "").strip().lower()
    if mode:
        if mode in {item.value for item in MissingTranslationMode}:
            overrides["missing_translations"] = mode
        else:
            _LOGGER.warning("Ignoring invalid value for %s: %s", MISSING_TRANSLATIONS_ENV, mode)

    return overrides


@lru_cache(maxsize=1)
def load_settings() -> ResolverSettings:
    """Load and cache the resolver settings."""

    path = settings_file()
    if not path.exists():
        raise FileNotFoundError(f"Resolver settings not found: {path}")

    raw_settings = load_yaml(path)
    raw_settings.update(_environment_overrides())

    try:
        return ResolverSettings.model_validate(raw_settings)
    except ValidationError as error:
        raise ConfigurationError(f"Settings validation failed: {error}") from error


__all__ = [
    "CONFIG_DIRECTORY",
    "DEFAULT_LOCALE_ENV",
    "MISSING_TRANSLATIONS_ENV",
    "SETTINGS_ENV",
    "SETTINGS_FILE",
    "load_settings",
    "load_yaml",
    "settings_file",
]
