"""Settings and catalogue loading for the translation resolver."""

from .loader import build_resolver, load_bundled_catalog, load_catalog
from .schema import ConfigurationError, ResolverSettings
from .settings import load_settings

__all__ = [
    "ConfigurationError",
    "ResolverSettings",
    "build_resolver",
    "load_bundled_catalog",
    "load_catalog",
    "load_settings",
]
