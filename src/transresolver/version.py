"""Expose the installed project version."""

from __future__ import annotations

import tomllib
from functools import lru_cache
from importlib import metadata
from pathlib import Path
from typing import Final

DISTRIBUTION_NAME: Final = "transresolver"
PYPROJECT_PATH: Final = Path(__file__).resolve().parents[2] / "pyproject.toml"


@lru_cache(maxsize=1)
def get_project_version() -> str:
    """Return the distribution version, reading ``pyproject.toml`` for source checkouts."""

    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return read_pyproject_version(PYPROJECT_PATH)


def read_pyproject_version(path: Path) -> str:
    if not path.exists():
        raise RuntimeError(f"Unable to locate project metadata at {path}")

    with path.open("rb") as handle:
        project = tomllib.load(handle).get("project", {})

    version = project.get("version")
    if not version:
        raise RuntimeError(f"No [project] version declared in {path}")
    return str(version)


__all__ = ["PYPROJECT_PATH", "get_project_version", "read_pyproject_version"]
