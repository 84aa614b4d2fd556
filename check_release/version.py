"""
Resolve the current project version.

Reads CHECK_RELEASE_VERSION if set, otherwise the first project manifest
found in the working directory.
"""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Callable

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import VersionResolutionError

ENV_VERSION = "CHECK_RELEASE_VERSION"


def _from_package_json(path: Path) -> object:
    return json.loads(path.read_text(encoding="utf-8")).get("version")


def _from_pyproject(path: Path) -> object:
    return tomllib.loads(path.read_text(encoding="utf-8")).get("project", {}).get("version")


def _from_cargo(path: Path) -> object:
    return tomllib.loads(path.read_text(encoding="utf-8")).get("package", {}).get("version")


def _from_yaml(path: Path) -> object:
    data = YAML().load(path)
    return data.get("version") if isinstance(data, dict) else None


# Checked in order; the first manifest that exists wins
MANIFESTS: list[tuple[str, Callable[[Path], object]]] = [
    ("package.json", _from_package_json),
    ("pyproject.toml", _from_pyproject),
    ("Cargo.toml", _from_cargo),
    ("version.yaml", _from_yaml),
    ("index.yaml", _from_yaml),
]


def normalize_version(value: str) -> str:
    """Strip whitespace and a leading `v` so tags never come out as `vv1.2.3`."""
    value = value.strip()
    if value[:1] in ("v", "V"):
        value = value[1:]
    if not value:
        raise VersionResolutionError("Version string is empty")
    return value


def read_manifest_version(path: Path, reader: Callable[[Path], object]) -> str:
    """Read the version from a single manifest file."""
    try:
        version = reader(path)
    except (OSError, ValueError, AttributeError, YAMLError) as e:
        # json.JSONDecodeError and tomllib.TOMLDecodeError are ValueErrors
        raise VersionResolutionError(f"Unable to read version from {path}: {e}") from e

    if version is None:
        raise VersionResolutionError(f"No version found in {path}")
    if not isinstance(version, str):
        raise VersionResolutionError(
            f"Version in {path} must be a string, got {version!r}; quote it, e.g. version: '{version}'"
        )
    return normalize_version(version)


def resolve_version(root: Path | None = None) -> str:
    """
    Return the current project version.

    Args:
        root: Directory to search for manifests. Defaults to the working directory.

    Raises:
        VersionResolutionError: If no version can be determined.
    """
    override = os.environ.get(ENV_VERSION, "").strip()
    if override:
        return normalize_version(override)

    root = root or Path.cwd()
    for name, reader in MANIFESTS:
        path = root / name
        if path.is_file():
            return read_manifest_version(path, reader)

    names = ", ".join(name for name, _ in MANIFESTS)
    raise VersionResolutionError(f"No version found: set {ENV_VERSION} or add one of {names} to {root}")
