"""
Refuse to build when the current release already has matching assets.

A release blocks the build if any of its assets ends with any of the suffixes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Protocol, Sequence

from .errors import ReleaseConflictError, UsageError
from .github import Asset, Release

LOG_PREFIX = "[check-release]"


class ReleaseLookup(Protocol):
    def get_release_by_tag(self, tag: str) -> Release | None: ...


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a passing check."""

    tag: str
    release_exists: bool


def log(message: str) -> None:
    print(f"{LOG_PREFIX} {message}", flush=True)


def strip_quotes(token: str) -> str:
    """Remove at most one leading and one trailing apostrophe."""
    if token.startswith("'"):
        token = token[1:]
    if token.endswith("'"):
        token = token[:-1]
    return token


def normalize_suffixes(argv: Sequence[str]) -> list[str]:
    """Turn raw CLI tokens into suffixes, undoing quoting some shells leave in place."""
    suffixes = [strip_quotes(arg) for arg in argv]
    if not suffixes:
        raise UsageError("no input were received")
    return suffixes


def matching_assets(assets: Iterable[Asset], suffixes: Sequence[str]) -> list[str]:
    """Names of assets ending with any of the suffixes, in asset order."""
    return [asset.name for asset in assets if any(asset.name.endswith(s) for s in suffixes)]


def has_conflict(assets: Iterable[Asset], suffixes: Sequence[str]) -> bool:
    return any(asset.name.endswith(s) for asset in assets for s in suffixes)


def check_release(
    suffixes: Sequence[str],
    *,
    releases: ReleaseLookup,
    resolve_version: Callable[[], str],
) -> CheckResult:
    """
    Check the release for the current version against the suffixes.

    Raises:
        UsageError: If no suffixes were given.
        ReleaseConflictError: If any asset of release v<version> ends with any suffix.
    """
    if not suffixes:
        raise UsageError("no input were received")

    tag = f"v{resolve_version()}"
    release = releases.get_release_by_tag(tag)

    if release is None:
        log(f"Tag {tag} does not exist, proceeding...")
        return CheckResult(tag=tag, release_exists=False)

    if has_conflict(release.assets, suffixes):
        matches = matching_assets(release.assets, suffixes)
        raise ReleaseConflictError(tag, matches)

    log(f"Tag {tag} has no conflicting assets, proceeding...")
    return CheckResult(tag=tag, release_exists=True)
