"""
Pre-release guard for GitHub release assets.

Checks whether the release tagged `v<version>` already carries assets that a
build is about to publish.
"""

from .errors import (
    CheckReleaseError,
    ConfigError,
    ReleaseConflictError,
    TransportError,
    UsageError,
    VersionResolutionError,
)
from .guard import CheckResult, check_release, has_conflict, matching_assets, normalize_suffixes

__all__ = [
    "CheckReleaseError",
    "CheckResult",
    "ConfigError",
    "ReleaseConflictError",
    "TransportError",
    "UsageError",
    "VersionResolutionError",
    "check_release",
    "has_conflict",
    "matching_assets",
    "normalize_suffixes",
]
