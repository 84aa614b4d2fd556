"""Exceptions raised by check-release."""

from __future__ import annotations


class CheckReleaseError(Exception):
    """Base class for all check-release failures."""


class UsageError(CheckReleaseError):
    """No suffix arguments were given."""


class ConfigError(CheckReleaseError):
    """Repository owner/name could not be determined."""


class VersionResolutionError(CheckReleaseError):
    """The current project version could not be determined."""


class TransportError(CheckReleaseError):
    """The release lookup failed for a reason other than a missing release."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ReleaseConflictError(CheckReleaseError):
    """The release for the current tag already has matching assets."""

    def __init__(self, tag: str, matches: list[str]) -> None:
        super().__init__(f"Matches in tag {tag} were found. Please remove them before building.")
        self.tag = tag
        self.matches = matches
