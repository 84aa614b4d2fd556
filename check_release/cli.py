"""
Command-line entry point.

Usage: check-release <suffix> [<suffix> ...]

Every argument is a filename suffix; there are no flags, so suffixes may
start with a dash.

Exit codes:
  0 - No release for v<version>, or no matching assets (proceed with build)
  1 - Matching assets exist, or the check could not be completed
  2 - No suffixes given
"""

from __future__ import annotations

import sys
from typing import Sequence

from .config import GitHubConfig
from .errors import CheckReleaseError, ReleaseConflictError, UsageError
from .github import GitHubReleases
from .guard import check_release, normalize_suffixes
from .version import resolve_version

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        suffixes = normalize_suffixes(argv)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Usage: check-release <suffix> [<suffix> ...]", file=sys.stderr)
        return EXIT_USAGE

    try:
        config = GitHubConfig.from_env()
        with GitHubReleases(config) as releases:
            check_release(suffixes, releases=releases, resolve_version=resolve_version)
    except ReleaseConflictError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(f"  Remove these assets from {e.tag} first: {', '.join(e.matches)}", file=sys.stderr)
        return EXIT_FAILED
    except CheckReleaseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
