"""
Configuration for the release lookup.

Centralizes environment variable handling and the optional YAML config file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError

# --- Repository ---
# Explicit owner/repo overrides
ENV_OWNER = "CHECK_RELEASE_OWNER"
ENV_REPO = "CHECK_RELEASE_REPO"

# "owner/repo", set by GitHub Actions
ENV_GITHUB_REPOSITORY = "GITHUB_REPOSITORY"

# Path to a YAML config file with a `github: {owner, repo}` mapping
ENV_CONFIG_PATH = "CHECK_RELEASE_CONFIG"
DEFAULT_CONFIG_PATH = "check-release.yaml"


# --- API ---
ENV_API_URL = "GITHUB_API_URL"
DEFAULT_API_URL = "https://api.github.com"

# Optional; unauthenticated requests work for public repositories
ENV_TOKEN = "GITHUB_TOKEN"
ENV_TOKEN_FALLBACK = "GH_TOKEN"

ENV_TIMEOUT_S = "CHECK_RELEASE_TIMEOUT_S"
DEFAULT_TIMEOUT_S = 30


def env_str(name: str, default: str) -> str:
    """Get a string from an environment variable with a default."""
    return os.environ.get(name, default)


def env_int(name: str, default: int) -> int:
    """Get an integer from an environment variable with a default."""
    v = os.environ.get(name)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError as e:
        raise ConfigError(f"Environment variable {name} must be an integer, got {v!r}") from e


def env_optional(name: str, fallback: str | None = None) -> str | None:
    """Get a non-blank environment variable, trying a fallback name."""
    value = os.environ.get(name, "").strip()
    if not value and fallback:
        value = os.environ.get(fallback, "").strip()
    return value or None


def load_config_file(path: Path) -> dict:
    """Load the `github` section of a YAML config file, or {} if absent."""
    if not path.exists():
        return {}

    yaml = YAML()
    try:
        data = yaml.load(path)
    except (OSError, YAMLError) as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    github = data.get("github") or {}
    if not isinstance(github, dict):
        raise ConfigError(f"`github` in {path} must be a mapping")
    return github


def split_repository(value: str) -> tuple[str, str]:
    """Split an `owner/repo` string."""
    owner, sep, repo = value.strip().partition("/")
    if not sep or not owner or not repo or "/" in repo:
        raise ConfigError(f"Expected owner/repo, got {value!r}")
    return owner, repo


@dataclass(frozen=True)
class GitHubConfig:
    """Where to look up releases and how to authenticate."""

    owner: str
    repo: str
    api_url: str = DEFAULT_API_URL
    token: str | None = None
    timeout_s: int = DEFAULT_TIMEOUT_S

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_env(cls, config_path: Path | None = None) -> GitHubConfig:
        """
        Load configuration from environment variables and the config file.

        Owner/repo precedence: CHECK_RELEASE_OWNER/CHECK_RELEASE_REPO,
        then GITHUB_REPOSITORY, then the config file.

        Args:
            config_path: YAML config file. If None, CHECK_RELEASE_CONFIG or
                check-release.yaml in the working directory.
        """
        if config_path is None:
            config_path = Path(env_str(ENV_CONFIG_PATH, DEFAULT_CONFIG_PATH))

        owner = env_optional(ENV_OWNER)
        repo = env_optional(ENV_REPO)

        if not (owner and repo):
            if repository := env_optional(ENV_GITHUB_REPOSITORY):
                env_owner, env_repo = split_repository(repository)
                owner = owner or env_owner
                repo = repo or env_repo

        if not (owner and repo):
            github = load_config_file(config_path)
            owner = owner or github.get("owner")
            repo = repo or github.get("repo")

        if not owner or not repo:
            raise ConfigError(
                f"Repository not configured: set {ENV_OWNER}/{ENV_REPO}, "
                f"{ENV_GITHUB_REPOSITORY}, or github.owner/github.repo in {config_path}"
            )

        return cls(
            owner=str(owner),
            repo=str(repo),
            api_url=env_str(ENV_API_URL, DEFAULT_API_URL).rstrip("/"),
            token=env_optional(ENV_TOKEN, ENV_TOKEN_FALLBACK),
            timeout_s=env_int(ENV_TIMEOUT_S, DEFAULT_TIMEOUT_S),
        )
