"""
Pytest fixtures for check-release tests.

GitHub is replaced by an httpx.MockTransport serving canned release responses.
"""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from check_release.config import GitHubConfig
from check_release.github import GitHubReleases

# Every variable the config and version modules read
MANAGED_ENV = (
    "CHECK_RELEASE_OWNER",
    "CHECK_RELEASE_REPO",
    "CHECK_RELEASE_CONFIG",
    "CHECK_RELEASE_TIMEOUT_S",
    "CHECK_RELEASE_VERSION",
    "GITHUB_REPOSITORY",
    "GITHUB_API_URL",
    "GITHUB_TOKEN",
    "GH_TOKEN",
)

RELEASE_PATH = "/repos/acme/widget/releases/tags/v1.2.3"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Isolate tests from the caller's environment and working directory."""
    for name in MANAGED_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def github_config() -> GitHubConfig:
    return GitHubConfig(owner="acme", repo="widget", token="t0ken")


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_releases(
    github_config: GitHubConfig,
    requests_seen: list[httpx.Request],
) -> Callable[..., GitHubReleases]:
    """
    Build a GitHubReleases backed by a canned response.

    Pass either `status`/`json` for a fixed answer, or `handler` for full control.
    """

    def factory(
        *,
        status: int = 200,
        json: object = None,
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
    ) -> GitHubReleases:
        def respond(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            if handler is not None:
                return handler(request)
            return httpx.Response(status, json=json)

        client = httpx.Client(
            base_url=github_config.api_url,
            transport=httpx.MockTransport(respond),
        )
        return GitHubReleases(github_config, client=client)

    return factory


def release_body(*names: str) -> dict:
    """A minimal GitHub release JSON body with the given asset names."""
    return {
        "tag_name": "v1.2.3",
        "assets": [
            {"name": name, "size": 1024, "browser_download_url": f"https://example.invalid/{name}"}
            for name in names
        ],
    }
