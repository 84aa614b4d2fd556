"""GitHub release lookup."""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx

from .config import GitHubConfig
from .errors import TransportError

API_VERSION = "2022-11-28"


@dataclass(frozen=True)
class Asset:
    """A file attached to a release."""

    name: str
    size: int | None = None
    download_url: str | None = None


@dataclass(frozen=True)
class Release:
    """A release and its assets, in the order GitHub returns them."""

    tag: str
    assets: list[Asset] = field(default_factory=list)

    @property
    def asset_names(self) -> list[str]:
        return [asset.name for asset in self.assets]


def parse_assets(release: object) -> list[Asset]:
    """Build Asset entries from a release JSON body."""
    if not isinstance(release, dict) or not isinstance(release.get("assets"), list):
        raise TransportError("Malformed release response: missing assets list")

    assets = []
    for item in release["assets"]:
        if not isinstance(item, dict) or not isinstance(item.get("name"), str):
            raise TransportError(f"Malformed release asset: {item!r}")
        assets.append(
            Asset(
                name=item["name"],
                size=item.get("size"),
                download_url=item.get("browser_download_url"),
            )
        )
    return assets


def create_client(config: GitHubConfig) -> httpx.Client:
    """Create an httpx client for the GitHub REST API."""
    headers = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": API_VERSION,
    }
    if config.token:
        headers["Authorization"] = f"Bearer {config.token}"

    return httpx.Client(
        base_url=config.api_url,
        headers=headers,
        timeout=config.timeout_s,
        follow_redirects=True,
    )


class GitHubReleases:
    """
    Read-only access to a repository's releases.

    A client passed in is used as-is and left open; otherwise one is created
    from the config and closed by close() or on leaving the context manager.
    """

    def __init__(self, config: GitHubConfig, client: httpx.Client | None = None) -> None:
        self.config = config
        self._owns_client = client is None
        self.client = client if client is not None else create_client(config)

    def __enter__(self) -> GitHubReleases:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def release_url(self, tag: str) -> str:
        return f"/repos/{self.config.owner}/{self.config.repo}/releases/tags/{tag}"

    def get_release_by_tag(self, tag: str) -> Release | None:
        """
        Fetch the release for a tag.

        Returns:
            The release, or None if GitHub answers 404.

        Raises:
            TransportError: On network errors, any other non-200 status,
                or a response body without an assets list.
        """
        try:
            resp = self.client.get(self.release_url(tag))
        except httpx.HTTPError as e:
            raise TransportError(f"Request for release {tag} in {self.config.repository} failed: {e}") from e

        if resp.status_code == 404:
            return None

        if resp.status_code != 200:
            raise TransportError(
                f"GitHub returned HTTP {resp.status_code} for release {tag} "
                f"in {self.config.repository}: {resp.text[:200]}",
                status_code=resp.status_code,
            )

        try:
            body = resp.json()
        except ValueError as e:
            raise TransportError(f"Release {tag} response is not valid JSON: {e}", status_code=200) from e

        return Release(tag=tag, assets=parse_assets(body))
