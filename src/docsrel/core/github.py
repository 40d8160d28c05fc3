"""GitHub API client for fetching releases."""

from urllib.parse import quote

import httpx

from docsrel import __version__
from docsrel.core.config import DEFAULT_TIMEOUT, GITHUB_API_BASE
from docsrel.core.errors import GitHubError, ReleaseNotFoundError


MAX_PER_PAGE = 100


class GitHubClient:
    """Client for the GitHub releases API.

    Pass ``client`` to reuse an existing httpx.Client (its base URL and
    headers are used as-is); otherwise one is created and owned by this
    instance. No request is made until a method is called.
    """

    def __init__(
        self,
        token: str | None = None,
        api_url: str = GITHUB_API_BASE,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ):
        self._owns_client = client is None
        if client is None:
            headers = {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": f"docsrel/{__version__}",
            }
            if token:
                headers["Authorization"] = f"Bearer {token}"
            client = httpx.Client(base_url=api_url, headers=headers, timeout=timeout)
        self.client = client

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def list_releases_page(
        self,
        owner: str,
        repo: str,
        url: str | None = None,
        per_page: int = MAX_PER_PAGE,
    ) -> tuple[list[dict], str | None]:
        """Get one page of releases for a repository.

        Args:
            owner: Repository owner (organization)
            repo: Repository name
            url: "next" URL from a previous page; None for the first page
            per_page: Page size, at most 100

        Returns:
            The release payloads of the page and the URL of the next page,
            or None when this is the last one.
        """
        if url is None:
            response = self.client.get(
                f"/repos/{owner}/{repo}/releases",
                params={"per_page": min(per_page, MAX_PER_PAGE), "page": 1},
            )
        else:
            response = self.client.get(url)
        response.raise_for_status()

        data = response.json()
        if not isinstance(data, list):
            raise GitHubError(
                f"Expected a list of releases for {owner}/{repo}, got {type(data).__name__}"
            )

        next_url = response.links.get("next", {}).get("url")
        return data, next_url

    def get_release_by_tag(self, owner: str, repo: str, tag: str) -> dict:
        """Get a specific release by tag name."""
        response = self.client.get(
            f"/repos/{owner}/{repo}/releases/tags/{quote(tag, safe='')}"
        )

        if response.status_code == 404:
            raise ReleaseNotFoundError(f"{owner}/{repo}", tag)
        response.raise_for_status()

        data = response.json()
        if not isinstance(data, dict):
            raise GitHubError(
                f"Expected a release object for {owner}/{repo}@{tag}, got {type(data).__name__}"
            )
        return data
