"""Release queries: fetch, keep releases with docs, sort by version."""

from typing import Protocol

from docsrel.core.config import DEFAULT_TIMEOUT, GITHUB_API_BASE, DocsrelConfig
from docsrel.core.errors import ReleaseNotFoundError
from docsrel.core.github import MAX_PER_PAGE, GitHubClient
from docsrel.core.logging_config import get_logger
from docsrel.core.version import sort_releases
from docsrel.models.release import Release, to_release

logger = get_logger(__name__)


class ReleaseProvider(Protocol):
    """Interface consumers of release listings depend on."""

    def list_releases(self, project: str, all: bool = False) -> list[Release]:
        ...

    def get_release(self, project: str, tag: str) -> Release:
        ...


class ReleaseService:
    """Documentation releases of the projects of one GitHub organization.

    Usage:
        with ReleaseService("my-org", token="ghp_...") as service:
            releases = service.list_releases("my-project", all=True)
            release = service.get_release("my-project", "v1.2.0")
    """

    def __init__(
        self,
        org: str,
        token: str | None = None,
        client: GitHubClient | None = None,
        api_url: str = GITHUB_API_BASE,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.org = org
        self._owns_client = client is None
        if client is None:
            client = GitHubClient(token=token, api_url=api_url, timeout=timeout)
        self.client = client

    @classmethod
    def from_config(cls, config: DocsrelConfig) -> "ReleaseService":
        """Create a service from a validated configuration."""
        config.validate()
        return cls(
            config.org,
            token=config.token,
            api_url=config.api_url,
            timeout=config.timeout,
        )

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def list_releases(self, project: str, all: bool = False) -> list[Release]:
        """List the releases of a project that carry a docs.tar.gz asset.

        Only the latest page (up to 100 releases) is fetched unless
        ``all`` is True, in which case every page is followed.

        Returns:
            Eligible releases sorted by ascending semantic version.

        Raises:
            InvalidTagError: If an eligible release has a non-semver tag.
            httpx.HTTPError: If any page request fails.
        """
        if not project:
            raise ValueError("project must not be empty")

        releases: list[Release] = []
        next_url: str | None = None
        page = 0
        while True:
            items, next_url = self.client.list_releases_page(
                self.org, project, url=next_url, per_page=MAX_PER_PAGE
            )
            page += 1
            logger.debug(
                "fetched_releases_page",
                org=self.org,
                project=project,
                page=page,
                count=len(items),
            )

            for item in items:
                release = to_release(item)
                if release is None:
                    logger.debug(
                        "release_skipped", project=project, tag=item.get("tag_name")
                    )
                    continue
                releases.append(release)

            if not all or next_url is None:
                break

        result = sort_releases(releases)
        logger.info("releases_listed", org=self.org, project=project, count=len(result))
        return result

    def get_release(self, project: str, tag: str) -> Release:
        """Get one release of a project by its exact tag.

        Raises:
            ReleaseNotFoundError: If the release does not exist, is a draft
                or prerelease, or has no docs.tar.gz asset.
            httpx.HTTPError: If the request fails for any other reason.
        """
        if not project:
            raise ValueError("project must not be empty")
        if not tag:
            raise ValueError("tag must not be empty")

        data = self.client.get_release_by_tag(self.org, project, tag)
        release = to_release(data)
        if release is None:
            logger.debug("release_not_eligible", project=project, tag=tag)
            raise ReleaseNotFoundError(f"{self.org}/{project}", tag)
        return release
