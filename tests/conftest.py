"""Shared fixtures: an in-memory GitHub releases API."""

import logging

import httpx
import pytest

from docsrel.core.github import GitHubClient
from docsrel.core.service import ReleaseService

API_BASE = "https://api.github.com"
ORG = "acme"


def make_release(
    tag: str,
    draft: bool = False,
    prerelease: bool = False,
    docs: bool = True,
) -> dict:
    """A GitHub release payload, with a docs.tar.gz asset unless docs=False."""
    assets = [
        {
            "name": "source.zip",
            "browser_download_url": f"https://github.com/{ORG}/x/releases/download/{tag}/source.zip",
        }
    ]
    if docs:
        assets.append(
            {
                "name": "docs.tar.gz",
                "browser_download_url": f"https://github.com/{ORG}/x/releases/download/{tag}/docs.tar.gz",
            }
        )
    return {
        "tag_name": tag,
        "draft": draft,
        "prerelease": prerelease,
        "assets": assets,
    }


def docs_url(tag: str) -> str:
    return f"https://github.com/{ORG}/x/releases/download/{tag}/docs.tar.gz"


class FakeGitHub:
    """Serves /repos/{org}/{repo}/releases[/tags/{tag}] from memory.

    Pagination honours per_page/page and sets a Link header with
    rel="next" while more pages remain.
    """

    def __init__(self) -> None:
        self.releases: dict[str, list[dict]] = {}
        self.failures: dict[tuple[str, int | str], int] = {}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.strip("/").split("/")
        if len(parts) < 4 or parts[0] != "repos" or parts[3] != "releases":
            return httpx.Response(404, json={"message": "Not Found"})

        repo = parts[2]
        if len(parts) == 4:
            return self._list(request, repo)
        if len(parts) >= 6 and parts[4] == "tags":
            return self._by_tag(repo, "/".join(parts[5:]))
        return httpx.Response(404, json={"message": "Not Found"})

    def _list(self, request: httpx.Request, repo: str) -> httpx.Response:
        items = self.releases.get(repo)
        if items is None:
            return httpx.Response(404, json={"message": "Not Found"})

        per_page = int(request.url.params.get("per_page", 30))
        page = int(request.url.params.get("page", 1))
        if (repo, page) in self.failures:
            return httpx.Response(self.failures[(repo, page)], json={"message": "error"})

        chunk = items[(page - 1) * per_page : page * per_page]
        headers = {}
        if page * per_page < len(items):
            next_url = request.url.copy_set_param("page", page + 1)
            headers["Link"] = f'<{next_url}>; rel="next"'
        return httpx.Response(200, json=chunk, headers=headers)

    def _by_tag(self, repo: str, tag: str) -> httpx.Response:
        if (repo, tag) in self.failures:
            return httpx.Response(self.failures[(repo, tag)], json={"message": "error"})
        for item in self.releases.get(repo, []):
            if item.get("tag_name") == tag:
                return httpx.Response(200, json=item)
        return httpx.Response(404, json={"message": "Not Found"})


@pytest.fixture
def github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def http_client(github: FakeGitHub):
    client = httpx.Client(base_url=API_BASE, transport=httpx.MockTransport(github.handler))
    yield client
    client.close()


@pytest.fixture
def service(http_client: httpx.Client):
    with ReleaseService(ORG, client=GitHubClient(client=http_client)) as svc:
        yield svc


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handlers and levels installed by setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
