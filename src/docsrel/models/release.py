"""Release data model."""

from dataclasses import dataclass


DOCS_ASSET_NAME = "docs.tar.gz"


@dataclass(frozen=True)
class Release:
    """A published release carrying a documentation archive."""

    tag: str
    docs_url: str  # browser download URL of docs.tar.gz

    @property
    def version(self) -> str:
        """Get version string (tag without 'v' prefix if present)."""
        tag = self.tag
        if tag.startswith("v"):
            return tag[1:]
        return tag

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {"tag": self.tag, "docs_url": self.docs_url}


def to_release(data: dict) -> Release | None:
    """Map a GitHub release payload to a Release.

    Returns None for drafts, prereleases and releases without a
    docs.tar.gz asset. Missing draft/prerelease fields count as False.
    """
    if data.get("draft") or data.get("prerelease"):
        return None

    docs_url = ""
    for asset in data.get("assets") or []:
        if asset.get("name") == DOCS_ASSET_NAME:
            docs_url = asset.get("browser_download_url") or ""
            break

    if not docs_url:
        return None

    return Release(tag=data.get("tag_name") or "", docs_url=docs_url)
