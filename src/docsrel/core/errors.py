"""Exceptions raised by docsrel."""


class DocsrelError(Exception):
    """Base class for docsrel errors."""

    pass


class ReleaseNotFoundError(DocsrelError):
    """The release does not exist or has no documentation archive."""

    def __init__(self, project: str, tag: str):
        self.project = project
        self.tag = tag
        super().__init__(f"Release {tag} not found for {project}")


class GitHubError(DocsrelError):
    """Unexpected response from the GitHub API."""

    pass


class InvalidTagError(DocsrelError, ValueError):
    """A release tag is not a semantic version."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Invalid version tag: {tag!r}")


class ConfigError(DocsrelError):
    """Invalid or missing configuration."""

    pass
