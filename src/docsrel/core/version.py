"""Semantic version parsing and ordering of release tags."""

import semver

from docsrel.core.errors import InvalidTagError
from docsrel.models.release import Release


def parse_version(tag: str) -> semver.Version:
    """Parse a release tag as a semantic version.

    Accepts an optional leading 'v' and short "MAJOR[.MINOR]" forms.
    Pre-release identifiers follow semver precedence ("1.0.0-1" and
    "1.0.0-alpha.beta" sort before "1.0.0"). Build metadata after '+'
    does not take part in ordering and is dropped.

    Examples:
        >>> parse_version("v1.10.0") > parse_version("v1.2.0")
        True
        >>> parse_version("1.0.0-rc.1") < parse_version("1.0.0")
        True

    Raises:
        InvalidTagError: If the tag is not a version.
    """
    base, _, _ = tag.strip().partition("+")
    if base[:1] in ("v", "V"):
        base = base[1:]
    if not base:
        raise InvalidTagError(tag)

    try:
        return semver.Version.parse(base, optional_minor_and_patch=True)
    except ValueError as e:
        raise InvalidTagError(tag) from e


def sort_releases(releases: list[Release]) -> list[Release]:
    """Return releases sorted by ascending version of their tags."""
    keyed = [(parse_version(r.tag), r) for r in releases]
    keyed.sort(key=lambda item: item[0])
    return [r for _, r in keyed]
