"""Data models for docsrel."""

from docsrel.models.release import DOCS_ASSET_NAME, Release, to_release

__all__ = ["DOCS_ASSET_NAME", "Release", "to_release"]
