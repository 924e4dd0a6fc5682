"""Centralized exceptions for the tagindex application."""

from __future__ import annotations

from pathlib import Path


class TagIndexError(Exception):
    """Base exception for all tagindex errors."""


class SiteNotFoundError(TagIndexError):
    """Raised when the site source directory does not exist."""

    def __init__(self, source: Path) -> None:
        self.source = source
        super().__init__(f"Site source directory not found: {source}")


class PostParsingError(TagIndexError):
    """Raised when a post's front matter cannot be parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse post at '{path}': {reason}")
