"""Reads published posts from the posts directory."""

from __future__ import annotations

import datetime
import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import frontmatter
import yaml

from tagindex.data_primitives.document import Post
from tagindex.exceptions import PostParsingError

logger = logging.getLogger(__name__)

POST_FILENAME_RE = re.compile(r"^(?P<date>\d{4}-\d{2}-\d{2})-(?P<title>.+)\.(?:md|markdown|html)$")


def normalize_tags(value: Any) -> tuple[str, ...]:
    """Turn a front-matter ``tags`` value into a tuple of tag names.

    A string is a space-separated list; a sequence is kept as is, in order,
    duplicates included. Anything missing gives an empty tuple.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(value.split())
    if isinstance(value, (list, tuple)):
        return tuple(str(tag) for tag in value if tag is not None)
    return (str(value),)


def _post_date(filename_date: str, metadata: Mapping[str, Any]) -> datetime.date:
    value = metadata.get("date")
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    return datetime.date.fromisoformat(filename_date)


def read_post(path: Path) -> Post | None:
    """Read a single post; returns ``None`` for unpublished or misnamed files."""
    match = POST_FILENAME_RE.match(path.name)
    if match is None:
        logger.debug("Skipping %s: not a dated post filename", path.name)
        return None

    try:
        document = frontmatter.load(str(path))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise PostParsingError(str(path), str(e)) from e

    metadata = dict(document.metadata)
    if metadata.get("published") is False:
        logger.debug("Skipping unpublished post %s", path.name)
        return None

    try:
        post_date = _post_date(match.group("date"), metadata)
    except ValueError as e:
        raise PostParsingError(str(path), str(e)) from e

    return Post(
        path=path,
        metadata=metadata,
        content=document.content,
        date=post_date,
        tags=normalize_tags(metadata.get("tags")),
    )


def load_posts(posts_dir: Path) -> list[Post]:
    """Load every published post directly under ``posts_dir``, oldest first."""
    if not posts_dir.is_dir():
        logger.info("Posts directory %s not found, no posts loaded", posts_dir)
        return []

    posts = []
    for path in sorted(posts_dir.iterdir()):
        if not path.is_file():
            continue
        post = read_post(path)
        if post is not None:
            posts.append(post)

    posts.sort(key=lambda p: (p.date, p.path.name))
    logger.info("Loaded %d posts from %s", len(posts), posts_dir)
    return posts
