from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest
import yaml

from tagindex.config.settings import SiteConfig
from tagindex.data_primitives.document import Post
from tagindex.site.site import Site


@pytest.fixture(autouse=True)
def _clean_tagindex_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("TAGINDEX_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _restore_package_logger():
    logger = logging.getLogger("tagindex")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """An empty site source directory with a ``_posts`` folder."""
    (tmp_path / "_posts").mkdir()
    return tmp_path


@pytest.fixture
def write_post(site_root: Path) -> Callable[..., Path]:
    """Write a post with the given front matter into ``_posts``."""

    def _write(filename: str, metadata: dict | None = None, body: str = "Body text.\n") -> Path:
        path = site_root / "_posts" / filename
        if metadata is None:
            path.write_text(body, encoding="utf-8")
        else:
            header = yaml.safe_dump(metadata, sort_keys=False)
            path.write_text(f"---\n{header}---\n{body}", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_site(tmp_path: Path) -> Callable[..., Site]:
    """Build a site around in-memory posts with the given defaults rules."""

    def _make(tag_lists: Iterable[Iterable[str] | None] = (), defaults: list[dict] | None = None) -> Site:
        posts = []
        for index, tags in enumerate(tag_lists):
            metadata = {} if tags is None else {"tags": list(tags)}
            posts.append(
                Post(
                    path=tmp_path / "_posts" / f"2024-01-{index + 1:02d}-post-{index}.md",
                    metadata=metadata,
                    tags=tuple(tags or ()),
                )
            )
        config = SiteConfig(source=tmp_path, defaults=defaults or [])
        return Site(config, posts=posts)

    return _make
