"""Tag index pages.

Every tag of every post becomes a page at ``tag/<tag>.html`` rendered through
the ``tag_index`` layout. Tags are used verbatim: no trimming, case folding or
path sanitizing.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from tagindex.data_primitives.document import PageData

if TYPE_CHECKING:
    from tagindex.site.defaults import FrontmatterDefaults
    from tagindex.site.site import Site

logger = logging.getLogger(__name__)

TAG_DIR: Final[str] = "tag"
TAG_EXT: Final[str] = ".html"
TAG_LAYOUT: Final[str] = "tag_index"
DEFAULTS_SCOPE: Final[str] = "categories"


def collect_tags(posts: Iterable[Any]) -> list[str]:
    """Return every tag occurrence, in post order then in each post's tag order.

    Duplicates are kept. A post without tags contributes nothing; a bare
    string is a single tag.
    """
    tags: list[str] = []
    for post in posts:
        post_tags = getattr(post, "tags", None)
        if isinstance(post_tags, str):
            tags.append(post_tags)
        elif post_tags:
            tags.extend(post_tags)
    return tags


class TagPageDefaults:
    """Fallback for tag page attributes that are not set explicitly.

    ``layout`` is always ``tag_index``; every other key is looked up in the
    site's front-matter defaults for the ``categories`` scope.
    """

    def __init__(self, defaults: FrontmatterDefaults, relative_path: str) -> None:
        self._defaults = defaults
        self._relative_path = relative_path

    def resolve(self, key: str) -> Any:
        if key == "layout":
            return TAG_LAYOUT
        return self._defaults.find(self._relative_path, DEFAULTS_SCOPE, key)


class TagPage:
    """A generated page listing the posts for one tag."""

    dir: Final[str] = TAG_DIR
    ext: Final[str] = TAG_EXT

    def __init__(self, site: Site, tag: str) -> None:
        self.site_source: Path = site.source
        self.tag = tag
        self.basename = tag
        self.name = tag + TAG_EXT
        self.data = PageData({"tag": tag}, resolver=TagPageDefaults(site.frontmatter_defaults, self.relative_path))

    @property
    def relative_path(self) -> str:
        return f"{TAG_DIR}/{self.name}"

    @property
    def output_path(self) -> str:
        return self.relative_path

    @property
    def layout(self) -> Any:
        return self.data.get("layout")

    def __repr__(self) -> str:
        return f"TagPage(tag={self.tag!r}, path={self.relative_path!r})"


class TagPageGenerator:
    """Adds one tag page per tag occurrence to the site."""

    def generate(self, site: Site) -> None:
        tags = collect_tags(site.posts)
        site.pages.extend(TagPage(site, tag) for tag in tags)
        logger.info("Generated %d tag pages for %d distinct tags", len(tags), len(set(tags)))
