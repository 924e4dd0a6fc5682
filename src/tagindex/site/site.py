"""The site a build runs against."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from tagindex.config.loader import load_site_config
from tagindex.config.settings import SiteConfig
from tagindex.exceptions import SiteNotFoundError
from tagindex.site.defaults import FrontmatterDefaults
from tagindex.site.loader import load_posts
from tagindex.site.registry import PageRegistry

if TYPE_CHECKING:
    from tagindex.data_primitives.document import Post
    from tagindex.generators.base import Generator

logger = logging.getLogger(__name__)


class Site:
    """Posts, pages and front-matter defaults for one build.

    Generators run once per build, after the posts are read and before the
    pages are rendered.
    """

    def __init__(
        self,
        config: SiteConfig,
        *,
        posts: Iterable[Post] | None = None,
        generators: Iterable[Generator] | None = None,
    ) -> None:
        self.config = config
        self.posts: list[Post] = list(posts) if posts is not None else []
        self._posts_preloaded = posts is not None
        self.pages = PageRegistry()
        self.frontmatter_defaults = FrontmatterDefaults(config.defaults)
        if generators is None:
            from tagindex.generators.tags import TagPageGenerator

            generators = [TagPageGenerator()]
        self.generators: list[Generator] = list(generators)

    @classmethod
    def from_source(cls, source: Path) -> Site:
        source = source.expanduser().resolve()
        if not source.is_dir():
            raise SiteNotFoundError(source)
        return cls(load_site_config(source))

    @property
    def source(self) -> Path:
        return self.config.source

    def reset(self) -> None:
        self.pages.clear()
        if not self._posts_preloaded:
            self.posts = []

    def read(self) -> None:
        if self._posts_preloaded:
            return
        self.posts = load_posts(self.config.abs_posts_dir)

    def generate(self) -> None:
        for generator in self.generators:
            logger.debug("Running generator %s", type(generator).__name__)
            generator.generate(self)

    def process(self) -> None:
        """Run a full build up to, but not including, rendering."""
        self.reset()
        self.read()
        self.generate()
        logger.info("Site %s: %d posts, %d generated pages", self.source, len(self.posts), len(self.pages))
