"""Build-time page generators."""

from tagindex.generators.base import Generator
from tagindex.generators.tags import TagPage, TagPageDefaults, TagPageGenerator, collect_tags

__all__ = ["Generator", "TagPage", "TagPageDefaults", "TagPageGenerator", "collect_tags"]
