"""tagindex: tag index pages for a static blog build."""

from tagindex.generators.tags import TagPage, TagPageGenerator, collect_tags
from tagindex.site.site import Site

__version__ = "0.1.0"
__all__ = [
    "Site",
    "TagPage",
    "TagPageGenerator",
    "collect_tags",
]
