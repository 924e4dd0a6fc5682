"""Site model and its collaborators."""

from tagindex.site.defaults import FrontmatterDefaults
from tagindex.site.loader import load_posts, normalize_tags, read_post
from tagindex.site.registry import PageRegistry
from tagindex.site.site import Site

__all__ = ["FrontmatterDefaults", "PageRegistry", "Site", "load_posts", "normalize_tags", "read_post"]
