"""Data primitives."""

from tagindex.data_primitives.document import AttributeResolver, PageData, Post

__all__ = ["AttributeResolver", "PageData", "Post"]
