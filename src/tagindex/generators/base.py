"""Generator interface: build hooks that add pages to a site."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tagindex.site.site import Site


@runtime_checkable
class Generator(Protocol):
    """Runs once per build, after posts are read and before rendering."""

    def generate(self, site: Site) -> None: ...
