"""The ordered collection of pages a build hands to the renderer."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class RegisteredPage(Protocol):
    @property
    def relative_path(self) -> str: ...


class PageRegistry:
    """Append-only page list for one build.

    Several pages may share an output path; they are all kept, in insertion
    order.
    """

    def __init__(self) -> None:
        self._pages: list[RegisteredPage] = []
        self._paths: dict[str, int] = {}

    def add(self, page: RegisteredPage) -> None:
        path = page.relative_path
        seen = self._paths.get(path, 0)
        if seen:
            logger.debug("Page %s registered %d times", path, seen + 1)
        self._paths[path] = seen + 1
        self._pages.append(page)

    def extend(self, pages: Iterable[RegisteredPage]) -> None:
        for page in pages:
            self.add(page)

    def by_output_path(self, path: str) -> list[RegisteredPage]:
        return [page for page in self._pages if page.relative_path == path]

    def output_paths(self) -> dict[str, int]:
        """Return each registered output path with the number of pages bound to it."""
        return dict(self._paths)

    def clear(self) -> None:
        self._pages.clear()
        self._paths.clear()

    def __iter__(self) -> Iterator[RegisteredPage]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    def __getitem__(self, index: int) -> RegisteredPage:
        return self._pages[index]
