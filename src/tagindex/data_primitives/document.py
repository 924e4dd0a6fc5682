"""Document primitives shared by the loader, the site and the generators."""

from __future__ import annotations

import datetime
import logging
from collections.abc import Iterator, Mapping, MutableMapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Post:
    """A published blog post as read from the posts directory.

    ``tags`` is always a tuple; a post whose front matter has no tags carries
    an empty one.
    """

    path: Path
    metadata: Mapping[str, Any] = field(default_factory=dict)
    content: str = ""
    date: datetime.date | None = None
    tags: tuple[str, ...] = ()


@runtime_checkable
class AttributeResolver(Protocol):
    """Supplies a value for a page attribute that was never set explicitly."""

    def resolve(self, key: str) -> Any: ...


class PageData(MutableMapping[str, Any]):
    """Page attributes with a lazy fallback.

    Explicitly set keys are returned as stored. Any other key is handed to the
    resolver on every read; a ``None`` result means the key has no value, so
    ``data[key]`` raises ``KeyError`` and ``data.get(key)`` returns the default.
    Membership, iteration and ``len`` only see explicit keys.
    """

    __slots__ = ("_explicit", "_resolver")

    def __init__(
        self, explicit: Mapping[str, Any] | None = None, resolver: AttributeResolver | None = None
    ) -> None:
        self._explicit: dict[str, Any] = dict(explicit or {})
        self._resolver = resolver

    def __getitem__(self, key: str) -> Any:
        if key in self._explicit:
            return self._explicit[key]
        value = self._fallback(key)
        if value is None:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value: Any) -> None:
        self._explicit[key] = value

    def __delitem__(self, key: str) -> None:
        del self._explicit[key]

    def __contains__(self, key: object) -> bool:
        return key in self._explicit

    def __iter__(self) -> Iterator[str]:
        return iter(self._explicit)

    def __len__(self) -> int:
        return len(self._explicit)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._explicit!r})"

    def _fallback(self, key: str) -> Any:
        if self._resolver is None:
            return None
        try:
            return self._resolver.resolve(key)
        except Exception:
            logger.warning("Attribute fallback for %r failed; treating it as unset", key, exc_info=True)
            return None
