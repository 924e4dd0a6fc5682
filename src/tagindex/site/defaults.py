"""Front-matter defaults: site-wide values keyed by path and document type.

A rule applies to a page when both parts of its scope match:

- ``type``: absent matches every type, otherwise it must equal the requested
  type exactly.
- ``path``: empty matches everything, a value containing ``*`` is a glob
  matched against the page's relative path, anything else matches the path
  itself and everything below it.

When several applicable rules define the same key the most specific one wins:
the longer scope path, then a rule with a ``type`` over one without, then the
later rule in the configuration.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from fnmatch import fnmatchcase
from typing import Any

from tagindex.config.settings import DefaultsRule, DefaultsScope

logger = logging.getLogger(__name__)


def _sanitize(path: str) -> str:
    path = path.replace("\\", "/")
    while path.startswith("./"):
        path = path[2:]
    return path.strip("/")


class FrontmatterDefaults:
    """Resolves front-matter default values for a relative path and type."""

    def __init__(self, rules: Iterable[DefaultsRule] = ()) -> None:
        self._rules: tuple[DefaultsRule, ...] = tuple(rules)

    @property
    def rules(self) -> tuple[DefaultsRule, ...]:
        return self._rules

    def find(self, path: str, doc_type: str | None, setting: str) -> Any:
        """Return the most specific default for ``setting``, or ``None``."""
        value = None
        old_scope: DefaultsScope | None = None
        for rule in self._matching_rules(path, doc_type):
            if setting in rule.values and self._has_precedence(old_scope, rule.scope):
                value = rule.values[setting]
                old_scope = rule.scope
        return value


    def _matching_rules(self, path: str, doc_type: str | None) -> Iterator[DefaultsRule]:
        rel_path = _sanitize(path)
        for rule in self._rules:
            if self._applies_type(rule.scope, doc_type) and self._applies_path(rule.scope, rel_path):
                yield rule

    @staticmethod
    def _applies_type(scope: DefaultsScope, doc_type: str | None) -> bool:
        return scope.type is None or scope.type == doc_type

    @staticmethod
    def _applies_path(scope: DefaultsScope, rel_path: str) -> bool:
        scope_path = _sanitize(scope.path)
        if not scope_path:
            return True
        if "*" in scope_path:
            return fnmatchcase(rel_path, scope_path)
        return rel_path == scope_path or rel_path.startswith(f"{scope_path}/")

    @staticmethod
    def _has_precedence(old_scope: DefaultsScope | None, new_scope: DefaultsScope) -> bool:
        if old_scope is None:
            return True
        new_len = len(_sanitize(new_scope.path))
        old_len = len(_sanitize(old_scope.path))
        if new_len != old_len:
            return new_len > old_len
        if new_scope.type is not None:
            return True
        return old_scope.type is None
