"""Tests for front-matter defaults resolution."""

from __future__ import annotations

import pytest

from tagindex.config.settings import DefaultsRule
from tagindex.site.defaults import FrontmatterDefaults


def _defaults(*rules: dict) -> FrontmatterDefaults:
    return FrontmatterDefaults([DefaultsRule.model_validate(rule) for rule in rules])


def test_find_returns_none_without_rules():
    assert FrontmatterDefaults().find("tag/python.html", "categories", "title") is None


def test_empty_scope_path_applies_everywhere():
    defaults = _defaults({"scope": {"path": ""}, "values": {"author": "me"}})
    assert defaults.find("tag/python.html", "categories", "author") == "me"
    assert defaults.find("about.html", "pages", "author") == "me"


@pytest.mark.parametrize(
    ("scope_path", "expected"),
    [
        ("tag", "x"),
        ("tag/", "x"),
        ("/tag", "x"),
        ("./tag", "x"),
        ("tag/python.html", "x"),
        ("tag/py", None),
        ("tags", None),
        ("tag/*.html", "x"),
        ("*.md", None),
    ],
)
def test_scope_path_matching(scope_path, expected):
    defaults = _defaults({"scope": {"path": scope_path}, "values": {"k": "x"}})
    assert defaults.find("tag/python.html", "categories", "k") == expected


def test_scope_type_must_match_when_given():
    defaults = _defaults({"scope": {"type": "posts"}, "values": {"k": "posts"}})
    assert defaults.find("tag/python.html", "categories", "k") is None
    assert defaults.find("_posts/a.md", "posts", "k") == "posts"


def test_longer_path_wins():
    defaults = _defaults(
        {"scope": {"path": "tag/python.html"}, "values": {"k": "specific"}},
        {"scope": {"path": "tag"}, "values": {"k": "directory"}},
        {"scope": {"path": ""}, "values": {"k": "global"}},
    )
    assert defaults.find("tag/python.html", "categories", "k") == "specific"
    assert defaults.find("tag/rust.html", "categories", "k") == "directory"


def test_typed_rule_beats_untyped_rule_at_same_path():
    defaults = _defaults(
        {"scope": {"path": "tag", "type": "categories"}, "values": {"k": "typed"}},
        {"scope": {"path": "tag"}, "values": {"k": "untyped"}},
    )
    assert defaults.find("tag/python.html", "categories", "k") == "typed"


def test_later_rule_wins_on_a_tie():
    defaults = _defaults(
        {"scope": {"path": "tag"}, "values": {"k": "first"}},
        {"scope": {"path": "tag"}, "values": {"k": "second"}},
    )
    assert defaults.find("tag/python.html", "categories", "k") == "second"


def test_rules_without_the_setting_are_skipped():
    defaults = _defaults(
        {"scope": {"path": ""}, "values": {"k": "global"}},
        {"scope": {"path": "tag/python.html"}, "values": {"other": 1}},
    )
    assert defaults.find("tag/python.html", "categories", "k") == "global"


def test_null_scope_path_and_values_are_tolerated():
    defaults = _defaults({"scope": {"path": None}, "values": None})
    assert defaults.find("tag/python.html", "categories", "k") is None
    assert defaults.rules[0].scope.path == ""
