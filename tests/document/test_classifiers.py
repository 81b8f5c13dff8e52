# topmark:header:start
#
#   project      : Tagline
#   file         : test_classifiers.py
#   file_relpath : tests/document/test_classifiers.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Classifier factories, declarative rules and CLI rule parsing."""

from __future__ import annotations

import re

import pytest

from tagline.core.errors import ConfigError
from tagline.document import Document, TagRule, line_numbers, marker, parse_rule_option, pattern
from tagline.document import scan
from tests.helpers import WriteLines


def test_marker_matches_substring() -> None:
    classify = marker("BEGIN", "begin")

    assert classify(1, "# BEGIN generated") == "begin"
    assert classify(1, "# begin") is None


def test_pattern_uses_search() -> None:
    classify = pattern(r"^\[\w+\]$", "section")

    assert classify(1, "[plugins]") == "section"
    assert classify(1, "x = [plugins]") is None
    assert pattern(re.compile("end$"), "e")(7, "the end") == "e"


def test_line_numbers() -> None:
    classify = line_numbers([1, 3], "odd")

    assert [classify(n, "") for n in (1, 2, 3)] == ["odd", None, "odd"]


@pytest.mark.parametrize(
    "factory",
    [
        lambda: marker("x", ""),
        lambda: marker("", "tag"),
        lambda: pattern("(", "tag"),
        lambda: line_numbers([0], "tag"),
    ],
)
def test_invalid_classifier_arguments(factory: object) -> None:
    with pytest.raises(ConfigError):
        factory()  # type: ignore[operator]


def test_rule_requires_exactly_one_selector() -> None:
    with pytest.raises(ConfigError):
        TagRule(tag="t")
    with pytest.raises(ConfigError):
        TagRule(tag="t", marker="a", regex="b")


def test_rule_to_classifier_and_dict() -> None:
    rule = TagRule(tag="t", lines=(2,))

    assert rule.to_classifier()(2, "") == "t"
    assert rule.to_dict() == {"tag": "t", "lines": [2]}
    assert TagRule(tag="m", marker="x").to_dict() == {"tag": "m", "marker": "x"}


def test_parse_rule_option() -> None:
    assert parse_rule_option("begin=# BEGIN", kind="marker") == TagRule(tag="begin", marker="# BEGIN")
    # Only the first '=' separates the tag
    assert parse_rule_option("kv=a=b", kind="regex") == TagRule(tag="kv", regex="a=b")
    with pytest.raises(ConfigError):
        parse_rule_option("no-separator", kind="marker")
    with pytest.raises(ConfigError):
        parse_rule_option("=text", kind="marker")


def test_rules_drive_a_scan(write_lines: WriteLines) -> None:
    rules = [TagRule(tag="first", lines=(1,)), TagRule(tag="b", regex="^B")]
    doc = scan(
        Document.from_path(write_lines(["A", "Bee"])),
        *(rule.to_classifier() for rule in rules),
    )

    assert doc.lines[0].tags == {"first"}
    assert doc.lines[1].tags == {"b"}
