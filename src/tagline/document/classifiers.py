# topmark:header:start
#
#   project      : Tagline
#   file         : classifiers.py
#   file_relpath : src/tagline/document/classifiers.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Line classifiers.

A classifier decides which tag, if any, applies to a single line. Any callable
with the signature ``(line_number, content) -> str | None`` qualifies; an empty
string or ``None`` means "no tag". Classifiers are applied independently to each
line during a scan and never see each other's results.

This module provides ready-made factories for the common cases and `TagRule`,
the declarative form used by configuration files and the CLI.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, cast

from tagline.core.errors import ConfigError


class Classifier(Protocol):
    """Callable that maps a 1-based line number and line content to a tag."""

    def __call__(self, line_number: int, content: str) -> str | None:
        """Return the tag for this line, or ``""``/``None`` for no tag."""
        ...


def marker(text: str, tag: str) -> Classifier:
    """Tag every line whose content contains ``text``.

    Args:
        text (str): Substring to look for.
        tag (str): Tag to attach to matching lines.

    Returns:
        Classifier: The classifier.
    """
    _require_tag(tag)
    if not text:
        raise ConfigError(f"Marker text for tag {tag!r} must not be empty")

    def _classify(line_number: int, content: str) -> str | None:
        return tag if text in content else None

    return _classify


def pattern(regex: str | re.Pattern[str], tag: str) -> Classifier:
    """Tag every line where ``regex`` matches anywhere (``re.search``).

    Args:
        regex (str | re.Pattern[str]): Regular expression, compiled if needed.
        tag (str): Tag to attach to matching lines.

    Returns:
        Classifier: The classifier.

    Raises:
        ConfigError: If ``regex`` does not compile.
    """
    _require_tag(tag)
    try:
        compiled = re.compile(regex) if isinstance(regex, str) else regex
    except re.error as exc:
        raise ConfigError(f"Invalid regular expression for tag {tag!r}: {exc}") from exc

    def _classify(line_number: int, content: str) -> str | None:
        return tag if compiled.search(content) else None

    return _classify


def line_numbers(numbers: Iterable[int], tag: str) -> Classifier:
    """Tag the lines at the given 1-based line numbers."""
    _require_tag(tag)
    wanted = frozenset(numbers)
    if any(n < 1 for n in wanted):
        raise ConfigError(f"Line numbers for tag {tag!r} must be positive: {sorted(wanted)}")

    def _classify(line_number: int, content: str) -> str | None:
        return tag if line_number in wanted else None

    return _classify


def _require_tag(tag: str) -> None:
    if not tag:
        raise ConfigError("Tag names must not be empty")


@dataclass(frozen=True)
class TagRule:
    """Declarative classifier: a tag plus exactly one line selector.

    Attributes:
        tag (str): Tag attached to the selected lines.
        marker (str | None): Select lines containing this substring.
        regex (str | None): Select lines matched by this regular expression.
        lines (tuple[int, ...] | None): Select these 1-based line numbers.
    """

    tag: str
    marker: str | None = None
    regex: str | None = None
    lines: tuple[int, ...] | None = None

    def __post_init__(self) -> None:
        _require_tag(self.tag)
        selectors = [s for s in (self.marker, self.regex, self.lines) if s is not None]
        if len(selectors) != 1:
            raise ConfigError(
                f"Rule for tag {self.tag!r} needs exactly one of 'marker', 'regex' or 'lines'"
            )

    def to_classifier(self) -> Classifier:
        """Build the classifier described by this rule."""
        if self.marker is not None:
            return marker(self.marker, self.tag)
        if self.regex is not None:
            return pattern(self.regex, self.tag)
        # exactly one selector is set
        return line_numbers(cast("tuple[int, ...]", self.lines), self.tag)

    def to_dict(self) -> dict[str, object]:
        """Return the rule as a TOML-ready table (unset selectors omitted)."""
        data: dict[str, object] = {"tag": self.tag}
        if self.marker is not None:
            data["marker"] = self.marker
        if self.regex is not None:
            data["regex"] = self.regex
        if self.lines is not None:
            data["lines"] = list(self.lines)
        return data


def parse_rule_option(value: str, *, kind: str) -> TagRule:
    """Parse a ``TAG=SELECTOR`` command-line value into a `TagRule`.

    Args:
        value (str): The raw option value, e.g. ``"begin=BEGIN GENERATED"``.
        kind (str): ``"marker"`` or ``"regex"``.

    Returns:
        TagRule: The parsed rule.

    Raises:
        ConfigError: If the value has no ``=`` or an empty tag.
    """
    tag, sep, selector = value.partition("=")
    if not sep:
        raise ConfigError(f"Expected TAG=TEXT, got {value!r}")
    if kind == "marker":
        return TagRule(tag=tag.strip(), marker=selector)
    if kind == "regex":
        return TagRule(tag=tag.strip(), regex=selector)
    raise ValueError(f"Unknown rule kind: {kind!r}")
