# topmark:header:start
#
#   project      : Tagline
#   file         : helpers.py
#   file_relpath : tests/helpers.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Shared test data and classifier helpers."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from tagline.document.classifiers import Classifier

# The poem used throughout the engine tests; each line gets its own tag.
POEM: tuple[str, ...] = (
    "白日依山尽",
    "黄河入海流",
    "更上一层楼",
)

# fixture factory types (see tests/conftest.py)
WriteLines = Callable[..., Path]
ReadLines = Callable[[Path], list[str]]


def tag_content(content: str, tag: str) -> Classifier:
    """Return a classifier that tags lines equal to ``content``."""

    def _classify(line_number: int, text: str) -> str | None:
        return tag if text == content else None

    return _classify
