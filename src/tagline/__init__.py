# topmark:header:start
#
#   project      : Tagline
#   file         : __init__.py
#   file_relpath : src/tagline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Tagline package.

Tagline is a line-oriented text-file editing engine. It scans a file, lets
classifiers attach tags to individual lines, and rewrites the file with content
inserted at (or deleted around) tagged lines through an atomic scratch-file swap.
It exposes a small typed API and a CLI.

Example:
    ```python
    import tagline

    doc = tagline.scan(tagline.Document.from_path("app.cfg"), tagline.marker("[plugins]", "plugins"))
    tagline.insert(doc, ["plugins"], ["tagline = enabled"])
    ```
"""

from __future__ import annotations

from tagline.core.errors import (
    ConfigError,
    DocumentEncodingError,
    DocumentIOError,
    DocumentNotFoundError,
    EmptyTagError,
    EndTagNotFoundError,
    StartTagNotFoundError,
    TagError,
    TaglineError,
    TagPairMismatchError,
)
from tagline.document import (
    Classifier,
    Document,
    Line,
    TagRule,
    delete,
    delete_between,
    insert,
    insert_between,
    insert_between_unique,
    line_numbers,
    marker,
    pattern,
    scan,
)

__all__: list[str] = [
    "Classifier",
    "ConfigError",
    "Document",
    "DocumentEncodingError",
    "DocumentIOError",
    "DocumentNotFoundError",
    "EmptyTagError",
    "EndTagNotFoundError",
    "Line",
    "StartTagNotFoundError",
    "TagError",
    "TagPairMismatchError",
    "TagRule",
    "TaglineError",
    "delete",
    "delete_between",
    "insert",
    "insert_between",
    "insert_between_unique",
    "line_numbers",
    "marker",
    "pattern",
    "scan",
]
