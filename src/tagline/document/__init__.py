# topmark:header:start
#
#   project      : Tagline
#   file         : __init__.py
#   file_relpath : src/tagline/document/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Document model, tagging pass and tag-addressed editing.

Typical flow:
    ```python
    from tagline.document import Document, insert_between, marker, scan

    doc = scan(Document.from_path("settings.ini"), marker("# BEGIN", "begin"), marker("# END", "end"))
    insert_between(doc, "begin", "end", ["key = value"])
    ```
"""

from __future__ import annotations

# Classifiers first: the config package imports them while the document package loads.
from tagline.document.classifiers import (
    Classifier,
    TagRule,
    line_numbers,
    marker,
    parse_rule_option,
    pattern,
)
from tagline.document.editor import (
    delete,
    delete_between,
    find_pair,
    insert,
    insert_between,
    insert_between_unique,
    replace_all,
)
from tagline.document.model import Document, Line
from tagline.document.scanner import scan

__all__: list[str] = [
    "Classifier",
    "Document",
    "Line",
    "TagRule",
    "delete",
    "delete_between",
    "find_pair",
    "insert",
    "insert_between",
    "insert_between_unique",
    "line_numbers",
    "marker",
    "parse_rule_option",
    "pattern",
    "replace_all",
    "scan",
]
