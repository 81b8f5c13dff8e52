# topmark:header:start
#
#   project      : Tagline
#   file         : scanner.py
#   file_relpath : src/tagline/document/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Tagging pass: read a file line by line and attach classifier tags.

The scanner reads the document's file sequentially, splits records on ``\\n``
only and strips the terminator (``\\n`` or ``\\r\\n``). A ``\\r`` that is not
followed by ``\\n`` is line content. It numbers lines from 1 and applies every classifier
to every line. Each non-empty classifier result is attached to the line and recorded
in the document's global tag set.

Every scan starts from an empty document: lines, tags and the detected newline
style of an earlier scan are replaced, not extended. The new state is installed
only once the whole file has been read, so a failing scan leaves the document
as it was.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tagline.config.logging import get_logger
from tagline.constants import DEFAULT_NEWLINE
from tagline.core.errors import DocumentEncodingError, DocumentIOError
from tagline.utils.file import check_encoding
from tagline.document.model import Line

if TYPE_CHECKING:
    from tagline.config.logging import TaglineLogger
    from tagline.document.classifiers import Classifier
    from tagline.document.model import Document

logger: TaglineLogger = get_logger(__name__)

_TERMINATORS: tuple[str, ...] = ("\r\n", "\n")


def split_terminator(raw: str) -> tuple[str, str]:
    """Split a raw line into its content and its line terminator ("" if none)."""
    for nl in _TERMINATORS:
        if raw.endswith(nl):
            return raw[: -len(nl)], nl
    return raw, ""


def classify(line_number: int, content: str, classifiers: tuple[Classifier, ...]) -> set[str]:
    """Apply every classifier to one line and collect the non-empty tags."""
    tags: set[str] = set()
    for classifier in classifiers:
        tag = classifier(line_number, content)
        if tag:
            tags.add(tag)
    return tags


def scan(document: Document, *classifiers: Classifier) -> Document:
    """Read the document's file and tag its lines.

    Args:
        document (Document): The document to populate. Its previous lines and tags
            are replaced.
        *classifiers (Classifier): Zero or more classifiers, each called once per line.

    Returns:
        Document: The same document, for chaining.

    Raises:
        DocumentEncodingError: If the file is not valid text in ``document.encoding``
            or the encoding is unknown.
        DocumentIOError: If the file cannot be opened or read.
    """
    lines: list[Line] = []
    tags: set[str] = set()
    newline: str | None = None

    check_encoding(document.encoding, path=document.path)
    logger.debug("Scanning %s with %d classifier(s)", document.path, len(classifiers))
    try:
        with open(document.path, encoding=document.encoding, newline="\n") as f:
            for number, raw in enumerate(f, start=1):
                content, nl = split_terminator(raw)
                if newline is None and nl:
                    newline = nl
                line_tags = classify(number, content, classifiers)
                if line_tags:
                    logger.trace("Line %d tagged %s", number, sorted(line_tags))
                    tags.update(line_tags)
                lines.append(Line(number=number, content=content, tags=line_tags))
    except UnicodeDecodeError as exc:
        raise DocumentEncodingError(
            f"Cannot decode {document.path} as {document.encoding}: {exc}",
            path=document.path,
            cause=exc,
        ) from exc
    except OSError as exc:
        raise DocumentIOError(
            f"Cannot read {document.path}: {exc}", path=document.path, cause=exc
        ) from exc

    document.lines = lines
    document.tags = tags
    document.newline = newline or DEFAULT_NEWLINE
    logger.debug(
        "Scanned %s: %d line(s), tags=%s", document.path, document.total_lines, sorted(tags)
    )
    return document
