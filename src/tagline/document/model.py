# topmark:header:start
#
#   project      : Tagline
#   file         : model.py
#   file_relpath : src/tagline/document/model.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""In-memory line/tag model of a text file.

A `Document` is a snapshot of a file produced by a scan (see
`tagline.document.scanner.scan`): the ordered lines, the tags attached to each
line, and the set of every tag seen in the file. It does not own the file:
mutations rewrite the file on disk and leave the snapshot as it was, so a
document must be rescanned before it reflects post-mutation content.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tagline.config.logging import get_logger
from tagline.constants import DEFAULT_ENCODING, DEFAULT_NEWLINE
from tagline.utils.file import ResolvedPath, check_encoding, resolve_path

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from tagline.config.logging import TaglineLogger

logger: TaglineLogger = get_logger(__name__)


@dataclass
class Line:
    """One line of a scanned file.

    Attributes:
        number (int): 1-based line number at scan time.
        content (str): Line text without its line terminator.
        tags (set[str]): Tags attached to this line by the scan.
    """

    number: int
    content: str
    tags: set[str] = field(default_factory=set)

    def has_any_tag(self, tags: Iterable[str]) -> bool:
        """Return True if any of ``tags`` is attached to this line."""
        return any(t in self.tags for t in tags)


class Document:
    """Snapshot of a text file's lines and tags.

    Construct with `Document.from_path`; populate with
    `tagline.document.scanner.scan`.

    Attributes:
        path (Path): Absolute path of the file, resolved at construction.
        size (int): File size in bytes at construction (not kept in sync).
        encoding (str): Text encoding used to read and rewrite the file.
        lines (list[Line]): Lines from the most recent scan.
        tags (set[str]): Every tag attached to any line by the most recent scan.
        newline (str): Line terminator detected by the most recent scan.
    """

    def __init__(self, resolved: ResolvedPath, *, encoding: str = DEFAULT_ENCODING) -> None:
        self._path: Path = resolved.path
        self.size: int = resolved.size
        self.encoding: str = encoding
        self.lines: list[Line] = []
        self.tags: set[str] = set()
        self.newline: str = DEFAULT_NEWLINE

    @classmethod
    def from_path(cls, path: Path | str, *, encoding: str = DEFAULT_ENCODING) -> Document:
        """Create an empty document for an existing file. No content is read.

        Args:
            path (Path | str): Path to the file; relative paths are resolved against the CWD.
            encoding (str): Text encoding for reads and rewrites.

        Returns:
            Document: The document, with no lines and no tags.

        Raises:
            DocumentNotFoundError: If the file does not exist.
            DocumentEncodingError: If ``encoding`` is not a known codec.
        """
        resolved = resolve_path(path)
        check_encoding(encoding, path=resolved.path)
        doc = cls(resolved, encoding=encoding)
        logger.debug("Created document for %s (%d bytes)", doc.path, doc.size)
        return doc

    @property
    def path(self) -> Path:
        """Absolute path of the file (immutable)."""
        return self._path

    @property
    def total_lines(self) -> int:
        """Number of lines read by the most recent scan."""
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def has_tag(self, tag: str) -> bool:
        """Return True if any line carries ``tag``."""
        return tag in self.tags

    def contents(self) -> list[str]:
        """Return the text of every line, in file order."""
        return [line.content for line in self.lines]

    def __repr__(self) -> str:
        return (
            f"Document(path={str(self.path)!r}, total_lines={self.total_lines}, "
            f"tags={sorted(self.tags)!r})"
        )
