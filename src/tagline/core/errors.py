# topmark:header:start
#
#   project      : Tagline
#   file         : errors.py
#   file_relpath : src/tagline/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Exception taxonomy for the Tagline editing engine.

All errors raised by the core derive from `TaglineError`. They are raised
synchronously to the immediate caller; the core never retries, logs-and-continues,
or swallows a failure.

Hierarchy:
    - `DocumentNotFoundError`: the target path does not exist (also a `FileNotFoundError`).
    - `DocumentIOError`: read/write/open/create/rename failure (also an `OSError`).
        - `DocumentEncodingError`: unknown codec, or text could not be decoded or encoded.
    - `TagError`: invalid tag arguments for a tag-addressed mutation (also a `ValueError`).
        - `EmptyTagError`
        - `StartTagNotFoundError`
        - `EndTagNotFoundError`
        - `TagPairMismatchError`
    - `ConfigError`: missing, malformed or invalid configuration.
"""

from __future__ import annotations

from pathlib import Path


class TaglineError(Exception):
    """Base class for all Tagline errors."""


class DocumentNotFoundError(TaglineError, FileNotFoundError):
    """Raised when a document is constructed for a path that does not exist."""

    def __init__(self, path: Path | str) -> None:
        self.path: Path = Path(path)
        super().__init__(f"No such file: {self.path}")


class DocumentIOError(TaglineError, OSError):
    """Raised when the underlying file (or its scratch file) cannot be read or written.

    Attributes:
        path (Path | None): The path involved in the failing operation, if known.
        cause (BaseException | None): The original exception, also chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.path: Path | None = Path(path) if path is not None else None
        self.cause: BaseException | None = cause
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class DocumentEncodingError(DocumentIOError):
    """Raised when the document encoding is unknown or cannot decode or encode the content."""


class TagError(TaglineError, ValueError):
    """Base class for errors caused by the tag arguments of a mutation."""


class EmptyTagError(TagError):
    """Raised when a start or end tag argument is the empty string."""

    def __init__(self, start: str, end: str) -> None:
        self.start: str = start
        self.end: str = end
        super().__init__(f"Start and end tags must not be empty (start={start!r}, end={end!r})")


class StartTagNotFoundError(TagError):
    """Raised when the start tag was not observed during the most recent scan."""

    def __init__(self, tag: str) -> None:
        self.tag: str = tag
        super().__init__(f"Start tag not found: {tag!r}")


class EndTagNotFoundError(TagError):
    """Raised when the end tag was not observed during the most recent scan."""

    def __init__(self, tag: str) -> None:
        self.tag: str = tag
        super().__init__(f"End tag not found: {tag!r}")


class TagPairMismatchError(TagError):
    """Raised when no end-tagged line follows a start-tagged line."""

    def __init__(self, start: str, end: str) -> None:
        self.start: str = start
        self.end: str = end
        super().__init__(f"No {end!r} line follows a {start!r} line")


class ConfigError(TaglineError):
    """Raised for unreadable, malformed or semantically invalid configuration."""
