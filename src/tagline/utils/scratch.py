# topmark:header:start
#
#   project      : Tagline
#   file         : scratch.py
#   file_relpath : src/tagline/utils/scratch.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Scratch files for atomic rewrites.

A `ScratchFile` is a uniquely named temporary file created in the same directory
as the file it will replace, so the final `os.replace` is a same-filesystem rename
(atomic on POSIX and Windows). Content is staged in the scratch file and only
moved over the destination by `ScratchFile.commit`.

Usage:
    ```python
    with ScratchFile(path) as scratch:
        scratch.write("new content\\n")
        scratch.commit()
    ```

Leaving the ``with`` block without committing, normally or through an exception,
closes and removes the scratch file; the destination is left untouched.
"""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import IO, TYPE_CHECKING

from tagline.config.logging import get_logger
from tagline.constants import DEFAULT_ENCODING, SCRATCH_PREFIX, SCRATCH_SUFFIX
from tagline.core.errors import DocumentEncodingError, DocumentIOError
from tagline.utils.file import check_encoding

if TYPE_CHECKING:
    from collections.abc import Iterable
    from types import TracebackType

    from tagline.config.logging import TaglineLogger

logger: TaglineLogger = get_logger(__name__)


class ScratchFile:
    """Writable staging file that atomically replaces ``destination`` on commit.

    Args:
        destination (Path): The file that will be replaced on commit.
        encoding (str): Text encoding for written content.

    Attributes:
        destination (Path): The file that will be replaced on commit.
        path (Path | None): Location of the scratch file while it exists.
        committed (bool): Whether `commit` completed.
    """

    def __init__(self, destination: Path, *, encoding: str = DEFAULT_ENCODING) -> None:
        self.destination: Path = destination
        self.encoding: str = encoding
        self.path: Path | None = None
        self.committed: bool = False
        self._handle: IO[str] | None = None

    def __enter__(self) -> ScratchFile:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self.committed:
            self.discard()

    def open(self) -> None:
        """Create the scratch file next to the destination.

        Raises:
            DocumentEncodingError: If the scratch encoding is unknown.
            DocumentIOError: If the scratch file cannot be created.
        """
        check_encoding(self.encoding, path=self.destination)
        try:
            handle = tempfile.NamedTemporaryFile(
                mode="w",
                encoding=self.encoding,
                newline="",
                prefix=SCRATCH_PREFIX,
                suffix=SCRATCH_SUFFIX,
                dir=self.destination.parent,
                delete=False,
            )
        except OSError as exc:
            raise DocumentIOError(
                f"Cannot create scratch file for {self.destination}: {exc}",
                path=self.destination,
                cause=exc,
            ) from exc
        self._handle = handle
        self.path = Path(handle.name)
        logger.trace("Created scratch file %s for %s", self.path, self.destination)

    def write(self, text: str) -> None:
        """Append ``text`` to the scratch file.

        Raises:
            DocumentEncodingError: If ``text`` cannot be encoded.
            DocumentIOError: If the write fails or the scratch file is not open.
        """
        if self._handle is None:
            raise DocumentIOError(
                f"Scratch file for {self.destination} is not open", path=self.destination
            )
        try:
            self._handle.write(text)
        except UnicodeEncodeError as exc:
            raise DocumentEncodingError(
                f"Cannot encode content for {self.destination} as {self.encoding}: {exc}",
                path=self.destination,
                cause=exc,
            ) from exc
        except OSError as exc:
            raise DocumentIOError(
                f"Cannot write scratch file {self.path}: {exc}",
                path=self.path,
                cause=exc,
            ) from exc

    def writelines(self, lines: Iterable[str]) -> None:
        """Append each string of ``lines`` (terminators are the caller's business)."""
        for line in lines:
            self.write(line)

    def commit(self) -> None:
        """Flush, close and rename the scratch file over the destination.

        The destination's permission bits are carried over to the new file.

        Raises:
            DocumentIOError: If flushing, closing or renaming fails. The scratch
                file is removed when the enclosing ``with`` block exits.
        """
        if self._handle is None or self.path is None:
            raise DocumentIOError(
                f"Scratch file for {self.destination} is not open", path=self.destination
            )
        try:
            self._handle.flush()
            os.fsync(self._handle.fileno())
            self._handle.close()
            self._handle = None
            try:
                mode = stat.S_IMODE(self.destination.stat().st_mode)
            except FileNotFoundError:
                mode = None
            if mode is not None:
                os.chmod(self.path, mode)
            os.replace(self.path, self.destination)
        except OSError as exc:
            raise DocumentIOError(
                f"Cannot replace {self.destination} with {self.path}: {exc}",
                path=self.destination,
                cause=exc,
            ) from exc
        self.committed = True
        logger.debug("Committed scratch file %s -> %s", self.path, self.destination)
        self.path = None

    def discard(self) -> None:
        """Close and remove the scratch file. Safe to call more than once."""
        if self._handle is not None:
            try:
                self._handle.close()
            except OSError as exc:
                logger.debug("Closing scratch file %s failed: %s", self.path, exc)
            self._handle = None
        if self.path is not None:
            try:
                self.path.unlink(missing_ok=True)
            except OSError as exc:
                logger.debug("Removing scratch file %s failed: %s", self.path, exc)
            logger.trace("Discarded scratch file %s", self.path)
            self.path = None
