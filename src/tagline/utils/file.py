# topmark:header:start
#
#   project      : Tagline
#   file         : file.py
#   file_relpath : src/tagline/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Path resolution and file metadata utilities for Tagline."""

from __future__ import annotations

import codecs
import os
from pathlib import Path
from typing import NamedTuple

from tagline.config.logging import get_logger
from tagline.core.errors import DocumentEncodingError, DocumentIOError, DocumentNotFoundError

logger = get_logger(__name__)


class ResolvedPath(NamedTuple):
    """An absolute path to an existing regular file and its size at resolution time."""

    path: Path
    size: int


def resolve_path(path: Path | str) -> ResolvedPath:
    """Resolve ``path`` to an absolute path and record the file size.

    Symlinks are not followed; only ``.`` and ``..`` segments are normalized.

    Args:
        path (Path | str): The path to resolve (relative paths are taken from the CWD).

    Returns:
        ResolvedPath: The absolute path and its size in bytes.

    Raises:
        DocumentNotFoundError: If the path does not exist or is not a regular file.
        DocumentIOError: If the file metadata cannot be read.
    """
    abs_path = Path(os.path.abspath(os.fspath(path)))
    try:
        st = abs_path.stat()
    except FileNotFoundError as exc:
        raise DocumentNotFoundError(abs_path) from exc
    except OSError as exc:
        raise DocumentIOError(f"Cannot stat {abs_path}: {exc}", path=abs_path, cause=exc) from exc

    if not abs_path.is_file():
        raise DocumentNotFoundError(abs_path)

    logger.trace("Resolved %s -> %s (%d bytes)", path, abs_path, st.st_size)
    return ResolvedPath(path=abs_path, size=st.st_size)


def compute_relpath(file_path: Path, root_path: Path | None = None) -> Path:
    """Compute the relative path from root_path to file_path.

    Used by the CLI to display documents relative to the working directory.

    Args:
        file_path (Path): The file path to compute the relative path for.
        root_path (Path | None): The root path to compute the relative path from
            (defaults to the CWD).

    Returns:
        Path: The relative path from root_path to file_path.
    """
    resolved_path = file_path.resolve()
    resolved_root = (root_path or Path.cwd()).resolve()

    try:
        return resolved_path.relative_to(resolved_root)
    except ValueError:
        # Not a direct subpath
        return Path(os.path.relpath(resolved_path, start=resolved_root))


def check_encoding(encoding: str, *, path: Path | str | None = None) -> str:
    """Return the canonical codec name for ``encoding``.

    Raises:
        DocumentEncodingError: If Python has no codec registered under ``encoding``.
    """
    try:
        return codecs.lookup(encoding).name
    except LookupError as exc:
        where = f" for {path}" if path is not None else ""
        raise DocumentEncodingError(
            f"Unknown encoding {encoding!r}{where}", path=path, cause=exc
        ) from exc
