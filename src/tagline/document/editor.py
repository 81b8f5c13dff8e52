# topmark:header:start
#
#   project      : Tagline
#   file         : editor.py
#   file_relpath : src/tagline/document/editor.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Tag-addressed insertion and deletion.

Every operation in this module decides what to write from the document's
in-memory snapshot (never from the file), stages the new content in a
`tagline.utils.scratch.ScratchFile` and renames it over the original. The original
file is replaced only after the new content is completely written; on any error
it is left untouched.

Operations do not update the document. Rescan before running a second operation
that should see the result of the first.

Start/end pair matching:
    Lines are walked in order. A line carrying the start tag records its position,
    overwriting an earlier record, so the last start before the match wins. Otherwise,
    once a start has been recorded, the first line carrying the end tag closes the
    pair. A line carrying both tags counts as a start. Only the first pair found is
    used; nesting is not taken into account.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tagline.config.logging import get_logger
from tagline.core.errors import (
    EmptyTagError,
    EndTagNotFoundError,
    StartTagNotFoundError,
    TagPairMismatchError,
)
from tagline.utils.scratch import ScratchFile

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from tagline.config.logging import TaglineLogger
    from tagline.document.model import Document, Line

logger: TaglineLogger = get_logger(__name__)


def _rewrite(document: Document, chunks: Iterable[str]) -> None:
    with ScratchFile(document.path, encoding=document.encoding) as scratch:
        scratch.writelines(chunks)
        scratch.commit()


def _render(document: Document, lines: Iterable[Line]) -> list[str]:
    nl = document.newline
    return [line.content + nl for line in lines]


def _render_block(document: Document, contents: Sequence[str]) -> str:
    # Empty contents render as a single blank line.
    nl = document.newline
    return nl.join(contents) + nl


def _check_pair_tags(document: Document, start: str, end: str) -> None:
    if not start or not end:
        raise EmptyTagError(start, end)
    if not document.has_tag(start):
        raise StartTagNotFoundError(start)
    if not document.has_tag(end):
        raise EndTagNotFoundError(end)


def find_pair(document: Document, start: str, end: str) -> tuple[int, int]:
    """Locate the first start/end pair in the document snapshot.

    Args:
        document (Document): A scanned document.
        start (str): The start tag.
        end (str): The end tag.

    Returns:
        tuple[int, int]: 0-based indexes into ``document.lines`` of the matched
        start line and end line.

    Raises:
        TagPairMismatchError: If no end-tagged line follows a start-tagged line.
    """
    start_idx: int | None = None
    for idx, line in enumerate(document.lines):
        if start in line.tags:
            start_idx = idx
        elif start_idx is not None and end in line.tags:
            return start_idx, idx
    raise TagPairMismatchError(start, end)


def replace_all(document: Document, contents: Sequence[str]) -> None:
    """Replace the whole file with ``contents`` joined by the document newline.

    No terminator is written after the last line.
    """
    logger.debug("Replacing %s with %d line(s)", document.path, len(contents))
    _rewrite(document, [document.newline.join(contents)])


def insert(document: Document, tags: Sequence[str], contents: Sequence[str]) -> int:
    """Insert ``contents`` after every line carrying one of ``tags``.

    A line carrying several of the target tags receives one block per matching
    tag, in the order of ``tags``. With an empty ``tags`` sequence the whole file is
    replaced by ``contents`` (see `replace_all`). An empty ``contents`` still
    renders one terminator, so each matching tag adds one blank line.

    Args:
        document (Document): A scanned document.
        tags (Sequence[str]): Target tags; empty means "replace the whole file".
        contents (Sequence[str]): Lines to insert, without terminators.

    Returns:
        int: Number of blocks inserted (0 when the file was replaced).

    Raises:
        DocumentIOError: If the file cannot be rewritten.
    """
    if not tags:
        replace_all(document, contents)
        return 0

    nl = document.newline
    block = _render_block(document, contents)
    out: list[str] = []
    inserted = 0
    for line in document.lines:
        out.append(line.content + nl)
        for tag in tags:
            if tag in line.tags:
                out.append(block)
                inserted += 1

    logger.debug(
        "Inserting %d block(s) of %d line(s) at tags %s in %s",
        inserted,
        len(contents),
        list(tags),
        document.path,
    )
    _rewrite(document, out)
    return inserted


def insert_between(document: Document, start: str, end: str, contents: Sequence[str]) -> int:
    """Insert ``contents`` immediately before the end line of the first start/end pair.

    Preconditions are checked in order before any I/O. An empty ``contents``
    inserts one blank line.

    Args:
        document (Document): A scanned document.
        start (str): The start tag.
        end (str): The end tag.
        contents (Sequence[str]): Lines to insert, without terminators.

    Returns:
        int: The 1-based line number (in the snapshot) of the matched end line.

    Raises:
        EmptyTagError: If ``start`` or ``end`` is empty.
        StartTagNotFoundError: If no line carries ``start``.
        EndTagNotFoundError: If no line carries ``end``.
        TagPairMismatchError: If no end line follows a start line; the file is untouched.
        DocumentIOError: If the file cannot be rewritten.
    """
    _check_pair_tags(document, start, end)
    start_idx, end_idx = find_pair(document, start, end)
    logger.debug(
        "Matched %r/%r pair at lines %d-%d of %s",
        start,
        end,
        start_idx + 1,
        end_idx + 1,
        document.path,
    )

    lines = document.lines
    out = _render(document, lines[:end_idx])
    out.append(_render_block(document, contents))
    out.extend(_render(document, lines[end_idx:]))
    _rewrite(document, out)
    return lines[end_idx].number


def insert_between_unique(
    document: Document, start: str, end: str, contents: Sequence[str]
) -> int:
    """Like `insert_between`, but skip lines already present inside the pair.

    A content line is inserted only if no line strictly between the matched start
    and end lines has the same text, and only its first occurrence in ``contents``
    is kept. When nothing is left to insert, the file is not rewritten.

    Returns:
        int: Number of lines inserted.

    Raises:
        EmptyTagError: If ``start`` or ``end`` is empty.
        StartTagNotFoundError: If no line carries ``start``.
        EndTagNotFoundError: If no line carries ``end``.
        TagPairMismatchError: If no end line follows a start line.
        DocumentIOError: If the file cannot be rewritten.
    """
    _check_pair_tags(document, start, end)
    start_idx, end_idx = find_pair(document, start, end)

    lines = document.lines
    seen: set[str] = set(document.contents()[start_idx + 1 : end_idx])
    fresh: list[str] = []
    for content in contents:
        if content not in seen:
            seen.add(content)
            fresh.append(content)

    if not fresh:
        logger.debug("All %d line(s) already present in %s", len(contents), document.path)
        return 0

    out = _render(document, lines[:end_idx])
    out.append(_render_block(document, fresh))
    out.extend(_render(document, lines[end_idx:]))
    _rewrite(document, out)
    return len(fresh)


def delete(document: Document, tags: Sequence[str]) -> int:
    """Delete every line carrying any of ``tags``.

    With an empty ``tags`` sequence the file is emptied. When no line matches, the
    file is not rewritten.

    Returns:
        int: Number of lines deleted.

    Raises:
        DocumentIOError: If the file cannot be rewritten.
    """
    if not tags:
        replace_all(document, [])
        return document.total_lines

    kept = [line for line in document.lines if not line.has_any_tag(tags)]
    removed = document.total_lines - len(kept)
    if removed == 0:
        logger.debug("No line of %s carries %s", document.path, list(tags))
        return 0

    logger.debug("Deleting %d line(s) tagged %s from %s", removed, list(tags), document.path)
    _rewrite(document, _render(document, kept))
    return removed


def delete_between(document: Document, start: str = "", end: str = "") -> int:
    """Delete a tag-bounded range of lines.

    - Both tags empty: empty the whole file.
    - ``end`` empty: delete from the first ``start`` line to the end of the file,
      that line included.
    - ``start`` empty: delete from the first line through the first ``end`` line,
      that line included.
    - Both given: delete the lines strictly between the first start/end pair
      (same matching as `insert_between`); the tagged lines are kept.

    Returns:
        int: Number of lines deleted.

    Raises:
        StartTagNotFoundError: If ``start`` is given but no line carries it.
        EndTagNotFoundError: If ``end`` is given but no line carries it.
        TagPairMismatchError: If both are given and no end line follows a start line.
        DocumentIOError: If the file cannot be rewritten.
    """
    lines = document.lines
    if not start and not end:
        replace_all(document, [])
        return document.total_lines

    if start and not document.has_tag(start):
        raise StartTagNotFoundError(start)
    if end and not document.has_tag(end):
        raise EndTagNotFoundError(end)

    if not end:
        first = next(i for i, line in enumerate(lines) if start in line.tags)
        kept, removed = lines[:first], len(lines) - first
    elif not start:
        last = next(i for i, line in enumerate(lines) if end in line.tags)
        kept, removed = lines[last + 1 :], last + 1
    else:
        start_idx, end_idx = find_pair(document, start, end)
        kept = lines[: start_idx + 1] + lines[end_idx:]
        removed = end_idx - start_idx - 1

    if removed == 0:
        logger.debug("Nothing to delete between %r and %r in %s", start, end, document.path)
        return 0

    logger.debug(
        "Deleting %d line(s) between %r and %r from %s", removed, start, end, document.path
    )
    _rewrite(document, _render(document, kept))
    return removed
