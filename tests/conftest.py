# topmark:header:start
#
#   project      : Tagline
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Pytest configuration for the Tagline test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs. File fixtures write plain LF-terminated text into ``tmp_path`` so
tests can compare the rewritten file line by line.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from tagline.config import logging
from tagline.document import Document, scan
from tests.helpers import POEM, ReadLines, WriteLines, tag_content


@pytest.fixture(autouse=True)
def silence_tagline_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Tagline's runtime log level is not forced via env during tests."""
    monkeypatch.delenv("TAGLINE_LOG_LEVEL", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for all tests so failures come with full context."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def write_lines(tmp_path: Path) -> WriteLines:
    """Return a factory writing ``lines`` (LF-terminated) to a file under ``tmp_path``."""

    def _write(lines: Sequence[str], name: str = "doc.txt", *, newline: str = "\n") -> Path:
        path = tmp_path / name
        path.write_bytes("".join(f"{line}{newline}" for line in lines).encode("utf-8"))
        return path

    return _write


@pytest.fixture
def read_lines() -> ReadLines:
    """Return a helper reading a file back as a list of lines without terminators."""

    def _read(path: Path) -> list[str]:
        return path.read_text(encoding="utf-8").splitlines()

    return _read


@pytest.fixture
def poem_doc(write_lines: WriteLines) -> Document:
    """The poem, scanned with one tag per line: ``first``, ``insert`` and ``last``."""
    path = write_lines(POEM, "poem.txt")
    return scan(
        Document.from_path(path),
        tag_content(POEM[0], "first"),
        tag_content(POEM[1], "insert"),
        tag_content(POEM[2], "last"),
    )
