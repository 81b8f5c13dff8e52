# topmark:header:start
#
#   project      : Tagline
#   file         : test_scanner.py
#   file_relpath : tests/document/test_scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Tagging pass: line numbering, classifier composition, newline detection, failures."""

from __future__ import annotations

import pytest

from tagline.core.errors import DocumentEncodingError, DocumentIOError
from tagline.document import Document, marker, scan
from tagline.document.scanner import split_terminator
from tests.helpers import POEM, WriteLines, tag_content


def test_scan_numbers_lines_from_one(write_lines: WriteLines) -> None:
    doc = scan(Document.from_path(write_lines(POEM)))

    assert doc.total_lines == 3
    assert [line.number for line in doc.lines] == [1, 2, 3]
    assert doc.contents() == list(POEM)
    assert doc.tags == set()


def test_scan_passes_line_number_and_content(write_lines: WriteLines) -> None:
    seen: list[tuple[int, str]] = []

    def spy(line_number: int, content: str) -> str | None:
        seen.append((line_number, content))
        return None

    scan(Document.from_path(write_lines(["A", "B", "C"])), spy)

    assert seen == [(1, "A"), (2, "B"), (3, "C")]


def test_multiple_classifiers_tag_the_same_line(write_lines: WriteLines) -> None:
    doc = scan(
        Document.from_path(write_lines(["A", "B", "C"])),
        tag_content("B", "x"),
        tag_content("B", "y"),
        tag_content("B", "x"),
        tag_content("C", "z"),
    )

    assert doc.lines[0].tags == set()
    assert doc.lines[1].tags == {"x", "y"}
    assert doc.lines[2].tags == {"z"}
    assert doc.tags == {"x", "y", "z"}


def test_empty_and_none_results_are_not_tags(write_lines: WriteLines) -> None:
    doc = scan(
        Document.from_path(write_lines(["A"])),
        lambda n, c: "",
        lambda n, c: None,
    )

    assert doc.lines[0].tags == set()
    assert "" not in doc.tags


def test_scan_returns_the_same_document(write_lines: WriteLines) -> None:
    doc = Document.from_path(write_lines(["A"]))

    assert scan(doc) is doc


def test_rescan_replaces_previous_state(write_lines: WriteLines) -> None:
    path = write_lines(["A", "B"])
    doc = scan(Document.from_path(path), marker("A", "a"))

    path.write_text("B\nC\nD\n", encoding="utf-8")
    scan(doc, marker("D", "d"))

    assert doc.total_lines == 3
    assert doc.contents() == ["B", "C", "D"]
    assert doc.tags == {"d"}


def test_last_line_without_terminator_is_counted(write_lines: WriteLines) -> None:
    path = write_lines([])
    path.write_text("A\nB", encoding="utf-8")

    doc = scan(Document.from_path(path))

    assert doc.contents() == ["A", "B"]


def test_empty_file_has_no_lines(write_lines: WriteLines) -> None:
    doc = scan(Document.from_path(write_lines([])))

    assert doc.total_lines == 0
    assert doc.newline == "\n"


def test_blank_lines_are_lines(write_lines: WriteLines) -> None:
    doc = scan(Document.from_path(write_lines(["", "A", ""])))

    assert doc.contents() == ["", "A", ""]


@pytest.mark.parametrize("newline", ["\n", "\r\n"])
def test_newline_style_is_detected_and_stripped(write_lines: WriteLines, newline: str) -> None:
    doc = scan(Document.from_path(write_lines(["A", "B"], newline=newline)))

    assert doc.contents() == ["A", "B"]
    assert doc.newline == newline


def test_split_terminator() -> None:
    assert split_terminator("a\r\n") == ("a", "\r\n")
    assert split_terminator("a\n") == ("a", "\n")
    assert split_terminator("a\r") == ("a\r", "")
    assert split_terminator("a\r\r\n") == ("a\r", "\r\n")
    assert split_terminator("a") == ("a", "")


def test_lone_carriage_return_is_content(write_lines: WriteLines) -> None:
    path = write_lines([])
    path.write_bytes(b"a\rb\nc\n")

    doc = scan(Document.from_path(path), marker("a\rb", "cr"))

    assert doc.total_lines == 2
    assert doc.contents() == ["a\rb", "c"]
    assert doc.newline == "\n"
    assert doc.tags == {"cr"}


def test_carriage_return_only_file_is_one_line(write_lines: WriteLines) -> None:
    path = write_lines([])
    path.write_bytes(b"a\rb\r")

    doc = scan(Document.from_path(path))

    assert doc.contents() == ["a\rb\r"]
    assert doc.newline == "\n"


def test_undecodable_file_raises_encoding_error(write_lines: WriteLines) -> None:
    path = write_lines([])
    path.write_bytes(b"ok\n\xff\xfe\xfa\n")
    doc = Document.from_path(path)

    with pytest.raises(DocumentEncodingError) as excinfo:
        scan(doc)

    assert isinstance(excinfo.value, DocumentIOError)
    assert excinfo.value.path == doc.path


def test_failed_scan_leaves_document_unchanged(write_lines: WriteLines) -> None:
    path = write_lines(["A", "B"])
    doc = scan(Document.from_path(path), marker("A", "a"))

    path.write_bytes(b"\xff\xfe\xfa\n")
    with pytest.raises(DocumentEncodingError):
        scan(doc)

    assert doc.contents() == ["A", "B"]
    assert doc.tags == {"a"}


def test_unknown_encoding_raises_encoding_error(write_lines: WriteLines) -> None:
    path = write_lines(["A"])
    doc = scan(Document.from_path(path))

    with pytest.raises(DocumentEncodingError, match="no-such-codec"):
        Document.from_path(path, encoding="no-such-codec")

    doc.encoding = "no-such-codec"
    with pytest.raises(DocumentEncodingError):
        scan(doc)
    assert doc.contents() == ["A"]


def test_file_removed_after_construction_raises_io_error(write_lines: WriteLines) -> None:
    path = write_lines(["A"])
    doc = Document.from_path(path)
    path.unlink()

    with pytest.raises(DocumentIOError):
        scan(doc)


def test_configured_encoding_is_used(write_lines: WriteLines) -> None:
    path = write_lines([])
    path.write_bytes("café\n".encode("latin-1"))

    doc = scan(Document.from_path(path, encoding="latin-1"), marker("café", "c"))

    assert doc.contents() == ["café"]
    assert doc.tags == {"c"}
