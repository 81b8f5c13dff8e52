# topmark:header:start
#
#   project      : Tagline
#   file         : test_scratch_file.py
#   file_relpath : tests/utils/test_scratch_file.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Tests for `tagline.utils.scratch` and `tagline.utils.file`."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from tagline.core.errors import DocumentEncodingError, DocumentIOError, DocumentNotFoundError
from tagline.utils.file import check_encoding, compute_relpath, resolve_path
from tagline.utils.scratch import ScratchFile


def _names(directory: Path) -> list[str]:
    return sorted(p.name for p in directory.iterdir())


def test_commit_replaces_destination(tmp_path: Path) -> None:
    dest = tmp_path / "f.txt"
    dest.write_text("old\n", encoding="utf-8")

    with ScratchFile(dest) as scratch:
        assert scratch.path is not None
        assert scratch.path.parent == tmp_path
        scratch.writelines(["new\r\n", "lines\n"])
        scratch.commit()

    assert dest.read_bytes() == b"new\r\nlines\n"
    assert scratch.committed
    assert _names(tmp_path) == ["f.txt"]


def test_leaving_without_commit_discards(tmp_path: Path) -> None:
    dest = tmp_path / "f.txt"
    dest.write_text("old\n", encoding="utf-8")

    with ScratchFile(dest) as scratch:
        scratch.write("never committed\n")

    assert dest.read_text(encoding="utf-8") == "old\n"
    assert _names(tmp_path) == ["f.txt"]


def test_exception_inside_block_discards(tmp_path: Path) -> None:
    dest = tmp_path / "f.txt"
    dest.write_text("old\n", encoding="utf-8")

    with pytest.raises(RuntimeError), ScratchFile(dest) as scratch:
        scratch.write("partial")
        raise RuntimeError("boom")

    assert dest.read_text(encoding="utf-8") == "old\n"
    assert _names(tmp_path) == ["f.txt"]


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_commit_keeps_permission_bits(tmp_path: Path) -> None:
    dest = tmp_path / "script.sh"
    dest.write_text("echo old\n", encoding="utf-8")
    dest.chmod(0o755)

    with ScratchFile(dest) as scratch:
        scratch.write("echo new\n")
        scratch.commit()

    assert stat.S_IMODE(dest.stat().st_mode) == 0o755


def test_write_after_commit_fails(tmp_path: Path) -> None:
    dest = tmp_path / "f.txt"
    dest.write_text("", encoding="utf-8")

    with ScratchFile(dest) as scratch:
        scratch.commit()
        with pytest.raises(DocumentIOError):
            scratch.write("late")


def test_missing_directory_raises_io_error(tmp_path: Path) -> None:
    with pytest.raises(DocumentIOError), ScratchFile(tmp_path / "missing" / "f.txt"):
        pass


def test_unknown_encoding_leaves_no_scratch_file(tmp_path: Path) -> None:
    dest = tmp_path / "f.txt"
    dest.write_text("old\n", encoding="utf-8")

    with pytest.raises(DocumentEncodingError), ScratchFile(dest, encoding="no-such-codec"):
        pass

    assert _names(tmp_path) == ["f.txt"]


def test_check_encoding(tmp_path: Path) -> None:
    assert check_encoding("UTF8") == "utf-8"
    assert check_encoding("latin-1") == "iso8859-1"
    with pytest.raises(DocumentEncodingError, match="no-such-codec") as excinfo:
        check_encoding("no-such-codec", path=tmp_path / "f.txt")

    assert excinfo.value.path == tmp_path / "f.txt"
    assert isinstance(excinfo.value.__cause__, LookupError)


def test_resolve_path_is_absolute_with_size(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "f.txt").write_bytes(b"12345")
    monkeypatch.chdir(tmp_path)

    resolved = resolve_path("f.txt")

    assert resolved.path == tmp_path / "f.txt"
    assert resolved.path.is_absolute()
    assert resolved.size == 5


def test_resolve_path_rejects_missing_and_directories(tmp_path: Path) -> None:
    with pytest.raises(DocumentNotFoundError):
        resolve_path(tmp_path / "nope.txt")
    with pytest.raises(DocumentNotFoundError) as excinfo:
        resolve_path(tmp_path)

    assert isinstance(excinfo.value, FileNotFoundError)


def test_compute_relpath(tmp_path: Path) -> None:
    nested = tmp_path / "a" / "b.txt"

    assert compute_relpath(nested, tmp_path) == Path("a/b.txt")
    assert compute_relpath(tmp_path / "c.txt", tmp_path / "a") == Path("../c.txt")
