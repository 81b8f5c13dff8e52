# topmark:header:start
#
#   project      : Tagline
#   file         : test_cli_basics.py
#   file_relpath : tests/cli/test_cli_basics.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""CLI test: group options, `version`, `dump-config` and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import tomlkit

from tagline.cli.exit_codes import ExitCode
from tagline.cli.options import ColorMode, resolve_color_mode, resolve_verbosity
from tagline.config.logging import TRACE_LEVEL
from tagline.constants import TAGLINE_VERSION
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli, run_cli_in

pytestmark = pytest.mark.cli


def test_version_outputs_version() -> None:
    result = run_cli(["version"])

    assert_SUCCESS(result)
    assert result.output.strip() == TAGLINE_VERSION


def test_verbose_version_has_heading() -> None:
    result = run_cli(["-v", "version"])

    assert_SUCCESS(result)
    assert "Tagline version:" in result.output
    assert TAGLINE_VERSION in result.output


def test_no_subcommand_prints_help() -> None:
    result = run_cli([])

    assert_SUCCESS(result)
    assert "Hint:" in result.output
    assert "insert-between" in result.output


def test_verbose_and_quiet_are_exclusive() -> None:
    result = run_cli(["-v", "-q", "version"])

    assert_exit(result, ExitCode.USAGE_ERROR)
    assert "mutually exclusive" in result.output


@pytest.mark.parametrize(
    ("verbose", "quiet", "level"),
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (0, 1, logging.ERROR),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, level: int) -> None:
    assert resolve_verbosity(verbose, quiet) == level


def test_resolve_color_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)

    assert resolve_color_mode(cli_mode=ColorMode.ALWAYS, stdout_isatty=False)
    assert not resolve_color_mode(cli_mode=ColorMode.NEVER, stdout_isatty=True)
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True)
    monkeypatch.setenv("NO_COLOR", "1")
    assert not resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True)
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(cli_mode=None, stdout_isatty=False)


def test_dump_config_shows_sources_and_rules(tmp_path: Path) -> None:
    (tmp_path / "tagline.toml").write_text(
        '[[rules]]\ntag = "begin"\nmarker = "# BEGIN"\n', encoding="utf-8"
    )

    result = run_cli_in(tmp_path, ["dump-config", "--marker", "cli=X"])

    assert_SUCCESS(result)
    assert result.output.splitlines()[0].startswith("# source: ")
    body = tomlkit.parse(result.output).unwrap()
    assert body["encoding"] == "utf-8"
    assert [rule["tag"] for rule in body["rules"]] == ["begin", "cli"]


def test_dump_config_no_config(tmp_path: Path) -> None:
    (tmp_path / "tagline.toml").write_text('encoding = "latin-1"\n', encoding="utf-8")

    result = run_cli_in(tmp_path, ["dump-config", "--no-config", "--encoding", "ascii"])

    assert_SUCCESS(result)
    assert "# source:" not in result.output
    assert tomlkit.parse(result.output).unwrap()["encoding"] == "ascii"


def test_log_level_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "doc.txt").write_text("A\n", encoding="utf-8")
    monkeypatch.setenv("TAGLINE_LOG_LEVEL", "DEBUG")

    result = run_cli_in(tmp_path, ["tags", "doc.txt", "--no-config"])

    assert_SUCCESS(result)
    assert "[DEBUG]" in result.output
