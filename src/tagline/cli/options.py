# topmark:header:start
#
#   project      : Tagline
#   file         : options.py
#   file_relpath : src/tagline/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, rules/config,
content) and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from pathlib import Path
from typing import IO, Callable, ParamSpec, TypeVar

import click

from tagline.cli.errors import TaglineUsageError
from tagline.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The level as a logging-compatible integer.

    Raises:
        TaglineUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE, two set DEBUG, one sets INFO.
        One or more -q flags set ERROR. Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise TaglineUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add -v/--verbose and -q/--quiet counting options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --color (auto, always, never) and --no-color."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_rule_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add options selecting the tagging rules and config sources.

    Adds ``--marker``, ``--regex``, ``--config``, ``--no-config`` and ``--encoding``.
    """
    f = click.option(
        "--encoding",
        "encoding",
        default=None,
        help="Text encoding of the file (default: from config, else utf-8).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        default=False,
        help="Do not discover tagline.toml / pyproject.toml next to the file.",
    )(f)
    f = click.option(
        "--config",
        "config_files",
        multiple=True,
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Additional config file (repeatable; later files win).",
    )(f)
    f = click.option(
        "--regex",
        "regexes",
        multiple=True,
        metavar="TAG=PATTERN",
        help="Tag lines matching the regular expression PATTERN (repeatable).",
    )(f)
    f = click.option(
        "--marker",
        "markers",
        multiple=True,
        metavar="TAG=TEXT",
        help="Tag lines containing TEXT (repeatable).",
    )(f)
    return f


def content_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-c/--content`` and ``--from-file`` to supply the lines to insert."""
    f = click.option(
        "--from-file",
        "from_file",
        type=click.File("r", encoding="utf-8"),
        default=None,
        help="Read the lines to insert from a file ('-' for STDIN).",
    )(f)
    f = click.option(
        "-c",
        "--content",
        "content",
        multiple=True,
        help="A line to insert (repeatable, in order).",
    )(f)
    return f


def resolve_content(content: tuple[str, ...], from_file: IO[str] | None) -> list[str]:
    """Return the lines to insert from exactly one of ``--content`` / ``--from-file``.

    Raises:
        TaglineUsageError: If neither or both sources are given.
    """
    if content and from_file is not None:
        raise TaglineUsageError("Use either '--content' or '--from-file', not both.")
    if from_file is not None:
        return from_file.read().splitlines()
    if content:
        return list(content)
    raise TaglineUsageError("Nothing to insert: pass '--content' or '--from-file'.")
