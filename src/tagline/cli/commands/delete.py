# topmark:header:start
#
#   project      : Tagline
#   file         : delete.py
#   file_relpath : src/tagline/cli/commands/delete.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Tagline `delete` and `delete-between` commands."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from tagline.cli.cmd_common import (
    display_path,
    get_console,
    get_effective_verbosity,
    load_document,
)
from tagline.cli.errors import translate_errors
from tagline.cli.options import common_rule_options
from tagline.document import delete, delete_between


@click.command(
    name="delete",
    help="Delete every line carrying one of the given tags. Without --tag, empty the file.",
)
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "-t",
    "--tag",
    "tags",
    multiple=True,
    help="Tag of the lines to delete (repeatable).",
)
@common_rule_options
def delete_command(
    *,
    path: Path,
    tags: tuple[str, ...],
    markers: tuple[str, ...],
    regexes: tuple[str, ...],
    config_files: tuple[Path, ...],
    no_config: bool,
    encoding: str | None,
) -> None:
    """Delete tagged lines."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    document = load_document(
        path,
        markers=markers,
        regexes=regexes,
        config_files=config_files,
        no_config=no_config,
        encoding=encoding,
    )
    with translate_errors():
        removed = delete(document, tags)

    if get_effective_verbosity(ctx) <= logging.WARNING:
        console.print(f"Deleted {removed} line(s) from {display_path(document)}.")


@click.command(
    name="delete-between",
    help=(
        "Delete lines between a START/END tag pair (tagged lines kept). "
        "With only --start, delete from the START line to the end of the file; "
        "with only --end, delete from the top of the file through the END line; "
        "with neither, empty the file."
    ),
)
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--start", "start", default="", help="Start tag.")
@click.option("--end", "end", default="", help="End tag.")
@common_rule_options
def delete_between_command(
    *,
    path: Path,
    start: str,
    end: str,
    markers: tuple[str, ...],
    regexes: tuple[str, ...],
    config_files: tuple[Path, ...],
    no_config: bool,
    encoding: str | None,
) -> None:
    """Delete a tag-bounded range of lines."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    document = load_document(
        path,
        markers=markers,
        regexes=regexes,
        config_files=config_files,
        no_config=no_config,
        encoding=encoding,
    )
    with translate_errors():
        removed = delete_between(document, start, end)

    if get_effective_verbosity(ctx) <= logging.WARNING:
        console.print(f"Deleted {removed} line(s) from {display_path(document)}.")
