# topmark:header:start
#
#   project      : Tagline
#   file         : insert.py
#   file_relpath : src/tagline/cli/commands/insert.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Tagline `insert` and `insert-between` commands.

Both commands scan the file with the configured rules, then rewrite it through
an atomic scratch-file swap.

Examples:
    Insert a line after every line containing ``[plugins]``::

        tagline insert app.cfg --marker plugins=[plugins] -t plugins -c "extra = on"

    Insert lines before the end marker of a generated block, skipping lines
    already present::

        tagline insert-between gen.py begin end --unique \\
            --marker "begin=# BEGIN GENERATED" --marker "end=# END GENERATED" \\
            --from-file snippet.py
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO

import click

from tagline.cli.cmd_common import (
    display_path,
    get_console,
    get_effective_verbosity,
    load_document,
)
from tagline.cli.errors import translate_errors
from tagline.cli.options import common_rule_options, content_options, resolve_content
from tagline.document import insert, insert_between, insert_between_unique


@click.command(
    name="insert",
    help=(
        "Insert lines after every line carrying one of the given tags. "
        "Without --tag, the whole file is replaced."
    ),
)
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "-t",
    "--tag",
    "tags",
    multiple=True,
    help="Target tag (repeatable, order matters).",
)
@content_options
@common_rule_options
def insert_command(
    *,
    path: Path,
    tags: tuple[str, ...],
    content: tuple[str, ...],
    from_file: IO[str] | None,
    markers: tuple[str, ...],
    regexes: tuple[str, ...],
    config_files: tuple[Path, ...],
    no_config: bool,
    encoding: str | None,
) -> None:
    """Insert content at tagged lines, or replace the file when no tag is given."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    lines = resolve_content(content, from_file)

    document = load_document(
        path,
        markers=markers,
        regexes=regexes,
        config_files=config_files,
        no_config=no_config,
        encoding=encoding,
    )
    with translate_errors():
        inserted = insert(document, tags, lines)

    if get_effective_verbosity(ctx) > logging.WARNING:
        return
    if not tags:
        console.print(f"Replaced {display_path(document)} with {len(lines)} line(s).")
    elif inserted == 0:
        console.warn(f"No line of {display_path(document)} carries {', '.join(tags)}.")
    else:
        console.print(f"Inserted {inserted} block(s) into {display_path(document)}.")


@click.command(
    name="insert-between",
    help="Insert lines just before END in the first START/END tag pair.",
)
@click.argument("path", type=click.Path(path_type=Path))
@click.argument("start")
@click.argument("end")
@click.option(
    "--unique",
    is_flag=True,
    default=False,
    help="Skip lines already present between START and END.",
)
@content_options
@common_rule_options
def insert_between_command(
    *,
    path: Path,
    start: str,
    end: str,
    unique: bool,
    content: tuple[str, ...],
    from_file: IO[str] | None,
    markers: tuple[str, ...],
    regexes: tuple[str, ...],
    config_files: tuple[Path, ...],
    no_config: bool,
    encoding: str | None,
) -> None:
    """Insert content between a matched start/end tag pair."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    lines = resolve_content(content, from_file)

    document = load_document(
        path,
        markers=markers,
        regexes=regexes,
        config_files=config_files,
        no_config=no_config,
        encoding=encoding,
    )
    with translate_errors():
        if unique:
            count = insert_between_unique(document, start, end, lines)
            message = f"Inserted {count} new line(s) into {display_path(document)}."
        else:
            end_line = insert_between(document, start, end, lines)
            message = (
                f"Inserted {len(lines)} line(s) before line {end_line} "
                f"of {display_path(document)}."
            )

    if get_effective_verbosity(ctx) <= logging.WARNING:
        console.print(message)
