# topmark:header:start
#
#   project      : Tagline
#   file         : tags.py
#   file_relpath : src/tagline/cli/commands/tags.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Tagline `tags` command.

Scans a file with the configured rules and lists the tagged lines. The file is
never modified.
"""

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
from tagline.cli.options import common_rule_options


@click.command(
    name="tags",
    help="Scan FILE and list its tagged lines.",
)
@click.argument("path", type=click.Path(path_type=Path))
@common_rule_options
@click.option(
    "--all",
    "show_all",
    is_flag=True,
    default=False,
    help="List untagged lines too.",
)
def tags_command(
    *,
    path: Path,
    markers: tuple[str, ...],
    regexes: tuple[str, ...],
    config_files: tuple[Path, ...],
    no_config: bool,
    encoding: str | None,
    show_all: bool,
) -> None:
    """List the tagged lines of a file as ``NUMBER: [TAGS] CONTENT``."""
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

    width = len(str(document.total_lines))
    shown = 0
    for line in document:
        if not line.tags and not show_all:
            continue
        shown += 1
        label = console.styled(f"[{', '.join(sorted(line.tags))}]", fg="cyan")
        console.print(f"{line.number:>{width}}: {label} {line.content}")

    if shown == 0:
        console.print(f"No tagged lines in {display_path(document)}.")

    if get_effective_verbosity(ctx) <= logging.INFO:
        console.print(
            console.styled(
                f"{display_path(document)}: {document.total_lines} line(s), "
                f"tags: {', '.join(sorted(document.tags)) or '-'}",
                bold=True,
            )
        )
