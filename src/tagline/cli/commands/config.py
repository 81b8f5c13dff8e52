# topmark:header:start
#
#   project      : Tagline
#   file         : config.py
#   file_relpath : src/tagline/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Tagline `dump-config` command.

Prints the effective configuration for a file (defaults, discovered and
explicit config files, and CLI rule options merged) as TOML.
"""

from __future__ import annotations

from pathlib import Path

import click

from tagline.cli.cmd_common import build_config, get_console
from tagline.cli.errors import translate_errors
from tagline.cli.options import common_rule_options


@click.command(
    name="dump-config",
    help="Print the effective configuration for PATH (a file or directory; default: the CWD) as TOML.",
)
@click.argument(
    "path",
    type=click.Path(path_type=Path),
    required=False,
    default=None,
)
@common_rule_options
def dump_config_command(
    *,
    path: Path | None,
    markers: tuple[str, ...],
    regexes: tuple[str, ...],
    config_files: tuple[Path, ...],
    no_config: bool,
    encoding: str | None,
) -> None:
    """Print the merged configuration as TOML."""
    console = get_console(click.get_current_context())
    if path is None:
        search_from = Path.cwd()
    else:
        search_from = path if path.is_dir() else path.parent

    with translate_errors():
        config = build_config(
            search_from,
            markers=markers,
            regexes=regexes,
            config_files=config_files,
            no_config=no_config,
            encoding=encoding,
        )

    for source in config.config_files:
        console.print(f"# source: {source}")
    console.print(config.to_toml(), nl=False)
