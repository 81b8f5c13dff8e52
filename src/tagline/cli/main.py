# topmark:header:start
#
#   project      : Tagline
#   file         : main.py
#   file_relpath : src/tagline/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Click entry point for the Tagline CLI.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the console and verbosity from there.
"""

from __future__ import annotations

import click

from tagline.cli.commands.config import dump_config_command
from tagline.cli.commands.delete import delete_between_command, delete_command
from tagline.cli.commands.insert import insert_between_command, insert_command
from tagline.cli.commands.tags import tags_command
from tagline.cli.commands.version import version_command
from tagline.cli.console import ClickConsole
from tagline.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from tagline.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via the environment only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Tagline: tag lines of a text file and edit it at the tags.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the Tagline CLI."""
    init_common_state(
        ctx, verbose=verbose, quiet=quiet, color_mode=color_mode, no_color=no_color
    )

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'tagline tags --marker TAG=TEXT FILE' to see tagged lines.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(tags_command)

cli.add_command(insert_command)

cli.add_command(insert_between_command)

cli.add_command(delete_command)

cli.add_command(delete_between_command)

cli.add_command(dump_config_command)

if __name__ == "__main__":
    cli()
