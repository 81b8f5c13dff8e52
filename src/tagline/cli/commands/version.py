# topmark:header:start
#
#   project      : Tagline
#   file         : version.py
#   file_relpath : src/tagline/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Tagline `version` command.

Prints the current Tagline version as installed in the active Python environment.
"""

from __future__ import annotations

import logging

import click

from tagline.cli.cmd_common import get_console, get_effective_verbosity
from tagline.constants import TAGLINE_VERSION


@click.command(
    name="version",
    help="Show the current version of Tagline.",
)
def version_command() -> None:
    """Show the current version of Tagline."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    if get_effective_verbosity(ctx) <= logging.INFO:
        console.print(console.styled("Tagline version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(TAGLINE_VERSION, bold=True)}")
    else:
        console.print(console.styled(TAGLINE_VERSION, bold=True))
