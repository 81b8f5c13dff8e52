# topmark:header:start
#
#   project      : Tagline
#   file         : __init__.py
#   file_relpath : src/tagline/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Tagline CLI package.

This package groups the Click command definitions and supporting utilities
for the Tagline command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        tagline = "tagline.cli.main:cli"

All subcommands live in `tagline.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
