# topmark:header:start
#
#   project      : Tagline
#   file         : __init__.py
#   file_relpath : src/tagline/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Tagline CLI subcommands."""

from __future__ import annotations
