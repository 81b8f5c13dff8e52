# topmark:header:start
#
#   project      : Tagline
#   file         : __init__.py
#   file_relpath : src/tagline/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Core, dependency-free building blocks shared by the Tagline packages."""

from __future__ import annotations
