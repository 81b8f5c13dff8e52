# topmark:header:start
#
#   project      : Tagline
#   file         : __init__.py
#   file_relpath : src/tagline/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Tagline configuration: TOML sources, merge policy and logging setup.

Build a `MutableConfig` (e.g. with `MutableConfig.load_merged`), then
`freeze()` it into an immutable `Config`. Use `Config.thaw()` to edit a frozen
config.
"""

from __future__ import annotations

from tagline.config.model import Config, MutableConfig

__all__: list[str] = [
    "Config",
    "MutableConfig",
]
