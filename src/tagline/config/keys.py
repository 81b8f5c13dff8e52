# topmark:header:start
#
#   project      : Tagline
#   file         : keys.py
#   file_relpath : src/tagline/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Canonical TOML key names for Tagline configuration.

These constants are the external configuration schema as it appears in
``tagline.toml`` and in ``[tool.tagline]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by Tagline configuration."""

    KEY_ENCODING: Final[str] = "encoding"

    # [[rules]]
    KEY_RULES: Final[str] = "rules"

    KEY_RULE_TAG: Final[str] = "tag"
    KEY_RULE_MARKER: Final[str] = "marker"
    KEY_RULE_REGEX: Final[str] = "regex"
    KEY_RULE_LINES: Final[str] = "lines"

    RULE_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_RULE_TAG, KEY_RULE_MARKER, KEY_RULE_REGEX, KEY_RULE_LINES}
    )
    ROOT_KEYS: Final[frozenset[str]] = frozenset({KEY_ENCODING, KEY_RULES})
