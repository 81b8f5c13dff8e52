# topmark:header:start
#
#   project      : Tagline
#   file         : constants.py
#   file_relpath : src/tagline/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Tagline Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    TAGLINE_VERSION: str = get_version("tagline")
except PackageNotFoundError:  # running from a source checkout
    TAGLINE_VERSION = "0.0.0"

DEFAULT_ENCODING: str = "utf-8"
DEFAULT_NEWLINE: str = "\n"

LOG_LEVEL_ENV_VAR: str = "TAGLINE_LOG_LEVEL"

# Configuration sources
TAGLINE_TOML_NAME: str = "tagline.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "tool.tagline"

# Prefix used for scratch files created next to the edited document
SCRATCH_PREFIX: str = ".tagline-"
SCRATCH_SUFFIX: str = ".tmp"
