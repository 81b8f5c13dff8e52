# topmark:header:start
#
#   project      : Tagline
#   file         : io.py
#   file_relpath : src/tagline/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Load, locate and render TOML configuration.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
Sources:
    - runtime defaults (`load_defaults_dict`, no I/O),
    - ``tagline.toml`` (keys at the document root),
    - ``pyproject.toml`` (keys under ``[tool.tagline]``).

Every read or parse failure raises `tagline.core.errors.ConfigError`.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from tagline.config.keys import Toml
from tagline.config.logging import get_logger
from tagline.constants import (
    DEFAULT_ENCODING,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
    TAGLINE_TOML_NAME,
)
from tagline.core.errors import ConfigError

TomlTable = dict[str, Any]

logger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return the runtime defaults as a new dict (no I/O)."""
    return {
        Toml.KEY_ENCODING: DEFAULT_ENCODING,
        Toml.KEY_RULES: [],
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    data: Any = doc.unwrap()
    logger.debug("Loaded TOML from %s", path)
    return cast("TomlTable", data) if isinstance(data, dict) else {}


def extract_pyproject_section(data: Mapping[str, Any]) -> TomlTable | None:
    """Return the ``[tool.tagline]`` table of a parsed pyproject, or None if absent."""
    tool_key, _, name = PYPROJECT_TOOL_SECTION.partition(".")
    tool = data.get(tool_key)
    if not isinstance(tool, Mapping):
        return None
    section = cast("Mapping[str, Any]", tool).get(name)
    if section is None:
        return None
    if not isinstance(section, Mapping):
        raise ConfigError("[tool.tagline] must be a table")
    return dict(cast("Mapping[str, Any]", section))


def load_config_table(path: Path) -> TomlTable | None:
    """Load the Tagline table from ``path``.

    ``pyproject.toml`` files contribute their ``[tool.tagline]`` table (None if
    missing); any other file is read as a standalone Tagline config.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    data = load_toml_dict(path)
    if path.name == PYPROJECT_TOML_NAME:
        return extract_pyproject_section(data)
    return data


def discover_config_files(start: Path) -> list[Path]:
    """Find the configuration files that apply to files under ``start``.

    Walks from ``start`` (a directory) up to the filesystem root and stops at the
    first directory holding ``tagline.toml`` or a ``pyproject.toml`` with a
    ``[tool.tagline]`` table. Within that directory ``pyproject.toml`` comes first
    so that ``tagline.toml`` wins on conflicts.

    Returns:
        list[Path]: Config files in merge order (possibly empty).
    """
    for directory in (start, *start.parents):
        found: list[Path] = []
        pyproject = directory / PYPROJECT_TOML_NAME
        if pyproject.is_file() and load_config_table(pyproject) is not None:
            found.append(pyproject)
        tagline_toml = directory / TAGLINE_TOML_NAME
        if tagline_toml.is_file():
            found.append(tagline_toml)
        if found:
            logger.debug("Discovered config files: %s", [str(p) for p in found])
            return found
    return []


def to_toml(table: Mapping[str, Any]) -> str:
    """Serialize a TOML mapping to a string. ``None`` values are dropped."""
    return tomlkit.dumps(_strip_none(table))


def _strip_none(value: object) -> Any:
    # TOML has no null
    if isinstance(value, Mapping):
        m = cast("Mapping[object, object]", value)
        return {str(k): _strip_none(v) for k, v in m.items() if v is not None}
    if isinstance(value, (list, tuple)):
        seq = cast("list[object]", value)
        return [_strip_none(v) for v in seq if v is not None]
    return value
