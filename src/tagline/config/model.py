# topmark:header:start
#
#   project      : Tagline
#   file         : model.py
#   file_relpath : src/tagline/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot handed to the CLI commands.
    - `MutableConfig`: a mutable builder used while merging sources; it can be
      frozen into `Config` and thawed back for edits.

Merge policy (`MutableConfig.merge_with`):
    - ``encoding``: the later source wins when it sets a value.
    - ``rules``: rules accumulate; later sources append to earlier ones.
    - ``config_files``: accumulate, in merge order.

Layering (`MutableConfig.load_merged`), later wins:
    defaults → discovered ``pyproject.toml`` / ``tagline.toml`` → explicit config
    files → overrides (CLI options).
"""

from __future__ import annotations

import codecs
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

from tagline.config.io import (
    discover_config_files,
    load_config_table,
    load_defaults_dict,
    to_toml,
)
from tagline.config.keys import Toml
from tagline.config.logging import get_logger
from tagline.core.errors import ConfigError
from tagline.document.classifiers import TagRule

if TYPE_CHECKING:
    from tagline.config.io import TomlTable
    from tagline.config.logging import TaglineLogger
    from tagline.document.classifiers import Classifier

logger: TaglineLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        encoding (str): Text encoding for scanning and rewriting documents.
        rules (tuple[TagRule, ...]): Declarative classifiers, in merge order.
        config_files (tuple[Path, ...]): Config files that contributed, in merge order.
    """

    encoding: str
    rules: tuple[TagRule, ...]
    config_files: tuple[Path, ...] = ()

    def classifiers(self) -> tuple[Classifier, ...]:
        """Build one classifier per rule."""
        return tuple(rule.to_classifier() for rule in self.rules)

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this config."""
        return MutableConfig(
            encoding=self.encoding,
            rules=list(self.rules),
            config_files=list(self.config_files),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the config as a TOML-ready mapping (sources are not included)."""
        return {
            Toml.KEY_ENCODING: self.encoding,
            Toml.KEY_RULES: [rule.to_dict() for rule in self.rules],
        }

    def to_toml(self) -> str:
        """Render the config as a TOML document."""
        return to_toml(self.to_toml_dict())


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Attributes:
        encoding (str | None): Text encoding; None means "inherit".
        rules (list[TagRule]): Declarative classifiers.
        config_files (list[Path]): Contributing config files.
    """

    encoding: str | None = None
    rules: list[TagRule] = field(default_factory=lambda: [])
    config_files: list[Path] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(
        cls,
        data: Mapping[str, Any],
        *,
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Build a config layer from a parsed TOML table.

        Args:
            data (Mapping[str, Any]): Keys at the Tagline root (``encoding``, ``rules``).
            config_file (Path | None): Source file, used in error messages and provenance.

        Returns:
            MutableConfig: The layer.

        Raises:
            ConfigError: If a value has the wrong type or a rule is invalid.
        """
        where = f" in {config_file}" if config_file else ""
        for key in data:
            if key not in Toml.ROOT_KEYS:
                logger.warning("Ignoring unknown config key %r%s", key, where)

        encoding = data.get(Toml.KEY_ENCODING)
        if encoding is not None and (not isinstance(encoding, str) or not encoding):
            raise ConfigError(f"'{Toml.KEY_ENCODING}' must be a non-empty string{where}")
        if encoding is not None:
            _check_codec(cast("str", encoding), where)

        raw_rules = data.get(Toml.KEY_RULES, [])
        if not isinstance(raw_rules, list):
            raise ConfigError(f"'{Toml.KEY_RULES}' must be an array of tables{where}")
        rules = [
            _parse_rule(cast("object", raw), where) for raw in cast("list[object]", raw_rules)
        ]

        return cls(
            encoding=encoding,
            rules=rules,
            config_files=[config_file] if config_file else [],
        )

    @classmethod
    def from_file(cls, path: Path) -> MutableConfig:
        """Load a config layer from ``tagline.toml``/``pyproject.toml`` or any TOML file.

        Raises:
            ConfigError: If the file cannot be read or holds invalid configuration.
        """
        table = load_config_table(path)
        return cls.from_toml_dict(table or {}, config_file=path)

    @classmethod
    def load_merged(
        cls,
        *,
        search_from: Path | None = None,
        config_files: Iterable[Path] = (),
        overrides: MutableConfig | None = None,
    ) -> MutableConfig:
        """Merge defaults, discovered files, explicit files and overrides.

        Args:
            search_from (Path | None): Directory where discovery starts (skipped if None).
            config_files (Iterable[Path]): Explicit config files, merged in order.
            overrides (MutableConfig | None): Final layer, typically built from CLI options.

        Returns:
            MutableConfig: The merged builder.
        """
        merged = cls.from_defaults()
        if search_from is not None:
            for path in discover_config_files(search_from):
                merged = merged.merge_with(cls.from_file(path))
        for path in config_files:
            merged = merged.merge_with(cls.from_file(path))
        if overrides is not None:
            merged = merged.merge_with(overrides)
        logger.debug("Merged config: %s", merged)
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder with ``other`` layered on top of ``self``."""
        return MutableConfig(
            encoding=other.encoding if other.encoding is not None else self.encoding,
            rules=[*self.rules, *other.rules],
            config_files=[*self.config_files, *other.config_files],
        )

    def freeze(self) -> Config:
        """Return the immutable snapshot; the encoding falls back to the default.

        Raises:
            ConfigError: If the encoding is not a known codec.
        """
        encoding = self.encoding or cast("str", load_defaults_dict()[Toml.KEY_ENCODING])
        _check_codec(encoding, "")
        return Config(
            encoding=encoding,
            rules=tuple(self.rules),
            config_files=tuple(self.config_files),
        )


def _check_codec(encoding: str, where: str) -> None:
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ConfigError(f"Unknown encoding '{encoding}'{where}") from exc


def _parse_rule(raw: object, where: str) -> TagRule:
    if not isinstance(raw, Mapping):
        raise ConfigError(f"Each entry of '{Toml.KEY_RULES}' must be a table{where}")
    table = cast("Mapping[str, Any]", raw)

    unknown = set(table) - Toml.RULE_KEYS
    if unknown:
        raise ConfigError(f"Unknown rule key(s) {sorted(unknown)}{where}")

    tag = table.get(Toml.KEY_RULE_TAG)
    if not isinstance(tag, str):
        raise ConfigError(f"Rule '{Toml.KEY_RULE_TAG}' must be a string{where}")

    for key in (Toml.KEY_RULE_MARKER, Toml.KEY_RULE_REGEX):
        value = table.get(key)
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"Rule '{key}' for tag {tag!r} must be a string{where}")

    lines = table.get(Toml.KEY_RULE_LINES)
    if lines is not None:
        if not isinstance(lines, list) or not all(
            isinstance(n, int) and not isinstance(n, bool) for n in cast("list[object]", lines)
        ):
            raise ConfigError(f"Rule 'lines' for tag {tag!r} must be an array of integers{where}")
        lines = tuple(cast("list[int]", lines))

    rule = TagRule(
        tag=tag,
        marker=table.get(Toml.KEY_RULE_MARKER),
        regex=table.get(Toml.KEY_RULE_REGEX),
        lines=lines,
    )
    # Compile eagerly so that bad patterns are reported at load time.
    rule.to_classifier()
    return rule
