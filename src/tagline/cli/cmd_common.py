# topmark:header:start
#
#   project      : Tagline
#   file         : cmd_common.py
#   file_relpath : src/tagline/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Shared helpers for Tagline subcommands.

Commands follow the same steps: resolve the config for the target file, build
and scan the `tagline.document.Document`, run one engine operation, and report
through the console stored in the Click context.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import click

from tagline.cli.errors import translate_errors
from tagline.config import Config, MutableConfig
from tagline.config.logging import get_logger
from tagline.document import Document, parse_rule_option, scan
from tagline.utils.file import compute_relpath

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tagline.cli.console import ConsoleLike
    from tagline.config.logging import TaglineLogger

logger: TaglineLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console created by the group callback."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output level stored by the group callback."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def build_config(
    search_from: Path,
    *,
    markers: Sequence[str] = (),
    regexes: Sequence[str] = (),
    config_files: Sequence[Path] = (),
    no_config: bool = False,
    encoding: str | None = None,
) -> Config:
    """Merge config sources and CLI options, discovering config files from ``search_from``.

    Raises:
        ConfigError: If a config source or a rule option is invalid.
    """
    overrides = MutableConfig(
        encoding=encoding,
        rules=[
            *(parse_rule_option(m, kind="marker") for m in markers),
            *(parse_rule_option(r, kind="regex") for r in regexes),
        ],
    )
    merged = MutableConfig.load_merged(
        search_from=None if no_config else Path(os.path.abspath(search_from)),
        config_files=config_files,
        overrides=overrides,
    )
    return merged.freeze()


def load_document(
    path: Path,
    *,
    markers: Sequence[str] = (),
    regexes: Sequence[str] = (),
    config_files: Sequence[Path] = (),
    no_config: bool = False,
    encoding: str | None = None,
) -> Document:
    """Build the config, then construct and scan the document at ``path``.

    Core errors are re-raised as `tagline.cli.errors.TaglineCliError`.
    """
    with translate_errors():
        config = build_config(
            Path(os.path.abspath(path)).parent,
            markers=markers,
            regexes=regexes,
            config_files=config_files,
            no_config=no_config,
            encoding=encoding,
        )
        if not config.rules:
            logger.info("No tagging rules configured for %s", path)
        document = Document.from_path(path, encoding=config.encoding)
        return scan(document, *config.classifiers())


def display_path(document: Document) -> str:
    """Return the document path relative to the CWD, for messages."""
    return compute_relpath(document.path).as_posix()
