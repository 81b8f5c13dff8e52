# topmark:header:start
#
#   project      : Tagline
#   file         : errors.py
#   file_relpath : src/tagline/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Tagline contributors
#
# topmark:header:end

"""Exceptions for the Tagline CLI.

Usage:
    Commands run the engine inside `translate_errors()`, which converts core
    `tagline.core.errors.TaglineError` exceptions into the matching
    `TaglineCliError` subclass carrying a sysexits-aligned exit code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import IO, TYPE_CHECKING, Any

import click

from tagline.cli.exit_codes import ExitCode
from tagline.core.errors import (
    ConfigError,
    DocumentEncodingError,
    DocumentIOError,
    DocumentNotFoundError,
    TagError,
    TaglineError,
)

if TYPE_CHECKING:
    from collections.abc import Iterator


class TaglineCliError(click.ClickException):
    """Base class for all Tagline CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colour is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class TaglineUsageError(TaglineCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TaglineDataError(TaglineCliError):
    """Error for undecodable content and invalid, unknown or unmatched tags."""

    exit_code = ExitCode.DATA_ERROR


class TaglineFileNotFoundError(TaglineCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class TaglineIOError(TaglineCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class TaglineConfigError(TaglineCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


def cli_error_from(exc: TaglineError) -> TaglineCliError:
    """Return the CLI error matching a core exception."""
    message = str(exc)
    if isinstance(exc, DocumentNotFoundError):
        return TaglineFileNotFoundError(message)
    if isinstance(exc, (DocumentEncodingError, TagError)):
        return TaglineDataError(message)
    if isinstance(exc, DocumentIOError):
        return TaglineIOError(message)
    if isinstance(exc, ConfigError):
        return TaglineConfigError(message)
    return TaglineCliError(message)


@contextmanager
def translate_errors() -> Iterator[None]:
    """Re-raise core errors raised in the block as `TaglineCliError`."""
    try:
        yield
    except TaglineError as exc:
        raise cli_error_from(exc) from exc
