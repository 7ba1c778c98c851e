# topmark:header:start
#
#   project      : PackLog
#   file         : errors.py
#   file_relpath : src/packlog/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the PackLog CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes (see `packlog.core.exit_codes.ExitCode`).

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from packlog.core.exit_codes import ExitCode


class PacklogError(click.ClickException):
    """Base class for all PackLog CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class PacklogUsageError(PacklogError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class PacklogDecodeError(PacklogError):
    """Error for malformed build-log input (any `packlog.decoder.errors.DecodeError`)."""

    exit_code = ExitCode.DECODE_ERROR


class PacklogFileNotFoundError(PacklogError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class PacklogPermissionDeniedError(PacklogError):
    """Error for insufficient permissions reading the input."""

    exit_code = ExitCode.PERMISSION_DENIED


class PacklogIOError(PacklogError):
    """Error for I/O errors reading the input."""

    exit_code = ExitCode.IO_ERROR


class PacklogConfigError(PacklogError):
    """Error for configuration errors (unreadable or malformed TOML)."""

    exit_code = ExitCode.CONFIG_ERROR
