# topmark:header:start
#
#   project      : LintStack
#   file         : errors.py
#   file_relpath : src/lintstack/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the LintStack CLI.

Usage:
    Commands call the library and translate its exceptions with
    `from_config_error`, so that each failure class exits with its own code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from lintstack.cli.exit_codes import ExitCode
from lintstack.config.errors import ConfigError, ConfigReadError


class LintstackError(click.ClickException):
    """Base class for all LintStack CLI errors."""

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
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class LintstackUsageError(LintstackError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class LintstackConfigError(LintstackError):
    """Error for configuration errors (invalid target, malformed config file)."""

    exit_code = ExitCode.CONFIG_ERROR


class LintstackIOError(LintstackError):
    """Error for configuration files that exist but cannot be read."""

    exit_code = ExitCode.IO_ERROR


def from_config_error(exc: ConfigError) -> LintstackError:
    """Return the CLI error matching a library error.

    Args:
        exc (ConfigError): Error raised while resolving configuration.

    Returns:
        LintstackError: `LintstackIOError` for unreadable files,
        `LintstackConfigError` for everything else.
    """
    if isinstance(exc, ConfigReadError):
        return LintstackIOError(str(exc))
    return LintstackConfigError(str(exc))
