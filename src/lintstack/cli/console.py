# topmark:header:start
#
#   project      : LintStack
#   file         : console.py
#   file_relpath : src/lintstack/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Two-stream console for LintStack commands.

stdout carries the document a command produces (TOML, JSON, a source list)
and nothing else, so it can be piped into other tools. Everything addressed
to the operator (notes, diagnostics, errors) goes to stderr.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, TextIO

import click

if TYPE_CHECKING:
    from lintstack.config.diagnostics import Diagnostic


class ClickConsole:
    """Route command output to stdout and operator messages to stderr.

    Attributes:
        enable_color (bool): Emit ANSI styling; False strips every style.
        out (TextIO): Document stream (stdout unless overridden).
        err (TextIO): Operator stream (stderr unless overridden).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style`, or unchanged without color."""
        return click.style(text, **style_kwargs) if self.enable_color else text

    def print(self, text: str = "") -> None:
        """Write one line of the command's document to stdout."""
        click.echo(text, file=self.out, color=self.enable_color)

    def note(self, text: str) -> None:
        """Write an operator note to stderr."""
        click.echo(text, file=self.err, color=self.enable_color)

    def diagnostic(self, diagnostic: Diagnostic) -> None:
        """Write ``- <level>: <message>`` to stderr, colored by severity."""
        line: str = f"- {diagnostic.level.value}: {diagnostic.message}"
        self.note(diagnostic.level.color(line) if self.enable_color else line)

    def error(self, text: str) -> None:
        """Write an error message to stderr."""
        self.note(self.styled(text, fg="bright_red"))
