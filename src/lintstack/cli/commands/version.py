# topmark:header:start
#
#   project      : LintStack
#   file         : version.py
#   file_relpath : src/lintstack/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LintStack `version` command.

Prints the current LintStack version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from lintstack.cli.options import get_console, get_verbosity
from lintstack.constants import LINTSTACK_VERSION


@click.command(
    name="version",
    help="Show the current version of LintStack.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Show the current version of LintStack."""
    console = get_console(ctx)
    if get_verbosity(ctx) > 0:
        console.print(console.styled("LintStack version:", bold=True, underline=True))
        console.print(f"    {console.styled(LINTSTACK_VERSION, bold=True)}")
    else:
        console.print(LINTSTACK_VERSION)
