# topmark:header:start
#
#   project      : LintStack
#   file         : main.py
#   file_relpath : src/lintstack/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry point of the LintStack CLI.

Group-level options are initialized once and placed into ``ctx.obj``:

  * ``verbosity_level``: program-output verbosity from ``-v``/``-q``.
  * ``log_level``: internal logging level from ``LINTSTACK_LOG_LEVEL``.
  * ``console``: the [`lintstack.cli.console.ClickConsole`][] used for output.
"""

from __future__ import annotations

import click

from lintstack.cli.commands.config import config_command
from lintstack.cli.commands.version import version_command
from lintstack.cli.console import ClickConsole
from lintstack.cli.options import CONTEXT_SETTINGS, common_verbose_options, resolve_verbosity
from lintstack.config.logging import (
    LintstackLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)

logger: LintstackLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    enable_color: bool = not no_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="LintStack: hierarchical configuration for a static analysis tool.",
)
@common_verbose_options
@click.option(
    "--no-color",
    "no_color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the LintStack CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'lintstack config dump [DIR]' to show the resolved configuration.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(config_command)

if __name__ == "__main__":
    cli()
