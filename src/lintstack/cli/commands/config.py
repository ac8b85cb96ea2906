# topmark:header:start
#
#   project      : LintStack
#   file         : config.py
#   file_relpath : src/lintstack/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LintStack `config` command group.

  * ``lintstack config dump``: show the resolved configuration.
  * ``lintstack config sources``: list the locations searched for configuration files.
"""

from __future__ import annotations

import click

from lintstack.cli.options import CONTEXT_SETTINGS

from .config_dump import config_dump_command
from .config_sources import config_sources_command


@click.group(
    name="config",
    help="Inspect LintStack configuration.",
    context_settings=CONTEXT_SETTINGS,
)
def config_command() -> None:
    """Group for configuration-related subcommands."""


config_command.add_command(config_dump_command, name="dump")
config_command.add_command(config_sources_command, name="sources")
