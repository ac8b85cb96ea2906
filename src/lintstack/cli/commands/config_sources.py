# topmark:header:start
#
#   project      : LintStack
#   file         : config_sources.py
#   file_relpath : src/lintstack/cli/commands/config_sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LintStack `config sources` command.

Lists the locations searched for configuration files, in merge order (lowest
precedence first), marking the ones that exist.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lintstack.cli.errors import from_config_error
from lintstack.cli.options import CONTEXT_SETTINGS, get_console, get_verbosity
from lintstack.config.errors import ConfigError
from lintstack.config.paths import candidate_config_files, expand_target

if TYPE_CHECKING:
    from pathlib import Path

    from lintstack.cli.console import ClickConsole

FOUND_MARK = "[x]"
MISSING_MARK = "[ ]"


@click.command(
    name="sources",
    help="List the configuration file locations searched for DIRECTORY, in merge order.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("directory", required=False, default=".")
@click.option(
    "--config",
    "-c",
    "config_paths",
    multiple=True,
    type=click.Path(dir_okay=False, path_type=str),
    help="Additional configuration file, listed after discovered ones (repeatable).",
)
@click.option(
    "--existing",
    "existing_only",
    is_flag=True,
    default=False,
    help="Only list locations where a configuration file exists.",
)
@click.pass_context
def config_sources_command(
    ctx: click.Context,
    directory: str,
    *,
    config_paths: tuple[str, ...],
    existing_only: bool,
) -> None:
    """List candidate configuration files for ``directory``."""
    console: ClickConsole = get_console(ctx)

    try:
        target: Path = expand_target(directory)
        locations: list[Path] = candidate_config_files(target)
        locations += [expand_target(p) for p in config_paths]
    except ConfigError as exc:
        raise from_config_error(exc) from exc

    if get_verbosity(ctx) > 0:
        console.note(f"Target directory: {target}")

    for location in locations:
        exists: bool = location.is_file()
        if existing_only and not exists:
            continue
        mark: str = FOUND_MARK if exists else MISSING_MARK
        console.print(f"{console.styled(mark, fg='green' if exists else None)} {location}")
