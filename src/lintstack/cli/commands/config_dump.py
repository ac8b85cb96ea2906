# topmark:header:start
#
#   project      : LintStack
#   file         : config_dump.py
#   file_relpath : src/lintstack/cli/commands/config_dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LintStack `config dump` command.

Emits the configuration resolved for a directory, after merging every
discovered and explicit configuration file and applying defaults.

In the default TOML format the document is wrapped between
`TOML_BLOCK_START` and `TOML_BLOCK_END` markers for easy parsing in tests
or tooling. Diagnostics are written to stderr.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from lintstack.cli.cli_types import EnumChoiceParam, OutputFormat
from lintstack.cli.emitters import emit_toml_block, render_diagnostics
from lintstack.cli.errors import LintstackUsageError, from_config_error
from lintstack.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    get_console,
    get_verbosity,
)
from lintstack.config.errors import ConfigError
from lintstack.config.logging import get_logger
from lintstack.config.render import to_toml
from lintstack.config.resolve import resolve_config
from lintstack.constants import TOML_BLOCK_END, TOML_BLOCK_START

if TYPE_CHECKING:
    from lintstack.cli.console import ClickConsole
    from lintstack.config.logging import LintstackLogger
    from lintstack.config.model import ResolvedConfig
    from lintstack.config.types import TrustMode

logger: LintstackLogger = get_logger(__name__)


@click.command(
    name="dump",
    help=(
        "Resolve and print the configuration that applies to DIRECTORY "
        "(default: the current directory)."
    ),
    epilog=(
        "Notes:\n"
        "  • Configuration files are merged from the filesystem root down to DIRECTORY;\n"
        "    files given with --config are merged last.\n"
        "  • In TOML format, output is wrapped between "
        f"'{TOML_BLOCK_START}' and '{TOML_BLOCK_END}' markers."
    ),
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("directory", required=False, default=".")
@common_config_options
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=OutputFormat.TOML.value,
    show_default=True,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.pass_context
def config_dump_command(
    ctx: click.Context,
    directory: str,
    *,
    config_name: str | None,
    config_paths: tuple[str, ...],
    no_discovery: bool,
    trust_mode: TrustMode,
    output_format: OutputFormat,
) -> None:
    """Dump the resolved configuration for ``directory``.

    Args:
        ctx (click.Context): Click context carrying the console and verbosity.
        directory (str): Target directory; relative paths and ``~`` are expanded.
        config_name (str | None): Profile to select in every file.
        config_paths (tuple[str, ...]): Explicit configuration files.
        no_discovery (bool): Skip ancestry discovery and use ``config_paths`` only.
        trust_mode (TrustMode): How configuration files are parsed.
        output_format (OutputFormat): ``toml`` or ``json``.

    Raises:
        LintstackUsageError: If ``--no-discovery`` is given without ``--config``.
        LintstackError: Mapped from configuration errors (see `from_config_error`).
    """
    console: ClickConsole = get_console(ctx)
    vlevel: int = get_verbosity(ctx)

    if no_discovery and not config_paths:
        raise LintstackUsageError("'--no-discovery' requires at least one '--config' file.")

    try:
        config: ResolvedConfig = resolve_config(
            directory,
            config_name=config_name,
            config_files=config_paths,
            discover=not no_discovery,
            mode=trust_mode,
        )
    except ConfigError as exc:
        logger.debug("Configuration resolution failed: %s", exc)
        raise from_config_error(exc) from exc

    render_diagnostics(console=console, diagnostics=config.diagnostics, verbosity_level=vlevel)

    if output_format == OutputFormat.JSON:
        console.print(json.dumps(config.to_dict(), indent=2, default=str))
        return

    if vlevel > 0:
        console.note(f"Config files processed: {len(config.config_files)}")
        for i, c in enumerate(config.config_files, start=1):
            console.note(f"Loaded config {i}: {c}")

    emit_toml_block(
        console=console,
        title="LintStack Config Dump (TOML):",
        toml_text=to_toml(config.to_toml_dict()),
        verbosity_level=vlevel,
    )
