# topmark:header:start
#
#   project      : LintStack
#   file         : options.py
#   file_relpath : src/lintstack/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, configuration
sources) and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar

import click

from lintstack.cli.cli_types import EnumChoiceParam
from lintstack.cli.errors import LintstackUsageError
from lintstack.config.types import TrustMode

if TYPE_CHECKING:
    from lintstack.cli.console import ClickConsole

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by the group and its commands.
CONTEXT_SETTINGS: dict[str, Any] = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: ``verbose_count`` when verbose, ``-1`` when quiet, else ``0``.

    Raises:
        LintstackUsageError: If both flags are used together.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise LintstackUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count > 0:
        return verbose_count
    if quiet_count > 0:
        return -1
    return 0


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the options that select configuration sources and parsing.

    Adds ``--config-name``, ``--config`` (repeatable), ``--no-discovery``
    and ``--trust``.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "--config-name",
        "-C",
        "config_name",
        default=None,
        help="Profile to select in every configuration file (default: 'default').",
    )(f)
    f = click.option(
        "--config",
        "-c",
        "config_paths",
        multiple=True,
        type=click.Path(dir_okay=False, path_type=str),
        help="Additional configuration file, merged after discovered ones (repeatable).",
    )(f)
    f = click.option(
        "--no-discovery",
        "no_discovery",
        is_flag=True,
        default=False,
        help="Do not look for configuration files along the directory ancestry.",
    )(f)
    f = click.option(
        "--trust",
        "trust_mode",
        type=EnumChoiceParam(TrustMode),
        default=TrustMode.RESTRICTED.value,
        show_default=True,
        help=(
            "How configuration files are parsed: 'restricted' accepts literal values only, "
            "'full' executes them as Python code."
        ),
    )(f)
    return f


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the group context."""
    return ctx.obj["console"]


def get_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the group context (0 if unset)."""
    return int(ctx.obj.get("verbosity_level", 0))
