# topmark:header:start
#
#   project      : LintStack
#   file         : emitters.py
#   file_relpath : src/lintstack/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-facing output helpers shared by LintStack commands.

Resolved configuration goes to stdout; diagnostics and file listings go to
stderr so that the TOML or JSON document on stdout stays machine-readable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lintstack.config.diagnostics import compute_diagnostic_stats
from lintstack.constants import TOML_BLOCK_END, TOML_BLOCK_START

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lintstack.cli.console import ClickConsole
    from lintstack.config.diagnostics import Diagnostic, DiagnosticStats


def emit_toml_block(
    *,
    console: ClickConsole,
    title: str,
    toml_text: str,
    verbosity_level: int,
) -> None:
    """Emit a TOML document between BEGIN/END markers.

    Args:
        console (ClickConsole): Console used for output.
        title (str): Title line shown above the block when verbosity > 0.
        toml_text (str): The TOML content to render.
        verbosity_level (int): Effective verbosity; 0 hides the title.
    """
    if verbosity_level > 0:
        console.print(console.styled(title, bold=True, underline=True))
    console.print(console.styled(TOML_BLOCK_START, fg="cyan", dim=True))
    console.print(console.styled(toml_text.rstrip("\n"), fg="cyan"))
    console.print(console.styled(TOML_BLOCK_END, fg="cyan", dim=True))


def _plural(n: int, word: str) -> str:
    return f"{n} {word}" + ("s" if n != 1 else "")


def render_diagnostics(
    *,
    console: ClickConsole,
    diagnostics: Sequence[Diagnostic],
    verbosity_level: int,
) -> None:
    """Render resolution diagnostics to stderr.

    Behavior:
        - No diagnostics: print nothing.
        - Quiet (verbosity < 0): print nothing.
        - Verbosity 0: a single triage line with a hint to use ``-v``.
        - Verbosity >= 1: the triage line and one line per diagnostic,
          colored by severity.

    Args:
        console (ClickConsole): Console used for output.
        diagnostics (Sequence[Diagnostic]): Diagnostics of the resolved configuration.
        verbosity_level (int): Effective program-output verbosity.
    """
    if not diagnostics or verbosity_level < 0:
        return

    stats: DiagnosticStats = compute_diagnostic_stats(diagnostics)
    parts: list[str] = []
    if stats.n_warning:
        parts.append(_plural(stats.n_warning, "warning"))
    if stats.n_info:
        parts.append(_plural(stats.n_info, "info"))
    triage: str = ", ".join(parts)

    if verbosity_level == 0:
        console.note(f"Config diagnostics: {triage} (use '-v' to view details)")
        return

    console.note(f"Config diagnostics: {triage}")
    for d in diagnostics:
        console.diagnostic(d)
