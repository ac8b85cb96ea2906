# topmark:header:start
#
#   project      : LintStack
#   file         : diagnostics.py
#   file_relpath : src/lintstack/config/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Non-fatal diagnostics collected while resolving configuration.

Fatal conditions are raised as exceptions (see `lintstack.config.errors`).
Everything else that an operator may want to know about (a profile that a
file does not declare, a value of the wrong type that was dropped, an explicit
config file that does not exist) is recorded here and travels with the
resolved configuration.

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * Diagnostic: immutable diagnostic payload (level + message).
    * DiagnosticStats: aggregated per-level counts.
    * DiagnosticLog: mutable collection used while extracting and merging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from lintstack.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from lintstack.config.logging import LintstackLogger


logger: LintstackLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only; machine formats should not use colors.

        Returns:
            Callable[[str], str]: The `yachalk` color function for this level.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly representation."""
        return {"level": self.level.value, "message": self.message}


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics.

    One log is filled per extracted profile (and one while collecting
    sources); their items are concatenated in source order when profiles
    are merged.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_info(self, message: str) -> None:
        """Add an ``info`` diagnostic to the log."""
        self._add(Diagnostic(DiagnosticLevel.INFO, message))

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic to the log."""
        self._add(Diagnostic(DiagnosticLevel.WARNING, message))

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics.

    Args:
        diagnostics (Iterable[Diagnostic]): The diagnostics to count.

    Returns:
        DiagnosticStats: Per-level counts.
    """
    items: list[Diagnostic] = list(diagnostics)
    n_info: int = sum(1 for d in items if d.level == DiagnosticLevel.INFO)
    n_warn: int = sum(1 for d in items if d.level == DiagnosticLevel.WARNING)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn)
