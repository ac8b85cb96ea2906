# topmark:header:start
#
#   project      : LintStack
#   file         : profile.py
#   file_relpath : src/lintstack/config/profile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Profile: the mutable, all-optional shape used between extraction and defaulting.

Every configurable field is ``None`` until a source sets it. ``None`` means
"not configured here" and is distinct from a configured empty value; the
merger relies on that distinction, so defaults are applied only after the
last merge (see `lintstack.config.resolve.finalize`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from lintstack.config.diagnostics import Diagnostic
    from lintstack.config.types import CheckOptions, FileEntry


@dataclass
class Profile:
    """Configuration values extracted from one profile block, or a merge of several.

    Attributes:
        check_for_updates (bool | None): Whether the tool may look for new releases.
        requires (list[str] | None): Modules or paths to load before analysis.
        plugins (list[object] | None): Plugin references (opaque).
        included (list[FileEntry] | None): Paths/globs selecting files to analyze.
        excluded (list[FileEntry] | None): Paths/globs or pattern matchers to skip.
        checks (dict[str, CheckOptions] | None): Check name -> options, in
            first-seen order.
        parse_timeout (int | None): Milliseconds allowed for parsing one file.
        strict (bool | None): Report low-priority issues too.
        color (bool | None): Colorize output.
        config_files (list[Path]): Sources this profile was built from.
        diagnostics (list[Diagnostic]): Non-fatal findings, in source order.
    """

    check_for_updates: bool | None = None
    requires: list[str] | None = None
    plugins: list[object] | None = None
    included: list[FileEntry] | None = None
    excluded: list[FileEntry] | None = None
    checks: dict[str, CheckOptions] | None = None
    parse_timeout: int | None = None
    strict: bool | None = None
    color: bool | None = None

    # Provenance
    config_files: list[Path] = field(default_factory=lambda: [])
    diagnostics: list[Diagnostic] = field(default_factory=lambda: [])

    @property
    def is_empty(self) -> bool:
        """Return True if no configurable field is set."""
        return all(
            value is None
            for value in (
                self.check_for_updates,
                self.requires,
                self.plugins,
                self.included,
                self.excluded,
                self.checks,
                self.parse_timeout,
                self.strict,
                self.color,
            )
        )
