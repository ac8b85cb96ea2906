# topmark:header:start
#
#   project      : LintStack
#   file         : model.py
#   file_relpath : src/lintstack/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolved configuration model.

`ResolvedConfig` is the immutable, fully-defaulted result of resolution and
the only value handed to the check-execution engine. Collections are tuples
and read-only mappings to prevent accidental mutation at runtime.

Export helpers:
    - `ResolvedConfig.to_dict`: plain, JSON-friendly data.
    - `ResolvedConfig.to_toml_dict`: TOML-friendly data for ``config dump``.

Both render pattern matchers as ``{"regex": "<pattern>"}`` tables.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

from lintstack.config.keys import Keys

if TYPE_CHECKING:
    from lintstack.config.diagnostics import Diagnostic
    from lintstack.config.render import TomlTable
    from lintstack.config.types import CheckOptions, FileEntry


_PLAIN_SCALARS: tuple[type, ...] = (str, int, float, bool)


def to_plain(value: object) -> Any:
    """Convert ``value`` to plain data (dicts, lists, scalars).

    Pattern matchers become ``{"regex": ...}`` tables (with ``flags`` when
    set), paths become strings, tuples and sets become lists. Scalars other
    than ``str``, ``int``, ``float``, ``bool`` and ``None`` (bytes, complex,
    arbitrary objects built in full evaluation) become their ``repr()``.
    """
    if isinstance(value, re.Pattern):
        pattern: re.Pattern[Any] = cast("re.Pattern[Any]", value)
        out: dict[str, Any] = {Keys.KEY_REGEX: pattern.pattern}
        # re.UNICODE is implied for str patterns
        flags: int = pattern.flags & ~re.UNICODE
        if flags:
            out["flags"] = flags
        return out
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): to_plain(v) for k, v in m.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in cast("list[object]", value)]
    if isinstance(value, (set, frozenset)):
        return sorted((to_plain(v) for v in cast("set[object]", value)), key=repr)
    if value is None or isinstance(value, _PLAIN_SCALARS):
        return value
    return repr(value)


@dataclass(frozen=True, slots=True)
class FileSelection:
    """Files the analysis runs on.

    Attributes:
        included (tuple[FileEntry, ...]): Anchored paths/globs to analyze.
        excluded (tuple[FileEntry, ...]): Anchored paths/globs or pattern matchers to skip.
    """

    included: tuple[FileEntry, ...]
    excluded: tuple[FileEntry, ...]


@dataclass(frozen=True, slots=True)
class ResolvedConfig:
    """Immutable, fully-defaulted configuration for one target directory.

    Attributes:
        files (FileSelection): Included and excluded file entries.
        checks (Mapping[str, CheckOptions]): Check name -> options, in first-seen order.
        requires (tuple[str, ...]): Modules or paths to load, in merge order.
        plugins (tuple[object, ...]): Plugin references, in merge order.
        parse_timeout (int): Milliseconds allowed for parsing one file.
        strict (bool): Report low-priority issues too.
        color (bool): Colorize output.
        check_for_updates (bool): Whether the tool may look for new releases.
        config_files (tuple[Path, ...]): Sources merged, lowest precedence first.
        diagnostics (tuple[Diagnostic, ...]): Non-fatal findings, in source order.
    """

    files: FileSelection
    checks: Mapping[str, CheckOptions]
    requires: tuple[str, ...]
    plugins: tuple[object, ...]
    parse_timeout: int
    strict: bool
    color: bool
    check_for_updates: bool

    # Provenance
    config_files: tuple[Path, ...]
    diagnostics: tuple[Diagnostic, ...]

    def to_dict(self) -> dict[str, Any]:
        """Return plain, JSON-friendly data for this configuration."""
        return {
            Keys.SECTION_FILES: {
                Keys.KEY_INCLUDED: to_plain(self.files.included),
                Keys.KEY_EXCLUDED: to_plain(self.files.excluded),
            },
            Keys.KEY_CHECKS: to_plain(self.checks),
            Keys.KEY_REQUIRES: list(self.requires),
            Keys.KEY_PLUGINS: to_plain(self.plugins),
            Keys.KEY_PARSE_TIMEOUT: self.parse_timeout,
            Keys.KEY_STRICT: self.strict,
            Keys.KEY_COLOR: self.color,
            Keys.KEY_CHECK_FOR_UPDATES: self.check_for_updates,
            Keys.KEY_CONFIG_FILES: [str(p) for p in self.config_files],
            Keys.KEY_DIAGNOSTICS: [d.to_dict() for d in self.diagnostics],
        }

    def to_toml_dict(self) -> TomlTable:
        """Return TOML-friendly data for this configuration.

        Checks render as an array of ``{name, options}`` tables so that option
        values of any shape stay unambiguous. Diagnostics are not exported.

        Returns:
            TomlTable: The TOML-serializable mapping.
        """
        return {
            Keys.KEY_CHECK_FOR_UPDATES: self.check_for_updates,
            Keys.KEY_PARSE_TIMEOUT: self.parse_timeout,
            Keys.KEY_STRICT: self.strict,
            Keys.KEY_COLOR: self.color,
            Keys.KEY_REQUIRES: list(self.requires),
            Keys.KEY_PLUGINS: to_plain(self.plugins),
            Keys.KEY_CONFIG_FILES: [str(p) for p in self.config_files],
            Keys.KEY_CHECKS: [
                {Keys.KEY_NAME: name, "options": to_plain(options)}
                for name, options in self.checks.items()
            ],
            Keys.SECTION_FILES: {
                Keys.KEY_INCLUDED: to_plain(self.files.included),
                Keys.KEY_EXCLUDED: to_plain(self.files.excluded),
            },
        }
