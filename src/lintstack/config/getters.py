# topmark:header:start
#
#   project      : LintStack
#   file         : getters.py
#   file_relpath : src/lintstack/config/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for profile blocks.

Each getter returns ``None`` when the key is absent (or explicitly ``None``)
so that the merger can tell "not configured" apart from "configured empty".
A value of the wrong shape is dropped: the getter logs a warning, records a
warning diagnostic with a stable location (``<file>[<profile>].<key>``) and
returns ``None``. Shape problems never abort resolution.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final

from lintstack.config.logging import get_logger

if TYPE_CHECKING:
    from lintstack.config.diagnostics import DiagnosticLog
    from lintstack.config.logging import LintstackLogger
    from lintstack.config.types import CheckOptions, FileEntry

logger: LintstackLogger = get_logger(__name__)


def is_any_list(value: object) -> bool:
    """Return True for list or tuple values (sequences, not strings)."""
    return isinstance(value, (list, tuple))


def _reject(loc: str, expected: str, value: object, diagnostics: DiagnosticLog) -> None:
    logger.warning("Expected %s in %s, got %s: %r", expected, loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected {expected} in {loc}, got {type(value).__name__}: {value!r}")


def get_bool_or_none_checked(
    table: Mapping[str, Any],
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> bool | None:
    """Return an optional bool value, warning when present but not `bool`."""
    value: Any | None = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    _reject(f"{where}.{key}", "bool", value, diagnostics)
    return None


def get_positive_int_or_none_checked(
    table: Mapping[str, Any],
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> int | None:
    """Return an optional positive int value.

    Notes:
        - Missing key / None -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
        - Zero and negative values are rejected.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    loc: Final[str] = f"{where}.{key}"
    if isinstance(value, bool) or not isinstance(value, int):
        _reject(loc, "int", value, diagnostics)
        return None
    if value <= 0:
        _reject(loc, "positive int", value, diagnostics)
        return None
    return value


def get_list_or_none_checked(
    table: Mapping[str, Any],
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    strings_only: bool = False,
) -> list[Any] | None:
    """Return an optional list value.

    Args:
        table (Mapping[str, Any]): Profile block (or sub-table) to query.
        key (str): Key to extract.
        where (str): Location prefix used in warnings.
        diagnostics (DiagnosticLog): Receives a warning per dropped value.
        strings_only (bool): Drop (with a warning) entries that are not strings.

    Returns:
        list[Any] | None: A new list, or None when absent or not a list/tuple.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    loc: Final[str] = f"{where}.{key}"
    if not is_any_list(value):
        _reject(loc, "list", value, diagnostics)
        return None
    if not strings_only:
        return list(value)
    out: list[str] = []
    for item in value:
        if isinstance(item, str):
            out.append(item)
        else:
            logger.warning("Ignoring non-string entry in %s: %r", loc, item)
            diagnostics.add_warning(f"Ignoring non-string entry in {loc}: {item!r}")
    return out


def get_file_entries_or_none_checked(
    table: Mapping[str, Any],
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    allow_patterns: bool,
) -> list[FileEntry] | None:
    """Return an optional list of file-selection entries.

    A single string (or pattern) is accepted as a one-element list. Entries
    must be strings; compiled patterns are accepted only when
    ``allow_patterns`` is set (``files.excluded``).
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    loc: Final[str] = f"{where}.{key}"
    items: list[Any] = list(value) if is_any_list(value) else [value]
    expected: str = "path, glob or re.compile() pattern" if allow_patterns else "path or glob"
    out: list[FileEntry] = []
    for item in items:
        if isinstance(item, str) or (allow_patterns and isinstance(item, re.Pattern)):
            out.append(item)
        else:
            _reject(loc, expected, item, diagnostics)
    return out


def get_checks_or_none_checked(
    table: Mapping[str, Any],
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> dict[str, CheckOptions] | None:
    """Return the ``checks`` entries as an ordered name -> options mapping.

    Accepted entry shapes:
        - ``"Name"`` or ``("Name",)``: the check with empty options.
        - ``("Name", options)``: the check with opaque ``options``.
        - A mapping ``{"Name": options, ...}`` in place of the list.

    A name repeated inside one block keeps its first position and takes the
    last options given.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    loc: Final[str] = f"{where}.{key}"

    if isinstance(value, Mapping):
        entries: list[Any] = list(value.items())
    elif is_any_list(value):
        entries = list(value)
    else:
        _reject(loc, "list of checks", value, diagnostics)
        return None

    checks: dict[str, CheckOptions] = {}
    for entry in entries:
        if isinstance(entry, str):
            checks[entry] = {}
        elif is_any_list(entry) and len(entry) == 1 and isinstance(entry[0], str):
            checks[entry[0]] = {}
        elif is_any_list(entry) and len(entry) == 2 and isinstance(entry[0], str):
            checks[entry[0]] = entry[1]
        else:
            _reject(loc, "check name or (name, options) pair", entry, diagnostics)
    return checks
