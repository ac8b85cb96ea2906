# topmark:header:start
#
#   project      : LintStack
#   file         : paths.py
#   file_relpath : src/lintstack/config/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Path helpers for config discovery and file-selection anchoring.

These utilities centralize the path rules used by config resolution. Apart
from `expand_directory_entry` (one ``is_dir()`` check) they do **no I/O**;
the current working directory is consulted only to expand relative targets.

Key behaviors:
    - ``expand_target(raw)``: expand ``~`` and make ``raw`` absolute, or raise
      `InvalidPathError`.
    - ``ancestry(raw)``: every cumulative prefix of the expanded target, from
      the top-level directory down to the target itself. The bare filesystem
      root is never part of the ancestry.
    - ``candidate_config_files(raw)``: for each ancestry directory ``P``, yield
      ``P/.lintstack.py`` then ``P/config/.lintstack.py``. Emission order is merge
      order: earliest emitted has the lowest precedence.
    - ``anchor_entry(entry, target_dir)``: root a relative path or glob at the
      resolution target directory; pattern matchers pass through unchanged.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from lintstack.config.errors import InvalidPathError
from lintstack.config.logging import get_logger
from lintstack.config.types import is_pattern_matcher
from lintstack.constants import CONFIG_FILENAME, CONFIG_SUBDIR, DEFAULT_FILES_GLOB

if TYPE_CHECKING:
    from os import PathLike

    from lintstack.config.logging import LintstackLogger
    from lintstack.config.types import FileEntry

logger: LintstackLogger = get_logger(__name__)


def expand_target(target_dir: str | PathLike[str]) -> Path:
    """Return ``target_dir`` expanded to an absolute, normalized path.

    Args:
        target_dir (str | PathLike[str]): Directory to resolve configuration for.

    Returns:
        Path: The absolute path.

    Raises:
        InvalidPathError: If the value is not a path, is empty, contains a NUL
            byte, names an unknown user home (``~nobody``), or is relative while
            the current working directory no longer exists.
    """
    try:
        raw: str = os.fspath(target_dir)
    except TypeError as exc:
        raise InvalidPathError(f"not a path: {target_dir!r}") from exc

    if not raw:
        raise InvalidPathError("empty path")
    if "\x00" in raw:
        raise InvalidPathError("path contains a NUL byte", location=repr(raw))

    expanded: str = os.path.expanduser(raw)
    if expanded.startswith("~"):
        raise InvalidPathError("cannot expand user home directory", location=raw)

    try:
        absolute: str = os.path.abspath(expanded)
    except OSError as exc:
        raise InvalidPathError(f"cannot expand to an absolute path ({exc})", location=raw) from exc

    return Path(absolute)


def ancestry(target_dir: str | PathLike[str]) -> list[Path]:
    """Return the ancestry of ``target_dir``, least specific first.

    ``/home/dev/proj`` yields ``[/home, /home/dev, /home/dev/proj]``. A target
    with fewer than two path segments (the filesystem root) yields ``[]``.
    """
    parts: tuple[str, ...] = expand_target(target_dir).parts
    return [Path(*parts[:n]) for n in range(2, len(parts) + 1)]


def relevant_directories(target_dir: str | PathLike[str]) -> list[Path]:
    """Return every ancestry directory followed by its ``config`` sub-directory.

    Args:
        target_dir (str | PathLike[str]): Directory to resolve configuration for.

    Returns:
        list[Path]: Directories searched for configuration, least specific first.
    """
    dirs: list[Path] = []
    for directory in ancestry(target_dir):
        dirs.append(directory)
        dirs.append(directory / CONFIG_SUBDIR)
    return dirs


def candidate_config_files(target_dir: str | PathLike[str]) -> list[Path]:
    """Return the configuration file locations to check, in merge order."""
    candidates: list[Path] = [d / CONFIG_FILENAME for d in relevant_directories(target_dir)]
    logger.trace("Candidate config files for %s: %s", target_dir, candidates)
    return candidates


def expand_directory_entry(entry: FileEntry, base: Path) -> FileEntry:
    """Expand an ``included`` entry that names a directory to a recursive glob.

    Relative entries are checked against ``base`` (the resolution target) but
    keep their relative spelling; anchoring happens later.

    Args:
        entry (FileEntry): A ``files.included`` entry.
        base (Path): Absolute directory relative entries are checked against.

    Returns:
        FileEntry: ``entry`` joined with the default source glob if it is an
            existing directory, else ``entry`` unchanged.
    """
    if is_pattern_matcher(entry) or not isinstance(entry, str):
        return entry
    if (base / entry).is_dir():
        expanded: str = os.path.join(entry, DEFAULT_FILES_GLOB)
        logger.debug("Expanded directory entry '%s' -> '%s'", entry, expanded)
        return expanded
    return entry


def is_current_directory(target_dir: str) -> bool:
    """Return True if ``target_dir`` spells the current directory (``.``, ``./``)."""
    return os.path.normpath(target_dir) == os.curdir


def anchor_entry(entry: FileEntry, target_dir: str) -> FileEntry:
    """Anchor a path or glob entry at ``target_dir``.

    Entries that are absolute, that start with ``/`` (root-style globs), or
    that are resolved for the current directory stay as they are. Pattern
    matchers are returned unchanged.

    Args:
        entry (FileEntry): A ``files.included`` or ``files.excluded`` entry.
        target_dir (str): The resolution target directory, as given by the caller.

    Returns:
        FileEntry: The anchored entry.
    """
    if not isinstance(entry, str):
        return entry
    if os.path.isabs(entry) or entry.startswith("/") or is_current_directory(target_dir):
        return entry
    return os.path.join(target_dir, entry)
