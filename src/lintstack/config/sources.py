# topmark:header:start
#
#   project      : LintStack
#   file         : sources.py
#   file_relpath : src/lintstack/config/sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Collect configuration sources from disk.

Candidates produced by ancestry discovery are checked in order; missing files
are skipped silently because most ancestry levels carry no configuration.
Explicit files are appended after every discovered file so that they take
precedence regardless of where they live on disk.

A file that exists but cannot be read is fatal (`ConfigReadError`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lintstack.config.errors import ConfigReadError
from lintstack.config.logging import get_logger
from lintstack.config.paths import expand_target
from lintstack.config.types import ConfigSource, SourceOrigin

if TYPE_CHECKING:
    from collections.abc import Iterable
    from os import PathLike
    from pathlib import Path

    from lintstack.config.diagnostics import DiagnosticLog
    from lintstack.config.logging import LintstackLogger

logger: LintstackLogger = get_logger(__name__)


def read_source(location: Path, origin: SourceOrigin) -> ConfigSource:
    """Read one configuration file into a `ConfigSource`.

    Args:
        location (Path): Absolute path of an existing configuration file.
        origin (SourceOrigin): How the file was found.

    Returns:
        ConfigSource: The collected source.

    Raises:
        ConfigReadError: If the file cannot be read or decoded as UTF-8.
    """
    try:
        raw_text: str = location.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot read config file %s: %s", location, exc)
        raise ConfigReadError(location, str(exc)) from exc
    logger.debug("Collected %s config file: %s", origin.value, location)
    return ConfigSource(origin=origin, location=location, raw_text=raw_text)


def collect_sources(
    candidates: Iterable[Path],
    explicit: Iterable[str | PathLike[str]] = (),
    *,
    diagnostics: DiagnosticLog | None = None,
) -> list[ConfigSource]:
    """Return the existing configuration sources in merge order.

    Args:
        candidates (Iterable[Path]): Discovered locations, least specific first.
        explicit (Iterable[str | PathLike[str]]): Caller-supplied configuration
            files; relative paths are taken relative to the working directory.
            They are appended in the given order after all discovered sources.
        diagnostics (DiagnosticLog | None): Receives a warning for each explicit
            file that does not exist.

    Returns:
        list[ConfigSource]: Collected sources; discovered ones first, explicit last.

    Raises:
        ConfigReadError: If an existing file cannot be read. Collection stops
            at the first such file.
    """
    sources: list[ConfigSource] = []

    for location in candidates:
        if not location.exists():
            logger.trace("No config file at %s", location)
            continue
        sources.append(read_source(location, SourceOrigin.DISCOVERED))

    for raw in explicit:
        location = expand_target(raw)
        if not location.exists():
            logger.warning("Explicit config file not found, skipping: %s", location)
            if diagnostics is not None:
                diagnostics.add_warning(f"Config file not found: {location}")
            continue
        sources.append(read_source(location, SourceOrigin.EXPLICIT))

    return sources
