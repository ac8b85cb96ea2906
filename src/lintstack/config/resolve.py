# topmark:header:start
#
#   project      : LintStack
#   file         : resolve.py
#   file_relpath : src/lintstack/config/resolve.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the effective configuration for a target directory.

Pipeline (each stage consumes the complete output of the previous one):

    1) Enumerate candidate files along the target's ancestry
       (`lintstack.config.paths.candidate_config_files`).
    2) Collect the existing ones, then the explicit files
       (`lintstack.config.sources.collect_sources`).
    3) Extract the requested profile from every source
       (`lintstack.config.extract.extract_profile`).
    4) Fold the profiles, least specific first
       (`lintstack.config.merge.merge_profiles`).
    5) Apply defaults, anchor file entries at the target and de-duplicate
       them (`finalize`).

The first fatal error aborts the pipeline; nothing partial is returned.
Resolution has no shared mutable state, so independent targets may be
resolved concurrently.
"""

from __future__ import annotations

import os
from types import MappingProxyType
from typing import TYPE_CHECKING

from lintstack.config.diagnostics import DiagnosticLog
from lintstack.config.extract import extract_profile
from lintstack.config.logging import get_logger
from lintstack.config.merge import merge_profiles
from lintstack.config.model import FileSelection, ResolvedConfig
from lintstack.config.paths import anchor_entry, candidate_config_files, expand_target
from lintstack.config.sources import collect_sources
from lintstack.config.types import TrustMode
from lintstack.constants import (
    DEFAULT_CHECK_FOR_UPDATES,
    DEFAULT_COLOR,
    DEFAULT_FILES_GLOB,
    DEFAULT_PARSE_TIMEOUT,
    DEFAULT_STRICT,
)

if TYPE_CHECKING:
    from collections.abc import Iterable
    from os import PathLike
    from pathlib import Path

    from lintstack.config.logging import LintstackLogger
    from lintstack.config.parser import ConfigParser
    from lintstack.config.profile import Profile
    from lintstack.config.types import ConfigSource, FileEntry

logger: LintstackLogger = get_logger(__name__)


def _anchor_all(entries: Iterable[FileEntry], target_dir: str) -> tuple[FileEntry, ...]:
    """Anchor ``entries`` at ``target_dir`` and drop exact duplicates, keeping first occurrences."""
    anchored: dict[FileEntry, None] = {}
    for entry in entries:
        anchored.setdefault(anchor_entry(entry, target_dir), None)
    return tuple(anchored)


def finalize(profile: Profile, target_dir: str | PathLike[str]) -> ResolvedConfig:
    """Turn a merged profile into the final `ResolvedConfig`.

    Defaults fill every field still unset (an empty ``included`` list counts
    as unset). File entries are then anchored at ``target_dir`` and
    de-duplicated.

    Args:
        profile (Profile): The merged profile.
        target_dir (str | PathLike[str]): Resolution target, as given by the caller.

    Returns:
        ResolvedConfig: The immutable, fully-defaulted configuration.
    """
    target: str = os.fspath(target_dir)

    included: list[FileEntry] = list(profile.included or [DEFAULT_FILES_GLOB])
    excluded: list[FileEntry] = list(profile.excluded or [])

    return ResolvedConfig(
        files=FileSelection(
            included=_anchor_all(included, target),
            excluded=_anchor_all(excluded, target),
        ),
        checks=MappingProxyType(dict(profile.checks or {})),
        requires=tuple(profile.requires or ()),
        plugins=tuple(profile.plugins or ()),
        parse_timeout=(
            profile.parse_timeout if profile.parse_timeout is not None else DEFAULT_PARSE_TIMEOUT
        ),
        strict=profile.strict if profile.strict is not None else DEFAULT_STRICT,
        color=profile.color if profile.color is not None else DEFAULT_COLOR,
        check_for_updates=(
            profile.check_for_updates
            if profile.check_for_updates is not None
            else DEFAULT_CHECK_FOR_UPDATES
        ),
        config_files=tuple(profile.config_files),
        diagnostics=tuple(profile.diagnostics),
    )


def resolve_config(
    target_dir: str | PathLike[str],
    *,
    config_name: str | None = None,
    config_files: Iterable[str | PathLike[str]] = (),
    discover: bool = True,
    mode: TrustMode = TrustMode.RESTRICTED,
    parser: ConfigParser | None = None,
) -> ResolvedConfig:
    """Discover, parse and merge configuration for ``target_dir``.

    Merge order (lowest -> highest precedence):
        1) ``.lintstack.py`` in each ancestry directory, root-most first; within a
           directory, the file itself before ``config/.lintstack.py``
        2) ``config_files``, in the order given

    Args:
        target_dir (str | PathLike[str]): Directory the analysis runs on.
        config_name (str | None): Profile to select in every file; ``default``
            when None.
        config_files (Iterable[str | PathLike[str]]): Explicit configuration files,
            merged after all discovered ones.
        discover (bool): If False, skip ancestry discovery and use only
            ``config_files``.
        mode (TrustMode): How configuration files are parsed.
        parser (ConfigParser | None): Parser service override.

    Returns:
        ResolvedConfig: The resolved configuration.

    Raises:
        InvalidPathError: If ``target_dir`` cannot be expanded.
        ConfigReadError: If an existing configuration file cannot be read.
        ConfigParseError: If a configuration file is malformed.
    """
    target: Path = expand_target(target_dir)
    logger.debug(
        "Resolving config for %s (profile=%s, mode=%s, discover=%s)",
        target,
        config_name,
        mode.value,
        discover,
    )

    candidates: list[Path] = candidate_config_files(target) if discover else []
    collect_diagnostics = DiagnosticLog()
    sources: list[ConfigSource] = collect_sources(
        candidates, config_files, diagnostics=collect_diagnostics
    )

    profiles: list[Profile] = [
        extract_profile(
            source,
            target_dir=target,
            config_name=config_name,
            mode=mode,
            parser=parser,
        )
        for source in sources
    ]

    merged: Profile = merge_profiles(profiles)
    merged.diagnostics = [*collect_diagnostics, *merged.diagnostics]

    config: ResolvedConfig = finalize(merged, target_dir)
    logger.debug("Resolved config from %d file(s) for %s", len(config.config_files), target)
    logger.trace("Resolved config: %s", config)
    return config


def read_or_default(
    target_dir: str | PathLike[str],
    config_name: str | None = None,
    mode: TrustMode = TrustMode.RESTRICTED,
    extra_config_files: Iterable[str | PathLike[str]] = (),
) -> ResolvedConfig:
    """Return the configuration for ``target_dir`` from every discovered file.

    Files found along the ancestry are merged first; ``extra_config_files``
    override them. Without any file, the result holds the defaults.
    """
    return resolve_config(
        target_dir,
        config_name=config_name,
        config_files=extra_config_files,
        mode=mode,
    )


def read_from_file_path(
    target_dir: str | PathLike[str],
    config_file: str | PathLike[str],
    config_name: str | None = None,
    mode: TrustMode = TrustMode.RESTRICTED,
) -> ResolvedConfig:
    """Return the configuration for ``target_dir`` from ``config_file`` alone.

    No ancestry discovery takes place; defaults fill everything the file
    leaves unset.
    """
    return resolve_config(
        target_dir,
        config_name=config_name,
        config_files=[config_file],
        discover=False,
        mode=mode,
    )
