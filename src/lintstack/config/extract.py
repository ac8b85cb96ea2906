# topmark:header:start
#
#   project      : LintStack
#   file         : extract.py
#   file_relpath : src/lintstack/config/extract.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Extract the requested profile from a collected configuration source.

A file declares profiles under ``configs``, a list of mappings each carrying
a ``name``. A file without ``configs`` is itself the single ``default``
profile. When the requested profile is not declared, the source contributes
an empty profile and an ``info`` diagnostic; this is not an error because a
more specific source may declare it.

Field values are copied through unchanged, except for ``files.included``:

* a ``files`` table without ``included`` selects the directory owning the
  source (for a discovered ``P/config/.lintstack.py`` that is ``P``);
* an entry naming an existing directory becomes ``<dir>/**/*.{py,pyi}``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from lintstack.config.diagnostics import DiagnosticLog
from lintstack.config.errors import ConfigParseError
from lintstack.config.getters import (
    get_bool_or_none_checked,
    get_checks_or_none_checked,
    get_file_entries_or_none_checked,
    get_list_or_none_checked,
    get_positive_int_or_none_checked,
    is_any_list,
)
from lintstack.config.keys import Keys
from lintstack.config.logging import get_logger
from lintstack.config.parser import DEFAULT_PARSER
from lintstack.config.paths import expand_directory_entry
from lintstack.config.profile import Profile
from lintstack.config.types import SourceOrigin, TrustMode
from lintstack.constants import CONFIG_SUBDIR, DEFAULT_CONFIG_NAME

if TYPE_CHECKING:
    from pathlib import Path

    from lintstack.config.logging import LintstackLogger
    from lintstack.config.parser import ConfigParser
    from lintstack.config.types import ConfigSource, FileEntry

logger: LintstackLogger = get_logger(__name__)

_PROFILE_KEYS: frozenset[str] = frozenset(
    {
        Keys.KEY_NAME,
        Keys.KEY_CHECK_FOR_UPDATES,
        Keys.KEY_REQUIRES,
        Keys.KEY_PLUGINS,
        Keys.SECTION_FILES,
        Keys.KEY_CHECKS,
        Keys.KEY_PARSE_TIMEOUT,
        Keys.KEY_STRICT,
        Keys.KEY_COLOR,
    }
)
_FILES_KEYS: frozenset[str] = frozenset({Keys.KEY_INCLUDED, Keys.KEY_EXCLUDED})


def owning_directory(source: ConfigSource) -> Path:
    """Return the directory a source configures.

    A discovered file in a ``config/`` sub-directory configures the directory
    above it; every other file configures the directory it lives in.
    """
    parent: Path = source.location.parent
    if source.origin is SourceOrigin.DISCOVERED and parent.name == CONFIG_SUBDIR:
        return parent.parent
    return parent


def select_profile(data: object, config_name: str) -> Mapping[str, Any] | None:
    """Return the profile block named ``config_name`` from parsed file data.

    Args:
        data (object): Value produced by the parser.
        config_name (str): Requested profile name.

    Returns:
        Mapping[str, Any] | None: The first matching block, or None if the
            file does not declare it.

    Raises:
        ConfigParseError: If the data is not a mapping, or ``configs`` is not a
            list of mappings.
    """
    if not isinstance(data, Mapping):
        raise ConfigParseError(
            reason=f"configuration must evaluate to a mapping, got {type(data).__name__}"
        )

    if Keys.KEY_CONFIGS not in data:
        return data if config_name == DEFAULT_CONFIG_NAME else None

    blocks: Any = data[Keys.KEY_CONFIGS]
    if not is_any_list(blocks):
        raise ConfigParseError(
            reason=f"'{Keys.KEY_CONFIGS}' must be a list of profiles, got {type(blocks).__name__}"
        )
    for index, block in enumerate(blocks):
        if not isinstance(block, Mapping):
            raise ConfigParseError(
                reason=(
                    f"'{Keys.KEY_CONFIGS}[{index}]' must be a mapping, "
                    f"got {type(block).__name__}"
                )
            )
        if block.get(Keys.KEY_NAME) == config_name:
            return block
    return None


def _included_entries(
    files_tbl: Mapping[str, Any],
    *,
    where: str,
    owning_dir: Path,
    target_dir: Path,
    diagnostics: DiagnosticLog,
) -> list[FileEntry] | None:
    if Keys.KEY_INCLUDED not in files_tbl or files_tbl[Keys.KEY_INCLUDED] is None:
        raw: list[FileEntry] | None = [str(owning_dir)]
    else:
        raw = get_file_entries_or_none_checked(
            files_tbl,
            Keys.KEY_INCLUDED,
            where=where,
            diagnostics=diagnostics,
            allow_patterns=False,
        )
    if raw is None:
        return None
    return [expand_directory_entry(entry, target_dir) for entry in raw]


def profile_from_data(
    block: Mapping[str, Any],
    *,
    location: Path,
    target_dir: Path,
    where: str,
    diagnostics: DiagnosticLog,
    owning_dir: Path | None = None,
) -> Profile:
    """Build a `Profile` from one profile block.

    Args:
        block (Mapping[str, Any]): The selected profile block.
        location (Path): The configuration file the block comes from.
        target_dir (Path): Absolute resolution target; relative ``included``
            entries are checked for directories against it.
        where (str): Location prefix for diagnostics.
        diagnostics (DiagnosticLog): Receives warnings for dropped values.
        owning_dir (Path | None): Directory a bare ``files`` table selects;
            the parent of ``location`` when None.

    Returns:
        Profile: Values of the block; unset keys stay ``None``.
    """
    for key in block:
        if key not in _PROFILE_KEYS:
            logger.warning("Unknown key in %s: %r", where, key)
            diagnostics.add_warning(f"Unknown key in {where}: {key!r}")

    included: list[FileEntry] | None = None
    excluded: list[FileEntry] | None = None
    files_tbl: Any = block.get(Keys.SECTION_FILES)
    if files_tbl is not None and not isinstance(files_tbl, Mapping):
        logger.warning("Expected mapping in %s.%s, got %r", where, Keys.SECTION_FILES, files_tbl)
        diagnostics.add_warning(
            f"Expected mapping in {where}.{Keys.SECTION_FILES}, "
            f"got {type(files_tbl).__name__}: {files_tbl!r}"
        )
    elif files_tbl is not None:
        files_where: str = f"{where}.{Keys.SECTION_FILES}"
        for key in files_tbl:
            if key not in _FILES_KEYS:
                logger.warning("Unknown key in %s: %r", files_where, key)
                diagnostics.add_warning(f"Unknown key in {files_where}: {key!r}")
        included = _included_entries(
            files_tbl,
            where=files_where,
            owning_dir=owning_dir or location.parent,
            target_dir=target_dir,
            diagnostics=diagnostics,
        )
        excluded = get_file_entries_or_none_checked(
            files_tbl,
            Keys.KEY_EXCLUDED,
            where=files_where,
            diagnostics=diagnostics,
            allow_patterns=True,
        )

    return Profile(
        check_for_updates=get_bool_or_none_checked(
            block, Keys.KEY_CHECK_FOR_UPDATES, where=where, diagnostics=diagnostics
        ),
        requires=get_list_or_none_checked(
            block, Keys.KEY_REQUIRES, where=where, diagnostics=diagnostics, strings_only=True
        ),
        plugins=get_list_or_none_checked(
            block, Keys.KEY_PLUGINS, where=where, diagnostics=diagnostics
        ),
        included=included,
        excluded=excluded,
        checks=get_checks_or_none_checked(
            block, Keys.KEY_CHECKS, where=where, diagnostics=diagnostics
        ),
        parse_timeout=get_positive_int_or_none_checked(
            block, Keys.KEY_PARSE_TIMEOUT, where=where, diagnostics=diagnostics
        ),
        strict=get_bool_or_none_checked(
            block, Keys.KEY_STRICT, where=where, diagnostics=diagnostics
        ),
        color=get_bool_or_none_checked(
            block, Keys.KEY_COLOR, where=where, diagnostics=diagnostics
        ),
        config_files=[location],
        diagnostics=list(diagnostics),
    )


def extract_profile(
    source: ConfigSource,
    *,
    target_dir: Path,
    config_name: str | None = None,
    mode: TrustMode = TrustMode.RESTRICTED,
    parser: ConfigParser | None = None,
) -> Profile:
    """Parse ``source`` and return its ``config_name`` profile.

    Args:
        source (ConfigSource): A collected configuration file.
        target_dir (Path): Absolute resolution target directory.
        config_name (str | None): Requested profile; ``default`` when None.
        mode (TrustMode): Parser trust mode.
        parser (ConfigParser | None): Parser service; the built-in Python
            literal/evaluation parser when None.

    Returns:
        Profile: The extracted profile; empty (all fields unset) if the source
            does not declare the requested profile.

    Raises:
        ConfigParseError: If the source is malformed or rejected, tagged with
            the source location.
    """
    name: str = config_name or DEFAULT_CONFIG_NAME
    active_parser: ConfigParser = parser or DEFAULT_PARSER
    try:
        data: object = active_parser.parse(source.raw_text, mode, str(source.location))
        block: Mapping[str, Any] | None = select_profile(data, name)
    except ConfigParseError as exc:
        tagged: ConfigParseError = exc.for_source(source.location)
        logger.error("Invalid config file: %s", tagged)
        raise tagged from exc

    diagnostics = DiagnosticLog()
    if block is None:
        logger.debug("Profile '%s' not declared in %s", name, source.location)
        diagnostics.add_info(f"{source.location}: profile '{name}' not declared; skipped")
        return Profile(config_files=[source.location], diagnostics=list(diagnostics))

    profile: Profile = profile_from_data(
        block,
        location=source.location,
        target_dir=target_dir,
        where=f"{source.location}[{name}]",
        diagnostics=diagnostics,
        owning_dir=owning_directory(source),
    )
    logger.trace("Extracted profile from %s: %s", source.location, profile)
    return profile
