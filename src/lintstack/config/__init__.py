# topmark:header:start
#
#   project      : LintStack
#   file         : __init__.py
#   file_relpath : src/lintstack/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration discovery and merging for LintStack.

Typical use:

    ```python
    from lintstack.config import read_or_default

    config = read_or_default("src", config_name="ci")
    for entry in config.files.included:
        ...
    ```

Re-exports:
    * Resolution: `resolve_config`, `read_or_default`, `read_from_file_path`, `finalize`
    * Stages: `candidate_config_files`, `relevant_directories`, `collect_sources`,
      `extract_profile`, `merge_profiles`
    * Types: `ResolvedConfig`, `FileSelection`, `Profile`, `ConfigSource`,
      `SourceOrigin`, `TrustMode`
    * Errors: `ConfigError`, `InvalidPathError`, `ConfigReadError`, `ConfigParseError`
"""

from __future__ import annotations

from lintstack.config.errors import (
    ConfigError,
    ConfigParseError,
    ConfigReadError,
    InvalidPathError,
)
from lintstack.config.extract import extract_profile
from lintstack.config.merge import merge_profiles
from lintstack.config.model import FileSelection, ResolvedConfig
from lintstack.config.paths import candidate_config_files, relevant_directories
from lintstack.config.profile import Profile
from lintstack.config.resolve import (
    finalize,
    read_from_file_path,
    read_or_default,
    resolve_config,
)
from lintstack.config.sources import collect_sources
from lintstack.config.types import ConfigSource, SourceOrigin, TrustMode

__all__ = [
    "ConfigError",
    "ConfigParseError",
    "ConfigReadError",
    "ConfigSource",
    "FileSelection",
    "InvalidPathError",
    "Profile",
    "ResolvedConfig",
    "SourceOrigin",
    "TrustMode",
    "candidate_config_files",
    "collect_sources",
    "extract_profile",
    "finalize",
    "merge_profiles",
    "read_from_file_path",
    "read_or_default",
    "relevant_directories",
    "resolve_config",
]
