# topmark:header:start
#
#   project      : LintStack
#   file         : types.py
#   file_relpath : src/lintstack/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight config types and aliases.

This module hosts stable, import-friendly definitions that other config modules
can depend on without risk of circular imports.

Exports:
    - `FileEntry`: an entry of ``files.included`` / ``files.excluded``; either a
      path or glob string, or a compiled pattern matcher.
    - `SourceOrigin`: how a configuration source was found.
    - `TrustMode`: how configuration text is parsed.
    - `ConfigSource`: immutable record of one collected configuration file.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from pathlib import Path

# Path or glob string, or a pattern matcher (exclusions only; never anchored)
FileEntry = Union[str, re.Pattern[str]]

# Options attached to a check are opaque to the resolver
CheckOptions = Any


def is_pattern_matcher(entry: object) -> bool:
    """Return True if ``entry`` is a compiled pattern matcher rather than a path/glob."""
    return isinstance(entry, re.Pattern)


class SourceOrigin(str, Enum):
    """How a configuration source entered the pipeline."""

    DISCOVERED = "discovered"
    EXPLICIT = "explicit"


class TrustMode(str, Enum):
    """How configuration text is turned into data.

    ``RESTRICTED`` only accepts literal values (plus compiled regular
    expressions); ``FULL_EVALUATION`` executes the file as Python code.
    """

    RESTRICTED = "restricted"
    FULL_EVALUATION = "full"


@dataclass(frozen=True)
class ConfigSource:
    """One configuration file collected for resolution.

    Attributes:
        origin (SourceOrigin): Found by ancestry discovery or supplied explicitly.
        location (Path): Absolute path of the file.
        raw_text (str): Full text of the file.
    """

    origin: SourceOrigin
    location: Path
    raw_text: str
