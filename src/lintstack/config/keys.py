# topmark:header:start
#
#   project      : LintStack
#   file         : keys.py
#   file_relpath : src/lintstack/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical key names for `.lintstack.py` configuration files.

Keys defined here are the external configuration API: renaming or removing
one is a breaking change. The same names are used when exporting a resolved
configuration (``config dump``).
"""

from __future__ import annotations

from typing import Final


class Keys:
    """Configuration keys, in the order they appear in a profile block."""

    # Top level: list of named profile blocks
    KEY_CONFIGS: Final[str] = "configs"

    # Profile block
    KEY_NAME: Final[str] = "name"
    KEY_CHECK_FOR_UPDATES: Final[str] = "check_for_updates"
    KEY_REQUIRES: Final[str] = "requires"
    KEY_PLUGINS: Final[str] = "plugins"

    SECTION_FILES: Final[str] = "files"
    KEY_INCLUDED: Final[str] = "included"
    KEY_EXCLUDED: Final[str] = "excluded"

    KEY_CHECKS: Final[str] = "checks"
    KEY_PARSE_TIMEOUT: Final[str] = "parse_timeout"
    KEY_STRICT: Final[str] = "strict"
    KEY_COLOR: Final[str] = "color"

    # Export-only
    KEY_CONFIG_FILES: Final[str] = "config_files"
    KEY_DIAGNOSTICS: Final[str] = "diagnostics"
    KEY_REGEX: Final[str] = "regex"
