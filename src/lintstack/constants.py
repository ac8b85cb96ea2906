# topmark:header:start
#
#   project      : LintStack
#   file         : constants.py
#   file_relpath : src/lintstack/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LintStack Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

LINTSTACK_VERSION: str = get_version("lintstack")

# File name looked for in every ancestry directory and its `config` sub-directory
CONFIG_FILENAME: Final[str] = ".lintstack.py"
CONFIG_SUBDIR: Final[str] = "config"

# Profile selected when the caller does not name one
DEFAULT_CONFIG_NAME: Final[str] = "default"

# Recursive source glob; directory entries in `files.included` expand to it
DEFAULT_FILES_GLOB: Final[str] = "**/*.{py,pyi}"

DEFAULT_PARSE_TIMEOUT: Final[int] = 5000
DEFAULT_STRICT: Final[bool] = False
DEFAULT_COLOR: Final[bool] = True
DEFAULT_CHECK_FOR_UPDATES: Final[bool] = True

LOG_LEVEL_ENV_VAR: Final[str] = "LINTSTACK_LOG_LEVEL"

TOML_BLOCK_START: str = "# === BEGIN[TOML] ==="
TOML_BLOCK_END: str = "# === END[TOML] ==="
