# topmark:header:start
#
#   project      : LintStack
#   file         : exit_codes.py
#   file_relpath : src/lintstack/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the LintStack CLI.

Codes above 1 follow the BSD ``sysexits.h`` convention so that shell scripts
can tell configuration problems apart from I/O problems.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the LintStack CLI.

    Attributes:
        SUCCESS (int): The command completed without errors.
        FAILURE (int): Generic failure.
        USAGE_ERROR (int): Invalid command-line usage (``EX_USAGE``).
        IO_ERROR (int): A configuration file exists but cannot be read (``EX_IOERR``).
        CONFIG_ERROR (int): Invalid target directory or malformed
            configuration file (``EX_CONFIG``).
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    IO_ERROR = 74
    CONFIG_ERROR = 78
