# topmark:header:start
#
#   project      : LintStack
#   file         : errors.py
#   file_relpath : src/lintstack/config/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exception hierarchy for configuration resolution.

Every fatal condition aborts the whole resolution; no partially resolved
configuration is ever returned. All exceptions inherit from `ConfigError`,
so callers can catch every resolution failure with a single except clause:

- `InvalidPathError`: the target directory cannot be expanded to an absolute path.
- `ConfigReadError`: a configuration file known to exist could not be read.
- `ConfigParseError`: a configuration file is malformed (syntax error) or was
  rejected by the parser for another reason.

Example:
    ```python
    from lintstack.config import read_or_default
    from lintstack.config.errors import ConfigError, ConfigParseError

    try:
        config = read_or_default("src")
    except ConfigParseError as e:
        print(f"{e.location}:{e.line}: {e.description}")
    except ConfigError as e:
        print(f"Configuration error: {e}")
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

__all__ = [
    "ConfigError",
    "InvalidPathError",
    "ConfigReadError",
    "ConfigParseError",
]


class ConfigError(Exception):
    """Base exception for all configuration resolution errors.

    Attributes:
        location (Path | str | None): The offending file or directory, when known.
    """

    def __init__(self, message: str, *, location: Path | str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.location: Path | str | None = location

    def __str__(self) -> str:
        if self.location is None:
            return self.message
        return f"{self.location}: {self.message}"


class InvalidPathError(ConfigError):
    """Raised when the resolution target cannot be expanded to an absolute path."""


class ConfigReadError(ConfigError):
    """Raised when an existing configuration file cannot be read.

    A missing file is never an error; this signals a race or a permission
    problem after existence was confirmed.

    Attributes:
        reason (str): The underlying operating system error.
    """

    def __init__(self, location: Path, reason: str) -> None:
        super().__init__(f"cannot read config file ({reason})", location=location)
        self.reason: str = reason


class ConfigParseError(ConfigError):
    """Raised when a configuration file cannot be turned into data.

    Syntax errors carry ``line``, ``description`` and ``trigger`` (the
    offending source text, when available). Other rejections carry an opaque
    ``reason`` instead.
    """

    def __init__(
        self,
        *,
        line: int | None = None,
        description: str | None = None,
        trigger: str | None = None,
        reason: str | None = None,
        location: Path | str | None = None,
    ) -> None:
        self.line: int | None = line
        self.description: str | None = description
        self.trigger: str | None = trigger
        self.reason: str | None = reason
        super().__init__(self._format(), location=location)

    @property
    def is_syntax_error(self) -> bool:
        """Return True if this error describes malformed text at a known line."""
        return self.line is not None

    def _format(self) -> str:
        if self.line is None:
            return f"invalid config: {self.reason or 'unknown reason'}"
        msg: str = f"syntax error on line {self.line}: {self.description}"
        if self.trigger:
            msg += f" (near {self.trigger!r})"
        return msg

    def for_source(self, location: Path | str) -> ConfigParseError:
        """Return a copy of this error tagged with the configuration file ``location``."""
        return ConfigParseError(
            line=self.line,
            description=self.description,
            trigger=self.trigger,
            reason=self.reason,
            location=location,
        )
