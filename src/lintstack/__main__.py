# topmark:header:start
#
#   project      : LintStack
#   file         : __main__.py
#   file_relpath : src/lintstack/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running LintStack via ``python -m lintstack``.

Delegates to :func:`lintstack.cli.main.cli`, the single authoritative CLI
entry point.

Examples:
    Dump the resolved configuration of the current directory::

        python -m lintstack config dump .
"""

from __future__ import annotations

from lintstack.cli.main import cli

if __name__ == "__main__":
    cli()
