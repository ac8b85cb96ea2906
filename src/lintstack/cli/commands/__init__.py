# topmark:header:start
#
#   project      : LintStack
#   file         : __init__.py
#   file_relpath : src/lintstack/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``lintstack`` CLI."""
