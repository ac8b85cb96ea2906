# topmark:header:start
#
#   project      : LintStack
#   file         : __init__.py
#   file_relpath : src/lintstack/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LintStack command-line interface.

A thin `click` surface over `lintstack.config`: it resolves configuration for
a directory and prints it. Program output goes through
[`lintstack.cli.console.ClickConsole`][]; internal diagnostics go through logging.
"""
