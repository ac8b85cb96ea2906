# topmark:header:start
#
#   project      : LintStack
#   file         : __init__.py
#   file_relpath : src/lintstack/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LintStack package.

LintStack resolves the effective configuration of a source-analysis run. It
discovers `.lintstack.py` files along the ancestry of a target directory,
extracts the requested profile from each, and merges them into a single,
fully-defaulted configuration. A small CLI and typed API sit on top.
"""

from __future__ import annotations
