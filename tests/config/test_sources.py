# topmark:header:start
#
#   project      : LintStack
#   file         : test_sources.py
#   file_relpath : tests/config/test_sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for configuration source collection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from lintstack.config.diagnostics import DiagnosticLevel, DiagnosticLog
from lintstack.config.errors import ConfigReadError
from lintstack.config.paths import candidate_config_files
from lintstack.config.sources import collect_sources, read_source
from lintstack.config.types import ConfigSource, SourceOrigin
from lintstack.constants import CONFIG_FILENAME
from tests.conftest import write_config

if TYPE_CHECKING:
    from pathlib import Path


def test_missing_candidates_are_skipped(tmp_path: Path) -> None:
    """Only existing candidates are collected, in candidate order."""
    target: Path = tmp_path / "proj" / "pkg"
    target.mkdir(parents=True)
    outer: Path = write_config(tmp_path / "proj" / CONFIG_FILENAME, "{}")
    inner: Path = write_config(target / "config" / CONFIG_FILENAME, "{'strict': True}")

    sources: list[ConfigSource] = collect_sources(candidate_config_files(target))

    assert [s.location for s in sources] == [outer, inner]
    assert all(s.origin is SourceOrigin.DISCOVERED for s in sources)
    assert sources[1].raw_text == "{'strict': True}"


def test_explicit_files_come_last(tmp_path: Path) -> None:
    """Explicit files follow every discovered file, wherever they live."""
    target: Path = tmp_path / "proj"
    discovered: Path = write_config(target / CONFIG_FILENAME, "{}")
    # An explicit file higher up the tree than the discovered one
    explicit: Path = write_config(tmp_path / "shared.py", "{}")

    sources: list[ConfigSource] = collect_sources(candidate_config_files(target), [explicit])

    assert [s.location for s in sources] == [discovered, explicit]
    assert [s.origin for s in sources] == [SourceOrigin.DISCOVERED, SourceOrigin.EXPLICIT]


def test_missing_explicit_file_is_a_warning(tmp_path: Path) -> None:
    """A missing explicit file is dropped and reported as a warning diagnostic."""
    diagnostics = DiagnosticLog()
    missing: Path = tmp_path / "nope.py"

    sources: list[ConfigSource] = collect_sources([], [missing], diagnostics=diagnostics)

    assert sources == []
    assert len(diagnostics) == 1
    diag = next(iter(diagnostics))
    assert diag.level is DiagnosticLevel.WARNING
    assert str(missing) in diag.message


def test_unreadable_source_is_fatal(tmp_path: Path) -> None:
    """A candidate that exists but cannot be read aborts collection."""
    # A directory with the config file name exists but cannot be read as text
    bogus: Path = tmp_path / CONFIG_FILENAME
    bogus.mkdir()

    with pytest.raises(ConfigReadError) as excinfo:
        collect_sources([bogus])

    assert excinfo.value.location == bogus
    assert str(bogus) in str(excinfo.value)


def test_undecodable_source_is_fatal(tmp_path: Path) -> None:
    """Text that is not valid UTF-8 is reported as a read failure."""
    location: Path = tmp_path / CONFIG_FILENAME
    location.write_bytes(b"{'a': '\xff\xfe'}")

    with pytest.raises(ConfigReadError):
        read_source(location, SourceOrigin.DISCOVERED)
