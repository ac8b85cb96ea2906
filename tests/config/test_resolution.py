# topmark:header:start
#
#   project      : LintStack
#   file         : test_resolution.py
#   file_relpath : tests/config/test_resolution.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end tests for configuration discovery, precedence, defaults and anchoring."""

from __future__ import annotations

import os
import re
from pathlib import Path

import pytest

from lintstack.config import (
    ConfigParseError,
    InvalidPathError,
    ResolvedConfig,
    TrustMode,
    read_from_file_path,
    read_or_default,
    resolve_config,
)
from lintstack.config.diagnostics import DiagnosticLevel
from lintstack.constants import (
    CONFIG_FILENAME,
    DEFAULT_FILES_GLOB,
    DEFAULT_PARSE_TIMEOUT,
)
from tests.conftest import write_config


@pytest.mark.pipeline
def test_defaults_without_any_config(tmp_path: Path) -> None:
    """Without configuration files, every field holds its default."""
    target: str = str(tmp_path / "proj")

    config: ResolvedConfig = resolve_config(target)

    assert config.files.included == (os.path.join(target, DEFAULT_FILES_GLOB),)
    assert config.files.excluded == ()
    assert dict(config.checks) == {}
    assert config.requires == ()
    assert config.plugins == ()
    assert config.parse_timeout == DEFAULT_PARSE_TIMEOUT
    assert config.strict is False
    assert config.color is True
    assert config.check_for_updates is True
    assert config.config_files == ()


@pytest.mark.pipeline
def test_ancestry_precedence(tmp_path: Path) -> None:
    """Deeper files override shallower ones; `config/` overrides its own directory."""
    proj: Path = tmp_path / "proj"
    pkg: Path = proj / "pkg"
    pkg.mkdir(parents=True)

    top: Path = write_config(
        proj / CONFIG_FILENAME,
        """
        {
            "strict": True,
            "color": False,
            "requires": ["top.py"],
            "checks": ["A", ("B", {"max": 1})],
        }
        """,
    )
    top_sub: Path = write_config(
        proj / "config" / CONFIG_FILENAME,
        """
        {"color": True, "requires": ["top_sub.py"]}
        """,
    )
    inner: Path = write_config(
        pkg / CONFIG_FILENAME,
        """
        {"strict": False, "checks": [("B", {"max": 2}), "C"], "requires": ["inner.py"]}
        """,
    )

    config: ResolvedConfig = resolve_config(pkg)

    assert config.config_files == (top, top_sub, inner)
    assert config.strict is False
    assert config.color is True
    assert config.requires == ("top.py", "top_sub.py", "inner.py")
    assert list(config.checks) == ["A", "B", "C"]
    assert config.checks["B"] == {"max": 2}


@pytest.mark.pipeline
def test_explicit_file_wins_over_discovered(tmp_path: Path) -> None:
    """Explicit files take precedence over every discovered file."""
    proj: Path = tmp_path / "proj"
    write_config(proj / CONFIG_FILENAME, "{'parse_timeout': 100, 'strict': True}")
    # Lives above the project, yet merged last
    explicit: Path = write_config(tmp_path / "override.py", "{'parse_timeout': 200}")

    config: ResolvedConfig = read_or_default(proj, extra_config_files=[explicit])

    assert config.parse_timeout == 200
    assert config.strict is True
    assert config.config_files[-1] == explicit


@pytest.mark.pipeline
def test_read_from_file_path_skips_discovery(tmp_path: Path) -> None:
    """Only the given file is merged; ancestry files are ignored."""
    proj: Path = tmp_path / "proj"
    write_config(proj / CONFIG_FILENAME, "{'strict': True}")
    only: Path = write_config(tmp_path / "only.py", "{'color': False}")

    config: ResolvedConfig = read_from_file_path(proj, only)

    assert config.config_files == (only,)
    assert config.strict is False
    assert config.color is False


@pytest.mark.pipeline
def test_syntax_error_in_ancestor_aborts(tmp_path: Path) -> None:
    """A malformed ancestor aborts resolution even when deeper files are valid."""
    proj: Path = tmp_path / "proj"
    pkg: Path = proj / "pkg"
    broken: Path = write_config(proj / CONFIG_FILENAME, "{'strict': True,,}")
    write_config(pkg / CONFIG_FILENAME, "{'color': False}")

    with pytest.raises(ConfigParseError) as excinfo:
        resolve_config(pkg)

    assert excinfo.value.location == broken
    assert excinfo.value.is_syntax_error
    assert excinfo.value.line == 1


@pytest.mark.pipeline
def test_named_profile_across_files(tmp_path: Path) -> None:
    """Files that do not declare the profile are no-ops with an info diagnostic."""
    proj: Path = tmp_path / "proj"
    plain: Path = write_config(proj / CONFIG_FILENAME, "{'strict': True}")
    write_config(
        proj / "config" / CONFIG_FILENAME,
        """
        {"configs": [{"name": "ci", "parse_timeout": 42}]}
        """,
    )

    config: ResolvedConfig = resolve_config(proj, config_name="ci")

    assert config.parse_timeout == 42
    assert config.strict is False
    infos = [d for d in config.diagnostics if d.level is DiagnosticLevel.INFO]
    assert len(infos) == 1
    assert str(plain) in infos[0].message


@pytest.mark.pipeline
def test_entries_are_anchored_and_deduplicated(tmp_path: Path) -> None:
    """Relative entries are anchored at the target, duplicates collapse, patterns pass."""
    proj: Path = tmp_path / "proj"
    (proj / "lib").mkdir(parents=True)
    write_config(
        proj / CONFIG_FILENAME,
        """
        {
            "files": {
                "included": ["lib", "lib", "mix.exs", "/abs/**/*.py"],
                "excluded": ["tmp/", re.compile(r"_build/"), "tmp/"],
            }
        }
        """,
    )
    target: str = str(proj)

    config: ResolvedConfig = resolve_config(target)

    assert config.files.included == (
        os.path.join(target, "lib", DEFAULT_FILES_GLOB),
        os.path.join(target, "mix.exs"),
        "/abs/**/*.py",
    )
    excluded = config.files.excluded
    assert excluded[0] == os.path.join(target, "tmp/")
    assert isinstance(excluded[1], re.Pattern)
    assert excluded[1].pattern == "_build/"
    assert len(excluded) == 2


@pytest.mark.pipeline
def test_current_directory_target_is_not_anchored(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Resolving for ``.`` leaves relative entries relative."""
    (tmp_path / "lib").mkdir()
    write_config(tmp_path / CONFIG_FILENAME, "{'files': {'included': ['lib', 'x.py']}}")
    monkeypatch.chdir(tmp_path)

    config: ResolvedConfig = resolve_config(".")

    assert config.files.included == (os.path.join("lib", DEFAULT_FILES_GLOB), "x.py")


@pytest.mark.pipeline
def test_bare_files_section_anchors_to_owner(tmp_path: Path) -> None:
    """A `files` section without `included` selects the owning directory's sources."""
    proj: Path = tmp_path / "proj"
    pkg: Path = proj / "pkg"
    pkg.mkdir(parents=True)
    write_config(proj / CONFIG_FILENAME, "{'files': {'excluded': ['gen/']}}")

    config: ResolvedConfig = resolve_config(pkg)

    assert config.files.included == (os.path.join(str(proj), DEFAULT_FILES_GLOB),)
    assert config.files.excluded == (os.path.join(str(pkg), "gen/"),)


@pytest.mark.pipeline
def test_bare_files_section_in_config_subdir_anchors_to_parent(tmp_path: Path) -> None:
    """A discovered `config/` file with a bare `files` section selects the directory above."""
    proj: Path = tmp_path / "proj"
    write_config(proj / "config" / CONFIG_FILENAME, "{'files': {'excluded': ['gen/']}}")

    config: ResolvedConfig = resolve_config(proj)

    assert config.files.included == (os.path.join(str(proj), DEFAULT_FILES_GLOB),)
    assert config.files.excluded == (os.path.join(str(proj), "gen/"),)


@pytest.mark.pipeline
def test_full_trust_mode(tmp_path: Path) -> None:
    """Full evaluation allows computed values; restricted mode refuses them."""
    proj: Path = tmp_path / "proj"
    write_config(
        proj / CONFIG_FILENAME,
        """
        shared = ["a.py", "b.py"]
        {"requires": shared}
        """,
    )

    config: ResolvedConfig = resolve_config(proj, mode=TrustMode.FULL_EVALUATION)
    assert config.requires == ("a.py", "b.py")

    with pytest.raises(ConfigParseError):
        resolve_config(proj)


@pytest.mark.pipeline
def test_resolution_is_idempotent(tmp_path: Path) -> None:
    """Resolving twice without filesystem changes yields equal results."""
    proj: Path = tmp_path / "proj"
    write_config(
        proj / CONFIG_FILENAME,
        """
        {"checks": [("A", {"x": [1, 2]})], "files": {"excluded": [re.compile("gen")]}}
        """,
    )
    assert resolve_config(proj) == resolve_config(proj)


@pytest.mark.pipeline
def test_missing_explicit_file_is_reported(tmp_path: Path) -> None:
    """A missing explicit file produces a warning diagnostic, not an error."""
    missing: Path = tmp_path / "missing.py"

    config: ResolvedConfig = resolve_config(tmp_path, config_files=[missing])

    assert config.config_files == ()
    assert [d.level for d in config.diagnostics] == [DiagnosticLevel.WARNING]


def test_result_is_immutable(tmp_path: Path) -> None:
    """The resolved configuration cannot be modified."""
    config: ResolvedConfig = resolve_config(tmp_path)
    with pytest.raises(AttributeError):
        config.strict = True  # type: ignore[misc]
    with pytest.raises(TypeError):
        config.checks["A"] = {}  # type: ignore[index]


def test_invalid_target(tmp_path: Path) -> None:
    """An unexpandable target fails before any file is read."""
    with pytest.raises(InvalidPathError):
        resolve_config("")
