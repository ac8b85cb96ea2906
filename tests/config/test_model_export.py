# topmark:header:start
#
#   project      : LintStack
#   file         : test_model_export.py
#   file_relpath : tests/config/test_model_export.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for exporting a resolved configuration to plain data and TOML."""

from __future__ import annotations

import json
import re
from pathlib import Path
from types import MappingProxyType
from typing import Any

import tomlkit

from lintstack.config.diagnostics import Diagnostic, DiagnosticLevel
from lintstack.config.model import FileSelection, ResolvedConfig, to_plain
from lintstack.config.render import to_toml


def _config() -> ResolvedConfig:
    return ResolvedConfig(
        files=FileSelection(
            included=("/p/lib/**/*.{py,pyi}",),
            excluded=("/p/tmp/", re.compile("_build/", re.IGNORECASE)),
        ),
        checks=MappingProxyType({"A": {}, "B": {"max": 3}, "C": False}),
        requires=("x.py",),
        plugins=(),
        parse_timeout=5000,
        strict=False,
        color=True,
        check_for_updates=True,
        config_files=(Path("/p/.lintstack.py"),),
        diagnostics=(Diagnostic(DiagnosticLevel.WARNING, "something"),),
    )


def test_to_plain_converts_patterns_and_containers() -> None:
    """Patterns become regex tables; tuples, sets and paths become plain values."""
    assert to_plain(re.compile("a")) == {"regex": "a"}
    assert to_plain(re.compile("a", re.M)) == {"regex": "a", "flags": int(re.M)}
    assert to_plain((1, Path("/x"), {"b", "a"})) == [1, "/x", ["a", "b"]]


def test_to_dict_is_json_serializable() -> None:
    """`to_dict` produces JSON-friendly data including diagnostics."""
    data: dict[str, Any] = json.loads(json.dumps(_config().to_dict()))

    assert data["files"]["excluded"][1] == {"regex": "_build/", "flags": int(re.IGNORECASE)}
    assert data["checks"] == {"A": {}, "B": {"max": 3}, "C": False}
    assert data["config_files"] == ["/p/.lintstack.py"]
    assert data["diagnostics"] == [{"level": "warning", "message": "something"}]


def test_toml_round_trips_through_tomlkit() -> None:
    """The TOML rendering parses back to the same values."""
    doc: dict[str, Any] = tomlkit.loads(to_toml(_config().to_toml_dict())).unwrap()

    assert doc["parse_timeout"] == 5000
    assert doc["requires"] == ["x.py"]
    assert doc["plugins"] == []
    assert [c["name"] for c in doc["checks"]] == ["A", "B", "C"]
    assert doc["checks"][1]["options"] == {"max": 3}
    assert doc["checks"][2]["options"] is False
    assert doc["files"]["included"] == ["/p/lib/**/*.{py,pyi}"]
    assert doc["files"]["excluded"][0] == "/p/tmp/"
    assert doc["files"]["excluded"][1]["regex"] == "_build/"
    assert "diagnostics" not in doc


def test_scalars_without_toml_form_are_exported_as_repr() -> None:
    """Opaque option values TOML cannot hold (bytes, complex, objects) render as text."""
    config: ResolvedConfig = ResolvedConfig(
        files=FileSelection(included=("/p/**/*.{py,pyi}",), excluded=()),
        checks=MappingProxyType({"A": {"raw": b"raw", "z": 1j, "e": ..., "n": 2.5}}),
        requires=(),
        plugins=(object,),
        parse_timeout=5000,
        strict=False,
        color=True,
        check_for_updates=True,
        config_files=(),
        diagnostics=(),
    )

    doc: dict[str, Any] = tomlkit.loads(to_toml(config.to_toml_dict())).unwrap()

    assert doc["checks"][0]["options"] == {"raw": "b'raw'", "z": "1j", "e": "Ellipsis", "n": 2.5}
    assert doc["plugins"] == ["<class 'object'>"]
    assert json.loads(json.dumps(config.to_dict()))["checks"]["A"]["raw"] == "b'raw'"
