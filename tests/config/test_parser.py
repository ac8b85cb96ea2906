# topmark:header:start
#
#   project      : LintStack
#   file         : test_parser.py
#   file_relpath : tests/config/test_parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the `.lintstack.py` parser service."""

from __future__ import annotations

import re
import textwrap
from typing import Any

import pytest

from lintstack.config.errors import ConfigParseError
from lintstack.config.parser import parse_config_text
from lintstack.config.types import TrustMode

RESTRICTED = TrustMode.RESTRICTED
FULL = TrustMode.FULL_EVALUATION


def _parse(text: str, mode: TrustMode = RESTRICTED) -> Any:
    return parse_config_text(textwrap.dedent(text).lstrip("\n"), mode)


def test_restricted_accepts_literals() -> None:
    """Dicts, lists, tuples, sets, numbers, booleans and None are accepted."""
    data: Any = _parse(
        """
        {
            "checks": ["A", ("B",), ("C", {"max": 3})],
            "parse_timeout": 8000,
            "offset": -1.5,
            "strict": True,
            "color": None,
            "tags": {"x"},
        }
        """
    )
    assert data == {
        "checks": ["A", ("B",), ("C", {"max": 3})],
        "parse_timeout": 8000,
        "offset": -1.5,
        "strict": True,
        "color": None,
        "tags": {"x"},
    }


def test_restricted_accepts_regex_with_flags() -> None:
    """``re.compile`` with a literal pattern and ``re`` flags builds a pattern matcher."""
    data: Any = _parse("""{"excluded": [re.compile(r"_build/", re.I | re.M)]}""")
    pattern: re.Pattern[str] = data["excluded"][0]
    assert isinstance(pattern, re.Pattern)
    assert pattern.pattern == "_build/"
    assert pattern.flags & re.IGNORECASE
    assert pattern.flags & re.MULTILINE


@pytest.mark.parametrize(
    "text",
    [
        "{'a': some_name}",
        "{'a': open('x')}",
        "{'a': re.compile(pattern)}",
        "{'a': 1 + 2}",
        "{**{'a': 1}}",
        "{'a': -'x'}",
        "{'a': re.compile('x', flags=re.I)}",
    ],
)
def test_restricted_rejects_code(text: str) -> None:
    """Anything beyond literals and ``re.compile`` is a non-syntax parse error."""
    with pytest.raises(ConfigParseError) as excinfo:
        _parse(text)
    err: ConfigParseError = excinfo.value
    assert not err.is_syntax_error
    assert err.reason is not None


def test_restricted_rejects_statements() -> None:
    """Restricted mode accepts a single expression only."""
    with pytest.raises(ConfigParseError) as excinfo:
        _parse(
            """
            base = ["a"]
            {"requires": base}
            """
        )
    assert "single literal expression" in (excinfo.value.reason or "")


def test_invalid_regex_is_reported() -> None:
    """A pattern the regex engine rejects is a parse error naming the pattern."""
    with pytest.raises(ConfigParseError) as excinfo:
        _parse("{'x': re.compile('(')}")
    assert "'('" in (excinfo.value.reason or "")


def test_syntax_error_carries_line_and_description() -> None:
    """Syntax errors report the line, a description and the offending text."""
    with pytest.raises(ConfigParseError) as excinfo:
        _parse(
            """
            {
                "strict": True,
                "color": False}}
            """
        )
    err: ConfigParseError = excinfo.value
    assert err.is_syntax_error
    assert err.line == 3
    assert err.description
    assert err.trigger is not None
    assert "syntax error on line 3" in str(err)


@pytest.mark.parametrize("mode", [RESTRICTED, FULL])
@pytest.mark.parametrize("text", ["", "x = {'strict': True}"])
def test_last_statement_must_be_an_expression(text: str, mode: TrustMode) -> None:
    """Files without a final expression are rejected in both modes."""
    with pytest.raises(ConfigParseError) as excinfo:
        _parse(text, mode)
    assert not excinfo.value.is_syntax_error


def test_full_evaluation_runs_statements() -> None:
    """In full mode, statements run first and the last expression is the value."""
    data: Any = _parse(
        """
        base = ["a"]
        skip = re.compile("vendor/")
        {"requires": base + ["b"], "excluded": [skip]}
        """,
        FULL,
    )
    assert data["requires"] == ["a", "b"]
    assert data["excluded"][0].pattern == "vendor/"


def test_full_evaluation_errors_become_reasons() -> None:
    """Exceptions raised by the file are reported as non-syntax parse errors."""
    with pytest.raises(ConfigParseError) as excinfo:
        _parse("{'parse_timeout': 1 // 0}", FULL)
    err: ConfigParseError = excinfo.value
    assert not err.is_syntax_error
    assert (err.reason or "").startswith("ZeroDivisionError")


def test_full_evaluation_namespace_is_fresh() -> None:
    """Names bound by one file are not visible to the next."""
    _parse("leaked = 1\n{}", FULL)
    with pytest.raises(ConfigParseError) as excinfo:
        _parse("{'x': leaked}", FULL)
    assert "NameError" in (excinfo.value.reason or "")


@pytest.mark.parametrize(
    ("text", "cause"),
    [
        ("[{[1]}]", "unhashable set element"),
        ("{'configs': [{'requires': {[1]}}]}", "unhashable set element"),
        ("{(1, [2]): 'x'}", "unhashable dict key"),
    ],
)
def test_restricted_rejects_unhashable_values(text: str, cause: str) -> None:
    """Unhashable set elements and dict keys are parse errors naming the real cause."""
    with pytest.raises(ConfigParseError) as excinfo:
        _parse(text)
    err: ConfigParseError = excinfo.value
    assert not err.is_syntax_error
    assert (err.reason or "").startswith(cause)
    assert "line 1" in (err.reason or "")


def test_full_evaluation_catches_system_exit() -> None:
    """A file calling ``SystemExit`` is a parse error, not an interpreter exit."""
    with pytest.raises(ConfigParseError) as excinfo:
        _parse("raise SystemExit(3)\n{}", FULL)
    assert (excinfo.value.reason or "").startswith("SystemExit")


def test_full_evaluation_errors_name_the_failing_line() -> None:
    """Runtime failures report the line of the file where they were raised."""
    with pytest.raises(ConfigParseError) as excinfo:
        _parse(
            """
            base = ["a"]
            extra = base[5]
            {"requires": base}
            """,
            FULL,
        )
    assert (excinfo.value.reason or "").startswith("IndexError on line 2:")

    with pytest.raises(ConfigParseError) as excinfo:
        _parse("x = 1\n\n{'parse_timeout': x // 0}", FULL)
    assert (excinfo.value.reason or "").startswith("ZeroDivisionError on line 3:")
