# topmark:header:start
#
#   project      : LintStack
#   file         : parser.py
#   file_relpath : src/lintstack/config/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Turn `.lintstack.py` text into data.

A configuration file is Python source whose last statement is an expression
evaluating to a mapping. Two trust modes exist:

* `TrustMode.RESTRICTED`: the file must be a single expression built from
  literals (``str``, numbers, ``bool``, ``None``, lists, tuples, sets, dicts)
  and ``re.compile("...")`` calls with optional ``re`` flags. Nothing is
  executed.
* `TrustMode.FULL_EVALUATION`: the file is executed; all statements but the
  last run in a fresh namespace that pre-binds ``re``, then the last
  expression is evaluated and returned. Any exception the file raises
  (``SystemExit`` included) becomes a parse error naming the failing line.

Failures raise `ConfigParseError` without a location; the profile extractor
tags the error with the offending file.
"""

from __future__ import annotations

import ast
import re
import traceback
from typing import TYPE_CHECKING, Any, Final, Protocol

from lintstack.config.errors import ConfigParseError
from lintstack.config.logging import get_logger
from lintstack.config.types import TrustMode

if TYPE_CHECKING:
    from lintstack.config.logging import LintstackLogger

logger: LintstackLogger = get_logger(__name__)

_REGEX_FLAGS: Final[frozenset[str]] = frozenset(
    {"A", "ASCII", "I", "IGNORECASE", "M", "MULTILINE", "S", "DOTALL", "X", "VERBOSE"}
)


class ConfigParser(Protocol):
    """Parser service used by the profile extractor."""

    def parse(self, raw_text: str, mode: TrustMode, filename: str | None = None) -> object:
        """Return the data described by ``raw_text``; raise `ConfigParseError` on failure."""
        ...


def _unsupported(node: ast.AST, what: str | None = None) -> ConfigParseError:
    label: str = what or type(node).__name__
    line: int | None = getattr(node, "lineno", None)
    where: str = f" on line {line}" if line is not None else ""
    return ConfigParseError(reason=f"unsupported expression in restricted mode: {label}{where}")


def _is_re_attribute(node: ast.expr, names: frozenset[str]) -> bool:
    return (
        isinstance(node, ast.Attribute)
        and isinstance(node.value, ast.Name)
        and node.value.id == "re"
        and node.attr in names
    )


def _regex_flags(node: ast.expr) -> int:
    if _is_re_attribute(node, _REGEX_FLAGS):
        assert isinstance(node, ast.Attribute)
        return int(getattr(re, node.attr))
    if isinstance(node, ast.BinOp) and isinstance(node.op, ast.BitOr):
        return _regex_flags(node.left) | _regex_flags(node.right)
    raise _unsupported(node, "regular expression flags")


def _regex(node: ast.Call) -> re.Pattern[str]:
    if not _is_re_attribute(node.func, frozenset({"compile"})) or node.keywords:
        raise _unsupported(node, "call")
    if not 1 <= len(node.args) <= 2:
        raise _unsupported(node, "re.compile() arguments")

    pattern_node: ast.expr = node.args[0]
    if not (isinstance(pattern_node, ast.Constant) and isinstance(pattern_node.value, str)):
        raise _unsupported(pattern_node, "non-literal regular expression")
    flags: int = _regex_flags(node.args[1]) if len(node.args) == 2 else 0

    try:
        return re.compile(pattern_node.value, flags)
    except re.error as exc:
        raise ConfigParseError(
            reason=f"invalid regular expression {pattern_node.value!r} on line {node.lineno}: {exc}"
        ) from exc


def _literal(node: ast.expr) -> Any:
    """Evaluate a literal expression tree (plus ``re.compile`` calls)."""
    if isinstance(node, ast.Constant):
        return node.value
    if isinstance(node, ast.List):
        return [_literal(e) for e in node.elts]
    if isinstance(node, ast.Tuple):
        return tuple(_literal(e) for e in node.elts)
    if isinstance(node, ast.Set):
        elements: list[Any] = [_literal(e) for e in node.elts]
        try:
            return set(elements)
        except TypeError as exc:
            raise ConfigParseError(
                reason=f"unhashable set element on line {node.lineno}: {exc}"
            ) from exc
    if isinstance(node, ast.Dict):
        result: dict[Any, Any] = {}
        for key, value in zip(node.keys, node.values):
            if key is None:
                raise _unsupported(value, "dict unpacking")
            plain_key: Any = _literal(key)
            try:
                hash(plain_key)
            except TypeError as exc:
                raise ConfigParseError(
                    reason=f"unhashable dict key on line {key.lineno}: {exc}"
                ) from exc
            result[plain_key] = _literal(value)
        return result
    if isinstance(node, ast.UnaryOp) and isinstance(node.op, (ast.USub, ast.UAdd)):
        operand: Any = _literal(node.operand)
        if isinstance(operand, (int, float)) and not isinstance(operand, bool):
            return -operand if isinstance(node.op, ast.USub) else operand
        raise _unsupported(node, "unary operator on a non-number")
    if isinstance(node, ast.Call):
        return _regex(node)
    raise _unsupported(node)


def _failing_line(exc: BaseException, source_name: str) -> str:
    """Return `` on line N`` for the innermost frame of the configuration file, if any."""
    frames: list[traceback.FrameSummary] = [
        frame
        for frame in traceback.extract_tb(exc.__traceback__)
        if frame.filename == source_name
    ]
    if not frames or frames[-1].lineno is None:
        return ""
    return f" on line {frames[-1].lineno}"


class PythonConfigParser:
    """Default parser for `.lintstack.py` files."""

    def parse(self, raw_text: str, mode: TrustMode, filename: str | None = None) -> object:
        """Parse ``raw_text`` in the given trust mode.

        Args:
            raw_text (str): Configuration file contents.
            mode (TrustMode): Literal-only or full evaluation.
            filename (str | None): Used in tracebacks and syntax error reporting.

        Returns:
            object: The value of the file's last expression.

        Raises:
            ConfigParseError: On syntax errors (with line, description and
                trigger) or when the text is rejected or raises during evaluation
                (with a reason).
        """
        source_name: str = filename or "<config>"
        try:
            module: ast.Module = ast.parse(raw_text, filename=source_name, mode="exec")
        except SyntaxError as exc:
            if exc.lineno is None:
                raise ConfigParseError(reason=exc.msg) from exc
            trigger: str | None = exc.text.strip() if exc.text else None
            raise ConfigParseError(
                line=exc.lineno, description=exc.msg, trigger=trigger or None
            ) from exc
        except ValueError as exc:
            # Older interpreters report NUL bytes in the source this way
            raise ConfigParseError(reason=str(exc)) from exc

        if not module.body or not isinstance(module.body[-1], ast.Expr):
            raise ConfigParseError(
                reason="the last statement must be an expression producing the configuration"
            )

        if mode is TrustMode.RESTRICTED:
            if len(module.body) != 1:
                raise ConfigParseError(
                    reason=(
                        "restricted mode accepts a single literal expression, "
                        f"found {len(module.body)} statements"
                    )
                )
            return _literal(module.body[0].value)

        return self._evaluate(module, source_name)

    @staticmethod
    def _evaluate(module: ast.Module, source_name: str) -> object:
        *body, last = module.body
        assert isinstance(last, ast.Expr)
        namespace: dict[str, Any] = {
            "__name__": "__lintstack_config__",
            "__file__": source_name,
            "re": re,
        }
        logger.trace("Evaluating %s with full trust", source_name)
        try:
            exec(compile(ast.Module(body=body, type_ignores=[]), source_name, "exec"), namespace)
            return eval(compile(ast.Expression(body=last.value), source_name, "eval"), namespace)
        except (Exception, SystemExit) as exc:
            where: str = _failing_line(exc, source_name)
            raise ConfigParseError(reason=f"{type(exc).__name__}{where}: {exc}") from exc


DEFAULT_PARSER: Final[PythonConfigParser] = PythonConfigParser()


def parse_config_text(raw_text: str, mode: TrustMode, filename: str | None = None) -> object:
    """Parse ``raw_text`` with the default parser; see `PythonConfigParser.parse`."""
    return DEFAULT_PARSER.parse(raw_text, mode, filename)
