# topmark:header:start
#
#   project      : LintStack
#   file         : merge.py
#   file_relpath : src/lintstack/config/merge.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Merge policy for profiles.

Profiles are folded left to right, least specific first. Each field has one
strategy, declared in `FIELD_STRATEGIES`:

* ``LAST_EXPLICIT_WINS`` (``strict``, ``color``, ``check_for_updates``,
  ``parse_timeout``): ``None`` never overrides; any explicit value does,
  including ``False``.
* ``REPLACE_IF_NONEMPTY`` (``included``, ``excluded``): a later non-empty
  list replaces the earlier one wholesale; an empty or absent list never does.
* ``APPEND`` (``requires``, ``plugins``, provenance): concatenated in order,
  never de-duplicated.
* ``MERGE_KEYS`` (``checks``): a later entry replaces that key's options but
  the key keeps its first-seen position.

The fold is order-sensitive; callers must preserve source order.
"""

from __future__ import annotations

import functools
from dataclasses import fields
from enum import Enum
from typing import TYPE_CHECKING, Any, Final

from lintstack.config.logging import get_logger
from lintstack.config.profile import Profile

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from lintstack.config.logging import LintstackLogger

logger: LintstackLogger = get_logger(__name__)


class MergeStrategy(Enum):
    """How a later profile's value combines with the accumulated one."""

    LAST_EXPLICIT_WINS = "last_explicit_wins"
    REPLACE_IF_NONEMPTY = "replace_if_nonempty"
    APPEND = "append"
    MERGE_KEYS = "merge_keys"


FIELD_STRATEGIES: Final[Mapping[str, MergeStrategy]] = {
    "check_for_updates": MergeStrategy.LAST_EXPLICIT_WINS,
    "requires": MergeStrategy.APPEND,
    "plugins": MergeStrategy.APPEND,
    "included": MergeStrategy.REPLACE_IF_NONEMPTY,
    "excluded": MergeStrategy.REPLACE_IF_NONEMPTY,
    "checks": MergeStrategy.MERGE_KEYS,
    "parse_timeout": MergeStrategy.LAST_EXPLICIT_WINS,
    "strict": MergeStrategy.LAST_EXPLICIT_WINS,
    "color": MergeStrategy.LAST_EXPLICIT_WINS,
    "config_files": MergeStrategy.APPEND,
    "diagnostics": MergeStrategy.APPEND,
}


def merge_value(strategy: MergeStrategy, base: Any, other: Any) -> Any:
    """Combine ``base`` (accumulated) with ``other`` (more specific) under ``strategy``.

    Args:
        strategy (MergeStrategy): The field's merge strategy.
        base (Any): Accumulated value; ``None`` when unset.
        other (Any): Value from the later profile; ``None`` when unset.

    Returns:
        Any: The merged value. Containers are always fresh copies.
    """
    if strategy is MergeStrategy.LAST_EXPLICIT_WINS:
        return base if other is None else other

    if strategy is MergeStrategy.REPLACE_IF_NONEMPTY:
        chosen: Any = other if other else base
        return None if chosen is None else list(chosen)

    if strategy is MergeStrategy.APPEND:
        if base is None and other is None:
            return None
        return [*(base or []), *(other or [])]

    if strategy is MergeStrategy.MERGE_KEYS:
        if base is None and other is None:
            return None
        merged: dict[str, Any] = dict(base or {})
        merged.update(other or {})
        return merged

    raise ValueError(f"Unknown merge strategy: {strategy!r}")


def merge_pair(base: Profile, other: Profile) -> Profile:
    """Return a new profile where ``other`` is applied over ``base``.

    Args:
        base (Profile): The accumulated, less specific profile.
        other (Profile): The more specific profile.

    Returns:
        Profile: The merged profile; neither input is modified.

    Raises:
        KeyError: If a `Profile` field has no declared strategy.
    """
    values: dict[str, Any] = {
        f.name: merge_value(
            FIELD_STRATEGIES[f.name],
            getattr(base, f.name),
            getattr(other, f.name),
        )
        for f in fields(Profile)
    }
    return Profile(**values)


def merge_profiles(profiles: Iterable[Profile]) -> Profile:
    """Fold ``profiles`` left to right into one profile.

    The first profile seeds the accumulator; fields it leaves unset stay unset
    until a later profile sets them. An empty input yields an empty profile.
    """
    ordered: list[Profile] = list(profiles)
    if not ordered:
        return Profile()

    def _step(acc: Profile, nxt: Profile) -> Profile:
        merged: Profile = merge_pair(acc, nxt)
        logger.trace("Merged profile from %s: %s", nxt.config_files, merged)
        return merged

    seed: Profile = ordered[0]
    # Shallow-copy the seed so the fold never aliases the caller's containers
    first: Profile = Profile(
        **{f.name: _copy_container(getattr(seed, f.name)) for f in fields(Profile)}
    )
    return functools.reduce(_step, ordered[1:], first)


def _copy_container(value: Any) -> Any:
    if isinstance(value, list):
        return list(value)
    if isinstance(value, dict):
        return dict(value)
    return value
