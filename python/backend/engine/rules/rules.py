"""Rules every tile sequence must satisfy after a move."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence


@dataclass(frozen=True)
class Rule:
    """A named predicate over ``(candidate, max_value)``.

    ``description`` is reported when the check fails and may reference the
    bound as ``{max}``.
    """

    name: str
    description: str
    check: Callable[[Sequence[int], int], bool]

    def failure(self, max_value: int) -> str:
        return self.description.format(max=max_value)


def _all_distinct(tiles: Sequence[int], max_value: int) -> bool:
    return len(set(tiles)) == len(tiles)


def _within_max(tiles: Sequence[int], max_value: int) -> bool:
    return all(v <= max_value for v in tiles)


NO_DUPLICATES = Rule(
    name="no-duplicates",
    description="No two tiles may have the same value.",
    check=_all_distinct,
)

BOUNDED_BY_MAX = Rule(
    name="bounded-by-max",
    description="No tile may be larger than {max}.",
    check=_within_max,
)

DEFAULT_RULES: tuple[Rule, ...] = (NO_DUPLICATES, BOUNDED_BY_MAX)


def check_rules(
    candidate: Sequence[int],
    max_value: int,
    rules: Sequence[Rule] = DEFAULT_RULES,
) -> list[str]:
    """Return the description of every rule *candidate* breaks, in order."""
    return [
        rule.failure(max_value)
        for rule in rules
        if not rule.check(candidate, max_value)
    ]
