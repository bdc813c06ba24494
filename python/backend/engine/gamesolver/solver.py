"""Split/merge puzzle solver.

The solver is a depth-first search over the move graph with an explicit
stack, so deep chains of splits and merges never hit the recursion limit.
States are plain tuples and double as their own visited-set keys.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterator, NamedTuple, Sequence

from backend.engine.rules import DEFAULT_RULES, Rule, check_rules
from backend.errors import DegeneratePuzzleError
from backend.models.moves import Merge, Move, Split, Tiles, apply_move

# Tiles of these sizes cannot be split into two distinct positive parts.
TERMINAL_VALUES = frozenset({1, 2})


class MoveCheck(NamedTuple):
    failures: list[str]
    result: Tiles

    @property
    def ok(self) -> bool:
        return not self.failures


@dataclass
class _Frame:
    tiles: Tiles
    pending: Iterator[Move]
    move: Move | None


def to_unsorted(tiles: Sequence[int], rng: random.Random | None = None) -> Tiles:
    """Return a shuffled copy of *tiles* that is not in ascending order."""
    if len(tiles) < 2 or len(set(tiles)) < 2:
        raise DegeneratePuzzleError(
            f"{list(tiles)} has no arrangement other than its sorted one."
        )
    rng = rng or random.Random()
    goal = sorted(tiles)
    items = list(tiles)
    while True:
        rng.shuffle(items)
        if items != goal:
            return tuple(items)


class Solver:
    """Move enumeration, move validation, and solvability search.

    Holds configuration only; every method works on the sequences passed in.
    """

    def __init__(
        self,
        rules: Sequence[Rule] = DEFAULT_RULES,
        logger: logging.Logger | None = None,
    ) -> None:
        self.rules = tuple(rules)
        self.log = logger or logging.getLogger(__name__)

    # -- moves ----------------------------------------------------------------

    @staticmethod
    def enumerate_moves(tiles: Sequence[int]) -> list[Move]:
        """All structurally possible moves: splits first, then merges."""
        moves: list[Move] = []
        for i, value in enumerate(tiles):
            if value in TERMINAL_VALUES:
                continue
            for split_point in range(value - 1):
                moves.append(Split(i, split_point))
        for i in range(len(tiles) - 1):
            moves.append(Merge(i, i + 1))
        return moves

    def validate_move(
        self, move: Move, tiles: Sequence[int], max_value: int
    ) -> MoveCheck:
        """Apply *move* and report every rule the result breaks.

        The result is returned even when the move is illegal; callers must
        not commit it unless ``failures`` is empty.
        """
        result = apply_move(move, tiles)
        return MoveCheck(check_rules(result, max_value, self.rules), result)

    # -- search ---------------------------------------------------------------

    def search(
        self, start: Sequence[int], goal: Sequence[int], max_value: int
    ) -> list[Move] | None:
        """Return a list of legal moves leading from *start* to *goal*.

        Returns ``[]`` if *start* already is the goal and ``None`` if the
        goal is unreachable.
        """
        start = tuple(start)
        goal = tuple(goal)
        visited: set[Tiles] = {start}
        stack = [_Frame(start, iter(self.enumerate_moves(start)), None)]

        while stack:
            frame = stack[-1]
            if frame.tiles == goal:
                path = [f.move for f in stack[1:]]
                self.log.debug(
                    "solved %s in %d moves (%d states visited)",
                    start, len(path), len(visited),
                )
                return path

            move = next(frame.pending, None)
            if move is None:
                stack.pop()
                continue

            check = self.validate_move(move, frame.tiles, max_value)
            if not check.ok or check.result in visited:
                continue
            visited.add(check.result)
            stack.append(
                _Frame(check.result, iter(self.enumerate_moves(check.result)), move)
            )

        self.log.debug(
            "%s cannot reach %s (%d states visited)", start, goal, len(visited)
        )
        return None

    def solvable_start(
        self, tiles: Sequence[int], rng: random.Random | None = None
    ) -> Tiles | None:
        """Shuffle *tiles* into a non-sorted start and return it if solvable.

        Raises ``DegeneratePuzzleError`` when no non-sorted start exists.
        """
        start = to_unsorted(tiles, rng)
        goal = tuple(sorted(tiles))
        if self.search(start, goal, max(tiles)) is None:
            return None
        return start

    def solve(self, tiles: Sequence[int], rng: random.Random | None = None) -> bool:
        """Return True if a shuffled arrangement of *tiles* can be sorted."""
        return self.solvable_start(tiles, rng) is not None

    def hint(
        self, tiles: Sequence[int], goal: Sequence[int], max_value: int
    ) -> Move | None:
        """Return the next move towards *goal*, or ``None`` if solved / stuck."""
        path = self.search(tiles, goal, max_value)
        return path[0] if path else None
