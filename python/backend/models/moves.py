"""Move model for the split/merge tile puzzle.

A tile sequence is an immutable ``tuple[int, ...]``.  Moves are small frozen
dataclasses; ``apply_move`` computes the resulting sequence without checking
any puzzle rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, Sequence

from backend.errors import MoveContractError

Tiles = tuple[int, ...]


class MoveKind(StrEnum):
    SPLIT = "split"
    MERGE = "merge"
    RESET = "reset"


@dataclass(frozen=True)
class Split:
    """Divide ``tiles[tile_index]`` into ``split_point + 1`` and the rest."""

    kind: ClassVar[MoveKind] = MoveKind.SPLIT

    tile_index: int
    split_point: int

    def __post_init__(self) -> None:
        if self.tile_index < 0 or self.split_point < 0:
            raise MoveContractError(
                f"Split indices must be non-negative, got "
                f"tile {self.tile_index} at {self.split_point}."
            )

    def describe(self) -> str:
        return f"split tile {self.tile_index} at {self.split_point}"


@dataclass(frozen=True)
class Merge:
    """Sum two adjacent tiles into one, kept at the lower index."""

    kind: ClassVar[MoveKind] = MoveKind.MERGE

    index_a: int
    index_b: int

    def __post_init__(self) -> None:
        if min(self.index_a, self.index_b) < 0:
            raise MoveContractError(
                f"Merge indices must be non-negative, got "
                f"{self.index_a} and {self.index_b}."
            )
        if abs(self.index_a - self.index_b) != 1:
            raise MoveContractError(
                f"Merge needs adjacent tiles, got {self.index_a} and {self.index_b}."
            )

    @property
    def span(self) -> tuple[int, int]:
        before, after = sorted((self.index_a, self.index_b))
        return before, after

    def describe(self) -> str:
        return f"merge tiles {self.index_a} and {self.index_b}"


@dataclass(frozen=True)
class Reset:
    """No-op: the sequence is unchanged and nothing is recorded."""

    kind: ClassVar[MoveKind] = MoveKind.RESET

    def describe(self) -> str:
        return "reset"


Move = Split | Merge | Reset


def apply_move(move: Move, tiles: Sequence[int]) -> Tiles:
    """Return the sequence produced by *move*.  *tiles* is never mutated."""
    match move.kind:
        case MoveKind.SPLIT:
            i = move.tile_index
            left = move.split_point + 1
            right = tiles[i] - left
            return (*tiles[:i], left, right, *tiles[i + 1 :])
        case MoveKind.MERGE:
            before, after = move.span
            merged = tiles[before] + tiles[after]
            return (*tiles[:before], merged, *tiles[after + 1 :])
        case MoveKind.RESET:
            return tuple(tiles)
    raise MoveContractError(f"Unknown move: {move!r}")


# -- checked constructors -----------------------------------------------------


def make_split(tiles: Sequence[int], tile_index: int, split_point: int) -> Split:
    """Build a ``Split`` that is well-formed for *tiles*.

    Raises ``MoveContractError`` if the tile does not exist or the split
    point would leave an empty tile.
    """
    if not 0 <= tile_index < len(tiles):
        raise MoveContractError(
            f"Tile index {tile_index} out of range for {len(tiles)} tiles."
        )
    value = tiles[tile_index]
    if not 0 <= split_point < value - 1:
        raise MoveContractError(
            f"Cannot split a {value} after unit {split_point + 1}."
        )
    return Split(tile_index, split_point)


def make_merge(tiles: Sequence[int], index_a: int, index_b: int) -> Merge:
    """Build a ``Merge`` of two existing, adjacent tiles."""
    for idx in (index_a, index_b):
        if not 0 <= idx < len(tiles):
            raise MoveContractError(
                f"Tile index {idx} out of range for {len(tiles)} tiles."
            )
    return Merge(index_a, index_b)
