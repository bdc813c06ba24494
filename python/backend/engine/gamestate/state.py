"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Sequence

from backend.models.moves import Move, MoveKind, Tiles


class Mode(StrEnum):
    PLAY = "play"
    SELECTED_TILE = "selected_tile"


@dataclass(frozen=True)
class Snapshot:
    """Everything a frontend needs to draw the session."""

    tiles: Tiles
    goal: Tiles
    mode: Mode
    selected: int | None
    move_count: int
    solved: bool


class GameState:
    """Holds the working tiles, the frozen goal, the move history and selection."""

    def __init__(self, tiles: Sequence[int]) -> None:
        self.tiles: Tiles = tuple(tiles)
        self._goal: Tiles = tuple(sorted(self.tiles))
        self._max_value: int = max(self.tiles)
        self.history: list[Move] = []
        self.mode: Mode = Mode.PLAY
        self.selected: int | None = None

    @property
    def goal(self) -> Tiles:
        return self._goal

    @property
    def max_value(self) -> int:
        return self._max_value

    # -- selection ------------------------------------------------------------

    def select(self, tile_index: int) -> None:
        self.selected = tile_index
        self.mode = Mode.SELECTED_TILE

    def clear_selection(self) -> None:
        self.selected = None
        self.mode = Mode.PLAY

    def is_selected(self, tile_index: int) -> bool:
        return self.selected == tile_index

    def is_adjacent_to_selected(self, tile_index: int) -> bool:
        return self.selected is not None and abs(self.selected - tile_index) == 1

    # -- moves ----------------------------------------------------------------

    def commit(self, move: Move, tiles: Tiles) -> None:
        """Replace the working tiles; resets are not recorded."""
        self.tiles = tiles
        if move.kind is not MoveKind.RESET:
            self.history.append(move)

    @property
    def move_count(self) -> int:
        return len(self.history)

    @property
    def is_solved(self) -> bool:
        return self.tiles == self._goal

    def snapshot(self) -> Snapshot:
        return Snapshot(
            tiles=self.tiles,
            goal=self._goal,
            mode=self.mode,
            selected=self.selected,
            move_count=self.move_count,
            solved=self.is_solved,
        )
