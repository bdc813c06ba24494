"""Core gameplay logic — turns player intents into moves and checks the win."""

from __future__ import annotations

import logging
import random
from typing import Sequence

from backend.engine.gamegenerator import GameGenerator, GeneratorConfig
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameState, Mode, Snapshot
from backend.errors import SelectionError
from backend.models.moves import Move, Reset, make_merge, make_split


class GamePlay:
    """Orchestrates a single game session.

    All legality decisions are made by the ``Solver``; this class only keeps
    the session's books (tiles, history, mode, selection).
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        *,
        solver: Solver | None = None,
        rng: random.Random | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.log = logger or logging.getLogger(__name__)
        self.solver = solver or Solver(logger=self.log)
        tiles = GameGenerator.generate(config, self.solver, rng)
        self.state = GameState(tiles)
        self.log.info("new game %s, goal %s", self.state.tiles, self.state.goal)

    @classmethod
    def from_tiles(
        cls,
        tiles: Sequence[int],
        *,
        solver: Solver | None = None,
        logger: logging.Logger | None = None,
    ) -> "GamePlay":
        """Create a game session from a known starting arrangement."""
        obj = object.__new__(cls)
        obj.log = logger or logging.getLogger(__name__)
        obj.solver = solver or Solver(logger=obj.log)
        obj.state = GameState(tiles)
        return obj

    # -- intents --------------------------------------------------------------

    def select_tile(self, tile_index: int) -> None:
        """Select a tile.  Only allowed while no tile is selected."""
        if self.state.mode is not Mode.PLAY:
            raise SelectionError(
                f"Tile {self.state.selected} is already selected."
            )
        if not 0 <= tile_index < len(self.state.tiles):
            raise SelectionError(
                f"Tile index {tile_index} out of range for "
                f"{len(self.state.tiles)} tiles."
            )
        self.state.select(tile_index)

    def attempt_split(self, tile_index: int, split_point: int) -> bool:
        return self.apply_move(make_split(self.state.tiles, tile_index, split_point))

    def attempt_merge(self, selected_index: int, target_index: int) -> bool:
        return self.apply_move(
            make_merge(self.state.tiles, selected_index, target_index)
        )

    def resolve_unresolved_click(self) -> bool:
        return self.apply_move(Reset())

    def click(self, tile_index: int, unit_index: int | None = None) -> bool:
        """Resolve a click on a tile (and optionally one of its units).

        With nothing selected the tile becomes selected.  With a tile
        selected: a unit of the selected tile splits it there, a neighbour
        merges with it, anything else resets.  Returns False only when a
        move was rejected.
        """
        state = self.state
        if state.mode is Mode.PLAY:
            self.select_tile(tile_index)
            return True

        if not 0 <= tile_index < len(state.tiles):
            return self.resolve_unresolved_click()
        if state.is_selected(tile_index) and unit_index is not None:
            # The last unit would leave an empty right-hand tile.
            if not 0 <= unit_index < state.tiles[tile_index] - 1:
                return self.resolve_unresolved_click()
            return self.attempt_split(tile_index, unit_index)
        if state.is_adjacent_to_selected(tile_index):
            return self.attempt_merge(state.selected, tile_index)
        return self.resolve_unresolved_click()

    # -- moves ----------------------------------------------------------------

    def apply_move(self, move: Move) -> bool:
        """Validate *move* and commit it if legal.

        The selection is cleared either way.  Returns True if committed.
        """
        state = self.state
        check = self.solver.validate_move(move, state.tiles, state.max_value)
        if check.ok:
            self.log.debug("%s: %s -> %s", move.describe(), state.tiles, check.result)
            state.commit(move, check.result)
        else:
            self.log.info(
                "rejected %s on %s: %s",
                move.describe(), state.tiles, " ".join(check.failures),
            )
        state.clear_selection()
        return check.ok

    def hint(self) -> Move | None:
        """Return the next move of a solving path, or ``None``."""
        state = self.state
        return self.solver.hint(state.tiles, state.goal, state.max_value)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    def snapshot(self) -> Snapshot:
        return self.state.snapshot()
