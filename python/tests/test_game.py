"""Session tests — the select / move state machine and its bookkeeping."""

from __future__ import annotations

import logging
import random

import pytest

from backend.engine.gamegenerator import GeneratorConfig
from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import Mode
from backend.errors import MoveContractError, SelectionError
from backend.models.moves import Merge, Split


@pytest.fixture
def game() -> GamePlay:
    """A session on ``[5, 2, 9]``, solvable by merge(0, 1) then split(0, 1)."""
    return GamePlay.from_tiles((5, 2, 9))


# -- construction -------------------------------------------------------------


def test_initial_snapshot(game: GamePlay) -> None:
    snap = game.snapshot()
    assert snap.tiles == (5, 2, 9)
    assert snap.goal == (2, 5, 9)
    assert snap.mode is Mode.PLAY
    assert snap.selected is None
    assert snap.move_count == 0
    assert snap.solved is False
    assert game.state.max_value == 9


def test_new_session_is_unsorted_and_fresh() -> None:
    game = GamePlay(GeneratorConfig(max_value=6), rng=random.Random(11))
    assert not game.is_won
    assert game.state.tiles != game.state.goal
    assert game.state.goal == tuple(sorted(game.state.tiles))
    assert game.state.move_count == 0
    assert game.state.mode is Mode.PLAY



def test_default_deal_is_playable() -> None:
    game = GamePlay(GeneratorConfig(), rng=random.Random(5))
    tiles = game.state.tiles
    assert len(tiles) == 3
    assert len(set(tiles)) == 3
    assert all(1 <= v <= 9 for v in tiles)
    assert tiles != game.state.goal
    assert game.solver.search(tiles, game.state.goal, game.state.max_value) is not None
    assert game.hint() is not None

# -- selection ----------------------------------------------------------------


def test_select_enters_selected_mode(game: GamePlay) -> None:
    game.select_tile(1)
    assert game.state.mode is Mode.SELECTED_TILE
    assert game.state.selected == 1


def test_select_only_allowed_in_play_mode(game: GamePlay) -> None:
    game.select_tile(0)
    with pytest.raises(SelectionError):
        game.select_tile(1)
    assert game.state.selected == 0


@pytest.mark.parametrize("index", [-1, 3])
def test_select_out_of_range(game: GamePlay, index: int) -> None:
    with pytest.raises(SelectionError):
        game.select_tile(index)
    assert game.state.mode is Mode.PLAY


# -- moves --------------------------------------------------------------------


def test_legal_moves_are_committed_and_recorded(game: GamePlay) -> None:
    game.select_tile(0)
    assert game.attempt_merge(0, 1) is True
    assert game.state.tiles == (7, 9)
    assert game.state.mode is Mode.PLAY
    assert game.state.selected is None

    game.select_tile(0)
    assert game.attempt_split(0, 1) is True
    assert game.state.tiles == (2, 5, 9)
    assert game.state.history == [Merge(0, 1), Split(0, 1)]
    assert game.is_won
    assert game.snapshot().solved


def test_illegal_move_is_discarded(game: GamePlay) -> None:
    game.select_tile(1)
    assert game.attempt_merge(1, 2) is False  # 2 + 9 > 9
    assert game.state.tiles == (5, 2, 9)
    assert game.state.move_count == 0
    assert game.state.mode is Mode.PLAY
    assert game.state.selected is None


def test_splitting_a_two_makes_duplicate_ones(game: GamePlay) -> None:
    game.select_tile(1)
    assert game.attempt_split(1, 0) is False
    assert game.state.tiles == (5, 2, 9)


def test_reset_changes_nothing_but_selection(game: GamePlay) -> None:
    game.select_tile(0)
    assert game.resolve_unresolved_click() is True
    assert game.state.tiles == (5, 2, 9)
    assert game.state.history == []
    assert game.state.mode is Mode.PLAY


def test_malformed_moves_fail_fast(game: GamePlay) -> None:
    with pytest.raises(MoveContractError):
        game.attempt_split(0, 4)
    with pytest.raises(MoveContractError):
        game.attempt_split(5, 0)
    with pytest.raises(MoveContractError):
        game.attempt_merge(0, 2)


def test_rejected_moves_from_concrete_scenario() -> None:
    game = GamePlay.from_tiles((3, 1, 2))
    assert game.state.goal == (1, 2, 3)
    assert game.state.max_value == 3
    assert game.attempt_merge(1, 2) is False
    assert game.attempt_split(0, 0) is False
    assert game.attempt_split(0, 1) is False
    assert game.state.tiles == (3, 1, 2)
    assert game.hint() is None


# -- click resolution ---------------------------------------------------------


def test_clicks_solve_the_puzzle(game: GamePlay) -> None:
    assert game.click(0) is True          # select 5
    assert game.click(1) is True          # merge with 2 -> [7, 9]
    assert game.state.tiles == (7, 9)
    assert game.click(0) is True          # select 7
    assert game.click(0, 1) is True       # split after unit 2 -> [2, 5, 9]
    assert game.state.tiles == (2, 5, 9)
    assert game.is_won
    assert game.state.mode is Mode.PLAY


def test_clicking_last_unit_resets(game: GamePlay) -> None:
    game.click(0)
    assert game.click(0, 4) is True
    assert game.state.tiles == (5, 2, 9)
    assert game.state.history == []
    assert game.state.mode is Mode.PLAY


@pytest.mark.parametrize("tile, unit", [(2, None), (0, None), (2, 3)])
def test_other_clicks_reset(game: GamePlay, tile: int, unit: int | None) -> None:
    game.click(0)
    assert game.click(tile, unit) is True
    assert game.state.tiles == (5, 2, 9)
    assert game.state.mode is Mode.PLAY
    assert game.state.selected is None


@pytest.mark.parametrize(
    "first, tile, unit",
    [(2, 3, None), (0, 0, 7), (0, 0, -1), (2, -1, None)],
    ids=["neighbour-past-end", "unit-past-value", "negative-unit", "negative-tile"],
)
def test_out_of_range_clicks_reset(
    game: GamePlay, first: int, tile: int, unit: int | None
) -> None:
    game.click(first)
    assert game.click(tile, unit) is True
    assert game.state.tiles == (5, 2, 9)
    assert game.state.history == []
    assert game.state.mode is Mode.PLAY
    assert game.state.selected is None


# -- hint & logging -----------------------------------------------------------


def test_hint_move_is_legal(game: GamePlay) -> None:
    move = game.hint()
    assert move is not None
    assert game.apply_move(move) is True
    assert game.state.move_count == 1


def test_no_hint_when_solved() -> None:
    assert GamePlay.from_tiles((2, 5, 9)).hint() is None


def test_rejections_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("test.game")
    game = GamePlay.from_tiles((5, 2, 9), logger=logger)
    with caplog.at_level(logging.INFO, logger="test.game"):
        game.attempt_merge(1, 2)
    assert "rejected merge tiles 1 and 2" in caplog.text
    assert "No tile may be larger than 9." in caplog.text
