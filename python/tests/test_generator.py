"""Generator tests — deals are distinct, unsorted and proven solvable."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator, GeneratorConfig
from backend.engine.gamesolver import Solver
from backend.errors import ConfigError, GenerationError

SMALL = GeneratorConfig(tile_count=3, min_value=1, max_value=6)


# -- config -------------------------------------------------------------------


def test_default_config() -> None:
    config = GeneratorConfig()
    assert (config.tile_count, config.min_value, config.max_value) == (3, 1, 9)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"tile_count": 1},
        {"min_value": 0},
        {"tile_count": 10, "max_value": 9},
        {"min_value": 5, "max_value": 4},
        {"max_attempts": 0},
    ],
    ids=["one-tile", "zero-value", "range-too-small", "empty-range", "no-attempts"],
)
def test_config_rejects_impossible_settings(kwargs: dict) -> None:
    with pytest.raises(ConfigError):
        GeneratorConfig(**kwargs)


def test_config_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        GeneratorConfig(tile_count=4, min_value=1, max_value=3)


# -- unique values ------------------------------------------------------------


@pytest.mark.parametrize("seed", range(5))
def test_unique_values_are_distinct_and_in_range(seed: int) -> None:
    config = GeneratorConfig(tile_count=4, min_value=3, max_value=8)
    values = GameGenerator.unique_values(config, random.Random(seed))
    assert len(values) == 4
    assert len(set(values)) == 4
    assert all(3 <= v <= 8 for v in values)


# -- generate -----------------------------------------------------------------


@pytest.mark.parametrize("seed", range(3))
def test_generate_returns_solvable_unsorted_start(seed: int) -> None:
    solver = Solver()
    start = GameGenerator.generate(SMALL, solver, random.Random(seed))
    goal = tuple(sorted(start))

    assert len(start) == 3
    assert len(set(start)) == 3
    assert all(1 <= v <= 6 for v in start)
    assert start != goal
    assert solver.search(start, goal, max(start)) is not None


def test_generate_is_reproducible_with_seed() -> None:
    first = GameGenerator.generate(SMALL, Solver(), random.Random(42))
    second = GameGenerator.generate(SMALL, Solver(), random.Random(42))
    assert first == second


def test_generate_gives_up_after_max_attempts() -> None:
    # {1, 2, 3} is the only draw and it is never solvable.
    config = GeneratorConfig(tile_count=3, min_value=1, max_value=3, max_attempts=5)
    with pytest.raises(GenerationError) as info:
        GameGenerator.generate(config, Solver(), random.Random(0))
    assert info.value.attempts == 5
