"""Generates solvable split/merge puzzles."""

from __future__ import annotations

import random
from dataclasses import dataclass

from backend.engine.gamesolver import Solver
from backend.errors import ConfigError, GenerationError
from backend.models.moves import Tiles


@dataclass(frozen=True)
class GeneratorConfig:
    """How many tiles to deal and which values they may take."""

    tile_count: int = 3
    min_value: int = 1
    max_value: int = 9
    max_attempts: int = 1000

    def __post_init__(self) -> None:
        if self.tile_count < 2:
            raise ConfigError(
                f"Need at least 2 tiles to shuffle, got {self.tile_count}."
            )
        if self.min_value < 1:
            raise ConfigError(
                f"Tile values must be positive, got min {self.min_value}."
            )
        span = self.max_value - self.min_value + 1
        if span < self.tile_count:
            raise ConfigError(
                f"Range {self.min_value}-{self.max_value} holds {max(span, 0)} "
                f"values, fewer than {self.tile_count} distinct tiles."
            )
        if self.max_attempts < 1:
            raise ConfigError(
                f"max_attempts must be at least 1, got {self.max_attempts}."
            )


class GameGenerator:
    """Deals random distinct tiles until the solver proves one solvable."""

    @staticmethod
    def unique_values(config: GeneratorConfig, rng: random.Random) -> list[int]:
        """Return ``tile_count`` distinct values from the configured range."""
        values = range(config.min_value, config.max_value + 1)
        return rng.sample(values, config.tile_count)

    @staticmethod
    def generate(
        config: GeneratorConfig | None = None,
        solver: Solver | None = None,
        rng: random.Random | None = None,
    ) -> Tiles:
        """Return a non-sorted start the solver has proven solvable.

        Raises ``GenerationError`` once ``config.max_attempts`` draws have
        all been unsolvable.
        """
        config = config or GeneratorConfig()
        solver = solver or Solver()
        rng = rng or random.Random()

        for attempt in range(1, config.max_attempts + 1):
            values = GameGenerator.unique_values(config, rng)
            start = solver.solvable_start(values, rng)
            if start is not None:
                solver.log.debug("generated %s on attempt %d", start, attempt)
                return start
            solver.log.debug("attempt %d: %s is unsolvable", attempt, values)

        raise GenerationError(
            f"No solvable {config.tile_count}-tile puzzle in "
            f"{config.min_value}-{config.max_value} after "
            f"{config.max_attempts} attempts.",
            attempts=config.max_attempts,
        )
