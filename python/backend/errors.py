"""Error taxonomy for the puzzle engine.

Illegal moves are *not* errors: they are reported through
``Solver.validate_move`` and the boolean returned by ``GamePlay.apply_move``.
The exceptions below signal contract violations or generation failures.
"""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for all puzzle errors."""


class MoveContractError(PuzzleError, ValueError):
    """A move was built that cannot be applied to the sequence at all."""


class SelectionError(PuzzleError, ValueError):
    """A tile was selected outside play mode or out of range."""


class DegeneratePuzzleError(PuzzleError, ValueError):
    """The tiles admit no non-sorted arrangement to start from."""


class ConfigError(PuzzleError, ValueError):
    """Generator settings that cannot produce a puzzle."""


class GenerationError(PuzzleError, RuntimeError):
    """No solvable puzzle could be generated for the requested settings."""

    def __init__(self, message: str, *, attempts: int = 0) -> None:
        super().__init__(message)
        self.attempts = attempts
