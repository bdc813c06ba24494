from backend.engine.gamesolver.solver import MoveCheck, Solver, to_unsorted

__all__ = ["MoveCheck", "Solver", "to_unsorted"]
