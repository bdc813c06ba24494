from backend.models.moves import (
    Merge,
    Move,
    MoveKind,
    Reset,
    Split,
    Tiles,
    apply_move,
    make_merge,
    make_split,
)

__all__ = [
    "Merge",
    "Move",
    "MoveKind",
    "Reset",
    "Split",
    "Tiles",
    "apply_move",
    "make_merge",
    "make_split",
]
