"""Typed-command reader shared by the terminal frontend.

Players type one short command per turn.  Tiles and units are numbered
from 1 on screen and converted to 0-based indices here.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    action: str
    tile: int | None = None
    unit: int | None = None


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "q": "quit",
    "quit": "quit",
    "exit": "quit",
    "h": "hint",
    "hint": "hint",
    "n": "new",
    "new": "new",
    "r": "reset",
    "reset": "reset",
    "?": "help",
    "help": "help",
}


def parse_command(raw: str) -> Command:
    """Map a line of input to a ``Command``.

    Possible actions:
        "click"                 — ``"2"`` clicks tile 2; ``"2.3"`` or
                                  ``"2 3"`` clicks unit 3 of tile 2
        "quit", "hint", "new", "reset", "help"
        "unknown"               — anything else
    """
    text = raw.strip().lower()
    if text in _KEY_MAP:
        return Command(_KEY_MAP[text])

    parts = text.replace(".", " ").split()
    if not 1 <= len(parts) <= 2 or not all(p.isdigit() for p in parts):
        return Command("unknown")

    numbers = [int(p) for p in parts]
    if any(n < 1 for n in numbers):
        return Command("unknown")

    tile = numbers[0] - 1
    unit = numbers[1] - 1 if len(numbers) == 2 else None
    return Command("click", tile=tile, unit=unit)
