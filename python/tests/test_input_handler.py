"""Command parsing tests for the terminal frontend."""

from __future__ import annotations

import pytest

from frontend.cli.input_handler import Command, parse_command


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2", Command("click", tile=1)),
        (" 1 ", Command("click", tile=0)),
        ("2.3", Command("click", tile=1, unit=2)),
        ("2 3", Command("click", tile=1, unit=2)),
        ("q", Command("quit")),
        ("Quit", Command("quit")),
        ("h", Command("hint")),
        ("n", Command("new")),
        ("r", Command("reset")),
        ("?", Command("help")),
    ],
)
def test_parse_known_commands(raw: str, expected: Command) -> None:
    assert parse_command(raw) == expected


@pytest.mark.parametrize("raw", ["", "0", "2.0", "x", "1.2.3", "-1", "2 b"])
def test_parse_unknown(raw: str) -> None:
    assert parse_command(raw) == Command("unknown")
