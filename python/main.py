#!/usr/bin/env python3
"""Split & Merge tile puzzle.

Usage::

    python main.py                  # 3 tiles, values 1-9
    python main.py -n 4 --max 12    # 4 tiles, values 1-12
    python main.py --seed 7 -v      # reproducible deal, debug logging
"""

import logging
import random
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GeneratorConfig  # noqa: E402
from backend.errors import ConfigError, GenerationError  # noqa: E402

LOGGER_NAME = "splitmerge"


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not logger.handlers:
        logger.addHandler(RichHandler(show_path=False, markup=False))
    logger.propagate = False
    return logger


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    tiles: int = typer.Option(
        3, "-n", "--tiles",
        min=2,
        help="Number of tiles to deal.",
    ),
    min_value: int = typer.Option(
        1, "--min",
        min=1,
        help="Smallest tile value.",
    ),
    max_value: int = typer.Option(
        9, "--max",
        min=2,
        help="Largest tile value.",
    ),
    attempts: int = typer.Option(
        1000, "--attempts",
        min=1,
        help="Deals to try before giving up on finding a solvable puzzle.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for reproducible deals.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log engine decisions.",
    ),
) -> None:
    """Split & Merge tile puzzle."""
    logger = _configure_logging(verbose)
    try:
        config = GeneratorConfig(
            tile_count=tiles,
            min_value=min_value,
            max_value=max_value,
            max_attempts=attempts,
        )
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc

    from frontend.cli.rich.app import run

    try:
        run(config, rng=random.Random(seed), logger=logger)
    except GenerationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
