"""Rich terminal frontend — tiles, units, and status in styled panels.

Uses the ``rich`` library for output and reads one typed command per
turn.  All puzzle decisions are delegated to the backend session.
"""

from __future__ import annotations

import logging
import random

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from backend.engine.gamegenerator import GeneratorConfig
from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import Mode, Snapshot
from backend.errors import PuzzleError
from backend.models.moves import Move, MoveKind
from frontend.cli.input_handler import parse_command

console = Console()

_HELP = (
    "[bold cyan]<tile>[/bold cyan] select / merge with neighbour   "
    "[bold cyan]<tile>.<unit>[/bold cyan] split selected tile   "
    "[bold cyan]R[/bold cyan] reset   [bold cyan]H[/bold cyan] hint   "
    "[bold cyan]N[/bold cyan] new   [bold cyan]Q[/bold cyan] quit"
)


# -- rendering ----------------------------------------------------------------


def _render_tiles(snap: Snapshot) -> Table:
    """Return a Rich Table with one column per tile."""
    table = Table(
        show_header=True,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        header_style="dim",
        padding=(0, 1),
    )
    cells: list[str] = []
    for i, value in enumerate(snap.tiles):
        table.add_column(f"#{i + 1}", justify="center")
        units = " ".join(str(j + 1) for j in range(value))
        if snap.selected == i:
            cells.append(f"[black on green]{units}[/black on green]\n[bold green]{value}[/bold green]")
        elif snap.solved:
            cells.append(f"[dim]{units}[/dim]\n[bold green]{value}[/bold green]")
        else:
            cells.append(f"[dim]{units}[/dim]\n[bold white]{value}[/bold white]")
    table.add_row(*cells)
    return table


def _describe(move: Move) -> str:
    """Describe a move with the 1-based numbers shown on screen."""
    match move.kind:
        case MoveKind.SPLIT:
            return f"split tile {move.tile_index + 1} after unit {move.split_point + 1}"
        case MoveKind.MERGE:
            return f"merge tiles {move.index_a + 1} and {move.index_b + 1}"
    return move.describe()


def _draw_game(game: GamePlay, status: str = "") -> None:
    console.clear()
    snap = game.snapshot()

    stats = Text()
    stats.append("  Goal: ", style="dim")
    stats.append(" ".join(str(v) for v in snap.goal), style="bold yellow")
    stats.append("    Moves: ", style="dim")
    stats.append(str(snap.move_count), style="bold yellow")
    if snap.mode is Mode.SELECTED_TILE:
        stats.append(f"    Selected: #{snap.selected + 1}", style="bold green")

    title = "[bold green]Solved![/bold green]" if snap.solved else "[bold cyan]Split & Merge[/bold cyan]"
    panel = Panel(
        Group(Align.center(_render_tiles(snap)), Text(""), Align.center(stats)),
        title=title,
        border_style="bold green" if snap.solved else "bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(Text.from_markup(_HELP)))


# -- game loop ----------------------------------------------------------------


def _apply(game: GamePlay, tile: int, unit: int | None) -> str:
    try:
        accepted = game.click(tile, unit)
    except PuzzleError as exc:
        return f"[red]{exc}[/red]"
    if not accepted:
        return "[yellow]Illegal move.[/yellow]"
    return ""


def _hint(game: GamePlay) -> str:
    if game.is_won:
        return "[green]Already solved![/green]"
    move = game.hint()
    if move is None:
        return "[red]No way to the goal from here.[/red]"
    return f"[cyan]Hint:[/cyan] {_describe(move)}"


def _new_game(config: GeneratorConfig, rng: random.Random, logger: logging.Logger) -> GamePlay:
    with console.status("Dealing a solvable puzzle…"):
        return GamePlay(config, rng=rng, logger=logger)


def _play(config: GeneratorConfig, rng: random.Random, logger: logging.Logger) -> None:
    game = _new_game(config, rng, logger)
    status = ""

    while True:
        _draw_game(game, status)
        status = ""
        command = parse_command(Prompt.ask("  >", console=console, default=""))

        if command.action == "click":
            status = _apply(game, command.tile, command.unit)
        elif command.action == "reset":
            game.resolve_unresolved_click()
        elif command.action == "hint":
            status = _hint(game)
        elif command.action == "new":
            game = _new_game(config, rng, logger)
        elif command.action == "quit":
            return
        elif command.action == "help":
            status = "Select a tile, then click one of its units to split it or a neighbour to merge."
        else:
            status = "[yellow]Unknown command.[/yellow]"

        if game.is_won and not status:
            status = f"[bold green]Sorted in {game.state.move_count} moves![/bold green] N for a new game."


# -- public entry point -------------------------------------------------------


def run(
    config: GeneratorConfig,
    rng: random.Random | None = None,
    logger: logging.Logger | None = None,
) -> None:
    """Launch the Rich CLI."""
    _play(config, rng or random.Random(), logger or logging.getLogger(__name__))
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
