"""Rich terminal frontend — board, seed and live timer.

Uses the ``rich`` library for styled output and the shared input handler
for keypresses. Every event goes through :class:`GamePlay`; the screen is
redrawn after each one and the timer line is refreshed on a short tick.
"""

from __future__ import annotations

import sys

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import NotSolving, Solved, Solving
from backend.models.board import Board
from frontend.cli.input_handler import (
    DebugToggle,
    ForceState,
    Move,
    Quit,
    Reset,
    read_event,
)

console = Console()

TICK = 0.1


# -- helpers ------------------------------------------------------------------


def format_time(seconds: float | None) -> str:
    if seconds is None:
        return "--:--.---"
    m, s = divmod(seconds, 60)
    return f"{int(m):02d}:{s:06.3f}"


def _state_label(game: GamePlay) -> Text:
    state = game.game_state()
    if isinstance(state, Solving):
        return Text("solving", style="bold yellow")
    if isinstance(state, Solved):
        return Text("solved", style="bold green")
    return Text("ready", style="dim")


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.width * board.height - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.width):
        table.add_column(width=width + 1, justify="center")

    for y, row in enumerate(board.rows()):
        cells: list[str] = []
        for x, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(x, y):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  State: ", style="dim")
    stats.append_text(_state_label(game))
    stats.append("    Time: ", style="dim")
    stats.append(format_time(game.solve_time()), style="bold yellow")
    return stats


# -- game screen --------------------------------------------------------------


def _draw_game(game: GamePlay) -> None:
    console.clear()

    width, height = game.shape()
    board_table = render_board(game.board)

    seed = Text()
    seed.append("  Seed: ", style="dim")
    seed.append(game.current_seed().encode(), style="cyan")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  new puzzle   ", style="dim")
    controls.append("Shift-D", style="bold cyan")
    controls.append("  dev mode   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    parts = [Align.center(board_table), Text(""), Align.center(seed)]
    if game.dev_mode:
        history = Text()
        history.append("  History: ", style="dim")
        history.append("".join(game.move_history()) or "-", style="magenta")
        parts.append(Align.center(history))
        parts.append(
            Align.center(Text("  1 / 2 / 3  force ready / solving / solved", style="dim"))
        )

    border = "bold green" if isinstance(game.game_state(), Solved) else "bright_blue"
    panel = Panel(
        Group(*parts),
        title=f"[bold cyan]Sliding Puzzle  {width}×{height}[/bold cyan]",
        border_style=border,
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    # Save cursor position right before the stats line so _update_time()
    # can later restore to this exact spot and overwrite only this line.
    sys.stdout.write("\033[s")
    sys.stdout.flush()
    console.print(Align.center(_stats(game)))
    console.print(Align.center(controls))


def _update_time(game: GamePlay) -> None:
    """Overwrite just the stats line using the saved cursor position."""
    sys.stdout.write("\033[u\033[K")
    sys.stdout.flush()
    console.print(Align.center(_stats(game)), end="")
    sys.stdout.flush()


# -- game loop ----------------------------------------------------------------


def play(game: GamePlay) -> None:
    """Drive *game* from keypresses until the player quits."""
    _draw_game(game)
    while True:
        event = read_event(TICK)
        if event is None:
            if not isinstance(game.game_state(), NotSolving):
                _update_time(game)
            continue

        if isinstance(event, Quit):
            return
        if isinstance(event, Move):
            if not game.move_request(event.direction, token=event.token):
                continue
        elif isinstance(event, Reset):
            game.reset_request()
        elif isinstance(event, DebugToggle):
            game.debug_toggle()
        elif isinstance(event, ForceState):
            game.force_state(event.kind)

        _draw_game(game)


# -- public entry point -------------------------------------------------------


def run(game: GamePlay) -> None:
    """Launch the Rich CLI for *game*."""
    try:
        play(game)
    finally:
        console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
