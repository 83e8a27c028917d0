#!/usr/bin/env python3
"""Seeded Sliding Puzzle.

Usage::

    python main.py                      # 4×4 in the Rich terminal
    python main.py -w 3 -H 5            # 3 wide, 5 tall
    python main.py --seed <base64>      # replay a shared puzzle
    python main.py --show-seed          # print a puzzle and its seed
"""

import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gameplay import DEFAULT_SHAPE, GamePlay  # noqa: E402
from backend.models.seed import Seed  # noqa: E402

MIN_SIDE = 2
MAX_SIDE = 8

logger = logging.getLogger(__name__)


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# -- helpers ------------------------------------------------------------------


def setup_logging(level: LogLevel = LogLevel.WARNING) -> None:
    """Route all log records through Rich on stderr."""
    logging.basicConfig(
        level=logging.getLevelNamesMapping()[LogLevel(level)],
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _parse_seed(text: Optional[str]) -> Optional[Seed]:
    if text is None:
        return None
    try:
        return Seed.decode(text)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--seed") from exc


def _print_puzzle(game: GamePlay) -> None:
    from frontend.cli.rich.app import render_board

    console = Console()
    console.print(render_board(game.board))
    console.print(game.current_seed().encode())


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    width: int = typer.Option(
        DEFAULT_SHAPE[0], "-w", "--width",
        min=MIN_SIDE, max=MAX_SIDE,
        help="Board width in tiles.",
    ),
    height: int = typer.Option(
        DEFAULT_SHAPE[1], "-H", "--height",
        min=MIN_SIDE, max=MAX_SIDE,
        help="Board height in tiles.",
    ),
    seed: Optional[str] = typer.Option(
        None, "--seed",
        help="URL-safe base64 seed to replay. Omit for a random puzzle.",
    ),
    show_seed: bool = typer.Option(
        False, "--show-seed",
        help="Print the generated board and its seed, then exit.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level",
        case_sensitive=False,
        help="Logging level.",
    ),
) -> None:
    """Seeded Sliding Puzzle."""
    setup_logging(log_level)
    game = GamePlay((width, height), seed=_parse_seed(seed))
    logger.info("Starting %dx%d puzzle with seed %s", width, height, game.current_seed())

    if show_seed:
        _print_puzzle(game)
        return

    from frontend.cli.rich.app import run

    run(game)


if __name__ == "__main__":
    app()
