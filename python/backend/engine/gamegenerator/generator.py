"""Generates solvable sliding puzzle boards from seeds."""

from __future__ import annotations

import logging
import random

from backend.engine.gamesolver import Solver
from backend.models.board import Board, Position, check_shape
from backend.models.seed import Seed

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates puzzles by seeded shuffling plus a parity fix."""

    @staticmethod
    def solved(shape: Position) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        width, height = check_shape(shape)
        flat = list(range(1, width * height)) + [0]
        return Board(
            width=width,
            height=height,
            cells=flat,
            blank_pos=(width - 1, height - 1),
        )

    @staticmethod
    def generate(shape: Position, seed: Seed) -> Board:
        """Return a random *solvable*, unsolved board for *seed*.

        The same ``(shape, seed)`` pair always yields the same board.
        """
        width, height = check_shape(shape)
        rng = random.Random(seed.value)
        flat = list(range(width * height))

        while True:
            rng.shuffle(flat)
            board = Board.from_flat(width, height, flat)
            if not Solver.is_solvable(board):
                GameGenerator._fix_parity(board)
            # Rejecting a solved shuffle reuses the same rng, so the result
            # still depends on the seed alone.
            if not board.is_solved():
                break
            logger.debug("Seed %s shuffled into the goal state, reshuffling", seed)

        logger.debug("Generated %dx%d board from seed %s", width, height, seed)
        return board

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _fix_parity(board: Board) -> None:
        """Swap the first two tiles, flipping the permutation parity."""
        first, second = [i for i, v in enumerate(board.cells) if v != 0][:2]
        board.cells[first], board.cells[second] = (
            board.cells[second],
            board.cells[first],
        )
        logger.debug("Swapped cells %d and %d to make the board solvable", first, second)
