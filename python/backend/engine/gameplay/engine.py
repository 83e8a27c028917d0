"""Board ownership and slide mechanics."""

from __future__ import annotations

import logging

from backend.engine.gamegenerator import GameGenerator
from backend.models.board import Board, Direction, Position
from backend.models.seed import Seed

logger = logging.getLogger(__name__)


class PuzzleEngine:
    """Owns a single board and the seed it was generated from."""

    def __init__(self, board: Board, seed: Seed) -> None:
        self._board = board
        self._seed = seed

    @classmethod
    def create(cls, shape: Position, seed: Seed | bytes | str) -> PuzzleEngine:
        seed = Seed.coerce(seed)
        return cls(GameGenerator.generate(shape, seed), seed)

    @classmethod
    def create_random(cls, shape: Position) -> PuzzleEngine:
        return cls.create(shape, Seed.random())

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self._board

    @property
    def seed(self) -> Seed:
        return self._seed

    @property
    def shape(self) -> Position:
        return self._board.shape

    def cells_snapshot(self) -> tuple[int, ...]:
        return self._board.cells_snapshot()

    def position_of(self, label: int) -> Position:
        return self._board.position_of(label)

    def is_solved(self) -> bool:
        return self._board.is_solved()

    # -- movement -------------------------------------------------------------

    def slide_from(self, origin: Position) -> int:
        """Slide the line of tiles between *origin* and the blank.

        Every tile from *origin* up to the blank shifts one cell toward
        the blank, which ends up at *origin*. Returns the number of tiles
        moved; 0 when *origin* is the blank or shares neither its row nor
        its column.
        """
        board = self._board
        board.index_of(origin)
        ox, oy = origin
        bx, by = board.blank_pos

        if (ox, oy) == (bx, by) or (ox != bx and oy != by):
            return 0

        dx = (ox > bx) - (ox < bx)
        dy = (oy > by) - (oy < by)
        moved = abs(ox - bx) + abs(oy - by)

        x, y = bx, by
        for _ in range(moved):
            nx, ny = x + dx, y + dy
            board.cells[y * board.width + x] = board.cells[ny * board.width + nx]
            x, y = nx, ny
        board.cells[oy * board.width + ox] = 0
        board.blank_pos = (ox, oy)
        return moved

    def slide_towards(self, direction: Direction, distance: int = 1) -> int:
        """Move *distance* tiles in *direction* into the blank.

        E.g. ``Direction.UP`` with distance 2 lifts the two tiles below
        the blank. Returns 0 when there are not enough tiles that way.
        """
        if distance < 1:
            raise ValueError(f"Slide distance must be positive, got {distance}.")
        dx, dy = direction.offset
        bx, by = self._board.blank_pos
        origin = (bx - dx * distance, by - dy * distance)
        if not self._board.contains(origin):
            return 0
        return self.slide_from(origin)

    # -- regeneration ---------------------------------------------------------

    def regenerate(self, seed: Seed | bytes | str | None = None) -> Board:
        """Replace the board with a fresh one of the same shape."""
        seed = Seed.random() if seed is None else Seed.coerce(seed)
        self._board = GameGenerator.generate(self.shape, seed)
        self._seed = seed
        logger.debug("Regenerated %dx%d board", *self.shape)
        return self._board
