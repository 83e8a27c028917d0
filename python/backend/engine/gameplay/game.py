"""Core gameplay logic — routes input events to the engine and session."""

from __future__ import annotations

import time

from backend.engine.gameplay.engine import PuzzleEngine
from backend.engine.gamestate import GameSession, GameState, StateKind
from backend.engine.gamestate.state import Clock
from backend.models.board import Board, Direction, Position
from backend.models.seed import Seed

DEFAULT_SHAPE: Position = (4, 4)


class GamePlay:
    """Orchestrates a single puzzle and its timed session.

    This is the boundary a frontend talks to: it sends move, reset and
    debug events and reads the queries below to redraw afterwards.
    """

    def __init__(
        self,
        shape: Position = DEFAULT_SHAPE,
        seed: Seed | bytes | str | None = None,
        clock: Clock = time.monotonic,
    ) -> None:
        if seed is None:
            self.engine = PuzzleEngine.create_random(shape)
        else:
            self.engine = PuzzleEngine.create(shape, seed)
        self.session = GameSession(clock=clock)
        self.history: list[str] = []
        self.dev_mode = False

    @classmethod
    def from_board(
        cls,
        board: Board,
        seed: Seed | None = None,
        clock: Clock = time.monotonic,
    ) -> GamePlay:
        """Create a game from an existing board (e.g. a test fixture)."""
        obj = object.__new__(cls)
        obj.engine = PuzzleEngine(board, seed or Seed.random())
        obj.session = GameSession(clock=clock)
        obj.history = []
        obj.dev_mode = False
        return obj

    # -- events ---------------------------------------------------------------

    def move_request(
        self,
        target: Position | Direction,
        distance: int = 1,
        token: str | None = None,
    ) -> int:
        """Slide from an ``(x, y)`` origin or toward a :class:`Direction`.

        Returns the number of tiles moved. Only moves that displaced at
        least one tile reach the session and the history.
        """
        if isinstance(target, Direction):
            moved = self.engine.slide_towards(target, distance)
            default_token = target.value
        else:
            moved = self.engine.slide_from(target)
            default_token = "{},{}".format(*target)

        if moved > 0:
            self.session.on_move(moved, self.engine.is_solved)
            self.history.append(token if token is not None else default_token)
        return moved

    def reset_request(self, seed: Seed | bytes | str | None = None) -> Board:
        board = self.engine.regenerate(seed)
        self.history.clear()
        self.session.reset()
        return board

    def debug_toggle(self) -> bool:
        self.dev_mode = not self.dev_mode
        return self.dev_mode

    def force_state(self, kind: StateKind | str) -> GameState:
        return self.session.force(kind)

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.engine.board

    def shape(self) -> Position:
        return self.engine.shape

    def cells_snapshot(self) -> tuple[int, ...]:
        return self.engine.cells_snapshot()

    def position_of(self, label: int) -> Position:
        return self.engine.position_of(label)

    def is_solved(self) -> bool:
        return self.engine.is_solved()

    def current_seed(self) -> Seed:
        return self.engine.seed

    def game_state(self) -> GameState:
        return self.session.state

    def solve_time(self) -> float | None:
        return self.session.solve_time()

    def move_history(self) -> list[str]:
        return list(self.history)
