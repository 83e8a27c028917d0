"""GamePlay facade tests — events, history discipline and queries."""

from __future__ import annotations

import time

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import NotSolving, Solved, Solving, StateKind
from backend.models.board import Direction
from backend.models.seed import Seed

ZERO_SEED = Seed(bytes(32))


class FakeClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def game(clock: FakeClock) -> GamePlay:
    return GamePlay.from_board(GameGenerator.solved((4, 4)), ZERO_SEED, clock=clock)


# -- construction -------------------------------------------------------------


def test_default_game_is_4x4_and_fresh() -> None:
    game = GamePlay()
    assert game.shape() == (4, 4)
    assert game.game_state() == NotSolving()
    assert game.move_history() == []
    assert not game.dev_mode
    assert not game.is_solved()


def test_seeded_game_matches_generator() -> None:
    game = GamePlay((3, 3), seed=ZERO_SEED.encode())
    assert game.current_seed() == ZERO_SEED
    assert game.cells_snapshot() == tuple(GameGenerator.generate((3, 3), ZERO_SEED).cells)


# -- moves --------------------------------------------------------------------


def test_successful_moves_drive_session(game: GamePlay, clock: FakeClock) -> None:
    clock.now = 10.0
    assert game.move_request((2, 3)) == 1
    assert game.game_state() == Solving(since=10.0)

    clock.now = 15.0
    assert game.move_request((3, 3)) == 1
    assert game.is_solved()
    assert game.game_state() == Solved(took=5.0)
    assert game.solve_time() == 5.0


def test_failed_moves_leave_history_and_state(game: GamePlay) -> None:
    assert game.move_request((0, 0)) == 0
    assert game.move_request((3, 3)) == 0
    assert game.move_request(Direction.LEFT) == 0
    assert game.move_history() == []
    assert game.game_state() == NotSolving()


def test_history_tokens(game: GamePlay) -> None:
    game.move_request((0, 3))
    game.move_request(Direction.LEFT, distance=2)
    game.move_request(Direction.DOWN, token="k")
    assert game.move_history() == ["0,3", "left", "k"]


def test_history_is_a_copy(game: GamePlay) -> None:
    game.move_request((2, 3))
    game.move_history().clear()
    assert game.move_history() == ["2,3"]


def test_multi_tile_move_reports_count(game: GamePlay) -> None:
    assert game.move_request((3, 0)) == 3
    assert game.position_of(0) == (3, 0)
    assert game.position_of(12) == (3, 3)


def test_wall_clock_solve_time() -> None:
    game = GamePlay.from_board(GameGenerator.solved((3, 3)), ZERO_SEED)
    game.move_request(Direction.RIGHT)
    time.sleep(0.05)
    first = game.solve_time()
    assert first is not None and first >= 0.05
    assert game.solve_time() >= first
    game.move_request(Direction.LEFT)
    state = game.game_state()
    assert isinstance(state, Solved)
    assert 0.05 <= state.took < 1.0


# -- reset / debug ------------------------------------------------------------


def test_reset_clears_everything(game: GamePlay) -> None:
    game.move_request((2, 3))
    seed = Seed(bytes([3]) * 32)
    board = game.reset_request(seed)
    assert game.move_history() == []
    assert game.game_state() == NotSolving()
    assert game.current_seed() == seed
    assert game.shape() == (4, 4)
    assert board.cells == GameGenerator.generate((4, 4), seed).cells


def test_reset_without_seed_draws_fresh(game: GamePlay) -> None:
    game.force_state(StateKind.SOLVED)
    game.reset_request()
    assert game.current_seed() != ZERO_SEED
    assert game.game_state() == NotSolving()


def test_debug_toggle(game: GamePlay) -> None:
    assert game.debug_toggle() is True
    assert game.dev_mode
    assert game.debug_toggle() is False


def test_force_state_passthrough(game: GamePlay, clock: FakeClock) -> None:
    clock.now = 2.0
    assert game.force_state("solving") == Solving(since=2.0)
    clock.now = 3.5
    assert game.force_state(StateKind.SOLVED) == Solved(took=1.5)
    assert game.force_state(StateKind.NOT_SOLVING) == NotSolving()
