"""Tracks the timed state of a solving session."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class StateKind(StrEnum):
    NOT_SOLVING = "not_solving"
    SOLVING = "solving"
    SOLVED = "solved"


@dataclass(frozen=True)
class NotSolving:
    kind = StateKind.NOT_SOLVING


@dataclass(frozen=True)
class Solving:
    since: float
    kind = StateKind.SOLVING


@dataclass(frozen=True)
class Solved:
    took: float
    kind = StateKind.SOLVED


GameState = NotSolving | Solving | Solved


class GameSession:
    """Three-state session machine driven by move outcomes.

    The session never looks at the board on its own: callers report each
    move result through :meth:`on_move` and pass a callable that answers
    "is the board solved" when a transition needs it.
    """

    def __init__(self, clock: Clock = time.monotonic) -> None:
        self._clock = clock
        self._state: GameState = NotSolving()

    @property
    def state(self) -> GameState:
        return self._state

    # -- time tracking --------------------------------------------------------

    def solve_time(self) -> float | None:
        """Seconds spent on the current attempt, or ``None`` if idle.

        While solving this is recomputed from the clock on every call.
        """
        state = self._state
        if isinstance(state, Solving):
            return self._clock() - state.since
        if isinstance(state, Solved):
            return state.took
        return None

    # -- transitions ----------------------------------------------------------

    def on_move(self, moved: int, is_solved: Callable[[], bool]) -> GameState:
        if moved <= 0:
            return self._state

        state = self._state
        if isinstance(state, NotSolving):
            self._set(Solving(since=self._clock()))
        elif isinstance(state, Solving) and is_solved():
            self._set(Solved(took=self._clock() - state.since))
        return self._state

    def reset(self) -> GameState:
        self._set(NotSolving())
        return self._state

    def force(self, kind: StateKind | str) -> GameState:
        """Debug override; always succeeds.

        Forcing ``solved`` freezes the running time while solving, keeps
        an already frozen time, and records zero from the idle state.
        """
        kind = StateKind(kind)
        state = self._state
        if kind is StateKind.NOT_SOLVING:
            self._set(NotSolving())
        elif kind is StateKind.SOLVING:
            self._set(Solving(since=self._clock()))
        elif isinstance(state, Solving):
            self._set(Solved(took=self._clock() - state.since))
        elif isinstance(state, NotSolving):
            self._set(Solved(took=0.0))
        return self._state

    def _set(self, state: GameState) -> None:
        logger.debug("Session %s -> %s", self._state.kind, state.kind)
        self._state = state
