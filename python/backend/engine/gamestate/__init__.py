from backend.engine.gamestate.state import (
    GameSession,
    GameState,
    NotSolving,
    Solved,
    Solving,
    StateKind,
)

__all__ = [
    "GameSession",
    "GameState",
    "NotSolving",
    "Solved",
    "Solving",
    "StateKind",
]
