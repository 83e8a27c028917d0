from backend.engine.gameplay.engine import PuzzleEngine
from backend.engine.gameplay.game import DEFAULT_SHAPE, GamePlay

__all__ = ["DEFAULT_SHAPE", "GamePlay", "PuzzleEngine"]
