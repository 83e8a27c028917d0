from backend.models.board import Board, Direction, Position
from backend.models.seed import SEED_SIZE, Seed

__all__ = ["Board", "Direction", "Position", "SEED_SIZE", "Seed"]
