"""Sliding puzzle solvability checks."""

from __future__ import annotations

from backend.models.board import Board


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def inversions(board: Board) -> int:
        """Count tile pairs that appear in the wrong relative order."""
        flat = [v for v in board.cells if v != 0]
        inversions = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    inversions += 1
        return inversions

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        inversions = Solver.inversions(board)
        if board.width % 2 == 1:
            return inversions % 2 == 0
        blank_row_from_bottom = board.height - 1 - board.blank_pos[1]
        return (inversions + blank_row_from_bottom) % 2 == 0
