"""Board model for the sliding puzzle game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

Position = tuple[int, int]


class Direction(StrEnum):
    """Direction in which the *tiles* travel during a slide."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> Position:
        """``(dx, dy)`` of a tile moving this way."""
        return _OFFSETS[self]


_OFFSETS: dict[Direction, Position] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a flat row-major list of ints, so the tile at
    ``(x, y)`` lives at ``cells[y * width + x]``. 0 represents the blank
    space; tile ``k`` belongs at index ``k - 1``.
    """

    width: int
    height: int
    cells: list[int]
    blank_pos: Position

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, width: int, height: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, 3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        check_shape((width, height))
        if len(flat) != width * height:
            raise ValueError(
                f"Expected {width * height} tiles for a {width}×{height} "
                f"board, got {len(flat)}."
            )
        if sorted(flat) != list(range(width * height)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{width * height - 1}."
            )
        hole = flat.index(0)
        return cls(
            width=width,
            height=height,
            cells=list(flat),
            blank_pos=(hole % width, hole // width),
        )

    # -- queries --------------------------------------------------------------

    @property
    def shape(self) -> Position:
        return (self.width, self.height)

    def contains(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def index_of(self, pos: Position) -> int:
        if not self.contains(pos):
            raise IndexError(
                f"Position {pos} is outside the {self.width}×{self.height} board."
            )
        x, y = pos
        return y * self.width + x

    def position_of(self, label: int) -> Position:
        """Return the ``(x, y)`` currently holding *label*."""
        if not 0 <= label < len(self.cells):
            raise IndexError(
                f"Label {label} is outside 0..{len(self.cells) - 1}."
            )
        if label == 0:
            return self.blank_pos
        idx = self.cells.index(label)
        return (idx % self.width, idx // self.width)

    def get_tile(self, x: int, y: int) -> int:
        return self.cells[self.index_of((x, y))]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        last = len(self.cells) - 1
        for i, val in enumerate(self.cells):
            if i == last:
                return val == 0
            if val != i + 1:
                return False
        return True

    def is_tile_correct(self, x: int, y: int) -> bool:
        """Check if a specific tile is in its goal position."""
        idx = self.index_of((x, y))
        val = self.cells[idx]
        if val == 0:
            return idx == len(self.cells) - 1
        return idx == val - 1

    def cells_snapshot(self) -> tuple[int, ...]:
        return tuple(self.cells)

    def rows(self) -> list[list[int]]:
        return [
            self.cells[y * self.width : (y + 1) * self.width]
            for y in range(self.height)
        ]

    def copy(self) -> Board:
        return Board(
            width=self.width,
            height=self.height,
            cells=self.cells[:],
            blank_pos=self.blank_pos,
        )


def check_shape(shape: Position) -> Position:
    """Validate a ``(width, height)`` pair, returning it unchanged."""
    width, height = shape
    if width < 2 or height < 2:
        raise ValueError(
            f"Board sides must be at least 2, got {width}×{height}."
        )
    return (width, height)
