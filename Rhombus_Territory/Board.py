"""Board state container for the rhombus grid (two stacked triangles)."""

from enum import Enum
from typing import NamedTuple


class Occupant(Enum):
    EMPTY = 0
    PLAYER_1 = 1
    PLAYER_2 = 2


class InvalidLocationError(ValueError):
    """Raised when a write targets a cell that is not on the board."""


class Cell(NamedTuple):
    r: int
    c: int
    index: int
    occupant: Occupant


# Directions for the six cells touching (r, c) on the stacked-triangle grid.
NEIGHBORS_6 = (
    (-1, 0), (-1, -1),
    (0, -1), (0, 1),
    (1, 0), (1, 1),
)


class Board:
    """
    Tiles are stored in a matrix of mat_height x cols; the lower triangle is
    folded into the unused corner of the upper one. For rows = 4:

         [0]
        [1|2]        tiles = [0, 3, 4,
         [3|4]                1, 2, 5]
          [5]
    """

    def __init__(self, rows=16):
        if rows < 1:
            raise ValueError("rows must be positive")
        self.rows = rows
        self.cols = rows // 2 + 1
        self.mat_height = (rows + 1) // 2
        self.tiles = [Occupant.EMPTY] * (self.cols * self.mat_height)
        # Filled lazily by engine.scoring.get_scores; dropped on every mutation.
        self.score_cache = None

    @property
    def total_cells(self):
        return len(self.tiles)

    def is_valid_location(self, r, c):
        valid_row = 0 <= r < self.rows
        valid_col = 0 <= c < self.cols
        in_upper = r < self.mat_height and c <= r
        in_lower = r >= self.mat_height and c > r - self.mat_height
        return valid_row and valid_col and (in_upper or in_lower)

    def to_index(self, r, c):
        """Linear tile index of a valid (r, c)."""
        return (r % self.mat_height) * self.cols + c

    def get_occupant(self, r, c):
        """Return the occupant at (r, c), or None when there is no such cell."""
        if not self.is_valid_location(r, c):
            return None
        return self.tiles[self.to_index(r, c)]

    def is_empty(self, r, c):
        return self.get_occupant(r, c) is Occupant.EMPTY

    def set_occupant(self, r, c, occupant):
        if not isinstance(occupant, Occupant):
            raise TypeError(f"occupant must be an Occupant, got {occupant!r}")
        if not self.is_valid_location(r, c):
            raise InvalidLocationError(f"set_occupant: invalid location (r={r}, c={c})")
        self.tiles[self.to_index(r, c)] = occupant
        self.score_cache = None

    def cells(self):
        """Yield every valid cell once, row-major."""
        for r in range(self.rows):
            if r < self.mat_height:
                c_begin, c_end = 0, min(r + 1, self.cols)
            else:
                c_begin, c_end = r - self.mat_height + 1, self.cols
            for c in range(c_begin, c_end):
                i = self.to_index(r, c)
                yield Cell(r, c, i, self.tiles[i])

    def for_each(self, fn):
        for cell in self.cells():
            fn(cell)

    def clear(self):
        for cell in self.cells():
            self.tiles[cell.index] = Occupant.EMPTY
        self.score_cache = None

    def neighbors(self, r, c):
        return [
            (r + dr, c + dc)
            for dr, dc in NEIGHBORS_6
            if self.is_valid_location(r + dr, c + dc)
        ]

    def count(self, occupant):
        return sum(1 for cell in self.cells() if cell.occupant is occupant)
