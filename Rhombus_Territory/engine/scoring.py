"""Territory scoring: connected same-owner groups reduced to log-product scores."""

from __future__ import annotations

import math
from dataclasses import dataclass

try:
    from Board import Board, Occupant
    from engine.disjoint_set import DisjointSet
except ImportError:
    from Rhombus_Territory.Board import Board, Occupant
    from Rhombus_Territory.engine.disjoint_set import DisjointSet


# North-east, north-west and west. The other three neighbors of a cell are
# covered when that neighbor is visited later in row-major order.
BACKWARD_NEIGHBORS = ((-1, 0), (-1, -1), (0, -1))


@dataclass(frozen=True)
class ScoreResult:
    p1score: float
    p2score: float
    p1estimate: float
    p2estimate: float

    def leader(self) -> Occupant:
        """Player ahead on score, or EMPTY on a tie."""
        if self.p1score > self.p2score:
            return Occupant.PLAYER_1
        if self.p2score > self.p1score:
            return Occupant.PLAYER_2
        return Occupant.EMPTY


def size_estimate(size: int) -> float:
    """Doublings held by a group: floor(log2(size)) plus the linear fraction to the next power."""
    whole = size.bit_length() - 1
    base = 1 << whole
    return whole + (size - base) / base


def build_groups(board: Board) -> DisjointSet:
    """Union every pair of adjacent same-owner cells; empty cells are erased."""
    sets = DisjointSet(len(board.tiles), board.tiles)
    for cell in board.cells():
        if cell.occupant is Occupant.EMPTY:
            sets.erase(cell.index)
            continue
        for dr, dc in BACKWARD_NEIGHBORS:
            nr, nc = cell.r + dr, cell.c + dc
            if board.get_occupant(nr, nc) is cell.occupant:
                sets.union(cell.index, board.to_index(nr, nc))
    return sets


def compute_scores(board: Board) -> ScoreResult:
    sets = build_groups(board)

    p1_product = 1
    p2_product = 1
    p1_estimate = 0.0
    p2_estimate = 0.0
    for _root, size, owner in sets.roots():
        if owner is Occupant.PLAYER_1:
            p1_product *= size
            p1_estimate += size_estimate(size)
        elif owner is Occupant.PLAYER_2:
            p2_product *= size
            p2_estimate += size_estimate(size)
        elif owner is Occupant.EMPTY:
            continue
        else:
            raise ValueError(f"Unknown occupant in forest: {owner!r}")

    # Python ints do not overflow, so the product is exact before the log
    return ScoreResult(
        p1score=math.log2(p1_product),
        p2score=math.log2(p2_product),
        p1estimate=p1_estimate,
        p2estimate=p2_estimate,
    )


def get_scores(board: Board) -> ScoreResult:
    """Scores for the board's current state, cached until the next mutation."""
    if board.score_cache is None:
        board.score_cache = compute_scores(board)
    return board.score_cache
