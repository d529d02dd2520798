"""Territory scoring: group products, estimates, and cache invalidation."""

import math
import random
from collections import deque

import pytest

from Rhombus_Territory.Board import Board, Occupant
from Rhombus_Territory.engine import scoring

P1, P2 = Occupant.PLAYER_1, Occupant.PLAYER_2


def fill(board, cells, occupant):
    for r, c in cells:
        board.set_occupant(r, c, occupant)


def bfs_group_sizes(board, occupant):
    """Reference group sizes via flood fill over all six neighbors."""
    seen = set()
    sizes = []
    for cell in board.cells():
        start = (cell.r, cell.c)
        if cell.occupant is not occupant or start in seen:
            continue
        seen.add(start)
        queue = deque([start])
        size = 0
        while queue:
            r, c = queue.popleft()
            size += 1
            for nb in board.neighbors(r, c):
                if nb not in seen and board.get_occupant(*nb) is occupant:
                    seen.add(nb)
                    queue.append(nb)
        sizes.append(size)
    return sizes


def test_empty_board_scores_zero():
    result = scoring.compute_scores(Board(6))
    assert result == scoring.ScoreResult(0.0, 0.0, 0.0, 0.0)
    assert result.leader() is Occupant.EMPTY


def test_upper_triangle_single_group():
    # rows=3 holds (0,0), (1,0), (1,1), (2,1); the first three touch pairwise
    b = Board(3)
    fill(b, [(0, 0), (1, 0), (1, 1)], P1)
    result = scoring.compute_scores(b)
    assert result.p1score == pytest.approx(math.log2(3))
    assert result.p2score == 0
    assert result.p1estimate == pytest.approx(1.5)
    assert result.leader() is P1


def test_singleton_groups_score_zero():
    b = Board(3)
    # (0,0) and (2,1) are not adjacent; (1,0) touches both
    fill(b, [(0, 0), (2, 1)], P1)
    fill(b, [(1, 0)], P2)
    result = scoring.compute_scores(b)
    assert result.p1score == 0
    assert result.p2score == 0
    assert result.p1estimate == 0
    assert result.p2estimate == 0


def test_two_row_board_cells_are_adjacent():
    b = Board(2)
    assert [(cell.r, cell.c) for cell in b.cells()] == [(0, 0), (1, 1)]
    fill(b, [(0, 0), (1, 1)], P2)
    assert scoring.compute_scores(b).p2score == pytest.approx(1.0)


def test_separate_groups_multiply_before_log():
    b = Board(16)
    fill(b, [(0, 0), (1, 0)], P1)
    fill(b, [(5, 0), (5, 1), (5, 2)], P1)
    fill(b, [(12, 6), (12, 7), (13, 7), (13, 8)], P2)
    result = scoring.compute_scores(b)
    assert result.p1score == pytest.approx(math.log2(6))
    assert result.p1estimate == pytest.approx(1.0 + 1.5)
    assert result.p2score == pytest.approx(2.0)
    assert result.p2estimate == pytest.approx(2.0)


def test_whole_board_owned_by_one_player():
    b = Board(16)
    fill(b, [(cell.r, cell.c) for cell in b.cells()], P2)
    result = scoring.compute_scores(b)
    assert result.p2score == pytest.approx(math.log2(72))
    assert result.p1score == 0


@pytest.mark.parametrize("size, expected", [(1, 0.0), (2, 1.0), (3, 1.5), (4, 2.0), (6, 2.5), (7, 2.75), (8, 3.0)])
def test_size_estimate(size, expected):
    assert scoring.size_estimate(size) == pytest.approx(expected)


@pytest.mark.parametrize("seed", range(5))
def test_matches_flood_fill_on_random_boards(seed):
    rng = random.Random(seed)
    b = Board(11)
    for cell in b.cells():
        b.set_occupant(cell.r, cell.c, rng.choice(list(Occupant)))
    result = scoring.compute_scores(b)
    for occupant, score, estimate in ((P1, result.p1score, result.p1estimate), (P2, result.p2score, result.p2estimate)):
        sizes = bfs_group_sizes(b, occupant)
        assert score == pytest.approx(math.log2(math.prod(sizes)))
        assert estimate == pytest.approx(sum(scoring.size_estimate(s) for s in sizes))


def test_cache_reused_until_mutation():
    b = Board(6)
    b.set_occupant(0, 0, P1)
    first = scoring.get_scores(b)
    assert scoring.get_scores(b) is first

    b.set_occupant(1, 0, P1)
    second = scoring.get_scores(b)
    assert second is not first
    assert second.p1score == pytest.approx(1.0)

    b.clear()
    third = scoring.get_scores(b)
    assert third is not second
    assert third.p1score == 0
