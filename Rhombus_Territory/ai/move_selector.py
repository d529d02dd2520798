"""Random move choice for the automated player and randomized board fills."""

import random

try:
    from Board import Occupant
    from ai.reservoir import ReservoirSampler
except ImportError:
    from Rhombus_Territory.Board import Occupant
    from Rhombus_Territory.ai.reservoir import ReservoirSampler


def choose_random_move(board, rng=None):
    """Return a uniformly chosen empty (r, c), or None on a full board."""
    sampler = ReservoirSampler(rng)
    for cell in board.cells():
        if cell.occupant is Occupant.EMPTY:
            sampler.insert((cell.r, cell.c), 1)
    return sampler.get_result()


def randomize_board(board, rng=None):
    """
    Clear the board and hand every cell to a player so that each owns half
    (player one gets the smaller half on odd totals). Each cell draws against
    the counts still left to place, so the split is exact but the layout random.
    """
    rng = rng if rng is not None else random.Random()
    p1_remaining = board.total_cells // 2
    p2_remaining = board.total_cells - p1_remaining
    board.clear()
    for cell in list(board.cells()):
        p1_cut = p1_remaining / (p1_remaining + p2_remaining)
        if rng.random() < p1_cut:
            board.set_occupant(cell.r, cell.c, Occupant.PLAYER_1)
            p1_remaining -= 1
        else:
            board.set_occupant(cell.r, cell.c, Occupant.PLAYER_2)
            p2_remaining -= 1
    return board
