"""Placement validation for the human player."""

try:
    from Board import Occupant
except ImportError:
    from Rhombus_Territory.Board import Occupant


def check_move(move, board, player, current):
    """
    Validate a placement against turn order, board shape, and occupancy.
    Raises ValueError on a move that must be dropped.
    """
    if move is None:
        raise ValueError("Click outside the board")
    if player is not current:
        raise ValueError(f"Not {player.name}'s turn")

    r, c = move
    occupant = board.get_occupant(r, c)
    if occupant is None:
        raise ValueError(f"No cell at {move}")
    if occupant is not Occupant.EMPTY:
        raise ValueError(f"Cell {move} already occupied")

    return True
