"""Player interface for the human and automated sides."""

import random

try:
    from ai import move_selector
    from engine.commands import PlaceAt, ResetBoard
except ImportError:
    from Rhombus_Territory.ai import move_selector
    from Rhombus_Territory.engine.commands import PlaceAt, ResetBoard


class Player:
    def __init__(self, occupant):
        self.occupant = occupant

    def next_move(self, board):
        """Return (r, c) for the next move, or None when no move exists."""
        raise NotImplementedError


class RandomPlayer(Player):
    """Claims a uniformly random empty cell."""

    def __init__(self, occupant, rng=None):
        super().__init__(occupant)
        self.rng = rng if rng is not None else random.Random()

    def next_move(self, board):
        return move_selector.choose_random_move(board, rng=self.rng)


class HumanPlayer(Player):
    """Text-input player; turns console lines into queued commands."""

    PROMPT = "Enter move as 'r c', 'reset' or 'quit': "

    def __init__(self, occupant, read=input):
        super().__init__(occupant)
        self.read = read

    def next_command(self):
        """Return PlaceAt/ResetBoard, or None when the player quits."""
        try:
            raw = self.read(self.PROMPT).strip().lower()
        except EOFError:
            return None

        if raw in ("q", "quit", "exit"):
            return None
        if raw in ("r", "reset"):
            return ResetBoard()
        try:
            r_str, c_str = raw.split()
            return PlaceAt(int(r_str), int(c_str))
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc
