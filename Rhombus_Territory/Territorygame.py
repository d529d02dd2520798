"""Game loop and turn management: human placements, random replies, resets."""

import random
from collections import deque
from enum import Enum
from typing import NamedTuple

try:
    from Board import Board, Occupant
    from Player import RandomPlayer
    from ai import move_selector
    from engine import referee, scoring
    from engine.commands import PlaceAt, ResetBoard
    from utils import timer
except ImportError:
    from Rhombus_Territory.Board import Board, Occupant
    from Rhombus_Territory.Player import RandomPlayer
    from Rhombus_Territory.ai import move_selector
    from Rhombus_Territory.engine import referee, scoring
    from Rhombus_Territory.engine.commands import PlaceAt, ResetBoard
    from Rhombus_Territory.utils import timer


class Turn(Enum):
    PLAYER_1 = 1
    PLAYER_2 = 2
    FINISHED = 3


LABELS = {Occupant.PLAYER_1: "P1", Occupant.PLAYER_2: "P2"}


class Snapshot(NamedTuple):
    current: Turn
    cells: tuple
    scores: scoring.ScoreResult
    rows: int


class Territorygame:
    def __init__(self, board_rows=16, opponent=None, rng=None, logger=print, to_cell=None, steps_per_second=30, debug=None):
        self.board = Board(rows=board_rows)
        self.rng = rng if rng is not None else random.Random()
        self.opponent = opponent if opponent is not None else RandomPlayer(Occupant.PLAYER_2, rng=self.rng)
        self.logger = logger
        # rejected clicks are reported here only; silent unless a debug logger is given
        self.debug = debug if debug is not None else (lambda message: None)
        self.to_cell = to_cell
        self.limiter = timer.StepLimiter(steps_per_second)
        self.current = Turn.PLAYER_1
        self.commands = deque()
        self.on_place = []
        self.move_index = 0

    @property
    def finished(self):
        return self.current is Turn.FINISHED

    def submit(self, command):
        """Queue a PlaceAt/ResetBoard; it takes effect on the next step."""
        self.commands.append(command)

    def scores(self):
        return scoring.get_scores(self.board)

    def snapshot(self):
        return Snapshot(self.current, tuple(self.board.cells()), self.scores(), self.board.rows)

    def tick(self, timestamp):
        """Run one step if the step limiter allows it. Returns True when a step ran."""
        if not self.limiter.ready(timestamp):
            return False
        self.step()
        return True

    def step(self):
        while self.commands:
            self._dispatch(self.commands.popleft())
        if self.current is Turn.PLAYER_2:
            self._opponent_move()

    def _dispatch(self, command):
        if isinstance(command, PlaceAt):
            self.place(command.x, command.y)
        elif isinstance(command, ResetBoard):
            self.reset()
        else:
            raise TypeError(f"Unknown command: {command!r}")

    def place(self, x, y):
        """Apply a human placement at screen point (x, y). Returns True if accepted."""
        move = self.to_cell(x, y) if self.to_cell else (int(x), int(y))
        try:
            referee.check_move(move, self.board, Turn.PLAYER_1, self.current)
        except ValueError as exc:
            self.debug(f"Ignored placement: {exc}")
            return False

        self._apply(move, Occupant.PLAYER_1)
        self.current = Turn.PLAYER_2
        for callback in self.on_place:
            callback()
        return True

    def _opponent_move(self):
        move = self.opponent.next_move(self.board)
        if move is None:
            self.current = Turn.FINISHED
            self._log_result()
            return
        self._apply(move, Occupant.PLAYER_2)
        self.current = Turn.PLAYER_1

    def _apply(self, move, occupant):
        self.board.set_occupant(*move, occupant)
        self.move_index += 1
        label = LABELS[occupant]
        self.logger(f"Move {self.move_index}: {label} {tuple(move)}")

    def reset(self):
        move_selector.randomize_board(self.board, rng=self.rng)
        p1 = self.board.count(Occupant.PLAYER_1)
        p2 = self.board.count(Occupant.PLAYER_2)
        self.logger(f"Board reset: P1 {p1} cells, P2 {p2} cells")

    def _log_result(self):
        result = self.scores()
        self.logger(
            f"Board full. P1 {result.p1score:.3f} (est {result.p1estimate:.3f}), "
            f"P2 {result.p2score:.3f} (est {result.p2estimate:.3f})"
        )
        leader = result.leader()
        if leader is Occupant.PLAYER_1:
            self.logger("Winner: P1")
        elif leader is Occupant.PLAYER_2:
            self.logger("Winner: P2")
        elif leader is Occupant.EMPTY:
            self.logger("Result: Draw")

    def play(self, source, renderer=None, closer=None, clock=timer.now):
        """
        Run the loop until `source` returns None. `source` is polled once per
        iteration and returns the commands that arrived since the last poll.
        Returns the final ScoreResult.
        """
        try:
            while True:
                if renderer:
                    renderer(self.snapshot())
                commands = source()
                if commands is None:
                    break
                for command in commands:
                    self.submit(command)
                self.tick(clock())
            return self.scores()
        finally:
            if closer:
                closer()
