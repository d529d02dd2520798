"""Rhombus_Territory package exports."""

from .Board import Board, Cell, InvalidLocationError, Occupant
from .Territorygame import Snapshot, Territorygame, Turn
from .Player import Player, HumanPlayer, RandomPlayer
from .engine.commands import PlaceAt, ResetBoard
from .engine.scoring import ScoreResult, get_scores

# Subpackages for scoring engine, sampling, GUI, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "Board",
    "Cell",
    "InvalidLocationError",
    "Occupant",
    "Territorygame",
    "Snapshot",
    "Turn",
    "Player",
    "HumanPlayer",
    "RandomPlayer",
    "PlaceAt",
    "ResetBoard",
    "ScoreResult",
    "get_scores",
    "ai",
    "engine",
    "gui",
    "utils",
]
