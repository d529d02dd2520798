"""Commands queued by input front-ends and drained by the game loop."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlaceAt:
    """Claim the cell under (x, y); screen coordinates unless the game has no transform."""

    x: float
    y: float


@dataclass(frozen=True)
class ResetBoard:
    pass
