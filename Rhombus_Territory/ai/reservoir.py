"""Weighted reservoir sampling of a single item (Efraimidis-Spirakis A-ExpJ)."""

from __future__ import annotations

import math
import random
from typing import Any, Iterable, Optional, Tuple


class ReservoirSampler:
    """
    Picks one item from a stream of (item, weight) pairs of unknown length.
    Each item ends up selected with probability weight / total_weight.
    Instead of drawing a key for every item, a skip weight is drawn after each
    replacement and only the item that exhausts it can enter the reservoir.
    """

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self._item: Any = None
        # ln of the held key U ** (1 / weight); kept in log space so that
        # small weights do not underflow the key to 0.0
        self._log_key: Optional[float] = None
        self._skip_weight = 0.0
        self.seen = 0

    def _uniform(self) -> float:
        # ln(0) is undefined; random() may return exactly 0.0
        u = self.rng.random()
        while u <= 0.0:
            u = self.rng.random()
        return u

    def _draw_skip(self) -> None:
        if self._log_key >= 0.0:
            # A key that rounded up to 1 can no longer be beaten
            self._skip_weight = math.inf
            return
        self._skip_weight = math.log(self._uniform()) / self._log_key

    def insert(self, item: Any, weight: float = 1.0) -> None:
        if not weight > 0:
            raise ValueError(f"weight must be positive, got {weight!r}")
        self.seen += 1

        if self._log_key is None:
            self._item = item
            self._log_key = math.log(self._uniform()) / weight
            self._draw_skip()
            return

        self._skip_weight -= weight
        if self._skip_weight <= 0:
            t = math.exp(self._log_key * weight)
            stretched = t + (1.0 - t) * self._uniform()
            self._item = item
            self._log_key = math.log(stretched) / weight
            self._draw_skip()

    def extend(self, pairs: Iterable[Tuple[Any, float]]) -> "ReservoirSampler":
        for item, weight in pairs:
            self.insert(item, weight)
        return self

    def get_result(self) -> Optional[Any]:
        """The sampled item, or None when nothing was inserted."""
        return self._item if self._log_key is not None else None


def sample_one(items: Iterable[Any], rng=None) -> Optional[Any]:
    """Uniformly choose one element of an iterable in a single pass."""
    sampler = ReservoirSampler(rng)
    for item in items:
        sampler.insert(item, 1.0)
    return sampler.get_result()
