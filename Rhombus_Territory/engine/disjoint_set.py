"""Union-by-size disjoint-set forest with path compression and per-root colors."""

from __future__ import annotations

from typing import Callable, Iterator, List, Optional, Sequence, Tuple


class DisjointSet:
    """
    Each root carries [size, color]; absorbed and erased entries carry None.
    Erased entries keep a self parent so find() on them stays well defined.
    """

    def __init__(self, size: int, colors: Optional[Sequence] = None):
        if colors is not None and len(colors) != size:
            raise ValueError("colors must have one entry per element")
        self.parent: List[int] = list(range(size))
        self.meta: List[Optional[list]] = [
            [1, colors[i] if colors is not None else None] for i in range(size)
        ]
        self._erased = [False] * size

    def __len__(self) -> int:
        return len(self.parent)

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self.parent):
            raise IndexError(f"id {i} out of range [0, {len(self.parent)})")

    def find(self, i: int) -> int:
        self._check(i)
        path = []
        while self.parent[i] != i:
            path.append(i)
            i = self.parent[i]
        for node in path:
            self.parent[node] = i
        return i

    def union(self, i: int, j: int) -> bool:
        """Merge the sets of i and j. Returns True if two sets were joined."""
        root_i = self.find(i)
        root_j = self.find(j)
        if root_i == root_j:
            return False
        if self._erased[root_i] or self._erased[root_j]:
            return False

        # The first argument's root survives a tie
        if self.meta[root_i][0] < self.meta[root_j][0]:
            small, big = root_i, root_j
        else:
            small, big = root_j, root_i
        self.parent[small] = big
        self.meta[big][0] += self.meta[small][0]
        self.meta[small] = None
        return True

    def erase(self, i: int) -> None:
        """
        Drop i from size accounting and iteration. Only a singleton root can be
        erased: an id already merged into a larger set raises ValueError.
        """
        self._check(i)
        if self._erased[i]:
            return
        if self.parent[i] != i or self.meta[i][0] != 1:
            raise ValueError(f"id {i} is already merged into a set and cannot be erased")
        self._erased[i] = True
        self.meta[i] = None

    def is_erased(self, i: int) -> bool:
        self._check(i)
        return self._erased[i]

    def size_of(self, i: int) -> int:
        meta = self.meta[self.find(i)]
        return meta[0] if meta is not None else 0

    def color_of(self, i: int):
        meta = self.meta[self.find(i)]
        return meta[1] if meta is not None else None

    def roots(self) -> Iterator[Tuple[int, int, object]]:
        for i, meta in enumerate(self.meta):
            if meta is not None:
                yield i, meta[0], meta[1]

    def for_each_root(self, fn: Callable[[int, int, object], None]) -> None:
        for root, size, color in self.roots():
            fn(root, size, color)
