"""Union-find over the integers ``0 .. n-1`` with path compression and union by rank."""

from __future__ import annotations


class DisjointSet:
    """A partition of ``range(n)`` into disjoint sets."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self._parent = list(range(n))
        self._rank = [0] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, a: int) -> None:
        if not 0 <= a < len(self._parent):
            raise IndexError(f"element {a} out of range 0..{len(self._parent) - 1}")

    def find(self, a: int) -> int:
        """Return the representative of the set holding ``a``."""
        self._check(a)
        root = a
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[a] != root:
            self._parent[a], a = root, self._parent[a]
        return root

    def join(self, a: int, b: int) -> None:
        """Merge the sets holding ``a`` and ``b``."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return
        if self._rank[root_a] < self._rank[root_b]:
            self._parent[root_a] = root_b
        elif self._rank[root_a] > self._rank[root_b]:
            self._parent[root_b] = root_a
        else:
            self._parent[root_b] = root_a
            self._rank[root_a] += 1