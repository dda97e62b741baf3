"""Disjoint-set union with union by size and path compression."""

from __future__ import annotations


class DisjointSet:
    """Disjoint sets over the elements ``0..n``."""

    def __init__(self, n: int) -> None:
        # A negative entry marks a root and holds minus its set size.
        self._link = [-1] * (n + 1)

    def __len__(self) -> int:
        return len(self._link)

    def _check(self, p: int) -> None:
        if not 0 <= p < len(self._link):
            raise IndexError(f"element {p} out of range")

    def find(self, p: int) -> int:
        """Representative of the set holding ``p``."""
        self._check(p)
        root = p
        while self._link[root] >= 0:
            root = self._link[root]
        while self._link[p] >= 0:
            self._link[p], p = root, self._link[p]
        return root

    def same_set(self, u: int, v: int) -> bool:
        return self.find(u) == self.find(v)

    def join(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v``; False if they were already one."""
        u, v = self.find(u), self.find(v)
        if u == v:
            return False
        if self._link[u] > self._link[v]:
            u, v = v, u
        self._link[u] += self._link[v]
        self._link[v] = u
        return True

    def size(self, p: int) -> int:
        """Number of elements in the set holding ``p``."""
        return -self._link[self.find(p)]