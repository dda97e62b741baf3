"""Fenwick (binary indexed) tree for prefix sums."""

from __future__ import annotations


class FenwickTree:
    """Point updates and prefix sums over positions ``1..n``."""

    def __init__(self, n: int) -> None:
        self._tree = [0] * (n + 1)

    def __len__(self) -> int:
        return len(self._tree) - 1

    def update(self, p: int, delta: int) -> None:
        """Add ``delta`` at position ``p``."""
        if not 1 <= p <= len(self):
            raise IndexError(f"position {p} out of range")
        size = len(self._tree)
        while p < size:
            self._tree[p] += delta
            p += p & -p

    def prefix_sum(self, p: int) -> int:
        """Sum of positions ``1..p``; ``p`` may be 0."""
        if not 0 <= p <= len(self):
            raise IndexError(f"position {p} out of range")
        total = 0
        while p > 0:
            total += self._tree[p]
            p -= p & -p
        return total