"""Segment trees for range sums.

Positions are 0-based and ranges ``[l, r]`` include both ends; an empty
range (``l > r``) sums to zero.
"""

from __future__ import annotations

from collections.abc import Iterable


def _check_range(n: int, l: int, r: int) -> None:
    if l < 0 or r >= n:
        raise IndexError(f"range [{l}, {r}] out of bounds for size {n}")


class SegmentTree:
    """Bottom-up tree: point add, range sum."""

    def __init__(self, values: Iterable[int]) -> None:
        leaves = list(values)
        self._n = n = len(leaves)
        self._tree = [0] * n + leaves
        for i in range(n - 1, 0, -1):
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]

    def __len__(self) -> int:
        return self._n

    def update(self, p: int, delta: int) -> None:
        """Add ``delta`` at position ``p``."""
        if not 0 <= p < self._n:
            raise IndexError(f"position {p} out of range")
        p += self._n
        self._tree[p] += delta
        while p > 1:
            p >>= 1
            self._tree[p] = self._tree[2 * p] + self._tree[2 * p + 1]

    def query(self, l: int, r: int) -> int:
        """Sum of positions ``l..r``."""
        if l > r:
            return 0
        _check_range(self._n, l, r)
        left_sum = right_sum = 0
        l += self._n
        r += self._n + 1
        while l < r:
            if l & 1:
                left_sum += self._tree[l]
                l += 1
            if r & 1:
                r -= 1
                right_sum += self._tree[r]
            l >>= 1
            r >>= 1
        return left_sum + right_sum


class LazySegmentTree:
    """Top-down tree with lazy propagation: range add, range sum."""

    def __init__(self, values: Iterable[int]) -> None:
        leaves = list(values)
        self._n = n = len(leaves)
        self._sums = [0] * (4 * n + 5)
        self._lazy = [0] * (4 * n + 5)
        if n:
            self._build(1, 0, n - 1, leaves)

    def __len__(self) -> int:
        return self._n

    def _build(self, node: int, l: int, r: int, leaves: list[int]) -> None:
        if l == r:
            self._sums[node] = leaves[l]
            return
        mid = (l + r) // 2
        self._build(2 * node, l, mid, leaves)
        self._build(2 * node + 1, mid + 1, r, leaves)
        self._sums[node] = self._sums[2 * node] + self._sums[2 * node + 1]

    def _apply(self, node: int, l: int, r: int, delta: int) -> None:
        self._sums[node] += (r - l + 1) * delta
        self._lazy[node] += delta

    def _push_down(self, node: int, l: int, r: int) -> None:
        pending = self._lazy[node]
        if pending == 0:
            return
        mid = (l + r) // 2
        self._apply(2 * node, l, mid, pending)
        self._apply(2 * node + 1, mid + 1, r, pending)
        self._lazy[node] = 0

    def _update(self, node: int, l: int, r: int, u: int, v: int, delta: int) -> None:
        if l > v or r < u:
            return
        if u <= l and r <= v:
            self._apply(node, l, r, delta)
            return
        self._push_down(node, l, r)
        mid = (l + r) // 2
        self._update(2 * node, l, mid, u, v, delta)
        self._update(2 * node + 1, mid + 1, r, u, v, delta)
        self._sums[node] = self._sums[2 * node] + self._sums[2 * node + 1]

    def _query(self, node: int, l: int, r: int, u: int, v: int) -> int:
        if l > v or r < u:
            return 0
        if u <= l and r <= v:
            return self._sums[node]
        self._push_down(node, l, r)
        mid = (l + r) // 2
        return self._query(2 * node, l, mid, u, v) + self._query(2 * node + 1, mid + 1, r, u, v)

    def update(self, l: int, r: int, delta: int) -> None:
        """Add ``delta`` to every position in ``l..r``."""
        if l > r:
            return
        _check_range(self._n, l, r)
        self._update(1, 0, self._n - 1, l, r, delta)

    def query(self, l: int, r: int) -> int:
        """Sum of positions ``l..r``."""
        if l > r:
            return 0
        _check_range(self._n, l, r)
        return self._query(1, 0, self._n - 1, l, r)