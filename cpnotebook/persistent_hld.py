"""Persistent arithmetic-progression updates on tree paths.

A persistent segment tree with permanent lazy tags holds the values; heavy-light
decomposition maps tree paths onto its position ranges.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator


def _index_sum(lo: int, hi: int) -> int:
    return (lo + hi) * (hi - lo + 1) // 2


class PersistentSegmentTree:
    """Range sums over positions ``1..size``; every update yields a new root.

    Root ``EMPTY`` is the all-zero tree.
    """

    EMPTY = 0

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self._left = [0]
        self._right = [0]
        self._sum = [0]
        self._tag_a = [0]
        self._tag_b = [0]

    def _clone(self, node: int) -> int:
        self._left.append(self._left[node])
        self._right.append(self._right[node])
        self._sum.append(self._sum[node])
        self._tag_a.append(self._tag_a[node])
        self._tag_b.append(self._tag_b[node])
        return len(self._sum) - 1

    def _validate(self, root: int, l: int, r: int) -> None:
        if not 0 <= root < len(self._sum):
            raise IndexError(f"unknown root {root}")
        if not 1 <= l <= r <= self.size:
            raise IndexError(f"range [{l}, {r}] out of bounds for size {self.size}")

    def _update(self, node: int, lo: int, hi: int, u: int, v: int, x: int, y: int) -> int:
        if hi < u or lo > v:
            return node
        new = self._clone(node)
        if u <= lo and hi <= v:
            self._tag_a[new] += x
            self._tag_b[new] += y
            self._sum[new] += x * (hi - lo + 1) + y * _index_sum(lo, hi)
            return new
        mid = (lo + hi) // 2
        left = self._update(self._left[node], lo, mid, u, v, x, y)
        right = self._update(self._right[node], mid + 1, hi, u, v, x, y)
        self._left[new] = left
        self._right[new] = right
        self._sum[new] = (
            self._sum[left]
            + self._sum[right]
            + self._tag_a[new] * (hi - lo + 1)
            + self._tag_b[new] * _index_sum(lo, hi)
        )
        return new

    def update(self, root: int, l: int, r: int, a: int, b: int) -> int:
        """New root where position ``i`` in ``l..r`` gains ``a + (i - l) * b``."""
        self._validate(root, l, r)
        return self._update(root, 1, self.size, l, r, a - l * b, b)

    def _query(self, node: int, lo: int, hi: int, u: int, v: int, ax: int, ay: int) -> int:
        if hi < u or lo > v:
            return 0
        if u <= lo and hi <= v:
            return self._sum[node] + ax * (hi - lo + 1) + ay * _index_sum(lo, hi)
        ax += self._tag_a[node]
        ay += self._tag_b[node]
        mid = (lo + hi) // 2
        return self._query(self._left[node], lo, mid, u, v, ax, ay) + self._query(
            self._right[node], mid + 1, hi, u, v, ax, ay
        )

    def query(self, root: int, l: int, r: int) -> int:
        """Sum of positions ``l..r`` in the version at ``root``."""
        self._validate(root, l, r)
        return self._query(root, 1, self.size, l, r, 0, 0)


class PathTree:
    """Tree on vertices ``1..n`` rooted at 1, with versioned path updates."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]]) -> None:
        if n < 1:
            raise ValueError("a tree needs at least one vertex")
        edge_list = list(edges)
        if len(edge_list) != n - 1:
            raise ValueError("a tree on n vertices has n - 1 edges")
        adj: list[list[int]] = [[] for _ in range(n + 1)]
        for u, v in edge_list:
            if not (1 <= u <= n and 1 <= v <= n):
                raise IndexError(f"edge ({u}, {v}) out of range")
            adj[u].append(v)
            adj[v].append(u)

        self.n = n
        self._parent = [0] * (n + 1)
        self._depth = [0] * (n + 1)
        children: list[list[int]] = [[] for _ in range(n + 1)]
        seen = [False] * (n + 1)
        seen[1] = True
        order = [1]
        for u in order:
            for v in adj[u]:
                if not seen[v]:
                    seen[v] = True
                    self._parent[v] = u
                    self._depth[v] = self._depth[u] + 1
                    children[u].append(v)
                    order.append(v)
        if len(order) != n:
            raise ValueError("edges must connect all vertices")

        size = [1] * (n + 1)
        for u in reversed(order[1:]):
            size[self._parent[u]] += size[u]
        heavy = [0] * (n + 1)
        for u in order:
            best = -1
            for c in children[u]:
                if size[c] > best:
                    best, heavy[u] = size[c], c

        self._head = [0] * (n + 1)
        self._pos = [0] * (n + 1)
        counter = 1
        stack = [1]
        while stack:
            head = x = stack.pop()
            while x:
                self._head[x] = head
                self._pos[x] = counter
                counter += 1
                stack.extend(c for c in children[x] if c != heavy[x])
                x = heavy[x]

        self._tree = PersistentSegmentTree(n)
        self._versions = [PersistentSegmentTree.EMPTY]
        self._root = PersistentSegmentTree.EMPTY

    def _check(self, u: int) -> None:
        if not 1 <= u <= self.n:
            raise IndexError(f"vertex {u} out of range")

    def lca(self, u: int, v: int) -> int:
        self._check(u)
        self._check(v)
        head, depth, parent = self._head, self._depth, self._parent
        while head[u] != head[v]:
            if depth[head[u]] > depth[head[v]]:
                u, v = v, u
            v = parent[head[v]]
        return u if depth[u] <= depth[v] else v

    def _segments(self, u: int, v: int) -> Iterator[tuple[int, int]]:
        """Position runs ``(start, end)`` covering the path from ``u`` to ``v`` in order."""
        head, depth, parent, pos = self._head, self._depth, self._parent, self._pos
        rising: list[tuple[int, int]] = []
        falling: list[tuple[int, int]] = []
        while head[u] != head[v]:
            if depth[head[u]] >= depth[head[v]]:
                rising.append((pos[u], pos[head[u]]))
                u = parent[head[u]]
            else:
                falling.append((pos[head[v]], pos[v]))
                v = parent[head[v]]
        if depth[u] >= depth[v]:
            rising.append((pos[u], pos[v]))
        else:
            falling.append((pos[u], pos[v]))
        yield from rising
        yield from reversed(falling)

    def update_path(self, u: int, v: int, a: int, b: int) -> int:
        """Add ``a + k*b`` to the vertex ``k`` steps from ``u`` on the path to ``v``.

        The result becomes a new version; its index is returned.
        """
        self._check(u)
        self._check(v)
        root = self._root
        offset = 0
        for start, end in self._segments(u, v):
            if start <= end:
                root = self._tree.update(root, start, end, a + offset * b, b)
            else:
                root = self._tree.update(root, end, start, a + (offset + start - end) * b, -b)
            offset += abs(start - end) + 1
        self._root = root
        self._versions.append(root)
        return len(self._versions) - 1

    def query_path(self, u: int, v: int) -> int:
        """Sum of the values on the path from ``u`` to ``v`` in the current version."""
        self._check(u)
        self._check(v)
        return sum(
            self._tree.query(self._root, min(s, e), max(s, e)) for s, e in self._segments(u, v)
        )

    def checkout(self, version: int) -> None:
        """Make an earlier version current; later updates build on it."""
        if not 0 <= version < len(self._versions):
            raise IndexError(f"unknown version {version}")
        self._root = self._versions[version]

    def version_count(self) -> int:
        return len(self._versions)


def main(argv: list[str] | None = None) -> int:
    """Answer online path queries read from standard input."""
    parser = argparse.ArgumentParser(
        description="Persistent path updates: 'c u v A B', 'q u v', 'l version'."
    )
    parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    n, m = int(next(tokens)), int(next(tokens))
    edges = [(int(next(tokens)), int(next(tokens))) for _ in range(n - 1)]
    tree = PathTree(n, edges)
    out: list[str] = []
    last = 0
    for _ in range(m):
        kind = next(tokens)
        if kind == "l":
            tree.checkout((int(next(tokens)) + last) % tree.version_count())
            continue
        u = (int(next(tokens)) + last) % n + 1
        v = (int(next(tokens)) + last) % n + 1
        if kind == "c":
            a, b = int(next(tokens)), int(next(tokens))
            tree.update_path(u, v, a, b)
        else:
            last = tree.query_path(u, v)
            out.append(str(last))
    if out:
        sys.stdout.write("\n".join(out) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())