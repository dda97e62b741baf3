"""Maximum bipartite matching (Hopcroft-Karp) with König covers."""

from __future__ import annotations

from collections import deque


class BipartiteMatching:
    """Left vertices ``1..n`` and right vertices ``1..m``."""

    def __init__(self, n: int, m: int) -> None:
        if n < 0 or m < 0:
            raise ValueError("side sizes must be non-negative")
        self.n = n
        self.m = m
        self._adj: list[list[int]] = [[] for _ in range(n + 1)]
        self._match_left: list[int | None] = [None] * (n + 1)
        self._match_right: list[int | None] = [None] * (m + 1)
        self._dist: list[int | None] = [None] * (n + 1)
        # Larger than any BFS distance, so a finished vertex is never re-entered.
        self._blocked = n + m + 1

    def add_edge(self, u: int, v: int) -> None:
        if not 1 <= u <= self.n:
            raise IndexError(f"left vertex {u} out of range")
        if not 1 <= v <= self.m:
            raise IndexError(f"right vertex {v} out of range")
        self._adj[u].append(v)

    def _bfs(self) -> bool:
        dist: list[int | None] = [None] * (self.n + 1)
        queue: deque[int] = deque()
        for u in range(1, self.n + 1):
            if self._match_left[u] is None:
                dist[u] = 0
                queue.append(u)
        found = False
        while queue:
            u = queue.popleft()
            for v in self._adj[u]:
                w = self._match_right[v]
                if w is None:
                    found = True
                elif dist[w] is None:
                    dist[w] = dist[u] + 1
                    queue.append(w)
        self._dist = dist
        return found

    def _dfs(self, u: int) -> bool:
        dist = self._dist
        for v in self._adj[u]:
            w = self._match_right[v]
            if w is None or (dist[w] == dist[u] + 1 and self._dfs(w)):
                self._match_left[u] = v
                self._match_right[v] = u
                dist[u] = self._blocked
                return True
        dist[u] = self._blocked
        return False

    def max_matching(self) -> int:
        """Size of a maximum matching; the matching is kept for later calls."""
        while self._bfs():
            for u in range(1, self.n + 1):
                if self._match_left[u] is None:
                    self._dfs(u)
        return sum(1 for v in self._match_left[1:] if v is not None)

    def minimum_vertex_cover(self) -> tuple[list[int], list[int]]:
        """Left and right vertices of a minimum vertex cover."""
        self.max_matching()
        left: list[int] = []
        right: list[int] = []
        for u in range(1, self.n + 1):
            if self._dist[u] is None:
                left.append(u)
            elif self._match_left[u] is not None:
                right.append(self._match_left[u])
        return left, right

    def maximum_independent_set(self) -> tuple[list[int], list[int]]:
        """Left and right vertices of a maximum independent set."""
        cover_left, cover_right = map(set, self.minimum_vertex_cover())
        return (
            [u for u in range(1, self.n + 1) if u not in cover_left],
            [v for v in range(1, self.m + 1) if v not in cover_right],
        )

    def matching(self) -> list[tuple[int, int]]:
        """Pairs ``(left, right)`` of a maximum matching, by left vertex."""
        self.max_matching()
        return [(u, v) for u, v in enumerate(self._match_left) if u and v is not None]