"""Maximum flow and minimum cut by Dinic's algorithm."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

FLOW_INF = 2 * 10**18


@dataclass
class FlowEdge:
    u: int
    v: int
    capacity: int
    flow: int = 0

    @property
    def residual(self) -> int:
        return self.capacity - self.flow


class MaxFlow:
    """Flow network on vertices ``0..n``."""

    def __init__(self, n: int, source: int, sink: int) -> None:
        if n < 0:
            raise ValueError("vertex count must be non-negative")
        for vertex in (source, sink):
            if not 0 <= vertex <= n:
                raise IndexError(f"vertex {vertex} out of range")
        if source == sink:
            raise ValueError("source and sink must differ")
        self.n = n
        self.source = source
        self.sink = sink
        self._edges: list[FlowEdge] = []
        self._adj: list[list[int]] = [[] for _ in range(n + 1)]
        self._level = [-1] * (n + 1)

    @property
    def edges(self) -> list[FlowEdge]:
        """The edges added with ``add_edge``, in order."""
        return self._edges[::2]

    def add_edge(self, u: int, v: int, capacity: int) -> None:
        for vertex in (u, v):
            if not 0 <= vertex <= self.n:
                raise IndexError(f"vertex {vertex} out of range")
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._adj[u].append(len(self._edges))
        self._edges.append(FlowEdge(u, v, capacity))
        self._adj[v].append(len(self._edges))
        self._edges.append(FlowEdge(v, u, 0))

    def reset_flow(self) -> None:
        for edge in self._edges:
            edge.flow = 0

    def _reachable(self) -> list[int]:
        level = [-1] * (self.n + 1)
        level[self.source] = 0
        queue = deque([self.source])
        while queue:
            u = queue.popleft()
            for eid in self._adj[u]:
                edge = self._edges[eid]
                if edge.residual > 0 and level[edge.v] == -1:
                    level[edge.v] = level[u] + 1
                    queue.append(edge.v)
        return level

    def _dfs(self, u: int, pushed: int, ptr: list[int]) -> int:
        if pushed == 0:
            return 0
        if u == self.sink:
            return pushed
        adj, level = self._adj[u], self._level
        while ptr[u] < len(adj):
            eid = adj[ptr[u]]
            edge = self._edges[eid]
            if level[edge.v] == level[u] + 1 and edge.residual > 0:
                amount = self._dfs(edge.v, min(pushed, edge.residual), ptr)
                if amount:
                    edge.flow += amount
                    self._edges[eid ^ 1].flow -= amount
                    return amount
            ptr[u] += 1
        return 0

    def max_flow(self) -> int:
        """Push as much additional flow as possible and return the amount pushed."""
        total = 0
        while True:
            self._level = self._reachable()
            if self._level[self.sink] == -1:
                return total
            ptr = [0] * (self.n + 1)
            while pushed := self._dfs(self.source, FLOW_INF, ptr):
                total += pushed

    def min_cut(self) -> list[tuple[int, int]]:
        """Edges from the source side to the sink side; meaningful after ``max_flow``."""
        reached = self._reachable()
        return [
            (edge.u, edge.v)
            for edge in self.edges
            if reached[edge.u] != -1 and reached[edge.v] == -1
        ]