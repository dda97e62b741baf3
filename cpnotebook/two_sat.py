"""2-SAT by strongly connected components (Kosaraju)."""

from __future__ import annotations


class TwoSat:
    """Variables ``0..n-1``; literal ``x`` is variable ``x`` and ``x + n`` its negation."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("variable count must be non-negative")
        self.n = n
        self._adj: list[list[int]] = [[] for _ in range(2 * n)]
        self._rev: list[list[int]] = [[] for _ in range(2 * n)]

    def _check(self, x: int) -> None:
        if not 0 <= x < 2 * self.n:
            raise IndexError(f"literal {x} out of range")

    def negate(self, x: int) -> int:
        self._check(x)
        return x + self.n if x < self.n else x - self.n

    def add_implication(self, u: int, v: int) -> None:
        """Require that ``u`` implies ``v``."""
        self._check(u)
        self._check(v)
        self._adj[u].append(v)
        self._rev[v].append(u)

    def add_or(self, u: int, v: int) -> None:
        """Require that ``u`` or ``v`` holds."""
        self.add_implication(self.negate(u), v)
        self.add_implication(self.negate(v), u)

    def _finish_order(self) -> list[int]:
        size = 2 * self.n
        seen = [False] * size
        order: list[int] = []
        for start in range(size):
            if seen[start]:
                continue
            seen[start] = True
            stack = [(start, iter(self._adj[start]))]
            while stack:
                node, neighbours = stack[-1]
                for w in neighbours:
                    if not seen[w]:
                        seen[w] = True
                        stack.append((w, iter(self._adj[w])))
                        break
                else:
                    stack.pop()
                    order.append(node)
        return order

    def solve(self) -> list[bool] | None:
        """A satisfying assignment, one bool per variable, or None if there is none."""
        comp = [-1] * (2 * self.n)
        count = 0
        for u in reversed(self._finish_order()):
            if comp[u] != -1:
                continue
            count += 1
            comp[u] = count
            stack = [u]
            while stack:
                x = stack.pop()
                for w in self._rev[x]:
                    if comp[w] == -1:
                        comp[w] = count
                        stack.append(w)
        n = self.n
        if any(comp[i] == comp[i + n] for i in range(n)):
            return None
        return [comp[i] > comp[i + n] for i in range(n)]