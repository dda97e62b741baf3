"""Lower envelope of lines added in decreasing slope order."""

from __future__ import annotations

from typing import NamedTuple

INF = 10**18


class _Line(NamedTuple):
    m: int
    b: int

    def __call__(self, x: int) -> int:
        return self.m * x + self.b


def _is_bad(l1: _Line, l2: _Line, l3: _Line) -> bool:
    # l2 never attains the minimum once l3 meets l1 before l2 does.
    return (l3.b - l1.b) * (l1.m - l2.m) < (l2.b - l1.b) * (l1.m - l3.m)


class ConvexHullTrick:
    """Minimum of ``m*x + b`` over the added lines; empty gives ``INF``."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._lines: list[_Line] = []
        self._pointer = 0

    def __len__(self) -> int:
        return len(self._lines)

    def add(self, m: int, b: int) -> None:
        """Add a line; slopes must not increase from one call to the next."""
        lines = self._lines
        if lines and m > lines[-1].m:
            raise ValueError("slopes must be added in non-increasing order")
        while lines and lines[-1].m == m and lines[-1].b > b:
            lines.pop()
        if lines and lines[-1].m == m:
            return
        line = _Line(m, b)
        while len(lines) > 1 and _is_bad(lines[-2], lines[-1], line):
            lines.pop()
        lines.append(line)

    def query(self, x: int) -> int:
        """Minimum at ``x`` by binary search."""
        lines = self._lines
        if not lines:
            return INF
        low, high, best = 0, len(lines) - 2, -1
        while low <= high:
            mid = (low + high) // 2
            if lines[mid + 1](x) < lines[mid](x):
                best = mid
                low = mid + 1
            else:
                high = mid - 1
        return lines[best + 1](x)

    def query_monotone(self, x: int) -> int:
        """Minimum at ``x`` in amortised O(1) when ``x`` never decreases between calls."""
        lines = self._lines
        if not lines:
            return INF
        self._pointer = min(self._pointer, len(lines) - 1)
        while self._pointer + 1 < len(lines) and lines[self._pointer + 1](x) < lines[self._pointer](x):
            self._pointer += 1
        return lines[self._pointer](x)