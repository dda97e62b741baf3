"""Li Chao tree: minimum of lines over an integer range."""

from __future__ import annotations

INF = 10**18
DEFAULT_BOUND = 10**9


def _value(line: tuple[int, int], x: int) -> int:
    return line[0] * x + line[1]


class _Node:
    __slots__ = ("line", "left", "right")

    def __init__(self, line: tuple[int, int]) -> None:
        self.line = line
        self.left: _Node | None = None
        self.right: _Node | None = None


class LiChaoTree:
    """Lines ``a*x + b`` added in any order; minimum queries at integers in ``[low, high]``."""

    def __init__(self, low: int = -DEFAULT_BOUND, high: int = DEFAULT_BOUND) -> None:
        if low > high:
            raise ValueError("low must not exceed high")
        self._low = low
        self._high = high
        self._root: _Node | None = None

    def add(self, a: int, b: int) -> None:
        line = (a, b)
        if self._root is None:
            self._root = _Node(line)
            return
        node, l, r = self._root, self._low, self._high
        while True:
            mid = (l + r) >> 1
            if _value(node.line, mid) > _value(line, mid):
                node.line, line = line, node.line
            if l == r:
                return
            if node.line[0] < line[0]:
                if node.left is None:
                    node.left = _Node(line)
                    return
                node, r = node.left, mid
            else:
                if node.right is None:
                    node.right = _Node(line)
                    return
                node, l = node.right, mid + 1

    def query(self, x: int) -> int:
        """Minimum value at ``x``; ``INF`` when no line was added."""
        if not self._low <= x <= self._high:
            raise ValueError(f"{x} outside [{self._low}, {self._high}]")
        best: int | None = None
        node, l, r = self._root, self._low, self._high
        while node is not None:
            value = _value(node.line, x)
            best = value if best is None else min(best, value)
            mid = (l + r) >> 1
            if x <= mid:
                node, r = node.left, mid
            else:
                node, l = node.right, mid + 1
        return INF if best is None else best