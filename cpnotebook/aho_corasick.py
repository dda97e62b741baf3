"""Aho-Corasick automaton counting pattern occurrences."""

from __future__ import annotations

from collections import deque


class AhoCorasick:
    """Counts every occurrence of every added pattern in a text, overlaps included."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._children: list[dict[str, int]] = [{}]
        self._own: list[int] = [0]
        self._fail: list[int] = [0]
        self._output: list[int] = [0]
        self._patterns: list[str] = []
        self._built = True

    @property
    def patterns(self) -> tuple[str, ...]:
        return tuple(self._patterns)

    def add(self, pattern: str) -> None:
        self._patterns.append(pattern)
        node = 0
        for ch in pattern:
            nxt = self._children[node].get(ch)
            if nxt is None:
                nxt = len(self._children)
                self._children[node][ch] = nxt
                self._children.append({})
                self._own.append(0)
            node = nxt
        self._own[node] += 1
        self._built = False

    def _goto(self, state: int, ch: str) -> int:
        while True:
            nxt = self._children[state].get(ch)
            if nxt is not None:
                return nxt
            if state == 0:
                return 0
            state = self._fail[state]

    def build(self) -> None:
        """Compute failure links and cumulative match counts."""
        self._fail = [0] * len(self._children)
        self._output = list(self._own)
        queue = deque([0])
        while queue:
            u = queue.popleft()
            for ch, v in self._children[u].items():
                self._fail[v] = 0 if u == 0 else self._goto(self._fail[u], ch)
                self._output[v] += self._output[self._fail[v]]
                queue.append(v)
        self._built = True

    def count_matches(self, text: str) -> int:
        """Total number of pattern occurrences ending anywhere in ``text``."""
        if not self._built:
            self.build()
        state = total = 0
        for ch in text:
            state = self._goto(state, ch)
            total += self._output[state]
        return total