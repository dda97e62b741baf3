"""Suffix array by prefix doubling, with LCP by Kasai's algorithm."""

from __future__ import annotations


class SuffixArray:
    """``sa`` lists suffix starts in sorted order, ``rank`` is its inverse and
    ``lcp[i]`` is the common prefix length of suffixes ``sa[i-1]`` and ``sa[i]``
    (``lcp[0]`` is 0)."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.sa = self._build_sa(text)
        self.rank = [0] * len(text)
        for position, start in enumerate(self.sa):
            self.rank[start] = position
        self.lcp = self._build_lcp()

    @staticmethod
    def _build_sa(text: str) -> list[int]:
        n = len(text)
        if n == 0:
            return []
        classes = [ord(ch) for ch in text]
        sa = list(range(n))
        k = 1
        while True:
            def key(i: int) -> tuple[int, int]:
                return classes[i], classes[i + k] if i + k < n else -1

            sa.sort(key=key)
            fresh = [0] * n
            for prev, cur in zip(sa, sa[1:]):
                fresh[cur] = fresh[prev] + (key(prev) != key(cur))
            classes = fresh
            if classes[sa[-1]] == n - 1:
                return sa
            k <<= 1

    def _build_lcp(self) -> list[int]:
        text, sa, rank = self.text, self.sa, self.rank
        n = len(text)
        lcp = [0] * n
        k = 0
        for i in range(n):
            r = rank[i]
            if r == 0:
                k = 0
                continue
            j = sa[r - 1]
            while i + k < n and j + k < n and text[i + k] == text[j + k]:
                k += 1
            lcp[r] = k
            if k:
                k -= 1
        return lcp