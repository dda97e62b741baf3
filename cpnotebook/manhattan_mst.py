"""Candidate edges for a Manhattan-distance minimum spanning tree."""

from __future__ import annotations

from bisect import bisect_right, insort
from collections.abc import Iterable


def manhattan_edges(points: Iterable[tuple[int, int]]) -> list[tuple[int, int, int]]:
    """At most ``4n`` edges ``(weight, i, j)`` that contain a Manhattan MST."""
    coords = [[int(x), int(y)] for x, y in points]
    ids = list(range(len(coords)))
    edges: list[tuple[int, int, int]] = []

    for rotation in range(4):
        ids.sort(key=lambda i: coords[i][0] + coords[i][1])
        keys: list[int] = []
        owner: dict[int, int] = {}
        for i in ids:
            xi, yi = coords[i]
            stop = pos = bisect_right(keys, xi)
            while pos > 0:
                j = owner[keys[pos - 1]]
                xj, yj = coords[j]
                if xi - yi > xj - yj:
                    break
                edges.append(((xi - xj) + (yi - yj), i, j))
                pos -= 1
            for key in keys[pos:stop]:
                del owner[key]
            del keys[pos:stop]
            if xi not in owner:
                insort(keys, xi)
            owner[xi] = i

        for c in coords:
            if rotation & 1:
                c[0] = -c[0]
            else:
                c[0], c[1] = c[1], c[0]

    return edges