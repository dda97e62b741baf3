"""Minimum-cost assignment by the Hungarian algorithm with potentials."""

from __future__ import annotations

import math
from collections.abc import Sequence


def hungarian(cost: Sequence[Sequence[int]]) -> tuple[int, list[int]]:
    """Assign every row to a distinct column at least total cost.

    ``cost`` has ``n`` rows of ``m`` entries with ``n <= m``. Returns the total
    cost and, for each row, the column it is assigned to.
    """
    a = [list(row) for row in cost]
    n = len(a)
    if n == 0:
        return 0, []
    m = len(a[0])
    if any(len(row) != m for row in a):
        raise ValueError("all rows must have the same length")
    if n > m:
        raise ValueError("there must be at least as many columns as rows")

    u = [0] * (n + 1)
    v = [0] * (m + 1)
    p = [0] * (m + 1)
    way = [0] * (m + 1)
    for i in range(1, n + 1):
        p[0] = i
        j0 = 0
        minv = [math.inf] * (m + 1)
        used = [False] * (m + 1)
        while True:
            used[j0] = True
            i0 = p[j0]
            delta = math.inf
            j1 = -1
            row = a[i0 - 1]
            for j in range(1, m + 1):
                if used[j]:
                    continue
                cur = row[j - 1] - u[i0] - v[j]
                if cur < minv[j]:
                    minv[j] = cur
                    way[j] = j0
                if minv[j] < delta:
                    delta = minv[j]
                    j1 = j
            for j in range(m + 1):
                if used[j]:
                    u[p[j]] += delta
                    v[j] -= delta
                else:
                    minv[j] -= delta
            j0 = j1
            if p[j0] == 0:
                break
        while j0:
            j1 = way[j0]
            p[j0] = p[j1]
            j0 = j1

    assignment = [0] * n
    for j in range(1, m + 1):
        if p[j]:
            assignment[p[j] - 1] = j - 1
    total = sum(a[i][col] for i, col in enumerate(assignment))
    return total, assignment