"""Gaussian elimination over GF(2) and GF(3)."""

from __future__ import annotations

from collections.abc import Sequence


class InconsistentSystemError(ValueError):
    """The linear system has no solution."""


def gf2_eliminate(lhs: Sequence[int], rhs: Sequence[int]) -> tuple[list[int], list[int], dict[int, int]]:
    """Reduce rows of a GF(2) system given as bitmasks.

    Bit ``j`` of ``lhs[i]`` is the coefficient of variable ``j`` in equation
    ``i``; ``rhs[i]`` is a bitmask of right-hand sides, one bit per system.
    Returns the reduced rows, the reduced right-hand sides and a map from each
    pivot column to its row. Consistency is not checked.
    """
    rows = list(lhs)
    values = list(rhs)
    if len(rows) != len(values):
        raise ValueError("lhs and rhs must have the same number of rows")
    pivots: dict[int, int] = {}
    for row, mask in enumerate(rows):
        mask = rows[row]
        if not mask:
            continue
        p = (mask & -mask).bit_length() - 1
        for i, other in enumerate(rows):
            if i != row and (other >> p) & 1:
                rows[i] ^= mask
                values[i] ^= values[row]
        pivots[p] = row
    return rows, values, pivots


def solve_gf3(coefficients: Sequence[Sequence[int]], rhs: Sequence[int]) -> list[int | None]:
    """Solve a system modulo 3.

    Returns one value per variable, ``None`` for free variables (the others
    hold when the free ones are taken as 0). Raises InconsistentSystemError
    when there is no solution.
    """
    rows = [[c % 3 for c in row] for row in coefficients]
    values = [v % 3 for v in rhs]
    if len(rows) != len(values):
        raise ValueError("coefficients and rhs must have the same number of rows")
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")

    n = len(rows)
    where: list[int | None] = [None] * width
    row = 0
    for col in range(width):
        if row >= n:
            break
        pivot = next((i for i in range(row, n) if rows[i][col]), None)
        if pivot is None:
            continue
        rows[row], rows[pivot] = rows[pivot], rows[row]
        values[row], values[pivot] = values[pivot], values[row]
        where[col] = row
        for i in range(n):
            if i != row and rows[i][col]:
                sign = 1 if rows[i][col] + rows[row][col] == 3 else -1
                rows[i] = [(a + sign * b) % 3 for a, b in zip(rows[i], rows[row])]
                values[i] = (values[i] + sign * values[row]) % 3
        row += 1

    for lhs, value in zip(rows, values):
        if not any(lhs) and value:
            raise InconsistentSystemError("the system has no solution")

    return [
        None if r is None else (values[r] if rows[r][col] == 1 else (3 - values[r]) % 3)
        for col, r in enumerate(where)
    ]