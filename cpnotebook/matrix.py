"""Dense matrices over integers modulo a prime."""

from __future__ import annotations

from collections.abc import Iterable

from cpnotebook.modular import DEFAULT_MOD


class Matrix:
    """Rectangular matrix whose entries are kept reduced modulo ``mod``."""

    __slots__ = ("_rows", "mod")

    def __init__(self, rows: Iterable[Iterable[int]], mod: int = DEFAULT_MOD) -> None:
        table = [list(row) for row in rows]
        if not table or not table[0]:
            raise ValueError("a matrix needs at least one row and one column")
        width = len(table[0])
        if any(len(row) != width for row in table):
            raise ValueError("all rows must have the same length")
        self.mod = mod
        self._rows = [[int(x) % mod for x in row] for row in table]

    @classmethod
    def zeros(cls, n: int, m: int, mod: int = DEFAULT_MOD) -> Matrix:
        return cls([[0] * m for _ in range(n)], mod)

    @classmethod
    def identity(cls, n: int, mod: int = DEFAULT_MOD) -> Matrix:
        return cls([[int(i == j) for j in range(n)] for i in range(n)], mod)

    @property
    def shape(self) -> tuple[int, int]:
        return len(self._rows), len(self._rows[0])

    def __getitem__(self, index: int) -> list[int]:
        return self._rows[index]

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if other.mod != self.mod:
            raise ValueError("cannot multiply matrices with different moduli")
        if self.shape[1] != other.shape[0]:
            raise ValueError(f"shape mismatch: {self.shape} @ {other.shape}")
        columns = list(zip(*other._rows))
        mod = self.mod
        return Matrix(
            [[sum(a * b for a, b in zip(row, col)) % mod for col in columns] for row in self._rows],
            mod,
        )

    def power(self, exponent: int) -> Matrix:
        """Raise a square matrix to a non-negative power by repeated squaring."""
        n, m = self.shape
        if n != m:
            raise ValueError("only square matrices can be raised to a power")
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        result = Matrix.identity(n, self.mod)
        base = self
        while exponent > 0:
            if exponent & 1:
                result = result @ base
            base = base @ base
            exponent >>= 1
        return result

    def to_lists(self) -> list[list[int]]:
        return [row[:] for row in self._rows]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.mod == other.mod and self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "\n".join(" ".join(map(str, row)) for row in self._rows)

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r}, mod={self.mod})"