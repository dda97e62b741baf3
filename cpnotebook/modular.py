"""Integers modulo a prime."""

from __future__ import annotations

DEFAULT_MOD = 10**9 + 7


class Modular:
    """An element of Z/mZ; division uses Fermat's little theorem, so ``mod`` should be prime."""

    __slots__ = ("value", "mod")

    def __init__(self, value: int = 0, mod: int = DEFAULT_MOD) -> None:
        if mod <= 0:
            raise ValueError("modulus must be positive")
        self.value = int(value) % mod
        self.mod = mod

    def _coerce(self, other: object) -> int:
        if isinstance(other, Modular):
            if other.mod != self.mod:
                raise ValueError("cannot combine values with different moduli")
            return other.value
        if isinstance(other, int):
            return other % self.mod
        return NotImplemented  # type: ignore[return-value]

    def _make(self, value: int) -> Modular:
        return Modular(value, self.mod)

    def inverse(self) -> Modular:
        """Multiplicative inverse as value**(mod - 2); zero maps to zero."""
        return self._make(pow(self.value, self.mod - 2, self.mod))

    def pow(self, exponent: int) -> Modular:
        """Raise to an integer power; negative powers go through the inverse."""
        if exponent < 0:
            return self.inverse().pow(-exponent)
        return self._make(pow(self.value, exponent, self.mod))

    def __pow__(self, exponent: int) -> Modular:
        return self.pow(exponent)

    def __add__(self, other: object) -> Modular:
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return self._make(self.value + value)

    __radd__ = __add__

    def __sub__(self, other: object) -> Modular:
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return self._make(self.value - value)

    def __rsub__(self, other: object) -> Modular:
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return self._make(value - self.value)

    def __mul__(self, other: object) -> Modular:
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return self._make(self.value * value)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Modular:
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return self * self._make(value).inverse()

    def __rtruediv__(self, other: object) -> Modular:
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return self._make(value) * self.inverse()

    def __neg__(self) -> Modular:
        return self._make(-self.value)

    def __int__(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return self.value == value

    def __hash__(self) -> int:
        return hash((self.value, self.mod))

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Modular({self.value}, mod={self.mod})"