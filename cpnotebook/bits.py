"""Bit tricks on 64-bit words and small sequence helpers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

WORD_BITS = 64
WORD_MASK = (1 << WORD_BITS) - 1

T = TypeVar("T")


def _nonzero_word(n: int) -> int:
    word = n & WORD_MASK
    if word == 0:
        raise ValueError("operation is undefined for zero")
    return word


def popcount(n: int) -> int:
    """Number of set bits in the 64-bit word ``n``."""
    return bin(n & WORD_MASK).count("1")


def ctz(n: int) -> int:
    """Number of trailing zero bits of the non-zero 64-bit word ``n``."""
    word = _nonzero_word(n)
    return (word & -word).bit_length() - 1


def clz(n: int) -> int:
    """Number of leading zero bits of the non-zero 64-bit word ``n``."""
    return WORD_BITS - _nonzero_word(n).bit_length()


def floor_log2(n: int) -> int:
    """Index of the highest set bit of the non-zero 64-bit word ``n``."""
    return WORD_BITS - 1 - clz(n)


def bit(n: int, i: int) -> int:
    """Value (0 or 1) of bit ``i`` of ``n``."""
    return (n >> i) & 1


def remove_duplicates(values: Iterable[T]) -> list[T]:
    """Sorted list of the distinct items of ``values``."""
    return sorted(set(values))