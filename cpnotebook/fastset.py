"""Three-level bitset over ``[0, 2**18)`` with successor and predecessor search."""

from __future__ import annotations

BLOCK_BITS = 6
BLOCK = 1 << BLOCK_BITS
LAYERS = 3
UNIVERSE = 1 << (BLOCK_BITS * LAYERS)


def _lowest(word: int) -> int:
    return (word & -word).bit_length() - 1


def _highest(word: int) -> int:
    return word.bit_length() - 1


class FastSet:
    """Set of integers in ``[0, UNIVERSE)``; each layer summarises the one below."""

    def __init__(self) -> None:
        self._levels = [[0] * (BLOCK**depth) for depth in range(LAYERS)]

    def _check(self, x: int) -> None:
        if not 0 <= x < UNIVERSE:
            raise ValueError(f"{x} outside [0, {UNIVERSE})")

    def toggle(self, x: int) -> None:
        """Insert ``x`` if absent, remove it if present."""
        self._check(x)
        leaves = self._levels[-1]
        key = x >> BLOCK_BITS
        leaves[key] ^= 1 << (x & (BLOCK - 1))
        for level in range(LAYERS - 2, -1, -1):
            word_index, digit = key >> BLOCK_BITS, key & (BLOCK - 1)
            words = self._levels[level]
            if self._levels[level + 1][key]:
                words[word_index] |= 1 << digit
            else:
                words[word_index] &= ~(1 << digit)
            key = word_index

    def __contains__(self, x: object) -> bool:
        if not isinstance(x, int) or not 0 <= x < UNIVERSE:
            return False
        return bool((self._levels[-1][x >> BLOCK_BITS] >> (x & (BLOCK - 1))) & 1)

    def _descend(self, level: int, node: int, pick) -> int:
        for lower in range(level + 1, LAYERS):
            node = (node << BLOCK_BITS) | pick(self._levels[lower][node])
        return node

    def find_next(self, x: int) -> int | None:
        """Smallest member ``>= x``, or None."""
        x = max(x, 0)
        if x >= UNIVERSE:
            return None
        key, start = x, x & (BLOCK - 1)
        for level in range(LAYERS - 1, -1, -1):
            word = self._levels[level][key >> BLOCK_BITS] >> start << start
            if word:
                node = ((key >> BLOCK_BITS) << BLOCK_BITS) | _lowest(word)
                return self._descend(level, node, _lowest)
            key >>= BLOCK_BITS
            start = (key & (BLOCK - 1)) + 1
        return None

    def find_prev(self, x: int) -> int | None:
        """Largest member ``< x``, or None."""
        if x <= 0:
            return None
        if x >= UNIVERSE:
            if UNIVERSE - 1 in self:
                return UNIVERSE - 1
            x = UNIVERSE - 1
        key, limit = x, x & (BLOCK - 1)
        for level in range(LAYERS - 1, -1, -1):
            word = self._levels[level][key >> BLOCK_BITS] & ((1 << limit) - 1)
            if word:
                node = ((key >> BLOCK_BITS) << BLOCK_BITS) | _highest(word)
                return self._descend(level, node, _highest)
            key >>= BLOCK_BITS
            limit = key & (BLOCK - 1)
        return None