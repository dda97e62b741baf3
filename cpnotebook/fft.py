"""Fast Fourier transform and integer polynomial multiplication."""

from __future__ import annotations

import cmath
import math
from collections.abc import Sequence


def fft(values: Sequence[complex]) -> list[complex]:
    """Transform a sequence whose length is a power of two (or zero).

    Uses the root exp(i*pi/k), so applying it twice and reversing all but
    the first entry gives ``len(values)`` times the input.
    """
    a = [complex(v) for v in values]
    n = len(a)
    if n & (n - 1):
        raise ValueError("length must be a power of two")

    j = 0
    for i in range(1, n):
        step = n >> 1
        while j & step:
            j ^= step
            step >>= 1
        j |= step
        if i < j:
            a[i], a[j] = a[j], a[i]

    k = 1
    while k < n:
        root = cmath.exp(1j * math.pi / k)
        for start in range(0, n, 2 * k):
            w = 1 + 0j
            for pos in range(start, start + k):
                u, v = a[pos], a[pos + k] * w
                a[pos] = u + v
                a[pos + k] = u - v
                w *= root
        k <<= 1
    return a


def multiply(s: Sequence[int], t: Sequence[int]) -> list[int]:
    """Coefficients of the product of two integer polynomials."""
    if not s or not t:
        return []
    need = len(s) + len(t) - 1
    size = 1
    while size < need:
        size <<= 1

    fa = fft(list(s) + [0] * (size - len(s)))
    fb = fft(list(t) + [0] * (size - len(t)))
    product = fft([x * y for x, y in zip(fa, fb)])
    product[1:] = product[:0:-1]
    return [round(value.real / size) for value in product[:need]]