"""Square roots modulo a prime (Tonelli-Shanks)."""

from __future__ import annotations


def mod_sqrt(a: int, p: int) -> int:
    """Return ``x`` with ``x*x % p == a % p`` for a prime ``p``.

    Raises ValueError when ``a`` is not a quadratic residue modulo ``p``.
    """
    if p < 2:
        raise ValueError("modulus must be a prime")
    a %= p
    if a == 0:
        return 0
    if pow(a, (p - 1) // 2, p) != 1:
        raise ValueError(f"{a} is not a quadratic residue modulo {p}")
    if p % 4 == 3:
        return pow(a, (p + 1) // 4, p)

    s, r = p - 1, 0
    while s % 2 == 0:
        r += 1
        s //= 2

    z = 2
    while pow(z, (p - 1) // 2, p) != p - 1:
        z += 1

    x = pow(a, (s + 1) // 2, p)
    b = pow(a, s, p)
    g = pow(z, s, p)
    while True:
        t, m = b, 0
        while m < r and t != 1:
            t = t * t % p
            m += 1
        if m == 0:
            return x
        gs = pow(g, 1 << (r - m - 1), p)
        g = gs * gs % p
        x = x * gs % p
        b = b * g % p
        r = m