import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpnotebook.mod_sqrt import mod_sqrt

SMALL_PRIMES = [2, 3, 5, 7, 13, 17, 41, 97, 257]
LARGE_PRIMES = [10**9 + 7, 998244353]


@pytest.mark.parametrize("p", SMALL_PRIMES)
def test_every_residue_small(p):
    squares = {x * x % p for x in range(p)}
    for a in range(p):
        if a in squares:
            r = mod_sqrt(a, p)
            assert 0 <= r < p
            assert r * r % p == a
        else:
            with pytest.raises(ValueError):
                mod_sqrt(a, p)


@pytest.mark.parametrize("p", LARGE_PRIMES)
@given(x=st.integers(1, 10**18))
def test_large_primes(p, x):
    a = x * x % p
    r = mod_sqrt(a, p)
    assert r * r % p == a


@pytest.mark.parametrize("p", SMALL_PRIMES + LARGE_PRIMES)
def test_zero(p):
    assert mod_sqrt(0, p) == 0
    assert mod_sqrt(p, p) == 0


def test_negative_argument():
    r = mod_sqrt(-4, 13)
    assert r * r % 13 == -4 % 13