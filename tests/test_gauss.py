import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpnotebook.gauss import InconsistentSystemError, gf2_eliminate, solve_gf3


def parity(n):
    return bin(n).count("1") & 1


@st.composite
def gf2_systems(draw):
    n = draw(st.integers(1, 8))
    lhs = draw(st.lists(st.integers(0, 2**n - 1), min_size=n, max_size=n))
    x = draw(st.integers(0, 2**n - 1))
    return lhs, [parity(row & x) for row in lhs]


@st.composite
def gf3_systems(draw):
    n = draw(st.integers(1, 6))
    coeffs = draw(st.lists(st.lists(st.integers(0, 2), min_size=n, max_size=n), min_size=n, max_size=n))
    x = draw(st.lists(st.integers(0, 2), min_size=n, max_size=n))
    rhs = [sum(c * v for c, v in zip(row, x)) % 3 for row in coeffs]
    return coeffs, rhs


@given(gf2_systems())
def test_gf2_solution_satisfies_system(system):
    lhs, rhs = system
    rows, values, pivots = gf2_eliminate(lhs, rhs)
    solution = sum((values[row] & 1) << p for p, row in pivots.items())
    for row, value in zip(lhs, rhs):
        assert parity(row & solution) == value
    for row, value in zip(rows, values):
        if row == 0:
            assert value == 0


@given(gf2_systems())
def test_gf2_pivot_columns_are_cleared(system):
    rows, _, pivots = gf2_eliminate(*system)
    for p, pivot_row in pivots.items():
        for i, row in enumerate(rows):
            assert ((row >> p) & 1) == (i == pivot_row)


def test_gf2_length_mismatch():
    with pytest.raises(ValueError):
        gf2_eliminate([1, 2], [0])


@given(gf3_systems())
def test_gf3_solution_satisfies_system(system):
    coeffs, rhs = system
    solution = [0 if v is None else v for v in solve_gf3(coeffs, rhs)]
    for row, value in zip(coeffs, rhs):
        assert sum(c * v for c, v in zip(row, solution)) % 3 == value


def test_gf3_inconsistent():
    with pytest.raises(InconsistentSystemError):
        solve_gf3([[1, 0], [1, 0]], [0, 1])


def test_gf3_all_free():
    assert solve_gf3([[0, 0], [0, 0]], [0, 0]) == [None, None]


def test_gf3_coefficient_two():
    assert solve_gf3([[2]], [1]) == [2]